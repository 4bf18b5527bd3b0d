"""URL routing for admin panel authentication (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_views import AdminLoginView, AdminVerifyView

app_name = "auth"

urlpatterns = [
    path("login", AdminLoginView.as_view(), name="login"),
    path("verify", AdminVerifyView.as_view(), name="verify"),
    path("token/refresh", TokenRefreshView.as_view(), name="token_refresh"),
]
