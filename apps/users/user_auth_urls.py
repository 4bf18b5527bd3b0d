"""URL routing for customer authentication (namespace: user-auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_views import LoginView, RegisterView, UserVerifyView

app_name = "user-auth"

urlpatterns = [
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("verify", UserVerifyView.as_view(), name="verify"),
    path("token/refresh", TokenRefreshView.as_view(), name="token_refresh"),
]
