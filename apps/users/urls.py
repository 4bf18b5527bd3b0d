"""URL declarations for the customer profile endpoints."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import PasswordChangeView, ProfileView

urlpatterns = [
    path("profile", ProfileView.as_view(), name="user-profile"),
    path("profile/password", PasswordChangeView.as_view(), name="user-profile-password"),
]
