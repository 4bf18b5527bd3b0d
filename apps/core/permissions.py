"""Permission classes shared by the API apps."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

ADMIN_ROLES = ("admin", "superadmin")


class IsAdminRole(permissions.BasePermission):
    """Access for admin panel accounts (admin/superadmin role or Django staff)."""

    message = "Not authorized to access this route"

    def has_permission(self, request, view):  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
            return True
        return getattr(user, "role", None) in ADMIN_ROLES
