"""User domain models for Trip Holiday.

A single account table serves both storefront customers and admin panel
staff. Customers sign in with their email; admin accounts additionally
carry a ``username`` used by the admin panel login.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """Manager that uses email as the login identifier."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email).lower()

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.CUSTOMER)
        return self._create_user(email, password, **extra_fields)

    def create_admin(self, email: str, username: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)
        return self._create_user(email, password, username=username, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.SUPERADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def admins(self):
        return self.filter(role__in=CustomUser.ADMIN_ROLES)


class CustomUser(AbstractUser):
    """Platform account with a role."""

    class RoleChoices(models.TextChoices):
        CUSTOMER = "customer", _("Customer")
        ADMIN = "admin", _("Admin")
        SUPERADMIN = "superadmin", _("Super admin")

    ADMIN_ROLES = (RoleChoices.ADMIN, RoleChoices.SUPERADMIN)

    first_name = None
    last_name = None

    username = models.CharField(
        _("Username"),
        max_length=150,
        unique=True,
        null=True,
        blank=True,
        help_text=_("Admin panel login name."),
    )
    email = models.EmailField(_("Email"), unique=True)
    name = models.CharField(_("Name"), max_length=100)
    phone = models.CharField(_("Phone"), max_length=20, blank=True)
    address = models.TextField(_("Address"), blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.CUSTOMER,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def save(self, *args, **kwargs):  # type: ignore
        if self.email:
            self.email = self.email.strip().lower()
        self.username = (self.username or "").strip().lower() or None
        super().save(*args, **kwargs)

    def is_admin_role(self) -> bool:
        return self.role in self.ADMIN_ROLES or self.is_superuser

    def favorite_package_ids(self) -> list[str]:
        return list(self.favorites.values_list("package__slug", flat=True))


# Backwards compatibility alias used in tests
User = CustomUser
