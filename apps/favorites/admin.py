"""Admin registrations for favorites."""

from __future__ import annotations

from django.contrib import admin

from .models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ("user", "package", "created_at")
    search_fields = ("user__email", "package__slug", "package__title")
    raw_id_fields = ("user", "package")
