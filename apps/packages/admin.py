"""Admin registrations for the package catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import ItineraryDay, Package


class ItineraryDayInline(admin.TabularInline):
    model = ItineraryDay
    extra = 0
    fields = ("day", "title", "description", "highlights")


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ("slug", "title", "type", "destination", "travel", "price", "duration", "popular", "active")
    list_filter = ("active", "popular", "type", "destination", "travel")
    search_fields = ("slug", "title", "description")
    list_editable = ("popular", "active")
    inlines = (ItineraryDayInline,)
    readonly_fields = ("created_at", "updated_at")
    actions = ("activate", "deactivate")

    @admin.action(description="Activate selected packages")
    def activate(self, request, queryset):  # type: ignore
        queryset.update(active=True)

    @admin.action(description="Deactivate selected packages")
    def deactivate(self, request, queryset):  # type: ignore
        queryset.update(active=False)
