"""Catalog models for Trip Holiday travel packages."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class PackageQuerySet(models.QuerySet):
    def active(self):
        return self.filter(active=True)


class Package(models.Model):
    """A sellable travel itinerary."""

    class Type(models.TextChoices):
        LUXURY = "luxury", _("Luxury")
        PREMIUM = "premium", _("Premium")
        BUDGET = "budget", _("Budget")

    class Destination(models.TextChoices):
        INDIA = "india", _("India")
        INTERNATIONAL = "international", _("International")
        PILGRIMAGE = "pilgrimage", _("Pilgrimage")

    class Travel(models.TextChoices):
        FAMILY = "family", _("Family")
        COUPLE = "couple", _("Couple")
        SOLO = "solo", _("Solo")
        GROUP = "group", _("Group")
        BUDDY = "buddy", _("Buddy")

    slug = models.CharField(
        _("Package ID"),
        max_length=100,
        unique=True,
        help_text=_("Public identifier used in URLs, e.g. 'dubai'."),
    )
    title = models.CharField(max_length=200)
    description = models.TextField()
    image = models.URLField(max_length=500)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    duration = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Duration in days."),
    )
    duration_text = models.CharField(max_length=50, blank=True)
    type = models.CharField(max_length=20, choices=Type.choices)
    destination = models.CharField(max_length=20, choices=Destination.choices)
    travel = models.CharField(max_length=20, choices=Travel.choices)
    popular = models.BooleanField(default=False)
    popular_badge = models.CharField(max_length=50, default="Most Popular")
    tags = models.JSONField(default=list, blank=True)
    itinerary_title = models.CharField(max_length=200, blank=True)
    itinerary_subtitle = models.CharField(max_length=200, blank=True)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PackageQuerySet.as_manager()

    class Meta:
        verbose_name = _("Package")
        verbose_name_plural = _("Packages")
        ordering = ["-popular", "price"]
        indexes = [
            models.Index(fields=["type"], name="package_type_idx"),
            models.Index(fields=["destination"], name="package_destination_idx"),
            models.Index(fields=["travel"], name="package_travel_idx"),
            models.Index(fields=["active"], name="package_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.slug})"

    @staticmethod
    def default_duration_text(duration: int) -> str:
        return f"{duration} Days / {max(duration - 1, 0)} Nights"

    def save(self, *args, **kwargs):  # type: ignore
        self.slug = (self.slug or "").strip().lower()
        if not self.duration_text and self.duration:
            self.duration_text = self.default_duration_text(self.duration)
        super().save(*args, **kwargs)

    def toggle_active(self) -> bool:
        self.active = not self.active
        self.save(update_fields=["active", "updated_at"])
        return self.active

    @property
    def itinerary(self) -> dict:
        return {
            "title": self.itinerary_title or self.title,
            "subtitle": self.itinerary_subtitle or self.duration_text,
            "days": [day.as_dict() for day in self.itinerary_days.all()],
        }


class ItineraryDay(models.Model):
    """One day of a package itinerary."""

    package = models.ForeignKey(Package, on_delete=models.CASCADE, related_name="itinerary_days")
    day = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    highlights = models.JSONField(default=list, blank=True)

    class Meta:
        verbose_name = _("Itinerary day")
        verbose_name_plural = _("Itinerary days")
        ordering = ["day"]
        unique_together = ("package", "day")

    def __str__(self) -> str:
        return f"{self.package_id} day {self.day}: {self.title}"

    def as_dict(self) -> dict:
        return {
            "day": self.day,
            "title": self.title,
            "description": self.description,
            "highlights": list(self.highlights or []),
        }
