"""Serializers for the package catalog."""

from __future__ import annotations

from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import ItineraryDay, Package

PUBLIC_FIELDS = [
    "id",
    "title",
    "description",
    "image",
    "price",
    "duration",
    "duration_text",
    "type",
    "destination",
    "travel",
    "popular",
    "popular_badge",
    "tags",
]


class ItineraryDaySerializer(serializers.Serializer):
    day = serializers.IntegerField(min_value=1)
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(allow_blank=True, default="")
    highlights = serializers.ListField(child=serializers.CharField(max_length=200), default=list)


class ItinerarySerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200, required=False, allow_blank=True)
    subtitle = serializers.CharField(max_length=200, required=False, allow_blank=True)
    days = ItineraryDaySerializer(many=True, required=False)

    def validate_days(self, value):  # type: ignore
        numbers = [day["day"] for day in value]
        if len(numbers) != len(set(numbers)):
            raise serializers.ValidationError("Itinerary day numbers must be unique")
        return sorted(value, key=lambda day: day["day"])


class PackageSerializer(serializers.ModelSerializer):
    """Public representation of an active package."""

    id = serializers.CharField(source="slug", read_only=True)

    class Meta:
        model = Package
        fields = PUBLIC_FIELDS
        read_only_fields = PUBLIC_FIELDS


class AdminPackageSerializer(serializers.ModelSerializer):
    """Create/update serializer for the admin panel, itinerary included."""

    id = serializers.CharField(source="slug", max_length=100)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    itinerary = ItinerarySerializer(required=False)

    class Meta:
        model = Package
        fields = [*PUBLIC_FIELDS, "active", "itinerary", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]
        extra_kwargs = {
            "duration_text": {"required": False, "allow_blank": True},
        }

    def validate_id(self, value: str) -> str:
        slug = value.strip().lower()
        if not slug:
            raise serializers.ValidationError("Package ID is required")
        queryset = Package.objects.filter(slug=slug)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError("Package with this ID already exists")
        return slug

    def to_representation(self, instance):  # type: ignore
        data = super().to_representation(instance)
        data["itinerary"] = instance.itinerary
        return data

    @staticmethod
    def _replace_days(package: Package, days: list[dict]) -> None:
        package.itinerary_days.all().delete()
        getattr(package, "_prefetched_objects_cache", {}).pop("itinerary_days", None)
        ItineraryDay.objects.bulk_create(ItineraryDay(package=package, **day) for day in days)

    @transaction.atomic
    def create(self, validated_data):  # type: ignore
        itinerary = validated_data.pop("itinerary", None) or {}
        package = Package.objects.create(
            itinerary_title=itinerary.get("title", ""),
            itinerary_subtitle=itinerary.get("subtitle", ""),
            **validated_data,
        )
        self._replace_days(package, itinerary.get("days", []))
        return package

    @transaction.atomic
    def update(self, instance: Package, validated_data):  # type: ignore
        itinerary = validated_data.pop("itinerary", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if itinerary is not None:
            if "title" in itinerary:
                instance.itinerary_title = itinerary["title"]
            if "subtitle" in itinerary:
                instance.itinerary_subtitle = itinerary["subtitle"]
        instance.save()
        if itinerary is not None and "days" in itinerary:
            self._replace_days(instance, itinerary["days"])
        return instance
