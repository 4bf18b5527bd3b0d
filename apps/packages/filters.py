"""FilterSet definitions for package listing."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Package


class PackageFilterSet(django_filters.FilterSet):
    """Query-string filters shared by the public and admin package lists."""

    type = django_filters.ChoiceFilter(choices=Package.Type.choices)
    destination = django_filters.ChoiceFilter(choices=Package.Destination.choices)
    travel = django_filters.ChoiceFilter(choices=Package.Travel.choices)
    popular = django_filters.BooleanFilter()
    active = django_filters.BooleanFilter()
    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Package
        fields = ["type", "destination", "travel", "popular", "active"]

    def filter_search(self, queryset, name, value):  # type: ignore
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(Q(title__icontains=value) | Q(description__icontains=value))
