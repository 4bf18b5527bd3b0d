"""FilterSet for the admin booking list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    booking_status = django_filters.ChoiceFilter(choices=Booking.BookingStatus.choices)
    payment_status = django_filters.ChoiceFilter(choices=Booking.PaymentStatus.choices)
    email = django_filters.CharFilter(field_name="guest_email", method="filter_email")

    class Meta:
        model = Booking
        fields = ["booking_status", "payment_status"]

    def filter_email(self, queryset, name, value):  # type: ignore
        return queryset.filter(guest_email=value.strip().lower())
