"""Admin panel booking routes (mounted under /api/admin/)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import AdminBookingListView

urlpatterns = [
    path("bookings", AdminBookingListView.as_view(), name="admin-booking-list"),
]
