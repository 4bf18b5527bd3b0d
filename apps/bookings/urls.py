"""URL routing for the booking domain (mounted under /api/bookings/)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingViewSet

booking_create = BookingViewSet.as_view({"post": "create"})
booking_order = BookingViewSet.as_view({"post": "create_order"})
booking_verify = BookingViewSet.as_view({"post": "verify_payment"})
booking_detail = BookingViewSet.as_view({"get": "retrieve"})
booking_by_email = BookingViewSet.as_view({"get": "by_email"})
booking_reminder = BookingViewSet.as_view({"post": "send_reminder"})
booking_status = BookingViewSet.as_view({"patch": "update_status"})
booking_cancel = BookingViewSet.as_view({"post": "cancel"})

urlpatterns = [
    path("create", booking_create, name="booking-create"),
    path("create-razorpay-order", booking_order, name="booking-create-order"),
    path("verify-payment", booking_verify, name="booking-verify-payment"),
    path("user/<str:email>", booking_by_email, name="booking-by-email"),
    path("send-reminder/<uuid:booking_id>", booking_reminder, name="booking-send-reminder"),
    path("<uuid:booking_id>", booking_detail, name="booking-detail"),
    path("<uuid:booking_id>/status", booking_status, name="booking-status"),
    path("<uuid:booking_id>/cancel", booking_cancel, name="booking-cancel"),
]
