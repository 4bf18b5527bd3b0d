"""API views for bookings and Razorpay payments.

Endpoints (mounted under /api/bookings/):
- POST create
- POST create-razorpay-order
- POST verify-payment
- GET <id>
- GET user/<email>
- POST send-reminder/<id> (admin)
- PATCH <id>/status (admin)
- POST <id>/cancel
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.permissions import IsAdminRole

from .filters import BookingFilterSet
from .models import Booking
from .razorpay_service import RazorpayError
from .serializers import (
    BookingSerializer,
    BookingStatusSerializer,
    PaymentOrderSerializer,
    PaymentVerificationSerializer,
)
from .services import (
    BookingError,
    PaymentVerificationError,
    apply_verified_payment,
    create_payment_order,
    send_payment_reminder,
)

logger = logging.getLogger(__name__)

ADMIN_ACTIONS = {"send_reminder", "update_status"}


def _error(message: str, status_code: int) -> Response:
    return Response({"success": False, "message": message}, status=status_code)


class BookingViewSet(viewsets.GenericViewSet):
    """Guest facing booking workflow plus a couple of admin operations."""

    queryset = Booking.objects.select_related("package").prefetch_related("transactions")
    serializer_class = BookingSerializer

    def get_permissions(self):  # type: ignore
        if self.action in ADMIN_ACTIONS:
            return [IsAdminRole()]
        return [permissions.AllowAny()]

    def get_booking(self, booking_id) -> Booking:
        booking = self.get_queryset().filter(public_id=booking_id).first()
        if booking is None:
            raise NotFound("Booking not found")
        return booking

    def create(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = serializer.save()
        logger.info(
            f"Booking {booking.booking_reference} created for {booking.guest_email}, "
            f"total {booking.total_amount}"
        )
        return Response(
            {
                "success": True,
                "message": "Booking created successfully",
                "booking_id": booking.public_id,
                "booking_reference": booking.booking_reference,
            },
            status=status.HTTP_201_CREATED,
        )

    def create_order(self, request):  # type: ignore
        serializer = PaymentOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.get_booking(serializer.validated_data["booking_id"])

        try:
            order = create_payment_order(booking, serializer.validated_data.get("amount"))
        except BookingError as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)
        except RazorpayError as e:
            return _error(str(e), status.HTTP_502_BAD_GATEWAY)

        return Response({"success": True, "order": order, "key": settings.RAZORPAY_KEY_ID})

    def verify_payment(self, request):  # type: ignore
        serializer = PaymentVerificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            booking = apply_verified_payment(
                data["booking_id"],
                order_id=data["razorpay_order_id"],
                payment_id=data["razorpay_payment_id"],
                signature=data["razorpay_signature"],
                amount=data["paid_amount"],
                method=data["payment_method"],
            )
        except PaymentVerificationError as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)
        except Booking.DoesNotExist:
            return _error("Booking not found", status.HTTP_404_NOT_FOUND)

        return Response(
            {
                "success": True,
                "message": "Payment verified successfully",
                "booking": {
                    "booking_reference": booking.booking_reference,
                    "paid_amount": booking.paid_amount,
                    "pending_amount": booking.pending_amount,
                    "status": booking.payment_status,
                },
            }
        )

    def retrieve(self, request, booking_id=None):  # type: ignore
        booking = self.get_booking(booking_id)
        return Response({"success": True, "booking": self.get_serializer(booking).data})

    def by_email(self, request, email: str):  # type: ignore
        bookings = self.get_queryset().filter(guest_email=email.strip().lower()).order_by("-created_at")
        return Response(
            {
                "success": True,
                "count": len(bookings),
                "bookings": self.get_serializer(bookings, many=True).data,
            }
        )

    def send_reminder(self, request, booking_id=None):  # type: ignore
        booking = self.get_booking(booking_id)
        try:
            results = send_payment_reminder(booking)
        except BookingError as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "success": True,
                "message": "Payment reminder sent successfully",
                "notifications": {channel: bool(result.get("success")) for channel, result in results.items()},
            }
        )

    def update_status(self, request, booking_id=None):  # type: ignore
        booking = self.get_booking(booking_id)
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking.set_status(serializer.validated_data["status"])
        logger.info(f"Booking {booking.booking_reference} status set to {booking.booking_status} by {request.user}")
        return Response(
            {
                "success": True,
                "message": "Booking status updated successfully",
                "booking": self.get_serializer(booking).data,
            }
        )

    def cancel(self, request, booking_id=None):  # type: ignore
        booking = self.get_booking(booking_id)
        if not booking.can_be_cancelled():
            return _error("This booking cannot be cancelled", status.HTTP_400_BAD_REQUEST)

        booking.mark_cancelled()
        logger.info(f"Booking {booking.booking_reference} cancelled")
        return Response(
            {
                "success": True,
                "message": "Booking cancelled successfully",
                "booking": self.get_serializer(booking).data,
            }
        )


class AdminBookingListView(generics.ListAPIView):
    """All bookings for the admin panel, newest first."""

    permission_classes = [IsAdminRole]
    serializer_class = BookingSerializer
    queryset = Booking.objects.select_related("package").prefetch_related("transactions").order_by("-created_at")
    filter_backends = [DjangoFilterBackend]
    filterset_class = BookingFilterSet

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        return Response(
            {
                "success": True,
                "count": queryset.count(),
                "bookings": self.get_serializer(queryset, many=True).data,
            }
        )
