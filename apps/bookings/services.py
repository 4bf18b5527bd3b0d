"""Domain services for booking and payment workflows."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.notifications import services as notifications

from . import razorpay_service

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .models import Booking

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Raised when a booking operation is not allowed in the current state."""


class PaymentVerificationError(BookingError):
    """Raised when a gateway payment cannot be attributed to the booking."""


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def create_payment_order(booking: "Booking", amount: Decimal | None = None) -> dict:
    """Creates a gateway order for ``amount`` (pending amount by default) and stores its id."""

    if amount is None:
        amount = booking.pending_amount
    if amount <= 0:
        raise BookingError("Payment amount must be greater than zero")

    order = razorpay_service.create_order(
        amount,
        receipt=f"booking_{booking.pk}",
        notes={"bookingId": str(booking.public_id), "bookingReference": booking.booking_reference},
    )
    booking.razorpay_order_id = order["id"]
    booking.razorpay_order_amount = amount
    booking.save(update_fields=["razorpay_order_id", "razorpay_order_amount", "updated_at"])
    return order


def apply_verified_payment(
    booking_id,
    *,
    order_id: str,
    payment_id: str,
    signature: str,
    amount: Decimal,
    method: str,
) -> "Booking":
    """Verifies the gateway signature and records the payment on the booking.

    ``booking_id`` is the booking's public id. Raises
    ``PaymentVerificationError`` on signature mismatch, when the order is not
    the one stored on the booking or when ``amount`` exceeds that order, and
    ``Booking.DoesNotExist`` for an unknown booking. A payment id that is already recorded leaves the booking
    unchanged. Notifications are sent after a new payment is committed.
    """
    from .models import Booking, PaymentTransaction  # Local import to prevent circular dependency

    if not razorpay_service.verify_payment_signature(order_id, payment_id, signature):
        logger.warning(f"Invalid payment signature for booking {booking_id}, order {order_id}")
        raise PaymentVerificationError("Invalid payment signature")

    with transaction.atomic():
        booking = _lock_queryset_if_possible(Booking.objects.filter(public_id=booking_id)).get()

        if booking.transactions.filter(payment_id=payment_id).exists():
            logger.info(f"Payment {payment_id} already recorded for booking {booking.booking_reference}")
            return booking

        used_elsewhere = PaymentTransaction.objects.filter(payment_id=payment_id).exclude(booking=booking)
        order_mismatch = not booking.razorpay_order_id or booking.razorpay_order_id != order_id
        if order_mismatch or used_elsewhere.exists():
            logger.warning(
                f"Order {order_id} does not belong to booking {booking.booking_reference} "
                f"(expected {booking.razorpay_order_id})"
            )
            raise PaymentVerificationError("Payment order does not match this booking")

        if amount > booking.razorpay_order_amount:
            logger.warning(
                f"Paid amount {amount} exceeds order {order_id} amount {booking.razorpay_order_amount} "
                f"for booking {booking.booking_reference}"
            )
            raise PaymentVerificationError("Paid amount exceeds the payment order amount")

        booking.record_payment(
            amount,
            method=method,
            order_id=order_id,
            payment_id=payment_id,
            signature=signature,
        )

    logger.info(
        f"Payment {payment_id} of {amount} recorded for booking {booking.booking_reference}, "
        f"status {booking.payment_status}"
    )
    send_confirmation_notifications(booking)
    return booking


def send_confirmation_notifications(booking: "Booking") -> dict[str, dict]:
    """Sends the confirmation email and SMS and stores the delivery flags."""

    results = {
        "email": notifications.send_booking_confirmation_email(booking),
        "sms": notifications.send_booking_confirmation_sms(booking),
    }
    booking.email_sent = bool(results["email"].get("success"))
    booking.sms_sent = bool(results["sms"].get("success"))
    booking.save(update_fields=["email_sent", "sms_sent", "updated_at"])

    for channel, result in results.items():
        if not result.get("success"):
            logger.warning(
                f"Confirmation {channel} for booking {booking.booking_reference} failed: {result.get('error')}"
            )
    return results


def send_payment_reminder(booking: "Booking") -> dict[str, dict]:
    """Sends the pending payment reminder by email and SMS and sets the reminder flag."""

    if booking.pending_amount <= 0:
        raise BookingError("No pending payment for this booking")

    results = {
        "email": notifications.send_payment_reminder_email(booking),
        "sms": notifications.send_payment_reminder_sms(booking),
    }
    booking.pending_payment_reminder_sent = True
    booking.save(update_fields=["pending_payment_reminder_sent", "updated_at"])
    logger.info(f"Payment reminder sent for booking {booking.booking_reference}")
    return results
