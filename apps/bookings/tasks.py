"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging
from datetime import timedelta

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Booking
from .services import send_payment_reminder

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.send_pending_payment_reminders")
def send_pending_payment_reminders() -> dict[str, int]:
    """
    Sends reminders for bookings that still have an outstanding balance.

    Picks bookings that are not cancelled, have a pending amount, have not
    been reminded yet and were created at least PAYMENT_REMINDER_AFTER_DAYS
    ago. Runs daily through Celery Beat.

    Returns:
        dict: {"sent": reminders sent, "failed": bookings that raised}
    """
    cutoff = timezone.now() - timedelta(days=settings.PAYMENT_REMINDER_AFTER_DAYS)
    bookings = (
        Booking.objects.filter(
            pending_amount__gt=0,
            pending_payment_reminder_sent=False,
            created_at__lte=cutoff,
        )
        .exclude(booking_status=Booking.BookingStatus.CANCELLED)
        .order_by("created_at")
    )

    sent = failed = 0
    for booking in bookings:
        try:
            send_payment_reminder(booking)
            sent += 1
        except Exception as e:
            failed += 1
            logger.error(f"Error sending payment reminder for booking {booking.id}: {e}", exc_info=True)

    if sent or failed:
        logger.info(f"Payment reminders: {sent} sent, {failed} failed")

    return {"sent": sent, "failed": failed}
