"""Tests for the pending payment reminder task."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.core import mail
from django.test import TestCase
from django.utils import timezone

from apps.bookings.models import Booking
from apps.bookings.tasks import send_pending_payment_reminders


def make_booking(days_old: int, **overrides) -> Booking:
    data = {
        "guest_name": "Asha Rao",
        "guest_email": "asha@example.com",
        "guest_phone": "+919876543210",
        "package_name": "Goa Beach Paradise",
        "base_price": Decimal("37000"),
    }
    data.update(overrides)
    booking = Booking.objects.create(**data)
    Booking.objects.filter(pk=booking.pk).update(created_at=timezone.now() - timedelta(days=days_old))
    return booking


class PendingPaymentReminderTaskTests(TestCase):
    def test_reminds_only_eligible_bookings(self) -> None:
        due = make_booking(6)
        make_booking(2)
        make_booking(6, booking_status=Booking.BookingStatus.CANCELLED)
        make_booking(6, pending_payment_reminder_sent=True)
        make_booking(6, base_price=Decimal("0"))

        result = send_pending_payment_reminders()

        self.assertEqual(result, {"sent": 1, "failed": 0})
        self.assertEqual(len(mail.outbox), 1)
        due.refresh_from_db()
        self.assertTrue(due.pending_payment_reminder_sent)

        self.assertEqual(send_pending_payment_reminders(), {"sent": 0, "failed": 0})

    def test_failure_is_logged_and_skipped(self) -> None:
        first = make_booking(7)
        second = make_booking(6)

        with mock.patch(
            "apps.bookings.tasks.send_payment_reminder",
            side_effect=[RuntimeError("boom"), {"email": {"success": True}, "sms": {"success": True}}],
        ) as reminder:
            result = send_pending_payment_reminders()

        self.assertEqual(result, {"sent": 1, "failed": 1})
        self.assertEqual([call.args[0].pk for call in reminder.call_args_list], [first.pk, second.pk])

    def test_runs_through_celery(self) -> None:
        make_booking(6)

        result = send_pending_payment_reminders.delay()

        self.assertEqual(result.get(), {"sent": 1, "failed": 0})
