"""Notification services for sending booking emails and SMS messages.

Every sender returns a result dict (``{"success": bool, ...}``) and never
raises: delivery problems are logged and reported to the caller, which
stores the outcome on the booking. Nothing is retried.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore
from twilio.rest import Client  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking

logger = logging.getLogger(__name__)

MOCK_SMS_ID = "MOCK_SMS_ID"
NO_PENDING_PAYMENT = {"success": False, "error": "No pending payment"}


def format_amount(value: Decimal | int | float) -> str:
    """Rupee amount without a trailing ``.00``."""
    amount = Decimal(value)
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


# ============================================================================
# EMAIL NOTIFICATIONS
# ============================================================================

def send_email_notification(
    recipient_email: str,
    subject: str,
    template_name: str | None,
    context: dict,
    *,
    html_message: str | None = None,
) -> dict:
    """
    Sends an email rendered from a template (or given HTML).

    Args:
        recipient_email: Recipient address
        subject: Subject line
        template_name: Django template path (optional)
        context: Template context
        html_message: Ready HTML body (optional)

    Returns:
        dict: {"success": True} or {"success": False, "error": "..."}
    """
    if not recipient_email:
        return {"success": False, "error": "No email"}

    try:
        if html_message:
            text_message = strip_tags(html_message)
        elif template_name:
            html_message = render_to_string(template_name, context)
            text_message = strip_tags(html_message)
        else:
            text_message = context.get("message", "")
            html_message = None

        send_mail(
            subject=subject,
            message=text_message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            html_message=html_message,
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Failed to send email to {recipient_email}: {e}", exc_info=True)
        return {"success": False, "error": str(e)}

    logger.info(f"Email sent successfully to {recipient_email}: {subject}")
    return {"success": True}


def _booking_context(booking: "Booking") -> dict:
    return {
        "booking": booking,
        "reference": booking.booking_reference,
        "guest_name": booking.guest_name,
        "package_name": booking.package_name,
        "adults": booking.adults_count,
        "children": booking.children_count,
        "total_amount": booking.total_amount,
        "paid_amount": booking.paid_amount,
        "pending_amount": booking.pending_amount,
        "due_date": booking.payment_due_date,
        "booking_url": f"{settings.SITE_URL.rstrip('/')}/api/bookings/{booking.public_id}",
        "support_phone": settings.SUPPORT_PHONE,
        "support_email": settings.SUPPORT_EMAIL,
    }


def send_booking_confirmation_email(booking: "Booking") -> dict:
    return send_email_notification(
        recipient_email=booking.guest_email,
        subject=f"Booking Confirmation - {booking.booking_reference}",
        template_name="notifications/emails/booking_confirmation.html",
        context=_booking_context(booking),
    )


def send_payment_reminder_email(booking: "Booking") -> dict:
    if booking.pending_amount <= 0:
        return dict(NO_PENDING_PAYMENT)
    return send_email_notification(
        recipient_email=booking.guest_email,
        subject=f"Payment Reminder - Booking {booking.booking_reference}",
        template_name="notifications/emails/payment_reminder.html",
        context=_booking_context(booking),
    )


# ============================================================================
# SMS NOTIFICATIONS
# ============================================================================

def _twilio_client() -> Client | None:
    sid = getattr(settings, "TWILIO_ACCOUNT_SID", "")
    token = getattr(settings, "TWILIO_AUTH_TOKEN", "")
    if not (sid and token and getattr(settings, "TWILIO_FROM_NUMBER", "")):
        return None
    return Client(sid, token)


def send_sms(phone_number: str, message: str) -> dict:
    """Sends an SMS through Twilio, or logs it when Twilio is not configured."""
    if not phone_number:
        return {"success": False, "error": "No phone number"}

    client = _twilio_client()
    if client is None:
        logger.info(f"Mock SMS to {phone_number}: {message}")
        return {"success": True, "message_id": MOCK_SMS_ID, "mock": True}

    try:
        result = client.messages.create(
            body=message,
            from_=settings.TWILIO_FROM_NUMBER,
            to=phone_number,
        )
    except Exception as e:
        logger.error(f"Failed to send SMS to {phone_number}: {e}", exc_info=True)
        return {"success": False, "error": str(e)}

    logger.info(f"SMS sent to {phone_number}: {result.sid}")
    return {"success": True, "message_id": result.sid}


def booking_confirmation_sms_text(booking: "Booking") -> str:
    message = f"Trip Holiday: Your booking is confirmed! Reference: {booking.booking_reference}. "
    message += f"Amount Paid: Rs.{format_amount(booking.paid_amount)}. "
    if booking.pending_amount > 0:
        message += f"Pending: Rs.{format_amount(booking.pending_amount)}. "
    message += f"For details, check your email or call {settings.SUPPORT_PHONE}."
    return message


def payment_reminder_sms_text(booking: "Booking") -> str:
    return (
        f"Trip Holiday: Payment reminder for booking {booking.booking_reference}. "
        f"Pending amount: Rs.{format_amount(booking.pending_amount)}. "
        f"Please complete payment. Call {settings.SUPPORT_PHONE} for help."
    )


def send_booking_confirmation_sms(booking: "Booking") -> dict:
    return send_sms(booking.guest_phone, booking_confirmation_sms_text(booking))


def send_payment_reminder_sms(booking: "Booking") -> dict:
    if booking.pending_amount <= 0:
        return dict(NO_PENDING_PAYMENT)
    return send_sms(booking.guest_phone, payment_reminder_sms_text(booking))
