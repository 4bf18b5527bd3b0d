"""
Razorpay payment gateway integration.

Order creation goes through the Razorpay REST API; without API keys an
emulated order is returned so local development works offline.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class RazorpayError(Exception):
    """Raised when the gateway rejects a request or cannot be reached."""


def is_configured() -> bool:
    return bool(settings.RAZORPAY_KEY_ID and settings.RAZORPAY_KEY_SECRET)


def to_paise(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def create_order(amount: Decimal, *, receipt: str, notes: dict | None = None) -> dict:
    """
    Creates a Razorpay order.

    Args:
        amount: Amount in rupees
        receipt: Merchant receipt id, e.g. ``booking_42``
        notes: Key/value notes stored with the order

    Returns:
        dict: The gateway order (``id``, ``amount`` in paise, ``currency``, ...)
    """
    currency = settings.RAZORPAY_CURRENCY
    payload = {
        "amount": to_paise(amount),
        "currency": currency,
        "receipt": receipt,
        "notes": notes or {},
    }
    logger.info(f"Creating Razorpay order {receipt} for {amount} {currency}")

    if not is_configured():
        logger.warning("Razorpay keys are not configured, using an emulated order")
        return {
            "id": f"order_{uuid.uuid4().hex[:14]}",
            "entity": "order",
            "amount_paid": 0,
            "amount_due": payload["amount"],
            "status": "created",
            "attempts": 0,
            "emulated": True,
            **payload,
        }

    try:
        response = requests.post(
            f"{settings.RAZORPAY_API_BASE_URL.rstrip('/')}/orders",
            json=payload,
            auth=(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET),
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        order = response.json()
    except requests.RequestException as e:
        logger.error(f"Razorpay order creation failed for {receipt}: {e}", exc_info=True)
        raise RazorpayError(f"Failed to create payment order: {e}") from e
    except ValueError as e:
        logger.error(f"Razorpay returned invalid JSON for {receipt}: {e}", exc_info=True)
        raise RazorpayError("Invalid response from payment gateway") from e

    if not order.get("id"):
        raise RazorpayError("Payment gateway did not return an order id")

    logger.info(f"Razorpay order {order['id']} created for {receipt}")
    return order


def generate_signature(order_id: str, payment_id: str, secret: str | None = None) -> str:
    """HMAC-SHA256 of ``"{order_id}|{payment_id}"`` keyed with the API secret, hex encoded."""
    key = (secret if secret is not None else settings.RAZORPAY_KEY_SECRET).encode()
    body = f"{order_id}|{payment_id}".encode()
    return hmac.new(key, body, hashlib.sha256).hexdigest()


def verify_payment_signature(order_id: str, payment_id: str, signature: str) -> bool:
    """Checks a gateway signature; always fails when no API secret is configured."""
    if not settings.RAZORPAY_KEY_SECRET:
        logger.error(f"RAZORPAY_KEY_SECRET is not configured, rejecting payment {payment_id}")
        return False
    expected = generate_signature(order_id, payment_id)
    return hmac.compare_digest(expected, signature or "")
