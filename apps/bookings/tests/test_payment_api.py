"""Integration tests for Razorpay order creation and payment verification."""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest import mock

import requests
from django.core import mail
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings import razorpay_service
from apps.bookings.models import Booking


def make_booking(**overrides) -> Booking:
    data = {
        "guest_name": "Asha Rao",
        "guest_email": "asha@example.com",
        "guest_phone": "+919876543210",
        "package_name": "Goa Beach Paradise",
        "base_price": Decimal("37000"),
        "taxes": Decimal("1850"),
    }
    data.update(overrides)
    return Booking.objects.create(**data)


class CreateOrderAPITests(APITestCase):
    def setUp(self) -> None:
        self.booking = make_booking()
        self.url = reverse("booking-create-order")

    def test_emulated_order_defaults_to_pending_amount(self) -> None:
        response = self.client.post(self.url, {"booking_id": str(self.booking.public_id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        order = response.data["order"]
        self.assertTrue(order["id"].startswith("order_"))
        self.assertEqual(order["amount"], 3885000)
        self.assertEqual(order["currency"], "INR")
        self.assertEqual(order["receipt"], f"booking_{self.booking.pk}")
        self.assertEqual(order["notes"]["bookingId"], str(self.booking.public_id))
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.razorpay_order_id, order["id"])
        self.assertEqual(self.booking.razorpay_order_amount, Decimal("38850.00"))

    def test_unknown_booking(self) -> None:
        response = self.client.post(self.url, {"booking_id": str(uuid.uuid4())}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Booking not found")

    def test_nothing_to_pay(self) -> None:
        booking = make_booking(base_price=Decimal("0"), taxes=Decimal("0"))

        response = self.client.post(self.url, {"booking_id": str(booking.public_id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment amount must be greater than zero")

    @override_settings(RAZORPAY_KEY_ID="rzp_test_key", RAZORPAY_KEY_SECRET="rzp_secret")
    def test_gateway_order(self) -> None:
        gateway_response = mock.Mock()
        gateway_response.json.return_value = {"id": "order_ABC", "amount": 1000000, "currency": "INR"}

        with mock.patch.object(razorpay_service.requests, "post", return_value=gateway_response) as post:
            response = self.client.post(
                self.url, {"booking_id": str(self.booking.public_id), "amount": "10000.00"}, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["key"], "rzp_test_key")
        self.assertEqual(response.data["order"]["id"], "order_ABC")
        args, kwargs = post.call_args
        self.assertEqual(args[0], "https://api.razorpay.com/v1/orders")
        self.assertEqual(kwargs["json"]["amount"], 1000000)
        self.assertEqual(kwargs["auth"], ("rzp_test_key", "rzp_secret"))
        self.assertEqual(kwargs["timeout"], 30)

    @override_settings(RAZORPAY_KEY_ID="rzp_test_key", RAZORPAY_KEY_SECRET="rzp_secret")
    def test_gateway_failure_returns_502(self) -> None:
        with mock.patch.object(
            razorpay_service.requests, "post", side_effect=requests.ConnectionError("unreachable")
        ):
            response = self.client.post(self.url, {"booking_id": str(self.booking.public_id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertFalse(response.data["success"])
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.razorpay_order_id, "")


class VerifyPaymentAPITests(APITestCase):
    def setUp(self) -> None:
        self.booking = make_booking(razorpay_order_id="order_1", razorpay_order_amount=Decimal("38850.00"))
        self.url = reverse("booking-verify-payment")

    def _payload(self, amount: str, **overrides) -> dict:
        payload = {
            "razorpay_order_id": "order_1",
            "razorpay_payment_id": "pay_1",
            "razorpay_signature": razorpay_service.generate_signature("order_1", "pay_1", "test_razorpay_secret"),
            "booking_id": str(self.booking.public_id),
            "paid_amount": amount,
            "payment_method": "upi",
        }
        payload.update(overrides)
        return payload

    def test_full_payment_confirms_booking(self) -> None:
        response = self.client.post(self.url, self._payload("38850.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Payment verified successfully")
        self.assertEqual(response.data["booking"]["status"], "completed")
        self.assertEqual(response.data["booking"]["pending_amount"], Decimal("0"))

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.booking_status, Booking.BookingStatus.CONFIRMED)
        self.assertEqual(self.booking.razorpay_payment_id, "pay_1")
        self.assertTrue(self.booking.email_sent)
        self.assertTrue(self.booking.sms_sent)
        self.assertEqual(self.booking.transactions.get().amount, Decimal("38850.00"))
        self.assertEqual(mail.outbox[0].subject, f"Booking Confirmation - {self.booking.booking_reference}")

    def test_partial_payment(self) -> None:
        response = self.client.post(self.url, self._payload("10000.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["booking"]["status"], "partial")
        self.assertEqual(response.data["booking"]["pending_amount"], Decimal("28850.00"))
        self.booking.refresh_from_db()
        self.assertTrue(self.booking.is_partial_payment)
        self.assertEqual(self.booking.booking_status, Booking.BookingStatus.PENDING)

    def test_invalid_signature(self) -> None:
        response = self.client.post(self.url, self._payload("100.00", razorpay_signature="forged"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid payment signature")
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.paid_amount, Decimal("0"))
        self.assertFalse(self.booking.transactions.exists())

    def test_unknown_booking(self) -> None:
        response = self.client.post(self.url, self._payload("100.00", booking_id=str(uuid.uuid4())), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Booking not found")

    def test_repeated_callback_is_credited_once(self) -> None:
        first = self.client.post(self.url, self._payload("100.00"), format="json")
        second = self.client.post(self.url, self._payload("100.00"), format="json")

        self.assertEqual(first.status_code, status.HTTP_200_OK, first.data)
        self.assertEqual(second.status_code, status.HTTP_200_OK, second.data)
        self.assertEqual(second.data["booking"]["paid_amount"], Decimal("100.00"))
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.paid_amount, Decimal("100.00"))
        self.assertEqual(self.booking.transactions.count(), 1)
        self.assertEqual(len(mail.outbox), 1)

    def test_order_created_for_another_booking_is_rejected(self) -> None:
        self.booking.razorpay_order_id = ""
        self.booking.save(update_fields=["razorpay_order_id"])
        other = make_booking(guest_email="other@example.com")
        order = self.client.post(
            reverse("booking-create-order"), {"booking_id": str(other.public_id)}, format="json"
        ).data["order"]
        signature = razorpay_service.generate_signature(order["id"], "pay_9", "test_razorpay_secret")

        response = self.client.post(
            self.url,
            self._payload(
                "38850.00",
                razorpay_order_id=order["id"],
                razorpay_payment_id="pay_9",
                razorpay_signature=signature,
            ),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment order does not match this booking")
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.paid_amount, Decimal("0"))
        self.assertFalse(self.booking.transactions.exists())

    def test_order_differing_from_stored_order_is_rejected(self) -> None:
        self.booking.razorpay_order_id = "order_stored"
        self.booking.save(update_fields=["razorpay_order_id"])

        response = self.client.post(self.url, self._payload("100.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment order does not match this booking")
        self.assertFalse(self.booking.transactions.exists())

    def test_payment_recorded_on_another_booking_is_rejected(self) -> None:
        other = make_booking(
            guest_email="other@example.com", razorpay_order_id="order_1", razorpay_order_amount=Decimal("100.00")
        )
        self.client.post(self.url, self._payload("100.00", booking_id=str(other.public_id)), format="json")

        response = self.client.post(self.url, self._payload("100.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment order does not match this booking")
        self.assertFalse(self.booking.transactions.exists())

    def test_overpayment_completes_booking(self) -> None:
        self.booking.razorpay_order_amount = Decimal("40000.00")
        self.booking.save(update_fields=["razorpay_order_amount"])

        response = self.client.post(self.url, self._payload("40000.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["booking"]["status"], "completed")
        self.assertEqual(response.data["booking"]["pending_amount"], Decimal("-1150.00"))
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.booking_status, Booking.BookingStatus.CONFIRMED)
        self.assertFalse(self.booking.is_partial_payment)

    def test_booking_without_order_is_rejected(self) -> None:
        booking = make_booking(guest_email="noorder@example.com")

        response = self.client.post(
            self.url, self._payload("38850.00", booking_id=str(booking.public_id)), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Payment order does not match this booking")
        booking.refresh_from_db()
        self.assertEqual(booking.payment_status, Booking.PaymentStatus.PENDING)
        self.assertEqual(booking.booking_status, Booking.BookingStatus.PENDING)

    def test_amount_above_order_amount_is_rejected(self) -> None:
        self.booking.razorpay_order_amount = Decimal("1.00")
        self.booking.save(update_fields=["razorpay_order_amount"])

        response = self.client.post(self.url, self._payload("38850.00"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Paid amount exceeds the payment order amount")
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.paid_amount, Decimal("0"))
        self.assertFalse(self.booking.transactions.exists())

    def test_order_then_verify(self) -> None:
        booking = make_booking(guest_email="flow@example.com")
        order = self.client.post(
            reverse("booking-create-order"),
            {"booking_id": str(booking.public_id), "amount": "10000.00"},
            format="json",
        ).data["order"]
        signature = razorpay_service.generate_signature(order["id"], "pay_flow", "test_razorpay_secret")

        response = self.client.post(
            self.url,
            self._payload(
                "10000.00",
                booking_id=str(booking.public_id),
                razorpay_order_id=order["id"],
                razorpay_payment_id="pay_flow",
                razorpay_signature=signature,
            ),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["booking"]["status"], "partial")
        self.assertEqual(response.data["booking"]["pending_amount"], Decimal("28850.00"))

    @override_settings(RAZORPAY_KEY_SECRET="")
    def test_rejected_without_configured_secret(self) -> None:
        signature = razorpay_service.generate_signature("order_1", "pay_1", "")

        response = self.client.post(self.url, self._payload("100.00", razorpay_signature=signature), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid payment signature")
        self.assertFalse(self.booking.transactions.exists())


class SignatureTests(APITestCase):
    @override_settings(RAZORPAY_KEY_SECRET="secret")
    def test_verify_payment_signature(self) -> None:
        signature = razorpay_service.generate_signature("order_1", "pay_1")

        self.assertTrue(razorpay_service.verify_payment_signature("order_1", "pay_1", signature))
        self.assertFalse(razorpay_service.verify_payment_signature("order_1", "pay_2", signature))
        self.assertFalse(razorpay_service.verify_payment_signature("order_1", "pay_1", ""))

    @override_settings(RAZORPAY_KEY_SECRET="")
    def test_empty_secret_never_verifies(self) -> None:
        signature = razorpay_service.generate_signature("order_1", "pay_1", "")

        self.assertFalse(razorpay_service.verify_payment_signature("order_1", "pay_1", signature))

    def test_to_paise_rounds(self) -> None:
        self.assertEqual(razorpay_service.to_paise(Decimal("10.005")), 1001)
        self.assertEqual(razorpay_service.to_paise(Decimal("38850")), 3885000)
