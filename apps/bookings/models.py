"""Booking domain models for Trip Holiday."""

from __future__ import annotations

import secrets
import uuid
from datetime import timedelta
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

ZERO = Decimal("0.00")


def _money(**kwargs) -> models.DecimalField:
    kwargs.setdefault("default", ZERO)
    return models.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class Booking(models.Model):
    """A guest's reservation of a travel package with its payment state."""

    class BookingStatus(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")
        COMPLETED = "completed", _("Completed")

    class PaymentStatus(models.TextChoices):
        PENDING = "pending", _("Pending")
        PARTIAL = "partial", _("Partially paid")
        COMPLETED = "completed", _("Completed")
        FAILED = "failed", _("Failed")
        REFUNDED = "refunded", _("Refunded")

    class PaymentMethod(models.TextChoices):
        CREDIT_CARD = "credit-card", _("Credit card")
        DEBIT_CARD = "debit-card", _("Debit card")
        UPI = "upi", _("UPI")
        NETBANKING = "netbanking", _("Net banking")
        WALLET = "wallet", _("Wallet")
        EMI = "emi", _("EMI")
        PAY_LATER = "pay-later", _("Pay later")

    class PackageType(models.TextChoices):
        WITH_FLIGHT = "with-flight", _("With flight")
        WITHOUT_FLIGHT = "without-flight", _("Without flight")

    class HotelCategory(models.TextChoices):
        THREE_STAR = "3star", _("3 star")
        FOUR_STAR = "4star", _("4 star")
        FIVE_STAR = "5star", _("5 star")
        BOUTIQUE = "boutique", _("Boutique")
        RESORT = "resort", _("Resort")

    class RoomCategory(models.TextChoices):
        STANDARD = "standard", _("Standard")
        DELUXE = "deluxe", _("Deluxe")
        SUITE = "suite", _("Suite")
        VILLA = "villa", _("Villa")

    class VehicleType(models.TextChoices):
        SEDAN = "sedan", _("Sedan")
        SUV = "suv", _("SUV")
        TEMPO = "tempo", _("Tempo traveller")
        BUS = "bus", _("Bus")
        LUXURY = "luxury", _("Luxury")

    class FlightClass(models.TextChoices):
        ECONOMY = "economy", _("Economy")
        PREMIUM_ECONOMY = "premium-economy", _("Premium economy")
        BUSINESS = "business", _("Business")
        FIRST = "first", _("First")

    REFERENCE_PREFIX = "TH"

    public_id = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        help_text=_("Identifier used in public booking URLs."),
    )
    booking_code = models.CharField(max_length=12, unique=True, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )

    # Guest details
    guest_name = models.CharField(max_length=100)
    guest_email = models.EmailField()
    guest_phone = models.CharField(max_length=20)
    guest_address = models.TextField(blank=True)
    passport_number = models.CharField(max_length=30, blank=True)
    passport_expiry = models.DateField(null=True, blank=True)

    # Package details
    package = models.ForeignKey(
        "packages.Package",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    package_type = models.CharField(
        max_length=20,
        choices=PackageType.choices,
        default=PackageType.WITHOUT_FLIGHT,
    )
    package_name = models.CharField(max_length=200)
    package_base_price = _money(help_text=_("Package price at the moment of booking."))

    # Travelers
    adults_count = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    adults_details = models.JSONField(default=list, blank=True)
    children_count = models.PositiveSmallIntegerField(default=0)
    children_details = models.JSONField(default=list, blank=True)

    # Hotel
    hotel_category = models.CharField(max_length=20, choices=HotelCategory.choices, blank=True)
    room_category = models.CharField(max_length=20, choices=RoomCategory.choices, blank=True)
    num_rooms = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    check_in = models.DateField(null=True, blank=True)
    check_out = models.DateField(null=True, blank=True)

    # Vehicle
    vehicle_type = models.CharField(max_length=20, choices=VehicleType.choices, blank=True)
    vehicle_price = _money()

    # Flight
    departure_date = models.DateField(null=True, blank=True)
    return_date = models.DateField(null=True, blank=True)
    flight_class = models.CharField(max_length=20, choices=FlightClass.choices, blank=True)

    # Pricing
    base_price = _money()
    travelers_charge = _money()
    vehicle_charge = _money()
    hotel_upgrade = _money()
    activities_charge = _money()
    taxes = _money()
    discount = _money()
    coupon_code = models.CharField(max_length=50, blank=True)
    total_amount = _money()

    # Payment
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices, blank=True)
    paid_amount = _money()
    pending_amount = _money()
    is_partial_payment = models.BooleanField(default=False)
    razorpay_order_id = models.CharField(max_length=100, blank=True)
    razorpay_order_amount = _money(help_text=_("Amount of the stored gateway order."))
    razorpay_payment_id = models.CharField(max_length=100, blank=True)
    razorpay_signature = models.CharField(max_length=256, blank=True)

    # Notification flags
    email_sent = models.BooleanField(default=False)
    sms_sent = models.BooleanField(default=False)
    pending_payment_reminder_sent = models.BooleanField(default=False)

    booking_status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING,
    )
    special_requests = models.TextField(blank=True)
    activities = models.JSONField(default=list, blank=True, help_text=_("List of {name, included}."))
    meal_breakfast = models.BooleanField(default=True)
    meal_lunch = models.BooleanField(default=False)
    meal_dinner = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["guest_email"], name="booking_guest_email_idx"),
            models.Index(fields=["booking_status"], name="booking_status_idx"),
            models.Index(fields=["payment_status"], name="booking_payment_status_idx"),
            models.Index(fields=["razorpay_order_id"], name="booking_rzp_order_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.booking_reference} for {self.guest_email}"

    def save(self, *args, **kwargs):  # type: ignore
        creating = self._state.adding
        if creating and not self.booking_code:
            self.booking_code = self.generate_booking_code()
        self.guest_email = (self.guest_email or "").strip().lower()
        if creating:
            self.total_amount = self.calculate_total()
            self.pending_amount = self.total_amount - self.paid_amount
        super().save(*args, **kwargs)

    @classmethod
    def generate_booking_code(cls) -> str:
        code = secrets.token_hex(4).upper()
        while cls.objects.filter(booking_code=code).exists():
            code = secrets.token_hex(4).upper()
        return code

    @property
    def booking_reference(self) -> str:
        return f"{self.REFERENCE_PREFIX}{self.booking_code}"

    def calculate_total(self) -> Decimal:
        subtotal = (
            self.base_price
            + self.travelers_charge
            + self.vehicle_charge
            + self.hotel_upgrade
            + self.activities_charge
            + self.taxes
            - self.discount
        )
        return max(Decimal(subtotal), ZERO)

    @property
    def total_travelers(self) -> int:
        return self.adults_count + self.children_count

    def is_payment_complete(self) -> bool:
        return self.payment_status == self.PaymentStatus.COMPLETED

    @property
    def payment_due_date(self):
        created = self.created_at or timezone.now()
        return created + timedelta(days=settings.PAYMENT_DUE_DAYS)

    def pending_payment_details(self) -> dict | None:
        if self.pending_amount <= 0:
            return None
        return {
            "booking_reference": self.booking_reference,
            "pending_amount": self.pending_amount,
            "total_amount": self.total_amount,
            "paid_amount": self.paid_amount,
            "due_date": self.payment_due_date,
        }

    def can_be_cancelled(self) -> bool:
        return self.booking_status not in (self.BookingStatus.COMPLETED, self.BookingStatus.CANCELLED)

    def mark_cancelled(self) -> None:
        self.booking_status = self.BookingStatus.CANCELLED
        self.save(update_fields=["booking_status", "updated_at"])

    def set_status(self, booking_status: str) -> None:
        self.booking_status = booking_status
        self.save(update_fields=["booking_status", "updated_at"])

    def record_payment(
        self,
        amount: Decimal,
        *,
        method: str,
        order_id: str,
        payment_id: str,
        signature: str,
    ) -> "PaymentTransaction":
        """Adds a verified gateway payment and recomputes the payment state."""
        self.paid_amount += amount
        self.pending_amount = self.total_amount - self.paid_amount
        self.payment_method = method
        self.razorpay_order_id = order_id
        self.razorpay_payment_id = payment_id
        self.razorpay_signature = signature

        if self.pending_amount <= 0:
            self.payment_status = self.PaymentStatus.COMPLETED
            self.booking_status = self.BookingStatus.CONFIRMED
            self.is_partial_payment = False
        else:
            self.payment_status = self.PaymentStatus.PARTIAL
            self.is_partial_payment = True

        self.save(
            update_fields=[
                "paid_amount",
                "pending_amount",
                "payment_method",
                "razorpay_order_id",
                "razorpay_payment_id",
                "razorpay_signature",
                "payment_status",
                "booking_status",
                "is_partial_payment",
                "updated_at",
            ]
        )
        return self.transactions.create(
            amount=amount,
            status=PaymentTransaction.Status.SUCCESS,
            payment_id=payment_id,
            method=method,
        )


class PaymentTransaction(models.Model):
    """A single gateway payment recorded against a booking."""

    class Status(models.TextChoices):
        SUCCESS = "success", _("Success")
        FAILED = "failed", _("Failed")

    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="transactions")
    amount = _money()
    status = models.CharField(max_length=20, choices=Status.choices)
    payment_id = models.CharField(max_length=100, blank=True)
    method = models.CharField(max_length=20, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Payment transaction")
        verbose_name_plural = _("Payment transactions")
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.status} {self.amount} for booking {self.booking_id}"
