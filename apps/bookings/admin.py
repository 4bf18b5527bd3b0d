"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, PaymentTransaction


class PaymentTransactionInline(admin.TabularInline):
    model = PaymentTransaction
    extra = 0
    readonly_fields = ("amount", "status", "payment_id", "method", "created_at")
    can_delete = False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_code",
        "guest_name",
        "guest_email",
        "package_name",
        "booking_status",
        "payment_status",
        "total_amount",
        "paid_amount",
        "pending_amount",
        "created_at",
    )
    list_filter = ("booking_status", "payment_status", "package_type", "created_at")
    search_fields = ("booking_code", "guest_name", "guest_email", "guest_phone", "razorpay_order_id")
    readonly_fields = (
        "booking_code",
        "total_amount",
        "paid_amount",
        "pending_amount",
        "razorpay_order_id",
        "razorpay_order_amount",
        "razorpay_payment_id",
        "razorpay_signature",
        "created_at",
        "updated_at",
    )
    inlines = [PaymentTransactionInline]
