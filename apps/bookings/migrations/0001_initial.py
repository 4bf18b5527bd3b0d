import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


def money(**kwargs):
    return models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12, **kwargs)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("packages", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "public_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Identifier used in public booking URLs.",
                        unique=True,
                    ),
                ),
                ("booking_code", models.CharField(editable=False, max_length=12, unique=True)),
                ("guest_name", models.CharField(max_length=100)),
                ("guest_email", models.EmailField(max_length=254)),
                ("guest_phone", models.CharField(max_length=20)),
                ("guest_address", models.TextField(blank=True)),
                ("passport_number", models.CharField(blank=True, max_length=30)),
                ("passport_expiry", models.DateField(blank=True, null=True)),
                (
                    "package_type",
                    models.CharField(
                        choices=[("with-flight", "With flight"), ("without-flight", "Without flight")],
                        default="without-flight",
                        max_length=20,
                    ),
                ),
                ("package_name", models.CharField(max_length=200)),
                ("package_base_price", money(help_text="Package price at the moment of booking.")),
                (
                    "adults_count",
                    models.PositiveSmallIntegerField(
                        default=1, validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("adults_details", models.JSONField(blank=True, default=list)),
                ("children_count", models.PositiveSmallIntegerField(default=0)),
                ("children_details", models.JSONField(blank=True, default=list)),
                (
                    "hotel_category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("3star", "3 star"),
                            ("4star", "4 star"),
                            ("5star", "5 star"),
                            ("boutique", "Boutique"),
                            ("resort", "Resort"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "room_category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("standard", "Standard"),
                            ("deluxe", "Deluxe"),
                            ("suite", "Suite"),
                            ("villa", "Villa"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "num_rooms",
                    models.PositiveSmallIntegerField(
                        default=1, validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("check_in", models.DateField(blank=True, null=True)),
                ("check_out", models.DateField(blank=True, null=True)),
                (
                    "vehicle_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("sedan", "Sedan"),
                            ("suv", "SUV"),
                            ("tempo", "Tempo traveller"),
                            ("bus", "Bus"),
                            ("luxury", "Luxury"),
                        ],
                        max_length=20,
                    ),
                ),
                ("vehicle_price", money()),
                ("departure_date", models.DateField(blank=True, null=True)),
                ("return_date", models.DateField(blank=True, null=True)),
                (
                    "flight_class",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("economy", "Economy"),
                            ("premium-economy", "Premium economy"),
                            ("business", "Business"),
                            ("first", "First"),
                        ],
                        max_length=20,
                    ),
                ),
                ("base_price", money()),
                ("travelers_charge", money()),
                ("vehicle_charge", money()),
                ("hotel_upgrade", money()),
                ("activities_charge", money()),
                ("taxes", money()),
                ("discount", money()),
                ("coupon_code", models.CharField(blank=True, max_length=50)),
                ("total_amount", money()),
                (
                    "payment_status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("partial", "Partially paid"),
                            ("completed", "Completed"),
                            ("failed", "Failed"),
                            ("refunded", "Refunded"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("credit-card", "Credit card"),
                            ("debit-card", "Debit card"),
                            ("upi", "UPI"),
                            ("netbanking", "Net banking"),
                            ("wallet", "Wallet"),
                            ("emi", "EMI"),
                            ("pay-later", "Pay later"),
                        ],
                        max_length=20,
                    ),
                ),
                ("paid_amount", money()),
                ("pending_amount", money()),
                ("is_partial_payment", models.BooleanField(default=False)),
                ("razorpay_order_id", models.CharField(blank=True, max_length=100)),
                ("razorpay_payment_id", models.CharField(blank=True, max_length=100)),
                ("razorpay_signature", models.CharField(blank=True, max_length=256)),
                ("email_sent", models.BooleanField(default=False)),
                ("sms_sent", models.BooleanField(default=False)),
                ("pending_payment_reminder_sent", models.BooleanField(default=False)),
                (
                    "booking_status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                            ("completed", "Completed"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("special_requests", models.TextField(blank=True)),
                ("activities", models.JSONField(blank=True, default=list, help_text="List of {name, included}.")),
                ("meal_breakfast", models.BooleanField(default=True)),
                ("meal_lunch", models.BooleanField(default=False)),
                ("meal_dinner", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "package",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to="packages.package",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["guest_email"], name="booking_guest_email_idx"),
                    models.Index(fields=["booking_status"], name="booking_status_idx"),
                    models.Index(fields=["payment_status"], name="booking_payment_status_idx"),
                    models.Index(fields=["razorpay_order_id"], name="booking_rzp_order_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PaymentTransaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("amount", money()),
                (
                    "status",
                    models.CharField(choices=[("success", "Success"), ("failed", "Failed")], max_length=20),
                ),
                ("payment_id", models.CharField(blank=True, max_length=100)),
                ("method", models.CharField(blank=True, max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="transactions",
                        to="bookings.booking",
                    ),
                ),
            ],
            options={
                "verbose_name": "Payment transaction",
                "verbose_name_plural": "Payment transactions",
                "ordering": ["created_at"],
            },
        ),
    ]
