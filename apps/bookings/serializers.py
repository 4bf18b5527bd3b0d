"""Serializers for the booking domain.

The flat ``Booking`` model is exposed as nested sections (guest details,
package details, travelers, hotel, vehicle, flight, pricing, payment,
notifications, meals). Each section is a ``source="*"`` serializer mapping
its keys onto model columns.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.packages.models import Package

from .models import Booking, PaymentTransaction

MONEY = {"max_digits": 12, "decimal_places": 2, "min_value": Decimal("0")}


class GuestDetailsSerializer(serializers.Serializer):
    name = serializers.CharField(source="guest_name", max_length=100)
    email = serializers.EmailField(source="guest_email")
    phone = serializers.CharField(source="guest_phone", max_length=20)
    address = serializers.CharField(source="guest_address", required=False, allow_blank=True)
    passport_number = serializers.CharField(
        max_length=30, required=False, allow_blank=True
    )
    passport_expiry = serializers.DateField(required=False, allow_null=True)

    def validate_email(self, value: str) -> str:
        return value.lower()


class PackageDetailsSerializer(serializers.Serializer):
    package_id = serializers.SlugRelatedField(
        source="package",
        slug_field="slug",
        queryset=Package.objects.all(),
        required=False,
        allow_null=True,
    )
    package_type = serializers.ChoiceField(
        choices=Booking.PackageType.choices,
        required=False,
    )
    package_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    base_price = serializers.DecimalField(source="package_base_price", required=False, **MONEY)


class AdultsSerializer(serializers.Serializer):
    count = serializers.IntegerField(source="adults_count", min_value=1)
    details = serializers.ListField(
        source="adults_details", child=serializers.DictField(), required=False
    )


class ChildrenSerializer(serializers.Serializer):
    count = serializers.IntegerField(source="children_count", min_value=0, required=False)
    details = serializers.ListField(
        source="children_details", child=serializers.DictField(), required=False
    )


class TravelersSerializer(serializers.Serializer):
    adults = AdultsSerializer(source="*")
    children = ChildrenSerializer(source="*", required=False)


class HotelDetailsSerializer(serializers.Serializer):
    category = serializers.ChoiceField(
        source="hotel_category", choices=Booking.HotelCategory.choices, required=False, allow_blank=True
    )
    room_category = serializers.ChoiceField(
        choices=Booking.RoomCategory.choices, required=False, allow_blank=True
    )
    num_rooms = serializers.IntegerField(min_value=1, required=False)
    check_in = serializers.DateField(required=False, allow_null=True)
    check_out = serializers.DateField(required=False, allow_null=True)

    def validate(self, attrs):  # type: ignore
        check_in = attrs.get("check_in")
        check_out = attrs.get("check_out")
        if check_in and check_out and check_out <= check_in:
            raise serializers.ValidationError({"check_out": "Check-out date must be after check-in date"})
        return attrs


class VehicleDetailsSerializer(serializers.Serializer):
    type = serializers.ChoiceField(
        source="vehicle_type", choices=Booking.VehicleType.choices, required=False, allow_blank=True
    )
    price = serializers.DecimalField(source="vehicle_price", required=False, **MONEY)


class FlightDetailsSerializer(serializers.Serializer):
    departure_date = serializers.DateField(required=False, allow_null=True)
    return_date = serializers.DateField(required=False, allow_null=True)
    flight_class = serializers.ChoiceField(
        choices=Booking.FlightClass.choices, required=False, allow_blank=True
    )

    def validate(self, attrs):  # type: ignore
        departure = attrs.get("departure_date")
        return_date = attrs.get("return_date")
        if departure and return_date and return_date < departure:
            raise serializers.ValidationError({"return_date": "Return date must not be before departure date"})
        return attrs


class PricingSerializer(serializers.Serializer):
    base_price = serializers.DecimalField(required=False, **MONEY)
    travelers_charge = serializers.DecimalField(required=False, **MONEY)
    vehicle_charge = serializers.DecimalField(required=False, **MONEY)
    hotel_upgrade = serializers.DecimalField(required=False, **MONEY)
    activities = serializers.DecimalField(source="activities_charge", required=False, **MONEY)
    taxes = serializers.DecimalField(required=False, **MONEY)
    discount = serializers.DecimalField(required=False, **MONEY)
    coupon_code = serializers.CharField(max_length=50, required=False, allow_blank=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class PaymentTransactionSerializer(serializers.ModelSerializer):
    date = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = PaymentTransaction
        fields = ["amount", "status", "date", "payment_id", "method"]
        read_only_fields = fields


class PaymentSerializer(serializers.Serializer):
    """Payment state; only the preferred method is client writable."""

    method = serializers.ChoiceField(
        source="payment_method", choices=Booking.PaymentMethod.choices, required=False, allow_blank=True
    )
    status = serializers.CharField(source="payment_status", read_only=True)
    paid_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    pending_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, read_only=True
    )
    is_partial_payment = serializers.BooleanField(read_only=True)
    razorpay_order_id = serializers.CharField(read_only=True)
    razorpay_order_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    razorpay_payment_id = serializers.CharField(read_only=True)
    transactions = PaymentTransactionSerializer(many=True, read_only=True)


class NotificationFlagsSerializer(serializers.Serializer):
    email_sent = serializers.BooleanField(read_only=True)
    sms_sent = serializers.BooleanField(read_only=True)
    pending_payment_reminder_sent = serializers.BooleanField(read_only=True)


class ActivitySerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    included = serializers.BooleanField(default=False)


class MealsSerializer(serializers.Serializer):
    breakfast = serializers.BooleanField(source="meal_breakfast", required=False)
    lunch = serializers.BooleanField(source="meal_lunch", required=False)
    dinner = serializers.BooleanField(source="meal_dinner", required=False)


class BookingSerializer(serializers.ModelSerializer):
    """Booking in its nested public shape; used for both create and read."""

    id = serializers.UUIDField(source="public_id", read_only=True)
    booking_reference = serializers.CharField(read_only=True)
    user_id = serializers.IntegerField(read_only=True, allow_null=True)
    guest_details = GuestDetailsSerializer(source="*")
    package_details = PackageDetailsSerializer(source="*")
    travelers = TravelersSerializer(source="*")
    hotel_details = HotelDetailsSerializer(source="*", required=False)
    vehicle_details = VehicleDetailsSerializer(source="*", required=False)
    flight_details = FlightDetailsSerializer(source="*", required=False)
    pricing = PricingSerializer(source="*", required=False)
    payment = PaymentSerializer(source="*", required=False)
    notifications = NotificationFlagsSerializer(source="*", read_only=True)
    activities = ActivitySerializer(many=True, required=False)
    meals = MealsSerializer(source="*", required=False)
    total_travelers = serializers.IntegerField(read_only=True)
    payment_due_date = serializers.DateTimeField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "booking_reference",
            "user_id",
            "guest_details",
            "package_details",
            "travelers",
            "hotel_details",
            "vehicle_details",
            "flight_details",
            "pricing",
            "payment",
            "notifications",
            "booking_status",
            "special_requests",
            "activities",
            "meals",
            "total_travelers",
            "payment_due_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["booking_status", "created_at", "updated_at"]
        extra_kwargs = {
            "special_requests": {"required": False, "allow_blank": True},
        }

    def validate(self, attrs):  # type: ignore
        package = attrs.get("package")
        if not attrs.get("package_name"):
            if package is None:
                raise serializers.ValidationError(
                    {"package_details": {"package_name": "Package name is required"}}
                )
            attrs["package_name"] = package.title
        if package is not None:
            attrs.setdefault("package_base_price", package.price)
            attrs.setdefault("base_price", package.price)
        return attrs

    def create(self, validated_data):  # type: ignore
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            validated_data["user"] = user
        return Booking.objects.create(**validated_data)


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.BookingStatus.choices)


class PaymentOrderSerializer(serializers.Serializer):
    booking_id = serializers.UUIDField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, min_value=Decimal("0.01"))


class PaymentVerificationSerializer(serializers.Serializer):
    razorpay_order_id = serializers.CharField(max_length=100)
    razorpay_payment_id = serializers.CharField(max_length=100)
    razorpay_signature = serializers.CharField(max_length=256)
    booking_id = serializers.UUIDField()
    paid_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.01"))
    payment_method = serializers.ChoiceField(choices=Booking.PaymentMethod.choices)
