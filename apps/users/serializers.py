"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()

PASSWORD_MIN_LENGTH = 6


class UserSerializer(serializers.ModelSerializer):
    """Customer profile as returned by the user endpoints."""

    favorites = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "address",
            "role",
            "favorites",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_favorites(self, obj) -> list[str]:  # type: ignore
        return obj.favorite_package_ids()


class AdminSerializer(serializers.ModelSerializer):
    """Admin panel account."""

    class Meta:
        model = User
        fields = ["id", "username", "email", "name", "role"]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """Updates name, phone and address; empty name/address values are ignored."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=20)
    address = serializers.CharField(required=False, allow_blank=True)

    def update(self, instance, validated_data):  # type: ignore
        update_fields: list[str] = []

        name = validated_data.get("name", "")
        if name:
            instance.name = name
            update_fields.append("name")

        if "phone" in validated_data:
            instance.phone = validated_data["phone"]
            update_fields.append("phone")

        address = validated_data.get("address", "")
        if address:
            instance.address = address
            update_fields.append("address")

        if update_fields:
            instance.save(update_fields=[*update_fields, "updated_at"])
        return instance


class PasswordChangeSerializer(serializers.Serializer):
    _missing = "Please provide current password and new password"

    current_password = serializers.CharField(
        trim_whitespace=False,
        error_messages={"required": _missing, "blank": _missing},
    )
    new_password = serializers.CharField(
        trim_whitespace=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages={
            "required": _missing,
            "blank": _missing,
            "min_length": f"New password must be at least {PASSWORD_MIN_LENGTH} characters long",
        },
    )
