"""Serializers for authentication flows (admin login, customer register/login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from .serializers import PASSWORD_MIN_LENGTH

User = get_user_model()


class AdminLoginSerializer(serializers.Serializer):
    _missing = "Please provide username and password"

    username = serializers.CharField(error_messages={"required": _missing, "blank": _missing})
    password = serializers.CharField(
        trim_whitespace=False,
        write_only=True,
        error_messages={"required": _missing, "blank": _missing},
    )

    def validate_username(self, value: str) -> str:
        return value.lower()


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        min_length=PASSWORD_MIN_LENGTH,
        error_messages={"min_length": f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"},
    )
    phone = serializers.CharField(required=False, allow_blank=True, max_length=20)
    address = serializers.CharField(required=False, allow_blank=True)

    def validate_email(self, value: str) -> str:
        email = value.lower()
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("User with this email already exists")
        return email

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    _missing = "Please provide email and password"

    email = serializers.EmailField(error_messages={"required": _missing, "blank": _missing})
    password = serializers.CharField(
        trim_whitespace=False,
        write_only=True,
        error_messages={"required": _missing, "blank": _missing},
    )

    def validate_email(self, value: str) -> str:
        return value.lower()
