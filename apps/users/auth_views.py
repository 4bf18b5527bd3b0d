"""Views for authentication flows (admin panel and customer accounts)."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from django.contrib.auth.models import update_last_login  # type: ignore
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from apps.core.permissions import IsAdminRole

from .auth_serializers import AdminLoginSerializer, LoginSerializer, RegisterSerializer
from .serializers import AdminSerializer, UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    refresh["username"] = user.username or ""
    refresh["role"] = user.role
    return {"refresh": str(refresh), "token": str(refresh.access_token)}


def _check_credentials(user, password: str) -> None:
    if user is None or not user.check_password(password):
        raise AuthenticationFailed("Invalid credentials")
    if not user.is_active:
        raise PermissionDenied("Account has been deactivated")


class AdminLoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data["username"]

        admin = User.objects.admins().filter(username=username).first()
        _check_credentials(admin, serializer.validated_data["password"])
        update_last_login(None, admin)
        logger.info(f"Admin {admin.username} logged in")

        return Response(
            {
                "success": True,
                "message": "Login successful",
                **_tokens_for_user(admin),
                "admin": AdminSerializer(admin).data,
            },
            status=status.HTTP_200_OK,
        )


class AdminVerifyView(APIView):
    """Token check for the admin panel; a valid non-admin token counts as unauthenticated."""

    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        if not IsAdminRole().has_permission(request, self):
            raise AuthenticationFailed(IsAdminRole.message)
        return Response({"success": True, "admin": AdminSerializer(request.user).data})


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered customer account {user.pk}")
        return Response(
            {
                "success": True,
                "message": "Registration successful",
                **_tokens_for_user(user),
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = User.objects.filter(email=serializer.validated_data["email"]).first()
        _check_credentials(user, serializer.validated_data["password"])
        update_last_login(None, user)

        return Response(
            {
                "success": True,
                "message": "Login successful",
                **_tokens_for_user(user),
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )


class UserVerifyView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response({"success": True, "user": UserSerializer(request.user).data})
