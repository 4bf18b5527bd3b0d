"""Customer profile API views."""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.exceptions import AuthenticationFailed  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .serializers import PasswordChangeSerializer, ProfileUpdateSerializer, UserSerializer

logger = logging.getLogger(__name__)


class ProfileView(APIView):
    """Returns and updates the profile of the current user."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response({"success": True, "user": UserSerializer(request.user).data})

    def put(self, request):  # type: ignore
        serializer = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(
            {
                "success": True,
                "message": "Profile updated successfully",
                "user": UserSerializer(user).data,
            }
        )


class PasswordChangeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def put(self, request):  # type: ignore
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        if not user.check_password(serializer.validated_data["current_password"]):
            raise AuthenticationFailed("Current password is incorrect")

        user.set_password(serializer.validated_data["new_password"])
        user.save(update_fields=["password", "updated_at"])
        logger.info(f"Password changed for user {user.pk}")
        return Response({"success": True, "message": "Password changed successfully"}, status=status.HTTP_200_OK)
