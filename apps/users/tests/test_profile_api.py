"""API tests for the customer profile endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class ProfileAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="asha@example.com",
            password="secret1",
            name="Asha",
            phone="9876543210",
            address="Pune",
        )
        self.client.force_authenticate(self.user)

    def test_get_profile(self) -> None:
        response = self.client.get(reverse("user-profile"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["email"], "asha@example.com")
        self.assertEqual(response.data["user"]["address"], "Pune")

    def test_update_ignores_empty_name_and_address(self) -> None:
        response = self.client.put(
            reverse("user-profile"),
            {"name": "", "phone": "", "address": ""},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Profile updated successfully")
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "Asha")
        self.assertEqual(self.user.address, "Pune")
        self.assertEqual(self.user.phone, "")

    def test_update_does_not_touch_email(self) -> None:
        self.client.put(
            reverse("user-profile"),
            {"name": "Asha Rao", "email": "other@example.com"},
            format="json",
        )

        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "Asha Rao")
        self.assertEqual(self.user.email, "asha@example.com")

    def test_change_password(self) -> None:
        response = self.client.put(
            reverse("user-profile-password"),
            {"current_password": "secret1", "new_password": "secret2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("secret2"))

    def test_change_password_wrong_current(self) -> None:
        response = self.client.put(
            reverse("user-profile-password"),
            {"current_password": "wrong", "new_password": "secret2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Current password is incorrect")

    def test_change_password_too_short(self) -> None:
        response = self.client.put(
            reverse("user-profile-password"),
            {"current_password": "secret1", "new_password": "abc"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "New password must be at least 6 characters long")

    def test_profile_requires_authentication(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("user-profile"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
