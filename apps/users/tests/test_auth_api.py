"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.users.models import User


class AdminAuthAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_admin(
            email="admin@tripholiday.com",
            username="Admin",
            password="Admin@123",
            name="Administrator",
        )
        self.url = reverse("auth:login")

    def test_admin_login_returns_token_with_role(self) -> None:
        response = self.client.post(self.url, {"username": "ADMIN", "password": "Admin@123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["message"], "Login successful")
        self.assertEqual(response.data["admin"]["username"], "admin")
        token = AccessToken(response.data["token"])
        self.assertEqual(token["role"], User.RoleChoices.ADMIN)
        self.assertEqual(token["username"], "admin")

    def test_admin_login_requires_both_fields(self) -> None:
        response = self.client.post(self.url, {"username": "admin"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["message"], "Please provide username and password")

    def test_admin_login_wrong_password(self) -> None:
        response = self.client.post(self.url, {"username": "admin", "password": "nope"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Invalid credentials")

    def test_customer_cannot_use_admin_login(self) -> None:
        User.objects.create_user(email="c@example.com", username="customer", password="secret1", name="C")

        response = self.client.post(self.url, {"username": "customer", "password": "secret1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_deactivated_admin_is_rejected(self) -> None:
        self.admin.is_active = False
        self.admin.save(update_fields=["is_active"])

        response = self.client.post(self.url, {"username": "admin", "password": "Admin@123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Account has been deactivated")

    def test_verify_accepts_admin_and_rejects_customer(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("auth:verify"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["admin"]["email"], "admin@tripholiday.com")

        customer = User.objects.create_user(email="c@example.com", password="secret1", name="C")
        self.client.force_authenticate(customer)
        response = self.client.get(reverse("auth:verify"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Not authorized to access this route")


class CustomerAuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "name": "Asha Rao",
            "email": "Asha@Example.com",
            "password": "secret1",
            "phone": "9876543210",
        }

        response = self.client.post(reverse("user-auth:register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Registration successful")
        self.assertIn("token", response.data)
        self.assertIn("refresh", response.data)
        self.assertEqual(response.data["user"]["email"], "asha@example.com")
        self.assertEqual(response.data["user"]["role"], User.RoleChoices.CUSTOMER)
        self.assertEqual(response.data["user"]["favorites"], [])
        self.assertTrue(User.objects.filter(email="asha@example.com").exists())

    def test_register_duplicate_email(self) -> None:
        User.objects.create_user(email="asha@example.com", password="secret1", name="Asha")

        response = self.client.post(
            reverse("user-auth:register"),
            {"name": "Asha", "email": "ASHA@example.com", "password": "secret1"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "User with this email already exists")

    def test_register_short_password(self) -> None:
        response = self.client.post(
            reverse("user-auth:register"),
            {"name": "Asha", "email": "asha@example.com", "password": "123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Password must be at least 6 characters long")

    def test_login_and_verify(self) -> None:
        User.objects.create_user(email="asha@example.com", password="secret1", name="Asha")

        response = self.client.post(
            reverse("user-auth:login"),
            {"email": "ASHA@example.com", "password": "secret1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['token']}")
        verify = self.client.get(reverse("user-auth:verify"))
        self.assertEqual(verify.status_code, status.HTTP_200_OK)
        self.assertEqual(verify.data["user"]["name"], "Asha")

    def test_login_invalid_credentials(self) -> None:
        response = self.client.post(
            reverse("user-auth:login"),
            {"email": "ghost@example.com", "password": "secret1"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Invalid credentials")

    def test_verify_requires_token(self) -> None:
        response = self.client.get(reverse("user-auth:verify"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])
