"""Tests for the seed_packages management command."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.packages.models import Package
from apps.users.models import User


class SeedPackagesCommandTests(TestCase):
    def test_seed_replaces_catalog_and_admins(self) -> None:
        Package.objects.create(
            slug="old",
            title="Old",
            description="Old package",
            image="https://img.example.com/old.jpg",
            price=1,
            duration=1,
            type=Package.Type.BUDGET,
            destination=Package.Destination.INDIA,
            travel=Package.Travel.SOLO,
        )
        User.objects.create_admin(email="old@example.com", username="old", password="secret1", name="Old")
        customer = User.objects.create_user(email="c@example.com", password="secret1", name="C")

        out = StringIO()
        call_command("seed_packages", stdout=out)

        self.assertEqual(sorted(Package.objects.values_list("slug", flat=True)), ["dubai", "goa"])
        self.assertTrue(Package.objects.get(slug="dubai").itinerary_days.exists())
        admin = User.objects.admins().get()
        self.assertEqual(admin.username, "admin")
        self.assertEqual(admin.role, User.RoleChoices.SUPERADMIN)
        self.assertTrue(admin.check_password("Admin@123"))
        self.assertTrue(User.objects.filter(pk=customer.pk).exists())
        self.assertIn("Database seeded successfully", out.getvalue())
