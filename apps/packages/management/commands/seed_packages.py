"""Loads the sample catalog and creates the default admin panel account."""

import os
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.packages.models import ItineraryDay, Package

User = get_user_model()

SAMPLE_PACKAGES = [
    {
        "slug": "dubai",
        "title": "Dubai Luxury Escape",
        "description": "Experience the luxury of Dubai with 5-star hotels, desert safari, and Burj Khalifa",
        "image": "https://images.unsplash.com/photo-1512453979798-5ea266f8880c?w=800&h=600&fit=crop&auto=format",
        "price": Decimal("150000"),
        "duration": 7,
        "type": Package.Type.LUXURY,
        "destination": Package.Destination.INTERNATIONAL,
        "travel": Package.Travel.FAMILY,
        "popular": True,
        "popular_badge": "Most Popular",
        "tags": ["Luxury", "International"],
        "itinerary_title": "Dubai Luxury Escape",
        "itinerary_subtitle": "7 Days / 6 Nights",
        "days": [
            {
                "day": 1,
                "title": "Arrival in Dubai",
                "description": "Arrive at Dubai International Airport. Meet and greet by our representative. "
                "Transfer to your 5-star hotel.",
                "highlights": ["Airport Transfer", "Hotel Check-in", "Welcome Drink"],
            },
            {
                "day": 2,
                "title": "Dubai City Tour",
                "description": "Morning city tour covering Burj Khalifa, Dubai Mall, and Dubai Fountain.",
                "highlights": ["Burj Khalifa", "Dubai Mall", "Dubai Museum"],
            },
        ],
    },
    {
        "slug": "goa",
        "title": "Goa Beach Paradise",
        "description": "Relax on pristine beaches, enjoy water sports, and explore Portuguese heritage",
        "image": "https://images.unsplash.com/photo-1512343879784-a960bf40e7f2?w=800&h=600&fit=crop&auto=format",
        "price": Decimal("37000"),
        "duration": 5,
        "type": Package.Type.PREMIUM,
        "destination": Package.Destination.INDIA,
        "travel": Package.Travel.COUPLE,
        "popular": False,
        "tags": ["Premium", "India"],
        "itinerary_title": "Goa Beach Paradise",
        "itinerary_subtitle": "5 Days / 4 Nights",
        "days": [
            {
                "day": 1,
                "title": "Arrival in Goa",
                "description": "Arrive at Goa International Airport. Transfer to your beach resort.",
                "highlights": ["Airport Transfer", "Resort Check-in", "Beach Walk"],
            },
        ],
    },
]


class Command(BaseCommand):
    help = "Replaces packages and admin accounts with the sample catalog and a default superadmin"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Clearing existing packages...")
        Package.objects.all().delete()

        self.stdout.write("Clearing existing admins...")
        User.objects.admins().delete()

        for data in SAMPLE_PACKAGES:
            data = dict(data)
            days = data.pop("days")
            package = Package.objects.create(**data)
            ItineraryDay.objects.bulk_create(ItineraryDay(package=package, **day) for day in days)
        self.stdout.write(f"{len(SAMPLE_PACKAGES)} packages inserted")

        password = os.environ.get("ADMIN_PASSWORD", "Admin@123")
        admin = User.objects.create_superuser(
            email=os.environ.get("ADMIN_EMAIL", "admin@tripholiday.com"),
            password=password,
            username=os.environ.get("ADMIN_USERNAME", "admin"),
            name=os.environ.get("ADMIN_NAME", "Administrator"),
        )
        self.stdout.write(f"Admin created: username={admin.username} email={admin.email} role={admin.role}")
        self.stdout.write(self.style.SUCCESS("Database seeded successfully"))
