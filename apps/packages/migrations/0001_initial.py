import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Package",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "slug",
                    models.CharField(
                        help_text="Public identifier used in URLs, e.g. 'dubai'.",
                        max_length=100,
                        unique=True,
                        verbose_name="Package ID",
                    ),
                ),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("image", models.URLField(max_length=500)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "duration",
                    models.PositiveSmallIntegerField(
                        help_text="Duration in days.",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("duration_text", models.CharField(blank=True, max_length=50)),
                (
                    "type",
                    models.CharField(
                        choices=[("luxury", "Luxury"), ("premium", "Premium"), ("budget", "Budget")],
                        max_length=20,
                    ),
                ),
                (
                    "destination",
                    models.CharField(
                        choices=[
                            ("india", "India"),
                            ("international", "International"),
                            ("pilgrimage", "Pilgrimage"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "travel",
                    models.CharField(
                        choices=[
                            ("family", "Family"),
                            ("couple", "Couple"),
                            ("solo", "Solo"),
                            ("group", "Group"),
                            ("buddy", "Buddy"),
                        ],
                        max_length=20,
                    ),
                ),
                ("popular", models.BooleanField(default=False)),
                ("popular_badge", models.CharField(default="Most Popular", max_length=50)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("itinerary_title", models.CharField(blank=True, max_length=200)),
                ("itinerary_subtitle", models.CharField(blank=True, max_length=200)),
                ("active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Package",
                "verbose_name_plural": "Packages",
                "ordering": ["-popular", "price"],
                "indexes": [
                    models.Index(fields=["type"], name="package_type_idx"),
                    models.Index(fields=["destination"], name="package_destination_idx"),
                    models.Index(fields=["travel"], name="package_travel_idx"),
                    models.Index(fields=["active"], name="package_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ItineraryDay",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("day", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("highlights", models.JSONField(blank=True, default=list)),
                (
                    "package",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="itinerary_days",
                        to="packages.package",
                    ),
                ),
            ],
            options={
                "verbose_name": "Itinerary day",
                "verbose_name_plural": "Itinerary days",
                "ordering": ["day"],
                "unique_together": {("package", "day")},
            },
        ),
    ]
