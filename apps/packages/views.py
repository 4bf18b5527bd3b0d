"""API views for the package catalog: public listing and admin management."""

from __future__ import annotations

import logging

from django.db.models import Count  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.core.permissions import IsAdminRole

from .filters import PackageFilterSet
from .models import Package
from .serializers import AdminPackageSerializer, PackageSerializer

logger = logging.getLogger(__name__)

FILTER_TYPES = ("type", "destination", "travel")


class PackageListView(generics.ListAPIView):
    """Active packages, most popular first then cheapest first."""

    permission_classes = [permissions.AllowAny]
    serializer_class = PackageSerializer
    filterset_class = PackageFilterSet

    def get_queryset(self):  # type: ignore
        return Package.objects.active().prefetch_related("itinerary_days").order_by("-popular", "price")

    def list(self, request, *args, **kwargs):  # type: ignore
        packages = list(self.filter_queryset(self.get_queryset()))
        return Response(
            {
                "success": True,
                "count": len(packages),
                "packages": self.get_serializer(packages, many=True).data,
                "itineraries": {package.slug: package.itinerary for package in packages},
            }
        )


class PackageDetailView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, package_id: str):  # type: ignore
        package = (
            Package.objects.active()
            .prefetch_related("itinerary_days")
            .filter(slug=package_id.lower())
            .first()
        )
        if package is None:
            raise NotFound("Package not found")
        return Response(
            {
                "success": True,
                "package": PackageSerializer(package).data,
                "itinerary": package.itinerary,
            }
        )


class PackageFilterView(APIView):
    """Active packages matching one of type/destination/travel."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, filter_type: str, value: str):  # type: ignore
        if filter_type not in FILTER_TYPES:
            return Response(
                {"success": False, "message": "Invalid filter type"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        packages = Package.objects.active().filter(**{filter_type: value.lower()}).order_by("-popular", "price")
        return Response(
            {
                "success": True,
                "count": packages.count(),
                "packages": PackageSerializer(packages, many=True).data,
            }
        )


class AdminPackageViewSet(viewsets.ModelViewSet):
    """Admin panel CRUD over all packages, inactive ones included."""

    serializer_class = AdminPackageSerializer
    permission_classes = [IsAdminRole]
    filterset_class = PackageFilterSet
    lookup_field = "slug"
    lookup_url_kwarg = "package_id"

    def get_queryset(self):  # type: ignore
        return Package.objects.prefetch_related("itinerary_days").order_by("-created_at")

    def get_object(self):  # type: ignore
        self.kwargs[self.lookup_url_kwarg] = self.kwargs[self.lookup_url_kwarg].lower()
        try:
            return super().get_object()
        except Http404:
            raise NotFound("Package not found")

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(queryset, many=True).data
        return Response({"success": True, "count": len(data), "packages": data})

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return Response({"success": True, "package": self.get_serializer(self.get_object()).data})

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        package = serializer.save()
        logger.info(f"Package {package.slug} created by user {request.user.pk}")
        return Response(
            {
                "success": True,
                "message": "Package created successfully",
                "package": self.get_serializer(package).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):  # type: ignore
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        package = serializer.save()
        logger.info(f"Package {package.slug} updated by user {request.user.pk}")
        return Response(
            {
                "success": True,
                "message": "Package updated successfully",
                "package": self.get_serializer(package).data,
            }
        )

    def destroy(self, request, *args, **kwargs):  # type: ignore
        package = self.get_object()
        slug = package.slug
        package.delete()
        logger.info(f"Package {slug} deleted by user {request.user.pk}")
        return Response({"success": True, "message": "Package deleted successfully"})

    @action(detail=True, methods=["patch"])
    def toggle(self, request, package_id=None):  # type: ignore
        package: Package = self.get_object()
        active = package.toggle_active()
        return Response(
            {
                "success": True,
                "message": f"Package {'activated' if active else 'deactivated'} successfully",
                "package": self.get_serializer(package).data,
            }
        )


class AdminStatsView(APIView):
    """Catalog totals and breakdowns for the admin dashboard."""

    permission_classes = [IsAdminRole]

    def get(self, request):  # type: ignore
        packages = Package.objects.all()
        total = packages.count()
        active = packages.filter(active=True).count()

        by_type = {row["type"]: row["count"] for row in packages.values("type").annotate(count=Count("id")).order_by()}
        by_destination = {
            row["destination"]: row["count"]
            for row in packages.values("destination").annotate(count=Count("id")).order_by()
        }

        return Response(
            {
                "success": True,
                "stats": {
                    "total": total,
                    "active": active,
                    "inactive": total - active,
                    "popular": packages.filter(popular=True).count(),
                    "by_type": by_type,
                    "by_destination": by_destination,
                },
            }
        )
