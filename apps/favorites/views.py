"""API views for favorites management.

Endpoints:
- GET /api/user/favorites - favorite packages with full details
- POST /api/user/favorites/{package_id} - add a package to favorites
- DELETE /api/user/favorites/{package_id} - remove a package from favorites
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.packages.models import Package
from apps.packages.serializers import PackageSerializer

from .models import Favorite

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int) -> Response:
    return Response({"success": False, "message": message}, status=status_code)


class FavoriteViewSet(viewsets.GenericViewSet):
    """Favorites of the current user; each user keeps at most MAX_FAVORITES_PER_USER."""

    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        return Favorite.objects.filter(user=self.request.user).select_related("package")

    def list(self, request):  # type: ignore
        packages = [favorite.package for favorite in self.get_queryset().filter(package__active=True)]
        return Response(
            {
                "success": True,
                "count": len(packages),
                "packages": PackageSerializer(packages, many=True).data,
            }
        )

    def add(self, request, package_id: str):  # type: ignore
        package = Package.objects.active().filter(slug=package_id.lower()).first()
        if package is None:
            return _error("Package not found or is inactive", status.HTTP_404_NOT_FOUND)

        favorites = self.get_queryset()
        if favorites.filter(package=package).exists():
            return _error("Package is already in favorites", status.HTTP_400_BAD_REQUEST)

        limit = settings.MAX_FAVORITES_PER_USER
        if favorites.count() >= limit:
            return _error(
                f"You have reached the maximum number of favorites ({limit})",
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            with transaction.atomic():
                Favorite.objects.create(user=request.user, package=package)
        except IntegrityError:
            return _error("Package is already in favorites", status.HTTP_400_BAD_REQUEST)

        return Response(
            {
                "success": True,
                "message": "Package added to favorites",
                "favorites": request.user.favorite_package_ids(),
            }
        )

    def remove(self, request, package_id: str):  # type: ignore
        self.get_queryset().filter(package__slug=package_id.lower()).delete()
        return Response(
            {
                "success": True,
                "message": "Package removed from favorites",
                "favorites": request.user.favorite_package_ids(),
            }
        )
