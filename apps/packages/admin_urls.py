"""Admin panel package routes (mounted under /api/admin/)."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import AdminPackageViewSet, AdminStatsView

router = DefaultRouter(trailing_slash=False)
router.register(r"packages", AdminPackageViewSet, basename="admin-package")

urlpatterns = [
    path("stats", AdminStatsView.as_view(), name="admin-stats"),
    path("", include(router.urls)),
]
