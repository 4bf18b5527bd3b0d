"""Public package catalog routes."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import PackageDetailView, PackageFilterView, PackageListView

urlpatterns = [
    path("packages", PackageListView.as_view(), name="package-list"),
    path("packages/filter/<str:filter_type>/<str:value>", PackageFilterView.as_view(), name="package-filter"),
    path("packages/<str:package_id>", PackageDetailView.as_view(), name="package-detail"),
]
