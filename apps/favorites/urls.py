"""URL declarations for the favorites app (mounted under /api/user/)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import FavoriteViewSet

favorite_list = FavoriteViewSet.as_view({"get": "list"})
favorite_detail = FavoriteViewSet.as_view({"post": "add", "delete": "remove"})

urlpatterns = [
    path("favorites", favorite_list, name="favorite-list"),
    path("favorites/<str:package_id>", favorite_detail, name="favorite-detail"),
]
