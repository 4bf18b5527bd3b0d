"""Model definition for favorites.

The ``Favorite`` model represents a bookmark created by a customer for a
particular travel package. Duplicate favorites are prevented via a unique
constraint and each user may keep a limited number of them.
"""

from __future__ import annotations

from django.db import models  # type: ignore


class Favorite(models.Model):
    """A user's favorite package."""

    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='favorites'
    )
    package = models.ForeignKey(
        'packages.Package', on_delete=models.CASCADE, related_name='favorited_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('user', 'package')
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"Favorite package {self.package_id} by user {self.user_id}"
