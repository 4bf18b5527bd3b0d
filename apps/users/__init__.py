"""Users app package.

Defines the custom user model used by both storefront customers and admin
panel accounts, plus JWT login flows. Use ``apps.users.models.CustomUser``
as the AUTH_USER_MODEL throughout the project.
"""
