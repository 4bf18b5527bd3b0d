"""URL configuration for the Trip Holiday project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the application routers of each app and the OpenAPI schema.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from apps.core.views import api_root, healthz

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', api_root, name='api-root'),
    path('healthz', healthz, name='healthz'),
    # Authentication
    path('api/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/user/auth/', include(('apps.users.user_auth_urls', 'user-auth'), namespace='user-auth')),
    # Customer profile and favorites
    path('api/user/', include('apps.users.urls')),
    path('api/user/', include('apps.favorites.urls')),
    # Catalogue and bookings
    path('api/', include('apps.packages.urls')),
    path('api/bookings/', include('apps.bookings.urls')),
    # Admin panel API
    path('api/admin/', include('apps.packages.admin_urls')),
    path('api/admin/', include('apps.bookings.admin_urls')),
    # OpenAPI
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

handler404 = 'apps.core.views.route_not_found'
handler500 = 'apps.core.views.server_error'
