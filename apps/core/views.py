"""Service-level views: root info, health check and JSON error pages."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.db import connection  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.views.decorators.csrf import csrf_exempt  # type: ignore
from django.views.decorators.http import require_http_methods  # type: ignore

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def api_root(request):
    return JsonResponse(
        {
            "success": True,
            "message": "Trip Holiday API Server",
            "version": settings.SPECTACULAR_SETTINGS["VERSION"],
            "endpoints": {
                "packages": "/api/packages",
                "admin": "/admin/",
                "admin_auth": "/api/auth/login",
                "user_auth": "/api/user/auth/login",
                "user_register": "/api/user/auth/register",
                "bookings": "/api/bookings",
                "docs": "/api/docs/",
            },
        }
    )


@csrf_exempt
@require_http_methods(["GET"])
def healthz(request):
    """Health check endpoint for container probes."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as exc:  # noqa: BLE001
        logger.error(f"Health check failed: {exc}", exc_info=True)
        return JsonResponse({"status": "unhealthy", "error": str(exc)}, status=503)
    return JsonResponse({"status": "healthy", "database": "connected"}, status=200)


def route_not_found(request, exception=None):
    return JsonResponse({"success": False, "message": "Route not found"}, status=404)


def server_error(request):
    return JsonResponse({"success": False, "message": "Internal Server Error"}, status=500)
