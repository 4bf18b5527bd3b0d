"""DRF exception handler producing the ``{"success": false, ...}`` envelope."""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status  # type: ignore
from rest_framework.exceptions import ValidationError  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


def _first_message(detail: Any) -> str:
    """Return the first human readable message from a DRF error structure."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return "Validation failed"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Validation failed"
    return str(detail)


def api_exception_handler(exc: Exception, context: dict) -> Response:
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        view_name = view.__class__.__name__ if view else "unknown view"
        logger.error(f"Unhandled API error in {view_name}: {exc}", exc_info=exc)
        return Response(
            {"success": False, "message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    data = response.data
    if isinstance(exc, ValidationError):
        payload: dict[str, Any] = {"success": False, "message": _first_message(data)}
        if isinstance(data, dict):
            payload["errors"] = data
    else:
        detail = data.get("detail", data) if isinstance(data, dict) else data
        payload = {"success": False, "message": _first_message(detail)}

    response.data = payload
    return response
