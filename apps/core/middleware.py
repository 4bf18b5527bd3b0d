"""Request logging middleware."""

from __future__ import annotations

import logging
import re
import time
import uuid

import structlog

logger = logging.getLogger(__name__)

REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


class RequestLogMiddleware:
    """Binds a request id to the log context and logs each request.

    An incoming ``X-Request-ID`` is reused only when it is at most 64
    characters of letters, digits, ``.``, ``_`` or ``-``; otherwise a new
    id is generated.
    """

    header_name = "X-Request-ID"

    def __init__(self, get_response):
        self.get_response = get_response

    def get_request_id(self, request) -> str:
        incoming = request.headers.get(self.header_name, "")
        if REQUEST_ID_PATTERN.fullmatch(incoming):
            return incoming
        return uuid.uuid4().hex

    def __call__(self, request):
        request_id = self.get_request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        request.request_id = request_id

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        response[self.header_name] = request_id
        logger.info(
            f"{request.method} {request.path} {response.status_code} {duration_ms}ms"
        )
        structlog.contextvars.clear_contextvars()
        return response
