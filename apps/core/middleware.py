"""Request logging middleware."""

from __future__ import annotations

import logging
import time
import uuid

import structlog

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Bind a request id to the logging context and log one line per request."""

    header = "HTTP_X_REQUEST_ID"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get(self.header) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.path,
        )
        started = time.monotonic()
        try:
            response = self.get_response(request)
            duration_ms = int((time.monotonic() - started) * 1000)
            response["X-Request-ID"] = request_id
            structlog.contextvars.bind_contextvars(status=response.status_code, duration_ms=duration_ms)
            logger.info("request finished")
            return response
        finally:
            structlog.contextvars.clear_contextvars()
