"""API error taxonomy and the DRF exception handler.

Every failure leaving the API has the shape ``{"error": ..., "code": ...}``.
Domain code raises one of the error kinds below with a stable machine
code; the handler renders them and turns anything unexpected into a 500.
"""

from __future__ import annotations

import logging
import re

from django.core.exceptions import PermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import set_rollback  # type: ignore

logger = logging.getLogger(__name__)


class ApiError(exceptions.APIException):
    """Base class for errors that carry a stable machine-readable code."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "error"
    default_code = "ERROR"
    default_detail = "Request failed."

    def __init__(self, message: str | None = None, code: str | None = None) -> None:
        self.message = message or str(self.default_detail)
        self.error_code = code or self.default_code
        super().__init__(detail=self.message, code=self.error_code)

    def as_payload(self) -> dict[str, str]:
        return {"error": self.message, "code": self.error_code}


class MissingField(ApiError):
    """A required input is absent."""

    kind = "missing_field"
    default_code = "MISSING_REQUIRED_FIELDS"
    default_detail = "Missing required fields"


class InvalidFormat(ApiError):
    """An input is present but malformed."""

    kind = "invalid_format"
    default_code = "INVALID_FORMAT"
    default_detail = "Invalid input format"


class InvalidRange(ApiError):
    """An input is well formed but outside its allowed bounds."""

    kind = "invalid_range"
    default_code = "INVALID_RANGE"
    default_detail = "Value out of range"


class NotFound(ApiError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "NOT_FOUND"
    default_detail = "Not found"


class Conflict(ApiError):
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT
    default_code = "CONFLICT"
    default_detail = "Conflicting state"


class InternalError(ApiError):
    kind = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "INTERNAL_ERROR"
    default_detail = "Internal server error"


_MISSING_CODES = {"required", "null", "blank"}


def field_code(field: str) -> str:
    """``guestEmail`` -> ``GUEST_EMAIL``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", field).upper()


def _first_error(detail):  # type: ignore
    """Return (field, ErrorDetail) of the first failure in a DRF detail tree."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            inner_field, inner = _first_error(value)
            return (field if inner_field is None else inner_field), inner
    if isinstance(detail, list) and detail:
        return _first_error(detail[0])
    return None, detail


def _validation_payload(exc: exceptions.ValidationError) -> dict:
    field, error = _first_error(exc.detail)
    message = str(error)
    if field is None or field == "non_field_errors":
        code = getattr(error, "code", None)
        code = code.upper() if isinstance(code, str) and code != "invalid" else "VALIDATION_ERROR"
        payload = {"error": message, "code": code}
    else:
        prefix = "MISSING" if getattr(error, "code", None) in _MISSING_CODES else "INVALID"
        payload = {"error": f"{field}: {message}", "code": f"{prefix}_{field_code(field)}"}
    if isinstance(exc.detail, dict):
        payload["fields"] = exc.detail
    return payload


def api_exception_handler(exc, context):  # type: ignore
    """Render every exception raised inside a DRF view as ``{error, code}``."""

    if isinstance(exc, Http404):
        exc = NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, ApiError):
        payload = exc.as_payload()
    elif isinstance(exc, exceptions.ValidationError):
        payload = _validation_payload(exc)
    elif isinstance(exc, exceptions.ParseError):
        payload = {"error": str(exc.detail), "code": "INVALID_JSON"}
    elif isinstance(exc, exceptions.APIException):
        codes = exc.get_codes()
        code = codes.upper() if isinstance(codes, str) else "ERROR"
        payload = {"error": str(exc.detail), "code": code}
    else:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s: %s",
            view.__class__.__name__ if view is not None else "unknown view",
            exc,
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {"error": f"Internal server error: {exc}", "code": InternalError.default_code},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    headers = {}
    if getattr(exc, "auth_header", None):
        headers["WWW-Authenticate"] = exc.auth_header
    if getattr(exc, "wait", None):
        headers["Retry-After"] = "%d" % exc.wait

    if exc.status_code >= 500:
        logger.error("API error %s: %s", payload["code"], payload["error"])
    else:
        logger.info("API error %s: %s", payload["code"], payload["error"])

    set_rollback()
    return Response(payload, status=exc.status_code, headers=headers)
