"""Tests for the request middleware and the API error handler."""

from __future__ import annotations

import io
import json
import logging

import structlog
from django.conf import settings
from django.test import SimpleTestCase
from rest_framework import exceptions, status
from rest_framework.test import APITestCase

from apps.core.exceptions import Conflict, api_exception_handler, field_code


class RequestIdTests(APITestCase):
    def test_health_echoes_request_id(self) -> None:
        response = self.client.get("/health/", HTTP_X_REQUEST_ID="abc123")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"status": "ok"})
        self.assertEqual(response["X-Request-ID"], "abc123")

    def test_request_id_generated(self) -> None:
        response = self.client.get("/health/")
        self.assertTrue(response["X-Request-ID"])

    def test_malformed_json_body(self) -> None:
        response = self.client.post(
            "/api/v1/bookings/", data="{not json", content_type="application/json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_JSON")

    def test_request_line_carries_status_and_duration_fields(self) -> None:
        json_formatter = settings.LOGGING["formatters"]["json"]
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=json_formatter["processors"],
                foreign_pre_chain=json_formatter["foreign_pre_chain"],
            )
        )
        middleware_logger = logging.getLogger("apps.core.middleware")
        middleware_logger.addHandler(handler)
        self.addCleanup(middleware_logger.removeHandler, handler)

        self.client.get("/health/", HTTP_X_REQUEST_ID="abc123")

        entry = json.loads(stream.getvalue().splitlines()[-1])
        self.assertEqual(entry["event"], "request finished")
        self.assertEqual(entry["request_id"], "abc123")
        self.assertEqual(entry["status"], 200)
        self.assertEqual(entry["path"], "/health/")
        self.assertIsInstance(entry["duration_ms"], int)


class ExceptionHandlerTests(SimpleTestCase):
    def test_domain_error_payload(self) -> None:
        response = api_exception_handler(Conflict("Taken", "DUPLICATE_EMAIL"), {})
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {"error": "Taken", "code": "DUPLICATE_EMAIL"})

    def test_validation_error_codes(self) -> None:
        missing = exceptions.ValidationError({"guestEmail": [exceptions.ErrorDetail("required", code="required")]})
        response = api_exception_handler(missing, {})
        self.assertEqual(response.data["code"], "MISSING_GUEST_EMAIL")

        invalid = exceptions.ValidationError({"price": [exceptions.ErrorDetail("bad", code="invalid")]})
        response = api_exception_handler(invalid, {})
        self.assertEqual(response.data["code"], "INVALID_PRICE")
        self.assertIn("price", response.data["fields"])

    def test_unexpected_error_becomes_internal_error(self) -> None:
        with self.assertLogs("apps.core.exceptions", level="ERROR"):
            response = api_exception_handler(RuntimeError("boom"), {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "Internal server error: boom", "code": "INTERNAL_ERROR"})

    def test_field_code(self) -> None:
        self.assertEqual(field_code("checkIn"), "CHECK_IN")
        self.assertEqual(field_code("price"), "PRICE")
