"""Limit/offset pagination returning bare JSON arrays."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework.pagination import LimitOffsetPagination  # type: ignore
from rest_framework.response import Response  # type: ignore


class LimitOffsetListPagination(LimitOffsetPagination):
    """``?limit=&offset=`` paging; the body is the page itself.

    The total number of matching rows is exposed in ``X-Total-Count``.
    Non-numeric parameters fall back to the defaults and ``limit`` is
    clamped to ``max_limit``.
    """

    default_setting = "LIST_PAGE_SIZE"

    def __init__(self) -> None:
        rentals = settings.RENTALS
        self.default_limit = rentals[self.default_setting]
        self.max_limit = rentals["MAX_PAGE_SIZE"]

    def get_paginated_response(self, data):  # type: ignore
        return Response(data, headers={"X-Total-Count": str(self.count)})

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {"type": "array", "items": schema}


class AvailabilityPagination(LimitOffsetListPagination):
    default_setting = "AVAILABILITY_PAGE_SIZE"
