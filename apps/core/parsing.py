"""Input parsing helpers for raw JSON and query-string values."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone as dt_timezone

from django.utils import timezone  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")

# Column limits shared by every supported database backend.
MAX_DB_INT = 2_147_483_647
MAX_DB_SMALLINT = 32_767
MAX_DB_ID = 9_223_372_036_854_775_807


def parse_int(value) -> int:  # type: ignore
    """Coerce an integer-like JSON or query value.

    Raises ``ValueError`` for booleans, fractional numbers and strings that
    are not a plain run of digits.
    """
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, str) and _INT_PATTERN.match(value):
        return int(value)
    raise ValueError(f"not an integer: {value!r}")


def parse_id(value) -> int:  # type: ignore
    """Coerce a primary key; anything outside the id column range is invalid."""
    pk = parse_int(value)
    if not 0 < pk <= MAX_DB_ID:
        raise ValueError(f"id out of range: {value!r}")
    return pk


def is_iso_date(value) -> bool:  # type: ignore
    """Literal ``YYYY-MM-DD`` shape check; ``2024-13-40`` passes."""
    return isinstance(value, str) and bool(ISO_DATE_PATTERN.match(value))


def is_calendar_date(value) -> bool:  # type: ignore
    if not is_iso_date(value):
        return False
    try:
        return parse_date(value) is not None
    except ValueError:
        return False


def parse_calendar_date(value) -> date:  # type: ignore
    if not is_iso_date(value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return parsed


def parse_instant(value) -> datetime:  # type: ignore
    """Parse a ``YYYY-MM-DD`` or ISO-8601 datetime string into an aware datetime.

    Date-only values become midnight UTC, naive datetimes are taken as UTC.
    An explicit offset is kept, so ``.date()`` is the calendar date the
    caller wrote.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"not a date: {value!r}")
    text = value.strip()
    parsed_dt = parse_datetime(text)
    if parsed_dt is None:
        parsed_date = parse_date(text)
        if parsed_date is None:
            raise ValueError(f"not a date: {value!r}")
        parsed_dt = datetime.combine(parsed_date, time.min)
    if timezone.is_naive(parsed_dt):
        parsed_dt = timezone.make_aware(parsed_dt, dt_timezone.utc)
    return parsed_dt
