"""Availability ledger services.

All writes keyed by ``(property, date)`` go through ``update_or_create``
inside a transaction. The unique constraint on that pair makes the
create-or-update decision atomic: a concurrent insert loses at the
constraint and is retried as an update by Django.
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.core.exceptions import Conflict, InvalidFormat, InvalidRange, MissingField, NotFound
from apps.core.parsing import (
    MAX_DB_INT,
    is_calendar_date,
    is_iso_date,
    parse_calendar_date,
    parse_id,
    parse_int,
)
from shared.domain.value_objects import DateRange

from .models import Property, PropertyAvailability

logger = logging.getLogger(__name__)

_UNSET = object()


def _is_blank(value) -> bool:  # type: ignore
    return value is None or (isinstance(value, str) and value.strip() == "")


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def require_object(data) -> None:  # type: ignore
    if not hasattr(data, "get"):
        raise InvalidFormat("Request body must be a JSON object", "INVALID_JSON")


def parse_property_id(value) -> int:  # type: ignore
    try:
        return parse_id(value)
    except ValueError:
        raise InvalidFormat("Valid propertyId is required", "INVALID_PROPERTY_ID")


def get_property(property_id: int) -> Property:
    prop = Property.objects.filter(pk=property_id).first()
    if prop is None:
        raise NotFound("Property not found", "PROPERTY_NOT_FOUND")
    return prop


def check_ledger_date(value, *, calendar: bool = False) -> str:  # type: ignore
    """Validate a ledger date key and return it unchanged.

    Only the ``YYYY-MM-DD`` shape is enforced unless ``calendar`` is set or
    ``RENTALS["STRICT_CALENDAR_DATES"]`` is on.
    """

    strict = calendar or settings.RENTALS["STRICT_CALENDAR_DATES"]
    valid = is_calendar_date(value) if strict else is_iso_date(value)
    if not valid:
        raise InvalidFormat("Date must be in YYYY-MM-DD format", "INVALID_DATE_FORMAT")
    return value


def check_is_available(value) -> bool:  # type: ignore
    if not isinstance(value, bool):
        raise InvalidFormat("isAvailable must be a boolean", "INVALID_IS_AVAILABLE")
    return value


def check_price(value) -> int | None:  # type: ignore
    if value is None:
        return None
    try:
        price = parse_int(value)
    except ValueError:
        price = -1
    if not 0 <= price <= MAX_DB_INT:
        raise InvalidRange("Price must be a non-negative integer", "INVALID_PRICE")
    return price


def find_availability(property_id, start_date=None, end_date=None):  # type: ignore
    """Ledger records of one property, optionally bounded (both inclusive)."""

    if _is_blank(property_id):
        raise MissingField("propertyId is required", "MISSING_PROPERTY_ID")
    prop = get_property(parse_property_id(property_id))

    queryset = PropertyAvailability.objects.filter(property=prop)
    if not _is_blank(start_date):
        queryset = queryset.filter(date__gte=check_ledger_date(start_date))
    if not _is_blank(end_date):
        queryset = queryset.filter(date__lte=check_ledger_date(end_date))
    return queryset.order_by("date", "id")


def upsert_availability(data) -> tuple[PropertyAvailability, bool]:  # type: ignore
    """Create or replace the record for ``(propertyId, date)``.

    An omitted ``price`` resets the override to the base price.
    """

    require_object(data)
    if _is_blank(data.get("propertyId")):
        raise MissingField("propertyId is required", "MISSING_PROPERTY_ID")
    if _is_blank(data.get("date")):
        raise MissingField("date is required", "MISSING_DATE")
    if data.get("isAvailable") is None:
        raise MissingField("isAvailable is required", "MISSING_IS_AVAILABLE")

    property_id = parse_property_id(data["propertyId"])
    day = check_ledger_date(data["date"])
    is_available = check_is_available(data["isAvailable"])
    price = check_price(data.get("price"))
    prop = get_property(property_id)

    try:
        with transaction.atomic():
            record, created = PropertyAvailability.objects.update_or_create(
                property=prop,
                date=day,
                defaults={"is_available": is_available, "price": price},
            )
    except IntegrityError as exc:
        logger.warning("Availability upsert for property %s on %s lost a race: %s", prop.id, day, exc)
        raise Conflict("Availability record changed concurrently, retry the request", "AVAILABILITY_CONFLICT")

    logger.info(
        "Availability %s for property %s on %s (available=%s, price=%s)",
        "created" if created else "updated",
        prop.id,
        day,
        is_available,
        price,
    )
    return record, created


def parse_record_id(value) -> int:  # type: ignore
    try:
        return parse_id(value)
    except ValueError:
        raise InvalidFormat("Valid ID is required", "INVALID_ID")


def get_availability(record_id) -> PropertyAvailability:  # type: ignore
    record = (
        PropertyAvailability.objects.select_related("property")
        .filter(pk=parse_record_id(record_id))
        .first()
    )
    if record is None:
        raise NotFound("Availability record not found", "RECORD_NOT_FOUND")
    return record


@transaction.atomic
def update_availability(record_id, data) -> PropertyAvailability:  # type: ignore
    """Change only the supplied fields of one record."""

    pk = parse_record_id(record_id)
    require_object(data)
    is_available = data.get("isAvailable", _UNSET)
    price = data.get("price", _UNSET)
    if is_available is _UNSET and price is _UNSET:
        raise MissingField("Provide isAvailable or price to update", "NO_FIELDS_TO_UPDATE")

    changes = {}
    if is_available is not _UNSET:
        changes["is_available"] = check_is_available(is_available)
    if price is not _UNSET:
        changes["price"] = check_price(price)

    record = _lock_queryset_if_possible(PropertyAvailability.objects.filter(pk=pk)).first()
    if record is None:
        raise NotFound("Availability record not found", "RECORD_NOT_FOUND")
    for field, value in changes.items():
        setattr(record, field, value)
    record.save(update_fields=[*changes, "updated_at"])
    logger.info("Availability record %s updated: %s", record.id, changes)
    return record


@transaction.atomic
def delete_availability(record_id) -> PropertyAvailability:  # type: ignore
    record = get_availability(record_id)
    deleted_id = record.id
    record.delete()
    # Keep the id on the returned instance for the response body.
    record.id = deleted_id
    logger.info("Availability record %s deleted", deleted_id)
    return record


def parse_reserve_request(data) -> tuple[Property, DateRange]:  # type: ignore
    require_object(data)
    if _is_blank(data.get("propertyId")):
        raise MissingField("propertyId is required", "MISSING_PROPERTY_ID")
    if _is_blank(data.get("startDate")) or _is_blank(data.get("endDate")):
        raise MissingField("startDate and endDate are required", "MISSING_DATE")

    property_id = parse_property_id(data["propertyId"])
    start = parse_calendar_date(check_ledger_date(data["startDate"], calendar=True))
    end = parse_calendar_date(check_ledger_date(data["endDate"], calendar=True))
    if end <= start:
        raise InvalidRange("endDate must be after startDate", "INVALID_DATE_RANGE")
    return get_property(property_id), DateRange(start, end)


def lock_property(prop: Property) -> Property:
    """Re-read ``prop`` under a row lock held until the transaction ends.

    Writers that reserve nights of one property queue up on this lock, so
    nights without a ledger row cannot be claimed twice.
    """

    return _lock_queryset_if_possible(Property.objects.filter(pk=prop.pk)).get()


def ensure_range_available(prop: Property, dates: DateRange) -> None:
    """Raise ``DATES_UNAVAILABLE`` when any night of ``dates`` is taken.

    A night is taken when its ledger row is unavailable or an existing
    booking covers it. Call inside a transaction after ``lock_property``.
    """

    from apps.bookings.models import Booking  # Local import to prevent circular dependency

    overlapping = Booking.objects.filter(
        property=prop,
        check_in__lt=dates.end_date,
        check_out__gt=dates.start_date,
    )
    if overlapping.exists():
        raise Conflict("Property is already booked for the selected dates", "DATES_UNAVAILABLE")

    keys = [day.isoformat() for day in dates.days()]
    records = _lock_queryset_if_possible(
        PropertyAvailability.objects.filter(property=prop, date__in=keys)
    )
    blocked = sorted(record.date for record in records if not record.is_available)
    if blocked:
        raise Conflict(
            f"Property is not available on: {', '.join(blocked)}",
            "DATES_UNAVAILABLE",
        )


@transaction.atomic
def reserve_range(prop: Property, dates: DateRange) -> list[PropertyAvailability]:
    """Mark every night of ``dates`` unavailable, keeping price overrides."""

    lock_property(prop)
    records = []
    for day in dates.days():
        record, _ = PropertyAvailability.objects.update_or_create(
            property=prop,
            date=day.isoformat(),
            defaults={"is_available": False},
        )
        records.append(record)
    logger.info("Reserved %s night(s) for property %s: %s", len(records), prop.id, dates)
    return records
