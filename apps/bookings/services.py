"""Domain services for booking workflows."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore

from apps.core.exceptions import InvalidFormat, InvalidRange, MissingField
from apps.core.parsing import EMAIL_PATTERN, MAX_DB_INT, parse_instant, parse_int
from apps.properties import services as ledger
from shared.domain.value_objects import Stay

from .models import Booking

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("propertyId", "checkIn", "checkOut", "guests", "guestName", "guestEmail")


def _parse_stay(check_in, check_out) -> Stay:  # type: ignore
    try:
        start = parse_instant(check_in)
        end = parse_instant(check_out)
    except ValueError:
        raise InvalidFormat("Invalid check-in or check-out date", "INVALID_DATE")
    try:
        stay = Stay(start, end)
        # Stored bookings and the ledger count whole calendar days.
        stay.dates
    except ValueError:
        raise InvalidRange("Check-out date must be after check-in date", "INVALID_DATE_RANGE")
    return stay


def _total_price(raw_total, stay: Stay, nightly_price: int) -> int:  # type: ignore
    if not raw_total:
        total = stay.price_for(nightly_price)
    else:
        try:
            total = parse_int(raw_total)
        except ValueError:
            total = 0
    if not 0 < total <= MAX_DB_INT:
        raise InvalidRange("totalPrice must be a positive integer", "INVALID_TOTAL_PRICE")
    return total


def create_booking(data) -> Booking:  # type: ignore
    """Validate a raw booking request and persist it.

    Checks run in a fixed order and the first failure wins. Ids and
    timestamps in ``data`` are ignored.
    """

    ledger.require_object(data)

    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise MissingField(
            f"Missing required fields: {', '.join(missing)}",
            "MISSING_REQUIRED_FIELDS",
        )

    guest_name = data["guestName"]
    if not isinstance(guest_name, str):
        raise InvalidFormat("Guest name must be a string", "INVALID_GUEST_NAME")
    guest_name = guest_name.strip()
    if not guest_name:
        raise InvalidFormat("Guest name cannot be empty", "EMPTY_GUEST_NAME")

    guest_email = data["guestEmail"]
    guest_email = guest_email.strip() if isinstance(guest_email, str) else ""
    if not EMAIL_PATTERN.match(guest_email):
        raise InvalidFormat("Invalid email format", "INVALID_EMAIL")

    try:
        guests = parse_int(data["guests"])
    except ValueError:
        guests = 0
    if guests <= 0:
        raise InvalidRange("Number of guests must be a positive integer", "INVALID_GUESTS")

    prop = ledger.get_property(ledger.parse_property_id(data["propertyId"]))
    if guests > prop.guests:
        raise InvalidRange(
            f"Property can only accommodate {prop.guests} guests",
            "EXCEEDS_CAPACITY",
        )

    stay = _parse_stay(data["checkIn"], data["checkOut"])
    total_price = _total_price(data.get("totalPrice"), stay, prop.price)

    values = {
        "property": prop,
        "check_in": stay.check_in.date(),
        "check_out": stay.check_out.date(),
        "guests": guests,
        "total_price": total_price,
        "guest_name": guest_name,
        "guest_email": guest_email.lower(),
    }

    with transaction.atomic():
        if settings.RENTALS["BOOKING_RESERVES_AVAILABILITY"]:
            ledger.lock_property(prop)
            ledger.ensure_range_available(prop, stay.dates)
            booking = Booking.objects.create(**values)
            ledger.reserve_range(prop, stay.dates)
        else:
            booking = Booking.objects.create(**values)

    logger.info(
        "Booking %s created for property %s: %s night(s), total %s",
        booking.id,
        prop.id,
        stay.nights,
        total_price,
    )
    return booking
