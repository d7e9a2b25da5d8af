"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date

from django.conf import settings
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.properties.models import PropertyAvailability
from apps.properties.tests.test_property_api import make_property


class BookingCreateTests(APITestCase):
    """Covers validation order, pricing and persistence."""

    def setUp(self) -> None:
        self.property = make_property(price=850, guests=8)
        self.list_url = reverse("booking-list")

    def _payload(self, **overrides) -> dict:
        payload = {
            "propertyId": self.property.id,
            "checkIn": "2025-12-20",
            "checkOut": "2025-12-23",
            "guests": 4,
            "guestName": "  John Doe ",
            "guestEmail": " John@Example.com ",
        }
        payload.update(overrides)
        return payload

    def _post(self, **overrides):  # type: ignore
        return self.client.post(self.list_url, self._payload(**overrides), format="json")

    def test_create_booking_derives_price_from_nights(self) -> None:
        response = self._post()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["totalPrice"], 2550)
        self.assertEqual(response.data["guestName"], "John Doe")
        self.assertEqual(response.data["guestEmail"], "john@example.com")
        self.assertEqual(response.data["checkIn"], "2025-12-20")
        self.assertEqual(response.data["checkOut"], "2025-12-23")
        self.assertIsNotNone(response.data["createdAt"])

        booking = Booking.objects.get()
        self.assertEqual(booking.check_in, date(2025, 12, 20))
        self.assertEqual(booking.total_price, 2550)

    def test_three_night_stay_at_850(self) -> None:
        response = self._post(
            checkIn="2025-06-01",
            checkOut="2025-06-04",
            guestName="Jane Doe",
            guestEmail="jane@x.com",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["totalPrice"], 3 * 850)

    def test_client_ids_and_timestamps_are_ignored(self) -> None:
        response = self._post(id=777, createdAt="1999-01-01T00:00:00Z")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertNotEqual(response.data["id"], 777)
        self.assertFalse(response.data["createdAt"].startswith("1999"))

    def test_partial_nights_round_up(self) -> None:
        response = self._post(checkIn="2025-12-20T15:00:00Z", checkOut="2025-12-22T10:00:00Z")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["totalPrice"], 2 * 850)
        self.assertEqual(response.data["checkOut"], "2025-12-22")

    def test_supplied_total_price_is_used_verbatim(self) -> None:
        response = self._post(totalPrice=100)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["totalPrice"], 100)

    def test_zero_total_price_falls_back_to_derived(self) -> None:
        response = self._post(totalPrice=0)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["totalPrice"], 2550)

    def test_total_price_beyond_column_range_rejected(self) -> None:
        response = self._post(totalPrice=10**20)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_TOTAL_PRICE")
        self.assertFalse(Booking.objects.exists())

    def test_property_id_beyond_column_range_rejected(self) -> None:
        response = self._post(propertyId=10**20)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_PROPERTY_ID")

    def test_non_object_body(self) -> None:
        response = self.client.post(self.list_url, [1, 2], format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_JSON")

    def test_negative_total_price_rejected(self) -> None:
        response = self._post(totalPrice=-5)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_TOTAL_PRICE")

    def test_exceeds_capacity_names_the_limit(self) -> None:
        response = self._post(guests=10)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "EXCEEDS_CAPACITY")
        self.assertIn("8", response.data["error"])
        self.assertFalse(Booking.objects.exists())

    def test_reversed_dates_rejected(self) -> None:
        response = self._post(checkIn="2025-12-23", checkOut="2025-12-20")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_DATE_RANGE")

    def test_same_day_stay_rejected(self) -> None:
        response = self._post(checkIn="2025-12-20T08:00:00Z", checkOut="2025-12-20T20:00:00Z")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_DATE_RANGE")

    def test_same_calendar_date_rejected(self) -> None:
        response = self._post(checkIn="2025-12-20", checkOut="2025-12-20")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_DATE_RANGE")
        self.assertFalse(Booking.objects.exists())

    def test_overnight_stay_with_utc_offset(self) -> None:
        response = self._post(checkIn="2025-06-01T22:00:00-05:00", checkOut="2025-06-02T10:00:00-05:00")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["checkIn"], "2025-06-01")
        self.assertEqual(response.data["checkOut"], "2025-06-02")
        self.assertEqual(response.data["totalPrice"], 850)

    def test_offset_dates_match_billed_nights(self) -> None:
        response = self._post(checkIn="2025-06-01T20:00:00-05:00", checkOut="2025-06-04T10:00:00-05:00")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["checkIn"], "2025-06-01")
        self.assertEqual(response.data["checkOut"], "2025-06-04")
        self.assertEqual(response.data["totalPrice"], 3 * 850)

    def test_validation_errors(self) -> None:
        cases = [
            ({"guestEmail": None}, status.HTTP_400_BAD_REQUEST, "MISSING_REQUIRED_FIELDS"),
            ({"guestName": "   "}, status.HTTP_400_BAD_REQUEST, "EMPTY_GUEST_NAME"),
            ({"guestEmail": "not-an-email"}, status.HTTP_400_BAD_REQUEST, "INVALID_EMAIL"),
            ({"guests": 0}, status.HTTP_400_BAD_REQUEST, "INVALID_GUESTS"),
            ({"guests": "two"}, status.HTTP_400_BAD_REQUEST, "INVALID_GUESTS"),
            ({"propertyId": "abc"}, status.HTTP_400_BAD_REQUEST, "INVALID_PROPERTY_ID"),
            ({"propertyId": 9999}, status.HTTP_404_NOT_FOUND, "PROPERTY_NOT_FOUND"),
            ({"checkIn": "someday"}, status.HTTP_400_BAD_REQUEST, "INVALID_DATE"),
        ]
        for overrides, expected_status, code in cases:
            with self.subTest(code=code, overrides=overrides):
                response = self._post(**overrides)
                self.assertEqual(response.status_code, expected_status)
                self.assertEqual(response.data["code"], code)
        self.assertFalse(Booking.objects.exists())

    def test_missing_field_checked_before_other_errors(self) -> None:
        payload = self._payload(guestEmail="bad", guests=-1)
        del payload["checkOut"]
        response = self.client.post(self.list_url, payload, format="json")
        self.assertEqual(response.data["code"], "MISSING_REQUIRED_FIELDS")

    def test_ledger_untouched_by_default(self) -> None:
        PropertyAvailability.objects.create(property=self.property, date="2025-12-21", is_available=False)
        response = self._post()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(PropertyAvailability.objects.count(), 1)


@override_settings(RENTALS={**settings.RENTALS, "BOOKING_RESERVES_AVAILABILITY": True})
class BookingReservesAvailabilityTests(APITestCase):
    def setUp(self) -> None:
        self.property = make_property(price=100, guests=2)
        self.list_url = reverse("booking-list")
        self.payload = {
            "propertyId": self.property.id,
            "checkIn": "2026-01-10",
            "checkOut": "2026-01-12",
            "guests": 2,
            "guestName": "Ann Lee",
            "guestEmail": "ann@example.com",
        }

    def test_booking_blocks_its_nights(self) -> None:
        response = self.client.post(self.list_url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        blocked = PropertyAvailability.objects.filter(property=self.property, is_available=False)
        self.assertEqual(sorted(blocked.values_list("date", flat=True)), ["2026-01-10", "2026-01-11"])

    def test_overlapping_booking_conflicts(self) -> None:
        self.client.post(self.list_url, self.payload, format="json")
        response = self.client.post(
            self.list_url,
            {**self.payload, "checkIn": "2026-01-11", "checkOut": "2026-01-13"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "DATES_UNAVAILABLE")
        self.assertEqual(Booking.objects.count(), 1)
        self.assertFalse(PropertyAvailability.objects.filter(date="2026-01-12").exists())

    def test_adjacent_booking_allowed(self) -> None:
        self.client.post(self.list_url, self.payload, format="json")
        response = self.client.post(
            self.list_url,
            {**self.payload, "checkIn": "2026-01-12", "checkOut": "2026-01-14"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_existing_booking_without_ledger_rows_blocks_overlap(self) -> None:
        Booking.objects.create(
            property=self.property,
            check_in=date(2026, 1, 11),
            check_out=date(2026, 1, 13),
            guests=1,
            total_price=200,
            guest_name="Earlier Guest",
            guest_email="earlier@example.com",
        )
        response = self.client.post(self.list_url, self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "DATES_UNAVAILABLE")
        self.assertEqual(Booking.objects.count(), 1)
        self.assertFalse(PropertyAvailability.objects.exists())


class BookingReadTests(APITestCase):
    def setUp(self) -> None:
        self.property = make_property()
        self.other = make_property(title="Other")
        self.booking = Booking.objects.create(
            property=self.property,
            check_in=date(2025, 5, 1),
            check_out=date(2025, 5, 4),
            guests=2,
            total_price=2550,
            guest_name="John Doe",
            guest_email="john@example.com",
        )
        Booking.objects.create(
            property=self.other,
            check_in=date(2025, 5, 1),
            check_out=date(2025, 5, 2),
            guests=1,
            total_price=850,
            guest_name="Jane Roe",
            guest_email="jane@example.com",
        )

    def test_list_filters(self) -> None:
        response = self.client.get(reverse("booking-list"), {"guestEmail": " JOHN@example.com "})
        self.assertEqual([item["id"] for item in response.data], [self.booking.id])

        response = self.client.get(reverse("booking-list"), {"propertyId": self.other.id})
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response["X-Total-Count"], "1")

    def test_retrieve_and_delete(self) -> None:
        url = reverse("booking-detail", args=[self.booking.id])
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["propertyId"], self.property.id)

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"message": "Booking deleted successfully", "id": self.booking.id})

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "BOOKING_NOT_FOUND")
