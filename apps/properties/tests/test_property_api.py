"""Tests for property listing CRUD."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Property


def make_property(**overrides) -> Property:
    values = {
        "title": "Sea view loft",
        "description": "Bright loft two minutes from the beach",
        "location": "Malibu, California",
        "price": 850,
        "images": ["https://img.example.com/loft-1.jpg"],
        "bedrooms": 3,
        "bathrooms": 2,
        "guests": 8,
        "amenities": ["wifi", "pool"],
        "rating": 4.9,
        "reviews": 127,
        "host_name": "Sarah Johnson",
        "host_avatar": "https://img.example.com/sarah.jpg",
    }
    values.update(overrides)
    return Property.objects.create(**values)


class PropertyAPITests(APITestCase):
    def setUp(self) -> None:
        self.property = make_property()
        self.payload = {
            "title": "  Mountain cabin  ",
            "description": "Log cabin with a fireplace",
            "location": "Aspen, Colorado",
            "price": 420,
            "images": ["https://img.example.com/cabin.jpg"],
            "bedrooms": 2,
            "bathrooms": 1,
            "guests": 4,
            "amenities": ["fireplace"],
            "rating": 4.7,
            "reviews": 12,
            "hostName": "Mike Chen",
            "hostAvatar": "https://img.example.com/mike.jpg",
        }

    def test_create_property_trims_text(self) -> None:
        response = self.client.post(reverse("property-list"), self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["title"], "Mountain cabin")
        self.assertEqual(response.data["hostName"], "Mike Chen")
        self.assertEqual(response.data["guests"], 4)

    def test_missing_host_fields(self) -> None:
        del self.payload["hostName"]
        response = self.client.post(reverse("property-list"), self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "MISSING_REQUIRED_FIELDS")

    def test_blank_title_rejected(self) -> None:
        self.payload["title"] = "   "
        response = self.client.post(reverse("property-list"), self.payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "EMPTY_FIELDS")

    def test_numeric_rules(self) -> None:
        cases = [
            ("price", 0, "INVALID_PRICE"),
            ("price", "cheap", "INVALID_PRICE"),
            ("price", 10**20, "INVALID_PRICE"),
            ("guests", 40000, "INVALID_GUESTS"),
            ("guests", 0, "INVALID_GUESTS"),
            ("bedrooms", -1, "INVALID_BEDROOMS"),
            ("rating", 5.5, "INVALID_RATING"),
            ("images", [], "INVALID_IMAGES"),
            ("amenities", "wifi", "INVALID_AMENITIES"),
        ]
        for field, value, code in cases:
            with self.subTest(field=field, value=value):
                payload = {**self.payload, field: value}
                response = self.client.post(reverse("property-list"), payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["code"], code)
        self.assertEqual(Property.objects.count(), 1)

    def test_list_filters_and_total_header(self) -> None:
        make_property(title="City flat", location="Boston", guests=2)
        response = self.client.get(reverse("property-list"), {"location": "malibu"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [self.property.id])
        self.assertEqual(response["X-Total-Count"], "1")

        response = self.client.get(reverse("property-list"), {"guests": 3})
        self.assertEqual([item["id"] for item in response.data], [self.property.id])

    def test_list_limit_is_capped(self) -> None:
        response = self.client.get(reverse("property-list"), {"limit": 1000, "offset": "x"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_retrieve_missing_property(self) -> None:
        response = self.client.get(reverse("property-detail", args=[9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "PROPERTY_NOT_FOUND")

    def test_put_is_partial(self) -> None:
        response = self.client.put(
            reverse("property-detail", args=[self.property.id]),
            {"price": 900},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.property.refresh_from_db()
        self.assertEqual(self.property.price, 900)
        self.assertEqual(self.property.title, "Sea view loft")

    def test_delete_property(self) -> None:
        response = self.client.delete(reverse("property-detail", args=[self.property.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.property.id)
        self.assertFalse(Property.objects.exists())
