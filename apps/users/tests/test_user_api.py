"""Tests for the user API and identity resolution."""

from __future__ import annotations

from django.conf import settings
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.core.exceptions import InvalidFormat, NotFound
from apps.users.identity import DemoIdentityResolver, IdentityResolver, get_identity_resolver, resolve_user
from apps.users.models import User


class UserAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="Host@Example.com ", name="Sarah", user_type="host")

    def test_create_user_normalizes_email(self) -> None:
        response = self.client.post(
            reverse("user-list"),
            {"email": "New.Guest@Example.com", "name": "New Guest"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["email"], "new.guest@example.com")
        self.assertEqual(response.data["userType"], "guest")

    def test_duplicate_email_conflicts(self) -> None:
        response = self.client.post(
            reverse("user-list"),
            {"email": "HOST@example.com", "name": "Someone"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "DUPLICATE_EMAIL")

    def test_invalid_email(self) -> None:
        response = self.client.post(reverse("user-list"), {"email": "nope", "name": "X"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_EMAIL")

    def test_missing_name(self) -> None:
        response = self.client.post(reverse("user-list"), {"email": "a@b.co"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "MISSING_NAME")

    def test_filter_by_user_type(self) -> None:
        User.objects.create_user(email="guest@example.com", name="Guest")
        response = self.client.get(reverse("user-list"), {"userType": "host"})
        self.assertEqual([item["id"] for item in response.data], [self.user.id])

    def test_update_keeps_own_email(self) -> None:
        response = self.client.patch(
            reverse("user-detail", args=[self.user.id]),
            {"email": "host@example.com", "bio": "Superhost"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["bio"], "Superhost")

    def test_missing_user(self) -> None:
        response = self.client.delete(reverse("user-detail", args=[9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "USER_NOT_FOUND")


class StaticIdentityResolver(IdentityResolver):
    def resolve(self, request, claimed_id):  # type: ignore
        return User.objects.order_by("id").first()


class IdentityResolverTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="guest@example.com", name="Guest")

    def test_demo_resolver_trusts_claimed_id(self) -> None:
        self.assertEqual(resolve_user(None, str(self.user.id)), self.user)

    def test_demo_resolver_errors(self) -> None:
        with self.assertRaises(NotFound):
            resolve_user(None, 9999)
        with self.assertRaises(InvalidFormat):
            resolve_user(None, "me")
        with self.assertRaises(InvalidFormat):
            resolve_user(None, 10**20)

    def test_default_resolver(self) -> None:
        self.assertIsInstance(get_identity_resolver(), DemoIdentityResolver)

    def test_resolver_is_configurable(self) -> None:
        path = f"{__name__}.StaticIdentityResolver"
        with override_settings(RENTALS={**settings.RENTALS, "IDENTITY_RESOLVER": path}):
            self.assertEqual(resolve_user(None, 9999), self.user)
