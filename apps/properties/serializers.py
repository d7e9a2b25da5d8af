"""Serializers for the properties domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.core.exceptions import InvalidFormat, InvalidRange
from apps.core.parsing import MAX_DB_INT, MAX_DB_SMALLINT
from apps.core.serializers import RequiredFieldsMixin

from .models import Property, PropertyAvailability


class PropertySerializer(RequiredFieldsMixin, serializers.ModelSerializer):
    """Listing read/write serializer.

    Text fields are trimmed; the required ones are checked together so a
    request missing any of them fails with ``MISSING_REQUIRED_FIELDS``.
    """

    required_fields = ("title", "description", "location", "hostName", "hostAvatar")
    missing_code = "MISSING_REQUIRED_FIELDS"

    title = serializers.CharField(max_length=255, allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    location = serializers.CharField(max_length=255, allow_blank=True)
    hostName = serializers.CharField(source="host_name", max_length=255, allow_blank=True)
    hostAvatar = serializers.CharField(source="host_avatar", max_length=500, allow_blank=True)
    price = serializers.IntegerField()
    bedrooms = serializers.IntegerField()
    bathrooms = serializers.IntegerField()
    guests = serializers.IntegerField()
    rating = serializers.FloatField(default=0)
    reviews = serializers.IntegerField(default=0)
    images = serializers.ListField(child=serializers.CharField())
    amenities = serializers.ListField(child=serializers.CharField(), default=list)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Property
        fields = [
            "id",
            "title",
            "description",
            "location",
            "price",
            "images",
            "bedrooms",
            "bathrooms",
            "guests",
            "amenities",
            "rating",
            "reviews",
            "hostName",
            "hostAvatar",
            "createdAt",
        ]
        read_only_fields = ["id", "createdAt"]

    def _not_empty(self, value: str) -> str:
        if not value:
            raise InvalidFormat(
                "Title, description, location and host fields cannot be empty",
                "EMPTY_FIELDS",
            )
        return value

    validate_title = _not_empty
    validate_description = _not_empty
    validate_location = _not_empty
    validate_hostName = _not_empty
    validate_hostAvatar = _not_empty

    def validate_price(self, value: int) -> int:
        if not 0 < value <= MAX_DB_INT:
            raise InvalidRange("Price must be a positive number", "INVALID_PRICE")
        return value

    def validate_bedrooms(self, value: int) -> int:
        if not 0 <= value <= MAX_DB_SMALLINT:
            raise InvalidRange("Bedrooms must be a non-negative number", "INVALID_BEDROOMS")
        return value

    def validate_bathrooms(self, value: int) -> int:
        if not 0 <= value <= MAX_DB_SMALLINT:
            raise InvalidRange("Bathrooms must be a non-negative number", "INVALID_BATHROOMS")
        return value

    def validate_guests(self, value: int) -> int:
        if not 0 < value <= MAX_DB_SMALLINT:
            raise InvalidRange("Guests must be a positive number", "INVALID_GUESTS")
        return value

    def validate_rating(self, value: float) -> float:
        if not 0 <= value <= 5:
            raise InvalidRange("Rating must be between 0 and 5", "INVALID_RATING")
        return value

    def validate_reviews(self, value: int) -> int:
        if not 0 <= value <= MAX_DB_INT:
            raise InvalidRange("Reviews must be a non-negative number", "INVALID_REVIEWS")
        return value

    def validate_images(self, value: list) -> list:
        if not value:
            raise InvalidFormat("Images must be a non-empty array", "INVALID_IMAGES")
        return value


class PropertyAvailabilitySerializer(serializers.ModelSerializer):
    """Ledger record as returned by the availability endpoints."""

    propertyId = serializers.IntegerField(source="property_id", read_only=True)
    isAvailable = serializers.BooleanField(source="is_available", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = PropertyAvailability
        fields = [
            "id",
            "propertyId",
            "date",
            "isAvailable",
            "price",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
