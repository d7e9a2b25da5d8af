"""Serializers for the review domain."""

from __future__ import annotations

from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.bookings.models import Booking
from apps.core.exceptions import Conflict, InvalidRange, NotFound
from apps.core.parsing import MAX_DB_ID
from apps.core.serializers import RequiredFieldsMixin
from apps.properties.services import get_property
from apps.users.identity import resolve_user

from .models import Review

RATING_FIELDS = ("rating", "cleanliness", "accuracy", "checkIn", "communication", "location", "value")


class ReviewSerializer(RequiredFieldsMixin, serializers.ModelSerializer):
    """Review read/write serializer.

    The property, user and booking are fixed at creation; later updates
    may only change the ratings and the comment.
    """

    required_fields = ("propertyId", "userId", "bookingId", *RATING_FIELDS)
    create_only_fields = ("propertyId", "userId", "bookingId")

    propertyId = serializers.IntegerField(source="property_id", max_value=MAX_DB_ID)
    userId = serializers.IntegerField(source="user_id", max_value=MAX_DB_ID)
    bookingId = serializers.IntegerField(source="booking_id", max_value=MAX_DB_ID)
    rating = serializers.FloatField()
    cleanliness = serializers.IntegerField()
    accuracy = serializers.IntegerField()
    checkIn = serializers.IntegerField(source="check_in")
    communication = serializers.IntegerField()
    location = serializers.IntegerField()
    value = serializers.IntegerField()
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "propertyId",
            "userId",
            "bookingId",
            "rating",
            "cleanliness",
            "accuracy",
            "checkIn",
            "communication",
            "location",
            "value",
            "comment",
            "createdAt",
        ]
        read_only_fields = ["id", "createdAt"]

    def to_internal_value(self, data):  # type: ignore
        validated = super().to_internal_value(data)
        for name in RATING_FIELDS:
            field = self.fields[name]
            value = validated.get(field.source)
            if value is not None and not 1 <= value <= 5:
                raise InvalidRange(f"{name} must be a number between 1 and 5", "INVALID_RATING_RANGE")
        if validated.get("comment") is None and "comment" in validated:
            validated["comment"] = ""
        return validated

    def validate(self, attrs):  # type: ignore
        if self.instance is not None:
            return attrs
        attrs["property"] = get_property(attrs.pop("property_id"))
        attrs["user"] = resolve_user(self.context.get("request"), attrs.pop("user_id"))
        booking = Booking.objects.filter(pk=attrs.pop("booking_id")).first()
        if booking is None:
            raise NotFound("Booking not found", "BOOKING_NOT_FOUND")
        if Review.objects.filter(booking=booking).exists():
            raise Conflict("This booking has already been reviewed", "DUPLICATE_REVIEW")
        attrs["booking"] = booking
        return attrs

    def create(self, validated_data):  # type: ignore
        try:
            with transaction.atomic():
                return super().create(validated_data)
        except IntegrityError:
            raise Conflict("This booking has already been reviewed", "DUPLICATE_REVIEW")
