"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """Read representation. Creation goes through ``services.create_booking``."""

    propertyId = serializers.IntegerField(source="property_id", read_only=True)
    checkIn = serializers.DateField(source="check_in", read_only=True)
    checkOut = serializers.DateField(source="check_out", read_only=True)
    totalPrice = serializers.IntegerField(source="total_price", read_only=True)
    guestName = serializers.CharField(source="guest_name", read_only=True)
    guestEmail = serializers.EmailField(source="guest_email", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "propertyId",
            "checkIn",
            "checkOut",
            "guests",
            "totalPrice",
            "guestName",
            "guestEmail",
            "createdAt",
        ]
        read_only_fields = fields
