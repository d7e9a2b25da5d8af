"""Serializers for the finance domain (transactions)."""

from __future__ import annotations

from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.bookings.models import Booking
from apps.core.exceptions import Conflict, InvalidRange, NotFound
from apps.core.parsing import MAX_DB_ID, MAX_DB_INT
from apps.core.serializers import RequiredFieldsMixin
from apps.users.identity import resolve_user

from .models import Transaction


class TransactionSerializer(RequiredFieldsMixin, serializers.ModelSerializer):
    """Transaction record. After creation only status and method change."""

    required_fields = ("bookingId", "userId", "amount", "status")
    create_only_fields = ("bookingId", "userId", "amount", "currency", "transactionId")

    bookingId = serializers.IntegerField(source="booking_id", max_value=MAX_DB_ID)
    userId = serializers.IntegerField(source="user_id", max_value=MAX_DB_ID)
    amount = serializers.IntegerField(max_value=MAX_DB_INT)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Transaction.Status.choices)
    paymentMethod = serializers.CharField(
        source="payment_method",
        max_length=50,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    transactionId = serializers.CharField(
        source="transaction_id",
        max_length=100,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Transaction
        fields = [
            "id",
            "bookingId",
            "userId",
            "amount",
            "currency",
            "status",
            "paymentMethod",
            "transactionId",
            "createdAt",
        ]
        read_only_fields = ["id", "createdAt"]

    def validate_amount(self, value: int) -> int:
        if value <= 0:
            raise InvalidRange("amount must be a positive integer", "INVALID_AMOUNT")
        return value

    def validate_paymentMethod(self, value):  # type: ignore
        return value or ""

    def validate(self, attrs):  # type: ignore
        if self.instance is not None:
            return attrs
        booking = Booking.objects.filter(pk=attrs.pop("booking_id")).first()
        if booking is None:
            raise NotFound("Booking not found", "BOOKING_NOT_FOUND")
        attrs["booking"] = booking
        attrs["user"] = resolve_user(self.context.get("request"), attrs.pop("user_id"))
        attrs["currency"] = (attrs.get("currency") or "USD").upper()
        external_id = attrs.get("transaction_id") or None
        if external_id and Transaction.objects.filter(transaction_id=external_id).exists():
            raise Conflict("transactionId already exists", "DUPLICATE_TRANSACTION_ID")
        attrs["transaction_id"] = external_id
        return attrs

    def create(self, validated_data):  # type: ignore
        try:
            with transaction.atomic():
                return super().create(validated_data)
        except IntegrityError:
            raise Conflict("transactionId already exists", "DUPLICATE_TRANSACTION_ID")
