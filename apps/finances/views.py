"""API views for payment transactions."""

from __future__ import annotations

import logging

import django_filters  # type: ignore
from rest_framework import viewsets  # type: ignore

from apps.core.mixins import CodedLookupMixin, DeleteMessageMixin

from .models import Transaction
from .serializers import TransactionSerializer

logger = logging.getLogger(__name__)


class TransactionFilterSet(django_filters.FilterSet):
    bookingId = django_filters.NumberFilter(field_name="booking_id")
    userId = django_filters.NumberFilter(field_name="user_id")
    status = django_filters.ChoiceFilter(choices=Transaction.Status.choices)

    class Meta:
        model = Transaction
        fields = ["bookingId", "userId", "status"]


class TransactionViewSet(CodedLookupMixin, DeleteMessageMixin, viewsets.ModelViewSet):
    """Viewset for managing transaction records."""

    queryset = Transaction.objects.select_related("booking", "user").all()
    serializer_class = TransactionSerializer
    filterset_class = TransactionFilterSet
    not_found_code = "TRANSACTION_NOT_FOUND"
    not_found_message = "Transaction not found"
    deleted_message = "Transaction deleted successfully"

    def perform_create(self, serializer):  # type: ignore
        tx = serializer.save()
        logger.info(
            "Transaction %s recorded for booking %s: %s %s (%s)",
            tx.id,
            tx.booking_id,
            tx.amount,
            tx.currency,
            tx.status,
        )

    def perform_update(self, serializer):  # type: ignore
        tx = serializer.save()
        logger.info("Transaction %s is now %s", tx.id, tx.status)

    def update(self, request, *args, **kwargs):  # type: ignore
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)
