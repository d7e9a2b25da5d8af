"""API views for managing reviews."""

from __future__ import annotations

import logging

import django_filters  # type: ignore
from rest_framework import viewsets  # type: ignore

from apps.core.mixins import CodedLookupMixin, DeleteMessageMixin

from .models import Review
from .serializers import ReviewSerializer

logger = logging.getLogger(__name__)


class ReviewFilterSet(django_filters.FilterSet):
    propertyId = django_filters.NumberFilter(field_name="property_id")
    userId = django_filters.NumberFilter(field_name="user_id")
    bookingId = django_filters.NumberFilter(field_name="booking_id")

    class Meta:
        model = Review
        fields = ["propertyId", "userId", "bookingId"]


class ReviewViewSet(CodedLookupMixin, DeleteMessageMixin, viewsets.ModelViewSet):
    """Viewset for creating, retrieving, updating and deleting reviews."""

    queryset = Review.objects.select_related('property', 'user', 'booking').all()
    serializer_class = ReviewSerializer
    filterset_class = ReviewFilterSet
    not_found_code = "REVIEW_NOT_FOUND"
    not_found_message = "Review not found"
    deleted_message = "Review deleted successfully"

    def perform_create(self, serializer):  # type: ignore
        review = serializer.save()
        logger.info("Review %s created for booking %s", review.id, review.booking_id)

    def update(self, request, *args, **kwargs):  # type: ignore
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)
