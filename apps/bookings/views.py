"""API views for the booking domain."""

from __future__ import annotations

import django_filters  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.mixins import CodedLookupMixin, DeleteMessageMixin

from .models import Booking
from .serializers import BookingSerializer
from .services import create_booking


class BookingFilterSet(django_filters.FilterSet):
    propertyId = django_filters.NumberFilter(field_name="property_id")
    guestEmail = django_filters.CharFilter(method="filter_guest_email")

    class Meta:
        model = Booking
        fields = ["propertyId", "guestEmail"]

    def filter_guest_email(self, queryset, name, value):  # type: ignore
        return queryset.filter(guest_email=value.strip().lower())


class BookingViewSet(
    CodedLookupMixin,
    DeleteMessageMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Create, list, inspect and delete bookings."""

    queryset = Booking.objects.select_related("property").all()
    serializer_class = BookingSerializer
    filterset_class = BookingFilterSet
    not_found_code = "BOOKING_NOT_FOUND"
    not_found_message = "Booking not found"
    deleted_message = "Booking deleted successfully"

    def create(self, request, *args, **kwargs):  # type: ignore
        booking = create_booking(request.data)
        serializer = self.get_serializer(booking)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
