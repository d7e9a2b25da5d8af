"""Property and availability ledger API views."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.core.mixins import CodedLookupMixin, DeleteMessageMixin
from apps.core.pagination import AvailabilityPagination

from . import services
from .filters import PropertyFilterSet
from .models import Property
from .serializers import PropertyAvailabilitySerializer, PropertySerializer


class PropertyViewSet(CodedLookupMixin, DeleteMessageMixin, viewsets.ModelViewSet):
    """CRUD for listings. Updates are always partial."""

    queryset = Property.objects.all()
    serializer_class = PropertySerializer
    filterset_class = PropertyFilterSet
    not_found_code = "PROPERTY_NOT_FOUND"
    not_found_message = "Property not found"
    deleted_message = "Property deleted successfully"

    def update(self, request, *args, **kwargs):  # type: ignore
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)


class AvailabilityListView(APIView):
    """Range query (GET) and upsert by property and date (POST)."""

    pagination_class = AvailabilityPagination

    def get(self, request):  # type: ignore
        params = request.query_params
        queryset = services.find_availability(
            params.get("propertyId"),
            start_date=params.get("startDate"),
            end_date=params.get("endDate"),
        )
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(queryset, request, view=self)
        serializer = PropertyAvailabilitySerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def post(self, request):  # type: ignore
        record, created = services.upsert_availability(request.data)
        return Response(
            PropertyAvailabilitySerializer(record).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class AvailabilityDetailView(APIView):
    """Single ledger record by id."""

    def get(self, request, pk):  # type: ignore
        record = services.get_availability(pk)
        return Response(PropertyAvailabilitySerializer(record).data)

    def patch(self, request, pk):  # type: ignore
        record = services.update_availability(pk, request.data)
        return Response(PropertyAvailabilitySerializer(record).data)

    put = patch

    def delete(self, request, pk):  # type: ignore
        record = services.delete_availability(pk)
        return Response(
            {
                "message": "Availability record deleted successfully",
                "record": PropertyAvailabilitySerializer(record).data,
            },
            status=status.HTTP_200_OK,
        )


class AvailabilityReserveView(APIView):
    """Block out ``[startDate, endDate)`` for a property."""

    def post(self, request):  # type: ignore
        prop, dates = services.parse_reserve_request(request.data)
        records = services.reserve_range(prop, dates)
        return Response(PropertyAvailabilitySerializer(records, many=True).data)
