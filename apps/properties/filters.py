"""FilterSet definitions for property listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Property


class PropertyFilterSet(django_filters.FilterSet):
    """Location substring match and minimum capacity."""

    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    guests = django_filters.NumberFilter(field_name="guests", lookup_expr="gte")

    class Meta:
        model = Property
        fields = ["location", "guests"]
