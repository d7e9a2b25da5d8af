"""URL routing for the availability ledger."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import AvailabilityDetailView, AvailabilityListView, AvailabilityReserveView

urlpatterns = [
    path("", AvailabilityListView.as_view(), name="availability-list"),
    path("reserve/", AvailabilityReserveView.as_view(), name="availability-reserve"),
    path("<str:pk>/", AvailabilityDetailView.as_view(), name="availability-detail"),
]
