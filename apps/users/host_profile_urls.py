"""URL declarations for host profiles."""

from __future__ import annotations

from django.urls import path, include  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import HostProfileViewSet

router = DefaultRouter()
router.register(r'', HostProfileViewSet, basename='host-profile')

urlpatterns = [
    path('', include(router.urls)),
]
