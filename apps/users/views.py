"""User API views."""

from __future__ import annotations

import logging

import django_filters  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.exceptions import InvalidFormat, NotFound
from apps.core.mixins import CodedLookupMixin, DeleteMessageMixin
from apps.core.parsing import parse_id

from .models import HostProfile, User
from .serializers import HostProfileSerializer, UserSerializer

logger = logging.getLogger(__name__)


class UserFilterSet(django_filters.FilterSet):
    email = django_filters.CharFilter(method="filter_email")
    userType = django_filters.ChoiceFilter(field_name="user_type", choices=User.UserType.choices)

    class Meta:
        model = User
        fields = ["email", "userType"]

    def filter_email(self, queryset, name, value):  # type: ignore
        return queryset.filter(email=User.objects.normalize_email(value))


class UserViewSet(CodedLookupMixin, DeleteMessageMixin, viewsets.ModelViewSet):
    """CRUD for marketplace members."""

    serializer_class = UserSerializer
    queryset = User.objects.all()
    filterset_class = UserFilterSet
    not_found_code = "USER_NOT_FOUND"
    not_found_message = "User not found"
    deleted_message = "User deleted successfully"

    def perform_create(self, serializer):  # type: ignore
        user = serializer.save()
        logger.info("User %s created (%s)", user.id, user.user_type)


class HostProfileViewSet(CodedLookupMixin, DeleteMessageMixin, viewsets.ModelViewSet):
    """Host profiles. The collection is queried by ``userId`` and returns one profile."""

    serializer_class = HostProfileSerializer
    queryset = HostProfile.objects.all()
    not_found_code = "PROFILE_NOT_FOUND"
    not_found_message = "Host profile not found"
    deleted_message = "Host profile deleted successfully"

    def list(self, request, *args, **kwargs):  # type: ignore
        try:
            user_id = parse_id(request.query_params.get("userId"))
        except ValueError:
            raise InvalidFormat("Valid userId is required", "INVALID_USER_ID")
        profile = self.get_queryset().filter(user_id=user_id).first()
        if profile is None:
            raise NotFound(self.not_found_message, self.not_found_code)
        return Response(self.get_serializer(profile).data)

    def perform_create(self, serializer):  # type: ignore
        profile = serializer.save()
        logger.info("Host profile %s created for user %s", profile.id, profile.user_id)

    def update(self, request, *args, **kwargs):  # type: ignore
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)
