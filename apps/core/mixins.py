"""Viewset mixins shared by the CRUD endpoints."""

from __future__ import annotations

from django.http import Http404  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore

from .exceptions import NotFound


class CodedLookupMixin:
    """Raise a domain ``NotFound`` with the resource's own code on a miss."""

    not_found_code = "NOT_FOUND"
    not_found_message = "Not found"

    def get_object(self):  # type: ignore
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message, self.not_found_code)


class DeleteMessageMixin:
    """``DELETE`` answers 200 with a confirmation instead of an empty 204."""

    deleted_message = "Deleted successfully"

    def destroy(self, request, *args, **kwargs):  # type: ignore
        instance = self.get_object()
        instance_id = instance.pk
        self.perform_destroy(instance)
        return Response(
            {"message": self.deleted_message, "id": instance_id},
            status=status.HTTP_200_OK,
        )
