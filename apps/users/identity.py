"""Identity resolution.

Requests name their acting user with a bare numeric id and nothing
verifies it. That trust decision lives here, behind ``IdentityResolver``,
so a real authentication backend can replace ``DemoIdentityResolver``
through ``RENTALS["IDENTITY_RESOLVER"]`` without touching domain code.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from apps.core.exceptions import InvalidFormat, NotFound
from apps.core.parsing import parse_id

from .models import User


class IdentityResolver:
    """Maps the user id claimed by a request onto a ``User``."""

    def resolve(self, request, claimed_id) -> User:  # type: ignore
        raise NotImplementedError


class DemoIdentityResolver(IdentityResolver):
    """Unauthenticated demo mode: the claimed id is taken at face value."""

    def resolve(self, request, claimed_id) -> User:  # type: ignore
        try:
            user_id = parse_id(claimed_id)
        except ValueError:
            raise InvalidFormat("Valid userId is required", "INVALID_USER_ID")
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound("User not found", "USER_NOT_FOUND")
        return user


def get_identity_resolver() -> IdentityResolver:
    return import_string(settings.RENTALS["IDENTITY_RESOLVER"])()


def resolve_user(request, claimed_id) -> User:  # type: ignore
    return get_identity_resolver().resolve(request, claimed_id)
