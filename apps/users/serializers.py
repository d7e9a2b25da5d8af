"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.core.exceptions import Conflict, InvalidFormat, InvalidRange, MissingField
from apps.core.parsing import MAX_DB_ID, MAX_DB_INT
from apps.core.serializers import RequiredFieldsMixin

from .identity import resolve_user
from .models import PHONE_VALIDATOR, HostProfile, User


class UserSerializer(serializers.ModelSerializer):
    """Marketplace member, read and write."""

    email = serializers.EmailField(max_length=254)
    userType = serializers.ChoiceField(
        source="user_type",
        choices=User.UserType.choices,
        default=User.UserType.GUEST,
    )
    isVerified = serializers.BooleanField(source="is_verified", required=False)
    joinedAt = serializers.DateTimeField(source="joined_at", read_only=True)
    phone = serializers.CharField(
        max_length=20,
        required=False,
        allow_blank=True,
        validators=[PHONE_VALIDATOR],
    )

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "avatar",
            "phone",
            "bio",
            "userType",
            "isVerified",
            "joinedAt",
        ]
        read_only_fields = ["id", "joinedAt"]

    def validate_email(self, value: str) -> str:
        email = User.objects.normalize_email(value)
        taken = User.objects.filter(email=email)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise Conflict("Email already registered", "DUPLICATE_EMAIL")
        return email


class HostProfileSerializer(RequiredFieldsMixin, serializers.ModelSerializer):
    """Host profile. The owning user is fixed at creation."""

    required_fields = ("userId", "languages", "responseTime", "responseRate")
    create_only_fields = ("userId",)

    userId = serializers.IntegerField(source="user_id", max_value=MAX_DB_ID)
    languages = serializers.JSONField()
    responseTime = serializers.CharField(source="response_time")
    responseRate = serializers.IntegerField(source="response_rate")
    superhostStatus = serializers.BooleanField(source="superhost_status", required=False)
    propertyCount = serializers.IntegerField(
        source="property_count", required=False, min_value=0, max_value=MAX_DB_INT
    )
    totalReviews = serializers.IntegerField(
        source="total_reviews", required=False, min_value=0, max_value=MAX_DB_INT
    )
    averageRating = serializers.FloatField(source="average_rating", required=False)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = HostProfile
        fields = [
            "id",
            "userId",
            "languages",
            "responseTime",
            "responseRate",
            "superhostStatus",
            "propertyCount",
            "totalReviews",
            "averageRating",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "createdAt", "updatedAt"]

    def validate_userId(self, value: int) -> int:
        user = resolve_user(self.context.get("request"), value)
        if HostProfile.objects.filter(user=user).exists():
            raise Conflict("Host profile already exists for this user", "DUPLICATE_PROFILE")
        return user.id

    def validate_languages(self, value):  # type: ignore
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise InvalidFormat("languages must be an array of strings", "INVALID_LANGUAGES_FORMAT")
        return value

    def validate_responseTime(self, value: str) -> str:
        if value not in HostProfile.ResponseTime.values:
            raise InvalidFormat(
                f"responseTime must be one of: {', '.join(HostProfile.ResponseTime.values)}",
                "INVALID_RESPONSE_TIME",
            )
        return value

    def validate_responseRate(self, value: int) -> int:
        if not 0 <= value <= 100:
            raise InvalidRange("responseRate must be between 0 and 100", "INVALID_RESPONSE_RATE")
        return value

    def validate_averageRating(self, value: float) -> float:
        if not 0 <= value <= 5:
            raise InvalidRange("averageRating must be between 0 and 5", "INVALID_AVERAGE_RATING")
        return value

    def validate(self, attrs):  # type: ignore
        if self.instance is not None and not attrs:
            raise MissingField("No fields to update", "NO_UPDATE_FIELDS")
        return attrs

    def create(self, validated_data):  # type: ignore
        try:
            with transaction.atomic():
                return super().create(validated_data)
        except IntegrityError:
            raise Conflict("Host profile already exists for this user", "DUPLICATE_PROFILE")
