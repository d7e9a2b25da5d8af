"""User domain models.

Members of the marketplace are guests, hosts or both. They are not
Django auth users: the API runs without authentication and identifies
members by their numeric id.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?\d{7,15}$",
    message=_("Invalid phone format. Use the international format without spaces."),
)


class UserManager(models.Manager):
    def create_user(self, email: str, name: str, **extra_fields):  # type: ignore
        if not email:
            raise ValueError("Email is required to create a user.")
        return self.create(email=self.normalize_email(email), name=name.strip(), **extra_fields)

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()


class User(models.Model):
    """A guest or host registered on the marketplace."""

    class UserType(models.TextChoices):
        GUEST = "guest", _("Guest")
        HOST = "host", _("Host")
        BOTH = "both", _("Guest and host")

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    avatar = models.URLField(max_length=500, blank=True)
    phone = models.CharField(max_length=20, blank=True, validators=[PHONE_VALIDATOR])
    bio = models.TextField(blank=True)
    user_type = models.CharField(
        max_length=10,
        choices=UserType.choices,
        default=UserType.GUEST,
    )
    is_verified = models.BooleanField(default=False)
    joined_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    class Meta:
        verbose_name = _("Marketplace user")
        verbose_name_plural = _("Marketplace users")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["user_type"], name="users_user_type_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

    def is_host(self) -> bool:
        return self.user_type in (self.UserType.HOST, self.UserType.BOTH)


class HostProfile(models.Model):
    """Public hosting record of a member: languages, responsiveness, standing."""

    class ResponseTime(models.TextChoices):
        WITHIN_HOUR = "within an hour", _("Within an hour")
        WITHIN_FEW_HOURS = "within a few hours", _("Within a few hours")
        WITHIN_DAY = "within a day", _("Within a day")
        FEW_DAYS = "a few days or more", _("A few days or more")

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="host_profile")
    languages = models.JSONField(default=list, blank=True)
    response_time = models.CharField(max_length=32, choices=ResponseTime.choices)
    response_rate = models.PositiveSmallIntegerField(validators=[MaxValueValidator(100)])
    superhost_status = models.BooleanField(default=False)
    property_count = models.PositiveIntegerField(default=0)
    total_reviews = models.PositiveIntegerField(default=0)
    average_rating = models.FloatField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Host profile")
        verbose_name_plural = _("Host profiles")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Host profile of {self.user_id}"
