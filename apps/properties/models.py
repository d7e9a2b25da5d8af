"""Property domain models.

``Property`` is the listing reference data used by bookings (capacity and
nightly base price). ``PropertyAvailability`` is the per-day ledger: at most
one record per property and calendar date, optionally overriding the price.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Property(models.Model):
    """A rentable listing."""

    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    price = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Nightly base price in whole dollars."),
    )
    images = models.JSONField(default=list)
    bedrooms = models.PositiveSmallIntegerField(default=0)
    bathrooms = models.PositiveSmallIntegerField(default=0)
    guests = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Maximum number of guests."),
    )
    amenities = models.JSONField(default=list, blank=True)
    rating = models.FloatField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    reviews = models.PositiveIntegerField(default=0)
    host_name = models.CharField(max_length=255)
    host_avatar = models.CharField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title


class PropertyAvailability(models.Model):
    """Availability of one property on one calendar date."""

    property = models.ForeignKey(
        Property,
        on_delete=models.CASCADE,
        related_name="availability",
    )
    # Kept as the literal YYYY-MM-DD text; the format sorts chronologically.
    date = models.CharField(max_length=10)
    is_available = models.BooleanField(default=True)
    price = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text=_("Price override for this date; empty means the base price."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Availability record")
        verbose_name_plural = _("Availability records")
        ordering = ["property_id", "date"]
        constraints = [
            models.UniqueConstraint(
                fields=["property", "date"],
                name="unique_availability_per_property_date",
            ),
        ]

    def __str__(self) -> str:
        state = "available" if self.is_available else "unavailable"
        return f"{self.property_id} {self.date}: {state}"

    def effective_price(self) -> int:
        return self.property.price if self.price is None else self.price
