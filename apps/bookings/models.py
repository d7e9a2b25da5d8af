"""Booking domain models."""

from __future__ import annotations

import builtins

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A guest's stay at a property."""

    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    guests = models.PositiveSmallIntegerField()
    total_price = models.PositiveIntegerField(help_text=_("Whole dollars."))
    guest_name = models.CharField(max_length=255)
    guest_email = models.EmailField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["property", "check_in"], name="bookings_property_checkin_idx"),
            models.Index(fields=["guest_email"], name="bookings_guest_email_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_check_out_after_check_in",
            ),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} {self.property_id} {self.check_in} - {self.check_out}"

    @builtins.property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
