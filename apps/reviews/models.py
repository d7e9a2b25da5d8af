"""Models for the review domain.

A review rates one booking overall and in six categories, each on a
1 to 5 scale. Every booking can be reviewed at most once.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

RATING_VALIDATORS = [MinValueValidator(1), MaxValueValidator(5)]


class Review(models.Model):
    """Feedback left by a guest for a property they stayed at."""

    property = models.ForeignKey(
        'properties.Property', on_delete=models.CASCADE, related_name='guest_reviews'
    )
    user = models.ForeignKey(
        'users.User', on_delete=models.CASCADE, related_name='reviews'
    )
    booking = models.OneToOneField(
        'bookings.Booking', on_delete=models.CASCADE, related_name='review'
    )
    rating = models.FloatField(validators=RATING_VALIDATORS)
    cleanliness = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    accuracy = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    check_in = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    communication = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    location = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    value = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _('Review')
        verbose_name_plural = _('Reviews')
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return f'Review {self.rating} for {self.property_id} by {self.user_id}'
