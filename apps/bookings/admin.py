"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "property",
        "guest_name",
        "guest_email",
        "check_in",
        "check_out",
        "guests",
        "nights",
        "total_price",
        "created_at",
    )
    list_filter = ("check_in", "check_out")
    search_fields = ("property__title", "guest_name", "guest_email")
    readonly_fields = ("created_at",)
    list_select_related = ("property",)
