"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Property, PropertyAvailability


class PropertyAvailabilityInline(admin.TabularInline):
    model = PropertyAvailability
    extra = 0
    fields = ("date", "is_available", "price")
    ordering = ("date",)


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ("title", "location", "price", "guests", "rating", "host_name", "created_at")
    search_fields = ("title", "location", "host_name")
    readonly_fields = ("created_at",)
    inlines = [PropertyAvailabilityInline]


@admin.register(PropertyAvailability)
class PropertyAvailabilityAdmin(admin.ModelAdmin):
    list_display = ("property", "date", "is_available", "price", "effective_price", "updated_at")
    list_filter = ("is_available",)
    search_fields = ("property__title", "date")
    list_select_related = ("property",)
