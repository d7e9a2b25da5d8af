"""Admin registrations for the users domain."""

from __future__ import annotations

from django.contrib import admin

from .models import HostProfile, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "user_type", "is_verified", "joined_at")
    list_filter = ("user_type", "is_verified")
    search_fields = ("name", "email", "phone")
    readonly_fields = ("joined_at",)


@admin.register(HostProfile)
class HostProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "response_time", "response_rate", "superhost_status", "average_rating")
    list_filter = ("superhost_status", "response_time")
    search_fields = ("user__name", "user__email")
    readonly_fields = ("created_at", "updated_at")
