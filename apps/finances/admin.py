"""Admin registration for transactions."""

from __future__ import annotations

from django.contrib import admin

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "user", "amount", "currency", "status", "payment_method", "created_at")
    list_filter = ("status", "currency")
    search_fields = ("transaction_id", "user__email")
    readonly_fields = ("created_at",)
