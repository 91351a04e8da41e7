# subscriptions/admin.py
from django.contrib import admin
from subscriptions.models import SubscriptionEvent


@admin.register(SubscriptionEvent)
class SubscriptionEventAdmin(admin.ModelAdmin):
    list_display = ["user", "event_type", "tier", "amount", "occurred_at"]
    list_filter = ["event_type", "tier", "occurred_at"]
    search_fields = ["user__username", "user__email"]
    date_hierarchy = "occurred_at"
