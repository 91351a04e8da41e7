# journal/admin.py
from django.contrib import admin
from journal.models import DailyJournal


@admin.register(DailyJournal)
class DailyJournalAdmin(admin.ModelAdmin):
    list_display = ["date", "user", "guest_session_id", "updated_at"]
    list_filter = ["date"]
    search_fields = ["content", "guest_session_id"]
    readonly_fields = ["created_at", "updated_at"]
    fieldsets = [
        ("Owner", {"fields": ["user", "guest_session_id"]}),
        ("Journal", {"fields": ["date", "content"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]
