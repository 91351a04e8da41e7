# mood/admin.py
from django.contrib import admin
from mood.models import MoodEntry


@admin.register(MoodEntry)
class MoodEntryAdmin(admin.ModelAdmin):
    list_display = ["mood", "intensity", "user", "guest_session_id", "date"]
    list_filter = ["mood", "moon_phase", "date"]
    search_fields = ["guest_session_id", "user__username"]
    readonly_fields = ["created_at"]
    fieldsets = [
        ("Owner", {"fields": ["user", "guest_session_id"]}),
        ("Mood", {"fields": ["mood", "sub_moods", "intensity", "activities", "date"]}),
        ("Journal", {"fields": ["notes"]}),
        ("Moon", {"fields": ["moon_phase", "moon_illumination"]}),
        ("Timestamps", {"fields": ["created_at"]}),
    ]
