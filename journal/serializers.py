# journal/serializers.py
from rest_framework import serializers
from analytics.config import local_today
from journal.models import DailyJournal


class DailyJournalSerializer(serializers.ModelSerializer):
    word_count = serializers.SerializerMethodField()

    class Meta:
        model = DailyJournal
        fields = [
            "id",
            "date",
            "content",
            "word_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at", "word_count"]

    def get_word_count(self, obj):
        return len(obj.content.split()) if obj.content else 0

    def validate_content(self, value):
        if not value.strip():
            raise serializers.ValidationError("Journal content cannot be empty.")
        return value

    def validate(self, attrs):
        owner = self.context.get("owner")
        day = attrs.get("date") or getattr(self.instance, "date", None) or local_today()
        if owner is None:
            return attrs

        existing = DailyJournal.objects.for_owner(owner).filter(date=day)
        if self.instance is not None:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise serializers.ValidationError(
                {"date": "A journal already exists for this day."}
            )
        return attrs
