# mood/serializers.py
from django.utils import timezone
from rest_framework import serializers

from analytics.exceptions import EntryValidationError
from analytics.services.scoring import entry_score
from analytics.types import MAX_NOTES_LENGTH
from mood.models import MoodEntry


class MoodEntrySerializer(serializers.ModelSerializer):
    """Ingestion boundary: rejects bad input instead of clamping it"""

    sub_moods = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False, default=list
    )
    activities = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False, default=list
    )
    notes = serializers.CharField(
        max_length=MAX_NOTES_LENGTH, required=False, allow_blank=True, allow_null=True
    )
    mood_score = serializers.SerializerMethodField()

    class Meta:
        model = MoodEntry
        fields = [
            "id",
            "mood",
            "sub_moods",
            "intensity",
            "notes",
            "activities",
            "date",
            "moon_phase",
            "moon_illumination",
            "mood_score",
            "created_at",
        ]
        read_only_fields = ["created_at", "mood_score"]

    def get_mood_score(self, obj):
        return entry_score(obj.to_record())

    def validate_intensity(self, value):
        if isinstance(value, bool):
            raise serializers.ValidationError("Intensity must be an integer.")
        return value

    def validate_sub_moods(self, value):
        return [tag.strip() for tag in value if tag and tag.strip()]

    def validate_activities(self, value):
        return list(dict.fromkeys(tag.strip().lower() for tag in value if tag and tag.strip()))

    def validate(self, attrs):
        owner = self.context.get("owner")
        if owner is None:
            return attrs

        # The engine record enforces the same rules the analytics rely on
        values = {
            field: attrs.get(field, getattr(self.instance, field, None))
            for field in ["mood", "intensity", "notes", "moon_illumination"]
        }
        values["date"] = attrs.get("date") or getattr(self.instance, "date", None) or timezone.now()
        try:
            MoodEntry(
                user_id=owner.user_id,
                guest_session_id=owner.guest_session_id,
                **values,
            ).to_record()
        except EntryValidationError as e:
            raise serializers.ValidationError({e.field or "non_field_errors": e.message})
        return attrs
