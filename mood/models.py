# mood/models.py
from django.db import models
from django.conf import settings
from django.utils import timezone
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator

from analytics.lexicons import MOOD_RANKS, MOON_PHASES
from analytics.types import Entry, MAX_INTENSITY, MAX_NOTES_LENGTH, MIN_INTENSITY


class OwnedQuerySet(models.QuerySet):
    """Rows belong to either a user or a guest session"""

    def for_owner(self, owner):
        if owner.is_guest:
            return self.filter(user__isnull=True, guest_session_id=owner.guest_session_id)
        return self.filter(user_id=owner.user_id)


def single_owner_condition():
    return models.Q(user__isnull=False, guest_session_id__isnull=True) | models.Q(
        user__isnull=True, guest_session_id__isnull=False
    )


def validate_single_owner(instance):
    if (instance.user_id is None) == (not instance.guest_session_id):
        raise ValidationError(
            "Exactly one of user or guest session must own this record."
        )


class MoodEntry(models.Model):
    """A single mood check-in, immutable in meaning once recorded"""

    MOOD_CHOICES = [(mood, mood.title()) for mood in MOOD_RANKS]
    MOON_PHASE_CHOICES = [
        (phase, phase.replace("_", " ").title()) for phase in MOON_PHASES
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="mood_entries",
        null=True,
        blank=True,
    )
    guest_session_id = models.CharField(max_length=64, null=True, blank=True)
    mood = models.CharField(max_length=20, choices=MOOD_CHOICES)
    sub_moods = models.JSONField(default=list, blank=True)
    intensity = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(MIN_INTENSITY),
            MaxValueValidator(MAX_INTENSITY),
        ]
    )
    notes = models.TextField(max_length=MAX_NOTES_LENGTH, null=True, blank=True)
    activities = models.JSONField(default=list, blank=True)
    date = models.DateTimeField(default=timezone.now)
    moon_phase = models.CharField(
        max_length=20, choices=MOON_PHASE_CHOICES, null=True, blank=True
    )
    moon_illumination = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = OwnedQuerySet.as_manager()

    class Meta:
        verbose_name_plural = "Mood Entries"
        ordering = ["-date", "-created_at"]
        indexes = [
            models.Index(fields=["user", "-date"], name="mood_entry_user_date_idx"),
            models.Index(
                fields=["guest_session_id", "-date"], name="mood_entry_guest_date_idx"
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=single_owner_condition(),
                name="mood_entry_single_owner",
            ),
            models.CheckConstraint(
                condition=models.Q(intensity__gte=MIN_INTENSITY)
                & models.Q(intensity__lte=MAX_INTENSITY),
                name="mood_entry_intensity_range",
            ),
        ]

    def __str__(self):
        return f"{self.mood} ({self.intensity}) - {self.date}"

    def clean(self):
        validate_single_owner(self)
        if self.notes and len(self.notes) > MAX_NOTES_LENGTH:
            raise ValidationError(
                {"notes": f"Notes cannot exceed {MAX_NOTES_LENGTH} characters."}
            )
        if not isinstance(self.sub_moods, list) or not isinstance(self.activities, list):
            raise ValidationError("Sub-moods and activities must be lists.")

    def to_record(self) -> Entry:
        """Immutable copy handed to the analytics engine"""
        return Entry(
            id=self.pk,
            user_id=self.user_id,
            guest_session_id=self.guest_session_id or None,
            mood=self.mood,
            intensity=self.intensity,
            date=self.date,
            sub_moods=self.sub_moods or [],
            notes=self.notes,
            activities=self.activities or [],
            moon_phase=self.moon_phase or None,
            moon_illumination=self.moon_illumination,
        )
