# journal/models.py
from django.db import models
from django.conf import settings
from analytics.config import local_today
from analytics.types import JournalText
from mood.models import OwnedQuerySet, single_owner_condition, validate_single_owner


class DailyJournal(models.Model):
    """Free-text journal, at most one per owner per calendar day"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="daily_journals",
        null=True,
        blank=True,
    )
    guest_session_id = models.CharField(max_length=64, null=True, blank=True)
    date = models.DateField(default=local_today)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OwnedQuerySet.as_manager()

    class Meta:
        ordering = ["-date"]
        constraints = [
            models.CheckConstraint(
                condition=single_owner_condition(),
                name="daily_journal_single_owner",
            ),
            models.UniqueConstraint(
                fields=["user", "date"],
                condition=models.Q(user__isnull=False),
                name="daily_journal_unique_user_date",
            ),
            models.UniqueConstraint(
                fields=["guest_session_id", "date"],
                condition=models.Q(guest_session_id__isnull=False),
                name="daily_journal_unique_guest_date",
            ),
        ]

    def __str__(self):
        return f"Journal - {self.date}"

    def clean(self):
        validate_single_owner(self)

    def to_record(self) -> JournalText:
        return JournalText(day=self.date, content=self.content)
