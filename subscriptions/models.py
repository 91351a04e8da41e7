# subscriptions/models.py
from decimal import Decimal

from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator
from django.utils import timezone

from analytics.types import SubscriptionEventRecord


class SubscriptionEvent(models.Model):
    """One lifecycle or payment event on a user's subscription"""

    EVENT_TYPES = [
        ("started", "Started"),
        ("renewed", "Renewed"),
        ("payment", "Payment"),
        ("canceled", "Canceled"),
    ]

    TIER_CHOICES = [
        ("essential", "Essential"),
        ("pro", "Pro"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="subscription_events",
    )
    event_type = models.CharField(max_length=20, choices=EVENT_TYPES)
    tier = models.CharField(max_length=20, choices=TIER_CHOICES, default="pro")
    amount = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    occurred_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-occurred_at"]
        indexes = [
            models.Index(fields=["occurred_at"], name="subscription_occurred_idx"),
        ]

    def __str__(self):
        return f"{self.user} {self.event_type} ({self.tier}) - {self.occurred_at}"

    def to_record(self) -> SubscriptionEventRecord:
        return SubscriptionEventRecord(
            user_id=self.user_id,
            event_type=self.event_type,
            occurred_at=self.occurred_at,
            tier=self.tier,
            amount=self.amount,
        )
