# analytics/types.py
"""
Immutable records consumed and produced by the analytics engine.

Input records (Entry, JournalText, SubscriptionEventRecord) are built
from validated storage rows; everything else is derived on every request
and never persisted.
"""
from dataclasses import dataclass, field
from datetime import date as Date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from analytics.exceptions import EntryValidationError

MIN_INTENSITY = 1
MAX_INTENSITY = 10
MAX_NOTES_LENGTH = 500


@dataclass(frozen=True)
class Owner:
    """Either a registered user or a guest session, never both"""

    user_id: Optional[int] = None
    guest_session_id: Optional[str] = None

    def __post_init__(self):
        if (self.user_id is None) == (not self.guest_session_id):
            raise EntryValidationError(
                "Exactly one of user_id or guest_session_id must be set",
                field="owner",
            )

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def __str__(self):
        if self.is_guest:
            return f"guest:{self.guest_session_id}"
        return f"user:{self.user_id}"


@dataclass(frozen=True)
class Entry:
    """A validated mood entry as seen by the engine"""

    mood: str
    intensity: int
    date: datetime
    id: Optional[int] = None
    user_id: Optional[int] = None
    guest_session_id: Optional[str] = None
    sub_moods: Tuple[str, ...] = ()
    notes: Optional[str] = None
    activities: Tuple[str, ...] = ()
    moon_phase: Optional[str] = None
    moon_illumination: Optional[float] = None

    def __post_init__(self):
        # Lists from JSON columns become tuples so the record stays hashable
        object.__setattr__(self, "sub_moods", tuple(self.sub_moods or ()))
        object.__setattr__(self, "activities", tuple(self.activities or ()))

        if not self.mood or not str(self.mood).strip():
            raise EntryValidationError("Mood is required", field="mood")
        if isinstance(self.intensity, bool) or not isinstance(self.intensity, int):
            raise EntryValidationError(
                f"Intensity must be an integer, got {self.intensity!r}",
                field="intensity",
            )
        if not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
            raise EntryValidationError(
                f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}, "
                f"got {self.intensity}",
                field="intensity",
            )
        if not isinstance(self.date, datetime):
            raise EntryValidationError("Entry date must be a datetime", field="date")
        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            raise EntryValidationError(
                f"Notes cannot exceed {MAX_NOTES_LENGTH} characters", field="notes"
            )
        if (self.user_id is None) == (not self.guest_session_id):
            raise EntryValidationError(
                "Entry must belong to exactly one user or guest session",
                field="owner",
            )
        if self.moon_illumination is not None and not 0 <= self.moon_illumination <= 100:
            raise EntryValidationError(
                "Moon illumination must be between 0 and 100",
                field="moon_illumination",
            )

    @property
    def primary_sub_mood(self) -> Optional[str]:
        for tag in self.sub_moods:
            if tag and tag.strip():
                return tag
        return None

    @property
    def has_journal(self) -> bool:
        return bool(self.notes and self.notes.strip())


@dataclass(frozen=True)
class JournalText:
    """Free-text daily journal attached to a calendar day"""

    day: Date
    content: str


@dataclass(frozen=True)
class DayBucket:
    day: Date
    entries: Tuple[Entry, ...] = ()
    average_score: float = 0.0
    average_intensity: float = 0.0
    entry_count: int = 0
    has_journal: bool = False

    @property
    def most_recent(self) -> Optional[Entry]:
        if not self.entries:
            return None
        return max(self.entries, key=lambda entry: entry.date)

    @classmethod
    def empty(cls, day: Date) -> "DayBucket":
        return cls(day=day)


@dataclass(frozen=True)
class PhaseCorrelation:
    phase: str
    average_score: float
    entry_count: int
    day_count: int = 0


@dataclass(frozen=True)
class LunarDayPoint:
    day: Date
    phase: str
    illumination: Optional[float]
    average_score: float
    entry_count: int


@dataclass(frozen=True)
class ActivityImpact:
    """
    Average score of entries that mention an activity.

    Keyword co-occurrence only; a high value says the activity shows up on
    better days, not that it caused them.
    """

    activity: str
    average_score_boost: float
    frequency: int
    latest_date: Optional[datetime] = None


@dataclass(frozen=True)
class EmotionWord:
    word: str
    count: int
    sentiment: str


@dataclass(frozen=True)
class SentimentPoint:
    day: Date
    score: float
    has_signal: bool
    positive_count: int = 0
    negative_count: int = 0

    @property
    def label(self) -> str:
        if self.score > 0:
            return "positive"
        if self.score < 0:
            return "negative"
        return "neutral"


@dataclass(frozen=True)
class TopicCount:
    topic: str
    count: int


@dataclass
class MoodSummary:
    total_entries: int
    average_score: float
    mood_distribution: Dict[str, int]
    moods_by_phase: Dict[str, Dict[str, float]]
    valence_distribution: Dict[str, int]


@dataclass
class MoodTrend:
    direction: str
    strength: float
    volatility: float
    daily_averages: Dict[str, float] = field(default_factory=dict)
    weekday_pattern: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class SubscriptionEventRecord:
    user_id: int
    event_type: str
    occurred_at: datetime
    tier: str = "pro"
    amount: Optional[Decimal] = None


@dataclass
class RevenueMonth:
    month: str
    revenue: float
    new_subscriptions: int
    churned_subscriptions: int
    net_growth: int
    active_at_start: int
    monthly_churn: float
    monthly_growth: float
    revenue_by_tier: Dict[str, float] = field(default_factory=dict)


@dataclass
class RevenueMetrics:
    monthly_revenue: List[RevenueMonth]
    total_revenue: float
    active_subscriptions: int
    canceled_subscriptions: int
    average_revenue_per_user: float
    monthly_churn: float
    monthly_growth: float


@dataclass
class MoodAnalyticsSnapshot:
    """Everything derived for one owner in one request"""

    owner: Owner
    generated_at: datetime
    today: Date
    period_days: Optional[int]
    summary: MoodSummary
    buckets: List[DayBucket]
    current_streak: int
    longest_streak: int
    consistency: int
    phase_correlations: List[PhaseCorrelation]
    activity_impact: List[ActivityImpact]
    activity_tags: List[ActivityImpact]
    trend: MoodTrend
    insights: List[str]
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class JournalAnalyticsSnapshot:
    owner: Owner
    generated_at: datetime
    emotion_cloud: List[EmotionWord]
    sentiment_over_time: List[SentimentPoint]
    topic_frequency: List[TopicCount]
    total_entries: int
