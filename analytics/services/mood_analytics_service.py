# analytics/services/mood_analytics_service.py
"""
Request-level orchestration of the analytics engine
"""

from typing import List, Optional
from datetime import date, timedelta
from django.utils import timezone
import logging
import time

from analytics.config import AnalyticsConfig
from analytics.lexicons import DEFAULT_LEXICON
from analytics.services.activity_impact import rank_activity_impact, rank_activity_tags
from analytics.services.bucketing import bucket_by_day, trailing_days
from analytics.services.journal_lexicon import (
    count_text_entries,
    extract_emotion_cloud,
    sentiment_over_time,
    topic_frequency,
)
from analytics.services.lunar import correlate_by_phase, phase_day_points
from analytics.services.revenue import aggregate_revenue
from analytics.services.scoring import summarize_moods
from analytics.services.streaks import consistency, current_streak, longest_streak
from analytics.services.trends import analyze_trend, generate_insights
from analytics.types import (
    ActivityImpact,
    DayBucket,
    Entry,
    JournalAnalyticsSnapshot,
    JournalText,
    LunarDayPoint,
    MoodAnalyticsSnapshot,
    Owner,
    PhaseCorrelation,
    RevenueMetrics,
)

logger = logging.getLogger(__name__)


class MoodAnalyticsService:
    """Loads one owner's records and runs the engine over them"""

    def __init__(self, config: Optional[AnalyticsConfig] = None):
        self._config = config

    @property
    def config(self) -> AnalyticsConfig:
        # Settings are read on first use so tests can override them
        if self._config is None:
            return AnalyticsConfig.from_settings()
        return self._config

    def today(self) -> date:
        return timezone.now().astimezone(self.config.tzinfo).date()

    def load_entries(self, owner: Owner, days: Optional[int] = None) -> List[Entry]:
        """Validated entries for an owner, oldest first"""
        from mood.models import MoodEntry

        queryset = MoodEntry.objects.for_owner(owner)
        if days:
            queryset = queryset.filter(date__gte=timezone.now() - timedelta(days=days))

        rows = list(queryset.order_by("-date")[: self.config.analysis_entry_limit])
        rows.reverse()
        return [row.to_record() for row in rows]

    def load_journals(self, owner: Owner) -> List[JournalText]:
        from journal.models import DailyJournal

        return [
            journal.to_record()
            for journal in DailyJournal.objects.for_owner(owner).order_by("date")
        ]

    def collect(
        self, owner: Owner, days: Optional[int] = None, today: Optional[date] = None
    ) -> MoodAnalyticsSnapshot:
        """
        Run every mood component for one owner

        Args:
            owner: User or guest session whose entries are analysed
            days: Only consider entries from the last N days (all when omitted)
            today: Reference day for streaks and consistency

        Returns:
            MoodAnalyticsSnapshot rebuilt from storage on every call
        """
        start_time = time.time()
        logger.info(f"Starting mood analytics for {owner}, days={days}")

        try:
            config = self.config
            today = today or self.today()
            entries = self.load_entries(owner, days)

            summary = summarize_moods(entries)
            buckets = bucket_by_day(entries, config.tzinfo)
            streak = current_streak(buckets, today)
            correlations = correlate_by_phase(buckets)

            snapshot = MoodAnalyticsSnapshot(
                owner=owner,
                generated_at=timezone.now(),
                today=today,
                period_days=days,
                summary=summary,
                buckets=buckets,
                current_streak=streak,
                longest_streak=longest_streak(buckets),
                consistency=consistency(buckets, config.consistency_window_days, today),
                phase_correlations=correlations,
                activity_impact=rank_activity_impact(entries, config.activity_vocabulary),
                activity_tags=rank_activity_tags(entries),
                trend=analyze_trend(buckets),
                insights=generate_insights(summary, streak, correlations),
                metadata={
                    "collection_time": time.time() - start_time,
                    "total_entries": len(entries),
                    "timezone": config.timezone,
                    "consistency_window_days": config.consistency_window_days,
                },
            )

            logger.info(f"Mood analytics completed for {owner}: {len(entries)} entries")
            return snapshot

        except Exception as exc:
            logger.error(f"Mood analytics failed for {owner}: {str(exc)}")
            raise

    def heatmap(self, owner: Owner, today: Optional[date] = None) -> List[DayBucket]:
        """Trailing day buckets with empty days filled in"""
        config = self.config
        today = today or self.today()
        buckets = bucket_by_day(self.load_entries(owner, config.heatmap_days + 1), config.tzinfo)
        return trailing_days(buckets, today, config.heatmap_days)

    def lunar(self, owner: Owner):
        """Phase correlation plus the per-day points behind it"""
        buckets = bucket_by_day(self.load_entries(owner), self.config.tzinfo)
        correlations: List[PhaseCorrelation] = correlate_by_phase(buckets)
        points: List[LunarDayPoint] = phase_day_points(buckets)
        return correlations, points

    def activities(self, owner: Owner):
        """Keyword impact and tag impact rankings"""
        entries = self.load_entries(owner)
        keywords: List[ActivityImpact] = rank_activity_impact(
            entries, self.config.activity_vocabulary
        )
        tags: List[ActivityImpact] = rank_activity_tags(entries)
        return keywords, tags

    def journal_insights(self, owner: Owner) -> JournalAnalyticsSnapshot:
        logger.info(f"Starting journal analytics for {owner}")

        try:
            config = self.config
            entries = self.load_entries(owner)
            journals = self.load_journals(owner)
            buckets = bucket_by_day(entries, config.tzinfo)

            snapshot = JournalAnalyticsSnapshot(
                owner=owner,
                generated_at=timezone.now(),
                emotion_cloud=extract_emotion_cloud(entries, DEFAULT_LEXICON, journals),
                sentiment_over_time=sentiment_over_time(
                    buckets, DEFAULT_LEXICON, journals, config.sentiment_series_days
                ),
                topic_frequency=topic_frequency(entries, journals),
                total_entries=count_text_entries(entries, journals),
            )

            logger.info(
                f"Journal analytics completed for {owner}: {snapshot.total_entries} texts"
            )
            return snapshot

        except Exception as exc:
            logger.error(f"Journal analytics failed for {owner}: {str(exc)}")
            raise

    def revenue(self, today: Optional[date] = None) -> RevenueMetrics:
        """Subscription revenue across all users"""
        from subscriptions.models import SubscriptionEvent

        config = self.config
        today = today or self.today()
        events = [event.to_record() for event in SubscriptionEvent.objects.order_by("occurred_at")]

        try:
            return aggregate_revenue(
                events,
                today,
                window_months=config.revenue_window_months,
                default_price=config.pro_monthly_price,
                tz=config.tzinfo,
            )
        except Exception as exc:
            logger.error(f"Revenue aggregation failed: {str(exc)}")
            raise


# Create singleton instance
mood_analytics_service = MoodAnalyticsService()
