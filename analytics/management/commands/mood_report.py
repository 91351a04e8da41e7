# analytics/management/commands/mood_report.py
from django.core.management.base import BaseCommand, CommandError
import logging

from analytics.exceptions import EntryValidationError
from analytics.services import mood_analytics_service
from analytics.types import Owner

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Print mood analytics for one user or guest session"

    def add_arguments(self, parser):
        owner = parser.add_mutually_exclusive_group(required=True)
        owner.add_argument("--user", type=int, help="User ID to report on")
        owner.add_argument("--guest", help="Guest session ID to report on")
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help="Number of days back to analyze (default: all history)",
        )

    def handle(self, *args, **options):
        try:
            owner = Owner(user_id=options["user"], guest_session_id=options["guest"])
        except EntryValidationError as e:
            raise CommandError(e.message)

        snapshot = mood_analytics_service.collect(owner, days=options["days"])
        summary = snapshot.summary

        self.stdout.write(self.style.SUCCESS(f"Mood report for {owner}"))
        self.stdout.write(f"Entries: {summary.total_entries}")
        self.stdout.write(f"Average score: {summary.average_score:.2f}")
        self.stdout.write(
            f"Streak: {snapshot.current_streak} (longest {snapshot.longest_streak})"
        )
        self.stdout.write(f"Consistency: {snapshot.consistency}%")
        self.stdout.write(f"Trend: {snapshot.trend.direction}")

        for correlation in snapshot.phase_correlations:
            self.stdout.write(
                f"  {correlation.phase}: {correlation.average_score:.2f} "
                f"over {correlation.entry_count} entries"
            )
        for impact in snapshot.activity_impact:
            self.stdout.write(
                f"  {impact.activity}: {impact.average_score_boost} ({impact.frequency}x)"
            )
        for insight in snapshot.insights:
            self.stdout.write(f"* {insight}")
