from datetime import timedelta
from io import StringIO
import logging

import pytest
from django.core.management import call_command
from django.utils import timezone

from analytics.config import AnalyticsConfig
from analytics.services.mood_analytics_service import MoodAnalyticsService
from analytics.types import Owner
from mood.models import MoodEntry


@pytest.fixture
def guest_entries(db):
    now = timezone.now()
    return [
        MoodEntry.objects.create(
            guest_session_id="guest-7",
            mood="happy",
            intensity=6,
            date=now - timedelta(days=offset),
            notes="meditation" if offset % 2 else None,
        )
        for offset in range(10)
    ]


@pytest.mark.django_db
def test_collect_uses_the_explicit_config(guest_entries):
    service = MoodAnalyticsService(
        AnalyticsConfig.from_dict({"CONSISTENCY_WINDOW_DAYS": 10, "ANALYSIS_ENTRY_LIMIT": 5})
    )

    snapshot = service.collect(Owner(guest_session_id="guest-7"))

    assert snapshot.summary.total_entries == 5
    assert snapshot.current_streak == 5
    assert snapshot.consistency == 50
    assert snapshot.metadata["total_entries"] == 5


@pytest.mark.django_db
def test_latest_entries_win_when_limited(guest_entries):
    service = MoodAnalyticsService(AnalyticsConfig.from_dict({"ANALYSIS_ENTRY_LIMIT": 2}))
    entries = service.load_entries(Owner(guest_session_id="guest-7"))

    assert [entry.id for entry in entries] == [guest_entries[1].pk, guest_entries[0].pk]


@pytest.mark.django_db
def test_heatmap_window_is_configurable(guest_entries):
    service = MoodAnalyticsService(AnalyticsConfig.from_dict({"HEATMAP_DAYS": 7}))
    heatmap = service.heatmap(Owner(guest_session_id="guest-7"))

    assert len(heatmap) == 7
    assert all(bucket.entry_count == 1 for bucket in heatmap)


@pytest.mark.django_db
def test_unknown_owner_gets_empty_results():
    service = MoodAnalyticsService(AnalyticsConfig())
    snapshot = service.collect(Owner(user_id=999))

    assert snapshot.summary.total_entries == 0
    assert snapshot.buckets == []
    assert snapshot.current_streak == 0
    assert snapshot.consistency == 0
    assert snapshot.insights == []


@pytest.mark.django_db
def test_collect_logs_start_and_completion(guest_entries, caplog):
    with caplog.at_level(logging.INFO, logger="analytics"):
        MoodAnalyticsService(AnalyticsConfig()).collect(Owner(guest_session_id="guest-7"))

    assert "Starting mood analytics for guest:guest-7" in caplog.text
    assert "Mood analytics completed for guest:guest-7: 10 entries" in caplog.text


@pytest.mark.django_db
def test_mood_report_command(guest_entries):
    out = StringIO()
    call_command("mood_report", "--guest", "guest-7", stdout=out)

    output = out.getvalue()
    assert "Mood report for guest:guest-7" in output
    assert "Entries: 10" in output
    assert "meditation" in output


@pytest.mark.django_db
def test_activities_ranks_keywords_and_tags(guest_entries, monkeypatch):
    service = MoodAnalyticsService(AnalyticsConfig())
    monkeypatch.setattr(service, "collect", lambda *args, **kwargs: pytest.fail("collect called"))

    keywords, tags = service.activities(Owner(guest_session_id="guest-7"))

    assert [impact.activity for impact in keywords] == ["meditation"]
    assert keywords[0].frequency == 5
    assert tags == []
