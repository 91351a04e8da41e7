from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from journal.models import DailyJournal
from mood.models import MoodEntry
from subscriptions.models import SubscriptionEvent

ANALYTICS_URL = "/api/v1/analytics/"


@pytest.fixture
def history(user):
    now = timezone.now()
    rows = [
        ("happy", 10, 0, "yoga then walking by the river", "full_moon"),
        ("excited", 10, 1, "yoga again, feeling energized", "full_moon"),
        ("sad", 10, 2, "exhausted and stressed", "new_moon"),
    ]
    return [
        MoodEntry.objects.create(
            user=user,
            mood=mood,
            intensity=intensity,
            notes=notes,
            moon_phase=phase,
            activities=["yoga"],
            date=now - timedelta(days=offset),
        )
        for mood, intensity, offset, notes, phase in rows
    ]


@pytest.mark.django_db
@pytest.mark.parametrize("endpoint", ["mood", "heatmap", "lunar", "activities", "journal"])
def test_anonymous_requests_without_guest_id_are_rejected(api_client, endpoint):
    response = api_client.get(f"{ANALYTICS_URL}{endpoint}/")

    assert response.status_code == 401
    assert "error" in response.data


@pytest.mark.django_db
def test_mood_analytics(user_client, history):
    response = user_client.get(f"{ANALYTICS_URL}mood/")

    assert response.status_code == 200
    data = response.data
    assert data["summary"]["total_entries"] == 3
    assert data["summary"]["average_score"] == pytest.approx(3.33)
    assert data["summary"]["valence_distribution"] == {"positive": 67, "neutral": 0, "challenging": 33}
    assert data["current_streak"] == 3
    assert data["longest_streak"] == 3
    assert data["consistency"] == 10
    assert data["trend"]["direction"] == "improving"


@pytest.mark.django_db
@pytest.mark.parametrize("days", ["abc", "0", "-4"])
def test_invalid_days_is_a_bad_request(user_client, days):
    response = user_client.get(f"{ANALYTICS_URL}mood/?days={days}")
    assert response.status_code == 400


@pytest.mark.django_db
def test_days_limits_the_history(user_client, history):
    response = user_client.get(f"{ANALYTICS_URL}mood/?days=1")
    assert response.data["summary"]["total_entries"] < 3


@pytest.mark.django_db
def test_heatmap_has_a_bucket_for_every_day(user_client, history):
    response = user_client.get(f"{ANALYTICS_URL}heatmap/")

    assert response.status_code == 200
    assert len(response.data) == 30
    assert response.data[-1]["date"] == timezone.now().date().isoformat()
    assert [day["entry_count"] for day in response.data[-3:]] == [1, 1, 1]
    assert response.data[0]["entry_count"] == 0
    assert response.data[0]["average_score"] == 0


@pytest.mark.django_db
def test_lunar(user_client, history):
    response = user_client.get(f"{ANALYTICS_URL}lunar/")
    phases = {phase["phase"]: phase for phase in response.data["phases"]}

    assert phases["full_moon"]["average_score"] == 4.5
    assert phases["full_moon"]["entry_count"] == 2
    assert phases["new_moon"]["average_score"] == 1.0
    assert len(response.data["days"]) == 3


@pytest.mark.django_db
def test_activities(user_client, history):
    response = user_client.get(f"{ANALYTICS_URL}activities/")
    keywords = {item["activity"]: item for item in response.data["keywords"]}

    assert keywords["yoga"]["average_score_boost"] == 4.5
    assert keywords["yoga"]["frequency"] == 2
    assert keywords["walking"]["frequency"] == 1
    assert response.data["tags"][0]["activity"] == "yoga"
    assert response.data["tags"][0]["frequency"] == 3


@pytest.mark.django_db
def test_journal_analytics_for_a_guest(api_client):
    MoodEntry.objects.create(
        guest_session_id="guest-1", mood="sad", intensity=4, notes="overwhelmed and overwhelmed"
    )
    DailyJournal.objects.create(
        guest_session_id="guest-1",
        date=timezone.now().date() - timedelta(days=3),
        content="A wonderful calm morning",
    )
    MoodEntry.objects.create(guest_session_id="other", mood="happy", intensity=5, notes="joy")

    response = api_client.get(f"{ANALYTICS_URL}journal/?guest_id=guest-1")

    assert response.status_code == 200
    cloud = {item["word"]: item for item in response.data["emotion_cloud"]}
    assert cloud["overwhelmed"] == {"word": "overwhelmed", "count": 2, "sentiment": "negative"}
    assert "joy" not in cloud
    assert len(response.data["sentiment_over_time"]) == 2
    assert response.data["sentiment_over_time"][0]["score"] == 1.0
    assert response.data["total_entries"] == 2


@pytest.mark.django_db
def test_revenue_is_admin_only(user_client):
    assert user_client.get(f"{ANALYTICS_URL}revenue/").status_code == 403


@pytest.mark.django_db
def test_revenue(admin_client, user):
    SubscriptionEvent.objects.create(user=user, event_type="started")
    SubscriptionEvent.objects.create(user=user, event_type="payment", amount=Decimal("1.99"))

    response = admin_client.get(f"{ANALYTICS_URL}revenue/")

    assert response.status_code == 200
    assert len(response.data["monthly_revenue"]) == 12
    assert response.data["total_revenue"] == pytest.approx(3.98)
    assert response.data["active_subscriptions"] == 1


@pytest.mark.django_db
def test_schema_is_served(api_client):
    assert api_client.get("/api/schema/").status_code == 200
