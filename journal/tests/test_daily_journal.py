from datetime import datetime, timezone as dt_timezone

import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from analytics.types import JournalText
from journal.models import DailyJournal

DAILY_URL = "/api/v1/journal/daily/"


@pytest.mark.django_db
def test_requires_user_or_guest(api_client):
    assert api_client.post(DAILY_URL, {"content": "hello"}, format="json").status_code == 401


@pytest.mark.django_db
def test_one_journal_per_day(api_client):
    url = f"{DAILY_URL}?guest_id=guest-1"
    payload = {"date": "2024-06-15", "content": "Feeling grateful today"}

    first = api_client.post(url, payload, format="json")
    second = api_client.post(url, payload, format="json")

    assert first.status_code == 201
    assert first.data["word_count"] == 3
    assert second.status_code == 400
    assert "date" in second.data
    assert DailyJournal.objects.count() == 1


@pytest.mark.django_db
def test_same_day_for_different_owners(api_client):
    payload = {"date": "2024-06-15", "content": "Quiet day"}

    assert api_client.post(f"{DAILY_URL}?guest_id=a", payload, format="json").status_code == 201
    assert api_client.post(f"{DAILY_URL}?guest_id=b", payload, format="json").status_code == 201


@pytest.mark.django_db
def test_blank_content_is_rejected(user_client):
    response = user_client.post(DAILY_URL, {"date": "2024-06-15", "content": "   "}, format="json")
    assert response.status_code == 400


@pytest.mark.django_db
def test_updating_keeps_its_own_day(user_client):
    created = user_client.post(DAILY_URL, {"date": "2024-06-15", "content": "first"}, format="json")
    response = user_client.patch(
        f"{DAILY_URL}{created.data['id']}/", {"content": "first, edited"}, format="json"
    )

    assert response.status_code == 200
    assert response.data["content"] == "first, edited"


@pytest.mark.django_db
def test_database_enforces_uniqueness(user):
    DailyJournal.objects.create(user=user, date="2024-06-15", content="one")
    with pytest.raises(IntegrityError), transaction.atomic():
        DailyJournal.objects.create(user=user, date="2024-06-15", content="two")


@pytest.mark.django_db
def test_to_record(user):
    journal = DailyJournal.objects.create(user=user, date="2024-06-15", content="calm")
    journal.refresh_from_db()
    assert journal.to_record() == JournalText(day=journal.date, content="calm")


@pytest.mark.django_db
@pytest.mark.parametrize("param", ["start_date", "end_date"])
@pytest.mark.parametrize("value", ["2024-02-30", "abc"])
def test_invalid_date_filters_are_bad_requests(user_client, param, value):
    response = user_client.get(f"{DAILY_URL}?{param}={value}")

    assert response.status_code == 400
    assert param in response.data


@pytest.mark.django_db
def test_date_range_filter(user_client):
    for day in ("2024-06-10", "2024-06-15"):
        user_client.post(DAILY_URL, {"date": day, "content": "entry"}, format="json")

    response = user_client.get(f"{DAILY_URL}?start_date=2024-06-12")

    assert response.data["count"] == 1
    assert response.data["results"][0]["date"] == "2024-06-15"


@pytest.mark.django_db
def test_default_day_follows_the_analytics_timezone(user_client, settings, monkeypatch):
    settings.TIME_ZONE = "UTC"
    settings.INSIDEMETER_ANALYTICS = {**settings.INSIDEMETER_ANALYTICS, "TIMEZONE": "Pacific/Kiritimati"}
    monkeypatch.setattr(
        timezone, "now", lambda: datetime(2024, 6, 15, 12, 0, tzinfo=dt_timezone.utc)
    )

    response = user_client.post(DAILY_URL, {"content": "late night thoughts"}, format="json")

    assert response.status_code == 201
    assert response.data["date"] == "2024-06-16"
