from datetime import date, datetime, timezone

import pytest

from analytics.types import Entry

TODAY = date(2024, 6, 15)


def at(day, hour=12, minute=0, tz=timezone.utc):
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=tz)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_entry():
    """Factory for engine entries owned by user 1, noon UTC on the given day"""

    def _make(mood="happy", intensity=8, day=TODAY, hour=12, **kwargs):
        kwargs.setdefault("user_id", 1)
        moment = kwargs.pop("date", None) or at(day, hour)
        return Entry(mood=mood, intensity=intensity, date=moment, **kwargs)

    return _make
