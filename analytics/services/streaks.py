# analytics/services/streaks.py
"""
Consecutive-day streaks and rolling consistency.

Streak policy: the walk starts at today when today already has an entry.
If today has none yet, the run ending yesterday still counts, so a streak
is not lost before the day is over. A day with no entry before that ends
the streak. Entries dated after today are ignored.
"""
from datetime import date, timedelta
from typing import Iterable, Set

from analytics.services.scoring import percentage
from analytics.types import DayBucket


def _active_days(buckets: Iterable[DayBucket]) -> Set[date]:
    return {bucket.day for bucket in buckets if bucket.entry_count > 0}


def current_streak(buckets: Iterable[DayBucket], today: date) -> int:
    """Number of consecutive days with at least one entry, walking back from today"""
    active = _active_days(buckets)
    if not active:
        return 0

    cursor = today if today in active else today - timedelta(days=1)
    streak = 0
    while cursor in active:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(buckets: Iterable[DayBucket]) -> int:
    """Longest run of consecutive active days anywhere in the history"""
    active = sorted(_active_days(buckets))
    if not active:
        return 0

    longest = current = 1
    for previous, day in zip(active, active[1:]):
        if (day - previous).days == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def consistency(buckets: Iterable[DayBucket], window_days: int, today: date) -> int:
    """
    Share of the trailing window (today inclusive) that has an entry.

    Returns:
        Whole-number percentage between 0 and 100
    """
    if window_days <= 0:
        return 0

    window_start = today - timedelta(days=window_days - 1)
    days_logged = sum(
        1 for day in _active_days(buckets) if window_start <= day <= today
    )
    return min(100, percentage(days_logged, window_days))
