# analytics/services/bucketing.py
"""
Calendar-day bucketing of mood entries.

Entries are grouped by the calendar date of their timestamp in a single
authoritative timezone. Aware timestamps are converted into that zone;
naive timestamps are taken to already be local to it.
"""
from collections import OrderedDict
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence
import logging

import numpy as np

from analytics.services.scoring import entry_score
from analytics.types import DayBucket, Entry

logger = logging.getLogger(__name__)


def local_day(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of a timestamp in the bucketing timezone"""
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz or timezone.utc).date()


def make_bucket(day: date, entries: Sequence[Entry]) -> DayBucket:
    """Build one day's aggregates from the entries that fall on it"""
    if not entries:
        return DayBucket.empty(day)

    scores = [entry_score(entry) for entry in entries]
    intensities = [entry.intensity for entry in entries]
    return DayBucket(
        day=day,
        entries=tuple(entries),
        average_score=float(np.mean(scores)),
        average_intensity=float(np.mean(intensities)),
        entry_count=len(entries),
        has_journal=any(entry.has_journal for entry in entries),
    )


def bucket_by_day(entries: Iterable[Entry], tz: Optional[tzinfo] = None) -> List[DayBucket]:
    """
    Group entries into per-day buckets.

    Args:
        entries: Validated entries for a single owner
        tz: Timezone whose calendar defines a day (UTC when omitted)

    Returns:
        Buckets for days that have at least one entry, oldest first
    """
    grouped: Dict[date, List[Entry]] = OrderedDict()
    for entry in entries:
        grouped.setdefault(local_day(entry.date, tz), []).append(entry)

    buckets = [make_bucket(day, grouped[day]) for day in sorted(grouped)]
    logger.debug(f"Bucketed entries into {len(buckets)} days")
    return buckets


def fill_day_range(buckets: Iterable[DayBucket], start: date, end: date) -> List[DayBucket]:
    """
    Materialise one bucket per day from start to end inclusive.

    Days without entries come back as empty buckets so a heatmap can tell
    "no entry" (entry_count == 0) apart from a real zero score.
    """
    if end < start:
        return []

    by_day = {bucket.day: bucket for bucket in buckets}
    days = (end - start).days + 1
    return [
        by_day.get(start + timedelta(days=offset), DayBucket.empty(start + timedelta(days=offset)))
        for offset in range(days)
    ]


def trailing_days(buckets: Iterable[DayBucket], today: date, days: int) -> List[DayBucket]:
    """The last `days` calendar days ending on today, gaps included"""
    if days <= 0:
        return []
    return fill_day_range(buckets, today - timedelta(days=days - 1), today)


def add_entry(
    buckets: Sequence[DayBucket], entry: Entry, tz: Optional[tzinfo] = None
) -> List[DayBucket]:
    """
    Fold one new entry into an existing bucket list.

    Returns a new list; the input buckets are left untouched. The result is
    equal to bucketing the full entry list from scratch.
    """
    day = local_day(entry.date, tz)
    updated = []
    placed = False
    for bucket in buckets:
        if bucket.day == day:
            updated.append(make_bucket(day, bucket.entries + (entry,)))
            placed = True
        else:
            updated.append(bucket)

    if not placed:
        updated.append(make_bucket(day, (entry,)))
        updated.sort(key=lambda bucket: bucket.day)
    return updated
