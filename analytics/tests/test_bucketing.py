from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from analytics.services.bucketing import (
    add_entry,
    bucket_by_day,
    fill_day_range,
    local_day,
    trailing_days,
)
from analytics.services.scoring import entry_score

from .conftest import TODAY, at


def test_empty_input_gives_no_buckets():
    assert bucket_by_day([]) == []


def test_single_entry_bucket_matches_entry_score(make_entry):
    entry = make_entry(mood="happy", intensity=7, sub_moods=["grateful"])
    [bucket] = bucket_by_day([entry])

    assert bucket.day == TODAY
    assert bucket.average_score == entry_score(entry)
    assert bucket.entry_count == len(bucket.entries) == 1


def test_entries_on_the_same_day_share_a_bucket(make_entry):
    morning = make_entry(mood="sad", intensity=4, hour=8)
    evening = make_entry(mood="excited", intensity=10, hour=21, notes="great evening")
    yesterday = make_entry(day=TODAY - timedelta(days=1))

    buckets = bucket_by_day([evening, yesterday, morning])

    assert [bucket.day for bucket in buckets] == [TODAY - timedelta(days=1), TODAY]
    today_bucket = buckets[1]
    assert today_bucket.entry_count == 2
    assert today_bucket.average_score == pytest.approx((0.4 + 5.0) / 2)
    assert today_bucket.average_intensity == pytest.approx(7.0)
    assert today_bucket.has_journal is True
    assert today_bucket.most_recent == evening
    assert buckets[0].has_journal is False


def test_whitespace_notes_do_not_count_as_journal(make_entry):
    [bucket] = bucket_by_day([make_entry(notes="   ")])
    assert bucket.has_journal is False


def test_days_follow_the_bucketing_timezone(make_entry):
    late_evening = make_entry(date=datetime(2024, 6, 15, 23, 30, tzinfo=timezone.utc))
    after_midnight = make_entry(date=datetime(2024, 6, 16, 2, 0, tzinfo=timezone.utc))

    utc_days = [bucket.day for bucket in bucket_by_day([late_evening, after_midnight])]
    new_york = bucket_by_day([late_evening, after_midnight], ZoneInfo("America/New_York"))

    assert utc_days == [date(2024, 6, 15), date(2024, 6, 16)]
    assert [bucket.day for bucket in new_york] == [date(2024, 6, 15)]
    assert new_york[0].entry_count == 2


def test_naive_timestamps_are_already_local():
    moment = datetime(2024, 6, 15, 23, 30)
    assert local_day(moment, ZoneInfo("Asia/Tokyo")) == date(2024, 6, 15)
    assert local_day(at(date(2024, 6, 15), 23, 30), ZoneInfo("Asia/Tokyo")) == date(2024, 6, 16)


def test_fill_day_range_materialises_empty_days(make_entry):
    start = TODAY - timedelta(days=2)
    buckets = bucket_by_day([make_entry(day=start), make_entry(day=TODAY)])

    filled = fill_day_range(buckets, start, TODAY)

    assert [bucket.day for bucket in filled] == [start, start + timedelta(days=1), TODAY]
    gap = filled[1]
    assert gap.entry_count == 0
    assert gap.average_score == 0
    assert gap.entries == ()
    assert filled[0] is buckets[0]


def test_fill_day_range_with_reversed_bounds():
    assert fill_day_range([], TODAY, TODAY - timedelta(days=1)) == []


def test_trailing_days(make_entry):
    buckets = bucket_by_day([make_entry(day=TODAY - timedelta(days=40)), make_entry()])
    window = trailing_days(buckets, TODAY, 30)

    assert len(window) == 30
    assert window[0].day == TODAY - timedelta(days=29)
    assert window[-1].day == TODAY
    assert sum(bucket.entry_count for bucket in window) == 1
    assert trailing_days(buckets, TODAY, 0) == []


@pytest.mark.parametrize(
    "offsets",
    [
        [0],
        [0, 0, 0],
        [3, 1, 2, 1, 0],
        [10, 0, 5, 10, 7, 0],
    ],
)
def test_incremental_bucketing_matches_full_rebuild(make_entry, offsets):
    entries = [
        make_entry(
            mood=["sad", "happy", "excited"][index % 3],
            intensity=(index % 10) + 1,
            day=TODAY - timedelta(days=offset),
            hour=index % 24,
        )
        for index, offset in enumerate(offsets)
    ]

    incremental = []
    for entry in entries:
        incremental = add_entry(incremental, entry)

    assert incremental == bucket_by_day(entries)


def test_add_entry_leaves_input_untouched(make_entry):
    original = bucket_by_day([make_entry()])
    snapshot = list(original)

    updated = add_entry(original, make_entry(mood="sad", intensity=2))

    assert original == snapshot
    assert original[0].entry_count == 1
    assert updated[0].entry_count == 2
