# analytics/services/activity_impact.py
"""
Activity impact ranking.

This is keyword co-occurrence: an activity's "boost" is the average score
of the entries that mention it. It shows which activities tend to appear
alongside better or worse days and says nothing about cause.
"""
from typing import Dict, Iterable, List, Sequence
import logging

from analytics.lexicons import ACTIVITY_VOCABULARY
from analytics.services.scoring import entry_score, round_half_up
from analytics.types import ActivityImpact, Entry

logger = logging.getLogger(__name__)


def _rank(totals: Dict[str, Dict]) -> List[ActivityImpact]:
    impacts = [
        ActivityImpact(
            activity=activity,
            average_score_boost=round_half_up(data["total"] / data["count"], 1),
            frequency=data["count"],
            latest_date=data["latest"],
        )
        for activity, data in totals.items()
        if data["count"] > 0
    ]
    # sorted() is stable, so ties keep vocabulary / discovery order
    return sorted(impacts, key=lambda impact: impact.average_score_boost, reverse=True)


def rank_activity_impact(
    entries: Iterable[Entry], vocabulary: Sequence[str] = ACTIVITY_VOCABULARY
) -> List[ActivityImpact]:
    """
    Rank note keywords by the average score of entries mentioning them.

    Args:
        entries: Entries to scan; those with empty notes are skipped
        vocabulary: Keywords matched as case-insensitive substrings

    Returns:
        Keywords with at least one mention, highest average first
    """
    keywords = list(dict.fromkeys(keyword.lower() for keyword in vocabulary))
    totals: Dict[str, Dict] = {
        keyword: {"total": 0.0, "count": 0, "latest": None} for keyword in keywords
    }

    for entry in entries:
        if not entry.has_journal:
            continue
        notes = entry.notes.lower()
        value = entry_score(entry)
        for keyword in keywords:
            if keyword in notes:
                data = totals[keyword]
                data["total"] += value
                data["count"] += 1
                if data["latest"] is None or entry.date > data["latest"]:
                    data["latest"] = entry.date

    return _rank(totals)


def rank_activity_tags(entries: Iterable[Entry]) -> List[ActivityImpact]:
    """Same ranking keyed on the activity tags picked on each entry"""
    totals: Dict[str, Dict] = {}
    for entry in entries:
        if not entry.activities:
            continue
        value = entry_score(entry)
        for tag in dict.fromkeys(tag.strip().lower() for tag in entry.activities if tag and tag.strip()):
            data = totals.setdefault(tag, {"total": 0.0, "count": 0, "latest": None})
            data["total"] += value
            data["count"] += 1
            if data["latest"] is None or entry.date > data["latest"]:
                data["latest"] = entry.date

    return _rank(totals)
