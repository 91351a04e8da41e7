# analytics/services/scoring.py
"""
Score model: one continuous 0-5 value per mood entry.
"""
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Mapping, Optional
import logging

from analytics.lexicons import (
    CHALLENGING_MOODS,
    DEFAULT_MOOD_RANK,
    MOOD_RANKS,
    NEUTRAL_MOODS,
    POSITIVE_MOODS,
    SUB_MOOD_MODIFIERS,
)
from analytics.types import Entry, MoodSummary

logger = logging.getLogger(__name__)

MIN_SCORE = 0.0
MAX_SCORE = 5.0


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a display would: halves always go away from zero"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage(part: float, whole: float) -> int:
    if not whole:
        return 0
    return int(round_half_up(part / whole * 100))


def score(
    mood: str,
    intensity: float,
    sub_mood: Optional[str] = None,
    ranks: Mapping[str, int] = MOOD_RANKS,
    modifiers: Mapping[str, float] = SUB_MOOD_MODIFIERS,
) -> float:
    """
    Convert a mood, its intensity and an optional sub-mood into a score.

    Args:
        mood: One of the mood names; unknown moods are ranked as neutral
        intensity: 1-10 intensity of the mood
        sub_mood: Optional detailed emotion tag, matched case-insensitively
        ranks: Mood to rank table
        modifiers: Sub-mood to signed adjustment table

    Returns:
        Score clamped to [0, 5] and rounded to two decimals
    """
    rank = ranks.get(str(mood or "").strip().lower(), DEFAULT_MOOD_RANK)
    value = rank * (float(intensity) / 10)

    if sub_mood and sub_mood.strip():
        value += modifiers.get(sub_mood.strip().lower(), 0.0)

    value = max(MIN_SCORE, min(MAX_SCORE, value))
    return round_half_up(value, 2)


def entry_score(entry: Entry) -> float:
    """Score of an entry, adjusted by its first sub-mood tag"""
    return score(entry.mood, entry.intensity, entry.primary_sub_mood)


def summarize_moods(entries: Iterable[Entry]) -> MoodSummary:
    """Headline numbers for a list of entries"""
    entries = list(entries)
    if not entries:
        return MoodSummary(
            total_entries=0,
            average_score=0.0,
            mood_distribution={},
            moods_by_phase={},
            valence_distribution={"positive": 0, "neutral": 0, "challenging": 0},
        )

    scores = [entry_score(entry) for entry in entries]
    mood_distribution: Dict[str, int] = dict(Counter(entry.mood for entry in entries))

    moods_by_phase: Dict[str, Dict[str, float]] = {}
    for entry, value in zip(entries, scores):
        if not entry.moon_phase:
            continue
        phase = moods_by_phase.setdefault(
            entry.moon_phase, {"count": 0, "total_score": 0.0}
        )
        phase["count"] += 1
        phase["total_score"] += value

    valence = {"positive": 0, "neutral": 0, "challenging": 0}
    for entry in entries:
        mood = entry.mood.lower()
        if mood in POSITIVE_MOODS:
            valence["positive"] += 1
        elif mood in NEUTRAL_MOODS:
            valence["neutral"] += 1
        elif mood in CHALLENGING_MOODS:
            valence["challenging"] += 1

    total = len(entries)
    return MoodSummary(
        total_entries=total,
        average_score=sum(scores) / total,
        mood_distribution=mood_distribution,
        moods_by_phase=moods_by_phase,
        valence_distribution={
            key: percentage(count, total) for key, count in valence.items()
        },
    )


def score_entries(entries: Iterable[Entry]) -> List[float]:
    return [entry_score(entry) for entry in entries]
