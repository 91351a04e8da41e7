# analytics/services/trends.py
"""
Trend direction over day buckets and plain-language insight messages.
"""
from typing import Iterable, List, Optional, Sequence
import logging

import numpy as np
import pandas as pd

from analytics.services.lunar import best_phase
from analytics.services.scoring import entry_score
from analytics.types import DayBucket, MoodSummary, MoodTrend, PhaseCorrelation

logger = logging.getLogger(__name__)

# Slope (score per tracked day) beyond which a trend stops being "stable"
TREND_THRESHOLD = 0.1

STREAK_INSIGHT_DAYS = 7
MIN_ENTRIES_FOR_AVERAGE_INSIGHT = 7
HIGH_AVERAGE_SCORE = 4.0
LOW_AVERAGE_SCORE = 2.5
MIN_PHASES_FOR_LUNAR_INSIGHT = 3


def analyze_trend(buckets: Iterable[DayBucket]) -> MoodTrend:
    """Least-squares direction of the daily average score"""
    days = [bucket for bucket in buckets if bucket.entry_count > 0]
    if not days:
        return MoodTrend(direction="stable", strength=0.0, volatility=0.0)

    daily_averages = {bucket.day.isoformat(): bucket.average_score for bucket in days}
    weekday_pattern = _weekday_pattern(days)

    if len(days) < 2:
        return MoodTrend(
            direction="stable",
            strength=0.0,
            volatility=0.0,
            daily_averages=daily_averages,
            weekday_pattern=weekday_pattern,
        )

    x = np.arange(len(days))
    y = np.array([bucket.average_score for bucket in days])
    slope, _ = np.polyfit(x, y, 1)

    if slope > TREND_THRESHOLD:
        direction = "improving"
    elif slope < -TREND_THRESHOLD:
        direction = "declining"
    else:
        direction = "stable"

    return MoodTrend(
        direction=direction,
        strength=abs(float(slope)),
        volatility=float(np.std(y, ddof=1)),
        daily_averages=daily_averages,
        weekday_pattern=weekday_pattern,
    )


def _weekday_pattern(days: Sequence[DayBucket]) -> dict:
    rows = [
        {"weekday": bucket.day.strftime("%A"), "score": entry_score(entry)}
        for bucket in days
        for entry in bucket.entries
    ]
    if not rows:
        return {}
    df = pd.DataFrame(rows)
    return {
        weekday: float(value)
        for weekday, value in df.groupby("weekday")["score"].mean().items()
    }


def generate_insights(
    summary: MoodSummary,
    streak: int,
    correlations: Optional[Iterable[PhaseCorrelation]] = None,
) -> List[str]:
    """Short, rule-based observations for the dashboard"""
    insights = []

    if summary.total_entries >= MIN_ENTRIES_FOR_AVERAGE_INSIGHT:
        if summary.average_score >= HIGH_AVERAGE_SCORE:
            insights.append("You've been maintaining a positive mood consistently!")
        elif summary.average_score < LOW_AVERAGE_SCORE:
            insights.append(
                "Consider tracking patterns to identify what affects your mood."
            )

    if streak >= STREAK_INSIGHT_DAYS:
        insights.append(
            f"Great job! You've tracked your mood for {streak} days in a row."
        )

    correlations = list(correlations or [])
    if len(correlations) >= MIN_PHASES_FOR_LUNAR_INSIGHT:
        top = best_phase(correlations)
        insights.append(
            f"Your mood tends to be highest during {top.phase.replace('_', ' ')} phases."
        )

    return insights
