# analytics/services/lunar.py
"""
Moon phase correlation over day buckets.

Each day is represented by the phase of its most recent entry; phases are
never averaged within a day. Days whose latest entry carries no phase are
left out.
"""
from typing import Dict, Iterable, List, Optional
import logging

import numpy as np

from analytics.types import DayBucket, LunarDayPoint, PhaseCorrelation

logger = logging.getLogger(__name__)


def _day_phase(bucket: DayBucket) -> Optional[str]:
    latest = bucket.most_recent
    if latest is None or not latest.moon_phase:
        return None
    return latest.moon_phase


def correlate_by_phase(buckets: Iterable[DayBucket]) -> List[PhaseCorrelation]:
    """
    Average day score and entry count per moon phase.

    Phases appear in the order they are first seen; phases without any
    qualifying day are absent rather than reported as zero.
    """
    groups: Dict[str, List[DayBucket]] = {}
    for bucket in buckets:
        if bucket.entry_count == 0:
            continue
        phase = _day_phase(bucket)
        if phase is None:
            continue
        groups.setdefault(phase, []).append(bucket)

    correlations = [
        PhaseCorrelation(
            phase=phase,
            average_score=float(np.mean([bucket.average_score for bucket in members])),
            entry_count=sum(bucket.entry_count for bucket in members),
            day_count=len(members),
        )
        for phase, members in groups.items()
    ]
    logger.debug(f"Correlated {len(correlations)} moon phases")
    return correlations


def phase_day_points(buckets: Iterable[DayBucket]) -> List[LunarDayPoint]:
    """One scatter point per day: its phase, illumination and average score"""
    points = []
    for bucket in buckets:
        if bucket.entry_count == 0:
            continue
        phase = _day_phase(bucket)
        if phase is None:
            continue
        points.append(
            LunarDayPoint(
                day=bucket.day,
                phase=phase,
                illumination=bucket.most_recent.moon_illumination,
                average_score=bucket.average_score,
                entry_count=bucket.entry_count,
            )
        )
    return points


def best_phase(correlations: Iterable[PhaseCorrelation]) -> Optional[PhaseCorrelation]:
    correlations = list(correlations)
    if not correlations:
        return None
    return max(correlations, key=lambda correlation: correlation.average_score)
