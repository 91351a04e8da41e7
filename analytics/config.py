# analytics/config.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo
import logging

from analytics.lexicons import ACTIVITY_VOCABULARY

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "TIMEZONE": "UTC",
    "CONSISTENCY_WINDOW_DAYS": 30,
    "HEATMAP_DAYS": 30,
    "ACTIVITY_VOCABULARY": ACTIVITY_VOCABULARY,
    "ANALYSIS_ENTRY_LIMIT": 1000,
    "SENTIMENT_SERIES_DAYS": None,
    "PRO_MONTHLY_PRICE": "1.99",
    "REVENUE_WINDOW_MONTHS": 12,
}


@dataclass(frozen=True)
class AnalyticsConfig:
    """Engine settings, passed explicitly instead of read from globals"""

    timezone: str = DEFAULTS["TIMEZONE"]
    consistency_window_days: int = DEFAULTS["CONSISTENCY_WINDOW_DAYS"]
    heatmap_days: int = DEFAULTS["HEATMAP_DAYS"]
    activity_vocabulary: Tuple[str, ...] = field(default=ACTIVITY_VOCABULARY)
    analysis_entry_limit: int = DEFAULTS["ANALYSIS_ENTRY_LIMIT"]
    sentiment_series_days: Optional[int] = None
    pro_monthly_price: Decimal = Decimal(DEFAULTS["PRO_MONTHLY_PRICE"])
    revenue_window_months: int = DEFAULTS["REVENUE_WINDOW_MONTHS"]

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> "AnalyticsConfig":
        merged = {**DEFAULTS, **(values or {})}
        unknown = set(merged) - set(DEFAULTS)
        if unknown:
            logger.warning(f"Ignoring unknown analytics settings: {sorted(unknown)}")

        return cls(
            timezone=merged["TIMEZONE"],
            consistency_window_days=int(merged["CONSISTENCY_WINDOW_DAYS"]),
            heatmap_days=int(merged["HEATMAP_DAYS"]),
            activity_vocabulary=tuple(
                keyword.lower() for keyword in merged["ACTIVITY_VOCABULARY"]
            ),
            analysis_entry_limit=int(merged["ANALYSIS_ENTRY_LIMIT"]),
            sentiment_series_days=(
                int(merged["SENTIMENT_SERIES_DAYS"])
                if merged["SENTIMENT_SERIES_DAYS"] is not None
                else None
            ),
            pro_monthly_price=Decimal(str(merged["PRO_MONTHLY_PRICE"])),
            revenue_window_months=int(merged["REVENUE_WINDOW_MONTHS"]),
        )

    @classmethod
    def from_settings(cls) -> "AnalyticsConfig":
        from django.conf import settings

        return cls.from_dict(getattr(settings, "INSIDEMETER_ANALYTICS", None))


def local_today():
    """Current calendar day in the configured analytics timezone"""
    from django.utils import timezone

    return timezone.now().astimezone(AnalyticsConfig.from_settings().tzinfo).date()
