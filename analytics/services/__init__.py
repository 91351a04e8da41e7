# analytics/services/__init__.py
from .mood_analytics_service import mood_analytics_service, MoodAnalyticsService

__all__ = [
    "mood_analytics_service",
    "MoodAnalyticsService",
]
