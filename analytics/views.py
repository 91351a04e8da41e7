# analytics/views.py
import logging
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from analytics.exceptions import EntryValidationError
from analytics.serializers import (
    ActivityImpactSerializer,
    DayBucketSerializer,
    JournalAnalyticsSerializer,
    LunarDayPointSerializer,
    MoodAnalyticsSerializer,
    PhaseCorrelationSerializer,
    RevenueMetricsSerializer,
)
from analytics.services import mood_analytics_service
from mood.ownership import resolve_owner
from mood.views import GUEST_PARAMETER

logger = logging.getLogger(__name__)

MAX_PERIOD_DAYS = 3650


def parse_days(value):
    """Optional positive day count from a query string"""
    if value in (None, ""):
        return None
    days = int(value)
    if days < 1 or days > MAX_PERIOD_DAYS:
        raise ValueError(f"days must be between 1 and {MAX_PERIOD_DAYS}")
    return days


class AnalyticsViewSet(viewsets.ViewSet):
    """Read-only analytics for the current user or guest session"""

    permission_classes = [AllowAny]

    def _run(self, request, label, build):
        owner = resolve_owner(request)
        if owner is None:
            return Response(
                {"error": "Authentication or a guest_id is required"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        try:
            return Response(build(owner))
        except EntryValidationError as e:
            logger.warning(f"Invalid data in {label} analytics for {owner}: {e.message}")
            return Response(e.as_dict(), status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.error(f"Error computing {label} analytics for {owner}: {str(e)}")
            return Response(
                {"error": f"Failed to compute {label} analytics"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    @extend_schema(
        summary="Mood analytics",
        description="Summary, streaks, consistency, trend and insights",
        tags=["Analytics"],
        parameters=[
            GUEST_PARAMETER,
            OpenApiParameter(
                name="days",
                type=OpenApiTypes.INT,
                description="Only analyse entries from the last N days",
            ),
        ],
        responses={200: MoodAnalyticsSerializer, 400: OpenApiResponse(description="Invalid days")},
    )
    def mood(self, request):
        try:
            days = parse_days(request.query_params.get("days"))
        except ValueError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._run(
            request,
            "mood",
            lambda owner: MoodAnalyticsSerializer(
                mood_analytics_service.collect(owner, days=days)
            ).data,
        )

    @extend_schema(
        summary="Mood heatmap",
        description="One bucket per day over the trailing heatmap window; "
        "days without entries have entry_count 0",
        tags=["Analytics"],
        parameters=[GUEST_PARAMETER],
        responses={200: DayBucketSerializer(many=True)},
    )
    def heatmap(self, request):
        return self._run(
            request,
            "heatmap",
            lambda owner: DayBucketSerializer(
                mood_analytics_service.heatmap(owner), many=True
            ).data,
        )

    @extend_schema(
        summary="Lunar correlation",
        description="Average day score per moon phase",
        tags=["Analytics"],
        parameters=[GUEST_PARAMETER],
    )
    def lunar(self, request):
        def build(owner):
            correlations, points = mood_analytics_service.lunar(owner)
            return {
                "phases": PhaseCorrelationSerializer(correlations, many=True).data,
                "days": LunarDayPointSerializer(points, many=True).data,
            }

        return self._run(request, "lunar", build)

    @extend_schema(
        summary="Activity impact",
        description="Average score of entries mentioning each activity keyword "
        "or carrying each activity tag. Co-occurrence only, not cause and effect.",
        tags=["Analytics"],
        parameters=[GUEST_PARAMETER],
    )
    def activities(self, request):
        def build(owner):
            keywords, tags = mood_analytics_service.activities(owner)
            return {
                "keywords": ActivityImpactSerializer(keywords, many=True).data,
                "tags": ActivityImpactSerializer(tags, many=True).data,
            }

        return self._run(request, "activity", build)

    @extend_schema(
        summary="Journal analytics",
        description="Emotion cloud, sentiment over time and topic frequency",
        tags=["Analytics"],
        parameters=[GUEST_PARAMETER],
        responses={200: JournalAnalyticsSerializer},
    )
    def journal(self, request):
        return self._run(
            request,
            "journal",
            lambda owner: JournalAnalyticsSerializer(
                mood_analytics_service.journal_insights(owner)
            ).data,
        )


class RevenueMetricsView(APIView):
    """Subscription revenue for administrators"""

    permission_classes = [IsAdminUser]

    @extend_schema(
        summary="Revenue metrics",
        description="Monthly revenue, churn and growth over the trailing window",
        tags=["Analytics"],
        responses={200: RevenueMetricsSerializer},
    )
    def get(self, request):
        try:
            metrics = mood_analytics_service.revenue()
            return Response(RevenueMetricsSerializer(metrics).data)
        except Exception as e:
            logger.error(f"Error computing revenue metrics: {str(e)}")
            return Response(
                {"error": "Failed to compute revenue metrics"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
