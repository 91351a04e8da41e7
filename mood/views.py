# mood/views.py
from rest_framework import viewsets, filters
from drf_spectacular.utils import extend_schema_view, extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
import logging

from mood.models import MoodEntry
from mood.ownership import HasOwner, date_param, owner_fields
from mood.serializers import MoodEntrySerializer

logger = logging.getLogger(__name__)

GUEST_PARAMETER = OpenApiParameter(
    name="guest_id",
    type=OpenApiTypes.STR,
    description="Guest session id, used when the request is not authenticated",
)


@extend_schema_view(
    list=extend_schema(
        description="List mood entries for the current user or guest session",
        summary="List Mood Entries",
        tags=["Mood"],
        parameters=[
            GUEST_PARAMETER,
            OpenApiParameter(
                name="start_date",
                type=OpenApiTypes.DATE,
                description="Filter by start date (YYYY-MM-DD)",
            ),
            OpenApiParameter(
                name="end_date",
                type=OpenApiTypes.DATE,
                description="Filter by end date (YYYY-MM-DD)",
            ),
            OpenApiParameter(
                name="mood",
                type=OpenApiTypes.STR,
                description="Only entries with this mood",
            ),
        ],
    ),
    create=extend_schema(
        description="Record a mood entry", tags=["Mood"], parameters=[GUEST_PARAMETER]
    ),
    retrieve=extend_schema(tags=["Mood"], parameters=[GUEST_PARAMETER]),
    update=extend_schema(tags=["Mood"], parameters=[GUEST_PARAMETER]),
    partial_update=extend_schema(tags=["Mood"], parameters=[GUEST_PARAMETER]),
    destroy=extend_schema(tags=["Mood"], parameters=[GUEST_PARAMETER]),
)
class MoodEntryViewSet(viewsets.ModelViewSet):
    """ViewSet for managing mood entries of one user or guest session"""

    serializer_class = MoodEntrySerializer
    permission_classes = [HasOwner]
    filter_backends = [filters.OrderingFilter]
    ordering_fields = ["date", "intensity", "created_at"]
    ordering = ["-date"]

    def get_queryset(self):
        owner = getattr(self.request, "owner", None)
        if owner is None:
            return MoodEntry.objects.none()

        queryset = MoodEntry.objects.for_owner(owner)

        start_date = date_param(self.request, "start_date")
        end_date = date_param(self.request, "end_date")
        if start_date:
            queryset = queryset.filter(date__date__gte=start_date)
        if end_date:
            queryset = queryset.filter(date__date__lte=end_date)

        mood = self.request.query_params.get("mood")
        if mood:
            queryset = queryset.filter(mood=mood)

        return queryset

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["owner"] = getattr(self.request, "owner", None)
        return context

    def perform_create(self, serializer):
        owner = self.request.owner
        entry = serializer.save(**owner_fields(owner))
        logger.info(f"Mood entry {entry.pk} recorded for {owner}")
