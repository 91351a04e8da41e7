# journal/views.py
from rest_framework import viewsets, filters
from drf_spectacular.utils import extend_schema_view, extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
import logging

from journal.models import DailyJournal
from journal.serializers import DailyJournalSerializer
from mood.ownership import HasOwner, date_param, owner_fields
from mood.views import GUEST_PARAMETER

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        description="List daily journals for the current user or guest session",
        summary="List Daily Journals",
        tags=["Journal"],
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
        ],
    ),
    create=extend_schema(tags=["Journal"], parameters=[GUEST_PARAMETER]),
    retrieve=extend_schema(tags=["Journal"], parameters=[GUEST_PARAMETER]),
    update=extend_schema(tags=["Journal"], parameters=[GUEST_PARAMETER]),
    partial_update=extend_schema(tags=["Journal"], parameters=[GUEST_PARAMETER]),
    destroy=extend_schema(tags=["Journal"], parameters=[GUEST_PARAMETER]),
)
class DailyJournalViewSet(viewsets.ModelViewSet):
    """ViewSet for managing daily journals"""

    serializer_class = DailyJournalSerializer
    permission_classes = [HasOwner]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["content"]
    ordering_fields = ["date", "updated_at"]
    ordering = ["-date"]

    def get_queryset(self):
        owner = getattr(self.request, "owner", None)
        if owner is None:
            return DailyJournal.objects.none()

        queryset = DailyJournal.objects.for_owner(owner)

        start_date = date_param(self.request, "start_date")
        end_date = date_param(self.request, "end_date")
        if start_date:
            queryset = queryset.filter(date__gte=start_date)
        if end_date:
            queryset = queryset.filter(date__lte=end_date)

        return queryset

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["owner"] = getattr(self.request, "owner", None)
        return context

    def perform_create(self, serializer):
        owner = self.request.owner
        journal = serializer.save(**owner_fields(owner))
        logger.info(f"Daily journal {journal.pk} saved for {owner} on {journal.date}")
