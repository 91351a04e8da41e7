# journal/urls.py
from django.urls import path
from .views import DailyJournalViewSet

# Define explicit view mappings
daily_journal_list = DailyJournalViewSet.as_view({"get": "list", "post": "create"})
daily_journal_detail = DailyJournalViewSet.as_view(
    {"get": "retrieve", "put": "update", "patch": "partial_update", "delete": "destroy"}
)

app_name = "journal"

urlpatterns = [
    path("daily/", daily_journal_list, name="daily-journal-list"),
    path("daily/<int:pk>/", daily_journal_detail, name="daily-journal-detail"),
]
