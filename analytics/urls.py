# analytics/urls.py
from django.urls import path
from .views import AnalyticsViewSet, RevenueMetricsView

urlpatterns = [
    path("mood/", AnalyticsViewSet.as_view({"get": "mood"}), name="analytics-mood"),
    path("heatmap/", AnalyticsViewSet.as_view({"get": "heatmap"}), name="analytics-heatmap"),
    path("lunar/", AnalyticsViewSet.as_view({"get": "lunar"}), name="analytics-lunar"),
    path(
        "activities/",
        AnalyticsViewSet.as_view({"get": "activities"}),
        name="analytics-activities",
    ),
    path("journal/", AnalyticsViewSet.as_view({"get": "journal"}), name="analytics-journal"),
    path("revenue/", RevenueMetricsView.as_view(), name="analytics-revenue"),
]
