# mood/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from mood.views import MoodEntryViewSet

router = DefaultRouter()
router.register(r"entries", MoodEntryViewSet, basename="mood-entry")

urlpatterns = [
    path("", include(router.urls)),
]
