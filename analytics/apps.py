# analytics/apps.py
from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class AnalyticsAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "analytics"
    verbose_name = "InsideMeter Analytics"

    def ready(self):
        logger.info("Analytics app initialized")
