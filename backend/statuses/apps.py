from django.apps import AppConfig
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


class StatusesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "statuses"

    def ready(self):
        import statuses.signals  # noqa

        if getattr(settings, "STATUS_CATALOG_WARM_ON_STARTUP", False):
            self._warm_catalogs()

    def _warm_catalogs(self):
        from django.db import DatabaseError
        from .catalog import status_catalogs

        try:
            status_catalogs.reload()
            logger.info("Status catalogs warmed on startup")
        except DatabaseError as e:
            # Tables may not exist yet (first migrate); the next lookup loads lazily.
            logger.warning(f"Status catalog warm-up skipped: {e}")
