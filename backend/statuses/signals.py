"""
Signal handlers for the statuses app.
Marks the status catalogs stale whenever a status row changes.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver
import logging

from .catalog import status_catalogs
from .models import OrderStatus, ReservationStatus, TableStatus

logger = logging.getLogger(__name__)


@receiver(post_save, sender=OrderStatus)
@receiver(post_save, sender=TableStatus)
@receiver(post_save, sender=ReservationStatus)
@receiver(post_delete, sender=OrderStatus)
@receiver(post_delete, sender=TableStatus)
@receiver(post_delete, sender=ReservationStatus)
def invalidate_status_catalogs(sender, instance, **kwargs):
    status_catalogs.invalidate()
    logger.debug(f"Status catalogs invalidated after change to {sender.__name__} '{instance.name}'")
