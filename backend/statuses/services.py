from django.db import transaction
import logging

from .models import OrderStatus, ReservationStatus, TableStatus
from .states import OrderState, ReservationState, TableState

logger = logging.getLogger(__name__)

DEFAULT_STATUSES = (
    (OrderStatus, OrderState),
    (TableStatus, TableState),
    (ReservationStatus, ReservationState),
)


@transaction.atomic
def ensure_default_statuses():
    """
    Create any missing well-known status rows. Idempotent.

    Returns the list of (model name, status name) pairs that were created.
    """
    created_rows = []
    for model, states in DEFAULT_STATUSES:
        for state in states:
            _, created = model.objects.get_or_create(
                name=state.value, defaults={"description": str(state.label)}
            )
            if created:
                created_rows.append((model.__name__, state.value))
    if created_rows:
        logger.info(f"Seeded {len(created_rows)} status rows")
    return created_rows
