"""
The single place where order lifecycle events change a table's status.

Starting an order occupies its table and paying an order frees it. Both
writes are unconditional: the table's previous status is not consulted and
the transition table is not applied. Only the status column is saved.
"""
import logging

from statuses.catalog import status_catalogs
from statuses.states import TableState
from tables.models import RestaurantTable

logger = logging.getLogger(__name__)


class TableStateCoordinator:
    """Maps order events (start, pay) onto table occupancy."""

    @staticmethod
    def _set_status(table: RestaurantTable, state: TableState) -> RestaurantTable:
        # Looked up on every call so a reseeded catalog is picked up.
        status = status_catalogs.tables.lookup(state)
        previous = table.status.name if table.status_id else None
        table.status = status
        table.save(update_fields=["status", "updated_at"])
        logger.info(f"Table {table.label} status {previous} -> {status.name}")
        return table

    @staticmethod
    def on_order_started(table: RestaurantTable) -> RestaurantTable:
        return TableStateCoordinator._set_status(table, TableState.OCCUPIED)

    @staticmethod
    def on_order_paid(order) -> None:
        """Frees the order's table. Orders without a table leave every table untouched."""
        if order.table is None:
            return
        TableStateCoordinator._set_status(order.table, TableState.AVAILABLE)
