from typing import List, Optional

from django.db import IntegrityError, transaction
import logging

from core_backend.exceptions import (
    InvalidDataError,
    TableLabelAlreadyExistsError,
    TableNotFoundError,
)
from statuses.catalog import status_catalogs
from statuses.states import TABLE_TRANSITIONS, check_transition
from .models import RestaurantTable

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


class TableService:
    """Table registry: label-unique table records and their status."""

    @staticmethod
    def _save(table: RestaurantTable) -> RestaurantTable:
        # The unique constraint on label backs up the existence check when two
        # writers race for the same label. Other constraint failures propagate.
        try:
            with transaction.atomic():
                table.save()
        except IntegrityError as e:
            if not RestaurantTable.objects.filter(label=table.label).exclude(pk=table.pk).exists():
                raise
            logger.warning(f"Table label '{table.label}' rejected by unique constraint: {e}")
            raise TableLabelAlreadyExistsError(table.label) from e
        return table

    @staticmethod
    @transaction.atomic
    def create_table(
        label: str, seats: int, status_name: str, is_active: bool = True
    ) -> RestaurantTable:
        """
        Creates a table.

        Raises:
            InvalidDataError: blank label, non-positive seats or blank status
            TableLabelAlreadyExistsError: another table has exactly this label
            StatusNotFoundError: the status name is not in the table catalog
        """
        if _is_blank(label):
            raise InvalidDataError("Label is required")

        if seats is None or seats <= 0:
            raise InvalidDataError("Seats must be positive")

        label = label.strip()

        if RestaurantTable.objects.filter(label=label).exists():
            raise TableLabelAlreadyExistsError(label)

        if _is_blank(status_name):
            raise InvalidDataError("Status is required")

        status = status_catalogs.tables.lookup(status_name)

        table = TableService._save(
            RestaurantTable(label=label, seats=seats, is_active=is_active, status=status)
        )
        logger.info(f"Table {table.label} created with status {status.name}")
        return table

    @staticmethod
    @transaction.atomic
    def update_table(
        table_id: int,
        label: Optional[str] = None,
        seats: Optional[int] = None,
        status_name: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> RestaurantTable:
        """
        Partially updates a table. Only the arguments that are not None are applied.
        """
        if table_id is None:
            raise InvalidDataError()

        try:
            table = RestaurantTable.objects.select_related("status").get(id=table_id)
        except RestaurantTable.DoesNotExist:
            raise TableNotFoundError()

        if label is not None:
            if _is_blank(label):
                raise InvalidDataError("Label cannot be blank")
            new_label = label.strip()
            if (
                new_label != table.label
                and RestaurantTable.objects.filter(label=new_label).exists()
            ):
                raise TableLabelAlreadyExistsError(new_label)
            table.label = new_label

        if seats is not None:
            if seats <= 0:
                raise InvalidDataError("Seats must be positive")
            table.seats = seats

        if status_name is not None:
            if _is_blank(status_name):
                raise InvalidDataError("Status cannot be blank")
            status = status_catalogs.tables.lookup(status_name)
            check_transition(TABLE_TRANSITIONS, table.status.name, status.name, entity="table")
            table.status = status

        if is_active is not None:
            table.is_active = is_active

        TableService._save(table)
        logger.info(f"Table {table.id} updated ({table.label}, {table.status.name})")
        return table

    @staticmethod
    @transaction.atomic
    def delete_table(table_id: int) -> bool:
        """
        Deletes a table unconditionally. Orders keep their rows with the table
        reference cleared; the table's reservations are removed with it.
        """
        if table_id is None:
            raise InvalidDataError()

        if not RestaurantTable.objects.filter(id=table_id).exists():
            raise TableNotFoundError()

        RestaurantTable.objects.filter(id=table_id).delete()
        logger.info(f"Table {table_id} deleted")
        return True

    @staticmethod
    def get_table(table_id: int) -> Optional[RestaurantTable]:
        if table_id is None:
            raise InvalidDataError()
        return RestaurantTable.objects.select_related("status").filter(id=table_id).first()

    @staticmethod
    def list_tables() -> List[RestaurantTable]:
        return list(RestaurantTable.objects.select_related("status"))

    @staticmethod
    def list_active_tables() -> List[RestaurantTable]:
        return list(RestaurantTable.objects.select_related("status").filter(is_active=True))

    @staticmethod
    def list_tables_by_status(status_name: str) -> List[RestaurantTable]:
        if _is_blank(status_name):
            raise InvalidDataError("Status is required")
        return list(
            RestaurantTable.objects.select_related("status").filter(
                status__name=status_name.strip()
            )
        )
