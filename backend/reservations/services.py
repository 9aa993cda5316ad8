from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
import logging

from core_backend.exceptions import (
    InvalidDataError,
    ReservationNotFoundError,
    TableNotFoundError,
    TimeSlotUnavailableError,
)
from statuses.catalog import status_catalogs
from statuses.states import RESERVATION_TRANSITIONS, ReservationState, check_transition
from tables.models import RestaurantTable
from .models import Reservation

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


class ReservationService:
    """
    Reservation scheduler.

    Two reservations for the same table conflict when their event times are
    exactly equal; there is no duration or overlap window. The existence check
    gives a readable error in the common case and the (table, event_datetime)
    unique constraint catches writers that race past it.
    """

    UPDATABLE_FIELDS = (
        "table_id",
        "full_name",
        "party_size",
        "phone_number",
        "event_datetime",
        "status_name",
    )

    @staticmethod
    def _resolve_table(table_id: int) -> RestaurantTable:
        try:
            return RestaurantTable.objects.get(id=table_id)
        except RestaurantTable.DoesNotExist:
            raise TableNotFoundError()

    @staticmethod
    def _ensure_slot_free(table: RestaurantTable, event_datetime: datetime) -> None:
        if Reservation.objects.filter(table=table, event_datetime=event_datetime).exists():
            logger.warning(
                f"Reservation rejected: table {table.label} already booked at {event_datetime.isoformat()}"
            )
            raise TimeSlotUnavailableError(table, event_datetime)

    @staticmethod
    def _save(reservation: Reservation) -> Reservation:
        try:
            with transaction.atomic():
                reservation.save()
        except IntegrityError as e:
            # Only a booking already holding this slot is a conflict; any other
            # constraint failure propagates unchanged.
            slot_taken = (
                Reservation.objects.filter(
                    table=reservation.table, event_datetime=reservation.event_datetime
                )
                .exclude(pk=reservation.pk)
                .exists()
            )
            if not slot_taken:
                raise
            logger.warning(
                f"Reservation for table {reservation.table.label} at "
                f"{reservation.event_datetime.isoformat()} rejected by unique constraint: {e}"
            )
            raise TimeSlotUnavailableError(reservation.table, reservation.event_datetime) from e
        return reservation

    @staticmethod
    def _resolve_status(status_name: Optional[str]):
        if _is_blank(status_name):
            return status_catalogs.reservations.lookup(ReservationState.PENDING)
        return status_catalogs.reservations.lookup(status_name)

    @staticmethod
    @transaction.atomic
    def create_reservation(
        table_id: int,
        full_name: str,
        party_size: int,
        event_datetime: datetime,
        phone_number: Optional[str] = None,
        status_name: Optional[str] = None,
    ) -> Reservation:
        """
        Books a table for a party at an exact instant.

        A blank or missing status name means PENDING.

        Raises:
            InvalidDataError: missing table, blank name, non-positive party size or missing time
            TableNotFoundError: the table does not exist
            TimeSlotUnavailableError: the table already has a booking at that instant
            StatusNotFoundError: the status name is not in the reservation catalog
        """
        if table_id is None:
            raise InvalidDataError("Table is required")
        if _is_blank(full_name):
            raise InvalidDataError("Full name is required")
        if party_size is None or party_size <= 0:
            raise InvalidDataError("Party size must be positive")
        if event_datetime is None:
            raise InvalidDataError("Event date and time is required")

        table = ReservationService._resolve_table(table_id)
        ReservationService._ensure_slot_free(table, event_datetime)
        status = ReservationService._resolve_status(status_name)

        reservation = ReservationService._save(
            Reservation(
                table=table,
                full_name=full_name.strip(),
                party_size=party_size,
                phone_number=phone_number,
                event_datetime=event_datetime,
                status=status,
            )
        )
        logger.info(
            f"Reservation {reservation.id} created for {reservation.full_name} "
            f"at table {table.label} on {event_datetime.isoformat()}"
        )
        return reservation

    @staticmethod
    @transaction.atomic
    def update_reservation(reservation_id: int, data: Optional[Dict[str, Any]]) -> Reservation:
        """
        Applies the supplied fields of ``data`` to a reservation.

        Fields are applied in the order table, full name, party size, phone,
        event time, status. Changing the event time re-runs the exact-match
        conflict check against the reservation's current table; the
        reservation's own row is not excluded, so re-sending its unchanged
        timestamp is reported as a conflict.
        """
        if reservation_id is None or data is None:
            raise InvalidDataError()

        unknown = set(data) - set(ReservationService.UPDATABLE_FIELDS)
        if unknown:
            raise InvalidDataError(f"Unknown reservation fields: {', '.join(sorted(unknown))}")

        try:
            reservation = Reservation.objects.select_related("table", "status").get(id=reservation_id)
        except Reservation.DoesNotExist:
            raise ReservationNotFoundError()

        if data.get("table_id") is not None:
            reservation.table = ReservationService._resolve_table(data["table_id"])

        if data.get("full_name") is not None:
            if _is_blank(data["full_name"]):
                raise InvalidDataError("Full name cannot be blank")
            reservation.full_name = data["full_name"].strip()

        if data.get("party_size") is not None:
            if data["party_size"] <= 0:
                raise InvalidDataError("Party size must be positive")
            reservation.party_size = data["party_size"]

        if data.get("phone_number") is not None:
            reservation.phone_number = data["phone_number"]

        if data.get("event_datetime") is not None:
            ReservationService._ensure_slot_free(reservation.table, data["event_datetime"])
            reservation.event_datetime = data["event_datetime"]

        if data.get("status_name") is not None:
            if _is_blank(data["status_name"]):
                raise InvalidDataError("Status name cannot be blank")
            status = status_catalogs.reservations.lookup(data["status_name"])
            check_transition(
                RESERVATION_TRANSITIONS, reservation.status.name, status.name, entity="reservation"
            )
            reservation.status = status

        ReservationService._save(reservation)
        logger.info(f"Reservation {reservation.id} updated ({', '.join(sorted(data)) or 'no fields'})")
        return reservation

    @staticmethod
    @transaction.atomic
    def delete_reservation(reservation_id: int) -> bool:
        if reservation_id is None:
            raise InvalidDataError()

        deleted, _ = Reservation.objects.filter(id=reservation_id).delete()
        if not deleted:
            raise ReservationNotFoundError()

        logger.info(f"Reservation {reservation_id} deleted")
        return True

    @staticmethod
    def get_reservation(reservation_id: int) -> Optional[Reservation]:
        if reservation_id is None:
            raise InvalidDataError()
        return (
            Reservation.objects.select_related("table", "status")
            .filter(id=reservation_id)
            .first()
        )

    @staticmethod
    def list_by_status(status_name: str) -> List[Reservation]:
        if _is_blank(status_name):
            raise InvalidDataError("Status is required")
        return list(
            Reservation.objects.select_related("table", "status").filter(
                status__name=status_name.strip()
            )
        )

    @staticmethod
    def list_by_table_and_date_range(
        table_id: int, start: datetime, end: datetime
    ) -> List[Reservation]:
        """Reservations on a table whose event time falls within [start, end]."""
        if table_id is None or start is None or end is None:
            raise InvalidDataError("Table, start and end are required")
        return list(
            Reservation.objects.select_related("table", "status").filter(
                table_id=table_id,
                event_datetime__gte=start,
                event_datetime__lte=end,
            )
        )
