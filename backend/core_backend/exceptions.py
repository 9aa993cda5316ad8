"""
Error taxonomy for the order / table / reservation services.

Services raise these and never recover them locally. The DRF exception
handler below maps each kind onto a stable HTTP status so views do not need
per-exception try/except blocks.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for service-layer failures."""

    code = "service_error"
    default_message = "Service error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class InvalidDataError(ServiceError):
    """Raised when input is missing or malformed, including failed compound-key lookups."""

    code = "invalid_data"
    default_message = "Invalid data"


class NotFoundError(ServiceError):
    """Base for references that do not resolve."""

    code = "not_found"
    default_message = "Not found"


class OrderNotFoundError(NotFoundError):
    code = "order_not_found"
    default_message = "Order not found"


class TableNotFoundError(NotFoundError):
    code = "table_not_found"
    default_message = "Restaurant table not found"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    default_message = "User not found"


class MenuItemNotFoundError(NotFoundError):
    code = "menu_item_not_found"
    default_message = "Menu item not found"


class ReservationNotFoundError(NotFoundError):
    code = "reservation_not_found"
    default_message = "Reservation not found"


class StatusNotFoundError(NotFoundError):
    """Raised when a status name is absent from its catalog."""

    code = "status_not_found"
    default_message = "Status not found"

    def __init__(self, catalog=None, name=None, message=None):
        self.catalog = catalog
        self.name = name
        if message is None and name is not None:
            catalog_info = f" in {catalog} catalog" if catalog else ""
            message = f"Status '{name}' not found{catalog_info}"
        super().__init__(message)


class AlreadyExistsError(ServiceError):
    code = "already_exists"
    default_message = "Already exists"


class TableLabelAlreadyExistsError(AlreadyExistsError):
    code = "table_label_already_exists"

    def __init__(self, label=None, message=None):
        self.label = label
        if message is None:
            message = f"Table label '{label}' already exists" if label else "Table label already exists"
        super().__init__(message)


class TimeSlotUnavailableError(ServiceError):
    """Raised when a table already has a reservation at the exact requested instant."""

    code = "time_slot_unavailable"

    def __init__(self, table=None, event_datetime=None, message=None):
        self.table = table
        self.event_datetime = event_datetime
        if message is None:
            if table is not None and event_datetime is not None:
                message = f"Table '{table.label}' is already reserved at {event_datetime.isoformat()}"
            else:
                message = "Time slot is unavailable"
        super().__init__(message)


ERROR_STATUS_CODES = (
    (InvalidDataError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (TimeSlotUnavailableError, status.HTTP_409_CONFLICT),
)


def status_code_for(exc):
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def service_exception_handler(exc, context):
    """
    DRF exception handler that understands the service error taxonomy.

    DRF's own exceptions (validation, authentication, 404s raised by views)
    keep the default handling. Anything else is reported as an opaque
    operation failure so storage errors never leak to the client.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    request = context.get("request")
    path = request.path if request is not None else None

    if isinstance(exc, ServiceError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"Unmapped service error {exc.__class__.__name__} on {path}: {exc}")
        return Response({"error": str(exc), "code": exc.code}, status=status_code)

    logger.exception(f"Operation failed on {path}", exc_info=exc)
    return Response(
        {"error": "Operation failed", "code": "operation_failed"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
