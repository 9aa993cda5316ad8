"""
Well-known status names and the transition table for each entity.

The catalogs may hold additional names; a transition involving a name that is
not declared here is not restricted. The declared tables are fully permissive:
any known state may move to any known state. Narrowing one of them is a
behavior change for callers, not a bug fix.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.exceptions import InvalidDataError


class OrderState(models.TextChoices):
    NEW = "NEW", _("New")
    IN_PROGRESS = "IN_PROGRESS", _("In progress")
    SERVED = "SERVED", _("Served")
    PAID = "PAID", _("Paid")
    CANCELLED = "CANCELLED", _("Cancelled")


class TableState(models.TextChoices):
    AVAILABLE = "AVAILABLE", _("Available")
    OCCUPIED = "OCCUPIED", _("Occupied")
    RESERVED = "RESERVED", _("Reserved")
    OUT_OF_SERVICE = "OUT_OF_SERVICE", _("Out of service")


class ReservationState(models.TextChoices):
    PENDING = "PENDING", _("Pending")
    CONFIRMED = "CONFIRMED", _("Confirmed")
    CANCELLED = "CANCELLED", _("Cancelled")
    COMPLETED = "COMPLETED", _("Completed")


# Orders that are no longer open.
CLOSED_ORDER_STATES = (OrderState.PAID, OrderState.CANCELLED)


def _permissive(states):
    return {state.value: frozenset(s.value for s in states) for state in states}


ORDER_TRANSITIONS = _permissive(OrderState)
TABLE_TRANSITIONS = _permissive(TableState)
RESERVATION_TRANSITIONS = _permissive(ReservationState)


def is_transition_allowed(transitions, current, new):
    allowed = transitions.get(current)
    if allowed is None or new not in transitions:
        return True
    return new in allowed


def check_transition(transitions, current, new, entity="status"):
    """Raise InvalidDataError when the transition table forbids current -> new."""
    if not is_transition_allowed(transitions, current, new):
        raise InvalidDataError(f"Cannot transition {entity} from {current} to {new}.")
