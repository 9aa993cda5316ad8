"""
Status catalog tests.

The catalogs are read-only name -> row snapshots. A missing name is always a
hard failure, never replaced with a default.
"""
import pytest

from core_backend.exceptions import InvalidDataError, StatusNotFoundError
from statuses.catalog import StatusCatalog, status_catalogs
from statuses.models import OrderStatus, TableStatus
from statuses.services import ensure_default_statuses
from statuses.states import (
    ORDER_TRANSITIONS,
    OrderState,
    TableState,
    check_transition,
    is_transition_allowed,
)


@pytest.mark.django_db
class TestStatusCatalogLookup:
    """Lookup by name against the seeded catalogs"""

    def test_seeded_names_resolve(self, default_statuses):
        for state in OrderState:
            assert status_catalogs.orders.lookup(state).name == state.value
        for state in TableState:
            assert state.value in status_catalogs.tables

    def test_lookup_trims_whitespace(self, default_statuses):
        assert status_catalogs.orders.lookup("  PAID ").name == "PAID"

    def test_unknown_name_raises(self, default_statuses):
        with pytest.raises(StatusNotFoundError) as exc_info:
            status_catalogs.tables.lookup("FLOODED")
        assert exc_info.value.catalog == "table"
        assert "FLOODED" in str(exc_info.value)

    def test_lookup_is_case_sensitive(self, default_statuses):
        with pytest.raises(StatusNotFoundError):
            status_catalogs.orders.lookup("paid")

    def test_none_name_raises(self, default_statuses):
        with pytest.raises(StatusNotFoundError):
            status_catalogs.reservations.lookup(None)

    def test_entries_are_read_only(self, default_statuses):
        entries = status_catalogs.orders.entries
        with pytest.raises(TypeError):
            entries["NEW"] = None


@pytest.mark.django_db
class TestStatusCatalogReload:
    """Snapshot invalidation when status rows change"""

    def test_new_row_visible_after_save(self, default_statuses):
        assert "ON_HOLD" not in status_catalogs.orders

        OrderStatus.objects.create(name="ON_HOLD")

        assert status_catalogs.orders.lookup("ON_HOLD").name == "ON_HOLD"

    def test_deleted_row_disappears(self, default_statuses):
        TableStatus.objects.create(name="CLEANING")
        assert "CLEANING" in status_catalogs.tables

        TableStatus.objects.filter(name="CLEANING").first().delete()

        assert "CLEANING" not in status_catalogs.tables

    def test_ensure_default_statuses_is_idempotent(self, default_statuses):
        assert ensure_default_statuses() == []

    def test_catalog_from_plain_entries(self):
        catalog = StatusCatalog("order", {"NEW": "row"})
        assert len(catalog) == 1
        assert catalog.get("NEW") == "row"
        assert catalog.get("MISSING") is None
        assert catalog.names() == frozenset({"NEW"})


class TestTransitionTables:
    """The declared transition tables are fully permissive"""

    def test_paid_order_can_return_to_new(self):
        assert is_transition_allowed(ORDER_TRANSITIONS, "PAID", "NEW")
        check_transition(ORDER_TRANSITIONS, "PAID", "NEW", entity="order")

    def test_unknown_names_are_not_restricted(self):
        assert is_transition_allowed(ORDER_TRANSITIONS, "ON_HOLD", "NEW")

    def test_narrowed_table_rejects(self):
        narrowed = {"PAID": frozenset({"PAID"}), "NEW": frozenset({"NEW", "PAID"})}
        with pytest.raises(InvalidDataError):
            check_transition(narrowed, "PAID", "NEW", entity="order")
