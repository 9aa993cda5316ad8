"""
Table registry tests: label uniqueness, seat validation and status changes.
"""
import pytest

from django.db import IntegrityError

from core_backend.exceptions import (
    InvalidDataError,
    StatusNotFoundError,
    TableLabelAlreadyExistsError,
    TableNotFoundError,
)
from statuses.states import TableState
from tables.models import RestaurantTable
from tables.services import TableService


@pytest.mark.django_db
class TestCreateTable:
    """Table creation"""

    def test_create_table(self, default_statuses):
        table = TableService.create_table("T1", 4, "AVAILABLE")

        assert table.pk is not None
        assert table.label == "T1"
        assert table.seats == 4
        assert table.is_active is True
        assert table.status_name == "AVAILABLE"

    def test_label_is_trimmed(self, default_statuses):
        table = TableService.create_table("  Patio 3 ", 2, "AVAILABLE")
        assert table.label == "Patio 3"

    def test_duplicate_label_rejected(self, table_t1):
        with pytest.raises(TableLabelAlreadyExistsError):
            TableService.create_table("T1", 6, "AVAILABLE")
        assert RestaurantTable.objects.filter(label="T1").count() == 1

    def test_label_match_is_case_sensitive(self, table_t1):
        table = TableService.create_table("t1", 2, "AVAILABLE")
        assert table.label == "t1"

    def test_inactive_table_label_still_taken(self, table_factory):
        table_factory("T5", is_active=False)
        with pytest.raises(TableLabelAlreadyExistsError):
            TableService.create_table("T5", 2, "AVAILABLE")

    @pytest.mark.parametrize("seats", [0, -1, None])
    def test_non_positive_seats_rejected(self, default_statuses, seats):
        with pytest.raises(InvalidDataError):
            TableService.create_table("T9", seats, "AVAILABLE")
        assert not RestaurantTable.objects.filter(label="T9").exists()

    @pytest.mark.parametrize("label", ["", "   ", None])
    def test_blank_label_rejected(self, default_statuses, label):
        with pytest.raises(InvalidDataError):
            TableService.create_table(label, 4, "AVAILABLE")

    def test_blank_status_rejected(self, default_statuses):
        with pytest.raises(InvalidDataError):
            TableService.create_table("T9", 4, " ")

    def test_unknown_status_is_not_defaulted(self, default_statuses):
        with pytest.raises(StatusNotFoundError):
            TableService.create_table("T9", 4, "BROKEN")
        assert not RestaurantTable.objects.filter(label="T9").exists()

    def test_other_integrity_errors_propagate(self, default_statuses, monkeypatch):
        def failing_save(self, *args, **kwargs):
            raise IntegrityError("CHECK constraint failed: restaurant_table_seats_positive")

        monkeypatch.setattr(RestaurantTable, "save", failing_save)

        with pytest.raises(IntegrityError):
            TableService.create_table("T9", 4, "AVAILABLE")


@pytest.mark.django_db
class TestUpdateTable:
    """Partial table updates"""

    def test_only_supplied_fields_change(self, table_t1):
        table = TableService.update_table(table_t1.id, seats=8)

        assert table.seats == 8
        assert table.label == "T1"
        assert table.status_name == "AVAILABLE"

    def test_keeping_own_label_is_allowed(self, table_t1):
        table = TableService.update_table(table_t1.id, label="T1", seats=3)
        assert table.label == "T1"

    def test_taking_another_tables_label_rejected(self, table_t1, table_t2):
        with pytest.raises(TableLabelAlreadyExistsError):
            TableService.update_table(table_t2.id, label="T1")

    def test_status_change(self, table_t1):
        table = TableService.update_table(table_t1.id, status_name=TableState.OUT_OF_SERVICE)
        table.refresh_from_db()
        assert table.status_name == "OUT_OF_SERVICE"

    def test_deactivate(self, table_t1):
        TableService.update_table(table_t1.id, is_active=False)
        table_t1.refresh_from_db()
        assert table_t1.is_active is False

    def test_missing_table(self, default_statuses):
        with pytest.raises(TableNotFoundError):
            TableService.update_table(999999, seats=2)

    def test_zero_seats_rejected(self, table_t1):
        with pytest.raises(InvalidDataError):
            TableService.update_table(table_t1.id, seats=0)


@pytest.mark.django_db
class TestDeleteAndQueryTables:
    """Unconditional delete and the read projections"""

    def test_delete(self, table_t1):
        assert TableService.delete_table(table_t1.id) is True
        assert TableService.get_table(table_t1.id) is None

    def test_delete_missing(self, default_statuses):
        with pytest.raises(TableNotFoundError):
            TableService.delete_table(999999)

    def test_delete_requires_id(self):
        with pytest.raises(InvalidDataError):
            TableService.delete_table(None)

    def test_list_active_and_by_status(self, table_factory):
        table_factory("A1")
        table_factory("A2", state=TableState.OCCUPIED)
        table_factory("A3", is_active=False)

        assert [t.label for t in TableService.list_active_tables()] == ["A1", "A2"]
        assert [t.label for t in TableService.list_tables_by_status("OCCUPIED")] == ["A2"]
        assert len(TableService.list_tables()) == 3
