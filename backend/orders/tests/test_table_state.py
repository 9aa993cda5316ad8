"""
Table occupancy driven by order start and pay.
"""
import pytest
from decimal import Decimal

from core_backend.exceptions import (
    InvalidDataError,
    OrderNotFoundError,
    StatusNotFoundError,
    TableNotFoundError,
    UserNotFoundError,
)
from orders.services import OrderService, TableStateCoordinator
from statuses.models import TableStatus
from statuses.states import TableState


@pytest.mark.django_db
class TestStartOrder:
    """Seating a walk-in"""

    def test_start_occupies_table_and_opens_empty_order(self, staff_user, table_t1):
        order = OrderService.start_order(staff_user.id, table_t1.id)

        table_t1.refresh_from_db()
        assert table_t1.status_name == "OCCUPIED"
        assert order.status.name == "NEW"
        assert order.table == table_t1
        assert order.items.count() == 0

    @pytest.mark.parametrize("state", [TableState.RESERVED, TableState.OUT_OF_SERVICE, TableState.OCCUPIED])
    def test_start_ignores_previous_status(self, staff_user, table_factory, state):
        table = table_factory("X", state=state)
        OrderService.start_order(staff_user.id, table.id)
        table.refresh_from_db()
        assert table.status_name == "OCCUPIED"

    def test_unknown_user(self, table_t1):
        with pytest.raises(UserNotFoundError):
            OrderService.start_order(999999, table_t1.id)

    def test_unknown_table(self, staff_user, default_statuses):
        with pytest.raises(TableNotFoundError):
            OrderService.start_order(staff_user.id, 999999)

    def test_ids_required(self, staff_user):
        with pytest.raises(InvalidDataError):
            OrderService.start_order(staff_user.id, None)

    def test_missing_occupied_status_aborts_everything(self, staff_user, table_t1):
        TableStatus.objects.filter(name="OCCUPIED").delete()

        with pytest.raises(StatusNotFoundError):
            OrderService.start_order(staff_user.id, table_t1.id)

        table_t1.refresh_from_db()
        assert table_t1.status_name == "AVAILABLE"
        assert not table_t1.orders.exists()


@pytest.mark.django_db
class TestPayOrder:
    """Paying frees the table"""

    def test_start_then_pay(self, staff_user, table_t1):
        order = OrderService.start_order(staff_user.id, table_t1.id)

        paid = OrderService.pay_order(order.id, "CARD", Decimal("40.00"), tip=Decimal("5.00"), note="thanks")

        table_t1.refresh_from_db()
        assert table_t1.status_name == "AVAILABLE"
        assert paid.status.name == "PAID"
        assert paid.payment_method == "CARD"
        assert paid.paid_amount == Decimal("40.00")
        assert paid.tip_amount == Decimal("5.00")
        assert paid.payment_note == "thanks"
        assert paid.paid_at is not None

    def test_amount_is_not_reconciled(self, staff_user, table_t1, burger):
        order = OrderService.create_order(
            staff_user.id, [{"menu_item_id": burger.id, "quantity": 2}], table_id=table_t1.id
        )
        paid = OrderService.pay_order(order.id, "CASH", Decimal("1.00"))
        assert paid.paid_amount == Decimal("1.00")
        assert paid.items.count() == 1

    def test_pay_without_table_touches_no_table(self, staff_user, table_factory, burger):
        occupied = table_factory("Busy", state=TableState.OCCUPIED)
        order = OrderService.create_order(staff_user.id, [{"menu_item_id": burger.id, "quantity": 1}])

        OrderService.pay_order(order.id, "CASH", Decimal("12.50"))

        occupied.refresh_from_db()
        assert occupied.status_name == "OCCUPIED"

    def test_unknown_order(self, default_statuses):
        with pytest.raises(OrderNotFoundError):
            OrderService.pay_order(999999, "CASH", Decimal("1.00"))

    @pytest.mark.parametrize("method, amount", [("", Decimal("1.00")), ("CASH", None)])
    def test_payment_details_required(self, staff_user, table_t1, method, amount):
        order = OrderService.start_order(staff_user.id, table_t1.id)
        with pytest.raises(InvalidDataError):
            OrderService.pay_order(order.id, method, amount)


@pytest.mark.django_db
class TestTableStateCoordinator:
    """The coordinator in isolation"""

    def test_on_order_started(self, table_t1):
        TableStateCoordinator.on_order_started(table_t1)
        table_t1.refresh_from_db()
        assert table_t1.status_name == "OCCUPIED"

    def test_on_order_paid_with_table(self, staff_user, table_factory):
        table = table_factory("Y", state=TableState.OCCUPIED)
        order = OrderService.start_order(staff_user.id, table.id)

        TableStateCoordinator.on_order_paid(order)

        table.refresh_from_db()
        assert table.status_name == "AVAILABLE"

    def test_on_order_paid_without_table(self, staff_user, burger, default_statuses):
        order = OrderService.create_order(staff_user.id, [{"menu_item_id": burger.id, "quantity": 1}])
        assert TableStateCoordinator.on_order_paid(order) is None
