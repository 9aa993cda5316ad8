from decimal import Decimal
from typing import Iterable, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
import logging

from core_backend.exceptions import (
    InvalidDataError,
    MenuItemNotFoundError,
    OrderNotFoundError,
    TableNotFoundError,
    UserNotFoundError,
)
from menu.models import MenuItem
from orders.models import Order, OrderItem
from statuses.catalog import status_catalogs
from statuses.states import CLOSED_ORDER_STATES, ORDER_TRANSITIONS, OrderState, check_transition
from tables.models import RestaurantTable
from .table_state_service import TableStateCoordinator

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


class OrderService:
    """Core service for order lifecycle management - creating, starting, paying, deleting orders."""

    @staticmethod
    def _order_queryset():
        return Order.objects.select_related("user", "table", "status").prefetch_related(
            "items__menu_item"
        )

    @staticmethod
    def reload(order_id: int) -> Order:
        """Fetches the order again with every item loaded."""
        return OrderService._order_queryset().get(id=order_id)

    @staticmethod
    def get_order_for_update(order_id: int) -> Order:
        if order_id is None:
            raise InvalidDataError("Order id is required")
        try:
            return Order.objects.select_related("table", "status").get(id=order_id)
        except Order.DoesNotExist:
            raise OrderNotFoundError()

    @staticmethod
    def _resolve_user(user_id: int):
        User = get_user_model()
        try:
            return User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise UserNotFoundError()

    @staticmethod
    def _resolve_table(table_id: int) -> RestaurantTable:
        try:
            return RestaurantTable.objects.select_related("status").get(id=table_id)
        except RestaurantTable.DoesNotExist:
            raise TableNotFoundError()

    @staticmethod
    def resolve_menu_item(menu_item_id: int) -> MenuItem:
        try:
            return MenuItem.objects.get(id=menu_item_id)
        except MenuItem.DoesNotExist:
            raise MenuItemNotFoundError()

    @staticmethod
    def build_item(order: Order, menu_item: MenuItem, quantity: int, notes: Optional[str]) -> OrderItem:
        """A new active line carrying the menu item's current name and price."""
        return OrderItem(
            order=order,
            menu_item=menu_item,
            item_name=menu_item.name,
            item_price=menu_item.price,
            quantity=quantity,
            notes=notes or "",
            is_active=True,
        )

    @staticmethod
    @transaction.atomic
    def create_order(
        user_id: int,
        items: Optional[Iterable[dict]],
        table_id: Optional[int] = None,
        status_name: Optional[str] = None,
    ) -> Order:
        """
        Creates an order with its items.

        Args:
            user_id: The staff member placing the order
            items: Dicts with ``menu_item_id``, ``quantity`` and optional ``notes``
            table_id: Optional table the order is served at
            status_name: Initial status; NEW when absent or blank

        Raises:
            InvalidDataError: missing user, no items, or a malformed item
            UserNotFoundError / TableNotFoundError / MenuItemNotFoundError
            StatusNotFoundError: the initial status is not in the order catalog
        """
        if user_id is None:
            raise InvalidDataError("User id is required")

        items = list(items or [])
        if not items:
            raise InvalidDataError("At least one order item is required")

        user = OrderService._resolve_user(user_id)
        table = OrderService._resolve_table(table_id) if table_id is not None else None

        if _is_blank(status_name):
            status_name = OrderState.NEW
        status = status_catalogs.orders.lookup(status_name)

        order = Order.objects.create(user=user, table=table, status=status)

        lines = []
        for item in items:
            if not item or item.get("menu_item_id") is None:
                raise InvalidDataError("Order item is invalid")

            quantity = item.get("quantity")
            if quantity is None or quantity <= 0:
                raise InvalidDataError("Quantity must be positive")

            menu_item = OrderService.resolve_menu_item(item["menu_item_id"])
            lines.append(OrderService.build_item(order, menu_item, quantity, item.get("notes")))

        OrderItem.objects.bulk_create(lines)

        logger.info(
            f"Order {order.id} created by user {user.id} with {len(lines)} item(s)"
            f"{f' at table {table.label}' if table else ''}"
        )
        return OrderService.reload(order.id)

    @staticmethod
    @transaction.atomic
    def update_order_status(order_id: int, status_name: Optional[str]) -> Order:
        """
        Replaces the order's status. The order transition table currently allows
        every move between known states.
        """
        if order_id is None:
            raise InvalidDataError()
        if _is_blank(status_name):
            raise InvalidDataError("Status name is required")

        order = OrderService.get_order_for_update(order_id)
        status = status_catalogs.orders.lookup(status_name)
        check_transition(ORDER_TRANSITIONS, order.status.name, status.name, entity="order")

        previous = order.status.name
        order.status = status
        order.save(update_fields=["status", "updated_at"])
        logger.info(f"Order {order.id} status {previous} -> {status.name}")
        return OrderService.reload(order.id)

    @staticmethod
    @transaction.atomic
    def delete_order(order_id: int) -> bool:
        """Deletes the order's items, then the order."""
        if order_id is None:
            raise InvalidDataError()

        if not Order.objects.filter(id=order_id).exists():
            raise OrderNotFoundError()

        OrderItem.objects.filter(order_id=order_id).delete()
        Order.objects.filter(id=order_id).delete()
        logger.info(f"Order {order_id} deleted")
        return True

    @staticmethod
    @transaction.atomic
    def start_order(user_id: int, table_id: int) -> Order:
        """
        Seats a walk-in: marks the table OCCUPIED and opens an empty NEW order on it.

        The table is marked occupied whatever its previous status was.
        """
        if user_id is None or table_id is None:
            raise InvalidDataError("User id and table id are required")

        user = OrderService._resolve_user(user_id)
        table = OrderService._resolve_table(table_id)

        TableStateCoordinator.on_order_started(table)

        status = status_catalogs.orders.lookup(OrderState.NEW)
        order = Order.objects.create(user=user, table=table, status=status)
        logger.info(f"Order {order.id} started at table {table.label} by user {user.id}")
        return OrderService.reload(order.id)

    @staticmethod
    @transaction.atomic
    def pay_order(
        order_id: int,
        method: str,
        paid_amount: Optional[Decimal],
        tip: Optional[Decimal] = None,
        note: Optional[str] = None,
    ) -> Order:
        """
        Marks the order PAID, records the payment details and frees its table.

        The paid amount is stored as given; it is not compared with the item total.
        """
        if _is_blank(method):
            raise InvalidDataError("Payment method is required")
        if paid_amount is None:
            raise InvalidDataError("Paid amount is required")

        order = OrderService.get_order_for_update(order_id)
        status = status_catalogs.orders.lookup(OrderState.PAID)

        order.status = status
        order.payment_method = method.strip()
        order.paid_amount = paid_amount
        order.tip_amount = tip
        order.payment_note = note or ""
        order.paid_at = timezone.now()
        order.save()

        TableStateCoordinator.on_order_paid(order)

        logger.info(f"Order {order.id} paid via {order.payment_method}: {paid_amount} (tip {tip})")
        return OrderService.reload(order.id)

    @staticmethod
    def get_order(order_id: int) -> Optional[Order]:
        if order_id is None:
            raise InvalidDataError()
        return OrderService._order_queryset().filter(id=order_id).first()

    @staticmethod
    def get_orders_by_table(table_id: int) -> List[Order]:
        if table_id is None:
            raise InvalidDataError()
        return list(OrderService._order_queryset().filter(table_id=table_id))

    @staticmethod
    def get_orders_by_status(status_name: str) -> List[Order]:
        if _is_blank(status_name):
            raise InvalidDataError("Status name is required")
        return list(OrderService._order_queryset().filter(status__name=status_name.strip()))

    @staticmethod
    def get_paid_orders() -> List[Order]:
        return list(OrderService._order_queryset().filter(status__name=OrderState.PAID))

    @staticmethod
    def get_open_orders_by_table() -> List[Order]:
        """Orders not PAID or CANCELLED, grouped by table label then oldest first."""
        return list(
            OrderService._order_queryset()
            .exclude(status__name__in=[state.value for state in CLOSED_ORDER_STATES])
            .order_by("table__label", "created_at", "id")
        )

    @staticmethod
    def get_all_orders() -> List[Order]:
        return list(OrderService._order_queryset())
