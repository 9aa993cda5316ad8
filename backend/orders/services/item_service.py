from typing import Optional

from django.db import transaction
import logging

from core_backend.exceptions import InvalidDataError
from orders.models import Order, OrderItem
from .order_service import OrderService

logger = logging.getLogger(__name__)


class OrderItemService:
    """Service for managing order items - adding, updating, removing."""

    @staticmethod
    def _get_item(order_id: int, item_id: int) -> OrderItem:
        """
        Looks an item up by (item id, order id). A pair that does not resolve is
        invalid data even when the item exists under another order.
        """
        if order_id is None or item_id is None:
            raise InvalidDataError("Order id and item id are required")
        try:
            return OrderItem.objects.get(id=item_id, order_id=order_id)
        except OrderItem.DoesNotExist:
            raise InvalidDataError(f"Item {item_id} does not belong to order {order_id}")

    @staticmethod
    @transaction.atomic
    def add_item(order_id: int, menu_item_id: int, quantity: int = 1, notes: str = "") -> Order:
        """
        Appends a new line with a fresh name/price snapshot.

        Returns the order with all of its items reloaded.
        """
        order = OrderService.get_order_for_update(order_id)

        if menu_item_id is None:
            raise InvalidDataError("Menu item id is required")
        if quantity is None or quantity <= 0:
            raise InvalidDataError("Quantity must be positive")

        menu_item = OrderService.resolve_menu_item(menu_item_id)
        item = OrderService.build_item(order, menu_item, quantity, notes)
        item.save()

        logger.info(f"Added {quantity} x {menu_item.name} to order {order.id}")
        return OrderService.reload(order.id)

    @staticmethod
    @transaction.atomic
    def update_item(
        order_id: int,
        item_id: int,
        quantity: Optional[int] = None,
        notes: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Order:
        """Partial update: only the arguments that are not None are applied."""
        item = OrderItemService._get_item(order_id, item_id)

        update_fields = []
        if quantity is not None:
            if quantity <= 0:
                raise InvalidDataError("Quantity must be positive")
            item.quantity = quantity
            update_fields.append("quantity")

        if notes is not None:
            item.notes = notes
            update_fields.append("notes")

        if is_active is not None:
            item.is_active = is_active
            update_fields.append("is_active")

        if update_fields:
            item.save(update_fields=update_fields)
            logger.debug(f"Order {order_id} item {item_id} updated: {', '.join(update_fields)}")

        return OrderService.reload(order_id)

    @staticmethod
    @transaction.atomic
    def remove_item(order_id: int, item_id: int) -> Order:
        item = OrderItemService._get_item(order_id, item_id)
        item.delete()
        logger.info(f"Removed item {item_id} from order {order_id}")
        return OrderService.reload(order_id)
