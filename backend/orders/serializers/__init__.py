"""
Orders serializers package - request and response shapes for the order endpoints.
"""

# Order item serializers
from .order_item_serializers import (
    OrderItemSerializer,
    OrderItemCreateSerializer,
    OrderItemUpdateSerializer,
)

# Order serializers
from .order_serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderStartSerializer,
    PayOrderSerializer,
)

# Status serializers
from .status_serializers import OrderStatusUpdateSerializer

__all__ = [
    # Order items
    "OrderItemSerializer",
    "OrderItemCreateSerializer",
    "OrderItemUpdateSerializer",
    # Orders
    "OrderSerializer",
    "OrderCreateSerializer",
    "OrderStartSerializer",
    "PayOrderSerializer",
    # Status
    "OrderStatusUpdateSerializer",
]
