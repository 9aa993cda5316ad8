"""
Orders services package.

- OrderService: order lifecycle (create, status, start, pay, delete, queries)
- OrderItemService: item mutation (add, update, remove)
- TableStateCoordinator: table occupancy driven by order start / pay
"""

# Core order operations
from .order_service import OrderService

# Item management
from .item_service import OrderItemService

# Order -> table occupancy
from .table_state_service import TableStateCoordinator

__all__ = [
    'OrderService',
    'OrderItemService',
    'TableStateCoordinator',
]
