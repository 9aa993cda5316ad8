from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from menu.models import MenuItem
from statuses.models import OrderStatus
from tables.models import RestaurantTable


class Order(models.Model):
    """
    A guest's or table's set of purchased items plus a lifecycle status.

    Deleting the table an order was placed on clears ``table`` and keeps the
    order. Payment fields are filled in by ``OrderService.pay`` and are not
    reconciled against the item totals.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders",
        help_text=_("Staff member who opened the order."),
    )
    table = models.ForeignKey(
        RestaurantTable,
        on_delete=models.SET_NULL,
        related_name="orders",
        null=True,
        blank=True,
    )
    status = models.ForeignKey(OrderStatus, on_delete=models.PROTECT, related_name="orders")

    payment_method = models.CharField(max_length=50, blank=True)
    paid_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    tip_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    payment_note = models.TextField(blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="order_status_created_idx"),
            models.Index(fields=["table", "created_at"], name="order_table_created_idx"),
        ]

    def __str__(self):
        table = self.table.label if self.table_id else "no table"
        return f"Order {self.pk} ({table}, {self.status.name})"

    @property
    def status_name(self):
        return self.status.name

    @property
    def items_total(self) -> Decimal:
        return sum(
            (item.line_total for item in self.items.all() if item.is_active),
            Decimal("0.00"),
        )


class OrderItem(models.Model):
    """
    One line of an order. ``item_name`` and ``item_price`` are copied from the
    menu item when the line is added.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey(MenuItem, on_delete=models.PROTECT, related_name="order_items")
    item_name = models.CharField(max_length=150)
    item_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(default=1)
    notes = models.TextField(blank=True, help_text=_("Customer notes, e.g., 'no onions'"))
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1), name="order_item_quantity_positive"
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.item_name}"

    @property
    def line_total(self) -> Decimal:
        return self.item_price * self.quantity
