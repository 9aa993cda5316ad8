from rest_framework import serializers

from orders.models import OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.IntegerField(source="menu_item.id", read_only=True)
    menu_item_name = serializers.CharField(source="menu_item.name", read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "menu_item_id",
            "menu_item_name",
            "item_name",
            "item_price",
            "quantity",
            "notes",
            "is_active",
            "line_total",
        ]
        read_only_fields = fields


class OrderItemCreateSerializer(serializers.Serializer):
    """One requested line: a menu item reference plus quantity and notes."""

    menu_item_id = serializers.IntegerField()
    quantity = serializers.IntegerField(default=1)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class OrderItemUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False)
