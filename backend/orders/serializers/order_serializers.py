from rest_framework import serializers

from orders.models import Order
from .order_item_serializers import OrderItemCreateSerializer, OrderItemSerializer


class OrderSerializer(serializers.ModelSerializer):
    """
    Order response with the display fields callers need to render it without
    a second lookup (user email, table label, status name).
    """

    user_id = serializers.IntegerField(source="user.id", read_only=True)
    user_email = serializers.EmailField(source="user.email", read_only=True)
    table_id = serializers.IntegerField(source="table.id", read_only=True, allow_null=True, default=None)
    table_label = serializers.CharField(source="table.label", read_only=True, allow_null=True, default=None)
    status_name = serializers.CharField(source="status.name", read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    items_total = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user_id",
            "user_email",
            "table_id",
            "table_label",
            "status_name",
            "created_at",
            "payment_method",
            "paid_amount",
            "tip_amount",
            "payment_note",
            "paid_at",
            "items",
            "items_total",
        ]
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(required=False, allow_null=True)
    table_id = serializers.IntegerField(required=False, allow_null=True)
    status_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    items = OrderItemCreateSerializer(many=True, required=False)


class OrderStartSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(required=False, allow_null=True)
    table_id = serializers.IntegerField()


class PayOrderSerializer(serializers.Serializer):
    method = serializers.CharField(allow_blank=True)
    paid_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    tip = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)
    note = serializers.CharField(required=False, allow_blank=True, allow_null=True)
