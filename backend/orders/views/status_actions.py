from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import (
    OrderSerializer,
    OrderStartSerializer,
    OrderStatusUpdateSerializer,
    PayOrderSerializer,
)
from orders.services import OrderService


class OrderStatusActionsMixin:
    """
    Mixin for order lifecycle actions (status change, start, pay).

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["patch", "put"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.update_order_status(int(pk), serializer.validated_data["status_name"])
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["post"], url_path="start")
    def start(self, request: Request) -> Response:
        """Seats a walk-in at a table. The acting user opens the order unless one is given."""
        serializer = OrderStartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user_id = serializer.validated_data.get("user_id") or request.user.id
        order = OrderService.start_order(user_id, serializer.validated_data["table_id"])
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], url_path="pay")
    def pay(self, request: Request, pk=None) -> Response:
        serializer = PayOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = OrderService.pay_order(
            int(pk),
            method=data["method"],
            paid_amount=data["paid_amount"],
            tip=data.get("tip"),
            note=data.get("note"),
        )
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["get"], url_path="paid")
    def paid_orders(self, request: Request) -> Response:
        return Response(OrderSerializer(OrderService.get_paid_orders(), many=True).data)

    @action(detail=False, methods=["get"], url_path="open")
    def open_orders(self, request: Request) -> Response:
        return Response(OrderSerializer(OrderService.get_open_orders_by_table(), many=True).data)
