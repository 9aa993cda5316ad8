from rest_framework import status, viewsets
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import (
    OrderItemCreateSerializer,
    OrderItemUpdateSerializer,
    OrderSerializer,
)
from orders.services import OrderItemService


class OrderItemViewSet(viewsets.ViewSet):
    """
    A ViewSet for managing the items of one order, nested under /orders/{order_pk}/items/.

    Every call returns the entire updated order.
    """

    lookup_value_regex = r"\d+"

    def create(self, request: Request, order_pk=None) -> Response:
        serializer = OrderItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderItemService.add_item(int(order_pk), **serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, order_pk=None, pk=None) -> Response:
        serializer = OrderItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderItemService.update_item(int(order_pk), int(pk), **serializer.validated_data)
        return Response(OrderSerializer(order).data)

    def destroy(self, request: Request, order_pk=None, pk=None) -> Response:
        order = OrderItemService.remove_item(int(order_pk), int(pk))
        return Response(OrderSerializer(order).data)
