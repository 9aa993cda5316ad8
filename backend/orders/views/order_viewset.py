from django_filters.utils import translate_validation
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import OrderCreateSerializer, OrderSerializer
from orders.services import OrderService
from .status_actions import OrderStatusActionsMixin

logger = logging.getLogger(__name__)


class OrderViewSet(OrderStatusActionsMixin, viewsets.ViewSet):
    """
    Order endpoints. Lifecycle actions live in OrderStatusActionsMixin.

    Service errors are turned into responses by
    core_backend.exceptions.service_exception_handler.
    """

    lookup_value_regex = r"\d+"

    def list(self, request: Request) -> Response:
        filterset = OrderFilter(request.query_params, queryset=Order.objects.none())
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        params = filterset.form.cleaned_data

        if "status" in request.query_params:
            orders = OrderService.get_orders_by_status(params["status"])
        elif "table" in request.query_params:
            table_id = params["table"]
            orders = OrderService.get_orders_by_table(int(table_id) if table_id is not None else None)
        else:
            orders = OrderService.get_all_orders()
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        order = OrderService.get_order(int(pk))
        if order is None:
            raise NotFound("Order not found")
        return Response(OrderSerializer(order).data)

    def create(self, request: Request) -> Response:
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = OrderService.create_order(
            user_id=data.get("user_id") or request.user.id,
            items=data.get("items"),
            table_id=data.get("table_id"),
            status_name=data.get("status_name"),
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk=None) -> Response:
        OrderService.delete_order(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
