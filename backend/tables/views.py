from django_filters.utils import translate_validation
from rest_framework import status, viewsets
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.exceptions import NotFound

from .filters import TableFilter
from .models import RestaurantTable
from .serializers import (
    RestaurantTableSerializer,
    TableCreateSerializer,
    TableUpdateSerializer,
)
from .services import TableService


class RestaurantTableViewSet(viewsets.ViewSet):
    """
    Table registry endpoints. Service errors are translated to responses by
    core_backend.exceptions.service_exception_handler.
    """

    lookup_value_regex = r"\d+"

    def list(self, request: Request) -> Response:
        filterset = TableFilter(request.query_params, queryset=RestaurantTable.objects.none())
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        params = filterset.form.cleaned_data

        if "status" in request.query_params:
            tables = TableService.list_tables_by_status(params["status"])
        elif params.get("active"):
            tables = TableService.list_active_tables()
        else:
            tables = TableService.list_tables()
        return Response(RestaurantTableSerializer(tables, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        table = TableService.get_table(int(pk))
        if table is None:
            raise NotFound("Restaurant table not found")
        return Response(RestaurantTableSerializer(table).data)

    def create(self, request: Request) -> Response:
        serializer = TableCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        table = TableService.create_table(**serializer.validated_data)
        return Response(RestaurantTableSerializer(table).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk=None) -> Response:
        serializer = TableUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        table = TableService.update_table(int(pk), **serializer.validated_data)
        return Response(RestaurantTableSerializer(table).data)

    def update(self, request: Request, pk=None) -> Response:
        return self.partial_update(request, pk)

    def destroy(self, request: Request, pk=None) -> Response:
        TableService.delete_table(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
