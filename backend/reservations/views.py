from django_filters.utils import translate_validation
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response

from .filters import ReservationFilter
from .models import Reservation
from .serializers import (
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationUpdateSerializer,
)
from .services import ReservationService


class ReservationViewSet(viewsets.ViewSet):
    """
    Reservation endpoints.

    Listing requires a filter: ``?status=NAME`` or ``?table=ID&start=ISO&end=ISO``.
    """

    lookup_value_regex = r"\d+"

    def list(self, request: Request) -> Response:
        filterset = ReservationFilter(request.query_params, queryset=Reservation.objects.none())
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        params = filterset.form.cleaned_data

        if "status" in request.query_params:
            reservations = ReservationService.list_by_status(params["status"])
        elif "table" in request.query_params:
            table_id = int(params["table"]) if params["table"] is not None else None
            reservations = ReservationService.list_by_table_and_date_range(
                table_id, params["start"], params["end"]
            )
        else:
            raise ValidationError({"detail": "Filter by status or by table with start and end."})

        return Response(ReservationSerializer(reservations, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        reservation = ReservationService.get_reservation(int(pk))
        if reservation is None:
            raise NotFound("Reservation not found")
        return Response(ReservationSerializer(reservation).data)

    def create(self, request: Request) -> Response:
        serializer = ReservationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = ReservationService.create_reservation(**serializer.validated_data)
        return Response(ReservationSerializer(reservation).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, pk=None) -> Response:
        serializer = ReservationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = ReservationService.update_reservation(int(pk), dict(serializer.validated_data))
        return Response(ReservationSerializer(reservation).data)

    def update(self, request: Request, pk=None) -> Response:
        return self.partial_update(request, pk)

    def destroy(self, request: Request, pk=None) -> Response:
        ReservationService.delete_reservation(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
