import django_filters

from .models import Reservation


class ReservationFilter(django_filters.FilterSet):
    """
    Query string for the reservation list: ``status``, or ``table`` together
    with an inclusive ``start``/``end`` window in ISO-8601.
    """

    status = django_filters.CharFilter(field_name="status__name")
    table = django_filters.NumberFilter(field_name="table_id")
    start = django_filters.IsoDateTimeFilter(field_name="event_datetime", lookup_expr="gte")
    end = django_filters.IsoDateTimeFilter(field_name="event_datetime", lookup_expr="lte")

    class Meta:
        model = Reservation
        fields = ["status", "table", "start", "end"]
