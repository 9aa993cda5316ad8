import django_filters

from .models import Order


class OrderFilter(django_filters.FilterSet):
    """
    Validates the order list query string. ``status`` wins over ``table``
    when both are given.
    """

    status = django_filters.CharFilter(field_name="status__name")
    table = django_filters.NumberFilter(field_name="table_id")

    class Meta:
        model = Order
        fields = ["status", "table"]
