import django_filters

from .models import RestaurantTable


class TableFilter(django_filters.FilterSet):
    status = django_filters.CharFilter(field_name="status__name")
    active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = RestaurantTable
        fields = ["status", "active"]
