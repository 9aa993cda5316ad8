from rest_framework import serializers

from .models import RestaurantTable


class RestaurantTableSerializer(serializers.ModelSerializer):
    status_name = serializers.CharField(source="status.name", read_only=True)

    class Meta:
        model = RestaurantTable
        fields = ["id", "label", "seats", "is_active", "status_name"]
        read_only_fields = fields


class TableCreateSerializer(serializers.Serializer):
    """
    Request shape for creating a table. Value rules (non-blank label,
    positive seats, known status) are enforced by TableService.
    """

    label = serializers.CharField(allow_blank=True, trim_whitespace=False)
    status_name = serializers.CharField(allow_blank=True)
    seats = serializers.IntegerField()
    is_active = serializers.BooleanField(default=True)


class TableUpdateSerializer(serializers.Serializer):
    label = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    status_name = serializers.CharField(required=False, allow_blank=True)
    seats = serializers.IntegerField(required=False)
    is_active = serializers.BooleanField(required=False)
