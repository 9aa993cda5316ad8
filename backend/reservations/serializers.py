from rest_framework import serializers

from .models import Reservation


class ReservationSerializer(serializers.ModelSerializer):
    table_id = serializers.IntegerField(source="table.id", read_only=True)
    table_label = serializers.CharField(source="table.label", read_only=True)
    status_name = serializers.CharField(source="status.name", read_only=True)

    class Meta:
        model = Reservation
        fields = [
            "id",
            "table_id",
            "table_label",
            "full_name",
            "party_size",
            "phone_number",
            "event_datetime",
            "status_name",
        ]
        read_only_fields = fields


class ReservationCreateSerializer(serializers.Serializer):
    table_id = serializers.IntegerField()
    full_name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    party_size = serializers.IntegerField()
    phone_number = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    event_datetime = serializers.DateTimeField()
    status_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ReservationUpdateSerializer(serializers.Serializer):
    """Every field is optional; only the supplied ones reach the service."""

    table_id = serializers.IntegerField(required=False)
    full_name = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    party_size = serializers.IntegerField(required=False)
    phone_number = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    event_datetime = serializers.DateTimeField(required=False)
    status_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
