from rest_framework import serializers


class OrderStatusUpdateSerializer(serializers.Serializer):
    """
    Carries the requested status name. Whether the name exists and whether
    the move is allowed is decided by OrderService.
    """

    status_name = serializers.CharField(allow_blank=True)
