from django.db import models
from django.utils.translation import gettext_lazy as _

from statuses.models import ReservationStatus
from tables.models import RestaurantTable


class Reservation(models.Model):
    """
    A booking of one table for a named party at an exact instant.

    Two reservations on the same table conflict only when their event times
    are exactly equal. The unique constraint enforces that at the storage
    layer so concurrent writers cannot both pass the service's check.
    """

    table = models.ForeignKey(
        RestaurantTable, on_delete=models.CASCADE, related_name="reservations"
    )
    full_name = models.CharField(max_length=200)
    party_size = models.PositiveIntegerField()
    phone_number = models.CharField(max_length=32, blank=True, null=True)
    event_datetime = models.DateTimeField(help_text=_("Exact date and time of the booking."))
    status = models.ForeignKey(
        ReservationStatus, on_delete=models.PROTECT, related_name="reservations"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["event_datetime", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["table", "event_datetime"],
                name="unique_reservation_table_event_datetime",
            ),
            models.CheckConstraint(
                condition=models.Q(party_size__gte=1), name="reservation_party_size_positive"
            ),
        ]
        indexes = [
            models.Index(fields=["table", "event_datetime"], name="reservation_table_time_idx"),
        ]

    def __str__(self):
        return f"{self.full_name} x{self.party_size} @ {self.table.label} {self.event_datetime:%Y-%m-%d %H:%M}"
