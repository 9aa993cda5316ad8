from django.db import models
from django.utils.translation import gettext_lazy as _

from statuses.models import TableStatus


class RestaurantTable(models.Model):
    """
    A physical seating unit.

    ``status`` is changed by table CRUD and, implicitly, by orders being
    started (OCCUPIED) and paid (AVAILABLE).
    """

    label = models.CharField(
        max_length=100,
        unique=True,
        help_text=_("Unique, case-sensitive label shown to staff, e.g. 'T1' or 'Patio 3'."),
    )
    seats = models.PositiveIntegerField(help_text=_("Seating capacity."))
    is_active = models.BooleanField(default=True)
    status = models.ForeignKey(
        TableStatus, on_delete=models.PROTECT, related_name="tables"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["label"]
        indexes = [
            models.Index(fields=["is_active", "label"], name="table_active_label_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(seats__gte=1), name="restaurant_table_seats_positive"
            ),
        ]

    def __str__(self):
        return self.label

    @property
    def status_name(self):
        return self.status.name if self.status_id else None
