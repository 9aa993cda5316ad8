from django.db import models
from django.utils.translation import gettext_lazy as _


class StatusBase(models.Model):
    """
    Reference row naming one allowed status value.

    Rows are seeded by migration / the ``seed_statuses`` command and read
    through ``statuses.catalog``; the services never create them.
    """

    name = models.CharField(_("name"), max_length=50, unique=True)
    description = models.CharField(_("description"), max_length=255, blank=True)

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return self.name


class OrderStatus(StatusBase):
    class Meta(StatusBase.Meta):
        verbose_name = _("order status")
        verbose_name_plural = _("order statuses")


class TableStatus(StatusBase):
    class Meta(StatusBase.Meta):
        verbose_name = _("table status")
        verbose_name_plural = _("table statuses")


class ReservationStatus(StatusBase):
    class Meta(StatusBase.Meta):
        verbose_name = _("reservation status")
        verbose_name_plural = _("reservation statuses")
