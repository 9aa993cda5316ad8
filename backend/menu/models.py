from django.db import models
from django.utils.translation import gettext_lazy as _


class MenuItem(models.Model):
    """
    A sellable dish or drink.

    Menu management lives outside this project. Orders copy ``name`` and
    ``price`` into each line at the moment the line is added, so editing a
    menu item never changes historical order totals.
    """

    name = models.CharField(max_length=150, help_text=_("Name of the menu item."))
    description = models.TextField(
        blank=True, help_text=_("Detailed description of the menu item.")
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("The current selling price of the menu item."),
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
