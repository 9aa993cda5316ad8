from django.contrib import admin

from .models import OrderStatus, ReservationStatus, TableStatus


@admin.register(OrderStatus, TableStatus, ReservationStatus)
class StatusAdmin(admin.ModelAdmin):
    list_display = ("name", "description")
    search_fields = ("name",)
    ordering = ("name",)
