from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("full_name", "party_size", "table", "event_datetime", "status")
    list_filter = ("status", "table")
    search_fields = ("full_name", "phone_number", "table__label")
    date_hierarchy = "event_datetime"
    list_select_related = ("table", "status")
