from django.contrib import admin

from .models import RestaurantTable


@admin.register(RestaurantTable)
class RestaurantTableAdmin(admin.ModelAdmin):
    list_display = ("label", "seats", "status", "is_active", "updated_at")
    list_filter = ("status", "is_active")
    search_fields = ("label",)
    list_select_related = ("status",)
