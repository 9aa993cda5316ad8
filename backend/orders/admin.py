from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("item_name", "item_price", "get_line_item_total")
    fields = ("menu_item", "item_name", "item_price", "quantity", "notes", "is_active", "get_line_item_total")

    def get_line_item_total(self, obj):
        return f"${obj.line_total:,.2f}"

    get_line_item_total.short_description = "Line Item Total"

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "table", "user", "status", "paid_amount", "created_at")
    list_filter = ("status", "payment_method", "created_at")
    search_fields = ("id", "table__label", "user__email")
    readonly_fields = ("created_at", "updated_at", "paid_at")
    list_select_related = ("table", "user", "status")
    inlines = [OrderItemInline]
    fieldsets = (
        (None, {"fields": ("user", "table", "status")}),
        ("Payment", {"fields": ("payment_method", "paid_amount", "tip_amount", "payment_note", "paid_at")}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )
