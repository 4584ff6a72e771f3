from django.contrib import admin
from django.utils.html import format_html

from . import models


class OrderItemInline(admin.TabularInline):
    model = models.OrderItem
    fields = ["menu_item_id", "name", "price", "quantity"]
    readonly_fields = fields
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(models.Order)
class OrderAdmin(admin.ModelAdmin):
    inlines = [OrderItemInline]
    list_display = ["id", "restaurant", "customer", "total_amount", "payment_method", "created_at", "status_badge"]
    list_filter = ["status", "created_at"]
    list_select_related = ["restaurant", "customer"]
    list_per_page = 10
    search_fields = ["customer__email", "restaurant__name"]
    # Status only moves through the API so the transition rules always apply.
    readonly_fields = [
        "customer",
        "restaurant",
        "status",
        "total_amount",
        "delivery_address",
        "phone",
        "special_instructions",
        "payment_method",
        "created_at",
        "updated_at",
    ]

    def status_badge(self, obj):
        colors = {
            "pending": "#ffc107",
            "confirmed": "#007bff",
            "preparing": "#17a2b8",
            "ready": "#6f42c1",
            "delivered": "#28a745",
            "cancelled": "#dc3545",
        }
        color = colors.get(obj.status, "#6c757d")
        return format_html(
            '<span style="background-color:{}; color:white; padding:4px 8px; border-radius:5px;">{}</span>',
            color,
            obj.status.upper(),
        )
    status_badge.short_description = "Status"

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
