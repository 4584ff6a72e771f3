from django.contrib import admin
from django.db.models import Count

from .models import MenuItem, Restaurant


class MenuItemInline(admin.TabularInline):
    model = MenuItem
    fields = ["name", "description", "category", "price", "is_available"]
    extra = 0


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    autocomplete_fields = ["owner"]
    list_display = ["name", "owner_name", "cuisine", "price_range", "rating", "items_count", "updated_at"]
    list_per_page = 10
    list_select_related = ["owner"]
    list_filter = ["cuisine", "price_range", "updated_at"]
    search_fields = ["name", "cuisine", "owner__name"]
    readonly_fields = ["rating", "created_at", "updated_at"]
    inlines = [MenuItemInline]

    def owner_name(self, restaurant):
        return restaurant.owner.name

    def items_count(self, restaurant):
        return restaurant.items_count
    items_count.short_description = "Menu Items"
    items_count.admin_order_field = "items_count"

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(items_count=Count("menu_items"))


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    autocomplete_fields = ["restaurant"]
    list_display = ["name", "category", "restaurant_title", "price", "is_available", "has_dietary_tags"]
    list_editable = ["is_available"]
    list_per_page = 10
    list_select_related = ["restaurant"]
    list_filter = ["category", "is_available", "updated_at"]
    search_fields = ["name", "restaurant__name"]

    def has_dietary_tags(self, obj):
        return bool(obj.dietary_tags)
    has_dietary_tags.boolean = True
    has_dietary_tags.short_description = "Dietary Tags"

    def restaurant_title(self, menu_item):
        return menu_item.restaurant.name
