from django.contrib import admin
from django.db.models import Count

from . import models


@admin.register(models.User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "role", "phone", "restaurants_count", "is_staff", "is_active"]
    ordering = ["name"]
    list_filter = ["role", "is_staff", "is_active"]
    list_per_page = 10
    search_fields = ["name__istartswith", "email__istartswith", "phone__istartswith"]
    readonly_fields = ["role", "password", "last_login", "created_at", "updated_at"]
    exclude = ["user_permissions", "groups", "first_name", "last_name"]

    def restaurants_count(self, user):
        return user.restaurants_count
    restaurants_count.short_description = "Restaurants"
    restaurants_count.admin_order_field = "restaurants_count"

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(restaurants_count=Count("restaurants"))
