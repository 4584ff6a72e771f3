from django.contrib import admin
from django.utils.html import format_html

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = (
        "get_restaurant_name",
        "user_name",
        "get_rating_stars",
        "rating",
        "get_comment_preview",
        "created_at",
    )
    list_filter = ("rating", "created_at")
    list_select_related = ("restaurant",)
    search_fields = ("user_name", "user__email", "restaurant__name", "comment")
    readonly_fields = ("user_name", "created_at", "updated_at", "get_rating_stars")
    autocomplete_fields = ["user", "restaurant"]
    date_hierarchy = "created_at"

    fieldsets = (
        ("Review Information", {
            "fields": ("user", "user_name", "restaurant", "rating", "get_rating_stars")
        }),
        ("Review Content", {
            "fields": ("comment",)
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def get_restaurant_name(self, obj):
        return obj.restaurant.name
    get_restaurant_name.short_description = "Restaurant"
    get_restaurant_name.admin_order_field = "restaurant__name"

    def get_rating_stars(self, obj):
        if obj.rating is None:
            return "-"
        return format_html(
            '<span style="color: {}; font-size: 16px;">{}{}</span>',
            self._get_rating_color(obj.rating),
            "★" * obj.rating,
            "☆" * (5 - obj.rating),
        )
    get_rating_stars.short_description = "Stars"

    def _get_rating_color(self, rating):
        if rating >= 4:
            return "#28a745"
        elif rating >= 3:
            return "#ffc107"
        return "#dc3545"

    def get_comment_preview(self, obj):
        preview = obj.comment[:50]
        if len(obj.comment) > 50:
            preview += "..."
        return preview
    get_comment_preview.short_description = "Comment Preview"

    def get_readonly_fields(self, request, obj=None):
        readonly = super().get_readonly_fields(request, obj)
        if obj is not None:
            return (*readonly, "user", "restaurant")
        return readonly

    def save_model(self, request, obj, form, change):
        if not obj.user_name:
            obj.user_name = obj.user.display_name or obj.user.name
        super().save_model(request, obj, form, change)
