from django.db.models import Q
from django_filters import rest_framework as filters

from .models import MenuItem, Restaurant


class RestaurantFilter(filters.FilterSet):
    cuisine = filters.CharFilter(field_name="cuisine", lookup_expr="iexact")
    price_range = filters.TypedChoiceFilter(choices=Restaurant.PRICE_RANGES, coerce=int)
    search = filters.CharFilter(method="filter_search")
    sort_by = filters.ChoiceFilter(choices=(("rating", "Rating"), ("name", "Name")), method="sort")

    class Meta:
        model = Restaurant
        fields = ["cuisine", "price_range"]

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) | Q(description__icontains=value) | Q(cuisine__icontains=value)
        )

    def sort(self, queryset, name, value):
        # Rating is best-first, name is alphabetical.
        if value == "name":
            return queryset.order_by("name", "id")
        return queryset.order_by("-rating", "name", "id")


class MenuItemFilter(filters.FilterSet):
    restaurant_id = filters.NumberFilter(field_name="restaurant_id")
    category = filters.ChoiceFilter(choices=MenuItem.CATEGORIES)
    available_only = filters.BooleanFilter(method="filter_available_only")

    class Meta:
        model = MenuItem
        fields = ["restaurant_id", "category"]

    def filter_available_only(self, queryset, name, value):
        if value:
            return queryset.filter(is_available=True)
        return queryset
