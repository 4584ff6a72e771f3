from django_filters import rest_framework as filters

from .models import Order


class RestaurantOrderFilter(filters.FilterSet):
    status = filters.ChoiceFilter(
        choices=Order.STATUS_CHOICES + [("all", "All")],
        method="filter_status",
    )

    class Meta:
        model = Order
        fields = ["status"]

    def filter_status(self, queryset, name, value):
        if value == "all":
            return queryset
        return queryset.filter(status=value)
