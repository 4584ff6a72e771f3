from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, mixins, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from restaurants.models import Restaurant
from users.permissions import IsCustomer, IsPartner
from users.principal import Principal

from . import services
from .filters import RestaurantOrderFilter
from .models import Order
from .permissions import IsOrderParty, can_view_order
from .serializers import CreateOrderSerializer, OrderSerializer, OrderStatusSerializer

CUSTOMER_ORDERS_LIMIT = 50
RESTAURANT_ORDERS_LIMIT = 100


class OrderViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    GenericViewSet,
):
    http_method_names = ["get", "post", "put", "patch", "head", "options"]
    queryset = Order.objects.select_related("customer", "restaurant").prefetch_related("items")
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action in ("create", "list"):
            return [IsCustomer()]
        if self.action == "retrieve":
            return [IsAuthenticated(), IsOrderParty()]
        return [IsAuthenticated()]

    def get_serializer_class(self):
        if self.action == "create":
            return CreateOrderSerializer
        if self.action in ("update", "partial_update"):
            return OrderStatusSerializer
        return OrderSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = services.place_order(
            Principal.from_user(request.user),
            restaurant_id=data["restaurant_id"],
            items=data["items"],
            delivery_address=data["delivery_address"],
            phone=data["phone"],
            special_instructions=data.get("special_instructions", ""),
            client_total=data.get("total_amount"),
        )
        order = self.get_queryset().get(pk=order.pk)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def list(self, request, *args, **kwargs):
        queryset = self.get_queryset().filter(customer=request.user)[:CUSTOMER_ORDERS_LIMIT]
        return Response(OrderSerializer(queryset, many=True).data)

    def update(self, request, *args, **kwargs):
        order = self.get_object()
        principal = Principal.from_user(request.user)
        if not can_view_order(principal, order, order.restaurant):
            raise PermissionDenied("You do not have permission to update this order")

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.transition_order(principal, order, serializer.validated_data["status"])
        return Response(OrderSerializer(order).data)


class RestaurantOrderListView(generics.ListAPIView):
    """Orders placed with any restaurant the calling partner owns, newest first."""
    serializer_class = OrderSerializer
    permission_classes = [IsPartner]
    filter_backends = [DjangoFilterBackend]
    filterset_class = RestaurantOrderFilter

    def get_queryset(self):
        return (
            Order.objects.filter(restaurant__owner=self.request.user)
            .select_related("customer", "restaurant")
            .prefetch_related("items")
        )

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())[:RESTAURANT_ORDERS_LIMIT]
        restaurants = Restaurant.objects.filter(owner=request.user).order_by("name").values("id", "name")
        return Response(
            {
                "orders": self.get_serializer(queryset, many=True).data,
                "restaurants": list(restaurants),
            }
        )
