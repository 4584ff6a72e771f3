import logging

from django.db.models import ProtectedError
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.response import Response

from users.permissions import IsPartner
from users.principal import Principal

from .filters import MenuItemFilter, RestaurantFilter
from .models import MenuItem, Restaurant
from .permissions import MenuItemPermission, RestaurantPermission, can_manage_restaurant
from .serializers import MenuItemSerializer, RestaurantSerializer

logger = logging.getLogger(__name__)


class RestaurantViewSet(viewsets.ModelViewSet):
    queryset = Restaurant.objects.select_related("owner").all()
    serializer_class = RestaurantSerializer
    permission_classes = [RestaurantPermission]
    filter_backends = [DjangoFilterBackend]
    filterset_class = RestaurantFilter
    lookup_value_regex = r"\d+"

    def perform_create(self, serializer):
        restaurant = serializer.save(owner=self.request.user)
        logger.info("Partner %s created restaurant %s", self.request.user.pk, restaurant.pk)

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise ValidationError("Cannot delete restaurant with existing orders")
        logger.info("Partner %s deleted restaurant %s", self.request.user.pk, instance.pk)

    @action(detail=False, methods=["get"], permission_classes=[IsPartner], filter_backends=[])
    def manage(self, request):
        """Restaurants owned by the calling partner, newest first."""
        queryset = self.get_queryset().filter(owner=request.user).order_by("-created_at", "-id")
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)


class MenuItemViewSet(viewsets.ModelViewSet):
    queryset = MenuItem.objects.select_related("restaurant").all()
    serializer_class = MenuItemSerializer
    permission_classes = [MenuItemPermission]
    filter_backends = [DjangoFilterBackend]
    filterset_class = MenuItemFilter
    lookup_value_regex = r"\d+"

    def perform_create(self, serializer):
        restaurant = get_object_or_404(Restaurant, pk=serializer.validated_data["restaurant_id"])
        if not can_manage_restaurant(Principal.from_user(self.request.user), restaurant):
            raise PermissionDenied("You can only add menu items to your own restaurants")
        item = serializer.save()
        logger.info("Added menu item %s to restaurant %s", item.pk, restaurant.pk)
