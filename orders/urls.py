from django.urls import path
from rest_framework_nested import routers

from . import views

router = routers.DefaultRouter()
router.register("orders", views.OrderViewSet, basename="order")

urlpatterns = [
    path("restaurants/orders/", views.RestaurantOrderListView.as_view(), name="restaurant-orders"),
] + router.urls
