from rest_framework_nested import routers

from . import views

router = routers.DefaultRouter()
router.register("restaurants", views.RestaurantViewSet, basename="restaurant")
router.register("menu-items", views.MenuItemViewSet, basename="menu-item")

urlpatterns = router.urls
