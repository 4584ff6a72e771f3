from rest_framework_nested import routers

from restaurants.urls import router

from . import views

reviews_router = routers.NestedSimpleRouter(router, "restaurants", lookup="restaurant")
reviews_router.register("reviews", views.ReviewViewSet, basename="restaurant-reviews")

urlpatterns = reviews_router.urls
