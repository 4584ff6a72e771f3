"""
URL configuration for Foodhub_api project.

All API routes live under ``/api/``; the Django admin under ``/admin/``.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("users.urls")),
    path("api/", include("orders.urls")),
    path("api/", include("restaurants.urls")),
    path("api/", include("reviews.urls")),
]
