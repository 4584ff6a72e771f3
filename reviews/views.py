import logging

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from rest_framework import status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from restaurants.models import Restaurant

from .models import Review
from .permissions import ReviewPermission
from .serializers import ReviewSerializer

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW = "You have already reviewed this restaurant"


class ReviewViewSet(viewsets.ModelViewSet):
    """
    Reviews of one restaurant. Every write re-rates the restaurant in the
    same transaction and answers with the new ``restaurant_rating``.
    """
    serializer_class = ReviewSerializer
    permission_classes = [ReviewPermission]
    lookup_value_regex = r"\d+"

    def get_restaurant(self):
        if not hasattr(self, "_restaurant"):
            self._restaurant = get_object_or_404(Restaurant, pk=self.kwargs["restaurant_pk"])
        return self._restaurant

    def get_queryset(self):
        return Review.objects.filter(restaurant=self.get_restaurant()).select_related("restaurant")

    def create(self, request, *args, **kwargs):
        restaurant = self.get_restaurant()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        if Review.objects.filter(restaurant=restaurant, user=user).exists():
            raise ValidationError(DUPLICATE_REVIEW)

        try:
            with transaction.atomic():
                review = serializer.save(
                    restaurant=restaurant,
                    user=user,
                    user_name=user.display_name or user.name,
                )
        except IntegrityError:
            # Lost a race with a concurrent review from the same user.
            raise ValidationError(DUPLICATE_REVIEW)

        logger.info("User %s reviewed restaurant %s with %s", user.pk, restaurant.pk, review.rating)
        review.restaurant.refresh_from_db(fields=["rating"])
        return Response(self.get_serializer(review).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        with transaction.atomic():
            review = serializer.save()
        review.restaurant.refresh_from_db(fields=["rating"])

    def destroy(self, request, *args, **kwargs):
        review = self.get_object()
        restaurant = review.restaurant
        with transaction.atomic():
            review.delete()
        restaurant.refresh_from_db(fields=["rating"])
        logger.info("User %s deleted review of restaurant %s", request.user.pk, restaurant.pk)
        return Response(
            {"message": "Review deleted", "restaurant_rating": restaurant.rating},
            status=status.HTTP_200_OK,
        )
