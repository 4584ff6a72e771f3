import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Count, Sum

from restaurants.models import Restaurant

from .models import Review

logger = logging.getLogger(__name__)

ONE_PLACE = Decimal("0.1")


def mean_rating(total, count):
    """Mean of ``count`` ratings adding up to ``total``, half-up to one decimal; 0.0 when empty."""
    if not count:
        return Decimal("0.0")
    return (Decimal(total) / Decimal(count)).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def recompute_restaurant_rating(restaurant_id):
    """
    Recalculate a restaurant's rating from every review it currently has and
    store it. Always a full re-scan, never an incremental update.
    """
    stats = Review.objects.filter(restaurant_id=restaurant_id).aggregate(total=Sum("rating"), count=Count("id"))
    rating = mean_rating(stats["total"] or 0, stats["count"])

    Restaurant.objects.filter(pk=restaurant_id).update(rating=rating)
    logger.info("Restaurant %s rating is now %s over %s reviews", restaurant_id, rating, stats["count"])
    return rating
