from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from .models import Review
from .services import recompute_restaurant_rating


@receiver(pre_save, sender=Review)
def remember_previous_restaurant(sender, instance, **kwargs):
    instance._previous_restaurant_id = None
    if instance.pk is not None:
        instance._previous_restaurant_id = (
            Review.objects.filter(pk=instance.pk).values_list("restaurant_id", flat=True).first()
        )


@receiver(post_save, sender=Review)
def refresh_rating_on_save(sender, instance, **kwargs):
    recompute_restaurant_rating(instance.restaurant_id)

    # A review moved to another restaurant leaves the old one to re-rate as well.
    previous = getattr(instance, "_previous_restaurant_id", None)
    if previous is not None and previous != instance.restaurant_id:
        recompute_restaurant_rating(previous)


@receiver(post_delete, sender=Review)
def refresh_rating_on_delete(sender, instance, **kwargs):
    recompute_restaurant_rating(instance.restaurant_id)
