from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models


class Restaurant(models.Model):
    PRICE_BUDGET = 1
    PRICE_MODERATE = 2
    PRICE_UPSCALE = 3
    PRICE_RANGES = (
        (PRICE_BUDGET, "$"),
        (PRICE_MODERATE, "$$"),
        (PRICE_UPSCALE, "$$$"),
    )

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="restaurants")
    name = models.CharField(max_length=255, validators=[MinLengthValidator(3)])
    cuisine = models.CharField(max_length=100, db_index=True)
    description = models.TextField(validators=[MinLengthValidator(20)])
    address = models.CharField(max_length=255)
    price_range = models.PositiveSmallIntegerField(choices=PRICE_RANGES, default=PRICE_MODERATE)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        default=Decimal("0.0"),
        validators=[MinValueValidator(Decimal("0.0")), MaxValueValidator(Decimal("5.0"))],
    )
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-rating", "name"]

    def __str__(self):
        return self.name


class MenuItem(models.Model):
    APPETIZER = "Appetizer"
    MAIN_COURSE = "Main Course"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"
    SIDE_DISH = "Side Dish"
    SPECIAL = "Special"
    CATEGORIES = (
        (APPETIZER, "Appetizer"),
        (MAIN_COURSE, "Main Course"),
        (DESSERT, "Dessert"),
        (BEVERAGE, "Beverage"),
        (SIDE_DISH, "Side Dish"),
        (SPECIAL, "Special"),
    )

    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name="menu_items")
    name = models.CharField(max_length=255, validators=[MinLengthValidator(2)])
    description = models.TextField(validators=[MinLengthValidator(10)])
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0.00"))])
    category = models.CharField(max_length=20, choices=CATEGORIES, db_index=True)
    dietary_tags = models.JSONField(default=list, blank=True)
    is_available = models.BooleanField(default=True)
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["category", "name"]

    def __str__(self):
        return f"{self.restaurant.name} - {self.name}"
