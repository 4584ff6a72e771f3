from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(3)])),
                ("cuisine", models.CharField(db_index=True, max_length=100)),
                ("description", models.TextField(validators=[django.core.validators.MinLengthValidator(20)])),
                ("address", models.CharField(max_length=255)),
                ("price_range", models.PositiveSmallIntegerField(choices=[(1, "$"), (2, "$$"), (3, "$$$")], default=2)),
                ("rating", models.DecimalField(decimal_places=1, default=Decimal("0.0"), max_digits=2, validators=[django.core.validators.MinValueValidator(Decimal("0.0")), django.core.validators.MaxValueValidator(Decimal("5.0"))])),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="restaurants", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-rating", "name"],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, validators=[django.core.validators.MinLengthValidator(2)])),
                ("description", models.TextField(validators=[django.core.validators.MinLengthValidator(10)])),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("category", models.CharField(choices=[("Appetizer", "Appetizer"), ("Main Course", "Main Course"), ("Dessert", "Dessert"), ("Beverage", "Beverage"), ("Side Dish", "Side Dish"), ("Special", "Special")], db_index=True, max_length=20)),
                ("dietary_tags", models.JSONField(blank=True, default=list)),
                ("is_available", models.BooleanField(default=True)),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("restaurant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="menu_items", to="restaurants.restaurant")),
            ],
            options={
                "ordering": ["category", "name"],
            },
        ),
    ]
