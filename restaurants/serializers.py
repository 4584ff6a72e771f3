from rest_framework import serializers

from .models import MenuItem, Restaurant


class RestaurantSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)
    owner_name = serializers.CharField(source="owner.name", read_only=True)

    class Meta:
        model = Restaurant
        fields = [
            "id",
            "name",
            "cuisine",
            "description",
            "address",
            "price_range",
            "rating",
            "image_url",
            "owner_id",
            "owner_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["rating", "created_at", "updated_at"]
        extra_kwargs = {
            "name": {"min_length": 3, "error_messages": {"min_length": "Restaurant name must be at least 3 characters"}},
            "description": {"min_length": 20, "error_messages": {"min_length": "Description must be at least 20 characters"}},
        }

    def validate_cuisine(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Cuisine is required")
        return value

    def validate_address(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Address is required")
        return value


class MenuItemSerializer(serializers.ModelSerializer):
    restaurant_id = serializers.IntegerField()
    restaurant_name = serializers.CharField(source="restaurant.name", read_only=True)
    dietary_tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "restaurant_id",
            "restaurant_name",
            "name",
            "description",
            "price",
            "category",
            "dietary_tags",
            "is_available",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]
        extra_kwargs = {
            "name": {"min_length": 2, "error_messages": {"min_length": "Item name must be at least 2 characters"}},
            "description": {"min_length": 10, "error_messages": {"min_length": "Description must be at least 10 characters"}},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # An item never moves between restaurants.
        if self.instance is not None:
            self.fields["restaurant_id"].read_only = True

    def validate_dietary_tags(self, value):
        tags = []
        for tag in value:
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags
