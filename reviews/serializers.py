from rest_framework import serializers

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    restaurant_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    restaurant_rating = serializers.DecimalField(
        source="restaurant.rating", max_digits=2, decimal_places=1, read_only=True
    )

    class Meta:
        model = Review
        fields = [
            "id",
            "restaurant_id",
            "user_id",
            "user_name",
            "rating",
            "comment",
            "restaurant_rating",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["user_name", "created_at", "updated_at"]
        extra_kwargs = {
            "rating": {"error_messages": {
                "min_value": "Rating must be between 1 and 5",
                "max_value": "Rating must be between 1 and 5",
            }},
            "comment": {"min_length": 10, "error_messages": {"min_length": "Comment must be at least 10 characters"}},
        }

