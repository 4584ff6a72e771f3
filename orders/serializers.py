from rest_framework import serializers

from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.IntegerField(read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ["menu_item_id", "name", "price", "quantity", "line_total"]


class OrderSerializer(serializers.ModelSerializer):
    customer_id = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(source="customer.name", read_only=True)
    restaurant_id = serializers.IntegerField(read_only=True)
    restaurant_name = serializers.CharField(source="restaurant.name", read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "customer_name",
            "restaurant_id",
            "restaurant_name",
            "items",
            "total_amount",
            "status",
            "delivery_address",
            "phone",
            "special_instructions",
            "payment_method",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderLineSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=OrderItem.MAX_QUANTITY,
        error_messages={
            "min_value": "Item quantity must be at least 1",
            "max_value": f"Item quantity must be at most {OrderItem.MAX_QUANTITY}",
        },
    )


class CreateOrderSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField(error_messages={"required": "Restaurant ID is required"})
    items = OrderLineSerializer(many=True, allow_empty=False, error_messages={
        "required": "Order must contain at least one item",
        "empty": "Order must contain at least one item",
    })
    delivery_address = serializers.CharField(error_messages={
        "required": "Delivery address is required",
        "blank": "Delivery address is required",
    })
    phone = serializers.CharField(max_length=20, error_messages={
        "required": "Phone number is required",
        "blank": "Phone number is required",
    })
    special_instructions = serializers.CharField(required=False, allow_blank=True, default="")
    # Only a cross-check; the stored total is always computed server side.
    total_amount = serializers.FloatField(required=False, allow_null=True, min_value=0)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Order.STATUS_CHOICES,
        error_messages={"invalid_choice": "Invalid status: {input}"},
    )
