from rest_framework import serializers


class AddCartItemSerializer(serializers.Serializer):
    """Request body for adding a product to the cart"""

    product_id = serializers.UUIDField(help_text="Product UUID to add")
    quantity = serializers.IntegerField(min_value=1, default=1, help_text="Quantity to add (default: 1)")


class UpdateCartItemSerializer(serializers.Serializer):
    """Request body for changing a cart line; zero or less removes it"""

    quantity = serializers.IntegerField(help_text="New quantity; <= 0 removes the item")


class CartProductSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    images = serializers.ListField(child=serializers.CharField())
    creator_id = serializers.UUIDField()


class CartItemOutputSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    seller_id = serializers.UUIDField(read_only=True)
    quantity = serializers.IntegerField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    product = CartProductSummarySerializer(read_only=True)


class CartOutputSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    user_id = serializers.UUIDField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    items = CartItemOutputSerializer(many=True, read_only=True)
