from decimal import Decimal

from rest_framework import serializers

from marketplace.catalog.domain.models.catalog import Product, ProductCategory, ProductStatus, ProductUnit

from .user_serializers import CreatorSummarySerializer


class ProductSerializer(serializers.ModelSerializer):
    """Product as returned by every catalog endpoint."""

    creator_id = serializers.UUIDField(source="seller_id", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "categories",
            "price",
            "quantity",
            "unit",
            "images",
            "status",
            "creator_id",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductDetailSerializer(ProductSerializer):
    creator = CreatorSummarySerializer(source="seller", read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ["creator"]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """Request body for creating a product; pass ``partial=True`` for updates."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    categories = serializers.ListField(
        child=serializers.ChoiceField(choices=ProductCategory.choices), allow_empty=False
    )
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=Decimal("0.001"))
    unit = serializers.ChoiceField(choices=ProductUnit.choices)
    images = serializers.ListField(child=serializers.CharField(max_length=1000), required=False)
    status = serializers.ChoiceField(choices=ProductStatus.choices, required=False)
