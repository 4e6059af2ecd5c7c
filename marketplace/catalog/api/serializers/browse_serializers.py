from rest_framework import serializers

from marketplace.services.browse_service import DEFAULT_PAGE_SIZE


class BrowseQuerySerializer(serializers.Serializer):
    """Query string of the seller directory."""

    search = serializers.CharField(required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=DEFAULT_PAGE_SIZE)


class SellerProductPreviewSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    categories = serializers.ListField(child=serializers.CharField())
    status = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)


class SellerBrowseSerializer(serializers.Serializer):
    seller_id = serializers.UUIDField()
    seller_name = serializers.CharField(allow_null=True)
    business_name = serializers.CharField(allow_null=True)
    profile_url = serializers.CharField(allow_null=True)
    location = serializers.CharField(allow_null=True)
    pincode = serializers.CharField(allow_null=True)
    top_products = SellerProductPreviewSerializer(many=True)
    product_count = serializers.IntegerField()


class BrowseMetaSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()


class BrowseResponseSerializer(serializers.Serializer):
    data = SellerBrowseSerializer(many=True)
    meta = BrowseMetaSerializer()
