from rest_framework import serializers

from marketplace.catalog.api.serializers.user_serializers import UserSummarySerializer
from marketplace.ordering.domain.models.order import Order, OrderActivity, OrderItem, OrderStatus
from marketplace.ordering.domain.services import resolve_seller_viewer_context, resolve_viewer_context


class OrderProductSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    images = serializers.ListField(child=serializers.CharField())
    creator_id = serializers.UUIDField(source="seller_id")


class OrderItemSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True)
    seller_id = serializers.UUIDField(read_only=True)
    product = OrderProductSummarySerializer(read_only=True)
    seller = UserSummarySerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "seller_id",
            "quantity",
            "unit_price",
            "subtotal",
            "created_at",
            "updated_at",
            "product",
            "seller",
        ]
        read_only_fields = fields


class OrderActivitySerializer(serializers.ModelSerializer):
    order_id = serializers.UUIDField(read_only=True)
    author_id = serializers.UUIDField(read_only=True)
    author = UserSummarySerializer(read_only=True)

    class Meta:
        model = OrderActivity
        fields = ["id", "order_id", "author_id", "message", "created_at", "author"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """
    Order with items, remark timeline and the viewer's role.

    Context:
        viewer: the requesting user
        seller_view: when True, roles are resolved as in the seller console
    """

    buyer_id = serializers.UUIDField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    activities = OrderActivitySerializer(many=True, read_only=True)
    viewer_context = serializers.SerializerMethodField()
    allowed_actions = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "buyer_id",
            "status",
            "total_amount",
            "buyer_note",
            "created_at",
            "updated_at",
            "items",
            "activities",
            "viewer_context",
            "allowed_actions",
        ]
        read_only_fields = fields

    def _resolve(self, obj):
        viewer = self.context.get("viewer")
        viewer_id = getattr(viewer, "id", None)
        if self.context.get("seller_view"):
            return resolve_seller_viewer_context(obj, viewer_id)
        return resolve_viewer_context(obj, viewer_id)

    def get_viewer_context(self, obj):
        return self._resolve(obj)[0]

    def get_allowed_actions(self, obj):
        return self._resolve(obj)[1]


class OrdersOverviewSerializer(serializers.Serializer):
    buyer_orders = OrderSerializer(many=True)
    seller_orders = OrderSerializer(many=True)


class CheckoutSerializer(serializers.Serializer):
    """Request body for checkout; omit ``cart_item_ids`` to buy the whole cart"""

    cart_item_ids = serializers.ListField(child=serializers.UUIDField(), required=False)
    buyer_note = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1000)


class OrderActivityCreateSerializer(serializers.Serializer):
    message = serializers.CharField(min_length=1, max_length=500)


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)
