# Marketplace API Serializers

from marketplace.cart.api.serializers.cart_serializers import (
    AddCartItemSerializer,
    CartOutputSerializer,
    UpdateCartItemSerializer,
)
from marketplace.catalog.api.serializers.browse_serializers import BrowseQuerySerializer, BrowseResponseSerializer
from marketplace.catalog.api.serializers.product_serializers import (
    ProductDetailSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from marketplace.ordering.api.serializers.order_serializers import (
    CheckoutSerializer,
    OrderActivityCreateSerializer,
    OrderSerializer,
    OrdersOverviewSerializer,
    OrderStatusUpdateSerializer,
)

from .response_serializers import ErrorResponseSerializer


__all__ = [
    "AddCartItemSerializer",
    "BrowseQuerySerializer",
    "BrowseResponseSerializer",
    "CartOutputSerializer",
    "CheckoutSerializer",
    "ErrorResponseSerializer",
    "OrderActivityCreateSerializer",
    "OrderSerializer",
    "OrdersOverviewSerializer",
    "OrderStatusUpdateSerializer",
    "ProductDetailSerializer",
    "ProductSerializer",
    "ProductWriteSerializer",
    "UpdateCartItemSerializer",
]
