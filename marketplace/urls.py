from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .api.views import prometheus_metrics
from .cart.api.views.cart_views import CartViewSet
from .catalog.api.views.browse_views import BrowseSellersView
from .catalog.api.views.product_views import ProductViewSet
from .ordering.api.views.order_views import OrderViewSet
from .ordering.api.views.seller_order_views import SellerOrderViewSet

router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="product")
router.register(r"orders", OrderViewSet, basename="order")
router.register(r"admin/orders", SellerOrderViewSet, basename="admin-order")

app_name = "marketplace"

urlpatterns = [
    # Cart routes live under orders/ and must resolve before the order router
    path("orders/cart/", CartViewSet.as_view({"get": "retrieve_cart"}), name="cart"),
    path("orders/cart/items/", CartViewSet.as_view({"post": "add_item"}), name="cart-items"),
    path(
        "orders/cart/items/<uuid:item_id>/",
        CartViewSet.as_view({"patch": "update_item", "delete": "remove_item"}),
        name="cart-item-detail",
    ),
    path("browse/", BrowseSellersView.as_view(), name="browse"),
    path("", include(router.urls)),
    # Prometheus metrics endpoint
    path("marketplace/metrics/", prometheus_metrics.marketplace_prometheus_metrics, name="marketplace-metrics"),
]
