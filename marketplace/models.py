from marketplace.cart.domain.models import Cart, CartItem
from marketplace.catalog.domain.models import Product, ProductCategory, ProductStatus, ProductUnit
from marketplace.ordering.domain.models import Order, OrderActivity, OrderItem, OrderStatus


__all__ = [
    "Product",
    "ProductCategory",
    "ProductStatus",
    "ProductUnit",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderActivity",
    "OrderStatus",
]
