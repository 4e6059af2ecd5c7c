from .order import Order, OrderActivity, OrderItem, OrderStatus


__all__ = [
    "Order",
    "OrderActivity",
    "OrderItem",
    "OrderStatus",
]
