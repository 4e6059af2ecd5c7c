from .viewer_context import (
    is_order_participant,
    is_order_seller,
    resolve_seller_viewer_context,
    resolve_viewer_context,
)


__all__ = [
    "is_order_participant",
    "is_order_seller",
    "resolve_seller_viewer_context",
    "resolve_viewer_context",
]
