"""
Marketplace Service Layer

Business logic for the marketplace app, one service per workflow.

Services:
- ProductService: Product CRUD for sellers
- CartService: Shopping cart operations
- OrderService: Checkout, buyer/seller order reads and remarks
- SellerOrderService: Seller console (accept, status updates)
- BrowseService: Public seller directory

Usage:
    from marketplace.services import CartService, ErrorCodes

    result = container.cart_service().add_item(user, product_id, quantity=2)

    if result.ok:
        cart = result.value
    else:
        status_code = ErrorCodes.http_status(result.error)
"""

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .browse_service import BrowseService
from .cart_service import CartService
from .order_service import OrderService
from .product_service import ProductService
from .seller_order_service import SellerOrderService

__all__ = [
    # Base classes
    "BaseService",
    "ServiceResult",
    # Helper functions
    "service_ok",
    "service_err",
    # Error codes
    "ErrorCodes",
    # Services
    "BrowseService",
    "CartService",
    "OrderService",
    "ProductService",
    "SellerOrderService",
]
