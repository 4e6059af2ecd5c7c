"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern (inspired by Rust's Result type)
and the BaseService class shared by the cart, order, catalog, browse and
notification services.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Expected failures (missing rows, ownership checks, invalid state) are
    returned as ``ok=False`` results instead of raised, so views can translate
    them to HTTP responses with :meth:`ErrorCodes.http_status`.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(cart_payload)
        >>> result.ok
        True

        >>> result = service_err(ErrorCodes.CART_EMPTY, "Cart is empty")
        >>> result.error_detail
        'Cart is empty'
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None

    def to_dict(self) -> dict:
        """Error body returned to API clients."""
        if self.ok:
            return {"success": True, "data": self.value}
        return {"detail": self.error_detail, "code": self.error}


def service_ok(value: T = None) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Example:
        >>> return service_ok(order_payload)
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code from :class:`ErrorCodes`
        error_detail: Human-readable error message shown to the client

    Example:
        >>> return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class CartService(BaseService):
            @BaseService.log_performance
            def get_cart(self, user):
                self.logger.info(f"Loading cart for user {user.id}")
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log execution time of service methods.

        Failed ServiceResults are logged as warnings; raised exceptions are
        logged with traceback and re-raised.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Standard error codes used across services, with their HTTP status."""

    # Product errors
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_INACTIVE = "product_inactive"
    OWN_PRODUCT = "own_product"

    # Cart errors
    CART_EMPTY = "cart_empty"
    ITEM_NOT_IN_CART = "item_not_in_cart"
    CART_ITEMS_MISSING = "cart_items_missing"
    NO_ITEMS_SELECTED = "no_items_selected"

    # Order errors
    ORDER_NOT_FOUND = "order_not_found"
    INVALID_ORDER_STATE = "invalid_order_state"

    # Notification errors
    NOTIFICATION_NOT_FOUND = "notification_not_found"

    # User errors
    USER_NOT_FOUND = "user_not_found"
    ADDRESS_NOT_FOUND = "address_not_found"

    # Permission errors
    PERMISSION_DENIED = "permission_denied"

    # Validation errors
    VALIDATION_ERROR = "validation_error"

    # Internal errors
    INTERNAL_ERROR = "internal_error"
    STORAGE_ERROR = "storage_error"

    _STATUS = {
        PRODUCT_NOT_FOUND: 404,
        ITEM_NOT_IN_CART: 404,
        ORDER_NOT_FOUND: 404,
        NOTIFICATION_NOT_FOUND: 404,
        USER_NOT_FOUND: 404,
        ADDRESS_NOT_FOUND: 404,
        PERMISSION_DENIED: 403,
        PRODUCT_INACTIVE: 400,
        OWN_PRODUCT: 400,
        CART_EMPTY: 400,
        CART_ITEMS_MISSING: 400,
        NO_ITEMS_SELECTED: 400,
        INVALID_ORDER_STATE: 400,
        VALIDATION_ERROR: 400,
        INTERNAL_ERROR: 500,
        STORAGE_ERROR: 500,
    }

    @classmethod
    def http_status(cls, code: Optional[str]) -> int:
        return cls._STATUS.get(code, 500)
