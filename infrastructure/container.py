"""
Dependency Injection Container
================================

Service locator giving views and services access to infrastructure adapters
and domain services through their interfaces.

Usage:
    from infrastructure.container import container

    storage = container.storage()
    email = container.email()
    orders = container.order_service()
"""

import logging
from typing import Optional

from .email import EmailFactory, EmailServiceInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure and domain services.

    Instances are created lazily on first access and cached until
    :meth:`reset` is called.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._clear()
            self._initialized = True
            logger.info("Service container initialized")

    def _clear(self):
        self._storage: Optional[StorageInterface] = None
        self._email: Optional[EmailServiceInterface] = None

        # Domain services
        self._notification_service = None
        self._product_service = None
        self._cart_service = None
        self._order_service = None
        self._seller_order_service = None
        self._browse_service = None
        self._upload_service = None

    def storage(self) -> StorageInterface:
        """Object storage adapter (cached)."""
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def email(self, backend: Optional[str] = None) -> EmailServiceInterface:
        """
        Email service instance.

        Args:
            backend: 'smtp' or 'mock'; when given, replaces the cached instance
        """
        if self._email is None or backend is not None:
            self._email = EmailFactory.create(backend)
            logger.debug(f"Created email service: {type(self._email).__name__}")
        return self._email

    def notification_service(self):
        """Get NotificationService instance."""
        if self._notification_service is None:
            from notifications.services import NotificationService

            self._notification_service = NotificationService()
            logger.debug("Created NotificationService")
        return self._notification_service

    def product_service(self):
        """Get ProductService instance."""
        if self._product_service is None:
            from marketplace.services import ProductService

            self._product_service = ProductService()
            logger.debug("Created ProductService")
        return self._product_service

    def cart_service(self):
        """Get CartService instance."""
        if self._cart_service is None:
            from marketplace.services import CartService

            self._cart_service = CartService()
            logger.debug("Created CartService")
        return self._cart_service

    def order_service(self):
        """Get OrderService instance."""
        if self._order_service is None:
            from marketplace.services import OrderService

            self._order_service = OrderService(notification_service=self.notification_service())
            logger.debug("Created OrderService")
        return self._order_service

    def seller_order_service(self):
        """Get SellerOrderService instance."""
        if self._seller_order_service is None:
            from marketplace.services import SellerOrderService

            self._seller_order_service = SellerOrderService(notification_service=self.notification_service())
            logger.debug("Created SellerOrderService")
        return self._seller_order_service

    def browse_service(self):
        """Get BrowseService instance."""
        if self._browse_service is None:
            from marketplace.services import BrowseService

            self._browse_service = BrowseService()
            logger.debug("Created BrowseService")
        return self._browse_service

    def upload_service(self):
        """Get ImageUploadService instance."""
        if self._upload_service is None:
            from uploads.services import ImageUploadService

            self._upload_service = ImageUploadService(storage=self.storage())
            logger.debug("Created ImageUploadService")
        return self._upload_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._clear()
        logger.info("Service container reset")


# Global singleton instance
container = ServiceContainer()

