"""
ProductService - Product CRUD

Sellers list their own products, create new ones and update or delete the
ones they own. Any authenticated user can read a product or a creator's
listing.
"""

from typing import Any, Dict, List

from django.contrib.auth import get_user_model
from django.db import transaction

from marketplace.models import Product, ProductStatus

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

EDITABLE_FIELDS = ("name", "description", "categories", "price", "quantity", "unit", "images", "status")


class ProductService(BaseService):
    """
    Service for managing product catalog operations.

    Responsibilities:
    - Create products for the authenticated seller
    - List own products and products of a creator
    - Get product details with creator summary
    - Update and delete products (owner only)

    Ownership failures are reported as "Product not found" so other sellers'
    product ids are not confirmed.
    """

    @BaseService.log_performance
    def create_product(self, user: User, data: Dict[str, Any]) -> ServiceResult[Product]:
        """
        Create a new product owned by ``user``.

        Example:
            >>> result = product_service.create_product(
            ...     seller,
            ...     {"name": "Basmati rice", "categories": ["GRAINS"], "price": "120.00",
            ...      "quantity": "25", "unit": "KILOGRAM"},
            ... )
        """
        product = Product.objects.create(
            seller=user,
            name=data["name"],
            description=data.get("description"),
            categories=list(data["categories"]),
            price=data["price"],
            quantity=data["quantity"],
            unit=data["unit"],
            images=list(data.get("images") or []),
            status=data.get("status") or ProductStatus.ACTIVE,
        )
        self.logger.info(f"Created product: {product.name} (id={product.id}) by seller {user.id}")
        return service_ok(product)

    @BaseService.log_performance
    def list_own_products(self, user: User) -> ServiceResult[List[Product]]:
        return service_ok(list(Product.objects.filter(seller=user).order_by("-created_at")))

    @BaseService.log_performance
    def list_by_creator(self, creator_id) -> ServiceResult[List[Product]]:
        return service_ok(list(Product.objects.filter(seller_id=creator_id).order_by("-created_at")))

    @BaseService.log_performance
    def get_product(self, product_id) -> ServiceResult[Product]:
        product = Product.objects.select_related("seller").filter(id=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        return service_ok(product)

    @BaseService.log_performance
    @transaction.atomic
    def update_product(self, user: User, product_id, data: Dict[str, Any]) -> ServiceResult[Product]:
        """
        Update an existing product (owner only).

        Only fields present in ``data`` change; ``images`` replaces the whole list.
        """
        product = Product.objects.select_for_update().filter(id=product_id, seller=user).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        updated_fields = [field for field in EDITABLE_FIELDS if field in data]
        for field in updated_fields:
            value = data[field]
            if field in ("categories", "images"):
                value = list(value or [])
            setattr(product, field, value)

        if updated_fields:
            product.save(update_fields=[*updated_fields, "updated_at"])

        self.logger.info(f"Updated product: {product.name} (id={product_id}), fields={updated_fields}")
        return service_ok(product)

    @BaseService.log_performance
    def delete_product(self, user: User, product_id) -> ServiceResult[bool]:
        product = Product.objects.filter(id=product_id, seller=user).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        product_name = product.name
        product.delete()
        self.logger.info(f"Deleted product: {product_name} (id={product_id}) by user {user.id}")
        return service_ok(True)
