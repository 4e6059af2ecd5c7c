"""
CartService - Shopping Cart Operations

One cart per user, created lazily. Lines snapshot the product's seller and
current price every time they are added to.
"""

from decimal import Decimal
from typing import Dict

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F

from marketplace.infra.observability.metrics import cart_mutations_total
from marketplace.models import Cart, CartItem, Product, ProductStatus

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()


def product_summary(product: Product) -> Dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "images": product.images or [],
        "creator_id": product.seller_id,
    }


class CartService(BaseService):
    """
    Service for managing shopping cart operations.

    Responsibilities:
    - Get (and lazily create) the user's cart
    - Add products, merging repeated adds into one line
    - Update or remove lines of the caller's cart
    """

    def _ensure_cart(self, user: User) -> Cart:
        cart, created = Cart.objects.get_or_create(user=user)
        if created:
            self.logger.info(f"Creating cart for user {user.id}")
        return cart

    def build_cart_payload(self, cart: Cart) -> Dict:
        items = []
        for cart_item in cart.items.select_related("product").order_by("created_at"):
            items.append(
                {
                    "id": cart_item.id,
                    "product_id": cart_item.product_id,
                    "seller_id": cart_item.seller_id,
                    "quantity": cart_item.quantity,
                    "unit_price": cart_item.unit_price,
                    "line_total": cart_item.line_total,
                    "created_at": cart_item.created_at,
                    "updated_at": cart_item.updated_at,
                    "product": product_summary(cart_item.product),
                }
            )

        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "created_at": cart.created_at,
            "updated_at": cart.updated_at,
            "total_items": sum(item["quantity"] for item in items),
            "total_amount": sum((item["line_total"] for item in items), Decimal("0")),
            "items": items,
        }

    @BaseService.log_performance
    def get_cart(self, user: User) -> ServiceResult[Dict]:
        """
        Get user's shopping cart with items and totals.

        Example:
            >>> result = cart_service.get_cart(user)
            >>> result.value["total_amount"]
            Decimal('25.00')
        """
        cart = self._ensure_cart(user)
        return service_ok(self.build_cart_payload(cart))

    @BaseService.log_performance
    def add_item(self, user: User, product_id, quantity: int = 1) -> ServiceResult[Dict]:
        """
        Add a product to the cart.

        Adding a product already in the cart increments the line's quantity and
        refreshes its unit price and seller from the product.
        """
        product = Product.objects.filter(id=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        if product.seller_id == user.id:
            return service_err(ErrorCodes.OWN_PRODUCT, "You cannot purchase your own product")

        if product.status != ProductStatus.ACTIVE:
            return service_err(ErrorCodes.PRODUCT_INACTIVE, "Product is not available for purchase")

        if quantity is None:
            quantity = 1
        if quantity <= 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Quantity must be at least 1")

        with transaction.atomic():
            cart = self._ensure_cart(user)
            cart_item, created = CartItem.objects.select_for_update().get_or_create(
                cart=cart,
                product=product,
                defaults={"quantity": quantity, "unit_price": product.price, "seller_id": product.seller_id},
            )
            if not created:
                CartItem.objects.filter(id=cart_item.id).update(
                    quantity=F("quantity") + quantity,
                    unit_price=product.price,
                    seller_id=product.seller_id,
                )
            cart.save(update_fields=["updated_at"])

        cart_mutations_total.labels(operation="add").inc()
        self.logger.info(f"Added {quantity}x product {product.id} to cart of user {user.id}")
        return self.get_cart(user)

    def _owned_item(self, user: User, item_id):
        return CartItem.objects.filter(id=item_id, cart__user=user).first()

    @BaseService.log_performance
    def update_cart_item(self, user: User, item_id, quantity: int) -> ServiceResult[Dict]:
        """Overwrite a line's quantity; zero or less removes the line."""
        cart_item = self._owned_item(user, item_id)
        if cart_item is None:
            return service_err(ErrorCodes.ITEM_NOT_IN_CART, "Cart item not found")

        if quantity <= 0:
            cart_item.delete()
            cart_mutations_total.labels(operation="remove").inc()
            self.logger.info(f"Removed cart item {item_id} for user {user.id}")
        else:
            cart_item.quantity = quantity
            cart_item.save(update_fields=["quantity", "updated_at"])
            cart_mutations_total.labels(operation="update").inc()

        return self.get_cart(user)

    @BaseService.log_performance
    def remove_cart_item(self, user: User, item_id) -> ServiceResult[Dict]:
        cart_item = self._owned_item(user, item_id)
        if cart_item is None:
            return service_err(ErrorCodes.ITEM_NOT_IN_CART, "Cart item not found")

        cart_item.delete()
        cart_mutations_total.labels(operation="remove").inc()
        self.logger.info(f"Removed cart item {item_id} for user {user.id}")
        return self.get_cart(user)
