"""
OrderService - Buyer-side order lifecycle

Checkout turns selected cart lines into one order (possibly spanning several
sellers), and buyers or sellers on an order can read it and add remarks to
its timeline.
"""

import time
from decimal import Decimal
from typing import Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Prefetch

from marketplace.infra.observability.metrics import checkout_duration, order_value, orders_placed_total
from marketplace.models import Cart, CartItem, Order, OrderActivity, OrderItem, OrderStatus
from marketplace.ordering.domain.services import is_order_participant
from notifications.models import NotificationType

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

User = get_user_model()

REMARK_PREVIEW_LIMIT = 180
REMARK_PREVIEW_CUT = 177


class CartChanged(Exception):
    """Cart lines vanished between reading and consuming them."""


def order_queryset():
    """Orders with everything the order serializer reads."""
    return Order.objects.select_related("buyer").prefetch_related(
        Prefetch("items", queryset=OrderItem.objects.select_related("product", "seller").order_by("created_at")),
        Prefetch("activities", queryset=OrderActivity.objects.select_related("author").order_by("created_at")),
    )


def remark_preview(message: str) -> str:
    if len(message) > REMARK_PREVIEW_LIMIT:
        return f"{message[:REMARK_PREVIEW_CUT]}..."
    return message


def remark_notifications(order: Order, author_id, message: str, metadata: Dict) -> List[Dict]:
    """One ORDER_ACTIVITY notification per participant other than the author."""
    preview = remark_preview(message)
    return [
        {
            "user_id": user_id,
            "type": NotificationType.ORDER_ACTIVITY,
            "title": "New order remark",
            "message": f'Order {order.id} has a new remark: "{preview}"',
            "order_id": order.id,
            "metadata": metadata,
        }
        for user_id in participants_except(order, author_id)
    ]


def participants_except(order: Order, actor_id) -> List:
    recipients = []
    if order.buyer_id != actor_id:
        recipients.append(order.buyer_id)
    for seller_id in order.seller_ids():
        if seller_id != actor_id and seller_id not in recipients:
            recipients.append(seller_id)
    return recipients


class OrderService(BaseService):
    """
    Service for the buyer-facing order workflow.

    Responsibilities:
    - Checkout from the cart (all lines or a selection)
    - List orders as buyer, as seller, or both
    - Order detail and remarks for buyers and sellers on the order

    Dependencies:
    - NotificationService: informs participants after each committed change
    """

    def __init__(self, notification_service=None):
        """
        Initialize OrderService.

        Args:
            notification_service: Service used to store participant notifications (injected)
        """
        super().__init__()
        if notification_service is None:
            from notifications.services import NotificationService

            notification_service = NotificationService()
        self.notification_service = notification_service

    def _dispatch(self, payloads: List[Dict], order_id):
        """Store notifications; failures are logged and never undo the order change."""
        if not payloads:
            return
        try:
            self.notification_service.create_notifications(payloads)
        except Exception as e:
            self.logger.error(f"Failed to dispatch notifications for order {order_id}: {e}", exc_info=True)

    @BaseService.log_performance
    def checkout(
        self, user: User, cart_item_ids: Optional[List] = None, buyer_note: Optional[str] = None
    ) -> ServiceResult[Order]:
        """
        Create an order from the user's cart.

        Workflow:
        1. Resolve the selected lines (all lines when no ids are given)
        2. Create the order and its items, snapshotting quantity and price
        3. Delete the consumed cart lines
        4. After commit, notify the buyer and every distinct seller

        Steps 1 to 3 share one transaction with the cart lines locked; if a
        line disappears before it is consumed, nothing is written.

        Args:
            user: Buyer checking out
            cart_item_ids: Optional subset of cart line ids
            buyer_note: Optional note for the sellers

        Returns:
            ServiceResult with the created Order
        """
        start = time.time()
        try:
            with transaction.atomic():
                cart = Cart.objects.select_for_update().filter(user=user).first()
                cart_items = list(cart.items.select_for_update().order_by("created_at")) if cart else []
                if not cart_items:
                    return service_err(ErrorCodes.CART_EMPTY, "Cart is empty")

                selected = cart_items
                if cart_item_ids:
                    wanted = {str(item_id) for item_id in cart_item_ids}
                    selected = [item for item in cart_items if str(item.id) in wanted]
                    # Repeated ids count against the request, not the matched lines
                    if len(selected) != len(cart_item_ids):
                        return service_err(ErrorCodes.CART_ITEMS_MISSING, "Some cart items were not found")

                if not selected:
                    return service_err(ErrorCodes.NO_ITEMS_SELECTED, "No cart items selected for checkout")

                total_amount = sum((item.quantity * item.unit_price for item in selected), Decimal("0"))
                order = Order.objects.create(
                    buyer=user,
                    status=OrderStatus.RECEIVED,
                    total_amount=total_amount,
                    buyer_note=buyer_note,
                )
                OrderItem.objects.bulk_create(
                    [
                        OrderItem(
                            order=order,
                            product_id=item.product_id,
                            seller_id=item.seller_id,
                            quantity=item.quantity,
                            unit_price=item.unit_price,
                            subtotal=item.quantity * item.unit_price,
                        )
                        for item in selected
                    ]
                )
                deleted, _ = CartItem.objects.filter(cart=cart, id__in=[item.id for item in selected]).delete()
                if deleted != len(selected):
                    raise CartChanged(f"expected to consume {len(selected)} cart lines, removed {deleted}")
        except CartChanged as e:
            self.logger.warning(f"Checkout for user {user.id} rolled back: {e}")
            return service_err(ErrorCodes.CART_ITEMS_MISSING, "Some cart items were not found")
        checkout_duration.observe(time.time() - start)

        orders_placed_total.labels(status=order.status).inc()
        order_value.observe(float(total_amount))
        self.logger.info(f"Order {order.id} created for user {user.id}: {len(selected)} items, total {total_amount}")

        order = order_queryset().get(id=order.id)
        self._dispatch(self._order_created_notifications(order), order.id)
        return service_ok(order)

    def _order_created_notifications(self, order: Order) -> List[Dict]:
        payloads = [
            {
                "user_id": order.buyer_id,
                "type": NotificationType.ORDER_STATUS,
                "title": "Order placed successfully",
                "message": f"Your order {order.id} has been placed.",
                "order_id": order.id,
                "metadata": {"status": order.status},
            }
        ]
        for seller_id in order.seller_ids():
            payloads.append(
                {
                    "user_id": seller_id,
                    "type": NotificationType.ORDER_STATUS,
                    "title": "New order received",
                    "message": f"Order {order.id} includes one or more of your products.",
                    "order_id": order.id,
                    "metadata": {"status": order.status},
                }
            )
        return payloads

    @BaseService.log_performance
    def list_buyer_orders(self, user: User) -> ServiceResult[List[Order]]:
        return service_ok(list(order_queryset().filter(buyer=user).order_by("-created_at")))

    @BaseService.log_performance
    def list_sales(self, user: User) -> ServiceResult[List[Order]]:
        """Orders containing at least one item sold by ``user``."""
        orders = order_queryset().filter(items__seller=user).distinct().order_by("-created_at")
        return service_ok(list(orders))

    @BaseService.log_performance
    def list_orders_by_role(self, user: User) -> ServiceResult[Dict]:
        return service_ok(
            {
                "buyer_orders": self.list_buyer_orders(user).value,
                "seller_orders": self.list_sales(user).value,
            }
        )

    def _accessible_order(self, user: User, order_id) -> ServiceResult[Order]:
        order = order_queryset().filter(id=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        if not is_order_participant(order, user.id):
            return service_err(ErrorCodes.PERMISSION_DENIED, "You do not have access to this order")
        return service_ok(order)

    @BaseService.log_performance
    def get_order(self, user: User, order_id) -> ServiceResult[Order]:
        """Order detail for its buyer or any seller on it."""
        return self._accessible_order(user, order_id)

    @BaseService.log_performance
    def add_order_activity(self, user: User, order_id, message: str) -> ServiceResult[Order]:
        """
        Append a remark to the order timeline.

        Everyone on the order except the author is notified.
        """
        access = self._accessible_order(user, order_id)
        if not access.ok:
            return access

        OrderActivity.objects.create(order=access.value, author=user, message=message)
        self.logger.info(f"Remark added to order {order_id} by user {user.id}")

        order = order_queryset().get(id=order_id)
        self._dispatch(remark_notifications(order, user.id, message, {"author_id": str(user.id)}), order.id)
        return service_ok(order)
