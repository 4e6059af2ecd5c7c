"""
SellerOrderService - Seller console for incoming orders

Every operation requires the caller to be a seller on at least one item of
the order.
"""

from typing import List

from django.contrib.auth import get_user_model

from marketplace.infra.observability.metrics import order_status_changes_total
from marketplace.models import Order, OrderActivity, OrderStatus
from marketplace.ordering.domain.services import is_order_seller
from notifications.models import NotificationType

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .order_service import OrderService, order_queryset, participants_except, remark_notifications

User = get_user_model()


class SellerOrderService(OrderService):
    """
    Order operations available to sellers.

    Responsibilities:
    - Inbox of received orders
    - Accept (only from Received) and free-form status updates
    - Seller remarks

    Status changes notify the buyer and the other sellers on the order.
    """

    def _seller_order(self, user: User, order_id) -> ServiceResult[Order]:
        order = order_queryset().filter(id=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        if not is_order_seller(order, user.id):
            return service_err(ErrorCodes.PERMISSION_DENIED, "You do not have access to this order")
        return service_ok(order)

    @BaseService.log_performance
    def list_received_orders(self, user: User) -> ServiceResult[List[Order]]:
        orders = (
            order_queryset()
            .filter(status=OrderStatus.RECEIVED, items__seller=user)
            .distinct()
            .order_by("-created_at")
        )
        return service_ok(list(orders))

    @BaseService.log_performance
    def get_order(self, user: User, order_id) -> ServiceResult[Order]:
        return self._seller_order(user, order_id)

    @BaseService.log_performance
    def accept_order(self, user: User, order_id) -> ServiceResult[Order]:
        access = self._seller_order(user, order_id)
        if not access.ok:
            return access
        if access.value.status != OrderStatus.RECEIVED:
            return service_err(ErrorCodes.INVALID_ORDER_STATE, "Only received orders can be accepted")
        return self._persist_status(user, access.value, OrderStatus.ACCEPTED)

    @BaseService.log_performance
    def update_order_status(self, user: User, order_id, status: str) -> ServiceResult[Order]:
        """Set any valid status; there is no transition table beyond accept's precondition."""
        if status not in OrderStatus.values:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid order status: {status}")

        access = self._seller_order(user, order_id)
        if not access.ok:
            return access
        return self._persist_status(user, access.value, status)

    def _persist_status(self, user: User, order: Order, status: str) -> ServiceResult[Order]:
        previous = order.status
        order.status = status
        order.save(update_fields=["status", "updated_at"])
        order_status_changes_total.labels(status=status).inc()
        self.logger.info(f"Order {order.id} moved from {previous} to {status} by seller {user.id}")

        order = order_queryset().get(id=order.id)
        payloads = [
            {
                "user_id": recipient_id,
                "type": NotificationType.ORDER_STATUS,
                "title": "Order status updated",
                "message": f"Order {order.id} is now {order.status}.",
                "order_id": order.id,
                "metadata": {"status": order.status, "actor_id": str(user.id)},
            }
            for recipient_id in participants_except(order, user.id)
        ]
        self._dispatch(payloads, order.id)
        return service_ok(order)

    @BaseService.log_performance
    def add_order_activity(self, user: User, order_id, message: str) -> ServiceResult[Order]:
        access = self._seller_order(user, order_id)
        if not access.ok:
            return access

        OrderActivity.objects.create(order=access.value, author=user, message=message)
        self.logger.info(f"Seller remark added to order {order_id} by user {user.id}")

        order = order_queryset().get(id=order_id)
        self._dispatch(remark_notifications(order, user.id, message, {"actor_id": str(user.id)}), order.id)
        return service_ok(order)
