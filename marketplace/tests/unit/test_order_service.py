import uuid
from unittest.mock import MagicMock, patch

import pytest

from marketplace.services import ErrorCodes, OrderService, SellerOrderService


@pytest.fixture
def notification_service():
    return MagicMock()


@pytest.mark.unit
class TestOrderServiceDispatch:
    def test_dispatch_forwards_payloads(self, notification_service):
        service = OrderService(notification_service=notification_service)
        payloads = [{"user_id": uuid.uuid4()}]

        service._dispatch(payloads, uuid.uuid4())

        notification_service.create_notifications.assert_called_once_with(payloads)

    def test_dispatch_skips_empty_batches(self, notification_service):
        service = OrderService(notification_service=notification_service)

        service._dispatch([], uuid.uuid4())

        notification_service.create_notifications.assert_not_called()

    def test_dispatch_failure_is_logged_not_raised(self, notification_service):
        notification_service.create_notifications.side_effect = RuntimeError("database unavailable")
        service = OrderService(notification_service=notification_service)

        with patch.object(service, "logger") as mock_logger:
            service._dispatch([{"user_id": uuid.uuid4()}], "order-1")

        mock_logger.error.assert_called_once()
        assert "order-1" in mock_logger.error.call_args[0][0]


@pytest.mark.unit
class TestOrderServiceAccess:
    def setup_method(self):
        self.service = OrderService(notification_service=MagicMock())
        self.user = MagicMock(id=uuid.uuid4())

    @patch("marketplace.services.order_service.order_queryset")
    def test_missing_order(self, mock_queryset):
        mock_queryset.return_value.filter.return_value.first.return_value = None

        result = self.service.get_order(self.user, uuid.uuid4())

        assert result.ok is False
        assert result.error == ErrorCodes.ORDER_NOT_FOUND
        assert ErrorCodes.http_status(result.error) == 404

    @patch("marketplace.services.order_service.is_order_participant", return_value=False)
    @patch("marketplace.services.order_service.order_queryset")
    def test_non_participant_denied(self, mock_queryset, mock_participant):
        mock_queryset.return_value.filter.return_value.first.return_value = MagicMock()

        result = self.service.get_order(self.user, uuid.uuid4())

        assert result.ok is False
        assert result.error == ErrorCodes.PERMISSION_DENIED
        assert result.error_detail == "You do not have access to this order"
        assert ErrorCodes.http_status(result.error) == 403

    @patch("marketplace.services.order_service.transaction")
    @patch("marketplace.services.order_service.Cart.objects")
    def test_checkout_without_cart(self, mock_cart_objects, mock_transaction):
        mock_transaction.atomic.return_value.__exit__.return_value = False
        mock_cart_objects.select_for_update.return_value.filter.return_value.first.return_value = None

        result = self.service.checkout(self.user)

        assert result.ok is False
        assert result.error == ErrorCodes.CART_EMPTY


@pytest.mark.unit
class TestSellerOrderService:
    def setup_method(self):
        self.notifications = MagicMock()
        self.service = SellerOrderService(notification_service=self.notifications)
        self.user = MagicMock(id=uuid.uuid4())

    @patch("marketplace.services.seller_order_service.order_queryset")
    def test_invalid_status_rejected_before_lookup(self, mock_queryset):
        result = self.service.update_order_status(self.user, uuid.uuid4(), "Lost")

        assert result.ok is False
        assert result.error == ErrorCodes.VALIDATION_ERROR
        mock_queryset.assert_not_called()

    @patch("marketplace.services.seller_order_service.is_order_seller", return_value=True)
    @patch("marketplace.services.seller_order_service.order_queryset")
    def test_accept_requires_received(self, mock_queryset, mock_is_seller):
        order = MagicMock(status="Shipped")
        mock_queryset.return_value.filter.return_value.first.return_value = order

        result = self.service.accept_order(self.user, uuid.uuid4())

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_ORDER_STATE
        order.save.assert_not_called()
        self.notifications.create_notifications.assert_not_called()

    @patch("marketplace.services.seller_order_service.is_order_seller", return_value=False)
    @patch("marketplace.services.seller_order_service.order_queryset")
    def test_non_seller_denied(self, mock_queryset, mock_is_seller):
        mock_queryset.return_value.filter.return_value.first.return_value = MagicMock()

        result = self.service.accept_order(self.user, uuid.uuid4())

        assert result.error == ErrorCodes.PERMISSION_DENIED
