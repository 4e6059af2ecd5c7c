import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.tests.factories import NotificationFactory, OrderFactory, UserFactory
from notifications.models import Notification, NotificationType


class NotificationViewIntegrationTest(TestCase):
    def setUp(self):
        container.reset()
        self.client = APIClient()

        self.user = UserFactory(email="user@example.com")
        self.other_user = UserFactory(email="other@example.com")
        self.order = OrderFactory(buyer=self.user)

        self.unread_status = NotificationFactory(user=self.user, order=self.order)
        self.unread_activity = NotificationFactory(
            user=self.user, type=NotificationType.ORDER_ACTIVITY, title="New order remark"
        )
        self.read = NotificationFactory(user=self.user, is_read=True)
        self.foreign = NotificationFactory(user=self.other_user)

        self.list_url = reverse("notifications:list")
        self.read_all_url = reverse("notifications:read_all")

    def mark_read_url(self, notification_id):
        return reverse("notifications:mark_read", kwargs={"notification_id": notification_id})

    def test_requires_authentication(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_own_notifications_with_meta(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = {n["id"] for n in response.data["data"]}
        self.assertEqual(ids, {str(self.unread_status.id), str(self.unread_activity.id), str(self.read.id)})
        self.assertEqual(response.data["meta"], {"total": 3, "page": 1, "limit": 20, "unread_count": 2})

    def test_filter_unread(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url, {"is_read": "false"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["meta"]["total"], 2)
        self.assertTrue(all(n["is_read"] is False for n in response.data["data"]))

    def test_filter_by_type(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url, {"type": NotificationType.ORDER_ACTIVITY})

        self.assertEqual([n["id"] for n in response.data["data"]], [str(self.unread_activity.id)])

    def test_unread_count_ignores_filters(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url, {"is_read": "true"})

        self.assertEqual(response.data["meta"]["total"], 1)
        self.assertEqual(response.data["meta"]["unread_count"], 2)

    def test_pagination(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url, {"page": 2, "limit": 2})

        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["meta"]["page"], 2)
        self.assertEqual(response.data["meta"]["limit"], 2)

    def test_limit_above_maximum_rejected(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(self.list_url, {"limit": 101})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_mark_as_read(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.patch(self.mark_read_url(self.unread_status.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["is_read"])
        self.assertIsNotNone(response.data["read_at"])
        self.assertEqual(response.data["order_id"], str(self.order.id))

    def test_mark_as_read_keeps_original_read_at(self):
        self.client.force_authenticate(user=self.user)
        self.client.patch(self.mark_read_url(self.unread_status.id))
        self.unread_status.refresh_from_db()
        first_read_at = self.unread_status.read_at

        response = self.client.patch(self.mark_read_url(self.unread_status.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.unread_status.refresh_from_db()
        self.assertEqual(self.unread_status.read_at, first_read_at)

    def test_cannot_mark_foreign_notification(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.patch(self.mark_read_url(self.foreign.id))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["detail"], "Notification not found")
        self.foreign.refresh_from_db()
        self.assertFalse(self.foreign.is_read)

    def test_mark_unknown_notification(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.patch(self.mark_read_url(uuid.uuid4()))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_mark_all_as_read(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.patch(self.read_all_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"updated": 2})
        self.assertFalse(Notification.objects.filter(user=self.user, is_read=False).exists())
        self.foreign.refresh_from_db()
        self.assertFalse(self.foreign.is_read)
