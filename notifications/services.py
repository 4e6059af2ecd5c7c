"""
NotificationService - In-app notifications

Stores order notifications in batches and lets each user page through and
mark their own notifications as read.
"""

from typing import Any, Dict, Iterable, List, Optional

from django.contrib.auth import get_user_model
from django.utils import timezone

from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .models import Notification

User = get_user_model()

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class NotificationService(BaseService):
    """
    Service for user notifications.

    Responsibilities:
    - Batch insert of notifications produced by order workflows
    - Paginated listing with unread count
    - Read-state transitions (one or all)
    """

    @BaseService.log_performance
    def create_notifications(self, payloads: Iterable[Dict[str, Any]]) -> List[Notification]:
        """
        Insert one row per payload in a single query.

        Each payload carries ``user_id``, ``type``, ``title``, ``message`` and
        optionally ``order_id`` and ``metadata``. An empty batch is a no-op.
        Database errors propagate to the caller.
        """
        rows = [
            Notification(
                user_id=payload["user_id"],
                type=payload["type"],
                title=payload["title"],
                message=payload["message"],
                order_id=payload.get("order_id"),
                metadata=payload.get("metadata"),
            )
            for payload in payloads
        ]
        if not rows:
            return []

        created = Notification.objects.bulk_create(rows)
        self.logger.info(f"Stored {len(created)} notifications")
        return created

    @BaseService.log_performance
    def list_notifications(
        self,
        user: User,
        is_read: Optional[bool] = None,
        notification_type: Optional[str] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> ServiceResult[Dict[str, Any]]:
        """
        Page through the user's notifications, newest first.

        Returns:
            ServiceResult with ``{"data": [...], "meta": {"total", "page", "limit", "unread_count"}}``
        """
        if page < 1 or limit < 1 or limit > MAX_PAGE_SIZE:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"page must be >= 1 and limit between 1 and {MAX_PAGE_SIZE}")

        notifications = Notification.objects.filter(user=user)
        if is_read is not None:
            notifications = notifications.filter(is_read=is_read)
        if notification_type:
            notifications = notifications.filter(type=notification_type)

        total = notifications.count()
        offset = (page - 1) * limit
        rows = list(notifications.order_by("-created_at")[offset : offset + limit])
        unread_count = Notification.objects.filter(user=user, is_read=False).count()

        return service_ok(
            {
                "data": rows,
                "meta": {"total": total, "page": page, "limit": limit, "unread_count": unread_count},
            }
        )

    @BaseService.log_performance
    def mark_as_read(self, user: User, notification_id) -> ServiceResult[Notification]:
        notification = Notification.objects.filter(id=notification_id, user=user).first()
        if notification is None:
            return service_err(ErrorCodes.NOTIFICATION_NOT_FOUND, "Notification not found")

        if not notification.is_read:
            notification.is_read = True
            notification.read_at = timezone.now()
            notification.save(update_fields=["is_read", "read_at"])

        return service_ok(notification)

    @BaseService.log_performance
    def mark_all_as_read(self, user: User) -> ServiceResult[Dict[str, int]]:
        updated = Notification.objects.filter(user=user, is_read=False).update(is_read=True, read_at=timezone.now())
        self.logger.info(f"Marked {updated} notifications as read for user {user.id}")
        return service_ok({"updated": updated})
