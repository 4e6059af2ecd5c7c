import uuid

from django.contrib.auth import get_user_model
from django.db import models

User = get_user_model()


class NotificationType(models.TextChoices):
    ORDER_STATUS = "ORDER_STATUS", "Order status"
    ORDER_ACTIVITY = "ORDER_ACTIVITY", "Order activity"


class Notification(models.Model):
    """
    In-app notification for a single user.

    Rows are written in batches by the order services; afterwards only the
    read state changes.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="notifications")
    type = models.CharField(max_length=30, choices=NotificationType.choices)
    title = models.CharField(max_length=200)
    message = models.TextField()
    order = models.ForeignKey(
        "marketplace.Order", on_delete=models.CASCADE, related_name="notifications", null=True, blank=True
    )
    metadata = models.JSONField(null=True, blank=True)

    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "is_read", "created_at"], name="notif_user_read_created_idx"),
            models.Index(fields=["user", "type", "created_at"], name="notif_user_type_created_idx"),
        ]

    def __str__(self):
        return f"{self.type} for {self.user_id}: {self.title}"
