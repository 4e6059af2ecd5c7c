from django.conf import settings
from django.db import models


class AccountSettings(models.Model):
    """Per-user notification preferences, created on first read."""

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="account_settings")
    order_message_notifications = models.BooleanField(default=True)
    order_activity_notifications = models.BooleanField(default=True)
    do_not_disturb_enabled = models.BooleanField(default=False)
    do_not_disturb_from = models.TimeField(blank=True, null=True)
    do_not_disturb_to = models.TimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        verbose_name_plural = "account settings"

    def __str__(self):
        return f"Settings for {self.user_id}"
