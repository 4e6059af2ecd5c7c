import uuid

from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models


class UserAddress(models.Model):
    """Delivery address saved on a user's account. At most one is the default."""

    class Label(models.TextChoices):
        HOME = "HOME", "Home"
        WORK = "WORK", "Work"
        OTHER = "OTHER", "Other"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="addresses")
    label = models.CharField(max_length=10, choices=Label.choices, default=Label.HOME)
    contact_name = models.CharField(max_length=150)
    contact_number = models.CharField(max_length=20, blank=True, null=True)
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=120, blank=True, null=True)
    state = models.CharField(max_length=120)
    pincode = models.CharField(max_length=12, validators=[MinLengthValidator(4)])
    landmark = models.CharField(max_length=255, blank=True, null=True)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "is_default"], name="useraddress_user_default_idx"),
        ]

    def __str__(self):
        return f"{self.get_label_display()} address of {self.user_id}"
