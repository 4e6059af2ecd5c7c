import uuid

from django.contrib.auth import get_user_model
from django.core.validators import MinLengthValidator
from django.db import models

from marketplace.catalog.domain.models.catalog import Product

User = get_user_model()


class OrderStatus(models.TextChoices):
    RECEIVED = "Received", "Received"
    ACCEPTED = "Accepted", "Accepted"
    SHIPPED = "Shipped", "Shipped"
    DELIVERED = "Delivered", "Delivered"
    CANCELLED = "Cancelled", "Cancelled"


class Order(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey(User, on_delete=models.CASCADE, related_name="orders")

    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.RECEIVED)
    # Fixed at checkout; status changes and remarks never recompute it
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    buyer_note = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["buyer", "-created_at"], name="order_buyer_created_idx"),
            models.Index(fields=["status", "-created_at"], name="order_status_created_idx"),
        ]

    def __str__(self):
        return f"Order {str(self.id)[:8]} by {self.buyer.email}"

    def seller_ids(self):
        """Distinct sellers on the order, in item order."""
        seen = []
        for item in self.items.all():
            if item.seller_id not in seen:
                seen.append(item.seller_id)
        return seen


class OrderItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="order_items")
    seller = models.ForeignKey(User, on_delete=models.CASCADE, related_name="sold_items")

    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        app_label = "marketplace"

    def __str__(self):
        return f"{self.quantity}x {self.product_id} in order {str(self.order_id)[:8]}"


class OrderActivity(models.Model):
    """Append-only remark on an order's timeline."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="activities")
    author = models.ForeignKey(User, on_delete=models.CASCADE, related_name="order_activities")
    message = models.CharField(max_length=500, validators=[MinLengthValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        verbose_name_plural = "Order activities"
        app_label = "marketplace"

    def __str__(self):
        return f"Remark by {self.author_id} on order {str(self.order_id)[:8]}"
