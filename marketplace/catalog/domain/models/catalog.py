import uuid
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.validators import MinValueValidator
from django.db import models


User = get_user_model()


class ProductStatus(models.TextChoices):
    ACTIVE = "Active", "Active"
    INACTIVE = "Inactive", "Inactive"


class ProductCategory(models.TextChoices):
    VEGETABLES = "VEGETABLES", "Vegetables"
    FRUITS = "FRUITS", "Fruits"
    GRAINS = "GRAINS", "Grains"
    PULSES = "PULSES", "Pulses"
    DAIRY = "DAIRY", "Dairy"
    SPICES = "SPICES", "Spices"
    OTHER = "OTHER", "Other"


class ProductUnit(models.TextChoices):
    KILOGRAM = "KILOGRAM", "Kilogram"
    GRAM = "GRAM", "Gram"
    LITRE = "LITRE", "Litre"
    MILLILITRE = "MILLILITRE", "Millilitre"
    PIECE = "PIECE", "Piece"
    DOZEN = "DOZEN", "Dozen"


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller = models.ForeignKey(User, on_delete=models.CASCADE, related_name="products")

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    categories = models.JSONField(default=list, help_text="List of ProductCategory values")

    # Pricing and Inventory
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])
    quantity = models.DecimalField(max_digits=12, decimal_places=3, validators=[MinValueValidator(Decimal("0.001"))])
    unit = models.CharField(max_length=20, choices=ProductUnit.choices)

    images = models.JSONField(default=list, blank=True, help_text="Public image URLs")
    status = models.CharField(max_length=20, choices=ProductStatus.choices, default=ProductStatus.ACTIVE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["seller", "status"], name="product_seller_status_idx"),
            models.Index(fields=["status", "-created_at"], name="product_status_created_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def is_purchasable(self):
        return self.status == ProductStatus.ACTIVE

    @property
    def primary_image(self):
        return self.images[0] if self.images else None
