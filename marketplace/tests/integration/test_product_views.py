import uuid
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Product, ProductStatus
from marketplace.tests.factories import ProductFactory, SellerFactory, UserFactory


class ProductViewIntegrationTest(TestCase):
    def setUp(self):
        container.reset()
        self.client = APIClient()

        self.seller = SellerFactory(email="seller@example.com", name="Ravi Farms")
        self.other_seller = SellerFactory(email="other@example.com")
        self.product = ProductFactory(seller=self.seller, name="Tomatoes", price=Decimal("40.00"))
        self.other_product = ProductFactory(seller=self.other_seller)

        self.list_url = reverse("marketplace:product-list")
        self.detail_url = reverse("marketplace:product-detail", kwargs={"pk": self.product.id})

        self.payload = {
            "name": "Basmati rice",
            "description": "Aged one year",
            "categories": ["GRAINS"],
            "price": "120.00",
            "quantity": "25.5",
            "unit": "KILOGRAM",
            "images": ["https://cdn.example.com/rice.jpg"],
        }

    def test_products_require_authentication(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_returns_only_own_products(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in response.data], [str(self.product.id)])
        self.assertEqual(response.data[0]["creator_id"], str(self.seller.id))

    def test_create_product(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post(self.list_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["name"], "Basmati rice")
        self.assertEqual(response.data["status"], ProductStatus.ACTIVE)
        self.assertEqual(response.data["creator_id"], str(self.seller.id))
        self.assertEqual(Decimal(response.data["quantity"]), Decimal("25.5"))

        product = Product.objects.get(id=response.data["id"])
        self.assertEqual(product.seller, self.seller)
        self.assertEqual(product.categories, ["GRAINS"])
        self.assertEqual(product.images, ["https://cdn.example.com/rice.jpg"])

    def test_create_requires_categories(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post(self.list_url, {**self.payload, "categories": []}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("categories", response.data)

    def test_create_rejects_unknown_category(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post(self.list_url, {**self.payload, "categories": ["JEWELLERY"]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_rejects_non_positive_quantity(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post(self.list_url, {**self.payload, "quantity": "0"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("quantity", response.data)

    def test_create_rejects_negative_price(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post(self.list_url, {**self.payload, "price": "-1.00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("price", response.data)

    def test_retrieve_includes_creator(self):
        buyer = UserFactory()
        self.client.force_authenticate(user=buyer)
        response = self.client.get(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Tomatoes")
        self.assertEqual(response.data["creator"]["id"], str(self.seller.id))
        self.assertEqual(response.data["creator"]["name"], "Ravi Farms")

    def test_retrieve_unknown_product(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.get(reverse("marketplace:product-detail", kwargs={"pk": uuid.uuid4()}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["detail"], "Product not found")

    def test_list_by_creator(self):
        ProductFactory(seller=self.seller, status=ProductStatus.INACTIVE)
        self.client.force_authenticate(user=self.other_seller)
        url = reverse("marketplace:product-by-creator", kwargs={"creator_id": self.seller.id})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertTrue(all(p["creator_id"] == str(self.seller.id) for p in response.data))

    def test_partial_update(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.patch(self.detail_url, {"price": "45.00", "status": "Inactive"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, Decimal("45.00"))
        self.assertEqual(self.product.status, ProductStatus.INACTIVE)
        self.assertEqual(self.product.name, "Tomatoes")

    def test_update_replaces_images(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.put(self.detail_url, {"images": ["https://cdn.example.com/new.jpg"]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["images"], ["https://cdn.example.com/new.jpg"])

    def test_update_other_sellers_product_returns_404(self):
        self.client.force_authenticate(user=self.other_seller)
        response = self.client.patch(self.detail_url, {"price": "1.00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, Decimal("40.00"))

    def test_delete_product(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.delete(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(id=self.product.id).exists())

    def test_delete_other_sellers_product_returns_404(self):
        self.client.force_authenticate(user=self.other_seller)
        response = self.client.delete(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(Product.objects.filter(id=self.product.id).exists())
