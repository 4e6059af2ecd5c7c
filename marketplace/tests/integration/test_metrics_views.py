from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.infra.observability.metrics import cart_mutations_total


class MarketplaceMetricsIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("marketplace:marketplace-metrics")

    def test_metrics_are_public_prometheus_text(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response["Content-Type"].startswith("text/plain"))
        self.assertIn(b"marketplace_orders_placed_total", response.content)
        self.assertIn(b"marketplace_checkout_seconds", response.content)

    def test_counter_values_exposed(self):
        cart_mutations_total.labels(operation="add").inc()
        response = self.client.get(self.url)

        self.assertIn(b'marketplace_cart_mutations_total{operation="add"}', response.content)
