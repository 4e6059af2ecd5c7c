from django.test import TestCase
from django.urls import reverse


class HealthCheckTest(TestCase):
    def test_health_check(self):
        response = self.client.get(reverse("system_info:health"))

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "Backend API is running!")
        self.assertEqual(body["version"], "1.0.0")
        self.assertIn("timestamp", body)

    def test_health_check_rejects_post(self):
        response = self.client.post(reverse("system_info:health"))
        self.assertEqual(response.status_code, 405)
