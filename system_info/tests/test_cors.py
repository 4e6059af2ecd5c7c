from django.test import TestCase, override_settings
from django.urls import reverse

FRONTEND = "https://shop.example.com"


@override_settings(CORS_ALLOWED_ORIGINS=[FRONTEND], CORS_ALLOW_CREDENTIALS=True)
class FrontendCorsTest(TestCase):
    def test_frontend_origin_allowed(self):
        response = self.client.get(reverse("system_info:health"), HTTP_ORIGIN=FRONTEND)

        self.assertEqual(response["Access-Control-Allow-Origin"], FRONTEND)
        self.assertEqual(response["Access-Control-Allow-Credentials"], "true")

    def test_other_origin_gets_no_cors_headers(self):
        response = self.client.get(reverse("system_info:health"), HTTP_ORIGIN="https://evil.example.com")

        self.assertNotIn("Access-Control-Allow-Origin", response)

    def test_preflight_answered_without_reaching_view(self):
        response = self.client.options(
            reverse("system_info:health"),
            HTTP_ORIGIN=FRONTEND,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS="authorization",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Access-Control-Allow-Origin"], FRONTEND)
        self.assertIn("authorization", response["Access-Control-Allow-Headers"])

    def test_existing_vary_header_is_kept(self):
        response = self.client.get(reverse("marketplace:browse"), HTTP_ORIGIN=FRONTEND)

        vary = [value.strip().lower() for value in response["Vary"].split(",")]
        self.assertIn("accept", vary)
        self.assertIn("origin", vary)
