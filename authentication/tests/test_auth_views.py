from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.domain.services.auth_service import AuthService
from authentication.infra.mail import MockEmailProvider
from authentication.models import CustomUser
from marketplace.tests.factories import UserFactory


class AuthViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.email_provider = MockEmailProvider()
        patcher = patch(
            "authentication.api.views.auth_views.get_auth_service",
            return_value=AuthService(email_provider=self.email_provider),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

        self.register_url = reverse("authentication:register")
        self.login_url = reverse("authentication:login")
        self.verify_url = reverse("authentication:verify_email")
        self.resend_url = reverse("authentication:resend_verification")
        self.request_otp_url = reverse("authentication:login_request_otp")
        self.verify_otp_url = reverse("authentication:login_verify_otp")
        self.refresh_url = reverse("authentication:token_refresh")

    def test_register(self):
        response = self.client.post(
            self.register_url, {"email": "asha@example.com", "password": "secret123", "name": "Asha"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["user"]["email"], "asha@example.com")
        self.assertFalse(response.data["user"]["is_email_verified"])
        self.assertNotIn("password", response.data["user"])
        self.assertEqual(len(self.email_provider.verification_codes_sent), 1)

    def test_register_short_password(self):
        response = self.client.post(self.register_url, {"email": "asha@example.com", "password": "123"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data)

    def test_register_duplicate(self):
        UserFactory(email="asha@example.com")
        response = self.client.post(
            self.register_url, {"email": "asha@example.com", "password": "secret123"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["detail"], "Email already registered")

    def test_login_before_verification_refused(self):
        self.client.post(self.register_url, {"email": "asha@example.com", "password": "secret123"}, format="json")
        response = self.client.post(self.login_url, {"email": "asha@example.com", "password": "secret123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_verify_email_then_login(self):
        self.client.post(self.register_url, {"email": "asha@example.com", "password": "secret123"}, format="json")
        code = self.email_provider.verification_codes_sent[0]["code"]

        verified = self.client.post(
            self.verify_url, {"email": "asha@example.com", "verification_code": code}, format="json"
        )
        self.assertEqual(verified.status_code, status.HTTP_200_OK)
        self.assertIn("access_token", verified.data)
        self.assertTrue(verified.data["user"]["is_email_verified"])

        response = self.client.post(self.login_url, {"email": "asha@example.com", "password": "secret123"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Login successful")
        self.assertTrue(response.data["access_token"])
        self.assertTrue(response.data["refresh_token"])

    def test_access_token_authenticates_requests(self):
        UserFactory(email="asha@example.com")
        login = self.client.post(
            self.login_url, {"email": "asha@example.com", "password": "defaultpassword"}, format="json"
        )

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access_token']}")
        response = self.client.get(reverse("users:profile"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], "asha@example.com")

    def test_refresh_token(self):
        UserFactory(email="asha@example.com")
        login = self.client.post(
            self.login_url, {"email": "asha@example.com", "password": "defaultpassword"}, format="json"
        )

        response = self.client.post(self.refresh_url, {"refresh": login.data["refresh_token"]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)

    def test_resend_verification(self):
        self.client.post(self.register_url, {"email": "asha@example.com", "password": "secret123"}, format="json")
        response = self.client.post(self.resend_url, {"email": "asha@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(self.email_provider.verification_codes_sent), 2)
        latest = self.email_provider.verification_codes_sent[-1]["code"]
        self.assertEqual(CustomUser.objects.get(email="asha@example.com").email_verification_code, latest)

    def test_resend_for_verified_account(self):
        UserFactory(email="asha@example.com")
        response = self.client.post(self.resend_url, {"email": "asha@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Email is already verified")

    def test_otp_login(self):
        UserFactory(email="asha@example.com")
        requested = self.client.post(self.request_otp_url, {"email": "asha@example.com"}, format="json")
        self.assertEqual(requested.status_code, status.HTTP_200_OK)

        otp = self.email_provider.login_otps_sent[0]["otp"]
        response = self.client.post(self.verify_otp_url, {"email": "asha@example.com", "otp": otp}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["access_token"])

    def test_otp_login_wrong_code(self):
        UserFactory(email="asha@example.com")
        self.client.post(self.request_otp_url, {"email": "asha@example.com"}, format="json")
        otp = self.email_provider.login_otps_sent[0]["otp"]
        wrong = "1" * 6 if otp != "1" * 6 else "2" * 6

        response = self.client.post(self.verify_otp_url, {"email": "asha@example.com", "otp": wrong}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Invalid OTP")
