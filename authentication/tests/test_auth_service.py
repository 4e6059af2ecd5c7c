from datetime import timedelta

import pytest
from django.utils import timezone

from authentication.domain.services.auth_service import AuthService, generate_numeric_code
from authentication.infra.mail import MockEmailProvider
from marketplace.tests.factories import UserFactory


@pytest.mark.unit
class TestGenerateNumericCode:
    def test_length_and_digits(self):
        for _ in range(50):
            code = generate_numeric_code(6)
            assert len(code) == 6
            assert code.isdigit()
            assert code[0] != "0"


@pytest.mark.django_db
class TestAuthService:
    def setup_method(self):
        self.email_provider = MockEmailProvider()
        self.service = AuthService(email_provider=self.email_provider)

    def test_register_sends_verification_code(self):
        result = self.service.register("New.User@Example.com", "secret123", name="New User")

        assert result.success is True
        assert result.email_sent is True
        assert result.user.email == "new.user@example.com"
        assert result.user.is_email_verified is False
        sent = self.email_provider.verification_codes_sent[0]
        assert sent["code"] == result.user.email_verification_code
        assert len(sent["code"]) == 6

    def test_register_duplicate_email(self):
        UserFactory(email="taken@example.com")

        result = self.service.register("TAKEN@example.com", "secret123")

        assert result.success is False
        assert result.status_code == 409

    def test_register_survives_email_failure(self):
        service = AuthService(email_provider=MockEmailProvider(should_fail=True))

        result = service.register("quiet@example.com", "secret123")

        assert result.success is True
        assert result.email_sent is False

    def test_login_requires_verified_email(self):
        UserFactory(email="pending@example.com", is_email_verified=False)

        result = self.service.login("pending@example.com", "defaultpassword")

        assert result.success is False
        assert result.status_code == 401
        assert result.error == "Please verify your email before logging in"

    def test_login_wrong_password(self):
        UserFactory(email="user@example.com")

        result = self.service.login("user@example.com", "wrong")

        assert result.status_code == 401
        assert result.error == "Invalid credentials"

    def test_login_success_issues_tokens(self):
        user = UserFactory(email="user@example.com")

        result = self.service.login("USER@example.com", "defaultpassword")

        assert result.success is True
        assert result.user == user
        assert result.access_token
        assert result.refresh_token

    def test_verify_email_flow(self):
        registered = self.service.register("verify@example.com", "secret123").user
        code = registered.email_verification_code

        result = self.service.verify_email("verify@example.com", code)

        assert result.success is True
        assert result.access_token
        registered.refresh_from_db()
        assert registered.is_email_verified is True
        assert registered.email_verification_code is None

    def test_verify_email_wrong_code(self):
        self.service.register("verify@example.com", "secret123")

        result = self.service.verify_email("verify@example.com", "000000")

        assert result.success is False
        assert result.error == "Invalid verification code"

    def test_verify_email_expired_code(self):
        user = self.service.register("late@example.com", "secret123").user
        user.email_verification_expires = timezone.now() - timedelta(minutes=1)
        user.save()

        result = self.service.verify_email("late@example.com", user.email_verification_code)

        assert result.error == "Verification code has expired"

    def test_request_and_use_login_otp(self):
        UserFactory(email="otp@example.com")

        requested = self.service.request_login_otp("otp@example.com")
        otp = self.email_provider.login_otps_sent[0]["otp"]
        result = self.service.login_with_otp("otp@example.com", otp)

        assert requested.success is True
        assert result.success is True
        assert result.refresh_token

    def test_login_otp_is_single_use(self):
        user = UserFactory(email="otp@example.com")
        self.service.request_login_otp("otp@example.com")
        otp = self.email_provider.login_otps_sent[0]["otp"]
        self.service.login_with_otp("otp@example.com", otp)

        result = self.service.login_with_otp("otp@example.com", otp)

        assert result.success is False
        assert result.error == "No active OTP. Please request a new one."
        user.refresh_from_db()
        assert user.login_otp is None

    def test_expired_otp_is_cleared(self):
        user = UserFactory(email="otp@example.com")
        self.service.request_login_otp("otp@example.com")
        user.refresh_from_db()
        user.login_otp_expires = timezone.now() - timedelta(seconds=1)
        user.save()

        result = self.service.login_with_otp("otp@example.com", user.login_otp)

        assert result.error == "OTP has expired. Please request a new one."
        user.refresh_from_db()
        assert user.login_otp is None

    def test_otp_send_failure_clears_otp(self):
        user = UserFactory(email="otp@example.com")
        service = AuthService(email_provider=MockEmailProvider(should_fail=True))

        result = service.request_login_otp("otp@example.com")

        assert result.success is False
        assert result.error == "Failed to send login OTP"
        user.refresh_from_db()
        assert user.login_otp is None

    def test_otp_for_unknown_email(self):
        result = self.service.request_login_otp("ghost@example.com")

        assert result.status_code == 401
        assert result.error == "Invalid email or OTP"
