"""
AuthService - Core Authentication Business Logic.

Registration, password login, email verification with numeric codes and
passwordless login with emailed one-time passwords.
"""

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from authentication.api.serializers.jwt_serializers import issue_tokens
from authentication.infra.mail import EmailProvider
from utils.logging_utils import mask_value

from .results import LoginResult, RegisterResult, Result


User = get_user_model()
logger = logging.getLogger(__name__)


def generate_numeric_code(length: int) -> str:
    """Random numeric code of exactly ``length`` digits (no leading zero)."""
    low = 10 ** (length - 1)
    high = 10**length - 1
    return str(low + secrets.randbelow(high - low + 1))


class AuthService:
    """
    Authentication service encapsulating all auth business logic.

    Credentials errors answer 401, business-rule failures 400 and duplicate
    registrations 409.
    """

    INVALID_CREDENTIALS = "Invalid credentials"
    INVALID_OTP_LOGIN = "Invalid email or OTP"
    EMAIL_NOT_VERIFIED = "Please verify your email before logging in"

    def __init__(self, email_provider: EmailProvider):
        """
        Args:
            email_provider: Email provider implementation
        """
        self.email_provider = email_provider

    @staticmethod
    def _find_user(email: str):
        if not email:
            return None
        return User.objects.filter(email__iexact=email.strip()).first()

    @staticmethod
    def _token_result(user, message: str = None) -> LoginResult:
        tokens = issue_tokens(user)
        return LoginResult(
            success=True,
            user=user,
            access_token=tokens["access_token"],
            refresh_token=tokens["refresh_token"],
            message=message,
        )

    def register(self, email: str, password: str, name=None, phone=None, location=None) -> RegisterResult:
        """
        Create an unverified account and email its verification code.

        A failed verification email does not fail the registration; the user
        can ask for a new code with :meth:`resend_verification`.
        """
        email = email.strip().lower()
        logger.info(f"Registration attempt for {mask_value(email)}")

        if User.objects.filter(email__iexact=email).exists():
            logger.warning(f"Registration failed: {mask_value(email)} already registered")
            return RegisterResult(success=False, error="Email already registered", status_code=409)

        code = generate_numeric_code(settings.EMAIL_VERIFICATION_CODE_LENGTH)
        expires_at = timezone.now() + timedelta(hours=settings.EMAIL_VERIFICATION_TTL_HOURS)

        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                name=name,
                phone=phone,
                location=location,
                email_verification_code=code,
                email_verification_expires=expires_at,
            )

        email_sent, info = self.email_provider.send_verification_code(user, code, expires_at)
        if not email_sent:
            logger.error(f"Verification email for user {user.id} was not sent: {info}")

        logger.info(f"User registered successfully: {user.id}")
        return RegisterResult(
            success=True,
            user=user,
            email_sent=email_sent,
            message="Registration successful. Please check your email for verification code.",
        )

    def login(self, email: str, password: str) -> LoginResult:
        user = self._find_user(email)
        if user is None or not user.check_password(password or ""):
            logger.warning(f"Login failed for {mask_value(email or '')}: invalid credentials")
            return LoginResult(success=False, error=self.INVALID_CREDENTIALS, status_code=401)

        if not user.is_email_verified:
            logger.warning(f"Login failed: email not verified for user {user.id}")
            return LoginResult(success=False, error=self.EMAIL_NOT_VERIFIED, status_code=401)

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])

        logger.info(f"Login successful for user {user.id}")
        return self._token_result(user, message="Login successful")

    def verify_email(self, email: str, verification_code: str) -> LoginResult:
        user = self._find_user(email)
        if user is None:
            return LoginResult(success=False, error="User not found", status_code=400)

        if user.is_email_verified:
            return LoginResult(success=False, error="Email is already verified", status_code=400)

        if not user.email_verification_code or user.email_verification_code != verification_code:
            logger.warning(f"Invalid verification code for user {user.id}")
            return LoginResult(success=False, error="Invalid verification code", status_code=400)

        if user.email_verification_expires is None or user.email_verification_expires < timezone.now():
            logger.warning(f"Expired verification code for user {user.id}")
            return LoginResult(success=False, error="Verification code has expired", status_code=400)

        user.is_email_verified = True
        user.clear_verification_code()
        user.save(update_fields=["is_email_verified", "email_verification_code", "email_verification_expires"])

        logger.info(f"Email verified for user {user.id}")
        return self._token_result(user, message="Email verified successfully")

    def resend_verification(self, email: str) -> Result:
        user = self._find_user(email)
        if user is None:
            return Result.failure("User not found")
        if user.is_email_verified:
            return Result.failure("Email is already verified")

        code = generate_numeric_code(settings.EMAIL_VERIFICATION_CODE_LENGTH)
        expires_at = timezone.now() + timedelta(hours=settings.EMAIL_VERIFICATION_TTL_HOURS)
        user.email_verification_code = code
        user.email_verification_expires = expires_at
        user.save(update_fields=["email_verification_code", "email_verification_expires"])

        email_sent, info = self.email_provider.send_verification_code(user, code, expires_at)
        if not email_sent:
            logger.error(f"Resending verification email failed for user {user.id}: {info}")
            return Result.failure("Failed to send verification email")

        return Result(success=True, message="Verification email sent successfully")

    def request_login_otp(self, email: str) -> Result:
        user = self._find_user(email)
        if user is None:
            logger.warning(f"OTP requested for unknown email {mask_value(email or '')}")
            return Result.failure(self.INVALID_OTP_LOGIN, status_code=401)
        if not user.is_email_verified:
            return Result.failure("Please verify your email before using OTP login")

        ttl_minutes = settings.LOGIN_OTP_TTL_MINUTES
        user.login_otp = generate_numeric_code(settings.LOGIN_OTP_LENGTH)
        user.login_otp_expires = timezone.now() + timedelta(minutes=ttl_minutes)
        user.save(update_fields=["login_otp", "login_otp_expires"])

        email_sent, info = self.email_provider.send_login_otp(user, user.login_otp, ttl_minutes)
        if not email_sent:
            logger.error(f"Login OTP email failed for user {user.id}: {info}")
            user.clear_login_otp()
            user.save(update_fields=["login_otp", "login_otp_expires"])
            return Result.failure("Failed to send login OTP")

        logger.info(f"Login OTP issued for user {user.id}")
        return Result(success=True, message="Login OTP sent to your email address")

    def login_with_otp(self, email: str, otp: str) -> LoginResult:
        user = self._find_user(email)
        if user is None:
            return LoginResult(success=False, error=self.INVALID_OTP_LOGIN, status_code=401)
        if not user.is_email_verified:
            return LoginResult(success=False, error=self.EMAIL_NOT_VERIFIED, status_code=401)

        if not user.login_otp or not user.login_otp_expires:
            return LoginResult(success=False, error="No active OTP. Please request a new one.", status_code=400)

        if user.login_otp_expires < timezone.now():
            user.clear_login_otp()
            user.save(update_fields=["login_otp", "login_otp_expires"])
            return LoginResult(success=False, error="OTP has expired. Please request a new one.", status_code=400)

        if not secrets.compare_digest(user.login_otp, otp or ""):
            logger.warning(f"Invalid login OTP for user {user.id}")
            return LoginResult(success=False, error="Invalid OTP", status_code=400)

        user.clear_login_otp()
        user.last_login = timezone.now()
        user.save(update_fields=["login_otp", "login_otp_expires", "last_login"])

        logger.info(f"OTP login successful for user {user.id}")
        return self._token_result(user, message="Login successful")
