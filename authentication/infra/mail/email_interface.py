"""
Abstract Email Provider interface for authentication emails.

Decouples the auth service from template rendering and the mail transport so
the service can be tested with :class:`MockEmailProvider`.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Tuple


class EmailProvider(ABC):
    """Abstract email provider interface for authentication emails."""

    @abstractmethod
    def send_verification_code(self, user, code: str, expires_at: datetime) -> Tuple[bool, str]:
        """
        Send the email verification code to a freshly registered user.

        Args:
            user: CustomUser instance
            code: Numeric verification code
            expires_at: When the code stops being accepted

        Returns:
            (success: bool, message: str)
        """
        pass

    @abstractmethod
    def send_login_otp(self, user, otp: str, ttl_minutes: int) -> Tuple[bool, str]:
        """
        Send a one-time login password.

        Args:
            user: CustomUser instance
            otp: Numeric one-time password
            ttl_minutes: Minutes the OTP stays valid

        Returns:
            (success: bool, message: str)
        """
        pass
