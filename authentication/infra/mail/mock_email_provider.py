"""
Mock Email Provider for testing.

Records every email the auth service asks for so tests can read the codes
back. Set ``should_fail`` to simulate a transport failure.
"""

from datetime import datetime
from typing import Any, Dict, List, Tuple

from .email_interface import EmailProvider


class MockEmailProvider(EmailProvider):
    def __init__(self, should_fail: bool = False):
        self.verification_codes_sent: List[Dict[str, Any]] = []
        self.login_otps_sent: List[Dict[str, Any]] = []
        self.should_fail = should_fail

    def send_verification_code(self, user, code: str, expires_at: datetime) -> Tuple[bool, str]:
        if self.should_fail:
            return False, "Mock transport failure"
        self.verification_codes_sent.append({"user_email": user.email, "code": code, "expires_at": expires_at})
        return True, "Verification email sent successfully"

    def send_login_otp(self, user, otp: str, ttl_minutes: int) -> Tuple[bool, str]:
        if self.should_fail:
            return False, "Mock transport failure"
        self.login_otps_sent.append({"user_email": user.email, "otp": otp, "ttl_minutes": ttl_minutes})
        return True, "Login OTP sent successfully"
