"""
Django Email Provider implementation.

Renders the HTML + text templates under ``authentication/emails/`` and hands
the message to the infrastructure email service.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from django.template.loader import render_to_string
from django.utils import timezone

from infrastructure.email import EmailException, EmailMessage, EmailServiceInterface
from utils.logging_utils import mask_value

from .email_interface import EmailProvider


logger = logging.getLogger(__name__)


class DjangoEmailProvider(EmailProvider):
    """
    Production email provider using the configured infrastructure email service.

    Transport failures never raise: they are logged and reported as
    ``(False, reason)`` so the auth service decides whether they are fatal.
    """

    def __init__(self, email_service: Optional[EmailServiceInterface] = None):
        self._email_service = email_service

    @property
    def email_service(self) -> EmailServiceInterface:
        if self._email_service is None:
            from infrastructure.container import container

            self._email_service = container.email()
        return self._email_service

    def send_verification_code(self, user, code: str, expires_at: datetime) -> Tuple[bool, str]:
        context = {
            "user": user,
            "display_name": user.get_short_name(),
            "code": code,
            "expires_at": expires_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
            "current_year": timezone.now().year,
        }
        ok = self._send(
            subject="Verify your email address - Bazaar",
            template="verification_code",
            context=context,
            recipient=user.email,
        )
        return (True, "Verification email sent successfully") if ok else (False, "Failed to send verification email")

    def send_login_otp(self, user, otp: str, ttl_minutes: int) -> Tuple[bool, str]:
        context = {
            "user": user,
            "display_name": user.get_short_name(),
            "otp": otp,
            "ttl_minutes": ttl_minutes,
            "current_year": timezone.now().year,
        }
        ok = self._send(
            subject="Your Bazaar login code",
            template="login_otp",
            context=context,
            recipient=user.email,
        )
        return (True, "Login OTP sent successfully") if ok else (False, "Failed to send login OTP")

    def _send(self, subject: str, template: str, context: dict, recipient: str) -> bool:
        html_message = render_to_string(f"authentication/emails/{template}.html", context)
        text_message = render_to_string(f"authentication/emails/{template}.txt", context)
        message = EmailMessage(subject=subject, body=text_message, to=[recipient], html_body=html_message)
        try:
            return self.email_service.send(message)
        except EmailException as e:
            logger.error(f"Failed to send {template} email to {mask_value(recipient)}: {e}")
            return False
