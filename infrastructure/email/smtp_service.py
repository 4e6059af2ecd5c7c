"""
SMTP Email Service
==================

EmailServiceInterface backed by Django's email backend (EMAIL_HOST, EMAIL_PORT,
EMAIL_HOST_USER, EMAIL_HOST_PASSWORD, EMAIL_USE_TLS, DEFAULT_FROM_EMAIL).
"""

import logging
from typing import Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from utils.logging_utils import mask_value

from .interface import EmailException, EmailMessage, EmailServiceInterface


logger = logging.getLogger(__name__)


class SMTPEmailService(EmailServiceInterface):
    def __init__(self, default_from: Optional[str] = None):
        self.default_from = default_from or getattr(settings, "DEFAULT_FROM_EMAIL", "noreply@example.com")

    def send(self, message: EmailMessage) -> bool:
        recipients = ", ".join(mask_value(address) for address in message.to)
        try:
            email = EmailMultiAlternatives(
                subject=message.subject,
                body=message.body,
                from_email=message.from_email or self.default_from,
                to=message.to,
            )
            if message.html_body:
                email.attach_alternative(message.html_body, "text/html")

            num_sent = email.send(fail_silently=False)
        except Exception as e:
            logger.error(f"Failed to send email '{message.subject}' to {recipients}: {str(e)}")
            raise EmailException(f"Email send failed: {str(e)}") from e

        if num_sent > 0:
            logger.info(f"Email '{message.subject}' sent to {recipients}")
            return True

        logger.warning(f"Email backend accepted no message for {recipients}")
        return False
