"""
Email Service Interface
========================

Abstract base class for the mail transport used by account emails.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EmailMessage:
    """
    Represents an email message.

    Attributes:
        subject: Email subject line
        body: Plain text body
        to: Recipient addresses
        from_email: Sender address (settings.DEFAULT_FROM_EMAIL when None)
        html_body: HTML alternative of the body
    """

    subject: str
    body: str
    to: List[str] = field(default_factory=list)
    from_email: Optional[str] = None
    html_body: Optional[str] = None


class EmailServiceInterface(ABC):
    """
    Abstract interface for email delivery.

    Concrete implementations:
        - SMTPEmailService: Django's configured email backend
        - MockEmailService: in-memory outbox for tests and local runs
    """

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """
        Send a single email message.

        Returns:
            True if the backend accepted the message

        Raises:
            EmailException: If the transport fails
        """
        pass


class EmailException(Exception):
    """Base exception for email operations."""

    pass
