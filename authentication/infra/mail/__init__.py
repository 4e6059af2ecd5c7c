"""
Email infrastructure for authentication flows.

Provides the EmailProvider interface and its implementations.
"""

from .django_email_provider import DjangoEmailProvider
from .email_interface import EmailProvider
from .mock_email_provider import MockEmailProvider

__all__ = ["EmailProvider", "DjangoEmailProvider", "MockEmailProvider"]
