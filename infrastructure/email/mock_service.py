"""
Mock Email Service
==================

Keeps sent messages in memory instead of delivering them.
"""

import logging
from typing import List, Optional

from utils.logging_utils import mask_value

from .interface import EmailException, EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class MockEmailService(EmailServiceInterface):
    """
    Mock email service for tests and local development.

    Every message is logged and appended to ``sent_messages``. Setting
    ``fail_next`` makes the next :meth:`send` raise, to exercise error paths.
    """

    def __init__(self):
        self.sent_messages: List[EmailMessage] = []
        self.fail_next = False

    def send(self, message: EmailMessage) -> bool:
        if self.fail_next:
            self.fail_next = False
            raise EmailException("Mock email transport failure")

        logger.info(f"[MOCK EMAIL] To: {[mask_value(to) for to in message.to]}, Subject: {message.subject}")
        self.sent_messages.append(message)
        return True

    def clear_sent_messages(self):
        self.sent_messages.clear()

    def get_sent_count(self) -> int:
        return len(self.sent_messages)

    def get_last_message(self) -> Optional[EmailMessage]:
        return self.sent_messages[-1] if self.sent_messages else None
