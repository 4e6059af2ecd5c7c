"""
Storage Factory
===============

Builds the object storage backend named by ``settings.INFRASTRUCTURE["STORAGE_BACKEND"]``.
"""

import logging
from typing import Optional

from django.conf import settings

from .interface import StorageInterface
from .s3_adapter import S3StorageAdapter

logger = logging.getLogger(__name__)

BACKENDS = {
    "s3": S3StorageAdapter,
}


class StorageFactory:
    """
    Usage:
        storage = StorageFactory.create()        # configured backend
        storage = StorageFactory.create("s3")
    """

    @staticmethod
    def create(backend: Optional[str] = None) -> StorageInterface:
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = (backend or infrastructure.get("STORAGE_BACKEND") or "s3").lower()

        adapter_class = BACKENDS.get(backend_type)
        if adapter_class is None:
            raise ValueError(f"Invalid storage backend: {backend_type}. Must be one of {sorted(BACKENDS)}")

        logger.info(f"Creating storage backend: {backend_type}")
        return adapter_class()
