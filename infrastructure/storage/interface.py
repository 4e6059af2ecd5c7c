"""
Storage Interface
=================

Abstract base class for object storage used by image uploads.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StorageFile:
    """
    A stored object and its metadata.

    Attributes:
        key: Object key inside the bucket
        url: Public URL of the object
        size: Size in bytes
        content_type: MIME type
        bucket: Bucket name (optional)
    """

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    """
    Abstract interface for object storage.

    Concrete implementations:
        - S3StorageAdapter: AWS S3 / S3-compatible storage via django-storages
    """

    @abstractmethod
    def upload(self, file: BinaryIO, key: str, content_type: str) -> StorageFile:
        """
        Store ``file`` under ``key``.

        Raises:
            StorageException: If upload fails
        """
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL clients use to fetch the object."""
        pass

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        pass


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
