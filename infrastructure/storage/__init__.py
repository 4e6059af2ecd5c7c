"""
Storage Abstraction Layer
==========================

Unified interface for object storage (S3 and S3-compatible services).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .s3_adapter import S3StorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "S3StorageAdapter",
    "StorageFactory",
]
