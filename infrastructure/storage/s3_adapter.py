"""
S3 Storage Adapter
==================

StorageInterface implementation on top of django-storages' S3Boto3Storage.
"""

import logging
from typing import BinaryIO, Optional

from django.conf import settings
from storages.backends.s3boto3 import S3Boto3Storage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class S3StorageAdapter(StorageInterface):
    """
    AWS S3 storage implementation using django-storages.

    Configuration (in settings.py):
        AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY: credentials
        AWS_STORAGE_BUCKET_NAME: bucket name
        AWS_S3_REGION_NAME: region used to build public URLs
        AWS_S3_PUBLIC_URL: public base URL (CDN or custom domain), optional
    """

    def __init__(self, storage: Optional[S3Boto3Storage] = None):
        self.storage = storage or S3Boto3Storage()
        self._bucket_name = getattr(settings, "AWS_STORAGE_BUCKET_NAME", "") or "default-bucket"
        self._region = getattr(settings, "AWS_S3_REGION_NAME", "us-east-1") or "us-east-1"
        self._public_base = (getattr(settings, "AWS_S3_PUBLIC_URL", "") or "").rstrip("/")

    def upload(self, file: BinaryIO, key: str, content_type: str) -> StorageFile:
        try:
            saved_key = self.storage.save(key, file)
        except Exception as e:
            logger.error(f"Failed to upload file to S3: {key}. Error: {str(e)}")
            raise StorageException(f"S3 upload failed: {str(e)}") from e

        size = getattr(file, "size", None)
        if size is None:
            size = self.storage.size(saved_key)

        logger.info(f"Uploaded {saved_key} ({size} bytes) to bucket {self._bucket_name}")
        return StorageFile(
            key=saved_key,
            url=self.public_url(saved_key),
            size=size,
            content_type=content_type,
            bucket=self._bucket_name,
        )

    def public_url(self, key: str) -> str:
        key = key.lstrip("/")
        if self._public_base:
            return f"{self._public_base}/{key}"
        return f"https://{self._bucket_name}.s3.{self._region}.amazonaws.com/{key}"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
