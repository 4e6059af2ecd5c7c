"""
ImageUploadService - Product image uploads

Validates multipart image files and forwards them to object storage, returning
the public URL each image can be referenced by in product payloads.
"""

import os
import time
import uuid
from typing import Any, Dict, List, Optional

import magic
from django.conf import settings

from infrastructure.storage import StorageException, StorageInterface
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

DEFAULT_UPLOAD_PREFIX = "uploads/products"
MB = 1024 * 1024
SNIFF_BYTES = 2048


class ImageUploadService(BaseService):
    """
    Service for uploading images to object storage.

    Limits come from settings:
    - UPLOAD_MAX_FILES: files per request
    - UPLOAD_MAX_FILE_SIZE / UPLOAD_MAX_TOTAL_SIZE: bytes per file / per request
    - UPLOAD_ALLOWED_MIME_TYPES: accepted content types, checked against both the
      declared type and the type libmagic detects from the file header
    """

    def __init__(self, storage: Optional[StorageInterface] = None):
        """
        Initialize ImageUploadService.

        Args:
            storage: Storage abstraction (injected via DI container)
        """
        super().__init__()
        if storage is None:
            from infrastructure.container import container

            storage = container.storage()
        self.storage = storage

    @property
    def max_files(self) -> int:
        return settings.UPLOAD_MAX_FILES

    @property
    def max_file_size(self) -> int:
        return settings.UPLOAD_MAX_FILE_SIZE

    @property
    def max_total_size(self) -> int:
        return settings.UPLOAD_MAX_TOTAL_SIZE

    def validate_files(self, files: List) -> ServiceResult[None]:
        """Check count, type and size limits before anything is stored."""
        if not files:
            return service_err(ErrorCodes.VALIDATION_ERROR, "No files uploaded")

        if len(files) > self.max_files:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Maximum {self.max_files} files allowed per upload")

        allowed = {mime.lower() for mime in settings.UPLOAD_ALLOWED_MIME_TYPES}
        total = 0
        for upload in files:
            content_type = (getattr(upload, "content_type", "") or "").lower()
            if content_type not in allowed or self.detect_mime_type(upload) not in allowed:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Only image files are allowed")

            if upload.size > self.max_file_size:
                return service_err(
                    ErrorCodes.VALIDATION_ERROR,
                    f"File {upload.name} exceeds the {self.max_file_size // MB} MB limit",
                )
            total += upload.size

        if total > self.max_total_size:
            return service_err(
                ErrorCodes.VALIDATION_ERROR, f"Total upload size exceeds the {self.max_total_size // MB} MB limit"
            )

        return service_ok()

    @staticmethod
    def detect_mime_type(upload) -> str:
        """MIME type of the file content, read from its first bytes; the stream is rewound afterwards."""
        upload.seek(0)
        header = upload.read(SNIFF_BYTES)
        upload.seek(0)
        return magic.from_buffer(header, mime=True).lower()

    def build_object_key(self, filename: str) -> str:
        """``{prefix}/{epoch-ms}-{uuid}{ext}``; files without an extension get ``.bin``."""
        prefix = (getattr(settings, "AWS_S3_UPLOAD_PREFIX", "") or DEFAULT_UPLOAD_PREFIX).strip("/")
        extension = os.path.splitext(filename or "")[1] or ".bin"
        return f"{prefix}/{int(time.time() * 1000)}-{uuid.uuid4()}{extension}"

    @BaseService.log_performance
    def upload_images(self, files: List, fields: Optional[Dict[str, Any]] = None) -> ServiceResult[List[Dict]]:
        """
        Validate and store every file.

        Args:
            files: Uploaded files from the ``images`` multipart field
            fields: Other form fields, echoed back with each result

        Returns:
            ServiceResult with one ``{filename, path, mimetype, size, url, fields}`` dict per file
        """
        validation = self.validate_files(files)
        if not validation.ok:
            return validation

        uploaded = []
        for upload in files:
            key = self.build_object_key(upload.name)
            try:
                stored = self.storage.upload(upload, key, upload.content_type)
            except StorageException as e:
                self.logger.error(f"Image upload failed for {upload.name}: {e}", exc_info=True)
                return service_err(ErrorCodes.STORAGE_ERROR, "Failed to upload image to S3")

            uploaded.append(
                {
                    "filename": upload.name,
                    "path": stored.key,
                    "mimetype": upload.content_type,
                    "size": upload.size,
                    "url": stored.url,
                    "fields": fields or {},
                }
            )

        self.logger.info(f"Uploaded {len(uploaded)} images to bucket {self.storage.bucket_name}")
        return service_ok(uploaded)
