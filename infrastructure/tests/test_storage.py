"""
Storage Infrastructure Tests
=============================

Unit tests for the S3 storage adapter used by image uploads.
"""

from io import BytesIO
from unittest.mock import MagicMock, patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings

from infrastructure.storage import S3StorageAdapter, StorageException, StorageFactory, StorageFile, StorageInterface


class StorageInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            StorageInterface()


@override_settings(AWS_STORAGE_BUCKET_NAME="test-bucket", AWS_S3_REGION_NAME="ap-south-1", AWS_S3_PUBLIC_URL="")
class S3StorageAdapterTest(TestCase):
    def setUp(self):
        self.backend = MagicMock()
        self.adapter = S3StorageAdapter(storage=self.backend)

    def test_upload_returns_public_url(self):
        self.backend.save.return_value = "uploads/products/1-abc.jpg"
        upload = SimpleUploadedFile("abc.jpg", b"jpeg-bytes", content_type="image/jpeg")

        result = self.adapter.upload(upload, "uploads/products/1-abc.jpg", "image/jpeg")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "uploads/products/1-abc.jpg")
        self.assertEqual(
            result.url, "https://test-bucket.s3.ap-south-1.amazonaws.com/uploads/products/1-abc.jpg"
        )
        self.assertEqual(result.size, len(b"jpeg-bytes"))
        self.assertEqual(result.bucket, "test-bucket")
        self.backend.save.assert_called_once_with("uploads/products/1-abc.jpg", upload)

    def test_upload_reads_size_from_backend_when_unknown(self):
        self.backend.save.return_value = "key.png"
        self.backend.size.return_value = 42

        result = self.adapter.upload(BytesIO(b"x"), "key.png", "image/png")

        self.assertEqual(result.size, 42)

    def test_upload_failure_raises_storage_exception(self):
        self.backend.save.side_effect = RuntimeError("connection reset")

        with self.assertRaises(StorageException):
            self.adapter.upload(BytesIO(b"x"), "key.png", "image/png")

    @override_settings(AWS_S3_PUBLIC_URL="https://cdn.example.com/")
    def test_public_url_prefers_configured_base(self):
        adapter = S3StorageAdapter(storage=self.backend)
        self.assertEqual(adapter.public_url("/a/b.jpg"), "https://cdn.example.com/a/b.jpg")

    def test_bucket_name(self):
        self.assertEqual(self.adapter.bucket_name, "test-bucket")


class StorageFactoryTest(TestCase):
    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_factory_creates_s3_adapter(self, mock_storage):
        mock_storage.return_value = MagicMock()
        self.assertIsInstance(StorageFactory.create(), S3StorageAdapter)

    def test_unknown_backend_is_rejected(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("ftp")

    @override_settings(INFRASTRUCTURE={"EMAIL_BACKEND_TYPE": "mock", "STORAGE_BACKEND": "nfs"})
    def test_backend_read_from_settings(self):
        with self.assertRaises(ValueError):
            StorageFactory.create()
