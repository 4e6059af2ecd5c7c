import os

# Mock SECRET_KEY for tests BEFORE importing settings to bypass validation
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

TESTING = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
INFRASTRUCTURE["EMAIL_BACKEND_TYPE"] = "mock"  # noqa: F405

AWS_STORAGE_BUCKET_NAME = "test-bucket"
AWS_S3_REGION_NAME = "us-east-1"
AWS_S3_PUBLIC_URL = ""

LOGGING["root"]["level"] = "WARNING"  # noqa: F405

# Enable SessionAuthentication for tests to support client.force_login()
REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"] = [  # noqa: F405
    *REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"],  # noqa: F405
    "rest_framework.authentication.SessionAuthentication",
]
