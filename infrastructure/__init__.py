"""
Infrastructure Package
======================

Abstraction layers for external collaborators.

Modules:
    - storage: object storage for uploaded images (S3 via django-storages)
    - email: mail transport (SMTP, mock)
    - container: lazily built service instances shared by views
"""
