from django.core.files.uploadedfile import SimpleUploadedFile

# Leading bytes libmagic recognises for each format
PNG_HEADER = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
)
JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
GIF_HEADER = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04"

HEADERS = {
    "image/png": PNG_HEADER,
    "image/jpeg": JPEG_HEADER,
    "image/gif": GIF_HEADER,
}


def image_file(name="photo.jpg", content_type="image/jpeg", size=128):
    """Upload whose bytes really are ``content_type`` (padded to ``size``)."""
    header = HEADERS.get(content_type, b"")
    body = header + b"\x00" * max(size - len(header), 0)
    return SimpleUploadedFile(name, body, content_type=content_type)


def disguised_file(name="evil.png", content_type="image/png"):
    """Shell script labelled as an image."""
    return SimpleUploadedFile(name, b"#!/bin/sh\nrm -rf /\n", content_type=content_type)
