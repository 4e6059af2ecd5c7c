"""Helpers for keeping personal data and secrets out of log lines."""

from typing import Any


def mask_value(value: Any) -> Any:
    """Mask an email address, token or code so it can be logged."""
    if not isinstance(value, str):
        return value
    if "@" in value:
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"
