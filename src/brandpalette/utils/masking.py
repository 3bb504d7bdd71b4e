"""Masking of secrets before they reach log output."""

from typing import Optional


def mask_key(key: Optional[str]) -> str:
    """Mask an API key for safe logging.

    Keys longer than eight characters keep their first and last four.
    """
    if not key:
        return "<empty>"
    if len(key) <= 8:
        return "***"
    return f"{key[:4]}...{key[-4:]}"
