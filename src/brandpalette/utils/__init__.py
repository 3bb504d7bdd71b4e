"""Utility functions for the brand palette engine."""

from brandpalette.utils.masking import mask_key

__all__ = [
    "mask_key",
]
