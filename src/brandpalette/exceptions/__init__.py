"""Custom exceptions for the brand palette engine."""

from brandpalette.exceptions.errors import (
    PaletteEngineError,
    BrandInputError,
    EmbeddingAPIError,
    RetryExhaustedError,
    EmbeddingCacheError,
)

__all__ = [
    "PaletteEngineError",
    "BrandInputError",
    "EmbeddingAPIError",
    "RetryExhaustedError",
    "EmbeddingCacheError",
]
