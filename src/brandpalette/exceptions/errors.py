"""Exception classes for the brand palette engine."""

from typing import Optional


class PaletteEngineError(Exception):
    """Base class for all brand palette engine errors."""


class BrandInputError(PaletteEngineError, TypeError):
    """Raised when the generator receives something that is not brand input."""

    def __init__(self, received_type: str):
        self.received_type = received_type
        super().__init__(
            f"brand_input must be a BrandInput or a mapping, got {received_type}"
        )


class EmbeddingAPIError(PaletteEngineError):
    """Permanent failure from the embedding provider (never retried)."""


class RetryExhaustedError(PaletteEngineError):
    """Raised when transient embedding failures outlast the retry budget."""

    def __init__(self, attempts: int, last_error: Optional[Exception] = None):
        self.attempts = attempts
        self.last_error = last_error
        detail = f": {last_error}" if last_error else ""
        super().__init__(f"Embedding request failed after {attempts} attempts{detail}")


class EmbeddingCacheError(PaletteEngineError):
    """Raised when a trait embeddings cache file cannot be parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid embeddings cache at {path}: {reason}")
