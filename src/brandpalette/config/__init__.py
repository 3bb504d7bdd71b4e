"""Configuration module for the brand palette engine."""

from brandpalette.config.settings import (
    EMBEDDING_CONFIG,
    GENERATION_CONFIG,
    EmbeddingConfig,
    GenerationConfig,
)
from brandpalette.config.constants import (
    KEYRING_SERVICE_NAME,
    KEYRING_ACCOUNT_NAME,
    PREFERRED_ENV_VAR,
    PRIMARY_ENV_VAR,
    SIMILARITY_THRESHOLD,
    WCAG_AA_NORMAL,
    WCAG_AA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_AAA_LARGE,
    PALETTE_ROLES,
)

__all__ = [
    "EMBEDDING_CONFIG",
    "GENERATION_CONFIG",
    "EmbeddingConfig",
    "GenerationConfig",
    "KEYRING_SERVICE_NAME",
    "KEYRING_ACCOUNT_NAME",
    "PREFERRED_ENV_VAR",
    "PRIMARY_ENV_VAR",
    "SIMILARITY_THRESHOLD",
    "WCAG_AA_NORMAL",
    "WCAG_AA_LARGE",
    "WCAG_AAA_NORMAL",
    "WCAG_AAA_LARGE",
    "PALETTE_ROLES",
]
