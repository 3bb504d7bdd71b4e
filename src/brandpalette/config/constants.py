"""Centralized constants for the brand palette engine.

Numeric thresholds that define accessibility and trait matching live here
alongside the names used to locate credentials and the embeddings cache.
"""

# Key storage constants
KEYRING_SERVICE_NAME = "BrandPalette"
KEYRING_ACCOUNT_NAME = "gemini_api_key"

# Environment variable names (project-scoped key wins over the generic one)
PREFERRED_ENV_VAR = "BRANDPALETTE_GEMINI_API_KEY"
PRIMARY_ENV_VAR = "GEMINI_API_KEY"

# Embeddings cache location override
EMBEDDINGS_CACHE_ENV_VAR = "BRANDPALETTE_TRAIT_EMBEDDINGS"
EMBEDDINGS_CACHE_FILENAME = "trait_embeddings.json"

# Embedding provider
EMBEDDING_MODEL = "models/text-embedding-004"
EMBEDDING_TASK_TYPE = "semantic_similarity"

# Minimum cosine similarity for a fuzzy trait match
SIMILARITY_THRESHOLD = 0.75

# WCAG 2.1 contrast ratio requirements
WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5

# Contrast auto-correction search
CONTRAST_MAX_STEPS = 50
CONTRAST_STEP = 0.02
CONTRAST_MIN_LIGHTNESS = 0.01
CONTRAST_MAX_LIGHTNESS = 0.99

# Recommendation messages
REC_MISSING_ROLES = "Missing background or text colors"
REC_INCREASE_CONTRAST = "Consider increasing contrast for better readability"
REC_AA_NOT_AAA = "Meets AA but not AAA - consider adjusting for enhanced accessibility"

# Fixed 8-slot role schema, in palette order
PALETTE_ROLES = (
    "primary",
    "secondary",
    "accent",
    "background",
    "text",
    "neutral-light",
    "neutral-mid",
    "neutral-dark",
)

# Roles whose lightness is inverted for dark mode
DARK_MODE_INVERTED_ROLES = frozenset({"background", "neutral-light", "neutral-mid"})
DARK_MODE_TEXT_LIGHTNESS = 0.95

# Error classification patterns for the embedding retry loop
# These errors should NOT be retried (permanent failures)
NON_RETRYABLE_ERROR_PATTERNS = [
    "invalid api key",
    "api_key_invalid",
    "api key expired",
    "api key not valid",
    "permission denied",
    "quota exceeded",
    "invalid argument",
    "authentication",
    "unauthorized",
]

# These errors SHOULD be retried (transient failures)
RETRYABLE_ERROR_PATTERNS = [
    "timeout",
    "deadline exceeded",
    "service unavailable",
    "resource exhausted",
    "connection",
    "network",
    "temporarily unavailable",
]

# API key error patterns for centralized detection
API_KEY_ERROR_PATTERNS = [
    "api key expired",
    "api_key_invalid",
    "invalid api key",
    "api key not valid",
]
