"""
brandpalette - Brand Color Palette Generation Engine

Turns qualitative brand descriptors (traits, tone, audiences, category,
markets, keywords) into ranked, WCAG-checked color palettes with OKLCH,
RGB, hex and CMYK values and light/dark variants.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from brandpalette.config.settings import EMBEDDING_CONFIG, GENERATION_CONFIG
from brandpalette.exceptions.errors import (
    PaletteEngineError,
    BrandInputError,
    EmbeddingAPIError,
    RetryExhaustedError,
)
from brandpalette.core.generator import Generator, generate, generate_best
from brandpalette.core.models import (
    BrandInput,
    DesignVector,
    GenerationOptions,
    GeneratorResult,
    Palette,
    PaletteColor,
    SinglePaletteResult,
)
from brandpalette.core.trait_mapper import TraitMapper

__all__ = [
    # Version
    "__version__",
    # Config
    "EMBEDDING_CONFIG",
    "GENERATION_CONFIG",
    # Exceptions
    "PaletteEngineError",
    "BrandInputError",
    "EmbeddingAPIError",
    "RetryExhaustedError",
    # Core
    "Generator",
    "generate",
    "generate_best",
    "TraitMapper",
    # Records
    "BrandInput",
    "DesignVector",
    "GenerationOptions",
    "GeneratorResult",
    "Palette",
    "PaletteColor",
    "SinglePaletteResult",
]
