"""Core palette generation pipeline."""

from brandpalette.core.constraints import ConstraintLayer
from brandpalette.core.generator import Generator, generate, generate_best
from brandpalette.core.nlp_normalizer import NlpNormalizer
from brandpalette.core.palette_generator import PaletteGenerator
from brandpalette.core.retry import is_retryable_error
from brandpalette.core.trait_mapper import TraitMapper, build_trait_embeddings

__all__ = [
    "ConstraintLayer",
    "Generator",
    "generate",
    "generate_best",
    "NlpNormalizer",
    "PaletteGenerator",
    "is_retryable_error",
    "TraitMapper",
    "build_trait_embeddings",
]
