"""End-to-end palette generation pipeline."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any, List, Optional, Union

from brandpalette.core.constraints import ConstraintLayer
from brandpalette.core.models import (
    BrandInput,
    GenerationMetadata,
    GenerationOptions,
    GeneratorResult,
    NormalizedBrand,
    Palette,
    SinglePaletteResult,
)
from brandpalette.core.nlp_normalizer import NlpNormalizer
from brandpalette.core.palette_generator import PaletteGenerator
from brandpalette.core.trait_mapper import TraitMapper
from brandpalette.exceptions.errors import BrandInputError

logger = logging.getLogger(__name__)

OptionsLike = Union[GenerationOptions, Mapping, None]


def _coerce_input(brand_input: Any) -> BrandInput:
    if isinstance(brand_input, BrandInput):
        return brand_input
    if isinstance(brand_input, Mapping):
        return BrandInput.from_dict(brand_input)
    raise BrandInputError(type(brand_input).__name__)


def _coerce_options(options: OptionsLike) -> GenerationOptions:
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions.from_dict(options)


class Generator:
    """Runs normalize -> generate -> constrain -> variants for one brand.

    Each stage's output is the next stage's only structural input; the
    original BrandInput is passed alongside for category and market lookups.
    """

    def __init__(
        self,
        brand_input: Union[BrandInput, Mapping],
        options: OptionsLike = None,
        trait_mapper: Optional[TraitMapper] = None,
    ):
        """
        Args:
            brand_input: Brand descriptors, as a BrandInput or a plain mapping.
            options: GenerationOptions or a mapping with palette_count / include_dark_mode.
            trait_mapper: Resolver for unknown traits. Defaults to one with no
                embedding provider (unknown traits are skipped).

        Raises:
            BrandInputError: If brand_input is neither a BrandInput nor a mapping.
        """
        self.brand_input = _coerce_input(brand_input)
        self.options = _coerce_options(options)
        self.trait_mapper = trait_mapper or TraitMapper()

    def generate(self) -> GeneratorResult:
        """Execute the full pipeline.

        Returns:
            GeneratorResult with palettes sorted by score, best first.
        """
        normalized = NlpNormalizer(self.brand_input, trait_mapper=self.trait_mapper).normalize()

        candidates = PaletteGenerator(normalized).generate(count=self.options.palette_count)
        logger.debug("Generated %d candidate palettes", len(candidates))

        layer = ConstraintLayer(self.brand_input, normalized.design_vector)
        ranked = layer.apply(candidates)
        final = self._with_variants(layer, ranked)

        logger.info(
            "Generated %d palettes for brand %s (top score %s)",
            len(final), self.brand_input.brand_id, final[0].score if final else None
        )
        return GeneratorResult(
            brand_id=self.brand_input.brand_id,
            palettes=tuple(final),
            metadata=self._metadata(normalized),
        )

    def generate_best(self) -> SinglePaletteResult:
        """Run the pipeline and keep only the top-ranked palette."""
        result = self.generate()
        return SinglePaletteResult(
            brand_id=result.brand_id,
            palette=result.best_palette,
            metadata=result.metadata,
        )

    def _with_variants(self, layer: ConstraintLayer, palettes: List[Palette]) -> List[Palette]:
        if not self.options.include_dark_mode:
            return palettes
        return [replace(p, variants=layer.generate_mode_variations(p)) for p in palettes]

    def _metadata(self, normalized: NormalizedBrand) -> GenerationMetadata:
        return GenerationMetadata(
            input=self.brand_input,
            design_vector=normalized.design_vector,
            descriptors=normalized.descriptors,
            primary_traits=normalized.primary_traits,
            color_hints=normalized.color_hints,
            mapped_traits=normalized.mapped_traits,
            generated_at=datetime.now(),
        )


def generate(
    brand_input: Union[BrandInput, Mapping],
    options: OptionsLike = None,
    trait_mapper: Optional[TraitMapper] = None,
) -> GeneratorResult:
    """Generate ranked palettes for ``brand_input``."""
    return Generator(brand_input, options, trait_mapper).generate()


def generate_best(
    brand_input: Union[BrandInput, Mapping],
    options: OptionsLike = None,
    trait_mapper: Optional[TraitMapper] = None,
) -> SinglePaletteResult:
    """Generate palettes and return only the best one."""
    return Generator(brand_input, options, trait_mapper).generate_best()
