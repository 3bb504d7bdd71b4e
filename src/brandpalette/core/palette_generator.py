"""Generate candidate palettes from a normalized brand using hue harmonies."""

import logging
from typing import Callable, Dict, List

from brandpalette.config.constants import PALETTE_ROLES
from brandpalette.config.settings import GENERATION_CONFIG
from brandpalette.core import emotion_map
from brandpalette.core.color_space import derive_palette_color
from brandpalette.core.models import NormalizedBrand, Palette, PaletteMetadata

logger = logging.getLogger(__name__)

HarmonyFn = Callable[[float], List[float]]

# Scheme order is the generation order.
HARMONY_SCHEMES: Dict[str, HarmonyFn] = {
    "analogous": lambda h: [h, (h + 30) % 360, (h - 30) % 360],
    "complementary": lambda h: [h, (h + 180) % 360],
    "triadic": lambda h: [h, (h + 120) % 360, (h + 240) % 360],
    "split_complementary": lambda h: [h, (h + 150) % 360, (h + 210) % 360],
    "tetradic": lambda h: [h, (h + 90) % 360, (h + 180) % 360, (h + 270) % 360],
    "monochromatic": lambda h: [h],
}

WARM_HUES = [30, 15, 45]
COOL_HUES = [210, 200, 220]
NEUTRAL_HUES = [180, 200, 280]
MAX_BASE_HUES = 3

# role -> (lightness, chroma) for the fixed neutral slots, all on hue 0
NEUTRAL_SLOTS = {
    "background": (0.95, 0.02),
    "text": (0.20, 0.01),
    "neutral-light": (0.85, 0.03),
    "neutral-mid": (0.50, 0.02),
    "neutral-dark": (0.30, 0.02),
}


class PaletteGenerator:
    """Builds 8-role palettes for every harmony scheme and dominant hue."""

    def __init__(self, normalized: NormalizedBrand):
        self.normalized = normalized
        self.design_vector = normalized.design_vector

    def generate(self, count: int = GENERATION_CONFIG.palette_count) -> List[Palette]:
        """Generate up to ``count`` candidates, scheme-major then hue-minor."""
        base_hues = self.dominant_hues()[:MAX_BASE_HUES]
        lightness = self.base_lightness()
        chroma = self.base_chroma()

        palettes = [
            self._build_palette(base_hue, scheme, harmony, lightness, chroma)
            for scheme, harmony in HARMONY_SCHEMES.items()
            for base_hue in base_hues
        ]
        logger.debug(
            "Built %d candidates from hues %s (L=%.3f, C=%.3f)",
            len(palettes), base_hues, lightness, chroma
        )
        return palettes[:max(count, 0)]

    def dominant_hues(self) -> List[float]:
        """Hues of the primary traits in order, or a triad picked by warmth."""
        hues = []
        for trait in self.normalized.primary_traits:
            color_data = emotion_map.color_for_trait(trait)
            if color_data is not None:
                hues.extend(color_data.hues)

        if not hues:
            warmth = self.design_vector.warmth
            if warmth > 0.3:
                hues = WARM_HUES
            elif warmth < -0.3:
                hues = COOL_HUES
            else:
                hues = NEUTRAL_HUES

        return [float(h) for h in dict.fromkeys(hues)]

    def base_lightness(self) -> float:
        lightness = 0.55
        lightness += self.design_vector.contrast * 0.1
        lightness -= self.design_vector.boldness * 0.05
        return max(0.3, min(0.7, lightness))

    def base_chroma(self) -> float:
        chroma = 0.15
        chroma += self.design_vector.saturation * 0.08
        chroma += self.design_vector.boldness * 0.05
        chroma += self.design_vector.playfulness * 0.03
        return max(0.05, min(0.3, chroma))

    def _build_palette(
        self, base_hue: float, scheme: str, harmony: HarmonyFn, lightness: float, chroma: float
    ) -> Palette:
        hues = harmony(base_hue)
        hue0 = hues[0]
        # Monochromatic: secondary stays on the base hue to keep 8 slots
        secondary_hue = hues[1] if len(hues) > 1 else hue0
        accent_hue = hues[2] if len(hues) > 2 else (hue0 + 180) % 360

        # role -> (lightness, chroma, hue)
        slots = {
            "primary": (lightness, chroma, hue0),
            "secondary": (lightness + 0.05, chroma * 0.8, secondary_hue),
            "accent": (lightness - 0.05, chroma * 1.1, accent_hue),
        }
        slots.update((role, (l, c, hue0)) for role, (l, c) in NEUTRAL_SLOTS.items())

        return Palette(
            scheme=scheme,
            base_hue=base_hue,
            colors=tuple(derive_palette_color(role, *slots[role]) for role in PALETTE_ROLES),
            metadata=PaletteMetadata(
                descriptors=self.normalized.descriptors,
                harmony_scheme=scheme,
                design_vector=self.design_vector,
            ),
        )
