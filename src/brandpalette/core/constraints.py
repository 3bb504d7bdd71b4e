"""Scoring, accessibility enforcement and light/dark variants for palettes.

Scores start at 100 and are adjusted by fixed category, cultural and
design-alignment rules, then floored at 0.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from brandpalette.config.constants import (
    WCAG_AA_NORMAL,
    DARK_MODE_INVERTED_ROLES,
    DARK_MODE_TEXT_LIGHTNESS,
)
from brandpalette.core import emotion_map, wcag
from brandpalette.core.color_space import derive_palette_color
from brandpalette.core.models import BrandInput, DesignVector, Palette, PaletteVariants

logger = logging.getLogger(__name__)

BASE_SCORE = 100.0
AVOID_HUE_PENALTY = 15.0
AVOID_HUE_RANGE = 30
PREFERRED_HUE_BONUS = 10.0
PREFERRED_HUE_RANGE = 40
ALIGNMENT_BONUS = 5.0


def hue_distance(h1: float, h2: float) -> float:
    """Shortest angular distance between two hues, in degrees."""
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def _cn_red_bonus(primary) -> float:
    # Red is auspicious in China
    return -5.0 if hue_distance(primary.oklch.h, 0) < 30 else 0.0


def _jp_chroma_penalty(primary) -> float:
    # Highly saturated colors read as loud in Japan
    return 5.0 if primary.oklch.c > 0.25 else 0.0


# Market code -> penalty rule on the primary color (negative is a bonus)
CULTURAL_RULES = {
    "CN": _cn_red_bonus,
    "JP": _jp_chroma_penalty,
}


class ConstraintLayer:
    """Applies brand constraints to generated candidates."""

    def __init__(self, brand_input: BrandInput, design_vector: Optional[DesignVector] = None):
        self.brand_input = brand_input
        self.design_vector = design_vector or DesignVector()

    def apply(self, palettes: Iterable[Palette]) -> List[Palette]:
        """Score and accessibility-check every palette, best score first."""
        scored = []
        for palette in palettes:
            palette = self.enforce_accessibility(palette)
            scored.append(replace(palette, score=self.calculate_palette_score(palette)))

        scored.sort(key=lambda p: p.score, reverse=True)
        return scored

    def calculate_palette_score(self, palette: Palette) -> float:
        score = BASE_SCORE
        score -= self.category_penalty(palette)
        score -= self.cultural_penalty(palette)
        score += self.design_alignment_bonus(palette)
        return max(score, 0.0)

    def category_penalty(self, palette: Palette) -> float:
        primary = palette.primary_color
        if not self.brand_input.category or primary is None:
            return 0.0

        priors = emotion_map.priors_for_category(self.brand_input.category)
        hue = primary.oklch.h

        penalty = sum(
            AVOID_HUE_PENALTY
            for avoid in priors.avoid_hues
            if hue_distance(hue, avoid) < AVOID_HUE_RANGE
        )
        if any(hue_distance(hue, pref) < PREFERRED_HUE_RANGE for pref in priors.preferred_hues):
            penalty -= PREFERRED_HUE_BONUS
        return penalty

    def cultural_penalty(self, palette: Palette) -> float:
        primary = palette.primary_color
        if primary is None:
            return 0.0

        penalty = 0.0
        for market in self.brand_input.markets:
            rule = CULTURAL_RULES.get(market.strip().upper())
            if rule:
                penalty += rule(primary)
        return penalty

    def design_alignment_bonus(self, palette: Palette) -> float:
        primary = palette.primary_color
        if primary is None:
            return 0.0

        bonus = 0.0
        chroma = primary.oklch.c
        saturation = self.design_vector.saturation
        if (saturation > 0.3 and chroma > 0.2) or (saturation < -0.3 and chroma < 0.15):
            bonus += ALIGNMENT_BONUS

        hue = primary.oklch.h
        warmth = self.design_vector.warmth
        if warmth > 0.3 and (hue < 60 or hue > 330):
            bonus += ALIGNMENT_BONUS
        elif warmth < -0.3 and 150 < hue < 270:
            bonus += ALIGNMENT_BONUS
        return bonus

    def enforce_accessibility(self, palette: Palette) -> Palette:
        """Attach an accessibility report, fixing the text color if it fails AA."""
        report = wcag.evaluate_palette(palette)
        if report.valid:
            return replace(palette, accessibility=report)

        background = palette.background_color
        text = palette.text_color
        if background is None or text is None:
            return replace(palette, accessibility=report)

        adjusted = wcag.adjust_for_contrast(text.oklch, background.rgb, min_ratio=WCAG_AA_NORMAL)
        fixed = derive_palette_color(text.role, adjusted.l, adjusted.c, adjusted.h)
        palette = replace(
            palette,
            colors=tuple(fixed if c.role == "text" else c for c in palette.colors),
        )
        report = wcag.evaluate_palette(palette)
        logger.debug(
            "Adjusted %s text color to %s (ratio %.2f, valid=%s)",
            palette.scheme, fixed.hex, report.contrast_ratio, report.valid
        )
        return replace(palette, accessibility=report)

    def generate_mode_variations(self, palette: Palette) -> PaletteVariants:
        light = replace(palette, variants=None)
        return PaletteVariants(light=light, dark=self.generate_dark_mode(light))

    def generate_dark_mode(self, palette: Palette) -> Palette:
        """Invert background/neutral lightness and force light text."""
        colors = []
        for color in palette.colors:
            oklch = color.oklch
            if color.role in DARK_MODE_INVERTED_ROLES:
                color = derive_palette_color(color.role, 1.0 - oklch.l, oklch.c, oklch.h)
            elif color.role == "text":
                color = derive_palette_color(color.role, DARK_MODE_TEXT_LIGHTNESS, oklch.c, oklch.h)
            colors.append(color)

        dark = replace(palette, colors=tuple(colors), variants=None)
        return replace(dark, accessibility=wcag.evaluate_palette(dark))
