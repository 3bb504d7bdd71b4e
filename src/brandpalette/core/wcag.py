"""WCAG 2.1 contrast checks and automatic lightness correction."""

import logging
from dataclasses import replace
from typing import List

from brandpalette.config.constants import (
    WCAG_AA_NORMAL,
    WCAG_AA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_AAA_LARGE,
    CONTRAST_MAX_STEPS,
    CONTRAST_STEP,
    CONTRAST_MIN_LIGHTNESS,
    CONTRAST_MAX_LIGHTNESS,
    REC_MISSING_ROLES,
    REC_INCREASE_CONTRAST,
    REC_AA_NOT_AAA,
)
from brandpalette.core.color_space import oklch_to_srgb
from brandpalette.core.models import AccessibilityReport, OklchColor, Palette, RgbColor

logger = logging.getLogger(__name__)


def _linearize(component: float) -> float:
    if component <= 0.03928:
        return component / 12.92
    return ((component + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """Relative luminance of an 8-bit sRGB color (0 = black, 1 = white)."""
    return (
        0.2126 * _linearize(r / 255.0)
        + 0.7152 * _linearize(g / 255.0)
        + 0.0722 * _linearize(b / 255.0)
    )


def contrast_ratio(color1: RgbColor, color2: RgbColor) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    l1 = relative_luminance(color1.r, color1.g, color1.b)
    l2 = relative_luminance(color2.r, color2.g, color2.b)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa_normal(color1: RgbColor, color2: RgbColor) -> bool:
    return contrast_ratio(color1, color2) >= WCAG_AA_NORMAL


def meets_aa_large(color1: RgbColor, color2: RgbColor) -> bool:
    return contrast_ratio(color1, color2) >= WCAG_AA_LARGE


def meets_aaa_normal(color1: RgbColor, color2: RgbColor) -> bool:
    return contrast_ratio(color1, color2) >= WCAG_AAA_NORMAL


def generate_recommendations(ratio: float) -> List[str]:
    if ratio >= WCAG_AAA_NORMAL:
        return []
    if ratio < WCAG_AA_NORMAL:
        return [REC_INCREASE_CONTRAST]
    return [REC_AA_NOT_AAA]


def evaluate_palette(palette: Palette) -> AccessibilityReport:
    """Evaluate the palette's background/text pair.

    A palette without both roles is reported invalid rather than raising.
    """
    background = palette.background_color
    text = palette.text_color

    if background is None or text is None:
        return AccessibilityReport(
            valid=False,
            contrast_ratio=0.0,
            wcag_aa_normal=False,
            wcag_aa_large=False,
            wcag_aaa_normal=False,
            wcag_aaa_large=False,
            recommendations=(REC_MISSING_ROLES,),
        )

    ratio = contrast_ratio(background.rgb, text.rgb)
    return AccessibilityReport(
        valid=ratio >= WCAG_AA_NORMAL,
        contrast_ratio=round(ratio, 2),
        wcag_aa_normal=ratio >= WCAG_AA_NORMAL,
        wcag_aa_large=ratio >= WCAG_AA_LARGE,
        wcag_aaa_normal=ratio >= WCAG_AAA_NORMAL,
        wcag_aaa_large=ratio >= WCAG_AAA_LARGE,
        recommendations=tuple(generate_recommendations(ratio)),
    )


def adjust_for_contrast(
    color: OklchColor, target_rgb: RgbColor, min_ratio: float = WCAG_AA_NORMAL
) -> OklchColor:
    """Walk ``color``'s lightness away from ``target_rgb`` until contrast is met.

    At most CONTRAST_MAX_STEPS steps of CONTRAST_STEP. Stops early once the
    lightness reaches either extreme; the result may then still fall short of
    ``min_ratio``.

    Returns:
        The adjusted OKLCH color (hue and chroma unchanged).
    """
    target_lum = relative_luminance(target_rgb.r, target_rgb.g, target_rgb.b)
    adjusted = color

    for step in range(CONTRAST_MAX_STEPS):
        rgb = oklch_to_srgb(adjusted.l, adjusted.c, adjusted.h)
        ratio = contrast_ratio(rgb, target_rgb)
        if ratio >= min_ratio:
            logger.debug("Contrast %.2f reached after %d steps", ratio, step)
            return adjusted

        if relative_luminance(rgb.r, rgb.g, rgb.b) > target_lum:
            adjusted = replace(adjusted, l=min(adjusted.l + CONTRAST_STEP, 1.0))
        else:
            adjusted = replace(adjusted, l=max(adjusted.l - CONTRAST_STEP, 0.0))

        if adjusted.l >= CONTRAST_MAX_LIGHTNESS or adjusted.l <= CONTRAST_MIN_LIGHTNESS:
            break

    logger.debug("Contrast adjustment saturated at L=%.3f", adjusted.l)
    return adjusted
