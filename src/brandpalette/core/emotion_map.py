"""Static lookup tables linking brand language to color.

Four read-only tables map traits, tones, industry categories and target
markets to the color data the normalizer and scorer consume. Hues are OKLCH
hue degrees. Lookups are case-insensitive.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class TraitColor:
    hues: Tuple[int, ...]
    families: Tuple[str, ...]
    warmth: float
    saturation: float


@dataclass(frozen=True)
class ToneModifier:
    lightness_shift: float
    contrast_boost: float


@dataclass(frozen=True)
class CategoryPrior:
    preferred_hues: Tuple[int, ...]
    avoid_hues: Tuple[int, ...]
    warmth_bias: float


@dataclass(frozen=True)
class MarketAdjustment:
    saturation_preference: float
    brightness_preference: float


def _trait(hues, families, warmth, saturation) -> TraitColor:
    return TraitColor(tuple(hues), tuple(families), warmth, saturation)


TRAIT_COLOR_MAP: Mapping[str, TraitColor] = MappingProxyType({
    # Trust & reliability
    "trustworthy": _trait([210, 220, 230], ["blue"], -0.2, 0.6),
    "reliable": _trait([210, 220], ["blue", "slate"], -0.1, 0.5),
    "professional": _trait([210, 225, 240], ["blue", "navy"], -0.2, 0.5),

    # Innovation & technology
    "innovative": _trait([190, 200, 280], ["cyan", "blue", "purple"], 0.0, 0.7),
    "modern": _trait([180, 190, 270], ["cyan", "purple"], 0.1, 0.7),
    "tech": _trait([195, 205, 215], ["blue", "cyan"], -0.1, 0.8),

    # Energy & power
    "energetic": _trait([0, 15, 30], ["red", "orange"], 0.8, 0.9),
    "powerful": _trait([355, 5, 15], ["red"], 0.6, 0.8),
    "bold": _trait([350, 0, 20], ["red", "orange"], 0.7, 0.9),

    # Growth & nature
    "growth": _trait([120, 140, 160], ["green", "teal"], 0.2, 0.6),
    "sustainable": _trait([110, 130, 150], ["green"], 0.3, 0.6),
    "natural": _trait([100, 120, 140], ["green", "earth"], 0.4, 0.5),

    # Creativity & optimism
    "creative": _trait([50, 280, 300], ["yellow", "purple", "magenta"], 0.5, 0.8),
    "optimistic": _trait([45, 55, 65], ["yellow", "orange"], 0.7, 0.8),
    "cheerful": _trait([40, 50, 60], ["yellow"], 0.8, 0.9),

    # Luxury & premium
    "premium": _trait([270, 280, 0], ["purple", "black", "gold"], 0.1, 0.6),
    "luxury": _trait([275, 285, 295], ["purple", "violet"], 0.0, 0.7),
    "sophisticated": _trait([260, 270, 280], ["purple", "navy"], -0.1, 0.5),

    # Approachable & friendly
    "approachable": _trait([35, 160, 190], ["orange", "teal", "cyan"], 0.4, 0.6),
    "friendly": _trait([30, 150, 180], ["orange", "teal"], 0.5, 0.7),
    "warm": _trait([20, 30, 40], ["orange", "coral"], 0.9, 0.7),

    # Calm & balance
    "calm": _trait([180, 200, 220], ["blue", "teal"], -0.2, 0.4),
    "balanced": _trait([140, 160, 180], ["teal", "green"], 0.0, 0.5),
    "peaceful": _trait([170, 190, 210], ["blue", "cyan"], -0.1, 0.4),
})

TONE_MODIFIERS: Mapping[str, ToneModifier] = MappingProxyType({
    "confident": ToneModifier(lightness_shift=-0.05, contrast_boost=0.15),
    "gentle": ToneModifier(lightness_shift=0.10, contrast_boost=-0.10),
    "playful": ToneModifier(lightness_shift=0.05, contrast_boost=0.10),
    "serious": ToneModifier(lightness_shift=-0.10, contrast_boost=-0.05),
    "friendly": ToneModifier(lightness_shift=0.08, contrast_boost=0.05),
    "authoritative": ToneModifier(lightness_shift=-0.12, contrast_boost=0.20),
})

# Keys are lowercase; display names such as "SaaS" resolve through lookup.
CATEGORY_PRIORS: Mapping[str, CategoryPrior] = MappingProxyType({
    "saas": CategoryPrior((200, 210, 220), (), -0.2),
    "fintech": CategoryPrior((210, 120), (0,), -0.3),
    "healthcare": CategoryPrior((200, 160), (120,), 0.0),
    "ecommerce": CategoryPrior((0, 30, 200), (), 0.2),
    "education": CategoryPrior((210, 120, 50), (), 0.1),
    "food": CategoryPrior((0, 30, 120), (210,), 0.5),
    "entertainment": CategoryPrior((280, 0, 50), (), 0.3),
})

MARKET_ADJUSTMENTS: Mapping[str, MarketAdjustment] = MappingProxyType({
    "US": MarketAdjustment(saturation_preference=0.7, brightness_preference=0.0),
    "EU": MarketAdjustment(saturation_preference=0.6, brightness_preference=-0.05),
    "AU": MarketAdjustment(saturation_preference=0.75, brightness_preference=0.05),
    "JP": MarketAdjustment(saturation_preference=0.5, brightness_preference=0.10),
    "CN": MarketAdjustment(saturation_preference=0.8, brightness_preference=0.0),
})

NEUTRAL_TONE = ToneModifier(lightness_shift=0.0, contrast_boost=0.0)
NEUTRAL_CATEGORY = CategoryPrior(preferred_hues=(), avoid_hues=(), warmth_bias=0.0)
# 0.7 saturation is the neutral baseline: an unknown market shifts nothing.
NEUTRAL_MARKET = MarketAdjustment(saturation_preference=0.7, brightness_preference=0.0)


def _key(value) -> str:
    return str(value or "").strip().lower()


def known_traits() -> List[str]:
    return list(TRAIT_COLOR_MAP.keys())


def is_known_trait(trait: str) -> bool:
    return _key(trait) in TRAIT_COLOR_MAP


def color_for_trait(trait: str) -> Optional[TraitColor]:
    """Color data for a trait, or None when the trait is not in the table.

    Callers use the None to decide whether to try fuzzy mapping.
    """
    return TRAIT_COLOR_MAP.get(_key(trait))


def traits_for_family(family: str) -> List[str]:
    """All known traits whose color families include ``family``."""
    family = _key(family)
    return [name for name, data in TRAIT_COLOR_MAP.items() if family in data.families]


def modifier_for_tone(tone: str) -> ToneModifier:
    return TONE_MODIFIERS.get(_key(tone), NEUTRAL_TONE)


def priors_for_category(category: Optional[str]) -> CategoryPrior:
    return CATEGORY_PRIORS.get(_key(category), NEUTRAL_CATEGORY)


def adjustments_for_market(market: str) -> MarketAdjustment:
    return MARKET_ADJUSTMENTS.get(_key(market).upper(), NEUTRAL_MARKET)
