"""Turn brand descriptors into a numeric design vector."""

import logging
from typing import Dict, List, Optional

from brandpalette.core import emotion_map
from brandpalette.core.models import BrandInput, DesignVector, NormalizedBrand, TraitMapping
from brandpalette.core.trait_mapper import TraitMapper

logger = logging.getLogger(__name__)

TRAIT_WEIGHT = 0.3
TONE_CONTRAST_WEIGHT = 0.4
KEYWORD_WEIGHT = 0.25
CATEGORY_WARMTH_WEIGHT = 0.4
MARKET_SATURATION_WEIGHT = 0.5
MARKET_SATURATION_BASELINE = 0.7

# Substring in a keyword -> axis nudges (scaled by KEYWORD_WEIGHT)
KEYWORD_AXES = {
    "speed": {"modernity": 0.3, "boldness": 0.2},
    "automation": {"modernity": 0.4, "warmth": -0.2},
    "reliability": {"warmth": -0.1, "boldness": -0.1},
    "innovation": {"modernity": 0.5, "saturation": 0.3},
    "simplicity": {"contrast": -0.2, "saturation": -0.2},
    "power": {"boldness": 0.5, "contrast": 0.4},
    "elegance": {"contrast": 0.2, "saturation": -0.1},
    "fun": {"playfulness": 0.6, "saturation": 0.4},
}

TONE_AXES = {
    "playful": {"playfulness": 0.5},
    "serious": {"playfulness": -0.4},
    "authoritative": {"playfulness": -0.4},
    "friendly": {"warmth": 0.3},
    "confident": {"boldness": 0.3},
}

AUDIENCE_AXES = {
    "prosumer": {"playfulness": 0.2, "warmth": 0.2},
    "consumer": {"playfulness": 0.2, "warmth": 0.2},
    "enterprise": {"playfulness": -0.3, "modernity": 0.1},
    "b2b": {"playfulness": -0.3, "modernity": 0.1},
    "smb": {"warmth": 0.1},
    "developer": {"modernity": 0.4, "contrast": 0.2},
    "technical": {"modernity": 0.4, "contrast": 0.2},
}

# (axis, threshold sign, adjective)
DESCRIPTOR_RULES = (
    ("warmth", 1, "warm"),
    ("warmth", -1, "cool"),
    ("boldness", 1, "bold"),
    ("boldness", -1, "subtle"),
    ("playfulness", 1, "playful"),
    ("playfulness", -1, "serious"),
    ("modernity", 1, "modern"),
    ("saturation", 1, "vibrant"),
    ("saturation", -1, "muted"),
)
DESCRIPTOR_THRESHOLD = 0.3


class NlpNormalizer:
    """Accumulates each input field's contribution into a design vector.

    Steps run in a fixed order (traits, tones, audiences, keywords, category,
    markets) into a zero-initialized vector that is clamped once at the end.
    """

    def __init__(self, brand_input: BrandInput, trait_mapper: Optional[TraitMapper] = None):
        self.brand_input = brand_input
        self.trait_mapper = trait_mapper or TraitMapper()

    def normalize(self) -> NormalizedBrand:
        axes = {axis: 0.0 for axis in DesignVector.AXES}

        mapped = self._process_traits(axes)
        self._process_tones(axes)
        self._process_audiences(axes)
        self._process_keywords(axes)
        self._apply_category(axes)
        self._apply_markets(axes)

        vector = DesignVector(**axes).clamped()
        logger.debug("Design vector for brand %s: %s", self.brand_input.brand_id, vector)

        return NormalizedBrand(
            design_vector=vector,
            descriptors=tuple(extract_descriptors(vector)),
            primary_traits=tuple(self.brand_input.traits[:3]),
            color_hints=tuple(self._color_hints(mapped)),
            mapped_traits=tuple(mapped),
        )

    def _process_traits(self, axes: Dict[str, float]) -> List[TraitMapping]:
        mapped = []
        for trait in self.brand_input.traits:
            color_data = emotion_map.color_for_trait(trait)

            if color_data is None:
                known = self.trait_mapper.map_trait(trait)
                if known:
                    color_data = emotion_map.color_for_trait(known)
                    if color_data is not None:
                        mapped.append(TraitMapping(original=trait, mapped=known))

            if color_data is None:
                logger.debug("Trait '%s' has no color data, skipping", trait)
                continue

            axes["warmth"] += color_data.warmth * TRAIT_WEIGHT
            axes["saturation"] += color_data.saturation * TRAIT_WEIGHT
        return mapped

    def _process_tones(self, axes: Dict[str, float]) -> None:
        for tone in self.brand_input.tone:
            modifier = emotion_map.modifier_for_tone(tone)
            axes["contrast"] += modifier.contrast_boost * TONE_CONTRAST_WEIGHT
            _nudge(axes, TONE_AXES.get(tone.strip().lower(), {}))

    def _process_audiences(self, axes: Dict[str, float]) -> None:
        for audience in self.brand_input.audiences:
            _nudge(axes, AUDIENCE_AXES.get(audience.strip().lower(), {}))

    def _process_keywords(self, axes: Dict[str, float]) -> None:
        for keyword in self.brand_input.keywords:
            keyword_lower = keyword.lower()
            for key, adjustments in KEYWORD_AXES.items():
                if key in keyword_lower:
                    _nudge(axes, adjustments, scale=KEYWORD_WEIGHT)

    def _apply_category(self, axes: Dict[str, float]) -> None:
        if not self.brand_input.category:
            return
        priors = emotion_map.priors_for_category(self.brand_input.category)
        axes["warmth"] += priors.warmth_bias * CATEGORY_WARMTH_WEIGHT

    def _apply_markets(self, axes: Dict[str, float]) -> None:
        markets = self.brand_input.markets
        if not markets:
            return
        avg_sat = sum(
            emotion_map.adjustments_for_market(m).saturation_preference for m in markets
        ) / len(markets)
        axes["saturation"] += (avg_sat - MARKET_SATURATION_BASELINE) * MARKET_SATURATION_WEIGHT

    def _color_hints(self, mapped: List[TraitMapping]) -> List[str]:
        hints = []
        sources = list(self.brand_input.traits) + [m.mapped for m in mapped]
        for trait in sources:
            color_data = emotion_map.color_for_trait(trait)
            if color_data is not None:
                hints.extend(color_data.families)
        return list(dict.fromkeys(hints))


def _nudge(axes: Dict[str, float], adjustments: Dict[str, float], scale: float = 1.0) -> None:
    for axis, value in adjustments.items():
        axes[axis] += value * scale


def extract_descriptors(vector: DesignVector) -> List[str]:
    """Adjectives for every axis beyond the +/-0.3 threshold."""
    descriptors = []
    for axis, sign, adjective in DESCRIPTOR_RULES:
        if getattr(vector, axis) * sign > DESCRIPTOR_THRESHOLD:
            descriptors.append(adjective)
    return descriptors
