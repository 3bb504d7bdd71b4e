import pytest

from brandpalette.core.models import BrandInput, DesignVector, TraitMapping
from brandpalette.core.nlp_normalizer import NlpNormalizer, extract_descriptors
from brandpalette.core.trait_mapper import TraitMapper

SAMPLE_BRAND = BrandInput(
    brand_id="test-brand-001",
    traits=("innovative", "approachable", "premium"),
    tone=("confident", "friendly"),
    category="SaaS",
    markets=("US", "AU"),
    keywords=("automation", "reliability", "speed"),
)


def test_sample_brand_vector() -> None:
    normalized = NlpNormalizer(SAMPLE_BRAND).normalize()
    vector = normalized.design_vector

    assert vector.warmth == pytest.approx(0.295)
    assert vector.saturation == pytest.approx(0.5825)
    assert vector.contrast == pytest.approx(0.08)
    assert vector.boldness == pytest.approx(0.325)
    assert vector.modernity == pytest.approx(0.175)
    assert vector.playfulness == pytest.approx(0.0)
    assert normalized.descriptors == ("bold", "vibrant")


def test_sample_brand_hints_and_primary_traits() -> None:
    normalized = NlpNormalizer(SAMPLE_BRAND).normalize()

    assert normalized.primary_traits == ("innovative", "approachable", "premium")
    assert normalized.color_hints == (
        "cyan", "blue", "purple", "orange", "teal", "black", "gold",
    )
    assert normalized.mapped_traits == ()


def test_empty_input_gives_zero_vector() -> None:
    normalized = NlpNormalizer(BrandInput()).normalize()
    assert normalized.design_vector == DesignVector()
    assert normalized.descriptors == ()
    assert normalized.color_hints == ()


def test_axes_are_clamped() -> None:
    brand = BrandInput(keywords=("fun",) * 20, audiences=("developer",) * 10)
    vector = NlpNormalizer(brand).normalize().design_vector

    assert vector.playfulness == 1.0
    assert vector.modernity == 1.0
    for axis in DesignVector.AXES:
        assert -1.0 <= getattr(vector, axis) <= 1.0


def test_warm_traits_outrank_cool_traits_on_warmth() -> None:
    warm = NlpNormalizer(BrandInput(traits=("friendly", "warm"))).normalize().design_vector
    cool = NlpNormalizer(BrandInput(traits=("professional", "trustworthy"))).normalize().design_vector

    assert warm.warmth == pytest.approx(0.42)
    assert cool.warmth == pytest.approx(-0.12)
    assert warm.warmth > cool.warmth


def test_adding_a_warm_trait_never_lowers_warmth() -> None:
    base = BrandInput(traits=("calm",))
    warmer = BrandInput(traits=("calm", "energetic"))

    w_base = NlpNormalizer(base).normalize().design_vector.warmth
    w_warmer = NlpNormalizer(warmer).normalize().design_vector.warmth
    assert w_warmer >= w_base


def test_keywords_match_by_substring() -> None:
    brand = BrandInput(keywords=("Process Automation",))
    vector = NlpNormalizer(brand).normalize().design_vector
    assert vector.modernity == pytest.approx(0.1)
    assert vector.warmth == pytest.approx(-0.05)


def test_audiences_and_tones_nudge_axes() -> None:
    brand = BrandInput(tone=("Playful",), audiences=("enterprise", "consumer"))
    vector = NlpNormalizer(brand).normalize().design_vector

    # playful +0.5, enterprise -0.3, consumer +0.2
    assert vector.playfulness == pytest.approx(0.4)
    assert vector.contrast == pytest.approx(0.04)
    assert vector.warmth == pytest.approx(0.2)


def test_unknown_market_does_not_shift_saturation() -> None:
    vector = NlpNormalizer(BrandInput(markets=("BR",))).normalize().design_vector
    assert vector.saturation == 0.0


def test_unknown_traits_are_skipped_without_provider() -> None:
    normalized = NlpNormalizer(BrandInput(traits=("zesty",))).normalize()
    assert normalized.design_vector == DesignVector()
    assert normalized.primary_traits == ("zesty",)
    assert normalized.mapped_traits == ()


def test_unknown_trait_mapped_through_embeddings() -> None:
    cache = {"innovative": [1.0, 0.0], "warm": [0.0, 1.0]}
    mapper = TraitMapper(embed=lambda text: [0.95, 0.05], embeddings_cache=cache)

    normalized = NlpNormalizer(BrandInput(traits=("inventive",)), trait_mapper=mapper).normalize()

    assert normalized.mapped_traits == (TraitMapping(original="inventive", mapped="innovative"),)
    assert normalized.design_vector.saturation == pytest.approx(0.21)
    assert normalized.color_hints == ("cyan", "blue", "purple")


def test_extract_descriptors_thresholds() -> None:
    vector = DesignVector(warmth=-0.31, boldness=0.3, playfulness=-0.5, modernity=0.9, saturation=-0.4)
    assert extract_descriptors(vector) == ["cool", "serious", "modern", "muted"]
