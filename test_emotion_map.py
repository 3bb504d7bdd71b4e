import pytest

from brandpalette.core import emotion_map


def test_known_traits_cover_the_table() -> None:
    traits = emotion_map.known_traits()
    assert len(traits) == 24
    assert traits[0] == "trustworthy"
    assert "innovative" in traits


def test_trait_lookup_is_case_insensitive() -> None:
    data = emotion_map.color_for_trait("  Innovative ")
    assert data is not None
    assert data.hues == (190, 200, 280)
    assert data.families == ("cyan", "blue", "purple")
    assert data.warmth == 0.0
    assert data.saturation == 0.7
    assert emotion_map.is_known_trait("PREMIUM")


def test_unknown_trait_returns_none() -> None:
    assert emotion_map.color_for_trait("zesty") is None
    assert emotion_map.color_for_trait("") is None
    assert not emotion_map.is_known_trait("zesty")


def test_traits_for_family_keeps_table_order() -> None:
    assert emotion_map.traits_for_family("teal") == [
        "growth", "approachable", "friendly", "calm", "balanced",
    ]
    assert emotion_map.traits_for_family("Gold") == ["premium"]
    assert emotion_map.traits_for_family("chartreuse") == []


def test_unknown_tone_is_neutral() -> None:
    assert emotion_map.modifier_for_tone("Confident").contrast_boost == 0.15
    neutral = emotion_map.modifier_for_tone("sarcastic")
    assert neutral.contrast_boost == 0.0
    assert neutral.lightness_shift == 0.0


def test_category_priors_resolve_display_names() -> None:
    saas = emotion_map.priors_for_category("SaaS")
    assert saas.preferred_hues == (200, 210, 220)
    assert saas.warmth_bias == -0.2

    fintech = emotion_map.priors_for_category("fintech")
    assert fintech.avoid_hues == (0,)

    assert emotion_map.priors_for_category(None) == emotion_map.NEUTRAL_CATEGORY
    assert emotion_map.priors_for_category("aerospace") == emotion_map.NEUTRAL_CATEGORY


@pytest.mark.parametrize(
    "market, expected",
    [("US", 0.7), ("jp", 0.5), (" cn ", 0.8), ("BR", 0.7)],
)
def test_market_saturation_preference(market: str, expected: float) -> None:
    assert emotion_map.adjustments_for_market(market).saturation_preference == expected


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        emotion_map.TRAIT_COLOR_MAP["zesty"] = emotion_map.TRAIT_COLOR_MAP["warm"]
