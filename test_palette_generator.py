import re

import pytest

from brandpalette.config.constants import PALETTE_ROLES
from brandpalette.core import color_space
from brandpalette.core.models import DesignVector, NormalizedBrand
from brandpalette.core.palette_generator import HARMONY_SCHEMES, PaletteGenerator

HEX_RE = re.compile(r"#[0-9a-f]{6}")


def _normalized(traits=(), **axes) -> NormalizedBrand:
    return NormalizedBrand(
        design_vector=DesignVector(**axes),
        descriptors=("bold",),
        primary_traits=tuple(traits),
    )


def test_every_palette_has_the_eight_roles_in_order() -> None:
    palettes = PaletteGenerator(_normalized(("innovative", "approachable"))).generate(count=18)

    assert len(palettes) == 18
    for palette in palettes:
        assert tuple(c.role for c in palette.colors) == PALETTE_ROLES


def test_role_order_comes_from_the_role_schema(monkeypatch: pytest.MonkeyPatch) -> None:
    reordered = tuple(reversed(PALETTE_ROLES))
    monkeypatch.setattr("brandpalette.core.palette_generator.PALETTE_ROLES", reordered)

    palette = PaletteGenerator(_normalized(("calm",))).generate(count=1)[0]

    assert tuple(c.role for c in palette.colors) == reordered


def test_colors_are_internally_consistent() -> None:
    palettes = PaletteGenerator(_normalized(("energetic",), saturation=0.6)).generate(count=18)

    for palette in palettes:
        for color in palette.colors:
            assert HEX_RE.fullmatch(color.hex)
            assert color.rgb == color_space.oklch_to_srgb(color.oklch.l, color.oklch.c, color.oklch.h)
            assert color.hex == color_space.rgb_to_hex(color.rgb.r, color.rgb.g, color.rgb.b)
            assert 0 <= color.oklch.l <= 1
            assert 0 <= color.oklch.c <= 0.4
            assert 0 <= color.oklch.h < 360


def test_generation_order_is_scheme_major() -> None:
    palettes = PaletteGenerator(_normalized(("innovative",))).generate(count=18)

    schemes = [p.scheme for p in palettes]
    assert schemes[:3] == ["analogous"] * 3
    assert schemes[3:6] == ["complementary"] * 3
    assert schemes[-1] == "monochromatic"
    assert [p.base_hue for p in palettes[:3]] == [190.0, 200.0, 280.0]
    assert set(schemes) == set(HARMONY_SCHEMES)


def test_count_limits_output() -> None:
    generator = PaletteGenerator(_normalized(("innovative",)))
    assert len(generator.generate(count=5)) == 5
    assert generator.generate(count=0) == []
    # Six schemes times three hues is the ceiling
    assert len(generator.generate(count=50)) == 18


def test_dominant_hues_deduplicate_in_order() -> None:
    generator = PaletteGenerator(_normalized(("innovative", "approachable", "premium")))
    assert generator.dominant_hues() == [190.0, 200.0, 280.0, 35.0, 160.0, 270.0, 0.0]


@pytest.mark.parametrize(
    "warmth, expected",
    [(0.5, [30.0, 15.0, 45.0]), (-0.5, [210.0, 200.0, 220.0]), (0.0, [180.0, 200.0, 280.0])],
)
def test_fallback_hues_follow_warmth(warmth: float, expected) -> None:
    generator = PaletteGenerator(_normalized(("zesty",), warmth=warmth))
    assert generator.dominant_hues() == expected


def test_harmony_hues() -> None:
    palettes = PaletteGenerator(_normalized(("calm",))).generate(count=18)
    complementary = next(p for p in palettes if p.scheme == "complementary")

    assert complementary.color_for("secondary").oklch.h == 0.0
    # Two-hue schemes put the accent opposite the base
    assert complementary.color_for("accent").oklch.h == 0.0

    triadic = next(p for p in palettes if p.scheme == "triadic")
    assert triadic.color_for("secondary").oklch.h == 300.0
    assert triadic.color_for("accent").oklch.h == 60.0


def test_monochromatic_keeps_secondary_on_base_hue() -> None:
    palettes = PaletteGenerator(_normalized(("calm",))).generate(count=18)
    mono = next(p for p in palettes if p.scheme == "monochromatic")

    assert mono.color_for("primary").oklch.h == 180.0
    assert mono.color_for("secondary").oklch.h == 180.0
    assert mono.color_for("accent").oklch.h == 0.0


def test_neutral_slots_are_fixed() -> None:
    palette = PaletteGenerator(_normalized(("calm",), boldness=1.0)).generate(count=1)[0]

    assert palette.color_for("background").oklch.l == 0.95
    assert palette.color_for("text").oklch.l == 0.2
    assert palette.color_for("neutral-light").oklch.l == 0.85
    assert palette.color_for("neutral-mid").oklch.l == 0.5
    assert palette.color_for("neutral-dark").oklch.l == 0.3
    assert palette.color_for("background").oklch.h == palette.color_for("primary").oklch.h


def test_base_lightness_and_chroma_are_bounded() -> None:
    loud = PaletteGenerator(_normalized(contrast=1.0, boldness=-1.0, saturation=1.0,
                                        playfulness=1.0))
    assert loud.base_lightness() == pytest.approx(0.7)
    assert loud.base_chroma() == pytest.approx(0.21)

    quiet = PaletteGenerator(_normalized(contrast=-1.0, boldness=1.0, saturation=-1.0,
                                         playfulness=-1.0))
    assert quiet.base_lightness() == pytest.approx(0.4)
    assert quiet.base_chroma() == pytest.approx(0.09)


def test_palette_metadata_carries_scheme_and_descriptors() -> None:
    palette = PaletteGenerator(_normalized(("calm",))).generate(count=1)[0]
    assert palette.metadata.harmony_scheme == palette.scheme == "analogous"
    assert palette.metadata.descriptors == ("bold",)
    assert palette.score is None
    assert palette.accessibility is None
