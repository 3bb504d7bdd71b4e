import random
import re

import pytest

from brandpalette.core import color_space
from brandpalette.core.models import CmykColor, RgbColor


@pytest.mark.parametrize("hue", [0, 45, 90, 180, 270, 359.9])
def test_oklch_extremes_map_to_black_and_white(hue: float) -> None:
    assert color_space.oklch_to_srgb(0, 0, hue) == RgbColor(0, 0, 0)
    assert color_space.oklch_to_srgb(1, 0, hue) == RgbColor(255, 255, 255)


def test_srgb_round_trip_stays_within_two_per_channel() -> None:
    rng = random.Random(20240418)
    for _ in range(300):
        r, g, b = rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)
        oklch = color_space.srgb_to_oklch(r, g, b)
        back = color_space.oklch_to_srgb(oklch.l, oklch.c, oklch.h)
        assert abs(back.r - r) <= 2
        assert abs(back.g - g) <= 2
        assert abs(back.b - b) <= 2


def test_srgb_to_oklch_known_values() -> None:
    white = color_space.srgb_to_oklch(255, 255, 255)
    assert white.l == pytest.approx(1.0, abs=1e-3)
    assert white.c == pytest.approx(0.0, abs=1e-3)

    red = color_space.srgb_to_oklch(255, 0, 0)
    assert red.l == pytest.approx(0.628, abs=2e-3)
    assert red.c == pytest.approx(0.258, abs=2e-3)
    assert red.h == pytest.approx(29.2, abs=0.5)


def test_out_of_gamut_oklch_is_clamped_not_raised() -> None:
    rgb = color_space.oklch_to_srgb(0.9, 0.4, 140)
    for channel in (rgb.r, rgb.g, rgb.b):
        assert 0 <= channel <= 255


def test_hex_codec() -> None:
    assert color_space.rgb_to_hex(255, 128, 0) == "#ff8000"
    assert color_space.rgb_to_hex(300, -5, 15) == "#ff000f"
    assert color_space.hex_to_rgb("#FF8000") == RgbColor(255, 128, 0)
    assert color_space.hex_to_rgb("ff8000") == RgbColor(255, 128, 0)
    assert color_space.hex_to_rgb("#abc") == RgbColor(0xAA, 0xBB, 0xCC)


def test_hex_to_rgb_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        color_space.hex_to_rgb("#12345")


def test_rgb_to_cmyk() -> None:
    assert color_space.rgb_to_cmyk(0, 0, 0) == CmykColor(c=0, m=0, y=0, k=100)
    assert color_space.rgb_to_cmyk(255, 0, 0) == CmykColor(c=0, m=100, y=100, k=0)
    assert color_space.rgb_to_cmyk(255, 255, 255) == CmykColor(c=0, m=0, y=0, k=0)
    assert color_space.rgb_to_cmyk(0, 128, 255) == CmykColor(c=100, m=50, y=0, k=0)


def test_derive_palette_color_keeps_representations_consistent() -> None:
    color = color_space.derive_palette_color("primary", 0.6234, 0.1789, 400.04)

    assert color.role == "primary"
    assert color.oklch.l == 0.623
    assert color.oklch.c == 0.179
    assert color.oklch.h == 40.0
    assert color.rgb == color_space.oklch_to_srgb(color.oklch.l, color.oklch.c, color.oklch.h)
    assert color.hex == color_space.rgb_to_hex(color.rgb.r, color.rgb.g, color.rgb.b)
    assert color.cmyk == color_space.rgb_to_cmyk(color.rgb.r, color.rgb.g, color.rgb.b)
    assert re.fullmatch(r"#[0-9a-f]{6}", color.hex)


def test_derive_palette_color_clamps_inputs() -> None:
    color = color_space.derive_palette_color("text", 1.4, 0.9, -30)
    assert color.oklch.l == 1.0
    assert color.oklch.c == 0.4
    assert color.oklch.h == 330.0
