"""Color space conversions between OKLCH, sRGB, hex and CMYK.

OKLCH gives perceptually even steps for palette generation; sRGB, hex and
CMYK are the delivery formats. All functions are pure and clamp out-of-range
results instead of raising.
"""

import math

from brandpalette.core.models import CmykColor, OklchColor, PaletteColor, RgbColor

MAX_CHROMA = 0.4


def _clamp(value, low, high):
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def gamma_correct(linear: float) -> float:
    """Encode a linear-light channel with the sRGB transfer curve."""
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * (linear ** (1.0 / 2.4)) - 0.055


def inverse_gamma(srgb: float) -> float:
    """Decode an sRGB channel (0-1) to linear light."""
    if srgb <= 0.04045:
        return srgb / 12.92
    return ((srgb + 0.055) / 1.055) ** 2.4


def oklch_to_srgb(l: float, c: float, h: float) -> RgbColor:
    """Convert OKLCH to 8-bit sRGB.

    Args:
        l: Lightness (0-1).
        c: Chroma (0-0.4 typically).
        h: Hue angle in degrees.

    Returns:
        RgbColor with channels rounded and clamped to 0-255.
    """
    h_rad = math.radians(h)
    a = c * math.cos(h_rad)
    b = c * math.sin(h_rad)

    # OKLab -> LMS'
    l_ = l + 0.3963377774 * a + 0.2158037573 * b
    m_ = l - 0.1055613458 * a - 0.0638541728 * b
    s_ = l - 0.0894841775 * a - 1.2914855480 * b

    l_lin = l_ ** 3
    m_lin = m_ ** 3
    s_lin = s_ ** 3

    # LMS -> linear sRGB
    r_lin = 4.0767416621 * l_lin - 3.3077115913 * m_lin + 0.2309699292 * s_lin
    g_lin = -1.2684380046 * l_lin + 2.6097574011 * m_lin - 0.3413193965 * s_lin
    b_lin = -0.0041960863 * l_lin - 0.7034186147 * m_lin + 1.7076147010 * s_lin

    return RgbColor(
        r=_clamp(_round_half_up(gamma_correct(r_lin) * 255), 0, 255),
        g=_clamp(_round_half_up(gamma_correct(g_lin) * 255), 0, 255),
        b=_clamp(_round_half_up(gamma_correct(b_lin) * 255), 0, 255),
    )


def srgb_to_oklch(r: int, g: int, b: int) -> OklchColor:
    """Convert 8-bit sRGB to OKLCH (unrounded)."""
    r_lin = inverse_gamma(_clamp(r, 0, 255) / 255.0)
    g_lin = inverse_gamma(_clamp(g, 0, 255) / 255.0)
    b_lin = inverse_gamma(_clamp(b, 0, 255) / 255.0)

    # linear sRGB -> LMS
    lms_l = 0.4122214708 * r_lin + 0.5363325363 * g_lin + 0.0514459929 * b_lin
    lms_m = 0.2119034982 * r_lin + 0.6806995451 * g_lin + 0.1073969566 * b_lin
    lms_s = 0.0883024619 * r_lin + 0.2817188376 * g_lin + 0.6299787005 * b_lin

    l_ = max(lms_l, 0.0) ** (1.0 / 3.0)
    m_ = max(lms_m, 0.0) ** (1.0 / 3.0)
    s_ = max(lms_s, 0.0) ** (1.0 / 3.0)

    lab_l = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    lab_a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    lab_b = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.sqrt(lab_a ** 2 + lab_b ** 2)
    hue = math.degrees(math.atan2(lab_b, lab_a)) % 360

    return OklchColor(
        l=_clamp(lab_l, 0.0, 1.0),
        c=_clamp(chroma, 0.0, MAX_CHROMA),
        h=hue,
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB channels as a lowercase ``#rrggbb`` string."""
    return "#%02x%02x%02x" % (
        _clamp(int(r), 0, 255),
        _clamp(int(g), 0, 255),
        _clamp(int(b), 0, 255),
    )


def hex_to_rgb(hex_code: str) -> RgbColor:
    """Parse ``#rrggbb`` (or ``#rgb``), case-insensitive, with or without ``#``.

    Raises:
        ValueError: If the string is not hexadecimal.
    """
    digits = hex_code.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got {hex_code!r}")
    return RgbColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_cmyk(r: int, g: int, b: int) -> CmykColor:
    """Naive RGB to CMYK for print approximations (0-100 per channel)."""
    r_p = _clamp(r, 0, 255) / 255.0
    g_p = _clamp(g, 0, 255) / 255.0
    b_p = _clamp(b, 0, 255) / 255.0

    k = 1 - max(r_p, g_p, b_p)
    if k == 1:
        return CmykColor(c=0, m=0, y=0, k=100)

    return CmykColor(
        c=_clamp(_round_half_up((1 - r_p - k) / (1 - k) * 100), 0, 100),
        m=_clamp(_round_half_up((1 - g_p - k) / (1 - k) * 100), 0, 100),
        y=_clamp(_round_half_up((1 - b_p - k) / (1 - k) * 100), 0, 100),
        k=_clamp(_round_half_up(k * 100), 0, 100),
    )


def derive_palette_color(role: str, l: float, c: float, h: float) -> PaletteColor:
    """Build a PaletteColor whose rgb/hex/cmyk all derive from one OKLCH value.

    The OKLCH value is clamped and rounded (l, c to 3 places; h to 1) before
    anything is derived from it, so the stored fields always agree.
    """
    l = round(_clamp(l, 0.0, 1.0), 3)
    c = round(_clamp(c, 0.0, MAX_CHROMA), 3)
    h = round(h % 360, 1) % 360

    rgb = oklch_to_srgb(l, c, h)
    return PaletteColor(
        role=role,
        oklch=OklchColor(l=l, c=c, h=h),
        rgb=rgb,
        hex=rgb_to_hex(rgb.r, rgb.g, rgb.b),
        cmyk=rgb_to_cmyk(rgb.r, rgb.g, rgb.b),
    )
