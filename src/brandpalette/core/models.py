"""Typed records passed between the stages of a generation run.

Every record is a frozen dataclass. A stage never edits a record it received;
it builds a new one (``dataclasses.replace``) instead.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from brandpalette.config.settings import GENERATION_CONFIG


def _as_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a list-ish input field into a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    return tuple(str(v) for v in value if v is not None)


@dataclass(frozen=True)
class BrandInput:
    """Qualitative brand descriptors for one generation run."""

    brand_id: Any = None
    traits: Tuple[str, ...] = ()
    tone: Tuple[str, ...] = ()
    audiences: Tuple[str, ...] = ()
    category: Optional[str] = None
    markets: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandInput":
        """Create a BrandInput from a dictionary, defaulting missing fields.

        Args:
            data: Mapping with any of the BrandInput keys.

        Returns:
            A BrandInput with list fields converted to tuples.
        """
        category = data.get("category")
        return cls(
            brand_id=data.get("brand_id"),
            traits=_as_tuple(data.get("traits")),
            tone=_as_tuple(data.get("tone")),
            audiences=_as_tuple(data.get("audiences")),
            category=str(category) if category else None,
            markets=_as_tuple(data.get("markets")),
            keywords=_as_tuple(data.get("keywords")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_id": self.brand_id,
            "traits": list(self.traits),
            "tone": list(self.tone),
            "audiences": list(self.audiences),
            "category": self.category,
            "markets": list(self.markets),
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class DesignVector:
    """Six design axes, each in [-1.0, 1.0]."""

    warmth: float = 0.0       # -1 cool .. +1 warm
    boldness: float = 0.0     # -1 subtle .. +1 bold
    playfulness: float = 0.0  # -1 serious .. +1 playful
    modernity: float = 0.0    # -1 classic .. +1 modern
    contrast: float = 0.0     # -1 low .. +1 high
    saturation: float = 0.0   # -1 muted .. +1 vibrant

    AXES = ("warmth", "boldness", "playfulness", "modernity", "contrast", "saturation")

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "DesignVector":
        return cls(**{axis: float(data.get(axis) or 0.0) for axis in cls.AXES})

    def clamped(self) -> "DesignVector":
        """Return a copy with every axis clamped to [-1.0, 1.0]."""
        return DesignVector(
            **{axis: max(-1.0, min(1.0, getattr(self, axis))) for axis in self.AXES}
        )

    def to_dict(self) -> Dict[str, float]:
        return {axis: getattr(self, axis) for axis in self.AXES}


@dataclass(frozen=True)
class TraitMapping:
    """Audit record of a fuzzy trait resolution."""

    original: str
    mapped: str

    def to_dict(self) -> Dict[str, str]:
        return {"original": self.original, "mapped": self.mapped}


@dataclass(frozen=True)
class OklchColor:
    l: float
    c: float
    h: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "OklchColor":
        return cls(l=float(data["l"]), c=float(data["c"]), h=float(data["h"]))

    def to_dict(self) -> Dict[str, float]:
        return {"l": self.l, "c": self.c, "h": self.h}


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> "RgbColor":
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))

    def to_dict(self) -> Dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class CmykColor:
    c: int
    m: int
    y: int
    k: int

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> "CmykColor":
        return cls(c=int(data["c"]), m=int(data["m"]), y=int(data["y"]), k=int(data["k"]))

    def to_dict(self) -> Dict[str, int]:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}


@dataclass(frozen=True)
class PaletteColor:
    """One role slot of a palette in all four representations.

    Build instances with ``color_space.derive_palette_color`` so the
    representations stay consistent with each other.
    """

    role: str
    oklch: OklchColor
    rgb: RgbColor
    hex: str
    cmyk: CmykColor

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PaletteColor":
        """Rebuild a color from its ``to_dict`` form, trusting the stored values."""
        return cls(
            role=str(data["role"]),
            oklch=OklchColor.from_dict(data["oklch"]),
            rgb=RgbColor.from_dict(data["rgb"]),
            hex=str(data["hex"]).lower(),
            cmyk=CmykColor.from_dict(data["cmyk"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "oklch": self.oklch.to_dict(),
            "rgb": self.rgb.to_dict(),
            "hex": self.hex,
            "cmyk": self.cmyk.to_dict(),
        }


@dataclass(frozen=True)
class AccessibilityReport:
    """WCAG evaluation of a palette's background/text pair."""

    valid: bool
    contrast_ratio: float
    wcag_aa_normal: bool
    wcag_aa_large: bool
    wcag_aaa_normal: bool
    wcag_aaa_large: bool = False
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "contrast_ratio": self.contrast_ratio,
            "wcag_aa_normal": self.wcag_aa_normal,
            "wcag_aa_large": self.wcag_aa_large,
            "wcag_aaa_normal": self.wcag_aaa_normal,
            "wcag_aaa_large": self.wcag_aaa_large,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class PaletteMetadata:
    descriptors: Tuple[str, ...]
    harmony_scheme: str
    design_vector: DesignVector

    def to_dict(self) -> Dict[str, Any]:
        return {
            "descriptors": list(self.descriptors),
            "harmony_scheme": self.harmony_scheme,
            "design_vector": self.design_vector.to_dict(),
        }


@dataclass(frozen=True)
class Palette:
    """A complete 8-role palette.

    ``score``, ``accessibility`` and ``variants`` are empty when the palette
    leaves the generator and are filled in by the constraint layer.
    """

    scheme: str
    base_hue: float
    colors: Tuple[PaletteColor, ...]
    metadata: PaletteMetadata
    score: Optional[float] = None
    accessibility: Optional[AccessibilityReport] = None
    variants: Optional["PaletteVariants"] = None

    def color_for(self, role: str) -> Optional[PaletteColor]:
        """Return the color assigned to ``role``, or None."""
        for color in self.colors:
            if color.role == role:
                return color
        return None

    @property
    def primary_color(self) -> Optional[PaletteColor]:
        return self.color_for("primary")

    @property
    def background_color(self) -> Optional[PaletteColor]:
        return self.color_for("background")

    @property
    def text_color(self) -> Optional[PaletteColor]:
        return self.color_for("text")

    @property
    def accessible(self) -> bool:
        return self.accessibility is not None and self.accessibility.valid is True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scheme": self.scheme,
            "base_hue": self.base_hue,
            "colors": [color.to_dict() for color in self.colors],
            "metadata": self.metadata.to_dict(),
            "score": self.score,
            "accessibility": self.accessibility.to_dict() if self.accessibility else None,
            "variants": self.variants.to_dict() if self.variants else None,
        }


@dataclass(frozen=True)
class PaletteVariants:
    light: Palette
    dark: Palette

    def to_dict(self) -> Dict[str, Any]:
        return {"light": self.light.to_dict(), "dark": self.dark.to_dict()}


@dataclass(frozen=True)
class NormalizedBrand:
    """Output of the normalizer: the design vector and derived descriptors."""

    design_vector: DesignVector
    descriptors: Tuple[str, ...] = ()
    primary_traits: Tuple[str, ...] = ()
    color_hints: Tuple[str, ...] = ()
    mapped_traits: Tuple[TraitMapping, ...] = ()


@dataclass(frozen=True)
class GenerationOptions:
    palette_count: int = GENERATION_CONFIG.palette_count
    include_dark_mode: bool = GENERATION_CONFIG.include_dark_mode

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GenerationOptions":
        """Build options; absent or null entries take the configured defaults."""
        data = data or {}
        count = data.get("palette_count")
        dark_mode = data.get("include_dark_mode")
        return cls(
            palette_count=GENERATION_CONFIG.palette_count if count is None else int(count),
            include_dark_mode=(
                GENERATION_CONFIG.include_dark_mode if dark_mode is None else bool(dark_mode)
            ),
        )


@dataclass(frozen=True)
class GenerationMetadata:
    input: BrandInput
    design_vector: DesignVector
    descriptors: Tuple[str, ...]
    primary_traits: Tuple[str, ...]
    color_hints: Tuple[str, ...]
    mapped_traits: Tuple[TraitMapping, ...]
    generated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input.to_dict(),
            "design_vector": self.design_vector.to_dict(),
            "descriptors": list(self.descriptors),
            "primary_traits": list(self.primary_traits),
            "color_hints": list(self.color_hints),
            "mapped_traits": [m.to_dict() for m in self.mapped_traits],
            "generated_at": self.generated_at.isoformat(),
        }


@dataclass(frozen=True)
class GeneratorResult:
    brand_id: Any
    palettes: Tuple[Palette, ...]
    metadata: GenerationMetadata

    @property
    def best_palette(self) -> Optional[Palette]:
        return self.palettes[0] if self.palettes else None

    @property
    def accessible_palettes(self) -> List[Palette]:
        return [p for p in self.palettes if p.accessible]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_id": self.brand_id,
            "palettes": [p.to_dict() for p in self.palettes],
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class SinglePaletteResult:
    brand_id: Any
    palette: Optional[Palette]
    metadata: GenerationMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_id": self.brand_id,
            "palette": self.palette.to_dict() if self.palette else None,
            "metadata": self.metadata.to_dict(),
        }
