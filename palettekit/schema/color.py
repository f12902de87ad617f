# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette schema: canonical value types for the color engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same value, byte for byte
- Consistent: hex, RGB and HSL of a Color are derived together, never lazily
- Serializable: to_dict() produces the persistence shape consumed by the
  serving and export layers (camelCase field names are part of that contract)

Hex strings are always uppercase "#RRGGBB".
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Integral, Real
from typing import Iterable, Iterator, Optional, Union

from palettekit.errors import InvalidFormat, OutOfRange


# =============================================================================
# Enumerations
# =============================================================================


class WCAGLevel(Enum):
    """
    WCAG 2.1 contrast grade.

    Ordered AAA > AA > FAIL. Comparisons use ``rank``.
    """
    AAA = "AAA"
    AA = "AA"
    FAIL = "FAIL"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    def meets(self, required: WCAGLevel) -> bool:
        """True if this grade is at least ``required`` (AAA implies AA)."""
        return self.rank >= required.rank

    @classmethod
    def worst(cls, levels: Iterable[WCAGLevel]) -> WCAGLevel:
        """Minimum grade of ``levels``. An empty set is vacuously AAA."""
        return min(levels, key=lambda level: level.rank, default=cls.AAA)


_LEVEL_RANK = {WCAGLevel.FAIL: 0, WCAGLevel.AA: 1, WCAGLevel.AAA: 2}


class ColorCategory(Enum):
    """Role of a color inside a palette."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    NEUTRAL = "neutral"


class ColorBlindnessType(Enum):
    """
    Closed set of simulated color vision deficiencies.

    Each member maps to exactly one transform in
    ``palettekit.measure.vision``.
    """
    PROTANOPIA = "protanopia"        # red-blind
    DEUTERANOPIA = "deuteranopia"    # green-blind
    TRITANOPIA = "tritanopia"        # blue-blind
    ACHROMATOPSIA = "achromatopsia"  # no color vision (grayscale)

    @property
    def description(self) -> str:
        """Readable label for reports."""
        return {
            ColorBlindnessType.PROTANOPIA: "Red-blind (Protanopia)",
            ColorBlindnessType.DEUTERANOPIA: "Green-blind (Deuteranopia)",
            ColorBlindnessType.TRITANOPIA: "Blue-blind (Tritanopia)",
            ColorBlindnessType.ACHROMATOPSIA: "Complete color blindness (Achromatopsia)",
        }[self]


# =============================================================================
# Channel Triplets
# =============================================================================


def _check_channel(name: str, value: object) -> int:
    """Validate a single 8-bit channel and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidFormat(f"Channel {name} must be a number, got {value!r}")
    if not isinstance(value, Integral):
        if not math.isfinite(value) or not float(value).is_integer():
            raise OutOfRange(f"Channel {name} must be an integer, got {value}")
    value = int(value)
    if not 0 <= value <= 255:
        raise OutOfRange(f"Channel {name} must be 0-255, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color as three 8-bit channels.

    Attributes:
        r, g, b: Integers in [0, 255]. Integral floats (e.g. ``12.0``) are
            accepted and stored as int; anything else raises.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate and normalize channels to int."""
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in HSL cylindrical form.

    Values derived from an RGB color are whole numbers. Synthesis inputs
    (e.g. a saturation scaled by 0.8) may be fractional.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percentage [0, 100]
        l: Lightness percentage [0, 100]
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        """Validate ranges."""
        for name in ("h", "s", "l"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidFormat(f"HSL {name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise OutOfRange(f"HSL {name} must be finite, got {value}")
        if not 0.0 <= self.h < 360.0:
            raise OutOfRange(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 100.0:
            raise OutOfRange(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.l <= 100.0:
            raise OutOfRange(f"Lightness must be 0-100, got {self.l}")

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.l))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorAccessibility:
    """
    Per-color accessibility summary.

    Attributes:
        contrast_with_white: WCAG contrast ratio against #FFFFFF
        contrast_with_black: WCAG contrast ratio against #000000
        wcag_level: Grade of the better of the two backgrounds
    """
    contrast_with_white: float
    contrast_with_black: float
    wcag_level: WCAGLevel

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "contrastWithWhite": self.contrast_with_white,
            "contrastWithBlack": self.contrast_with_black,
            "wcagLevel": self.wcag_level.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorAccessibility:
        """Deserialize from dictionary."""
        return cls(
            contrast_with_white=data["contrastWithWhite"],
            contrast_with_black=data["contrastWithBlack"],
            wcag_level=WCAGLevel(data["wcagLevel"]),
        )

    def agrees_with(self, other: ColorAccessibility) -> bool:
        """Same grade and ratios equal up to float noise."""
        return (
            self.wcag_level is other.wcag_level
            and math.isclose(self.contrast_with_white, other.contrast_with_white, rel_tol=1e-9)
            and math.isclose(self.contrast_with_black, other.contrast_with_black, rel_tol=1e-9)
        )


# Anything the engine accepts where a color is expected
ColorLike = Union["Color", RGB, "tuple[int, int, int]", str]


@dataclass(frozen=True, slots=True)
class Color:
    """
    A palette color with all of its representations and metadata.

    Always build through ``from_hex``, ``from_rgb``, ``from_hsl`` or
    ``coerce``: they derive every representation eagerly. HSL is always
    the canonical conversion of RGB, so hex/RGB/HSL never disagree.

    Attributes:
        hex: Uppercase "#RRGGBB"
        rgb: 8-bit channels
        hsl: Whole-number HSL derived from ``rgb``
        name: Human-readable name (derived when not supplied)
        category: Palette role
        usage: Free-text usage hint
        accessibility: Contrast against white/black and resulting grade
    """
    hex: str
    rgb: RGB
    hsl: HSL
    name: str
    category: ColorCategory
    usage: str
    accessibility: ColorAccessibility

    def __post_init__(self) -> None:
        """Reject color values whose representations disagree."""
        from palettekit.measure.colorspace import rgb_to_hex, rgb_to_hsl

        if rgb_to_hex(self.rgb) != self.hex:
            raise InvalidFormat(
                f"hex {self.hex!r} does not match rgb {tuple(self.rgb)}"
            )
        if rgb_to_hsl(self.rgb) != self.hsl:
            raise InvalidFormat(
                f"hsl {tuple(self.hsl)} does not match rgb {tuple(self.rgb)}"
            )

    # -- constructors ---------------------------------------------------------

    @classmethod
    def from_rgb(
        cls,
        rgb: Union[RGB, "tuple[int, int, int]"],
        *,
        name: Optional[str] = None,
        category: Optional[ColorCategory] = None,
        usage: Optional[str] = None,
    ) -> Color:
        """Build a color from RGB, deriving everything else."""
        from palettekit.measure.colorspace import as_rgb, rgb_to_hex, rgb_to_hsl
        from palettekit.measure.contrast import summarize_accessibility
        from palettekit.measure.naming import default_category, name_color, usage_for

        rgb = as_rgb(rgb)
        hsl = rgb_to_hsl(rgb)
        accessibility = summarize_accessibility(rgb)
        if category is None:
            category = default_category(hsl)
        return cls(
            hex=rgb_to_hex(rgb),
            rgb=rgb,
            hsl=hsl,
            name=name if name is not None else name_color(hsl),
            category=category,
            usage=usage if usage is not None else usage_for(category, accessibility),
            accessibility=accessibility,
        )

    @classmethod
    def from_hex(cls, hex_color: str, **metadata) -> Color:
        """Build a color from "#RRGGBB" / "RRGGBB" (case-insensitive)."""
        from palettekit.measure.colorspace import hex_to_rgb
        return cls.from_rgb(hex_to_rgb(hex_color), **metadata)

    @classmethod
    def from_hsl(cls, hsl: Union[HSL, "tuple[float, float, float]"], **metadata) -> Color:
        """
        Build a color from HSL.

        The stored ``hsl`` is re-derived from the rounded RGB, so it may
        differ from the input by the integer rounding of the round trip.
        """
        from palettekit.measure.colorspace import hsl_to_rgb
        return cls.from_rgb(hsl_to_rgb(hsl), **metadata)

    @classmethod
    def coerce(cls, value: ColorLike) -> Color:
        """Return ``value`` if it is already a Color, else build one."""
        if isinstance(value, Color):
            return value
        from palettekit.measure.colorspace import as_rgb
        return cls.from_rgb(as_rgb(value))

    def with_metadata(
        self,
        *,
        name: Optional[str] = None,
        category: Optional[ColorCategory] = None,
        usage: Optional[str] = None,
    ) -> Color:
        """Copy with new name/category/usage. Numeric fields are untouched."""
        from palettekit.measure.naming import usage_for

        changes: dict = {}
        if name is not None:
            changes["name"] = name
        if category is not None:
            changes["category"] = category
            if usage is None:
                changes["usage"] = usage_for(category, self.accessibility)
        if usage is not None:
            changes["usage"] = usage
        return replace(self, **changes) if changes else self

    # -- serialization --------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to the persistence shape."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "name": self.name,
            "category": self.category.value,
            "usage": self.usage,
            "accessibility": self.accessibility.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """
        Deserialize from dictionary.

        ``hex`` is authoritative: rgb, hsl and accessibility are re-derived
        from it. Any of them stored alongside that disagrees with ``hex``
        is rejected, so a stale or hand-edited blob cannot load.
        """
        color = cls.from_hex(
            data["hex"],
            name=data.get("name"),
            category=ColorCategory(data["category"]) if data.get("category") else None,
            usage=data.get("usage"),
        )
        stored_rgb = data.get("rgb")
        if stored_rgb is not None and RGB.from_dict(stored_rgb) != color.rgb:
            raise InvalidFormat(
                f"rgb {stored_rgb} does not match hex {data['hex']!r}"
            )
        stored_hsl = data.get("hsl")
        if stored_hsl is not None and HSL.from_dict(stored_hsl) != color.hsl:
            raise InvalidFormat(
                f"hsl {stored_hsl} does not match hex {data['hex']!r}"
            )
        stored_accessibility = data.get("accessibility")
        if stored_accessibility is not None and not color.accessibility.agrees_with(
            ColorAccessibility.from_dict(stored_accessibility)
        ):
            raise InvalidFormat(
                f"accessibility {stored_accessibility} does not match hex {data['hex']!r}"
            )
        return color

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> Color:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Contrast and Scoring
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastRatio:
    """
    WCAG contrast between two colors.

    Always derived from its two source colors via ``between``.

    Attributes:
        color1: Hex of the first color
        color2: Hex of the second color
        ratio: Contrast ratio in [1, 21]
        level: WCAG grade of ``ratio`` (normal text)
        is_text_readable: True if ``level`` meets AA
    """
    color1: str
    color2: str
    ratio: float
    level: WCAGLevel
    is_text_readable: bool

    @classmethod
    def between(cls, a: ColorLike, b: ColorLike) -> ContrastRatio:
        """Compute the contrast of ``a`` against ``b``."""
        from palettekit.measure.colorspace import as_rgb, rgb_to_hex
        from palettekit.measure.contrast import contrast_ratio, wcag_level

        rgb_a, rgb_b = as_rgb(a), as_rgb(b)
        ratio = contrast_ratio(rgb_a, rgb_b)
        level = wcag_level(ratio)
        return cls(
            color1=rgb_to_hex(rgb_a),
            color2=rgb_to_hex(rgb_b),
            ratio=ratio,
            level=level,
            is_text_readable=level.meets(WCAGLevel.AA),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "color1": self.color1,
            "color2": self.color2,
            "ratio": self.ratio,
            "level": self.level.value,
            "isTextReadable": self.is_text_readable,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ContrastRatio:
        """Deserialize from dictionary (recomputed from the two hex values)."""
        return cls.between(data["color1"], data["color2"])


@dataclass(frozen=True, slots=True)
class AccessibilityScore:
    """
    Aggregate accessibility result for a set of colors.

    Computed fresh from a color set by ``palettekit.measure.scoring``;
    never updated in place.

    Attributes:
        overall_score: Worst grade across ``contrast_ratios``
        contrast_ratios: Every evaluated check, in evaluation order
        color_blindness_compatible: No distinguishable pair collapses
            under any simulated deficiency
        recommendations: Human-readable advice, in evaluation order
        passed_checks: Checks graded AA or better
        total_checks: ``len(contrast_ratios)``
    """
    overall_score: WCAGLevel
    contrast_ratios: tuple[ContrastRatio, ...]
    color_blindness_compatible: bool
    recommendations: tuple[str, ...]
    passed_checks: int
    total_checks: int

    def __post_init__(self) -> None:
        """Validate check counts."""
        if self.total_checks != len(self.contrast_ratios):
            raise OutOfRange(
                f"total_checks ({self.total_checks}) must equal the number of "
                f"contrast ratios ({len(self.contrast_ratios)})"
            )
        if not 0 <= self.passed_checks <= self.total_checks:
            raise OutOfRange(
                f"passed_checks must be 0-{self.total_checks}, got {self.passed_checks}"
            )

    @property
    def failed_checks(self) -> int:
        return self.total_checks - self.passed_checks

    def to_dict(self) -> dict:
        """Serialize to the persistence shape."""
        return {
            "overallScore": self.overall_score.value,
            "contrastRatios": [cr.to_dict() for cr in self.contrast_ratios],
            "colorBlindnessCompatible": self.color_blindness_compatible,
            "recommendations": list(self.recommendations),
            "passedChecks": self.passed_checks,
            "totalChecks": self.total_checks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AccessibilityScore:
        """Deserialize from dictionary."""
        return cls(
            overall_score=WCAGLevel(data["overallScore"]),
            contrast_ratios=tuple(
                ContrastRatio.from_dict(cr) for cr in data["contrastRatios"]
            ),
            color_blindness_compatible=data["colorBlindnessCompatible"],
            recommendations=tuple(data["recommendations"]),
            passed_checks=data["passedChecks"],
            total_checks=data["totalChecks"],
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> AccessibilityScore:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Image Extraction Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ExtractedColor:
    """
    A color sampled from an image, with its pixel count.

    Attributes:
        color: The cluster color (frequency-weighted average of its members)
        frequency: Number of sampled pixels folded into this cluster
    """
    color: Color
    frequency: int

    def __post_init__(self) -> None:
        """Validate frequency."""
        if self.frequency < 0:
            raise OutOfRange(f"Frequency must be >= 0, got {self.frequency}")

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self) -> dict:
        """Serialize to the Color persistence shape plus ``frequency``."""
        return {**self.color.to_dict(), "frequency": self.frequency}

    @classmethod
    def from_dict(cls, data: dict) -> ExtractedColor:
        """Deserialize from dictionary, keeping name/category/usage."""
        return cls(color=Color.from_dict(data), frequency=data["frequency"])


@dataclass(frozen=True, slots=True)
class ExtractedPalette:
    """
    Result of dominant-color extraction.

    Attributes:
        dominant_colors: Clusters ordered by frequency (most frequent first)
        palette: Harmonic palette synthesized from the top dominant colors
        average_color: Frequency-weighted average of ``dominant_colors``;
            mid-gray with frequency 0 when nothing qualified
    """
    dominant_colors: tuple[ExtractedColor, ...]
    palette: tuple[Color, ...]
    average_color: ExtractedColor

    @property
    def is_empty(self) -> bool:
        """True when no pixel qualified for extraction."""
        return not self.dominant_colors

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "dominantColors": [ec.to_dict() for ec in self.dominant_colors],
            "palette": [c.to_dict() for c in self.palette],
            "averageColor": self.average_color.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ExtractedPalette:
        """Deserialize from dictionary."""
        return cls(
            dominant_colors=tuple(
                ExtractedColor.from_dict(ec) for ec in data["dominantColors"]
            ),
            palette=tuple(Color.from_dict(c) for c in data["palette"]),
            average_color=ExtractedColor.from_dict(data["averageColor"]),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
