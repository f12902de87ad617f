# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex ↔ RGB (8-bit) ↔ HSL (degrees + percentages)

HSL follows the CSS max/min channel algorithm. Hue, saturation and
lightness are rounded half-up to whole numbers, so an RGB → HSL → RGB
round trip is exact on the primary and secondary axes and may drift by
a unit or two per channel elsewhere.

Malformed input raises InvalidFormat; out-of-range channels raise
OutOfRange. Nothing in this module clamps silently.
"""

from __future__ import annotations

import math
import re
from typing import Union

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import InvalidFormat
from palettekit.schema import HSL, RGB, Color, ColorLike


_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def is_valid_hex(value: object) -> bool:
    """True if ``value`` is a 6-digit hex color, optionally '#'-prefixed."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color string.

    Args:
        hex_color: "#3941C8", "3941c8", ... exactly 6 hex digits after an
            optional leading '#'

    Returns:
        RGB triplet

    Raises:
        InvalidFormat: For anything that is not exactly 6 hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidFormat(f"Hex color must be a string, got {type(hex_color).__name__}")
    m = _HEX_RE.fullmatch(hex_color)
    if m is None:
        raise InvalidFormat(f"Invalid hex color {hex_color!r}: expected 6 hex digits")
    digits = m.group(1)
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: Union[RGB, "tuple[int, int, int]"]) -> str:
    """
    Format an RGB triplet as uppercase "#RRGGBB".

    Raises:
        OutOfRange: If any channel is outside [0, 255]
    """
    r, g, b = as_rgb(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(rgb: Union[RGB, "tuple[int, int, int]"]) -> HSL:
    """
    Convert RGB to whole-number HSL.

    Achromatic colors (max == min) get hue and saturation of exactly 0.

    Returns:
        HSL with h in [0, 360), s and l in [0, 100]
    """
    rgb = as_rgb(rgb)
    r, g, b = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0

    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn
    lightness = (mx + mn) / 2.0

    if diff == 0:
        return HSL(h=0, s=0, l=round_half_up(lightness * 100))

    if lightness > 0.5:
        saturation = diff / (2.0 - mx - mn)
    else:
        saturation = diff / (mx + mn)

    if mx == r:
        hue = ((g - b) / diff + (6.0 if g < b else 0.0)) / 6.0
    elif mx == g:
        hue = ((b - r) / diff + 2.0) / 6.0
    else:
        hue = ((r - g) / diff + 4.0) / 6.0

    return HSL(
        h=round_half_up(hue * 360) % 360,
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise hue ramp used by the HSL → RGB inverse."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: Union[HSL, "tuple[float, float, float]"]) -> RGB:
    """
    Convert HSL back to 8-bit RGB.

    Fractional HSL input is allowed (e.g. a scaled saturation).
    """
    if not isinstance(hsl, HSL):
        hsl = HSL(*hsl)
    h = hsl.h / 360.0
    s = hsl.s / 100.0
    l = hsl.l / 100.0

    if s == 0:
        gray = round_half_up(l * 255)
        return RGB(gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGB(
        r=round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        g=round_half_up(_hue_to_channel(p, q, h) * 255),
        b=round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def hex_to_hsl(hex_color: str) -> HSL:
    """Convenience: hex → RGB → HSL."""
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: Union[HSL, "tuple[float, float, float]"]) -> str:
    """Convenience: HSL → RGB → hex."""
    return rgb_to_hex(hsl_to_rgb(hsl))


def rotate_hue(hue: float, degrees: float) -> float:
    """
    Rotate a hue angle, wrapping into [0, 360) in both directions.

    Python's floored modulo folds negative intermediates back into range,
    so 10 - 30 lands on 340, never on -20.
    """
    rotated = (hue + degrees) % 360
    # Float modulo of a tiny negative returns exactly 360.0
    if rotated >= 360:
        rotated = 0
    return rotated


# =============================================================================
# Coercion
# =============================================================================


def as_rgb(value: ColorLike) -> RGB:
    """
    Coerce any accepted color value to RGB.

    Accepts a Color, an RGB, a 3-sequence of channels, or a hex string.
    This is the single ingress point used by contrast and simulation.

    Raises:
        InvalidFormat: Malformed hex or an unsupported value type
        OutOfRange: Channel outside [0, 255]
    """
    if isinstance(value, RGB):
        return value
    if isinstance(value, Color):
        return value.rgb
    if isinstance(value, str):
        return hex_to_rgb(value)
    if isinstance(value, (tuple, list, np.ndarray)):
        if len(value) != 3:
            raise InvalidFormat(f"Expected 3 channels, got {len(value)}")
        return RGB(*value)
    raise InvalidFormat(f"Cannot interpret {type(value).__name__} as a color")


# =============================================================================
# sRGB gamma (vectorized)
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Decode gamma-encoded sRGB values [0,1] to linear light.

    Uses the WCAG 2.x piecewise curve:
    - For values <= 0.03928: value/12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of srgb_to_linear: encode linear light [0,1] back to sRGB."""
    linear = np.asarray(linear, dtype=np.float64)
    return np.where(
        linear <= 0.03928 / 12.92,
        linear * 12.92,
        1.055 * np.power(np.clip(linear, 0.0, None), 1 / 2.4) - 0.055,
    )


def rgb_to_array(rgb: ColorLike) -> NDArray[np.float64]:
    """Return a (3,) float array of channels scaled to [0, 1]."""
    r, g, b = as_rgb(rgb)
    return np.array([r, g, b], dtype=np.float64) / 255.0
