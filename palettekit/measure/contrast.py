# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
WCAG 2.1 relative luminance and contrast ratio.

Implements the calculations of Success Criterion 1.4.3 (Contrast, Minimum)
and 1.4.6 (Contrast, Enhanced). The thresholds are normative constants.
"""

from __future__ import annotations

import math

import numpy as np

from palettekit.errors import OutOfRange
from palettekit.schema import ColorAccessibility, ColorLike, WCAGLevel
from palettekit.measure.colorspace import rgb_to_array, srgb_to_linear


# Rec. 709 luminance coefficients over linearized channels
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Normal text
AAA_THRESHOLD = 7.0
AA_THRESHOLD = 4.5

# Large text (>= 18pt, or >= 14pt bold)
AAA_LARGE_THRESHOLD = 4.5
AA_LARGE_THRESHOLD = 3.0

MIN_RATIO = 1.0
MAX_RATIO = 21.0
_RATIO_TOLERANCE = 1e-9

WHITE = "#FFFFFF"
BLACK = "#000000"


def relative_luminance(color: ColorLike) -> float:
    """
    Relative luminance of an sRGB color.

    L = 0.2126*R + 0.7152*G + 0.0722*B over gamma-decoded channels.

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    linear = srgb_to_linear(rgb_to_array(color))
    return float(np.dot(LUMINANCE_WEIGHTS, linear))


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments. Returns 1.0 for identical colors and
    21.0 for black against white.
    """
    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float, large_text: bool = False) -> WCAGLevel:
    """
    Grade a contrast ratio.

    Normal text: >= 7.0 AAA, >= 4.5 AA, else FAIL.
    Large text: >= 4.5 AAA, >= 3.0 AA, else FAIL.

    Raises:
        OutOfRange: If ``ratio`` is NaN or outside [1, 21]
    """
    if math.isnan(ratio) or not (
        MIN_RATIO - _RATIO_TOLERANCE <= ratio <= MAX_RATIO + _RATIO_TOLERANCE
    ):
        raise OutOfRange(f"Contrast ratio must be 1-21, got {ratio}")

    aaa = AAA_LARGE_THRESHOLD if large_text else AAA_THRESHOLD
    aa = AA_LARGE_THRESHOLD if large_text else AA_THRESHOLD
    if ratio >= aaa:
        return WCAGLevel.AAA
    if ratio >= aa:
        return WCAGLevel.AA
    return WCAGLevel.FAIL


def is_text_readable(
    foreground: ColorLike,
    background: ColorLike,
    required: WCAGLevel = WCAGLevel.AA,
    large_text: bool = False,
) -> bool:
    """True if ``foreground`` on ``background`` meets ``required``."""
    level = wcag_level(contrast_ratio(foreground, background), large_text=large_text)
    return level.meets(required)


def best_text_color(background: ColorLike) -> str:
    """
    Pick black or white text for a background, whichever contrasts more.

    Ties go to black.
    """
    if contrast_ratio(WHITE, background) > contrast_ratio(BLACK, background):
        return WHITE
    return BLACK


def summarize_accessibility(color: ColorLike) -> ColorAccessibility:
    """
    Contrast of a color against white and black.

    The summary grade is that of the better background: a color only
    FAILs if it is unreadable on both.
    """
    with_white = contrast_ratio(color, WHITE)
    with_black = contrast_ratio(color, BLACK)
    return ColorAccessibility(
        contrast_with_white=with_white,
        contrast_with_black=with_black,
        wcag_level=wcag_level(max(with_white, with_black)),
    )
