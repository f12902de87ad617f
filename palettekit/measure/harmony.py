# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Harmonic palette synthesis by hue rotation in HSL space.

The synthesizer makes no accessibility judgment. Callers run the result
through ``palettekit.measure.scoring`` like any other palette.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence, Union

from palettekit.schema import HSL, Color, ColorLike, ExtractedColor
from palettekit.measure.colorspace import rotate_hue
from palettekit.measure.naming import categorize

logger = logging.getLogger(__name__)


# Dominant colors that seed a harmonious palette
HARMONY_SOURCES = 3
HARMONY_SIZE = 5

# Saturation scale for analogous neighbours
ANALOGOUS_SATURATION = 0.8


class HarmonyType(Enum):
    """Classic color-wheel harmonies."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    TETRADIC = "tetradic"


# Hue offsets (degrees) of the colors added after the base
_HUE_OFFSETS: dict[HarmonyType, tuple[int, ...]] = {
    HarmonyType.COMPLEMENTARY: (180,),
    HarmonyType.TRIADIC: (120, 240),
    HarmonyType.ANALOGOUS: (30, -30),
    HarmonyType.TETRADIC: (90, 180, 270),
}


def _rotated(hsl: HSL, degrees: float, saturation_scale: float = 1.0) -> HSL:
    return HSL(rotate_hue(hsl.h, degrees), hsl.s * saturation_scale, hsl.l)


def _monochromatic(hsl: HSL) -> tuple[HSL, ...]:
    return (
        HSL(hsl.h, hsl.s, max(10, hsl.l - 20)),
        HSL(hsl.h, hsl.s, min(90, hsl.l + 20)),
        HSL(hsl.h, max(10, hsl.s - 30), hsl.l),
    )


def _with_positions(colors: Sequence[Color]) -> tuple[Color, ...]:
    """Re-categorize colors by their position in the final palette."""
    total = len(colors)
    return tuple(
        color.with_metadata(category=categorize(index, total, color.hsl))
        for index, color in enumerate(colors)
    )


def harmonious_palette(
    dominant: Sequence[Union[ExtractedColor, Color]],
) -> tuple[Color, ...]:
    """
    Derive a small harmonious palette from dominant colors.

    For each of the first three sources: the color itself, its complement
    (+180), and two analogous colors (+30 and -30, saturation x0.8, same
    lightness). The sequence is cut to five colors.

    Args:
        dominant: Dominant colors, most important first

    Returns:
        Up to five Colors, categorized by position. Empty for empty input.
    """
    palette: list[Color] = []
    for source in dominant[:HARMONY_SOURCES]:
        color = source.color if isinstance(source, ExtractedColor) else source
        hsl = color.hsl
        palette.append(color)
        palette.append(Color.from_hsl(_rotated(hsl, 180)))
        palette.append(Color.from_hsl(_rotated(hsl, 30, ANALOGOUS_SATURATION)))
        palette.append(Color.from_hsl(_rotated(hsl, -30, ANALOGOUS_SATURATION)))

    result = _with_positions(palette[:HARMONY_SIZE])
    logger.debug(
        "Harmonious palette from %d sources: %s",
        min(len(dominant), HARMONY_SOURCES), [c.hex for c in result],
    )
    return result


def generate_harmony(base: ColorLike, harmony_type: HarmonyType) -> tuple[Color, ...]:
    """
    Build a harmony around one base color.

    Sizes: complementary 2, analogous 3, triadic 3, monochromatic 4,
    tetradic 4. The base always comes first.

    Example:
        >>> [c.hex for c in generate_harmony("#FF0000", HarmonyType.COMPLEMENTARY)]
        ['#FF0000', '#00FFFF']
    """
    base_color = Color.coerce(base)
    hsl = base_color.hsl

    if harmony_type is HarmonyType.MONOCHROMATIC:
        variants = _monochromatic(hsl)
    else:
        variants = tuple(_rotated(hsl, offset) for offset in _HUE_OFFSETS[harmony_type])

    colors = [base_color] + [Color.from_hsl(v) for v in variants]
    logger.debug(
        "%s harmony for %s: %s",
        harmony_type.value, base_color.hex, [c.hex for c in colors[1:]],
    )
    return _with_positions(colors)
