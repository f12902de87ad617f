# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Deterministic color naming, categorization and usage hints.

Names come from a small family table keyed by HSL windows, plus one
descriptive modifier ("Light", "Deep", "Muted", ...). No randomness:
the same HSL always gets the same name.
"""

from __future__ import annotations

import math
from typing import Sequence

from palettekit.schema import HSL, Color, ColorAccessibility, ColorCategory, ColorLike, WCAGLevel
from palettekit.measure.colorspace import as_rgb, rgb_to_hsl


# Below this saturation a color is treated as a neutral (gray/white/black)
NEUTRAL_SATURATION = 15

# family: (hue window, saturation window, lightness window, names)
# Hue windows with min > max wrap through 0.
_FAMILIES: dict[str, tuple[tuple[int, int], tuple[int, int], tuple[int, int], tuple[str, ...]]] = {
    "red": ((350, 10), (50, 100), (30, 70), ("Crimson", "Ruby", "Cherry", "Scarlet", "Burgundy")),
    "pink": ((330, 350), (30, 80), (60, 90), ("Rose", "Blush", "Coral", "Salmon", "Magenta")),
    "orange": ((10, 40), (50, 100), (40, 80), ("Tangerine", "Peach", "Apricot", "Amber", "Copper")),
    "yellow": ((40, 70), (50, 100), (50, 90), ("Gold", "Lemon", "Canary", "Honey", "Mustard")),
    "green": ((70, 150), (30, 100), (20, 80), ("Emerald", "Forest", "Mint", "Sage", "Olive")),
    "cyan": ((150, 200), (40, 100), (40, 80), ("Teal", "Turquoise", "Aqua", "Seafoam", "Jade")),
    "blue": ((200, 250), (40, 100), (30, 80), ("Navy", "Azure", "Cobalt", "Sapphire", "Steel")),
    "purple": ((250, 300), (40, 100), (30, 80), ("Violet", "Lavender", "Plum", "Indigo", "Amethyst")),
    "magenta": ((300, 330), (50, 100), (40, 80), ("Fuchsia", "Orchid", "Berry", "Wine", "Maroon")),
}

_NEUTRAL_NAMES: dict[str, tuple[str, ...]] = {
    "gray": ("Charcoal", "Silver", "Slate", "Ash", "Pearl"),
    "white": ("Ivory", "Cream", "Snow", "Pearl", "Alabaster"),
    "black": ("Ebony", "Onyx", "Charcoal", "Jet", "Obsidian"),
}

# Hue-only fallback when no family window matches (lower bound inclusive)
_HUE_FALLBACK: tuple[tuple[int, str], ...] = (
    (10, "orange"),
    (40, "yellow"),
    (70, "green"),
    (150, "cyan"),
    (200, "blue"),
    (250, "purple"),
    (300, "magenta"),
    (330, "pink"),
    (350, "red"),
)

_CATEGORY_USAGE = {
    ColorCategory.PRIMARY: "Main brand color, headers, primary buttons, key elements",
    ColorCategory.SECONDARY: "Supporting elements, secondary buttons, section backgrounds",
    ColorCategory.ACCENT: "Highlights, call-to-action elements, decorative accents, links",
    ColorCategory.NEUTRAL: "Backgrounds, borders, body text and other supporting surfaces",
}


def _in_window(value: float, window: tuple[int, int]) -> bool:
    lo, hi = window
    if lo <= hi:
        return lo <= value <= hi
    return value >= lo or value <= hi


def color_family(hsl: HSL) -> str:
    """
    Coarse color family for an HSL color.

    Returns one of: red, pink, orange, yellow, green, cyan, blue, purple,
    magenta, gray, white, black.
    """
    if hsl.s < NEUTRAL_SATURATION:
        if hsl.l > 90:
            return "white"
        if hsl.l < 15:
            return "black"
        return "gray"

    for family, (hue, sat, light, _) in _FAMILIES.items():
        if _in_window(hsl.h, hue) and _in_window(hsl.s, sat) and _in_window(hsl.l, light):
            return family

    family = "red"
    for lower, name in _HUE_FALLBACK:
        if hsl.h >= lower:
            family = name
    return family


def _names_for(family: str) -> tuple[str, ...]:
    if family in _NEUTRAL_NAMES:
        return _NEUTRAL_NAMES[family]
    return _FAMILIES[family][3]


def _base_name(names: tuple[str, ...], hsl: HSL) -> str:
    if hsl.s > 80 and hsl.l > 60:
        return names[1]
    if hsl.s < 30:
        return names[2]
    if hsl.l < 30:
        return names[3]
    return names[0]


def _modifier(hsl: HSL) -> str | None:
    if hsl.l > 80:
        return "Light"
    if hsl.l < 20:
        return "Dark"
    if hsl.l < 40:
        return "Deep"
    if hsl.s > 80:
        return "Vibrant"
    if hsl.s < 20:
        return "Muted"
    if hsl.s < 40:
        return "Soft"
    return None


def name_color(hsl: HSL) -> str:
    """
    Human-readable name for an HSL color, e.g. "Deep Navy" or "Scarlet".

    Example:
        >>> name_color(HSL(0, 100, 50))
        'Vibrant Crimson'
    """
    base = _base_name(_names_for(color_family(hsl)), hsl)
    modifier = _modifier(hsl)
    if modifier is None or modifier.lower() in base.lower():
        return base
    return f"{modifier} {base}"


def categorize(index: int, total: int, hsl: HSL) -> ColorCategory:
    """
    Palette role of the color at ``index`` in a palette of ``total`` colors.

    Low-saturation colors are neutrals regardless of position. Otherwise the
    first color is primary, the first half secondary, the rest accents.
    """
    if hsl.s < NEUTRAL_SATURATION:
        return ColorCategory.NEUTRAL
    if index == 0:
        return ColorCategory.PRIMARY
    if index < math.ceil(total / 2):
        return ColorCategory.SECONDARY
    return ColorCategory.ACCENT


def default_category(hsl: HSL) -> ColorCategory:
    """Category of a standalone color (neutral or primary)."""
    return categorize(0, 1, hsl)


def usage_for(category: ColorCategory, accessibility: ColorAccessibility) -> str:
    """Usage hint: the category's role plus what its contrast allows."""
    usage = _CATEGORY_USAGE[category]
    if accessibility.wcag_level is WCAGLevel.AAA:
        return f"{usage}, excellent for text on any background"
    if accessibility.wcag_level is WCAGLevel.AA:
        if accessibility.contrast_with_white >= 4.5:
            return f"{usage}, suitable for text on light backgrounds"
        return f"{usage}, suitable for text on dark backgrounds"
    return f"{usage}, best used for decorative elements only (insufficient text contrast)"


def build_palette(values: Sequence[ColorLike]) -> tuple[Color, ...]:
    """
    Turn raw color values into categorized Colors.

    Ingress helper for the serving layer: a generated list of hex strings
    or RGB triples is validated and converted once, here. Malformed values
    raise InvalidFormat / OutOfRange.
    """
    total = len(values)
    palette: list[Color] = []
    for index, value in enumerate(values):
        rgb = as_rgb(value)
        category = categorize(index, total, rgb_to_hsl(rgb))
        if isinstance(value, Color):
            palette.append(value.with_metadata(category=category))
        else:
            palette.append(Color.from_rgb(rgb, category=category))
    return tuple(palette)
