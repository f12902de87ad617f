# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors, contrast checks and extraction results.

All types in this module are immutable (frozen dataclasses).
Once a score or palette is produced, it is a fact and cannot be altered.
"""

from palettekit.schema.color import (
    HSL,
    RGB,
    AccessibilityScore,
    Color,
    ColorAccessibility,
    ColorBlindnessType,
    ColorCategory,
    ColorLike,
    ContrastRatio,
    ExtractedColor,
    ExtractedPalette,
    WCAGLevel,
)

__all__ = [
    # Channel triplets
    "RGB",
    "HSL",
    # Enumerations
    "WCAGLevel",
    "ColorCategory",
    "ColorBlindnessType",
    # Core color type
    "Color",
    "ColorLike",
    "ColorAccessibility",
    # Accessibility scoring
    "ContrastRatio",
    "AccessibilityScore",
    # Image extraction
    "ExtractedColor",
    "ExtractedPalette",
]
