# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palettekit -- Color science and accessibility engine for palette tools.

Converts between color representations, grades WCAG contrast, simulates
color vision deficiencies, scores palettes and extracts dominant colors
from decoded pixel buffers.

Quick start::

    from palettekit import Color, score_palette

    colors = [Color.from_hex("#1E3A8A"), Color.from_hex("#F59E0B")]
    score = score_palette(colors)
    score.overall_score     # Worst WCAGLevel across all checks
    score.to_json()         # Persistence shape
"""

from __future__ import annotations

__version__ = "1.0.0"

from palettekit.errors import InvalidFormat, OutOfRange, PaletteError
from palettekit.schema import (
    HSL,
    RGB,
    AccessibilityScore,
    Color,
    ColorBlindnessType,
    ColorCategory,
    ContrastRatio,
    ExtractedColor,
    ExtractedPalette,
    WCAGLevel,
)
from palettekit.measure import (
    ExtractionConfig,
    ScoringConfig,
    contrast_ratio,
    extract_colors,
    score_palette,
    simulate,
)

__all__ = [
    # Core API
    "score_palette",
    "extract_colors",
    "contrast_ratio",
    "simulate",
    "ScoringConfig",
    "ExtractionConfig",
    # Types (commonly needed)
    "Color",
    "RGB",
    "HSL",
    "WCAGLevel",
    "ColorCategory",
    "ColorBlindnessType",
    "ContrastRatio",
    "AccessibilityScore",
    "ExtractedColor",
    "ExtractedPalette",
    # Errors
    "PaletteError",
    "InvalidFormat",
    "OutOfRange",
    # Version
    "__version__",
]
