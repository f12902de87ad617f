# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color science core for Palettekit.

Conversions, WCAG contrast, color vision simulation, palette scoring and
dominant color extraction. Every operation is pure and deterministic.
"""

from palettekit.measure.colorspace import (
    as_rgb,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rotate_hue,
)
from palettekit.measure.contrast import (
    best_text_color,
    contrast_ratio,
    is_text_readable,
    relative_luminance,
    wcag_level,
)
from palettekit.measure.vision import simulate, simulate_hex, simulate_pixels
from palettekit.measure.scoring import (
    ColorAdjustment,
    ColorAnalysis,
    ScoringConfig,
    analyze_color,
    is_color_blindness_compatible,
    score_palette,
    suggest_adjustments,
)
from palettekit.measure.harmony import HarmonyType, generate_harmony, harmonious_palette
from palettekit.measure.extract import ExtractionConfig, color_distance, extract_colors
from palettekit.measure.naming import build_palette, categorize, name_color

__all__ = [
    # Conversion
    "as_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "rotate_hue",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "is_text_readable",
    "best_text_color",
    # Simulation
    "simulate",
    "simulate_hex",
    "simulate_pixels",
    # Scoring
    "ScoringConfig",
    "score_palette",
    "is_color_blindness_compatible",
    "ColorAnalysis",
    "analyze_color",
    "ColorAdjustment",
    "suggest_adjustments",
    # Extraction and harmony
    "ExtractionConfig",
    "extract_colors",
    "color_distance",
    "HarmonyType",
    "harmonious_palette",
    "generate_harmony",
    # Naming
    "name_color",
    "categorize",
    "build_palette",
]
