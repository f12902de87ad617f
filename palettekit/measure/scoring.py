# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette accessibility scoring.

Builds every contrast check a palette needs, grades each against WCAG,
checks that colors stay distinguishable under simulated color vision
deficiencies, and turns failures into recommendations.

Check order (also the order of recommendations):
1. Each color (input order) against white, then against black
2. Every unordered pair of palette colors (i < j)

A check is skipped when both sides are the same color, or when the same
pair of colors was already checked. For N distinct colors that are
neither pure white nor pure black this is exactly C(N,2) + 2N checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import numpy as np

from palettekit.schema import (
    AccessibilityScore,
    Color,
    ColorBlindnessType,
    ColorLike,
    ContrastRatio,
    WCAGLevel,
)
from palettekit.measure.colorspace import as_rgb, rgb_to_hex, round_half_up
from palettekit.measure.contrast import (
    AA_THRESHOLD,
    AAA_THRESHOLD,
    BLACK,
    WHITE,
    contrast_ratio,
    relative_luminance,
    wcag_level,
)
from palettekit.measure.vision import simulate_rgb

logger = logging.getLogger(__name__)


NO_COLORS_RECOMMENDATION = "No colors to analyze."
COLOR_BLINDNESS_RECOMMENDATION = (
    "Some colors may be difficult to distinguish for users with color "
    "blindness. Consider increasing color differences."
)
ALL_CLEAR_RECOMMENDATION = (
    "Excellent! This palette meets accessibility standards and should "
    "work well for all users."
)

_BACKGROUND_NAMES = {WHITE: "white", BLACK: "black"}


@dataclass(frozen=True)
class ScoringConfig:
    """Configuration for palette scoring."""

    # RGB Euclidean distance below which two colors count as
    # indistinguishable (0-441 scale)
    distinguishability_threshold: float = 30.0

    # Deficiencies simulated for the compatibility check
    deficiencies: tuple[ColorBlindnessType, ...] = tuple(ColorBlindnessType)


# =============================================================================
# Check construction
# =============================================================================


def _comparisons(hexes: Sequence[str]) -> Iterator[tuple[str, str]]:
    """Yield (color1, color2) hex pairs in evaluation order, deduplicated."""
    seen: set[frozenset[str]] = set()

    def fresh(a: str, b: str) -> bool:
        key = frozenset((a, b))
        if a == b or key in seen:
            return False
        seen.add(key)
        return True

    for hex_color in hexes:
        for background in (WHITE, BLACK):
            if fresh(hex_color, background):
                yield hex_color, background

    for i in range(len(hexes)):
        for j in range(i + 1, len(hexes)):
            if fresh(hexes[i], hexes[j]):
                yield hexes[i], hexes[j]


def contrast_checks(colors: Sequence[ColorLike]) -> tuple[ContrastRatio, ...]:
    """All contrast checks for a palette, in evaluation order."""
    hexes = [rgb_to_hex(as_rgb(c)) for c in colors]
    return tuple(ContrastRatio.between(a, b) for a, b in _comparisons(hexes))


# =============================================================================
# Color blindness
# =============================================================================


def _rgb_distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sqrt(np.sum((a - b) ** 2)))


def is_color_blindness_compatible(
    colors: Sequence[ColorLike],
    config: Optional[ScoringConfig] = None,
) -> bool:
    """
    True if no distinguishable pair of colors collapses under simulation.

    A pair is distinguishable when its RGB distance is at least the
    threshold. The palette fails if, for any simulated deficiency, such
    a pair drops below the threshold. Identical or already-close pairs
    are never held against the palette.
    """
    cfg = config or ScoringConfig()
    threshold = cfg.distinguishability_threshold

    rgbs = [as_rgb(c) for c in colors]
    originals = [np.array(tuple(rgb), dtype=np.float64) for rgb in rgbs]
    pairs = [
        (i, j)
        for i in range(len(rgbs))
        for j in range(i + 1, len(rgbs))
        if _rgb_distance(originals[i], originals[j]) >= threshold
    ]
    if not pairs:
        return True

    for deficiency in cfg.deficiencies:
        simulated = [
            np.array(tuple(simulate_rgb(rgb, deficiency)), dtype=np.float64)
            for rgb in rgbs
        ]
        for i, j in pairs:
            distance = _rgb_distance(simulated[i], simulated[j])
            if distance < threshold:
                logger.debug(
                    "Colors %s and %s collapse under %s (distance %.1f)",
                    rgb_to_hex(rgbs[i]), rgb_to_hex(rgbs[j]),
                    deficiency.value, distance,
                )
                return False
    return True


# =============================================================================
# Recommendations
# =============================================================================


def _describe(hex_color: str) -> str:
    name = _BACKGROUND_NAMES.get(hex_color)
    return f"{hex_color} ({name})" if name else hex_color


def _failure_recommendation(check: ContrastRatio) -> str:
    return (
        f"{_describe(check.color1)} and {_describe(check.color2)} have "
        f"insufficient contrast ({check.ratio:.2f}:1). Adjust lightness to "
        f"reach at least {AA_THRESHOLD}:1."
    )


def _recommendations(
    checks: Sequence[ContrastRatio],
    compatible: bool,
) -> tuple[str, ...]:
    recommendations = [
        _failure_recommendation(check)
        for check in checks
        if check.level is WCAGLevel.FAIL
    ]
    if not compatible:
        recommendations.append(COLOR_BLINDNESS_RECOMMENDATION)
    if not recommendations:
        recommendations.append(ALL_CLEAR_RECOMMENDATION)
    return tuple(recommendations)


# =============================================================================
# Scoring
# =============================================================================


def score_palette(
    colors: Sequence[ColorLike],
    config: Optional[ScoringConfig] = None,
) -> AccessibilityScore:
    """
    Score a palette for accessibility.

    Args:
        colors: Palette colors (Color, RGB, triples or hex strings).
            Malformed values raise from the converter before scoring.
        config: Scoring settings (uses defaults if None)

    Returns:
        AccessibilityScore. The overall grade is the worst grade of any
        check. An empty palette yields zero checks, a compatible flag of
        True and a single "no colors" recommendation.
    """
    if not colors:
        return AccessibilityScore(
            overall_score=WCAGLevel.AAA,
            contrast_ratios=(),
            color_blindness_compatible=True,
            recommendations=(NO_COLORS_RECOMMENDATION,),
            passed_checks=0,
            total_checks=0,
        )

    checks = contrast_checks(colors)
    compatible = is_color_blindness_compatible(colors, config)
    passed = sum(1 for check in checks if check.level is not WCAGLevel.FAIL)

    score = AccessibilityScore(
        overall_score=WCAGLevel.worst(check.level for check in checks),
        contrast_ratios=checks,
        color_blindness_compatible=compatible,
        recommendations=_recommendations(checks, compatible),
        passed_checks=passed,
        total_checks=len(checks),
    )
    logger.debug(
        "Scored %d colors: %s (%d/%d checks passed, color blindness compatible=%s)",
        len(colors), score.overall_score.value, passed, len(checks), compatible,
    )
    return score


# =============================================================================
# Per-color analysis
# =============================================================================


@dataclass(frozen=True)
class ColorAnalysis:
    """Detailed accessibility analysis of a single color."""
    hex: str
    luminance: float
    contrast_with_white: float
    contrast_with_black: float
    level_on_white: WCAGLevel
    level_on_black: WCAGLevel
    recommendations: tuple[str, ...]


def analyze_color(color: ColorLike) -> ColorAnalysis:
    """Contrast of one color against white and black, with advice."""
    rgb = as_rgb(color)
    luminance = relative_luminance(rgb)
    with_white = contrast_ratio(rgb, WHITE)
    with_black = contrast_ratio(rgb, BLACK)
    on_white = wcag_level(with_white)
    on_black = wcag_level(with_black)

    recommendations: list[str] = []
    if on_white is WCAGLevel.FAIL and on_black is WCAGLevel.FAIL:
        recommendations.append(
            "This color has poor contrast with both white and black. "
            "Consider adjusting its lightness."
        )
    elif on_white is WCAGLevel.FAIL:
        recommendations.append(
            "This color has poor contrast with white backgrounds. "
            "Use with dark backgrounds instead."
        )
    elif on_black is WCAGLevel.FAIL:
        recommendations.append(
            "This color has poor contrast with black backgrounds. "
            "Use with light backgrounds instead."
        )

    if luminance > 0.9:
        recommendations.append(
            "This is a very bright color. Ensure sufficient contrast when used with text."
        )
    elif luminance < 0.1:
        recommendations.append(
            "This is a very dark color. Ensure sufficient contrast when used with text."
        )

    return ColorAnalysis(
        hex=rgb_to_hex(rgb),
        luminance=luminance,
        contrast_with_white=with_white,
        contrast_with_black=with_black,
        level_on_white=on_white,
        level_on_black=on_black,
        recommendations=tuple(recommendations),
    )


@dataclass(frozen=True)
class ColorAdjustment:
    """Lighter/darker variants proposed for a low-contrast color."""
    lighter: Color
    darker: Color
    adjustment_needed: bool


def _scale_rgb(color: Color, factor: float) -> Color:
    r, g, b = color.rgb
    return Color.from_rgb(tuple(
        min(255, round_half_up(channel * factor)) for channel in (r, g, b)
    ))


def suggest_adjustments(
    color: ColorLike,
    target: WCAGLevel = WCAGLevel.AA,
) -> ColorAdjustment:
    """
    Propose lighter (x1.3) and darker (x0.7) variants of a color.

    Only when the color reaches ``target`` on neither white nor black;
    otherwise both variants are the color itself.
    """
    source = Color.coerce(color)
    required = AAA_THRESHOLD if target is WCAGLevel.AAA else AA_THRESHOLD
    if (source.accessibility.contrast_with_white >= required
            or source.accessibility.contrast_with_black >= required):
        return ColorAdjustment(lighter=source, darker=source, adjustment_needed=False)
    return ColorAdjustment(
        lighter=_scale_rgb(source, 1.3),
        darker=_scale_rgb(source, 0.7),
        adjustment_needed=True,
    )
