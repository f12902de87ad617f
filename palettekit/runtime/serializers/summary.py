# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Accessibility summary serializer.

Renders an AccessibilityScore either as a short Markdown report for
people (and prompts) or as its JSON dictionary.
"""

from __future__ import annotations

from palettekit.runtime.serializers.base import (
    SerializerFormat,
    dump_json,
    format_contrast_ratio,
)
from palettekit.schema import AccessibilityScore, WCAGLevel


def to_accessibility_summary(
    score: AccessibilityScore,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    preamble: bool = True,
) -> str:
    """Serialize an AccessibilityScore for display.

    Args:
        score: The score to render.
        format: NATURAL (Markdown report), JSON or JSON_PRETTY.
        preamble: Include the report heading (NATURAL only).

    Returns:
        Report string.

    Example (NATURAL)::

        ## Palette Accessibility

        **Overall:** FAIL (1/2 checks passed)
        **Color blindness:** compatible

        **Failing pairs:**
        - #FFFF00 on #FFFFFF: 1.07:1

        **Recommendations:**
        1. #FFFF00 and #FFFFFF (white) have insufficient contrast ...
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(score, preamble)
    return dump_json(score.to_dict(), format)


def _to_natural(score: AccessibilityScore, preamble: bool) -> str:
    """Generate the Markdown report."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Palette Accessibility",
            "",
        ])

    lines.append(
        f"**Overall:** {score.overall_score.value} "
        f"({score.passed_checks}/{score.total_checks} checks passed)"
    )
    compatibility = "compatible" if score.color_blindness_compatible else "issues detected"
    lines.append(f"**Color blindness:** {compatibility}")
    lines.append("")

    failing = [cr for cr in score.contrast_ratios if cr.level is WCAGLevel.FAIL]
    if failing:
        lines.append("**Failing pairs:**")
        for cr in failing:
            lines.append(f"- {cr.color1} on {cr.color2}: {format_contrast_ratio(cr.ratio)}")
        lines.append("")

    lines.append("**Recommendations:**")
    for i, text in enumerate(score.recommendations, 1):
        lines.append(f"{i}. {text}")
    lines.append("")

    return "\n".join(lines)
