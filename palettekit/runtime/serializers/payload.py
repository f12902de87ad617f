# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette payload serializer.

Formats a scored palette in the persistence shape shared with the
serving layer: a ``colors`` list next to its ``accessibilityScore``.
Values are passed through exactly as computed.
"""

from __future__ import annotations

from typing import Optional, Sequence

from palettekit.runtime.serializers.base import SerializerFormat, dump_json
from palettekit.schema import AccessibilityScore, Color


def to_palette_payload(
    colors: Sequence[Color],
    score: Optional[AccessibilityScore] = None,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a palette and its accessibility score as JSON.

    Args:
        colors: Palette colors, in display order.
        score: Score for ``colors``. Computed with default settings when
            omitted.
        format: JSON or JSON_PRETTY. NATURAL is not a payload format.

    Returns:
        JSON string.

    Example::

        {
          "colors": [{"hex": "#1E3A8A", "rgb": {...}, "name": "Deep Navy", ...}],
          "accessibilityScore": {"overallScore": "AA", "totalChecks": 2, ...}
        }
    """
    if format == SerializerFormat.NATURAL:
        raise ValueError("Palette payloads are JSON only; use to_accessibility_summary")

    if score is None:
        from palettekit.measure.scoring import score_palette
        score = score_palette(colors)

    data = {
        "colors": [color.to_dict() for color in colors],
        "accessibilityScore": score.to_dict(),
    }
    return dump_json(data, format)
