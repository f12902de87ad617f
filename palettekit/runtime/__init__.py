# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Palettekit.

Serialization of scored palettes for the serving layer:

1. Palette payload -- persistence-shaped JSON of colors plus score
2. Accessibility summary -- Markdown report or JSON of a score

The delivery layer never modifies computed values.
"""

from palettekit.runtime.serializers import (
    SerializerFormat,
    format_contrast_ratio,
    to_accessibility_summary,
    to_palette_payload,
)

__all__ = [
    "to_palette_payload",
    "to_accessibility_summary",
    "format_contrast_ratio",
    "SerializerFormat",
]
