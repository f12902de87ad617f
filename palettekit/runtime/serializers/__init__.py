# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Serializers for palette delivery.

Each serializer formats engine output for one consumer. All serializers
preserve values exactly -- no re-scoring or rounding of stored numbers.
"""

from palettekit.runtime.serializers.base import SerializerFormat, format_contrast_ratio
from palettekit.runtime.serializers.payload import to_palette_payload
from palettekit.runtime.serializers.summary import to_accessibility_summary

__all__ = [
    "SerializerFormat",
    "format_contrast_ratio",
    "to_palette_payload",
    "to_accessibility_summary",
]
