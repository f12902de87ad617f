# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

import json
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def dump_json(data: dict, format: SerializerFormat) -> str:
    """Render a payload as compact or pretty JSON."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def format_contrast_ratio(ratio: float) -> str:
    """Conventional contrast notation, e.g. ``4.50:1``."""
    return f"{ratio:.2f}:1"
