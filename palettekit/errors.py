# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Error types raised at the engine boundary.

Both subclass ValueError, so callers that only care about "bad value"
can keep catching ValueError.

Degenerate but well-formed inputs (no colors to score, no visible pixels
to extract) are NOT errors: they return documented neutral results.
"""

from __future__ import annotations


class PaletteError(ValueError):
    """Base class for all Palettekit input errors."""


class InvalidFormat(PaletteError):
    """Malformed input: a bad hex string, an unusable pixel buffer, etc."""


class OutOfRange(PaletteError):
    """A numeric channel, angle, ratio or parameter outside its valid domain."""
