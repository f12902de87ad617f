# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Each deficiency is a fixed 3x3 transform applied to gamma-encoded sRGB
in [0, 1]. The dichromat matrices zero out (or fold into the remaining
cones) the response of the missing cone type. Output is clamped to
[0, 1] and rounded to 8-bit; clamping here is saturation behavior,
not error handling.

Achromatopsia is a luminance-weighted desaturation (Rec. 601 weights),
computed once and replicated, so R == G == B holds exactly.

Matrices (rows = output R, G, B):

    protanopia      deuteranopia    tritanopia
    .567 .433 0     .625 .375 0     .95  .05  0
    .558 .442 0     .7   .3   0     0    .433 .567
    0    .242 .758  0    .3   .7    0    .475 .525
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import InvalidFormat
from palettekit.schema import RGB, Color, ColorBlindnessType, ColorLike
from palettekit.measure.colorspace import as_rgb, rgb_to_array, rgb_to_hex


_DICHROMAT_MATRICES: dict[ColorBlindnessType, NDArray[np.float64]] = {
    ColorBlindnessType.PROTANOPIA: np.array([
        [0.567, 0.433, 0.000],
        [0.558, 0.442, 0.000],
        [0.000, 0.242, 0.758],
    ], dtype=np.float64),
    ColorBlindnessType.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.000],
        [0.700, 0.300, 0.000],
        [0.000, 0.300, 0.700],
    ], dtype=np.float64),
    ColorBlindnessType.TRITANOPIA: np.array([
        [0.950, 0.050, 0.000],
        [0.000, 0.433, 0.567],
        [0.000, 0.475, 0.525],
    ], dtype=np.float64),
}

# Rec. 601 luma weights
_GRAY_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def _to_uint8(values: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Clamp [0, 1] floats and round half-up to 8-bit."""
    clipped = np.clip(values, 0.0, 1.0)
    return np.floor(clipped * 255.0 + 0.5).astype(np.uint8)


def _transform(srgb: NDArray[np.float64], deficiency: ColorBlindnessType) -> NDArray[np.float64]:
    """
    Apply the deficiency transform to (..., 3) sRGB floats in [0, 1].

    Returns unclamped floats of the same shape.
    """
    if deficiency is ColorBlindnessType.ACHROMATOPSIA:
        gray = np.einsum('...j,j->...', srgb, _GRAY_WEIGHTS)
        return np.repeat(gray[..., np.newaxis], 3, axis=-1)
    matrix = _DICHROMAT_MATRICES[deficiency]
    return np.einsum('...j,ij->...i', srgb, matrix)


def simulate_rgb(color: ColorLike, deficiency: ColorBlindnessType) -> RGB:
    """Simulated appearance of a color, as RGB."""
    out = _to_uint8(_transform(rgb_to_array(color), deficiency))
    return RGB(int(out[0]), int(out[1]), int(out[2]))


def simulate(color: ColorLike, deficiency: ColorBlindnessType) -> Color:
    """
    Approximate how ``color`` appears to a viewer with ``deficiency``.

    Pure and deterministic. The result is always a valid Color; its name,
    category and usage are carried over from the source color.

    Args:
        color: Any accepted color value
        deficiency: One of the four ColorBlindnessType members

    Returns:
        A freshly built Color for the simulated RGB
    """
    source = Color.coerce(color)
    return Color.from_rgb(
        simulate_rgb(source, deficiency),
        name=source.name,
        category=source.category,
        usage=source.usage,
    )


def simulate_hex(hex_color: str, deficiency: ColorBlindnessType) -> str:
    """Hex in, simulated hex out."""
    return rgb_to_hex(simulate_rgb(as_rgb(hex_color), deficiency))


def simulate_pixels(
    pixels: NDArray[np.uint8],
    deficiency: ColorBlindnessType,
) -> NDArray[np.uint8]:
    """
    Vectorized simulation over a pixel buffer.

    Args:
        pixels: uint8 array of shape (..., 3)
        deficiency: Deficiency to simulate

    Returns:
        uint8 array of the same shape

    Raises:
        InvalidFormat: If the last axis is not 3 channels
    """
    pixels = np.asarray(pixels)
    if pixels.ndim == 0 or pixels.shape[-1] != 3:
        raise InvalidFormat(f"Expected (..., 3) array, got shape {pixels.shape}")
    srgb = pixels.astype(np.float64) / 255.0
    return _to_uint8(_transform(srgb, deficiency))
