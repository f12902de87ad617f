# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Dominant color extraction from raw pixel buffers.

Pipeline:
1. Sample every ``quality``-th pixel (row-major)
2. Drop transparent pixels, and near-white / near-black when enabled
3. Count exact colors, keeping discovery order
4. Fold perceptually close colors into clusters (red-mean distance)
5. Rank clusters by frequency and synthesize a harmonic palette

Image decoding is the caller's job: this module takes a decoded uint8
array, never a file.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import InvalidFormat, OutOfRange
from palettekit.schema import RGB, Color, ColorLike, ExtractedColor, ExtractedPalette
from palettekit.measure.colorspace import as_rgb, round_half_up
from palettekit.measure.harmony import harmonious_palette
from palettekit.measure.naming import categorize

logger = logging.getLogger(__name__)


# Returned as average_color when no pixel qualifies
EMPTY_AVERAGE = RGB(128, 128, 128)


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for dominant color extraction."""

    # Number of clusters kept as dominant colors
    max_colors: int = 8

    # Sampling stride in pixels (1 = every pixel)
    quality: int = 4
    max_quality: int = 64

    # Pixels with alpha below this are ignored
    alpha_threshold: int = 128

    # Near-white: every channel above white_threshold
    exclude_white: bool = True
    white_threshold: int = 240

    # Near-black: every channel below black_threshold
    exclude_black: bool = True
    black_threshold: int = 15

    # Red-mean distance below which a color joins an existing cluster
    merge_threshold: float = 25.0

    def __post_init__(self) -> None:
        """Validate ranges."""
        if not 1 <= self.quality <= self.max_quality:
            raise OutOfRange(
                f"quality must be 1-{self.max_quality}, got {self.quality}"
            )
        if self.max_colors < 1:
            raise OutOfRange(f"max_colors must be >= 1, got {self.max_colors}")
        if self.merge_threshold < 0:
            raise OutOfRange(
                f"merge_threshold must be >= 0, got {self.merge_threshold}"
            )


# =============================================================================
# Distance
# =============================================================================


def color_distance(a: ColorLike, b: ColorLike) -> float:
    """
    Red-mean weighted RGB distance.

    A cheap approximation of perceived difference: green differences
    weigh most, and the red/blue weights shift with the mean red level.
    Symmetric, zero for identical colors.
    """
    r1, g1, b1 = as_rgb(a)
    r2, g2, b2 = as_rgb(b)
    rmean = (r1 + r2) / 2
    dr, dg, db = r1 - r2, g1 - g2, b1 - b2
    return math.sqrt(
        (2 + rmean / 256) * dr * dr
        + 4 * dg * dg
        + (2 + (255 - rmean) / 256) * db * db
    )


# =============================================================================
# Pixel preparation
# =============================================================================


def _as_rgba(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """
    Flatten a pixel buffer to (N, 4) RGBA.

    Accepts (H, W, 4), (H, W, 3), (N, 4) or (N, 3) uint8 arrays. RGB input
    is treated as fully opaque.
    """
    if not isinstance(pixels, np.ndarray):
        raise InvalidFormat(
            f"Expected a numpy uint8 array, got {type(pixels).__name__}"
        )
    if pixels.dtype != np.uint8:
        raise InvalidFormat(f"Expected uint8 pixels, got dtype {pixels.dtype}")
    if pixels.ndim not in (2, 3) or pixels.shape[-1] not in (3, 4):
        raise InvalidFormat(
            f"Expected (H, W, 3|4) or (N, 3|4) array, got shape {pixels.shape}"
        )

    flat = pixels.reshape(-1, pixels.shape[-1])
    if flat.shape[1] == 3:
        alpha = np.full((flat.shape[0], 1), 255, dtype=np.uint8)
        flat = np.concatenate([flat, alpha], axis=1)
    return flat


def _qualifying_pixels(
    pixels: NDArray[np.uint8],
    config: ExtractionConfig,
) -> NDArray[np.uint8]:
    """Sample and filter, returning (M, 3) RGB in scan order."""
    sampled = _as_rgba(pixels)[::config.quality]
    rgb = sampled[:, :3]

    keep = sampled[:, 3] >= config.alpha_threshold
    if config.exclude_white:
        keep &= ~np.all(rgb > config.white_threshold, axis=1)
    if config.exclude_black:
        keep &= ~np.all(rgb < config.black_threshold, axis=1)
    return rgb[keep]


def _histogram(rgb: NDArray[np.uint8]) -> list[tuple[RGB, int]]:
    """Exact-color counts in discovery order."""
    if len(rgb) == 0:
        return []
    wide = rgb.astype(np.uint32)
    keys = (wide[:, 0] << 16) | (wide[:, 1] << 8) | wide[:, 2]
    unique, first_index, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.argsort(first_index, kind="stable")
    return [
        (RGB(int(key >> 16) & 0xFF, int(key >> 8) & 0xFF, int(key) & 0xFF), int(count))
        for key, count in zip(unique[order], counts[order])
    ]


# =============================================================================
# Clustering
# =============================================================================


class _Cluster:
    """Mutable accumulator used only while merging."""

    __slots__ = ("rgb", "frequency")

    def __init__(self, rgb: RGB, frequency: int):
        self.rgb = rgb
        self.frequency = frequency

    def absorb(self, rgb: RGB, frequency: int) -> None:
        """Fold a color in, weighting both sides by frequency."""
        total = self.frequency + frequency
        self.rgb = RGB(*(
            round_half_up((mine * self.frequency + theirs * frequency) / total)
            for mine, theirs in zip(self.rgb, rgb)
        ))
        self.frequency = total


def _merge(histogram: list[tuple[RGB, int]], threshold: float) -> list[_Cluster]:
    """Greedy merge: each color joins the first close-enough cluster."""
    clusters: list[_Cluster] = []
    for rgb, count in histogram:
        for cluster in clusters:
            if color_distance(cluster.rgb, rgb) < threshold:
                cluster.absorb(rgb, count)
                break
        else:
            clusters.append(_Cluster(rgb, count))
    return clusters


def _weighted_average(colors: list[ExtractedColor]) -> ExtractedColor:
    total = sum(ec.frequency for ec in colors)
    channels = np.array([tuple(ec.color.rgb) for ec in colors], dtype=np.float64)
    weights = np.array([ec.frequency for ec in colors], dtype=np.float64)
    mean = weights @ channels / total
    return ExtractedColor(
        color=Color.from_rgb(tuple(round_half_up(float(c)) for c in mean)),
        frequency=total,
    )


# =============================================================================
# Public API
# =============================================================================


def extract_colors(
    pixels: NDArray[np.uint8],
    config: Optional[ExtractionConfig] = None,
) -> ExtractedPalette:
    """
    Extract dominant colors and a harmonic palette from decoded pixels.

    Args:
        pixels: uint8 array of shape (H, W, 4) RGBA, (H, W, 3) RGB, or the
            flattened (N, 4) / (N, 3) forms
        config: Extraction settings (uses defaults if None)

    Returns:
        ExtractedPalette. If no pixel qualifies (fully transparent, or only
        near-white / near-black), dominant colors and palette are empty and
        average_color is mid-gray with frequency 0.

    Raises:
        InvalidFormat: If ``pixels`` is not a supported uint8 array
    """
    cfg = config or ExtractionConfig()

    rgb = _qualifying_pixels(pixels, cfg)
    histogram = _histogram(rgb)
    clusters = _merge(histogram, cfg.merge_threshold)
    logger.debug(
        "Sampled %d qualifying pixels, %d exact colors, %d clusters",
        len(rgb), len(histogram), len(clusters),
    )

    if not clusters:
        return ExtractedPalette(
            dominant_colors=(),
            palette=(),
            average_color=ExtractedColor(color=Color.from_rgb(EMPTY_AVERAGE), frequency=0),
        )

    # sorted() is stable, so equal frequencies keep discovery order
    ranked = sorted(clusters, key=lambda c: c.frequency, reverse=True)[:cfg.max_colors]
    total = len(ranked)
    dominant = []
    for index, cluster in enumerate(ranked):
        color = Color.from_rgb(cluster.rgb)
        color = color.with_metadata(category=categorize(index, total, color.hsl))
        dominant.append(ExtractedColor(color=color, frequency=cluster.frequency))

    return ExtractedPalette(
        dominant_colors=tuple(dominant),
        palette=harmonious_palette(dominant),
        average_color=_weighted_average(dominant),
    )
