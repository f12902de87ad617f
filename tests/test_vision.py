# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for color vision deficiency simulation."""

import numpy as np
import pytest

from palettekit.errors import InvalidFormat
from palettekit.schema import RGB, Color, ColorBlindnessType, ColorCategory
from palettekit.measure.vision import simulate, simulate_hex, simulate_pixels, simulate_rgb


ALL_TYPES = list(ColorBlindnessType)


class TestSimulate:

    def test_protanopia_red(self):
        assert simulate_rgb("#FF0000", ColorBlindnessType.PROTANOPIA) == RGB(145, 142, 0)

    def test_tritanopia_blue(self):
        assert simulate_rgb("#0000FF", ColorBlindnessType.TRITANOPIA) == RGB(0, 145, 134)

    def test_achromatopsia_red(self):
        assert simulate_hex("#FF0000", ColorBlindnessType.ACHROMATOPSIA) == "#4C4C4C"

    @pytest.mark.parametrize("hex_color", ["#FF0000", "#3941C8", "#00FF7F", "#123456"])
    def test_achromatopsia_is_gray(self, hex_color):
        r, g, b = simulate_rgb(hex_color, ColorBlindnessType.ACHROMATOPSIA)
        assert r == g == b

    @pytest.mark.parametrize("deficiency", ALL_TYPES)
    def test_black_and_white_fixed(self, deficiency):
        assert simulate_hex("#000000", deficiency) == "#000000"
        assert simulate_hex("#FFFFFF", deficiency) == "#FFFFFF"

    @pytest.mark.parametrize("deficiency", ALL_TYPES)
    def test_deterministic(self, deficiency):
        assert simulate("#3941C8", deficiency) == simulate("#3941C8", deficiency)

    def test_result_is_consistent_color(self):
        result = simulate("#3941C8", ColorBlindnessType.DEUTERANOPIA)
        assert isinstance(result, Color)
        assert Color.from_hex(result.hex).rgb == result.rgb

    def test_metadata_carried_over(self):
        source = Color.from_hex("#3941C8", name="Brand Blue", category=ColorCategory.ACCENT)
        result = simulate(source, ColorBlindnessType.PROTANOPIA)
        assert result.name == "Brand Blue"
        assert result.category is ColorCategory.ACCENT
        assert result.usage == source.usage


class TestSimulatePixels:

    def test_shape_preserved(self):
        pixels = np.zeros((4, 5, 3), dtype=np.uint8)
        out = simulate_pixels(pixels, ColorBlindnessType.TRITANOPIA)
        assert out.shape == (4, 5, 3)
        assert out.dtype == np.uint8

    @pytest.mark.parametrize("deficiency", ALL_TYPES)
    def test_matches_single_color(self, deficiency):
        pixels = np.array([[255, 0, 0], [57, 65, 200], [18, 52, 86]], dtype=np.uint8)
        out = simulate_pixels(pixels, deficiency)
        for row, expected in zip(out, pixels):
            assert tuple(int(v) for v in row) == tuple(simulate_rgb(tuple(expected), deficiency))

    def test_rejects_rgba(self):
        with pytest.raises(InvalidFormat):
            simulate_pixels(np.zeros((2, 2, 4), dtype=np.uint8), ColorBlindnessType.PROTANOPIA)


class TestColorBlindnessType:

    def test_closed_set(self):
        assert {t.value for t in ColorBlindnessType} == {
            "protanopia", "deuteranopia", "tritanopia", "achromatopsia",
        }

    def test_description(self):
        assert "Red-blind" in ColorBlindnessType.PROTANOPIA.description
