# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for WCAG relative luminance, contrast ratio and grading."""

import math

import pytest

from palettekit.errors import OutOfRange
from palettekit.schema import Color, ContrastRatio, WCAGLevel
from palettekit.measure.contrast import (
    best_text_color,
    contrast_ratio,
    is_text_readable,
    relative_luminance,
    summarize_accessibility,
    wcag_level,
)


class TestRelativeLuminance:

    def test_black_is_zero(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)

    def test_white_is_one(self):
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_yellow(self):
        # Red and green coefficients only
        assert relative_luminance("#FFFF00") == pytest.approx(0.9278, abs=1e-4)

    def test_green_dominates(self):
        assert relative_luminance("#00FF00") > relative_luminance("#FF0000")
        assert relative_luminance("#FF0000") > relative_luminance("#0000FF")

    def test_accepts_color_and_tuple(self):
        assert relative_luminance(Color.from_hex("#3941C8")) == relative_luminance((57, 65, 200))


class TestContrastRatio:

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_identical_colors(self):
        assert contrast_ratio("#3941C8", "#3941C8") == pytest.approx(1.0)

    def test_symmetric(self):
        assert contrast_ratio("#FF0000", "#00FF00") == contrast_ratio("#00FF00", "#FF0000")

    def test_yellow_on_white_and_black(self):
        assert contrast_ratio("#FFFF00", "#FFFFFF") == pytest.approx(1.07, abs=0.005)
        assert contrast_ratio("#FFFF00", "#000000") == pytest.approx(19.56, abs=0.005)

    def test_bounds(self):
        for a in ("#000000", "#808080", "#FF0000", "#FFFFFF"):
            for b in ("#000000", "#0000FF", "#FFFF00", "#FFFFFF"):
                assert 1.0 <= contrast_ratio(a, b) <= 21.0 + 1e-9


class TestWCAGLevel:

    @pytest.mark.parametrize("ratio,expected", [
        (21.0, WCAGLevel.AAA),
        (7.0, WCAGLevel.AAA),
        (6.99, WCAGLevel.AA),
        (4.5, WCAGLevel.AA),
        (4.49, WCAGLevel.FAIL),
        (1.0, WCAGLevel.FAIL),
    ])
    def test_normal_text(self, ratio, expected):
        assert wcag_level(ratio) is expected

    @pytest.mark.parametrize("ratio,expected", [
        (4.5, WCAGLevel.AAA),
        (3.0, WCAGLevel.AA),
        (2.99, WCAGLevel.FAIL),
    ])
    def test_large_text(self, ratio, expected):
        assert wcag_level(ratio, large_text=True) is expected

    @pytest.mark.parametrize("ratio", [0.5, 21.5, math.nan])
    def test_out_of_range(self, ratio):
        with pytest.raises(OutOfRange):
            wcag_level(ratio)

    def test_gray_767676_passes_on_white(self):
        assert wcag_level(contrast_ratio("#767676", "#FFFFFF")) is WCAGLevel.AA

    def test_gray_777777_fails_on_white(self):
        assert wcag_level(contrast_ratio("#777777", "#FFFFFF")) is WCAGLevel.FAIL

    def test_ordering(self):
        assert WCAGLevel.AAA.meets(WCAGLevel.AA)
        assert not WCAGLevel.FAIL.meets(WCAGLevel.AA)
        assert WCAGLevel.worst([WCAGLevel.AA, WCAGLevel.AAA]) is WCAGLevel.AA


class TestReadability:

    def test_black_on_white_readable(self):
        assert is_text_readable("#000000", "#FFFFFF", WCAGLevel.AAA)

    def test_yellow_on_white_unreadable(self):
        assert not is_text_readable("#FFFF00", "#FFFFFF")

    def test_large_text_is_more_lenient(self):
        # #949494 on white is about 3.0:1
        assert not is_text_readable("#949494", "#FFFFFF")
        assert is_text_readable("#949494", "#FFFFFF", large_text=True)

    def test_best_text_color(self):
        assert best_text_color("#FFFF00") == "#000000"
        assert best_text_color("#000080") == "#FFFFFF"

    def test_contrast_ratio_record(self):
        cr = ContrastRatio.between("#FFFF00", "#FFFFFF")
        assert cr.color1 == "#FFFF00"
        assert cr.color2 == "#FFFFFF"
        assert cr.level is WCAGLevel.FAIL
        assert cr.is_text_readable is False


class TestSummarizeAccessibility:

    def test_level_uses_better_background(self):
        summary = summarize_accessibility("#FFFF00")
        assert summary.contrast_with_white == pytest.approx(1.07, abs=0.005)
        assert summary.wcag_level is WCAGLevel.AAA

    def test_mid_gray(self):
        summary = summarize_accessibility("#808080")
        assert summary.wcag_level is WCAGLevel.AA
