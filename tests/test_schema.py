# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import json

import pytest

from palettekit.errors import InvalidFormat, OutOfRange, PaletteError
from palettekit.schema import (
    HSL,
    RGB,
    AccessibilityScore,
    Color,
    ColorAccessibility,
    ColorCategory,
    ContrastRatio,
    ExtractedColor,
    ExtractedPalette,
    WCAGLevel,
)
from palettekit.measure.scoring import score_palette


class TestErrors:

    def test_hierarchy(self):
        assert issubclass(InvalidFormat, PaletteError)
        assert issubclass(OutOfRange, PaletteError)
        assert issubclass(PaletteError, ValueError)


class TestRGB:

    def test_valid(self):
        rgb = RGB(1, 2, 3)
        assert tuple(rgb) == (1, 2, 3)

    def test_integral_float_normalized(self):
        rgb = RGB(12.0, 0, 255)
        assert rgb.r == 12
        assert isinstance(rgb.r, int)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
    def test_out_of_range(self, channels):
        with pytest.raises(OutOfRange):
            RGB(*channels)

    @pytest.mark.parametrize("bad", ["a", None, True])
    def test_not_a_number(self, bad):
        with pytest.raises(InvalidFormat, match="number"):
            RGB(bad, 0, 0)

    def test_frozen(self):
        rgb = RGB(1, 2, 3)
        with pytest.raises(AttributeError):
            rgb.r = 5

    def test_dict_roundtrip(self):
        assert RGB.from_dict(RGB(9, 8, 7).to_dict()) == RGB(9, 8, 7)


class TestHSL:

    def test_hue_360_rejected(self):
        with pytest.raises(OutOfRange, match="Hue"):
            HSL(360, 50, 50)

    def test_saturation_range(self):
        with pytest.raises(OutOfRange, match="Saturation"):
            HSL(0, 101, 50)

    def test_lightness_range(self):
        with pytest.raises(OutOfRange, match="Lightness"):
            HSL(0, 50, -1)

    def test_nan_rejected(self):
        with pytest.raises(OutOfRange):
            HSL(float("nan"), 50, 50)


class TestWCAGLevel:

    def test_worst(self):
        assert WCAGLevel.worst([WCAGLevel.AA, WCAGLevel.FAIL, WCAGLevel.AAA]) is WCAGLevel.FAIL

    def test_worst_of_nothing(self):
        assert WCAGLevel.worst([]) is WCAGLevel.AAA

    def test_meets(self):
        assert WCAGLevel.AAA.meets(WCAGLevel.AAA)
        assert WCAGLevel.AA.meets(WCAGLevel.FAIL)
        assert not WCAGLevel.AA.meets(WCAGLevel.AAA)


class TestColor:

    def test_from_hex_derives_everything(self):
        color = Color.from_hex("ff0000")
        assert color.hex == "#FF0000"
        assert color.rgb == RGB(255, 0, 0)
        assert color.hsl == HSL(0, 100, 50)
        assert color.accessibility.wcag_level is WCAGLevel.AA
        assert color.name
        assert color.usage

    def test_constructors_agree(self):
        a = Color.from_hex("#3941C8")
        b = Color.from_rgb((57, 65, 200))
        assert a == b
        assert Color.from_hsl(HSL(0, 100, 50)).hex == "#FF0000"

    def test_inconsistent_fields_rejected(self):
        good = Color.from_hex("#FF0000")
        with pytest.raises(InvalidFormat, match="does not match"):
            Color(
                hex="#00FF00",
                rgb=good.rgb,
                hsl=good.hsl,
                name=good.name,
                category=good.category,
                usage=good.usage,
                accessibility=good.accessibility,
            )

    def test_inconsistent_hsl_rejected(self):
        good = Color.from_hex("#FF0000")
        with pytest.raises(InvalidFormat, match="hsl"):
            Color(
                hex=good.hex,
                rgb=good.rgb,
                hsl=HSL(10, 100, 50),
                name=good.name,
                category=good.category,
                usage=good.usage,
                accessibility=good.accessibility,
            )

    def test_coerce_passthrough(self):
        color = Color.from_hex("#123456")
        assert Color.coerce(color) is color
        assert Color.coerce("#123456") == color

    def test_with_metadata(self):
        color = Color.from_hex("#123456")
        renamed = color.with_metadata(name="Ink")
        assert renamed.name == "Ink"
        assert renamed.rgb == color.rgb
        assert color.with_metadata() is color

    def test_to_dict_shape(self):
        data = Color.from_hex("#123456").to_dict()
        assert set(data) == {"hex", "rgb", "hsl", "name", "category", "usage", "accessibility"}
        assert set(data["accessibility"]) == {"contrastWithWhite", "contrastWithBlack", "wcagLevel"}
        assert data["category"] in {"primary", "secondary", "accent", "neutral"}

    def test_json_roundtrip(self):
        color = Color.from_hex("#123456", name="Ink", category=ColorCategory.ACCENT, usage="Links")
        assert Color.from_json(color.to_json()) == color

    def test_from_dict_rejects_mismatched_rgb(self):
        data = Color.from_hex("#123456").to_dict()
        data["rgb"] = {"r": 0, "g": 0, "b": 0}
        with pytest.raises(InvalidFormat):
            Color.from_dict(data)

    def test_from_dict_rejects_bad_hex(self):
        with pytest.raises(InvalidFormat):
            Color.from_dict({"hex": "#12345"})

    def test_from_dict_rejects_mismatched_hsl(self):
        data = Color.from_hex("#FF0000").to_dict()
        data["hsl"] = {"h": 200, "s": 10, "l": 90}
        with pytest.raises(InvalidFormat, match="hsl"):
            Color.from_dict(data)

    def test_from_dict_rejects_stale_accessibility(self):
        data = Color.from_hex("#FFFF00").to_dict()
        data["accessibility"] = {"contrastWithWhite": 99, "contrastWithBlack": 99, "wcagLevel": "FAIL"}
        with pytest.raises(InvalidFormat, match="accessibility"):
            Color.from_dict(data)

    def test_from_dict_derives_missing_fields(self):
        color = Color.from_dict({"hex": "#FFFF00"})
        assert color.hsl == HSL(60, 100, 50)
        assert color.accessibility.wcag_level is WCAGLevel.AAA


class TestColorAccessibility:

    def test_dict_roundtrip(self):
        acc = ColorAccessibility(4.5, 4.67, WCAGLevel.AA)
        assert ColorAccessibility.from_dict(acc.to_dict()) == acc


class TestContrastRatio:

    def test_dict_shape(self):
        data = ContrastRatio.between("#000000", "#FFFFFF").to_dict()
        assert data["color1"] == "#000000"
        assert data["level"] == "AAA"
        assert data["isTextReadable"] is True

    def test_from_dict_recomputes(self):
        data = ContrastRatio.between("#000000", "#FFFFFF").to_dict()
        data["ratio"] = 2.0
        assert ContrastRatio.from_dict(data).ratio == pytest.approx(21.0)


class TestAccessibilityScore:

    def test_total_must_match_ratios(self):
        with pytest.raises(OutOfRange, match="total_checks"):
            AccessibilityScore(
                overall_score=WCAGLevel.AAA,
                contrast_ratios=(),
                color_blindness_compatible=True,
                recommendations=(),
                passed_checks=0,
                total_checks=1,
            )

    def test_passed_bounded(self):
        cr = ContrastRatio.between("#000000", "#FFFFFF")
        with pytest.raises(OutOfRange, match="passed_checks"):
            AccessibilityScore(
                overall_score=WCAGLevel.AAA,
                contrast_ratios=(cr,),
                color_blindness_compatible=True,
                recommendations=(),
                passed_checks=2,
                total_checks=1,
            )

    def test_to_dict_shape(self):
        data = score_palette(["#FFFF00"]).to_dict()
        assert set(data) == {
            "overallScore", "contrastRatios", "colorBlindnessCompatible",
            "recommendations", "passedChecks", "totalChecks",
        }
        assert data["overallScore"] == "FAIL"
        json.dumps(data)


class TestExtractedTypes:

    def test_negative_frequency(self):
        with pytest.raises(OutOfRange):
            ExtractedColor(color=Color.from_hex("#123456"), frequency=-1)

    def test_extracted_color_dict(self):
        ec = ExtractedColor(color=Color.from_hex("#123456"), frequency=7)
        data = ec.to_dict()
        assert data == {**ec.color.to_dict(), "frequency": 7}
        assert data["rgb"] == {"r": 18, "g": 52, "b": 86}
        assert ExtractedColor.from_dict(data) == ec

    def test_extracted_color_keeps_metadata(self):
        color = Color.from_hex("#123456", name="Ink", category=ColorCategory.ACCENT, usage="Links")
        ec = ExtractedColor(color=color, frequency=2)
        restored = ExtractedColor.from_dict(json.loads(json.dumps(ec.to_dict())))
        assert restored.color.category is ColorCategory.ACCENT
        assert restored.color.name == "Ink"
        assert restored.color.usage == "Links"

    def test_palette_roundtrip(self):
        red = Color.from_hex("#FF0000")
        palette = ExtractedPalette(
            dominant_colors=(ExtractedColor(color=red, frequency=3),),
            palette=(red,),
            average_color=ExtractedColor(color=red, frequency=3),
        )
        assert ExtractedPalette.from_dict(json.loads(palette.to_json())) == palette
        assert not palette.is_empty
