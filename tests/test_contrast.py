"""Tests for chromacheck.contrast module."""

import pytest

from chromacheck.color_utils import Color
from chromacheck.contrast import (
    ContrastResult,
    Tier,
    apca_contrast,
    apca_luminance,
    apca_tier,
    contrast_ratio,
    evaluate_pair,
    format_lc,
    format_ratio,
    relative_luminance,
    wcag_tier,
)


class TestRelativeLuminance:
    """Test the relative_luminance function."""

    def test_black_luminance(self):
        assert relative_luminance((0.0, 0.0, 0.0)) == 0.0

    def test_white_luminance(self):
        assert relative_luminance((1.0, 1.0, 1.0)) == 1.0

    def test_primaries(self):
        assert abs(relative_luminance((1.0, 0.0, 0.0)) - 0.2126) < 0.0001
        assert abs(relative_luminance((0.0, 1.0, 0.0)) - 0.7152) < 0.0001
        assert abs(relative_luminance((0.0, 0.0, 1.0)) - 0.0722) < 0.0001

    def test_linearize_low_values(self):
        """Test the linear segment at or below 0.03928."""
        result = relative_luminance((0.03, 0.0, 0.0))
        assert abs(result - 0.2126 * 0.03 / 12.92) < 1e-12

    def test_linearize_high_values(self):
        result = relative_luminance((0.5, 0.0, 0.0))
        expected = 0.2126 * ((0.5 + 0.055) / 1.055) ** 2.4
        assert abs(result - expected) < 1e-12

    def test_default_palette_values(self):
        assert relative_luminance(Color("#0f172a").rgb) == pytest.approx(0.008815, abs=1e-5)
        assert relative_luminance(Color("#f8fafc").rgb) == pytest.approx(0.953559, abs=1e-5)


class TestContrastRatio:
    """Test the contrast_ratio function."""

    def test_black_white_is_exactly_21(self):
        assert contrast_ratio("#000000", "#ffffff") == 21.0

    def test_identical_colors(self, sample_hexes):
        for hex_str in sample_hexes:
            assert contrast_ratio(hex_str, hex_str) == 1.0

    def test_symmetry_and_range(self, sample_hexes):
        for a in sample_hexes:
            for b in sample_hexes:
                ratio = contrast_ratio(a, b)
                assert ratio == contrast_ratio(b, a)
                assert 1.0 <= ratio <= 21.0

    def test_off_white_on_slate(self):
        ratio = contrast_ratio("#f8fafc", "#0f172a")
        assert ratio == pytest.approx(17.0629, abs=1e-3)
        assert wcag_tier(ratio) is Tier.AAA

    def test_accepts_color_values(self):
        assert contrast_ratio(Color("#000"), Color("#fff")) == 21.0

    def test_not_rounded(self):
        """Test that #777 on white stays below 4.5 although it displays as 4.48."""
        ratio = contrast_ratio("#777777", "#ffffff")
        assert 4.47 < ratio < 4.49
        assert round(ratio, 2) != ratio


class TestWcagTier:
    """Test WCAG tier boundaries, which are inclusive."""

    @pytest.mark.parametrize(
        "ratio, tier",
        [
            (21.0, Tier.AAA),
            (7.0, Tier.AAA),
            (6.999999, Tier.AA),
            (4.5, Tier.AA),
            (4.499999, Tier.AA_LARGE),
            (3.0, Tier.AA_LARGE),
            (2.999999, Tier.FAIL),
            (1.0, Tier.FAIL),
        ],
    )
    def test_boundaries(self, ratio, tier):
        assert wcag_tier(ratio) is tier

    def test_near_threshold_pair(self):
        """Test #767676 on white, just above 4.5, classifies as AA."""
        assert wcag_tier(contrast_ratio("#767676", "#ffffff")) is Tier.AA
        assert wcag_tier(contrast_ratio("#777777", "#ffffff")) is Tier.AA_LARGE


class TestApcaLuminance:
    def test_black_and_white(self):
        assert apca_luminance((0.0, 0.0, 0.0)) == 0.0
        assert apca_luminance((1.0, 1.0, 1.0)) == pytest.approx(1.0, abs=1e-6)

    def test_uses_apca_coefficients(self):
        assert apca_luminance((1.0, 0.0, 0.0)) == pytest.approx(0.2126729)
        assert apca_luminance((0.0, 1.0, 0.0)) == pytest.approx(0.7151522)

    def test_differs_from_wcag_luminance(self):
        rgb = Color("#777777").rgb
        assert apca_luminance(rgb) != relative_luminance(rgb)


class TestApcaContrast:
    """Test the apca_contrast function."""

    def test_same_color_is_zero(self, sample_hexes):
        for hex_str in sample_hexes:
            assert apca_contrast(hex_str, hex_str) == 0.0

    def test_bounded(self, sample_hexes):
        for a in sample_hexes:
            for b in sample_hexes:
                assert abs(apca_contrast(a, b)) <= 111.0

    def test_black_on_white(self):
        assert apca_contrast("#000000", "#ffffff") == pytest.approx(108.74, abs=0.01)

    def test_white_on_black(self):
        assert apca_contrast("#ffffff", "#000000") == pytest.approx(-110.58, abs=0.01)

    def test_polarity_asymmetry(self):
        """Test that swapping roles changes magnitude, not just sign."""
        dark_on_light = apca_contrast("#0f172a", "#f8fafc")
        light_on_dark = apca_contrast("#f8fafc", "#0f172a")
        assert dark_on_light == pytest.approx(104.11, abs=0.01)
        assert light_on_dark == pytest.approx(-105.98, abs=0.01)
        assert dark_on_light != -light_on_dark

    def test_near_black_pair_is_zero(self):
        """Test that the soft clamp and delta floor zero out near blacks."""
        assert apca_contrast("#000000", "#050505") == 0.0

    def test_low_contrast_clamps_to_zero(self):
        assert apca_contrast("#fefefe", "#ffffff") == 0.0
        assert apca_contrast("#ffffff", "#fefefe") == 0.0

    def test_sign_preserved(self):
        assert apca_contrast("#777777", "#ffffff") > 0
        assert apca_contrast("#ffffff", "#777777") < 0


class TestApcaTier:
    """Test APCA tier boundaries on the magnitude of Lc."""

    @pytest.mark.parametrize(
        "lc, tier",
        [
            (75.0, Tier.AAA),
            (-75.0, Tier.AAA),
            (74.999, Tier.AA),
            (60.0, Tier.AA),
            (-60.0, Tier.AA),
            (45.0, Tier.AA_LARGE),
            (44.999, Tier.FAIL),
            (-44.999, Tier.FAIL),
            (0.0, Tier.FAIL),
        ],
    )
    def test_boundaries(self, lc, tier):
        assert apca_tier(lc) is tier

    def test_unrounded_score(self):
        """Test #777 on white is classified on its raw Lc of about 73.8."""
        assert apca_tier(apca_contrast("#777777", "#ffffff")) is Tier.AA


class TestEvaluatePair:
    """Test the evaluate_pair function."""

    def test_identical_colors_give_minimum(self):
        result = evaluate_pair("#3b82f6", "#3b82f6")
        assert result == ContrastResult(1.0, Tier.FAIL, 0.0, Tier.FAIL)

    def test_both_scores(self):
        result = evaluate_pair(Color("#f8fafc"), Color("#3b82f6"))
        assert result.wcag_ratio == pytest.approx(3.5152, abs=1e-3)
        assert result.wcag_tier is Tier.AA_LARGE
        assert result.apca_lc == pytest.approx(-68.59, abs=0.01)
        assert result.apca_tier is Tier.AA

    def test_result_is_immutable(self):
        result = evaluate_pair("#000", "#fff")
        with pytest.raises(AttributeError):
            result.wcag_ratio = 1.0

    def test_as_dict_rounds_for_display(self):
        data = evaluate_pair("#0f172a", "#f8fafc").as_dict()
        assert data == {
            "wcag_ratio": 17.06,
            "wcag_tier": "AAA",
            "apca_lc": 104.1,
            "apca_tier": "AAA",
        }


class TestFormatting:
    def test_format_ratio(self):
        assert format_ratio(21.0) == "21.00:1"
        assert format_ratio(4.478) == "4.48:1"

    def test_format_lc_signs(self):
        assert format_lc(104.111) == "+104.1"
        assert format_lc(-105.983) == "-106.0"
        assert format_lc(0.0) == "0.0"

    def test_tier_labels(self):
        assert [tier.value for tier in Tier] == ["AAA", "AA", "AA Large", "Fail"]
