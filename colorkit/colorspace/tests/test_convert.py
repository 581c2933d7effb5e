"""Tests for Color-level conversions and manipulation helpers."""

import pytest

from colorkit.colorspace import (
    adjust_hue,
    darken,
    from_hex,
    from_hsl,
    from_hsv,
    from_oklab,
    from_oklch,
    from_p3,
    from_rgb,
    grayscale,
    hex_to_rgb,
    invert,
    lighten,
    normalize_hue,
    rgb_to_hex,
    set_alpha,
    to_hct,
    to_hex,
    to_hsl,
    to_hsv,
    to_linear_p3,
    to_linear_srgb,
    to_oklab,
    to_oklch,
    to_p3,
    to_rgb,
)
from colorkit.errors import ColorParseError
from colorkit.types import Color, Hsl, Hsv, Oklch, Rgb


class TestHex:
    """Test hex parsing and formatting."""

    @pytest.mark.parametrize("text", ['#ff0000', '#00ff00', '#336699', '#000000', '#ffffff', '#123456'])
    def test_hex_roundtrip(self, text):
        assert to_hex(from_hex(text)) == text

    def test_short_forms_expand(self):
        assert hex_to_rgb('#f80') == Rgb(0xff, 0x88, 0x00, 1.0)
        assert hex_to_rgb('f80c').alpha == pytest.approx(0xcc / 255)

    def test_case_insensitive(self):
        assert hex_to_rgb('#ABCDEF') == hex_to_rgb('#abcdef')

    def test_alpha_pair_only_when_translucent(self):
        assert rgb_to_hex(Rgb(255, 0, 0, 1.0)) == '#ff0000'
        assert rgb_to_hex(Rgb(255, 0, 0, 0.5)) == '#ff000080'

    @pytest.mark.parametrize("text", ['#12345', '#ggg', '', '#'])
    def test_invalid_hex_raises(self, text):
        with pytest.raises(ColorParseError):
            hex_to_rgb(text)


class TestRgb:
    """Test 8-bit sRGB conversion."""

    def test_to_rgb_exact_bytes(self):
        assert to_rgb(from_hex('#336699')) == Rgb(0x33, 0x66, 0x99, 1.0)

    def test_to_rgb_clamps_out_of_gamut(self):
        rgb = to_rgb(Color(0.7, 0.4, 145))
        for ch in (rgb.r, rgb.g, rgb.b):
            assert 0 <= ch <= 255
            assert isinstance(ch, int)

    def test_alpha_passes_through(self):
        color = from_rgb(Rgb(10, 20, 30, 0.25))
        assert color.alpha == 0.25
        assert to_rgb(color).alpha == 0.25

    def test_red_canonical_value(self):
        red = from_hex('#ff0000')
        assert red.l == pytest.approx(0.628, abs=1e-3)
        assert red.c == pytest.approx(0.258, abs=1e-3)
        assert red.h == pytest.approx(29.23, abs=1e-2)

    def test_white_is_achromatic(self):
        white = from_hex('#ffffff')
        assert white.l == pytest.approx(1.0, abs=1e-6)
        assert white.c < 1e-4
        assert white.h == 0.0


class TestOklchOklab:
    """Test the identity-ish OKLCH conversion and OKLab."""

    def test_oklch_roundtrip_is_exact(self):
        color = Color(0.5, 0.12, 200.0, 0.8)
        assert from_oklch(to_oklch(color)) == color

    def test_from_oklch_wraps_hue(self):
        assert from_oklch(Oklch(0.5, 0.1, 370.0)).h == pytest.approx(10.0)
        assert from_oklch(Oklch(0.5, 0.1, -90.0)).h == pytest.approx(270.0)

    def test_oklab_roundtrip(self):
        color = Color(0.6, 0.15, 250.0)
        back = from_oklab(to_oklab(color))
        assert back.l == pytest.approx(color.l)
        assert back.c == pytest.approx(color.c)
        assert back.h == pytest.approx(color.h)


class TestHslHsv:
    """Test HSL and HSV conversions."""

    def test_red_hsl(self):
        hsl = to_hsl(from_hex('#ff0000'))
        assert (hsl.h, hsl.s, hsl.l) == pytest.approx((0.0, 100.0, 50.0))

    def test_hsl_to_color(self):
        assert to_hex(from_hsl(Hsl(120, 100, 50))) == '#00ff00'
        assert to_hex(from_hsl(Hsl(210, 50, 40))) == '#336699'

    def test_red_hsv(self):
        hsv = to_hsv(from_hex('#ff0000'))
        assert (hsv.h, hsv.s, hsv.v) == pytest.approx((0.0, 100.0, 100.0))

    def test_hsv_to_color(self):
        assert to_hex(from_hsv(Hsv(240, 100, 100))) == '#0000ff'

    def test_gray_has_zero_saturation(self):
        hsl = to_hsl(from_hex('#808080'))
        assert hsl.s == 0.0
        assert hsl.h == 0.0


class TestP3:
    """Test Display P3 conversion."""

    def test_srgb_red_in_p3(self):
        """sRGB red is color(display-p3 0.9175 0.2003 0.1386)."""
        p3 = to_p3(from_hex('#ff0000'))
        assert (p3.r, p3.g, p3.b) == pytest.approx((0.9175, 0.2003, 0.1386), abs=1e-3)

    def test_p3_roundtrip_in_gamut(self):
        color = Color(0.65, 0.2, 30.0)
        back = from_p3(to_p3(color))
        assert back.l == pytest.approx(color.l, abs=1e-7)
        assert back.c == pytest.approx(color.c, abs=1e-7)
        assert back.h == pytest.approx(color.h, abs=1e-6)

    def test_p3_output_is_clamped(self):
        p3 = to_p3(Color(0.9, 0.4, 145))
        for ch in (p3.r, p3.g, p3.b):
            assert 0.0 <= ch <= 1.0

    def test_linear_channels_are_unclamped(self):
        color = Color(0.7, 0.4, 145)
        lin = to_linear_srgb(color)
        assert min(lin.r, lin.g, lin.b) < 0 or max(lin.r, lin.g, lin.b) > 1
        p3 = to_linear_p3(color)
        assert p3.alpha == 1.0


class TestHct:
    """Test Material HCT (via colour-science)."""

    def test_red(self):
        """Material reports red #ff0000 as roughly H 27.4, C 113.4, T 53.2."""
        hct = to_hct(from_hex('#ff0000'))
        assert hct.h == pytest.approx(27.4, abs=1.5)
        assert hct.c == pytest.approx(113.4, abs=3.0)
        assert hct.t == pytest.approx(53.24, abs=0.1)

    def test_tone_extremes(self):
        assert to_hct(from_hex('#ffffff')).t == pytest.approx(100.0, abs=0.01)
        black = to_hct(from_hex('#000000'))
        assert black.t == pytest.approx(0.0, abs=0.01)
        assert black.c == pytest.approx(0.0, abs=1e-6)


class TestManipulation:
    """Test copy-with-one-field-replaced helpers."""

    def test_lighten_darken(self):
        color = Color(0.5, 0.1, 100)
        assert lighten(color, 0.5).l == pytest.approx(0.75)
        assert darken(color, 0.5).l == pytest.approx(0.25)
        assert color.l == 0.5

    def test_adjust_hue_wraps(self):
        assert adjust_hue(Color(0.5, 0.1, 350), 20).h == pytest.approx(10)

    def test_hue_wrap_matches_normalize_hue(self):
        """Rotations stay in [0, 360), including rounding at the seam."""
        color = Color(0.5, 0.1, 0.0)
        for degrees in (-1e-20, -360.0, 720.0, -90.0):
            h = adjust_hue(color, degrees).h
            assert isinstance(h, float)
            assert 0.0 <= h < 360.0
            assert h == float(normalize_hue(degrees))
        assert invert(Color(0.5, 0.1, 180.0)).h == 0.0

    def test_set_alpha_clamps(self):
        assert set_alpha(Color(0.5, 0.1, 100), 2.0).alpha == 1.0

    def test_invert_and_grayscale(self):
        inv = invert(Color(0.2, 0.1, 90))
        assert inv.l == pytest.approx(0.8)
        assert inv.h == pytest.approx(270)
        assert grayscale(Color(0.2, 0.1, 90)).c == 0.0

    def test_with_replaces_one_field(self):
        color = Color(0.5, 0.1, 100)
        assert color.with_(c=0.2) == Color(0.5, 0.2, 100)
