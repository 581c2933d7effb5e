"""Tests for CSS serialization."""

import pytest

from colorkit.colorspace import from_hex, to_hex, to_rgb
from colorkit.css import CSS_FORMATS, parse, parse_detailed, to_css
from colorkit.types import Color


class TestToCss:
    """Test each output format."""

    def test_hex(self):
        assert to_css(from_hex('#336699')) == '#336699'
        assert to_css(from_hex('#336699'), 'hex') == '#336699'

    def test_hex_with_alpha(self):
        assert to_css(from_hex('#336699').with_(alpha=0.5), 'hex') == '#33669980'

    def test_rgb(self):
        red = from_hex('#ff0000')
        assert to_css(red, 'rgb') == 'rgb(255 0 0)'
        assert to_css(red.with_(alpha=0.5), 'rgb') == 'rgb(255 0 0 / 0.5)'

    def test_hsl(self):
        assert to_css(from_hex('#ff0000'), 'hsl') == 'hsl(0 100% 50%)'
        assert to_css(from_hex('#336699'), 'hsl') == 'hsl(210 50% 40%)'

    def test_oklch(self):
        assert to_css(Color(0.5, 0.1, 145), 'oklch') == 'oklch(0.5 0.1 145)'
        assert to_css(Color(0.62796, 0.25768, 29.2339, 0.25), 'oklch') == 'oklch(0.628 0.2577 29.23 / 0.25)'

    def test_oklab(self):
        assert to_css(Color(0.6, 0.1, 0), 'oklab') == 'oklab(0.6 0.1 0)'

    def test_p3(self):
        assert to_css(Color(1.0, 0.0, 0.0), 'p3') == 'color(display-p3 1 1 1)'

    def test_no_negative_zero(self):
        assert to_css(Color(0.6, 0.1, 270), 'oklab') == 'oklab(0.6 0 -0.1)'

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError, match="Unknown CSS format"):
            to_css(Color(0.5, 0.1, 10), 'lab')


class TestReparse:
    """Serialized text parses back to the same color."""

    @pytest.mark.parametrize("fmt", CSS_FORMATS)
    @pytest.mark.parametrize("text", ['#ff0000', '#336699', '#0a7f3c', '#f4e1c0', '#000000'])
    def test_reparse_within_one_byte(self, text, fmt):
        color = from_hex(text)
        back = parse(to_css(color, fmt))
        a, b = to_rgb(color), to_rgb(back)
        assert abs(a.r - b.r) <= 1
        assert abs(a.g - b.g) <= 1
        assert abs(a.b - b.b) <= 1

    @pytest.mark.parametrize("fmt", CSS_FORMATS)
    def test_format_is_preserved(self, fmt):
        assert parse_detailed(to_css(from_hex('#336699'), fmt)).format == fmt

    @pytest.mark.parametrize("fmt", CSS_FORMATS)
    @pytest.mark.parametrize("text", ['#ff003980', '#336699', '#0a7f3c', '#f4e1c0', '#7f7f80', '#01fe02'])
    def test_eight_bit_colors_reparse_exactly(self, text, fmt):
        color = from_hex(text)
        assert to_hex(parse(to_css(color, fmt))) == text

    def test_oklab_precision(self):
        assert to_css(Color(0.6, 0.12345, 0), 'oklab') == 'oklab(0.6 0.12345 0)'
