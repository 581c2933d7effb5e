"""Tests for gamut membership and chroma-reduction mapping."""

import numpy as np
import pytest

from colorkit.colorspace import (
    from_hex,
    in_gamut,
    in_p3_gamut,
    in_srgb_gamut,
    is_in_gamut,
    to_gamut,
    to_p3_gamut,
    to_srgb_gamut,
)
from colorkit.types import Color


class TestMembership:
    """Test gamut membership on linear, unclamped channels."""

    @pytest.mark.parametrize("text", ['#ff0000', '#00ff00', '#0000ff', '#ffffff', '#000000', '#336699'])
    def test_hex_colors_are_in_srgb(self, text):
        assert in_srgb_gamut(from_hex(text))

    def test_high_chroma_is_out_of_srgb(self):
        assert not in_srgb_gamut(Color(0.7, 0.4, 145))

    def test_p3_is_wider_than_srgb(self):
        """Vivid P3 green is not in sRGB but is in P3."""
        sample = Color(0.5, 0.22809734908482968, 24.864352050672835)
        assert in_p3_gamut(sample)
        assert not in_srgb_gamut(sample)

    def test_srgb_colors_are_in_p3(self):
        for text in ('#ff0000', '#00ff00', '#0000ff', '#336699'):
            assert in_p3_gamut(from_hex(text))

    def test_gamut_name_dispatch(self):
        color = Color(0.7, 0.4, 145)
        assert in_gamut(color, 'srgb') == in_srgb_gamut(color)
        assert in_gamut(color, 'display-p3') == in_p3_gamut(color)

    def test_unknown_gamut_raises(self):
        with pytest.raises(ValueError, match="Unknown gamut"):
            in_gamut(Color(0.5, 0.1, 10), 'rec2020')

    def test_vectorized(self):
        L = np.array([0.5, 0.7, 0.0, 1.0])
        C = np.array([0.05, 0.4, 0.0, 0.0])
        H = np.array([100.0, 145.0, 0.0, 0.0])
        np.testing.assert_array_equal(is_in_gamut(L, C, H), [True, False, True, True])


class TestMapping:
    """Test to_gamut chroma reduction."""

    def test_in_gamut_returns_unchanged_copy(self):
        color = Color(0.5, 0.05, 100, 0.5)
        assert to_gamut(color) == color

    @pytest.mark.parametrize("gamut", ['srgb', 'display-p3'])
    def test_preserves_lightness_and_hue(self, gamut):
        color = Color(0.7, 0.4, 145, 0.9)
        mapped = to_gamut(color, gamut)
        assert mapped.l == color.l
        assert mapped.h == color.h
        assert mapped.alpha == color.alpha
        assert mapped.c < color.c
        assert in_gamut(mapped, gamut)

    @pytest.mark.parametrize("gamut", ['srgb', 'display-p3'])
    def test_idempotent(self, gamut):
        once = to_gamut(Color(0.6, 0.35, 300), gamut)
        assert to_gamut(once, gamut) == once

    def test_converges_to_boundary(self):
        mapped = to_srgb_gamut(Color(0.7, 0.4, 145))
        # Slightly more chroma leaves the gamut
        assert not in_srgb_gamut(mapped.with_(c=mapped.c + 2e-4))

    def test_extremes_map_to_zero_chroma(self):
        assert to_gamut(Color(1.0, 0.2, 30)).c == 0.0
        assert to_gamut(Color(0.0, 0.2, 30)).c == 0.0

    def test_p3_keeps_more_chroma(self):
        color = Color(0.7, 0.4, 145)
        assert to_p3_gamut(color).c >= to_srgb_gamut(color).c
