"""Tests for the array-level OKLCH / OKLab / sRGB / P3 kernels."""

import numpy as np
import pytest

from colorkit.colorspace import (
    normalize_hue,
    oklch_to_srgb,
    srgb_to_oklch,
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    oklch_to_linear_rgb,
    linear_to_srgb,
    srgb_to_linear,
    linear_srgb_to_linear_p3,
    linear_p3_to_linear_srgb,
    oklch_to_p3,
    p3_to_oklch,
)


class TestBasicConversions:
    """Test basic color space conversions."""

    def test_black(self):
        """Black: L=0 should give RGB (0,0,0)."""
        rgb = oklch_to_srgb(np.array([0.0]), np.array([0.0]), np.array([0.0]))
        np.testing.assert_allclose(np.stack(rgb, axis=-1), [[0, 0, 0]], atol=1e-6)

    def test_white(self):
        """White: L=1, C=0 should give RGB (1,1,1)."""
        rgb = oklch_to_srgb(np.array([1.0]), np.array([0.0]), np.array([0.0]))
        np.testing.assert_allclose(np.stack(rgb, axis=-1), [[1, 1, 1]], atol=1e-4)

    def test_gray_is_neutral(self):
        r, g, b = (float(ch) for ch in oklch_to_srgb(0.5, 0.0, 0.0))
        assert r == pytest.approx(g, abs=1e-6)
        assert g == pytest.approx(b, abs=1e-6)

    def test_srgb_red_reference_values(self):
        """Pure red is L~0.628, C~0.258, H~29.23 (Ottosson's reference)."""
        L, C, H = srgb_to_oklch(1.0, 0.0, 0.0)
        assert float(L) == pytest.approx(0.62796, abs=1e-4)
        assert float(C) == pytest.approx(0.25768, abs=1e-4)
        assert float(H) == pytest.approx(29.2339, abs=1e-2)

    def test_accepts_python_floats(self):
        r, g, b = oklch_to_linear_rgb(0.7, 0.1, 200.0)
        assert np.isfinite([r, g, b]).all()


class TestRoundTrip:
    """Test sRGB -> OKLCH -> sRGB round trips."""

    def test_roundtrip_primaries(self):
        colors = np.array([
            [1, 0, 0],
            [0, 1, 0],
            [0, 0, 1],
            [1, 1, 0],
            [1, 0, 1],
            [0, 1, 1],
            [0.2, 0.4, 0.6],
        ], dtype=np.float64)
        L, C, H = srgb_to_oklch(colors[:, 0], colors[:, 1], colors[:, 2])
        back = np.stack(oklch_to_srgb(L, C, H), axis=-1)
        np.testing.assert_allclose(back, colors, atol=1e-5)

    def test_oklab_roundtrip(self):
        rng = np.random.default_rng(0)
        rgb = rng.uniform(0, 1, size=(100, 3))
        L, a, b = linear_rgb_to_oklab(rgb[:, 0], rgb[:, 1], rgb[:, 2])
        back = np.stack(oklab_to_linear_rgb(L, a, b), axis=-1)
        np.testing.assert_allclose(back, rgb, atol=1e-6)

    def test_oklch_oklab_roundtrip(self):
        L = np.array([0.3, 0.6, 0.9])
        C = np.array([0.05, 0.1, 0.2])
        H = np.array([10.0, 150.0, 300.0])
        L2, C2, H2 = oklab_to_oklch(*oklch_to_oklab(L, C, H))
        np.testing.assert_allclose(L2, L)
        np.testing.assert_allclose(C2, C, atol=1e-12)
        np.testing.assert_allclose(H2, H, atol=1e-7)

    def test_p3_roundtrip(self):
        L = np.array([0.4, 0.7, 0.85])
        C = np.array([0.1, 0.2, 0.15])
        H = np.array([30.0, 145.0, 260.0])
        L2, C2, H2 = p3_to_oklch(*oklch_to_p3(L, C, H))
        np.testing.assert_allclose(L2, L, atol=1e-7)
        np.testing.assert_allclose(C2, C, atol=1e-7)
        np.testing.assert_allclose(H2, H, atol=1e-5)

    def test_p3_matrices_are_inverse(self):
        rgb = np.array([0.25, 0.5, 0.75])
        back = linear_p3_to_linear_srgb(*linear_srgb_to_linear_p3(*rgb))
        np.testing.assert_allclose(back, rgb, atol=1e-8)

    def test_p3_round_trip_both_directions(self):
        """Wide-gamut values survive P3 -> sRGB -> P3 to double precision."""
        p3 = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.1, 0.2, 0.95]]).T
        back = linear_srgb_to_linear_p3(*linear_p3_to_linear_srgb(*p3))
        np.testing.assert_allclose(back, p3, atol=1e-12)
        rgb = np.array([0.25, 0.5, 0.75])
        again = linear_p3_to_linear_srgb(*linear_srgb_to_linear_p3(*rgb))
        np.testing.assert_allclose(again, rgb, atol=1e-12)


class TestTransferCurve:
    """Test the sRGB transfer function."""

    def test_linear_segment(self):
        assert float(linear_to_srgb(0.001)) == pytest.approx(0.001 * 12.92)
        assert float(srgb_to_linear(0.02)) == pytest.approx(0.02 / 12.92)

    def test_inverse(self):
        x = np.linspace(0, 1, 101)
        np.testing.assert_allclose(srgb_to_linear(linear_to_srgb(x)), x, atol=1e-12)

    def test_sign_preserving(self):
        """Out-of-range input is mirrored, never clamped."""
        assert float(linear_to_srgb(-0.5)) == pytest.approx(-float(linear_to_srgb(0.5)))
        assert float(linear_to_srgb(1.2)) > 1.0


class TestHue:
    """Test hue normalization and achromatic handling."""

    def test_normalize_hue_wraps(self):
        np.testing.assert_allclose(normalize_hue(np.array([-30.0, 360.0, 725.0])), [330.0, 0.0, 5.0])

    def test_normalize_hue_never_returns_360(self):
        assert float(normalize_hue(-1e-20)) == 0.0

    def test_achromatic_hue_is_zero(self):
        _, C, H = oklab_to_oklch(0.5, 1e-6, 1e-6)
        assert float(C) < 1e-4
        assert float(H) == 0.0


class TestTorchBackend:
    """Kernels should accept torch tensors and agree with numpy."""

    def test_oklch_to_linear_rgb_matches_numpy(self):
        torch = pytest.importorskip("torch")
        L = np.array([0.2, 0.5, 0.8])
        C = np.array([0.05, 0.15, 0.1])
        H = np.array([0.0, 120.0, 240.0])

        expected = np.stack(oklch_to_linear_rgb(L, C, H), axis=-1)
        result = oklch_to_linear_rgb(
            torch.from_numpy(L), torch.from_numpy(C), torch.from_numpy(H)
        )
        result = torch.stack(result, dim=-1).numpy()
        np.testing.assert_allclose(result, expected, atol=1e-10)
