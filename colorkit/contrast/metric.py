"""Contrast metrics: WCAG 2.1 relative luminance and ratio, APCA Lc.

Alpha is ignored everywhere. Composite translucent colors over their
backdrop before measuring.
"""

from __future__ import annotations

import numpy as np

from colorkit import defaults
from colorkit.colorspace import _backend as B
from colorkit.colorspace._backend import Array
from colorkit.colorspace.convert import to_rgb
from colorkit.colorspace.oklch import oklch_to_linear_rgb, srgb_to_linear
from colorkit.types import Color

# WCAG 2.1 luminance weights
_WCAG_WEIGHTS = (0.2126, 0.7152, 0.0722)

# APCA-W3 0.0.98G constants
_APCA_WEIGHTS = (0.2126729, 0.7151522, 0.0721750)
_APCA_TRC = 2.4
_NORM_BG = 0.56
_NORM_TXT = 0.57
_REV_TXT = 0.62
_REV_BG = 0.65
_BLK_THRS = 0.022
_BLK_CLMP = 1.414
_SCALE = 1.14
_LO_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005


def _weighted(r, g, b, weights):
    wr, wg, wb = weights
    return wr * r + wg * g + wb * b


def relative_luminance(color: Color) -> float:
    """WCAG 2.1 relative luminance of the 8-bit sRGB value (0 to 1)."""
    rgb = to_rgb(color)
    r, g, b = (float(srgb_to_linear(ch / 255)) for ch in (rgb.r, rgb.g, rgb.b))
    return _weighted(r, g, b, _WCAG_WEIGHTS)


def linear_luminance(L: Array, C: Array, H: Array) -> Array:
    """WCAG luminance straight from unclamped linear sRGB.

    Continuous in L/C/H (no 8-bit quantization, no clamping), so Display P3
    colors outside sRGB still get a meaningful value.
    """
    r, g, b = oklch_to_linear_rgb(L, C, H)
    return _weighted(r, g, b, _WCAG_WEIGHTS)


def ratio_from_luminance(y1: Array, y2: Array) -> Array:
    """(lighter + 0.05) / (darker + 0.05), elementwise."""
    lighter = B.where(y1 >= y2, y1, y2)
    darker = B.where(y1 >= y2, y2, y1)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color1: Color, color2: Color) -> float:
    """WCAG 2.1 contrast ratio, 1 (identical) to 21 (black on white).

    Symmetric in its arguments.
    """
    return float(ratio_from_luminance(relative_luminance(color1), relative_luminance(color2)))


def meets_aa(color1: Color, color2: Color, large_text: bool = False) -> bool:
    """WCAG AA: ratio >= 4.5, or >= 3.0 for large text."""
    threshold = defaults.WCAG_AA_LARGE if large_text else defaults.WCAG_AA
    return contrast_ratio(color1, color2) >= threshold


def meets_aaa(color1: Color, color2: Color, large_text: bool = False) -> bool:
    """WCAG AAA: ratio >= 7.0, or >= 4.5 for large text."""
    threshold = defaults.WCAG_AAA_LARGE if large_text else defaults.WCAG_AAA
    return contrast_ratio(color1, color2) >= threshold


# === APCA ===

def apca_luminance(r: Array, g: Array, b: Array) -> Array:
    """APCA screen luminance Y from gamma-encoded sRGB channels in [0, 1]."""
    r, g, b = (np.power(np.clip(np.asarray(ch, dtype=np.float64), 0.0, 1.0), _APCA_TRC) for ch in (r, g, b))
    return _weighted(r, g, b, _APCA_WEIGHTS)


def apca_linear_luminance(L: Array, C: Array, H: Array) -> np.ndarray:
    """APCA luminance of OKLCH values, from linear sRGB clipped to [0, 1]."""
    r, g, b = (np.clip(ch, 0.0, 1.0) for ch in oklch_to_linear_rgb(L, C, H))
    return _weighted(r, g, b, _APCA_WEIGHTS)


def apca_from_luminance(text_y: Array, bg_y: Array) -> Array:
    """APCA Lc from text and background luminance, elementwise.

    Positive for dark text on a light background, negative for light text on
    a dark background. Values within the low clip return 0.
    """
    text_y = np.asarray(text_y, dtype=np.float64)
    bg_y = np.asarray(bg_y, dtype=np.float64)

    # Soft clamp near black
    text_y = np.where(text_y > _BLK_THRS, text_y, text_y + np.abs(_BLK_THRS - text_y) ** _BLK_CLMP)
    bg_y = np.where(bg_y > _BLK_THRS, bg_y, bg_y + np.abs(_BLK_THRS - bg_y) ** _BLK_CLMP)

    normal = bg_y > text_y
    with np.errstate(invalid='ignore'):
        sapc_normal = (bg_y ** _NORM_BG - text_y ** _NORM_TXT) * _SCALE
        sapc_reverse = (bg_y ** _REV_BG - text_y ** _REV_TXT) * _SCALE

    lc = np.where(
        normal,
        np.where(sapc_normal < _LO_CLIP, 0.0, sapc_normal - _LO_OFFSET),
        np.where(sapc_reverse > -_LO_CLIP, 0.0, sapc_reverse + _LO_OFFSET),
    )
    lc = np.where(np.abs(bg_y - text_y) < _DELTA_Y_MIN, 0.0, lc)
    return lc * 100.0


def contrast_apca(text_color: Color, bg_color: Color) -> float:
    """APCA-W3 0.0.98G lightness contrast (Lc), roughly -108 to 106.

    Reported on the Lc x 100 scale (black text on white is about 106.04), so
    Lc 60 / 75 thresholds apply directly.

    Polarity-aware and therefore not symmetric: the first argument is the
    text, the second the background.
    """
    txt = to_rgb(text_color)
    bg = to_rgb(bg_color)
    text_y = apca_luminance(txt.r / 255, txt.g / 255, txt.b / 255)
    bg_y = apca_luminance(bg.r / 255, bg.g / 255, bg.b / 255)
    return float(apca_from_luminance(text_y, bg_y))
