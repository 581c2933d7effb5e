"""Color-level conversions.

Every conversion routes through the canonical Color (OKLCH):

    Any format -> sRGB -> linear sRGB -> OKLab -> OKLCH (Color)
    Color (OKLCH) -> OKLab -> linear sRGB [-> linear P3] -> encoded -> format

Only the final 8-bit step clamps; everything upstream is unclamped.
"""

from colorkit.types import Color, Hct, Hsl, Hsv, LinearRgb, Oklab, Oklch, P3, Rgb
from .hct import rgb_to_hct
from .oklch import (
    linear_rgb_to_oklab,
    linear_to_srgb,
    normalize_hue,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    srgb_to_linear,
)
from .p3 import linear_p3_to_linear_srgb, linear_srgb_to_linear_p3
from .rgb import hex_to_rgb, hsl_to_rgb, hsv_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_hsv, to_byte


def _color(L, C, H, alpha: float) -> Color:
    return Color(float(L), float(C), float(H), alpha)


# === Linear light ===

def to_linear_srgb(color: Color) -> LinearRgb:
    """Color -> unclamped linear sRGB."""
    r, g, b = oklab_to_linear_rgb(*oklch_to_oklab(color.l, color.c, color.h))
    return LinearRgb(float(r), float(g), float(b), color.alpha)


def from_linear_srgb(linear: LinearRgb) -> Color:
    return _color(*oklab_to_oklch(*linear_rgb_to_oklab(linear.r, linear.g, linear.b)), linear.alpha)


def to_linear_p3(color: Color) -> LinearRgb:
    """Color -> unclamped linear Display P3."""
    lin = to_linear_srgb(color)
    r, g, b = linear_srgb_to_linear_p3(lin.r, lin.g, lin.b)
    return LinearRgb(float(r), float(g), float(b), color.alpha)


# === 8-bit sRGB and hex ===

def to_rgb(color: Color) -> Rgb:
    """Color -> 8-bit sRGB (rounded and clamped)."""
    lin = to_linear_srgb(color)
    r, g, b = (to_byte(float(linear_to_srgb(ch)) * 255) for ch in (lin.r, lin.g, lin.b))
    return Rgb(r, g, b, color.alpha)


def from_rgb(rgb: Rgb) -> Color:
    """sRGB (0-255) -> Color."""
    r, g, b = (srgb_to_linear(ch / 255) for ch in (rgb.r, rgb.g, rgb.b))
    return _color(*oklab_to_oklch(*linear_rgb_to_oklab(r, g, b)), rgb.alpha)


def to_hex(color: Color) -> str:
    return rgb_to_hex(to_rgb(color))


def from_hex(text: str) -> Color:
    return from_rgb(hex_to_rgb(text))


# === HSL / HSV / HCT ===

def to_hsl(color: Color) -> Hsl:
    return rgb_to_hsl(to_rgb(color))


def from_hsl(hsl: Hsl) -> Color:
    return from_rgb(hsl_to_rgb(hsl))


def to_hsv(color: Color) -> Hsv:
    return rgb_to_hsv(to_rgb(color))


def from_hsv(hsv: Hsv) -> Color:
    return from_rgb(hsv_to_rgb(hsv))


def to_hct(color: Color) -> Hct:
    """Color -> Material HCT, derived from the 8-bit sRGB value."""
    return rgb_to_hct(to_rgb(color))


# === OKLab / OKLCH ===

def to_oklab(color: Color) -> Oklab:
    L, a, b = oklch_to_oklab(color.l, color.c, color.h)
    return Oklab(float(L), float(a), float(b), color.alpha)


def from_oklab(lab: Oklab) -> Color:
    return _color(*oklab_to_oklch(lab.L, lab.a, lab.b), lab.alpha)


def to_oklch(color: Color) -> Oklch:
    """Color -> OKLCH (identity apart from the type)."""
    return Oklch(color.l, color.c, color.h, color.alpha)


def from_oklch(oklch: Oklch) -> Color:
    """OKLCH -> Color with hue wrapped to [0, 360)."""
    h = oklch.h if 0 <= oklch.h < 360 else float(normalize_hue(oklch.h))
    return Color(oklch.l, oklch.c, h, oklch.alpha)


# === Display P3 ===

def to_p3(color: Color) -> P3:
    """Color -> gamma-encoded Display P3, clamped to [0, 1]."""
    lin = to_linear_p3(color)
    r, g, b = (min(max(float(linear_to_srgb(ch)), 0.0), 1.0) for ch in (lin.r, lin.g, lin.b))
    return P3(r, g, b, color.alpha)


def from_p3(p3: P3) -> Color:
    r, g, b = linear_p3_to_linear_srgb(srgb_to_linear(p3.r), srgb_to_linear(p3.g), srgb_to_linear(p3.b))
    return _color(*oklab_to_oklch(*linear_rgb_to_oklab(r, g, b)), p3.alpha)
