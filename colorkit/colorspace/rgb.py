"""8-bit sRGB helpers: hex strings, HSL and HSV.

These operate on single values on the 0-255 scale; the perceptual math lives
in ``oklch.py``.
"""

import math
import string

from colorkit.errors import ColorParseError
from colorkit.types import Hsl, Hsv, Rgb

_HEX_DIGITS = frozenset(string.hexdigits)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return min(max(value, lo), hi)


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from -inf (matches CSS serializers)."""
    return int(math.floor(value + 0.5))


def to_byte(value: float) -> int:
    """0-255 float -> clamped integer byte."""
    return int(clamp(round_half_up(value), 0, 255))


# === Hex ===

def rgb_to_hex(rgb: Rgb) -> str:
    """sRGB -> '#rrggbb', or '#rrggbbaa' when alpha < 1."""
    digits = ''.join(f'{to_byte(ch):02x}' for ch in (rgb.r, rgb.g, rgb.b))
    if rgb.alpha < 1:
        digits += f'{to_byte(rgb.alpha * 255):02x}'
    return f'#{digits}'


def hex_to_rgb(text: str) -> Rgb:
    """Parse 3, 4, 6 or 8 hex digits (leading '#' optional, any case)."""
    digits = text.strip()
    if digits.startswith('#'):
        digits = digits[1:]

    if not digits or not all(ch in _HEX_DIGITS for ch in digits):
        raise ColorParseError(text, "invalid hex digits")

    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    elif len(digits) not in (6, 8):
        raise ColorParseError(text, "expected 3, 4, 6 or 8 hex digits")

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return Rgb(r, g, b, alpha)


# === HSL / HSV ===

def _hue_from_rgb(r: float, g: float, b: float, hi: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if hi == r:
        h = ((g - b) / delta) % 6
    elif hi == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return (h * 60) % 360


def rgb_to_hsl(rgb: Rgb) -> Hsl:
    """sRGB (0-255) -> HSL (h degrees, s/l 0-100)."""
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi, lo = max(r, g, b), min(r, g, b)
    delta = hi - lo
    l = (hi + lo) / 2
    s = 0.0 if delta == 0 else delta / (1 - abs(2 * l - 1))
    return Hsl(_hue_from_rgb(r, g, b, hi, delta), s * 100, l * 100, rgb.alpha)


def hsl_to_rgb(hsl: Hsl) -> Rgb:
    """HSL -> sRGB on the 0-255 scale (not rounded)."""
    h = hsl.h % 360
    s = clamp(hsl.s, 0, 100) / 100
    l = clamp(hsl.l, 0, 100) / 100

    def f(n: int) -> float:
        k = (n + h / 30) % 12
        a = s * min(l, 1 - l)
        return l - a * max(-1, min(k - 3, 9 - k, 1))

    return Rgb(f(0) * 255, f(8) * 255, f(4) * 255, hsl.alpha)


def rgb_to_hsv(rgb: Rgb) -> Hsv:
    """sRGB (0-255) -> HSV (h degrees, s/v 0-100)."""
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi, lo = max(r, g, b), min(r, g, b)
    delta = hi - lo
    s = 0.0 if hi == 0 else delta / hi
    return Hsv(_hue_from_rgb(r, g, b, hi, delta), s * 100, hi * 100, rgb.alpha)


def hsv_to_rgb(hsv: Hsv) -> Rgb:
    """HSV -> sRGB on the 0-255 scale (not rounded)."""
    h = hsv.h % 360
    s = clamp(hsv.s, 0, 100) / 100
    v = clamp(hsv.v, 0, 100) / 100

    def f(n: int) -> float:
        k = (n + h / 60) % 6
        return v - v * s * max(0, min(k, 4 - k, 1))

    return Rgb(f(5) * 255, f(3) * 255, f(1) * 255, hsv.alpha)
