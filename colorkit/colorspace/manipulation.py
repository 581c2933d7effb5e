"""Copy-with-one-field-replaced helpers on the canonical Color."""

from dataclasses import replace

from colorkit import defaults
from colorkit.types import Color
from .oklch import normalize_hue
from .rgb import clamp


def lighten(color: Color, amount: float) -> Color:
    """Move lightness toward white by a fraction (0-1) of the remaining headroom."""
    return replace(color, l=clamp(color.l + amount * (1 - color.l), 0, 1))


def darken(color: Color, amount: float) -> Color:
    """Move lightness toward black by a fraction (0-1) of the current lightness."""
    return replace(color, l=clamp(color.l - amount * color.l, 0, 1))


def saturate(color: Color, amount: float) -> Color:
    """Add ``amount`` (0-1) of the chroma ceiling."""
    return replace(color, c=clamp(color.c + amount * defaults.MAX_CHROMA, 0, defaults.MAX_CHROMA))


def desaturate(color: Color, amount: float) -> Color:
    """Remove a fraction (0-1) of the current chroma."""
    return replace(color, c=clamp(color.c - amount * color.c, 0, defaults.MAX_CHROMA))


def adjust_hue(color: Color, degrees: float) -> Color:
    return replace(color, h=float(normalize_hue(color.h + degrees)))


def set_alpha(color: Color, alpha: float) -> Color:
    return replace(color, alpha=clamp(alpha, 0, 1))


def invert(color: Color) -> Color:
    """Complement lightness and rotate hue by 180 degrees."""
    return replace(color, l=1 - color.l, h=float(normalize_hue(color.h + 180)))


def grayscale(color: Color) -> Color:
    return replace(color, c=0.0)
