"""Core value types for colorkit.

All types are immutable. Operations never mutate a color; they return a new
value (use ``dataclasses.replace`` or ``Color.with_`` to copy with one field
changed).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, NamedTuple

GamutTarget = Literal['srgb', 'display-p3']
CssFormat = Literal['hex', 'rgb', 'hsl', 'oklch', 'oklab', 'p3']

GAMUT_TARGETS: tuple[str, ...] = ('srgb', 'display-p3')


@dataclass(frozen=True)
class Color:
    """Canonical color in OKLCH.

    Attributes:
        l: Lightness, 0 (black) to 1 (white)
        c: Chroma, 0 (gray) to ~0.4 (soft ceiling, not clamped)
        h: Hue in degrees [0, 360); meaningless when c is ~0
        alpha: Opacity, 0 to 1
    """
    l: float
    c: float
    h: float
    alpha: float = 1.0

    def with_(self, **changes: float) -> Color:
        """Copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class Rgb:
    """sRGB on the 0-255 scale.

    Channels are integers when produced by ``to_rgb``; HSL/HSV conversions
    keep fractional values so they are not quantized twice.
    """
    r: float
    g: float
    b: float
    alpha: float = 1.0


@dataclass(frozen=True)
class LinearRgb:
    """Linear-light RGB, nominally 0-1 but unclamped."""
    r: float
    g: float
    b: float
    alpha: float = 1.0


@dataclass(frozen=True)
class P3:
    """Gamma-encoded Display P3 (0-1 per channel)."""
    r: float
    g: float
    b: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Hsl:
    """HSL with h in degrees and s/l in 0-100."""
    h: float
    s: float
    l: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Hsv:
    """HSV/HSB with h in degrees and s/v in 0-100."""
    h: float
    s: float
    v: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Oklab:
    """OKLab with L in 0-1 and a/b roughly in -0.4..0.4."""
    L: float
    a: float
    b: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Oklch:
    """OKLCH, field-compatible with Color."""
    l: float
    c: float
    h: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Hct:
    """Material hue / chroma / tone (CAM16 hue and chroma, CIE L* tone)."""
    h: float
    c: float
    t: float
    alpha: float = 1.0


@dataclass(frozen=True)
class ParsedColor:
    """A parsed color together with the syntax it was written in."""
    color: Color
    format: str


class BoundaryPoint(NamedTuple):
    """A point in the fixed-hue lightness/chroma plane."""
    l: float
    c: float


ContrastRegionPoint = BoundaryPoint
