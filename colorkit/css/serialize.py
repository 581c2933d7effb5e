"""Serialize a Color to CSS color text."""

from __future__ import annotations

from colorkit import defaults
from colorkit.colorspace.convert import to_hex, to_hsl, to_oklab, to_p3, to_rgb
from colorkit.types import Color

CSS_FORMATS: tuple[str, ...] = ('hex', 'rgb', 'hsl', 'oklch', 'oklab', 'p3')


def _fmt(value: float, digits: int) -> str:
    """Round and drop trailing zeros ('0.5', '145', never '-0')."""
    rounded = round(value, digits) + 0.0
    text = f"{rounded:.{digits}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def _with_alpha(body: str, alpha: float) -> str:
    if alpha < 1:
        return f"{body} / {_fmt(alpha, defaults.CSS_ALPHA_DIGITS)}"
    return body


def to_css(color: Color, format: str = 'hex') -> str:
    """Convert a Color to a CSS color string.

    Args:
        color: Color to serialize
        format: One of 'hex', 'rgb', 'hsl', 'oklch', 'oklab', 'p3'

    Returns:
        CSS text; alpha is included only when below 1.

    Raises:
        ValueError: If the format is unknown.
    """
    ld = defaults.CSS_LIGHTNESS_DIGITS
    pd = defaults.CSS_PERCENT_DIGITS

    if format == 'hex':
        return to_hex(color)

    if format == 'rgb':
        rgb = to_rgb(color)
        return f"rgb({_with_alpha(f'{rgb.r} {rgb.g} {rgb.b}', color.alpha)})"

    if format == 'hsl':
        hsl = to_hsl(color)
        body = f"{_fmt(hsl.h, pd)} {_fmt(hsl.s, pd)}% {_fmt(hsl.l, pd)}%"
        return f"hsl({_with_alpha(body, color.alpha)})"

    if format == 'oklch':
        body = f"{_fmt(color.l, ld)} {_fmt(color.c, ld)} {_fmt(color.h, defaults.CSS_HUE_DIGITS)}"
        return f"oklch({_with_alpha(body, color.alpha)})"

    if format == 'oklab':
        lab = to_oklab(color)
        od = defaults.CSS_OKLAB_DIGITS
        body = f"{_fmt(lab.L, od)} {_fmt(lab.a, od)} {_fmt(lab.b, od)}"
        return f"oklab({_with_alpha(body, color.alpha)})"

    if format == 'p3':
        p3 = to_p3(color)
        body = f"display-p3 {_fmt(p3.r, ld)} {_fmt(p3.g, ld)} {_fmt(p3.b, ld)}"
        return f"color({_with_alpha(body, color.alpha)})"

    raise ValueError(f"Unknown CSS format: {format!r} (expected one of {CSS_FORMATS})")
