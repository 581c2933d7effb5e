"""Parse CSS color text into a Color.

Supported syntaxes (case-insensitive):
    #rgb  #rgba  #rrggbb  #rrggbbaa
    rgb(r g b [/ a])          rgb(r, g, b[, a])       (rgba() alias)
    hsl(h s l [/ a])          hsl(h, s%, l%[, a])     (hsla() alias)
    oklch(L C H [/ a])
    oklab(L a b [/ a])
    color(display-p3 r g b [/ a])

Each syntax is a small grammar over the token stream: arguments must be
separated either all by whitespace (optionally ending in ``/ alpha``) or, for
the legacy rgb/hsl forms, all by commas. Anything else is rejected rather
than guessed at.
"""

from __future__ import annotations

from math import pi
from typing import Callable

from colorkit import defaults
from colorkit.colorspace.convert import from_hex, from_hsl, from_oklab, from_p3, from_rgb
from colorkit.colorspace.oklch import normalize_hue
from colorkit.colorspace.rgb import clamp
from colorkit.errors import ColorParseError
from colorkit.types import Color, Hsl, Oklab, P3, ParsedColor, Rgb
from .tokenizer import Token, tokenize

_ANGLE_UNITS = {
    'deg': 1.0,
    'grad': 0.9,
    'rad': 180.0 / pi,
    'turn': 360.0,
}


class _Args:
    """Arguments of one color function, with their separators checked."""

    def __init__(self, text: str, values: list[Token], seps: list[str]):
        self.text = text
        self.values = values
        self.seps = seps

    def fail(self, reason: str) -> ColorParseError:
        return ColorParseError(self.text, reason)

    def layout(self, channels: int, legacy: bool) -> Token | None:
        """Check the separator layout and return the alpha token, if any.

        Modern: channels separated by whitespace, optional '/ alpha'.
        Legacy: channels and optional alpha all separated by commas.
        """
        n = len(self.values)
        if n not in (channels, channels + 1):
            raise self.fail(f"expected {channels} channels and optional alpha, got {n} values")

        has_alpha = n == channels + 1
        modern = ['ws'] * (channels - 1) + (['slash'] if has_alpha else [])
        if self.seps == modern:
            return self.values[-1] if has_alpha else None

        if legacy and self.seps == ['comma'] * (n - 1):
            return self.values[-1] if has_alpha else None

        raise self.fail("mixed or misplaced separators")


def _split_args(text: str, body: list[Token]) -> _Args:
    """Split a function body into values and the separators between them."""
    values: list[Token] = []
    seps: list[str] = []
    pending: list[str] = []

    for tok in body:
        if tok.kind == 'WS':
            if not pending:
                pending.append('ws')
            continue
        if tok.kind in ('COMMA', 'SLASH'):
            if not values or any(p != 'ws' for p in pending):
                raise ColorParseError(text, f"unexpected {tok.text!r} at position {tok.pos}")
            pending = [tok.kind.lower()]
            continue
        if tok.kind not in ('NUMBER', 'PERCENTAGE', 'DIMENSION', 'IDENT'):
            raise ColorParseError(text, f"unexpected {tok.text!r} at position {tok.pos}")

        if values:
            if not pending:
                raise ColorParseError(text, f"missing separator before {tok.text!r}")
            seps.append(pending[0])
        elif pending and pending != ['ws']:
            raise ColorParseError(text, f"unexpected separator before {tok.text!r}")
        values.append(tok)
        pending = []

    if pending and pending != ['ws']:
        raise ColorParseError(text, "trailing separator")
    return _Args(text, values, seps)


# === Value helpers ===

def _number(args: _Args, tok: Token, percent_scale: float | None = None) -> float:
    """NUMBER as-is; PERCENTAGE times ``percent_scale`` (when allowed)."""
    if tok.kind == 'NUMBER':
        return tok.value
    if tok.kind == 'PERCENTAGE' and percent_scale is not None:
        return tok.value * percent_scale
    raise args.fail(f"unexpected value {tok.text!r}")


def _percentage(args: _Args, tok: Token, allow_number: bool) -> float:
    """Percentage on the 0-100 scale (bare numbers only in modern syntax)."""
    if tok.kind == 'PERCENTAGE' or (allow_number and tok.kind == 'NUMBER'):
        return tok.value
    raise args.fail(f"expected a percentage, got {tok.text!r}")


def _hue(args: _Args, tok: Token) -> float:
    if tok.kind == 'NUMBER':
        return tok.value
    if tok.kind == 'DIMENSION' and tok.unit in _ANGLE_UNITS:
        return tok.value * _ANGLE_UNITS[tok.unit]
    raise args.fail(f"expected a hue angle, got {tok.text!r}")


def _alpha(args: _Args, tok: Token | None) -> float:
    if tok is None:
        return 1.0
    return clamp(_number(args, tok, percent_scale=0.01), 0.0, 1.0)


# === Grammars ===

def _parse_rgb(args: _Args) -> Color:
    alpha_tok = args.layout(3, legacy=True)
    r, g, b = (clamp(_number(args, tok, percent_scale=2.55), 0, 255) for tok in args.values[:3])
    return from_rgb(Rgb(r, g, b, _alpha(args, alpha_tok)))


def _parse_hsl(args: _Args) -> Color:
    alpha_tok = args.layout(3, legacy=True)
    modern = 'comma' not in args.seps
    h_tok, s_tok, l_tok = args.values[:3]
    hsl = Hsl(
        _hue(args, h_tok),
        clamp(_percentage(args, s_tok, allow_number=modern), 0, 100),
        clamp(_percentage(args, l_tok, allow_number=modern), 0, 100),
        _alpha(args, alpha_tok),
    )
    return from_hsl(hsl)


def _parse_oklch(args: _Args) -> Color:
    alpha_tok = args.layout(3, legacy=False)
    l_tok, c_tok, h_tok = args.values[:3]
    l = clamp(_number(args, l_tok, percent_scale=0.01), 0.0, 1.0)
    c = max(_number(args, c_tok, percent_scale=defaults.PERCENT_CHROMA_SCALE), 0.0)
    h = float(normalize_hue(_hue(args, h_tok)))
    return Color(l, c, h, _alpha(args, alpha_tok))


def _parse_oklab(args: _Args) -> Color:
    alpha_tok = args.layout(3, legacy=False)
    l_tok, a_tok, b_tok = args.values[:3]
    lab = Oklab(
        clamp(_number(args, l_tok, percent_scale=0.01), 0.0, 1.0),
        _number(args, a_tok, percent_scale=defaults.PERCENT_CHROMA_SCALE),
        _number(args, b_tok, percent_scale=defaults.PERCENT_CHROMA_SCALE),
        _alpha(args, alpha_tok),
    )
    return from_oklab(lab)


def _parse_color(args: _Args) -> Color:
    if not args.values or args.values[0].kind != 'IDENT':
        raise args.fail("color() requires a color space")
    space = args.values[0].name
    if space != 'display-p3':
        raise args.fail(f"unsupported color space {space!r}")
    if not args.seps or args.seps[0] != 'ws':
        raise args.fail("mixed or misplaced separators")

    channels = _Args(args.text, args.values[1:], args.seps[1:])
    alpha_tok = channels.layout(3, legacy=False)
    r, g, b = (_number(channels, tok, percent_scale=0.01) for tok in channels.values[:3])
    return from_p3(P3(r, g, b, _alpha(channels, alpha_tok)))


_GRAMMARS: dict[str, tuple[str, Callable[[_Args], Color]]] = {
    'rgb': ('rgb', _parse_rgb),
    'rgba': ('rgb', _parse_rgb),
    'hsl': ('hsl', _parse_hsl),
    'hsla': ('hsl', _parse_hsl),
    'oklch': ('oklch', _parse_oklch),
    'oklab': ('oklab', _parse_oklab),
    'color': ('p3', _parse_color),
}


def parse_detailed(text: str) -> ParsedColor:
    """Parse color text, also reporting which syntax matched.

    Returns:
        ParsedColor whose ``format`` is one of hex, rgb, hsl, oklch, oklab, p3
        (the same names ``to_css`` accepts).

    Raises:
        ColorParseError: If the text matches no supported syntax.
    """
    if not isinstance(text, str):
        raise ColorParseError(repr(text), "expected a string")

    try:
        tokens = list(tokenize(text.strip()))
    except ColorParseError as e:
        raise ColorParseError(text, e.reason) from None

    if not tokens:
        raise ColorParseError(text, "empty input")

    head = tokens[0]
    if head.kind == 'HASH' and len(tokens) == 1:
        return ParsedColor(from_hex(head.text), 'hex')

    if head.kind != 'FUNCTION' or head.name not in _GRAMMARS:
        raise ColorParseError(text, "unrecognized color syntax")

    if tokens[-1].kind != 'RPAREN':
        raise ColorParseError(text, "missing ')'")

    fmt, grammar = _GRAMMARS[head.name]
    args = _split_args(text, tokens[1:-1])
    return ParsedColor(grammar(args), fmt)


def parse(text: str) -> Color:
    """Parse any supported CSS color string into a Color.

    Raises:
        ColorParseError: If the text matches no supported syntax. No default
            color is ever substituted.
    """
    return parse_detailed(text).color
