"""Tokenizer for CSS color text.

Produces a flat token stream (a small subset of CSS Syntax Level 3): hash,
function, ident, number, percentage, dimension, comma, slash, close paren and
whitespace. Whitespace is kept because it is a separator in modern color
syntax ("1 2 3" is three values, "1.2.3" is malformed).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from colorkit.errors import ColorParseError

_NUMBER = r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'

_TOKEN_SPEC = (
    ('WS', r'\s+'),
    ('HASH', r'#[0-9a-zA-Z]*'),
    ('NUMERIC', rf'(?P<number>{_NUMBER})(?P<suffix>%|[a-zA-Z]+)?'),
    ('FUNCTION', r'[a-zA-Z-][a-zA-Z0-9-]*\('),
    ('IDENT', r'[a-zA-Z-][a-zA-Z0-9-]*'),
    ('COMMA', r','),
    ('SLASH', r'/'),
    ('RPAREN', r'\)'),
    ('MISMATCH', r'.'),
)

_TOKEN_RE = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in _TOKEN_SPEC))


@dataclass(frozen=True)
class Token:
    """One lexical token.

    Attributes:
        kind: WS, HASH, FUNCTION, IDENT, NUMBER, PERCENTAGE, DIMENSION,
              COMMA, SLASH or RPAREN
        text: Source text of the token
        pos: Offset in the source string
        value: Numeric value for NUMBER/PERCENTAGE/DIMENSION, else None
        unit: Lowercase unit for DIMENSION ('%' for PERCENTAGE), else None
    """
    kind: str
    text: str
    pos: int
    value: float | None = None
    unit: str | None = None

    @property
    def name(self) -> str:
        """Function/ident name, lowercased and without the '('."""
        return self.text.rstrip('(').lower()


def tokenize(source: str) -> Iterator[Token]:
    """Split color text into tokens.

    Raises:
        ColorParseError: On a character that cannot start any token.
    """
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup
        text = match.group()
        pos = match.start()

        if kind == 'MISMATCH':
            raise ColorParseError(source, f"unexpected {text!r} at position {pos}")

        if kind == 'NUMERIC':
            value = float(match.group('number'))
            suffix = match.group('suffix')
            if suffix is None:
                yield Token('NUMBER', text, pos, value)
            elif suffix == '%':
                yield Token('PERCENTAGE', text, pos, value, '%')
            else:
                yield Token('DIMENSION', text, pos, value, suffix.lower())
            continue

        yield Token(kind, text, pos)
