"""CSS color text parsing and serialization.

Example:
    from colorkit.css import parse, to_css

    color = parse("oklch(62.8% 0.258 29.2deg)")
    to_css(color, 'hex')      # '#ff0000'
    to_css(color, 'p3')       # 'color(display-p3 0.9176 0.2003 0.1386)'
"""

from .parser import parse, parse_detailed
from .serialize import CSS_FORMATS, to_css
from .tokenizer import Token, tokenize

__all__ = [
    'parse',
    'parse_detailed',
    'to_css',
    'CSS_FORMATS',
    'tokenize',
    'Token',
]
