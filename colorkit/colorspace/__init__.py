"""OKLCH color space conversions, gamut membership and boundary resolution.

This module provides:
- Array-level OKLCH <-> OKLab <-> linear sRGB / Display P3 kernels
- Color-level conversions to 8-bit RGB, hex, HSL, HSV, HCT, OKLab and P3
- Gamut membership and chroma-reduction mapping (sRGB, Display P3)
- Max-chroma boundary resolution and boundary sampling
- Backend-agnostic: kernels work with floats, numpy arrays or torch tensors

Example:
    from colorkit.colorspace import from_hex, max_chroma_at, to_gamut

    color = from_hex('#ff0000')
    safe = to_gamut(color.with_(c=0.35), 'srgb')
    limit = max_chroma_at(0.85, 145, gamut='display-p3')
"""

from .oklch import (
    normalize_hue,
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklch_to_linear_rgb,
    oklch_to_srgb,
    srgb_to_oklch,
)

from .p3 import (
    linear_srgb_to_linear_p3,
    linear_p3_to_linear_srgb,
    oklch_to_linear_p3,
    oklch_to_p3,
    p3_to_oklch,
)

from .rgb import (
    rgb_to_hex,
    hex_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
)

from .convert import (
    to_rgb,
    from_rgb,
    to_hex,
    from_hex,
    to_hsl,
    from_hsl,
    to_hsv,
    from_hsv,
    to_hct,
    to_oklab,
    from_oklab,
    to_oklch,
    from_oklch,
    to_p3,
    from_p3,
    to_linear_srgb,
    from_linear_srgb,
    to_linear_p3,
)

from .gamut import (
    is_in_gamut,
    in_gamut,
    in_srgb_gamut,
    in_p3_gamut,
    to_gamut,
    to_srgb_gamut,
    to_p3_gamut,
    max_chroma_for_lh,
    max_chroma_at,
    gamut_boundary_path,
    chroma_band,
)

from .manipulation import (
    lighten,
    darken,
    saturate,
    desaturate,
    adjust_hue,
    set_alpha,
    invert,
    grayscale,
)

__all__ = [
    # Array kernels
    'normalize_hue',
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklch_to_linear_rgb',
    'oklch_to_srgb',
    'srgb_to_oklch',
    'linear_srgb_to_linear_p3',
    'linear_p3_to_linear_srgb',
    'oklch_to_linear_p3',
    'oklch_to_p3',
    'p3_to_oklch',
    # 8-bit helpers
    'rgb_to_hex',
    'hex_to_rgb',
    'rgb_to_hsl',
    'hsl_to_rgb',
    'rgb_to_hsv',
    'hsv_to_rgb',
    # Color-level conversions
    'to_rgb',
    'from_rgb',
    'to_hex',
    'from_hex',
    'to_hsl',
    'from_hsl',
    'to_hsv',
    'from_hsv',
    'to_hct',
    'to_oklab',
    'from_oklab',
    'to_oklch',
    'from_oklch',
    'to_p3',
    'from_p3',
    'to_linear_srgb',
    'from_linear_srgb',
    'to_linear_p3',
    # Gamut
    'is_in_gamut',
    'in_gamut',
    'in_srgb_gamut',
    'in_p3_gamut',
    'to_gamut',
    'to_srgb_gamut',
    'to_p3_gamut',
    'max_chroma_for_lh',
    'max_chroma_at',
    'gamut_boundary_path',
    'chroma_band',
    # Manipulation
    'lighten',
    'darken',
    'saturate',
    'desaturate',
    'adjust_hue',
    'set_alpha',
    'invert',
    'grayscale',
]
