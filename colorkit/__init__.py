"""colorkit: OKLCH color science.

Conversions among color representations, sRGB / Display P3 gamut membership
and chroma-reduction mapping, gamut boundary resolution, WCAG and APCA
contrast, and contrast region tracing in the lightness/chroma plane.

Example:
    from colorkit import parse, to_css, to_gamut, contrast_region_path

    red = parse('#ff0000')
    vivid = to_gamut(red.with_(c=0.4), 'display-p3')
    to_css(vivid, 'p3')
    path = contrast_region_path(parse('#fff'), 145, level='AA')
"""

from .errors import ColorKitError, ColorParseError, SamplingError
from .types import (
    BoundaryPoint,
    Color,
    ContrastRegionPoint,
    GamutTarget,
    Hct,
    Hsl,
    Hsv,
    LinearRgb,
    Oklab,
    Oklch,
    P3,
    ParsedColor,
    Rgb,
)

from .colorspace import (
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
    lighten,
    darken,
    saturate,
    desaturate,
    adjust_hue,
    set_alpha,
    invert,
    grayscale,
)

from .css import parse, parse_detailed, to_css

from .contrast import (
    relative_luminance,
    linear_luminance,
    contrast_ratio,
    meets_aa,
    meets_aaa,
    contrast_apca,
    contrast_region_paths,
    contrast_region_path,
)

__all__ = [
    # Errors
    'ColorKitError',
    'ColorParseError',
    'SamplingError',
    # Types
    'BoundaryPoint',
    'Color',
    'ContrastRegionPoint',
    'GamutTarget',
    'Hct',
    'Hsl',
    'Hsv',
    'LinearRgb',
    'Oklab',
    'Oklch',
    'P3',
    'ParsedColor',
    'Rgb',
    # Conversions
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
    # Text
    'parse',
    'parse_detailed',
    'to_css',
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
    # Contrast
    'relative_luminance',
    'linear_luminance',
    'contrast_ratio',
    'meets_aa',
    'meets_aaa',
    'contrast_apca',
    'contrast_region_paths',
    'contrast_region_path',
]
