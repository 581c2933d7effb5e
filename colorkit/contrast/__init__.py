"""Contrast measurement and contrast region tracing.

Example:
    from colorkit import from_hex
    from colorkit.contrast import contrast_ratio, contrast_region_paths

    white = from_hex('#ffffff')
    contrast_ratio(from_hex('#767676'), white)     # ~4.54
    paths = contrast_region_paths(white, 145, level='AAA')
"""

from .metric import (
    relative_luminance,
    linear_luminance,
    contrast_ratio,
    meets_aa,
    meets_aaa,
    contrast_apca,
)

from .regions import (
    contrast_region_paths,
    contrast_region_path,
    resolve_threshold,
)

__all__ = [
    'relative_luminance',
    'linear_luminance',
    'contrast_ratio',
    'meets_aa',
    'meets_aaa',
    'contrast_apca',
    'contrast_region_paths',
    'contrast_region_path',
    'resolve_threshold',
]
