"""Display P3 conversions.

Linear sRGB -> linear P3 uses the combined (through XYZ D65) matrix from
CSS Color Level 4; the reverse direction is its exact inverse. Display P3
shares the sRGB transfer curve.
"""

import numpy as np

from ._backend import Array
from .oklch import (
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_oklch,
    oklch_to_linear_rgb,
    srgb_to_linear,
)

_SRGB_TO_P3 = (
    (0.8224621724, 0.1775378276, 0.0),
    (0.0331941980, 0.9668058020, 0.0),
    (0.0170826307, 0.0723974407, 0.9105199286),
)

_P3_TO_SRGB = tuple(tuple(float(v) for v in row) for row in np.linalg.inv(np.array(_SRGB_TO_P3)))


def _apply(matrix, r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    return (
        matrix[0][0]*r + matrix[0][1]*g + matrix[0][2]*b,
        matrix[1][0]*r + matrix[1][1]*g + matrix[1][2]*b,
        matrix[2][0]*r + matrix[2][1]*g + matrix[2][2]*b,
    )


def linear_srgb_to_linear_p3(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear sRGB -> linear Display P3."""
    return _apply(_SRGB_TO_P3, r, g, b)


def linear_p3_to_linear_srgb(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear Display P3 -> linear sRGB."""
    return _apply(_P3_TO_SRGB, r, g, b)


def oklch_to_linear_p3(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> linear Display P3 (unclamped)."""
    return linear_srgb_to_linear_p3(*oklch_to_linear_rgb(L, C, H))


def oklch_to_p3(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> gamma-encoded Display P3 (unclamped)."""
    r, g, b = oklch_to_linear_p3(L, C, H)
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)


def p3_to_oklch(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Gamma-encoded Display P3 -> OKLCH."""
    lr, lg, lb = linear_p3_to_linear_srgb(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return oklab_to_oklch(*linear_rgb_to_oklab(lr, lg, lb))
