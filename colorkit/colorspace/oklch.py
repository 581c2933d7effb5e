"""OKLCH color space conversions.

Reference: https://bottosson.github.io/posts/oklab/

All functions accept Python floats, numpy arrays or torch tensors and never
clamp: out-of-gamut inputs produce out-of-range channels, which is what gamut
membership needs to see.
"""

from math import pi

from colorkit import defaults
from . import _backend as B
from ._backend import Array

# === OKLab <-> Linear RGB matrices ===
# From Björn Ottosson's reference implementation

# Linear RGB -> LMS
_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> OKLab
_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> LMS cube root
_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear RGB
_LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)

# sRGB transfer function knees (shared by Display P3)
_ENCODE_KNEE = 0.0031308
_DECODE_KNEE = 0.04045


def normalize_hue(H: Array) -> Array:
    """Wrap hue to [0, 360)."""
    H = H % 360
    # -1e-20 % 360 rounds to 360.0
    return B.where(H >= 360, B.zeros_like(H), H)


# === Core Conversions ===

def oklch_to_oklab(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> OKLab. H in degrees."""
    H_rad = H * (pi / 180)
    a = C * B.cos(H_rad)
    b = C * B.sin(H_rad)
    return L, a, b


def oklab_to_oklch(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> OKLCH. Returns H in degrees [0, 360).

    Hue is undefined for achromatic colors; below the achromatic threshold
    it is reported as 0.
    """
    C = B.hypot(a, b)
    H = normalize_hue(B.atan2(b, a) * (180 / pi))
    H = B.where(C < defaults.ACHROMATIC_THRESHOLD, B.zeros_like(H), H)
    return L, C, H


def oklab_to_linear_rgb(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Linear sRGB via LMS intermediate."""
    # OKLab -> LMS (cube root space)
    l_ = L + _OKLAB_TO_LMS[0][1] * a + _OKLAB_TO_LMS[0][2] * b
    m_ = L + _OKLAB_TO_LMS[1][1] * a + _OKLAB_TO_LMS[1][2] * b
    s_ = L + _OKLAB_TO_LMS[2][1] * a + _OKLAB_TO_LMS[2][2] * b

    l, m, s = l_**3, m_**3, s_**3

    r = _LMS_TO_RGB[0][0]*l + _LMS_TO_RGB[0][1]*m + _LMS_TO_RGB[0][2]*s
    g = _LMS_TO_RGB[1][0]*l + _LMS_TO_RGB[1][1]*m + _LMS_TO_RGB[1][2]*s
    b = _LMS_TO_RGB[2][0]*l + _LMS_TO_RGB[2][1]*m + _LMS_TO_RGB[2][2]*s

    return r, g, b


def linear_rgb_to_oklab(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear sRGB -> OKLab via LMS intermediate."""
    l = _RGB_TO_LMS[0][0]*r + _RGB_TO_LMS[0][1]*g + _RGB_TO_LMS[0][2]*b
    m = _RGB_TO_LMS[1][0]*r + _RGB_TO_LMS[1][1]*g + _RGB_TO_LMS[1][2]*b
    s = _RGB_TO_LMS[2][0]*r + _RGB_TO_LMS[2][1]*g + _RGB_TO_LMS[2][2]*b

    # Sign-preserving, so slightly negative channels survive the round trip
    l_, m_, s_ = B.cbrt(l), B.cbrt(m), B.cbrt(s)

    L = _LMS_TO_OKLAB[0][0]*l_ + _LMS_TO_OKLAB[0][1]*m_ + _LMS_TO_OKLAB[0][2]*s_
    a = _LMS_TO_OKLAB[1][0]*l_ + _LMS_TO_OKLAB[1][1]*m_ + _LMS_TO_OKLAB[1][2]*s_
    b = _LMS_TO_OKLAB[2][0]*l_ + _LMS_TO_OKLAB[2][1]*m_ + _LMS_TO_OKLAB[2][2]*s_

    return L, a, b


def linear_to_srgb(x: Array) -> Array:
    """Linear -> gamma-encoded (per channel), mirrored for negative input."""
    x_abs = B.abs(x)
    low = x * 12.92
    high = B.sign(x) * (1.055 * B.pow(x_abs, 1 / 2.4) - 0.055)
    return B.where(x_abs <= _ENCODE_KNEE, low, high)


def srgb_to_linear(x: Array) -> Array:
    """Gamma-encoded -> linear (per channel), mirrored for negative input."""
    x_abs = B.abs(x)
    low = x / 12.92
    high = B.sign(x) * B.pow((x_abs + 0.055) / 1.055, 2.4)
    return B.where(x_abs <= _DECODE_KNEE, low, high)


# === Convenience Composites ===

def oklch_to_linear_rgb(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> Linear sRGB (no gamma encoding, no clamping)."""
    L_ok, a, b = oklch_to_oklab(L, C, H)
    return oklab_to_linear_rgb(L_ok, a, b)


def oklch_to_srgb(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> gamma-encoded sRGB in one call.

    Args:
        L: Lightness (0-1)
        C: Chroma (0-~0.4)
        H: Hue in degrees (0-360)

    Returns:
        (r, g, b) in 0-1, may be outside [0,1] if out of gamut
    """
    r, g, b = oklch_to_linear_rgb(L, C, H)
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)


def srgb_to_oklch(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Gamma-encoded sRGB (0-1) -> OKLCH."""
    L, a, b_ = linear_rgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return oklab_to_oklch(L, a, b_)
