"""Material HCT (hue, chroma, tone) from 8-bit sRGB.

Hue and chroma are CAM16 correlates under Material's default viewing
conditions; tone is CIE L*. The appearance model itself comes from
colour-science.
"""

from math import pi

import numpy as np
import colour
from colour.appearance import VIEWING_CONDITIONS_CAM16, XYZ_to_CAM16

from colorkit.types import Hct, Rgb

# D65 white, Y normalized to 100
_WHITE_XYZ = np.array([95.047, 100.0, 108.883])
# Background of mid-gray (L* = 50)
_BACKGROUND_Y = 18.418651851244416
_ADAPTING_LUMINANCE = (200.0 / pi) * _BACKGROUND_Y / 100.0
_SURROUND = VIEWING_CONDITIONS_CAM16['Average']


def rgb_to_hct(rgb: Rgb) -> Hct:
    """sRGB (0-255) -> HCT.

    Hue is reported as 0 for achromatic input (CAM16 leaves it undefined).
    """
    srgb = np.array([rgb.r, rgb.g, rgb.b], dtype=np.float64) / 255.0
    XYZ = colour.sRGB_to_XYZ(srgb)

    with np.errstate(divide='ignore', invalid='ignore'):
        spec = XYZ_to_CAM16(
            XYZ * 100.0,
            _WHITE_XYZ,
            _ADAPTING_LUMINANCE,
            _BACKGROUND_Y,
            _SURROUND,
            discount_illuminant=False,
        )

    chroma = float(np.nan_to_num(spec.C))
    hue = float(np.nan_to_num(spec.h)) % 360 if chroma > 1e-4 else 0.0
    tone = float(colour.XYZ_to_Lab(XYZ)[0])
    return Hct(hue, chroma, tone, rgb.alpha)
