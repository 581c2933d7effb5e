"""Gamut membership, chroma-reduction mapping and boundary resolution.

Not all (L, C, H) combinations are displayable. High chroma at extreme
lightness is particularly problematic, and the usable chroma range depends on
hue and on the target gamut (sRGB or Display P3).

Membership is always tested on *linear*, unclamped device channels. Testing
an 8-bit round trip instead would clamp away the overflow and report
out-of-gamut colors as displayable.

Mapping holds L and H fixed and reduces C (binary search), which keeps the
perceived lightness and hue stable for interactive feedback.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import replace
from typing import Literal

import numpy as np

from colorkit import defaults
from colorkit.errors import SamplingError
from colorkit.types import GAMUT_TARGETS, BoundaryPoint, Color, GamutTarget
from . import _backend as B
from ._backend import Array
from .oklch import normalize_hue, oklch_to_linear_rgb
from .p3 import linear_srgb_to_linear_p3


def _check_gamut(gamut: str) -> None:
    if gamut not in GAMUT_TARGETS:
        raise ValueError(f"Unknown gamut: {gamut!r} (expected one of {GAMUT_TARGETS})")


def check_steps(steps, caller: str, name: str = 'steps') -> int:
    """Validate a sampling step count (an integer >= 2)."""
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral) or steps < 2:
        raise SamplingError(f"{caller} requires {name} >= 2 (an integer), got {steps!r}")
    return int(steps)


def _iteration_count(max_iterations: float) -> int:
    if not math.isfinite(max_iterations):
        raise SamplingError(f"max_iterations must be finite, got {max_iterations!r}")
    # At least one bisection step, even for fractional input
    return max(1, int(max_iterations))


# === Gamut checking ===

def linear_channels(L: Array, C: Array, H: Array, gamut: GamutTarget = 'srgb') -> tuple[Array, Array, Array]:
    """OKLCH -> linear channels of the target gamut (unclamped)."""
    _check_gamut(gamut)
    r, g, b = oklch_to_linear_rgb(L, C, H)
    if gamut == 'display-p3':
        r, g, b = linear_srgb_to_linear_p3(r, g, b)
    return r, g, b


def is_in_gamut(
    L: Array,
    C: Array,
    H: Array,
    gamut: GamutTarget = 'srgb',
    epsilon: float = defaults.GAMUT_EPSILON,
) -> Array:
    """Check if OKLCH values fall inside the target gamut (all linear channels in [0,1])."""
    lo, hi = -epsilon, 1 + epsilon
    r, g, b = linear_channels(L, C, H, gamut)
    return B.all_of(r >= lo, r <= hi, g >= lo, g <= hi, b >= lo, b <= hi)


def in_gamut(color: Color, gamut: GamutTarget = 'srgb') -> bool:
    """Check whether a Color is displayable in the target gamut."""
    return bool(is_in_gamut(color.l, color.c, color.h, gamut))


def in_srgb_gamut(color: Color) -> bool:
    return in_gamut(color, 'srgb')


def in_p3_gamut(color: Color) -> bool:
    return in_gamut(color, 'display-p3')


# === Gamut mapping ===

def to_gamut(color: Color, gamut: GamutTarget = 'srgb') -> Color:
    """Bring a Color into the target gamut by reducing chroma.

    Lightness and hue are preserved exactly. Returns an unchanged copy when
    the color is already in gamut.
    """
    _check_gamut(gamut)
    if in_gamut(color, gamut):
        return replace(color)

    # No chroma budget at the lightness extremes
    if color.l <= 0 or color.l >= 1:
        return replace(color, c=0.0)

    lo, hi = 0.0, color.c
    mapped = replace(color, c=0.0)
    while hi - lo > defaults.GAMUT_MAP_TOLERANCE:
        mid = (lo + hi) / 2
        candidate = replace(color, c=mid)
        if in_gamut(candidate, gamut):
            lo = mid
            mapped = candidate
        else:
            hi = mid

    return mapped


def to_srgb_gamut(color: Color) -> Color:
    return to_gamut(color, 'srgb')


def to_p3_gamut(color: Color) -> Color:
    return to_gamut(color, 'display-p3')


# === Max chroma computation ===

def max_chroma_for_lh(
    L: Array,
    H: Array,
    gamut: GamutTarget = 'srgb',
    tolerance: float = defaults.DEFAULT_BOUNDARY_TOLERANCE,
    max_iterations: float = defaults.DEFAULT_BOUNDARY_MAX_ITERATIONS,
    max_chroma: float = defaults.MAX_CHROMA,
) -> Array:
    """Find the maximum in-gamut chroma for given L and H via binary search.

    Vectorized over L and H. Every element bisects the same [0, max_chroma]
    interval, so the interval width (and hence the stopping point) is shared
    and the result is independent of batch size.

    Args:
        L: Lightness, clamped to [0, 1]. Extremes have zero chroma.
        H: Hue in degrees (wrapped to [0, 360))
        gamut: 'srgb' or 'display-p3'
        tolerance: Stop once the search interval is this narrow
        max_iterations: Upper bound on bisection steps (at least 1 is run)
        max_chroma: Search ceiling. Returned as-is wherever it is in gamut.

    Returns:
        Lower (in-gamut) bound of the final interval per element.
    """
    _check_gamut(gamut)
    iterations = _iteration_count(max_iterations)

    L = B.clip(B.asarray(L), 0.0, 1.0)
    H = normalize_hue(B.asarray(H))
    if not B.is_torch(L):
        L, H = np.broadcast_arrays(L, H)

    if not max_chroma > 0:
        return B.zeros_like(L)

    ceiling = B.full_like(L, float(max_chroma))
    ceiling_ok = is_in_gamut(L, ceiling, H, gamut)

    lo = B.zeros_like(L)
    hi = ceiling
    width = float(max_chroma)
    for _ in range(iterations):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid, H, gamut)
        lo = B.where(valid, mid, lo)
        hi = B.where(valid, hi, mid)
        width /= 2
        if width <= tolerance:
            break

    result = B.where(ceiling_ok, ceiling, lo)
    extreme = (L <= 0) | (L >= 1)
    return B.where(extreme, B.zeros_like(result), result)


def max_chroma_at(
    lightness: float,
    hue: float,
    *,
    gamut: GamutTarget = 'srgb',
    tolerance: float = defaults.DEFAULT_BOUNDARY_TOLERANCE,
    max_iterations: float = defaults.DEFAULT_BOUNDARY_MAX_ITERATIONS,
    max_chroma: float = defaults.MAX_CHROMA,
    alpha: float = 1.0,
) -> float:
    """Maximum in-gamut chroma at one lightness/hue.

    ``alpha`` is accepted for signature parity with the sampling helpers;
    opacity does not affect gamut membership. Identical inputs always give
    bit-identical output.
    """
    return float(max_chroma_for_lh(
        float(lightness),
        float(hue),
        gamut=gamut,
        tolerance=tolerance,
        max_iterations=max_iterations,
        max_chroma=max_chroma,
    ))


# === Boundary sampling ===

def _lightness_samples(steps: int) -> np.ndarray:
    return np.arange(steps + 1, dtype=np.float64) / steps


def gamut_boundary_path(
    hue: float,
    *,
    gamut: GamutTarget = 'srgb',
    steps: int = defaults.DEFAULT_BOUNDARY_STEPS,
    tolerance: float = defaults.DEFAULT_BOUNDARY_TOLERANCE,
    max_iterations: float = defaults.DEFAULT_BOUNDARY_MAX_ITERATIONS,
    max_chroma: float = defaults.MAX_CHROMA,
    alpha: float = 1.0,
) -> list[BoundaryPoint]:
    """Sample the gamut boundary curve of one hue plane.

    Returns ``steps + 1`` points at evenly spaced lightness from 0 to 1
    inclusive, in ascending lightness order.
    """
    steps = check_steps(steps, 'gamut_boundary_path()')
    L = _lightness_samples(steps)
    C = max_chroma_for_lh(
        L,
        np.full_like(L, float(hue)),
        gamut=gamut,
        tolerance=tolerance,
        max_iterations=max_iterations,
        max_chroma=max_chroma,
    )
    return [BoundaryPoint(float(l), float(c)) for l, c in zip(L, C)]


def chroma_band(
    hue: float,
    requested_chroma: float,
    *,
    mode: Literal['clamped', 'proportional'] = 'clamped',
    gamut: GamutTarget = 'srgb',
    steps: int = defaults.DEFAULT_BOUNDARY_STEPS,
    selected_lightness: float = 0.5,
    tolerance: float = defaults.DEFAULT_BOUNDARY_TOLERANCE,
    max_iterations: float = defaults.DEFAULT_BOUNDARY_MAX_ITERATIONS,
    max_chroma: float = defaults.MAX_CHROMA,
    alpha: float = 1.0,
) -> list[Color]:
    """Tonal strip of in-gamut colors from black to white at one hue.

    Modes:
        clamped: keep the requested chroma, capped by the boundary per step
        proportional: keep the requested/boundary ratio measured at
            ``selected_lightness`` across the whole strip
    """
    if not math.isfinite(requested_chroma):
        raise SamplingError("chroma_band() requires a finite requested_chroma")
    steps = check_steps(steps, 'chroma_band()')
    if mode not in ('clamped', 'proportional'):
        raise ValueError("chroma_band() mode must be 'clamped' or 'proportional'")

    hue = float(normalize_hue(float(hue)))
    bounds = dict(gamut=gamut, tolerance=tolerance, max_iterations=max_iterations, max_chroma=max_chroma)
    L = _lightness_samples(steps)
    boundary = max_chroma_for_lh(L, np.full_like(L, hue), **bounds)

    requested = max(float(requested_chroma), 0.0)
    if mode == 'clamped':
        C = np.minimum(boundary, requested)
    else:
        selected_max = max_chroma_at(selected_lightness, hue, **bounds)
        ratio = min(1.0, requested / selected_max) if selected_max > 0 else 0.0
        C = boundary * ratio

    return [Color(float(l), float(c), hue, alpha) for l, c in zip(L, C)]
