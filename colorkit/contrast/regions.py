"""Contrast region tracing in the fixed-hue lightness/chroma plane.

Samples a grid of colors at one hue (rows of constant lightness, each row
spanning chroma 0 up to that row's gamut boundary), classifies every sample
as passing or failing a contrast threshold against a reference color, and
extracts the pass/fail boundary with marching squares.

Grid layout, for row i (lightness) and column j (chroma fraction):

    v3 (i+1, j) ---- e2 ---- v2 (i+1, j+1)
        |                        |
       e3                       e1
        |                        |
    v0 (i, j) ------ e0 ---- v1 (i, j+1)

Corners are visited counter-clockwise (v0, v1, v2, v3). A boundary segment
starts on an edge where the walk steps from a passing to a failing corner
and ends on an edge where it steps back, so the passing side is always on
the left of the segment. Neighbouring cells traverse a shared edge in
opposite directions, which makes the segments chain head-to-tail.

Saddle cells (diagonal corners agree, adjacent corners disagree) are
resolved with the mean of the four corner values: when the mean passes,
the passing corners are joined through the cell centre.
"""

from __future__ import annotations

import logging
import math
from typing import Literal, Optional

import numpy as np

from colorkit import defaults
from colorkit.colorspace.gamut import check_steps, max_chroma_for_lh
from colorkit.colorspace.oklch import normalize_hue
from colorkit.errors import SamplingError
from colorkit.types import Color, ContrastRegionPoint, GamutTarget
from .metric import apca_from_luminance, apca_linear_luminance, linear_luminance, ratio_from_luminance

logger = logging.getLogger(__name__)

ContrastLevel = Literal['AA', 'AAA']
ContrastMetric = Literal['wcag', 'apca']
EdgeInterpolation = Literal['linear', 'midpoint']

_LEVEL_THRESHOLDS = {
    'wcag': {'AA': defaults.WCAG_AA, 'AAA': defaults.WCAG_AAA},
    'apca': {'AA': defaults.APCA_AA, 'AAA': defaults.APCA_AAA},
}

# Smallest meaningful explicit threshold per metric (exclusive)
_THRESHOLD_FLOOR = {'wcag': 1.0, 'apca': 0.0}

_CALLER = 'contrast_region_paths()'


def resolve_threshold(
    level: Optional[str] = None,
    threshold: Optional[float] = None,
    metric: str = defaults.DEFAULT_CONTRAST_METRIC,
) -> float:
    """Explicit threshold if given, else the threshold of the named level."""
    if metric not in _LEVEL_THRESHOLDS:
        raise SamplingError(f"{_CALLER} metric must be 'wcag' or 'apca', got {metric!r}")

    if threshold is not None:
        floor = _THRESHOLD_FLOOR[metric]
        try:
            value = float(threshold)
        except (TypeError, ValueError):
            raise SamplingError(f"{_CALLER} requires threshold > {floor:g}, got {threshold!r}") from None
        if not math.isfinite(value) or value <= floor:
            raise SamplingError(f"{_CALLER} requires threshold > {floor:g}, got {threshold!r}")
        return value

    level = defaults.DEFAULT_CONTRAST_LEVEL if level is None else level
    levels = _LEVEL_THRESHOLDS[metric]
    if level not in levels:
        raise SamplingError(f"{_CALLER} level must be 'AA' or 'AAA', got {level!r}")
    return levels[level]


def _contrast_field(reference: Color, L: np.ndarray, C: np.ndarray, H: np.ndarray, metric: str) -> np.ndarray:
    """Continuous contrast value of every sample against the reference."""
    if metric == 'apca':
        # Sample as text on the reference background; polarity does not matter
        bg_y = apca_linear_luminance(reference.l, reference.c, reference.h)
        return np.abs(apca_from_luminance(apca_linear_luminance(L, C, H), bg_y))

    ref_y = linear_luminance(reference.l, reference.c, reference.h)
    return np.asarray(ratio_from_luminance(linear_luminance(L, C, H), ref_y))


class _Crossings:
    """Boundary crossing point on each grid edge, computed once per edge.

    Edge keys: ('c', i, j) joins (i, j)-(i, j+1); ('l', i, j) joins
    (i, j)-(i+1, j).
    """

    def __init__(self, L, C, values, threshold, midpoint):
        self.L = L
        self.C = C
        self.values = values
        self.threshold = threshold
        self.midpoint = midpoint
        self._cache: dict[tuple, ContrastRegionPoint] = {}

    def point(self, key: tuple) -> ContrastRegionPoint:
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        axis, i, j = key
        a = (i, j)
        b = (i, j + 1) if axis == 'c' else (i + 1, j)

        va, vb = float(self.values[a]), float(self.values[b])
        if self.midpoint or va == vb:
            t = 0.5
        else:
            t = min(max((self.threshold - va) / (vb - va), 0.0), 1.0)

        la, ca = float(self.L[a]), float(self.C[a])
        lb, cb = float(self.L[b]), float(self.C[b])
        pt = ContrastRegionPoint(la + (lb - la) * t, ca + (cb - ca) * t)
        self._cache[key] = pt
        return pt


def _cell_segments(passed: np.ndarray, values: np.ndarray, threshold: float, i: int, j: int):
    """Oriented (start_edge, end_edge) key pairs for one cell."""
    corners = ((i, j), (i, j + 1), (i + 1, j + 1), (i + 1, j))
    inside = [bool(passed[v]) for v in corners]
    if all(inside) or not any(inside):
        return []

    keys = (('c', i, j), ('l', i, j + 1), ('c', i + 1, j), ('l', i, j))
    starts = [k for k in range(4) if inside[k] and not inside[(k + 1) % 4]]
    ends = [k for k in range(4) if not inside[k] and inside[(k + 1) % 4]]

    if len(starts) == 1:
        return [(keys[starts[0]], keys[ends[0]])]

    # Saddle
    centre = sum(float(values[v]) for v in corners) / 4
    step = 1 if centre >= threshold else -1
    return [(keys[k], keys[(k + step) % 4]) for k in starts]


def _stitch(segments: list[tuple[tuple, tuple]]) -> list[list[tuple]]:
    """Chain oriented segments into edge-key polylines, in first-seen order."""
    by_start = {seg[0]: idx for idx, seg in enumerate(segments)}
    by_end = {seg[1]: idx for idx, seg in enumerate(segments)}
    used = [False] * len(segments)
    chains = []

    for idx in range(len(segments)):
        if used[idx]:
            continue

        # Walk back to the head of an open chain (a loop leads back to idx)
        head = idx
        while True:
            prev = by_end.get(segments[head][0])
            if prev is None:
                break
            if prev == idx:
                head = idx
                break
            head = prev

        chain = [segments[head][0]]
        cur = head
        while cur is not None and not used[cur]:
            used[cur] = True
            chain.append(segments[cur][1])
            cur = by_start.get(segments[cur][1])
        chains.append(chain)

    return chains


def contrast_region_paths(
    reference: Color,
    hue: float,
    *,
    level: Optional[ContrastLevel] = None,
    threshold: Optional[float] = None,
    gamut: GamutTarget = defaults.DEFAULT_GAMUT,
    lightness_steps: int = defaults.DEFAULT_LIGHTNESS_STEPS,
    chroma_steps: int = defaults.DEFAULT_CHROMA_STEPS,
    max_chroma: float = defaults.MAX_CHROMA,
    tolerance: float = defaults.DEFAULT_BOUNDARY_TOLERANCE,
    max_iterations: float = defaults.DEFAULT_BOUNDARY_MAX_ITERATIONS,
    alpha: float = 1.0,
    edge_interpolation: EdgeInterpolation = defaults.DEFAULT_EDGE_INTERPOLATION,
    metric: ContrastMetric = defaults.DEFAULT_CONTRAST_METRIC,
) -> list[list[ContrastRegionPoint]]:
    """Trace every boundary between passing and failing contrast at one hue.

    Args:
        reference: Color to measure contrast against (e.g. the background)
        hue: Hue of the sampled plane in degrees
        level: 'AA' or 'AAA' (default 'AA'); ignored when threshold is given
        threshold: Explicit threshold (ratio > 1 for wcag, Lc > 0 for apca)
        gamut: Gamut clipping each lightness row
        lightness_steps: Rows, evenly spaced over L in [0, 1] (>= 2)
        chroma_steps: Samples per row from 0 to the row's max chroma (>= 2)
        max_chroma, tolerance, max_iterations: Boundary search controls
        alpha: Opacity of sampled colors (contrast ignores opacity)
        edge_interpolation: 'linear' (interpolate the contrast value along
            each crossed edge) or 'midpoint'
        metric: 'wcag' ratio, or 'apca' with |Lc| of the sample as text on
            the reference

    Returns:
        Polylines of (l, c) points with the passing region on their left,
        ordered by the row-major position of their first cell. Closed loops
        repeat their first point. Empty when the threshold is never crossed.

    Raises:
        SamplingError: On invalid steps, threshold, level, metric or
            interpolation mode.
    """
    n = check_steps(lightness_steps, _CALLER, 'lightness_steps')
    m = check_steps(chroma_steps, _CALLER, 'chroma_steps')
    thr = resolve_threshold(level, threshold, metric)
    if edge_interpolation not in ('linear', 'midpoint'):
        raise SamplingError(
            f"{_CALLER} edge_interpolation must be 'linear' or 'midpoint', got {edge_interpolation!r}"
        )

    hue = float(normalize_hue(float(hue)))
    row_L = np.arange(n, dtype=np.float64) / (n - 1)
    row_max = max_chroma_for_lh(
        row_L,
        np.full_like(row_L, hue),
        gamut=gamut,
        tolerance=tolerance,
        max_iterations=max_iterations,
        max_chroma=max_chroma,
    )
    fractions = np.arange(m, dtype=np.float64) / (m - 1)

    L = np.repeat(row_L[:, None], m, axis=1)
    C = row_max[:, None] * fractions[None, :]
    H = np.full_like(L, hue)

    values = _contrast_field(reference, L, C, H, metric)
    passed = values >= thr

    if passed.all() or not passed.any():
        logger.debug("Contrast grid %dx%d at hue %.2f never crosses %.3f", n, m, hue, thr)
        return []

    segments = []
    for i in range(n - 1):
        for j in range(m - 1):
            segments.extend(_cell_segments(passed, values, thr, i, j))

    crossings = _Crossings(L, C, values, thr, midpoint=edge_interpolation == 'midpoint')
    paths = [[crossings.point(key) for key in chain] for chain in _stitch(segments)]

    logger.debug(
        "Traced %d contrast path(s) from %d segments on a %dx%d grid (hue %.2f, threshold %.3f)",
        len(paths), len(segments), n, m, hue, thr,
    )
    return paths


def contrast_region_path(reference: Color, hue: float, **options) -> list[ContrastRegionPoint]:
    """The longest traced path (most points; earliest on ties), or [] if none.

    Accepts the same keyword options as ``contrast_region_paths``.
    """
    paths = contrast_region_paths(reference, hue, **options)
    if not paths:
        return []
    return max(paths, key=len)
