"""Background contrast region tracing for interactive callers.

Tracing a contrast region costs one conversion plus one gamut search per grid
sample, too slow to run on a UI thread mid-drag. Requests go to a single
background thread and are tagged with a caller-chosen id. There is no
cancellation: a superseded request still runs, and its response is dropped
when it arrives.

Messages are plain dicts so they can cross a process or network boundary:

    request  = {id, reference, hue, axes, options}
    response = {id, paths}  or  {id, paths: [], error}

Traced (l, c) points are projected into the caller's area coordinates: x and
y normalized to [0, 1] over each axis range, with y pointing down.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Optional

from colorkit import defaults
from colorkit.contrast.regions import contrast_region_paths
from colorkit.css import parse
from colorkit.errors import ColorKitError, SamplingError
from colorkit.types import Color, ContrastRegionPoint

logger = logging.getLogger(__name__)

AREA_CHANNELS = ('l', 'c')

DEFAULT_AXIS_RANGES: dict[str, tuple[float, float]] = {
    'l': (0.0, 1.0),
    'c': (0.0, defaults.MAX_CHROMA),
}

TRACER_OPTIONS = frozenset({
    'level',
    'threshold',
    'gamut',
    'lightness_steps',
    'chroma_steps',
    'max_chroma',
    'tolerance',
    'max_iterations',
    'alpha',
    'edge_interpolation',
    'metric',
})


@dataclass(frozen=True)
class AxisSpec:
    """One axis of the color area: which channel it shows, over what range."""
    channel: str
    range: Optional[tuple[float, float]] = None

    def __post_init__(self):
        if self.channel not in AREA_CHANNELS:
            raise SamplingError(f"axis channel must be one of {AREA_CHANNELS}, got {self.channel!r}")
        if self.range is None:
            object.__setattr__(self, 'range', DEFAULT_AXIS_RANGES[self.channel])
            return
        lo, hi = (float(v) for v in self.range)
        if not (math.isfinite(lo) and math.isfinite(hi)) or lo == hi:
            raise SamplingError(f"axis range must be two distinct finite numbers, got {self.range!r}")
        object.__setattr__(self, 'range', (lo, hi))

    def normalize(self, value: float) -> float:
        lo, hi = self.range
        return min(max((value - lo) / (hi - lo), 0.0), 1.0)

    def to_dict(self) -> dict:
        return {'channel': self.channel, 'range': list(self.range)}

    @classmethod
    def from_dict(cls, data: dict) -> AxisSpec:
        return cls(data['channel'], tuple(data['range']) if data.get('range') is not None else None)


@dataclass(frozen=True)
class AxisConfig:
    """Channel layout of the area (x to the right, y upward in value)."""
    x: AxisSpec = field(default_factory=lambda: AxisSpec('l'))
    y: AxisSpec = field(default_factory=lambda: AxisSpec('c'))

    def __post_init__(self):
        if self.x.channel == self.y.channel:
            raise SamplingError(f"axes must show distinct channels, got {self.x.channel!r} twice")

    def to_dict(self) -> dict:
        return {'x': self.x.to_dict(), 'y': self.y.to_dict()}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> AxisConfig:
        if not data:
            return cls()
        return cls(AxisSpec.from_dict(data['x']), AxisSpec.from_dict(data['y']))


@dataclass(frozen=True)
class AreaPoint:
    """A traced point in normalized area coordinates, with its color values."""
    x: float
    y: float
    l: float
    c: float

    @classmethod
    def project(cls, point: ContrastRegionPoint, axes: AxisConfig) -> AreaPoint:
        values = {'l': point.l, 'c': point.c}
        return cls(
            x=axes.x.normalize(values[axes.x.channel]),
            y=1.0 - axes.y.normalize(values[axes.y.channel]),
            l=point.l,
            c=point.c,
        )

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'l': self.l, 'c': self.c}

    @classmethod
    def from_dict(cls, data: dict) -> AreaPoint:
        return cls(float(data['x']), float(data['y']), float(data['l']), float(data['c']))


def _color_from_data(data: Any) -> Color:
    if isinstance(data, Color):
        return data
    if isinstance(data, str):
        return parse(data)
    return Color(float(data['l']), float(data['c']), float(data['h']), float(data.get('alpha', 1.0)))


@dataclass(frozen=True)
class ContrastRegionRequest:
    id: int
    reference: Color
    hue: float
    axes: AxisConfig = field(default_factory=AxisConfig)
    options: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        ref = self.reference
        return {
            'id': self.id,
            'reference': {'l': ref.l, 'c': ref.c, 'h': ref.h, 'alpha': ref.alpha},
            'hue': self.hue,
            'axes': self.axes.to_dict(),
            'options': dict(self.options),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ContrastRegionRequest:
        """Build a request from a message dict.

        ``reference`` may be a {l, c, h, alpha} dict or any CSS color text.
        """
        return cls(
            id=int(data['id']),
            reference=_color_from_data(data['reference']),
            hue=float(data['hue']),
            axes=AxisConfig.from_dict(data.get('axes')),
            options=dict(data.get('options') or {}),
        )


@dataclass(frozen=True)
class ContrastRegionResponse:
    id: int
    paths: list[list[AreaPoint]]
    error: Optional[str] = None
    compute_time_ms: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            'id': self.id,
            'paths': [[p.to_dict() for p in path] for path in self.paths],
        }
        if self.error is not None:
            data['error'] = self.error
        if self.compute_time_ms is not None:
            data['compute_time_ms'] = self.compute_time_ms
        return data

    @classmethod
    def from_dict(cls, data: dict) -> ContrastRegionResponse:
        return cls(
            id=int(data['id']),
            paths=[[AreaPoint.from_dict(p) for p in path] for path in data.get('paths', [])],
            error=data.get('error'),
            compute_time_ms=data.get('compute_time_ms'),
        )


def handle_request(request: ContrastRegionRequest) -> ContrastRegionResponse:
    """Trace the requested region; failures become an error response."""
    start = time.perf_counter()
    try:
        unknown = set(request.options) - TRACER_OPTIONS
        if unknown:
            raise SamplingError(f"unknown tracer option(s): {', '.join(sorted(unknown))}")

        paths = contrast_region_paths(request.reference, request.hue, **request.options)
    except (ColorKitError, TypeError, ValueError) as e:
        logger.warning("Contrast region request %d rejected: %s", request.id, e)
        return ContrastRegionResponse(request.id, [], error=str(e))
    except Exception as e:
        logger.exception("Contrast region request %d failed", request.id)
        return ContrastRegionResponse(request.id, [], error=str(e) or type(e).__name__)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    projected = [[AreaPoint.project(p, request.axes) for p in path] for path in paths]
    logger.debug("Contrast region request %d: %d path(s) in %.1f ms", request.id, len(projected), elapsed_ms)
    return ContrastRegionResponse(request.id, projected, compute_time_ms=elapsed_ms)


def handle_message(message: dict) -> dict:
    """Dict-in, dict-out form of handle_request (malformed messages included)."""
    try:
        request = ContrastRegionRequest.from_dict(message)
    except (ColorKitError, KeyError, TypeError, ValueError) as e:
        request_id = message.get('id') if isinstance(message, dict) else None
        logger.warning("Malformed contrast region message (id=%r): %s", request_id, e)
        reason = f"missing field {e}" if isinstance(e, KeyError) else str(e)
        return {'id': request_id, 'paths': [], 'error': reason}
    return handle_request(request).to_dict()


class ContrastRegionWorker:
    """Runs contrast region requests on one background thread.

    Only the response to the most recently posted request is kept; responses
    to older requests are discarded when they complete.

    Example:
        with ContrastRegionWorker() as worker:
            worker.post(request)
            ...
            response = worker.poll()   # None until the latest request is done
    """

    def __init__(self):
        self.executor: ThreadPoolExecutor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='contrast-region'
        )
        self._lock = threading.Lock()
        self._latest_id: Optional[int] = None
        self._latest_response: Optional[ContrastRegionResponse] = None

    @property
    def latest_id(self) -> Optional[int]:
        with self._lock:
            return self._latest_id

    def post(self, request: ContrastRegionRequest) -> Future:
        """Queue a request; it supersedes every request posted before it."""
        with self._lock:
            self._latest_id = request.id
            self._latest_response = None
        return self.executor.submit(self._run, request)

    def _run(self, request: ContrastRegionRequest) -> ContrastRegionResponse:
        response = handle_request(request)
        # Stored before the future resolves, so poll() sees it once result() returns
        with self._lock:
            if response.id != self._latest_id:
                logger.debug("Discarding stale contrast region response %d (latest %r)",
                             response.id, self._latest_id)
            else:
                self._latest_response = response
        return response

    def poll(self) -> Optional[ContrastRegionResponse]:
        """Take the latest request's response, if it has arrived (once)."""
        with self._lock:
            response, self._latest_response = self._latest_response, None
        return response

    def shutdown(self, wait: bool = True) -> None:
        self.executor.shutdown(wait=wait)

    def __enter__(self) -> ContrastRegionWorker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
