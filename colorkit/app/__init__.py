"""Application-side helpers built on the colorkit core."""

from .contrast_worker import (
    AreaPoint,
    AxisConfig,
    AxisSpec,
    ContrastRegionRequest,
    ContrastRegionResponse,
    ContrastRegionWorker,
    handle_message,
    handle_request,
)

__all__ = [
    'AreaPoint',
    'AxisConfig',
    'AxisSpec',
    'ContrastRegionRequest',
    'ContrastRegionResponse',
    'ContrastRegionWorker',
    'handle_message',
    'handle_request',
]
