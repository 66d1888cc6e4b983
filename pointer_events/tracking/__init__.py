"""Event grouping helpers: strokes, stroke history and per-pointer collections."""

from pointer_events.tracking.collection import PointerEventCollection
from pointer_events.tracking.stroke import PointerStroke
from pointer_events.tracking.stroke_tracker import DEFAULT_STROKE_TIMEOUT_MS, StrokeTracker

__all__ = [
    "DEFAULT_STROKE_TIMEOUT_MS",
    "PointerEventCollection",
    "PointerStroke",
    "StrokeTracker",
]
