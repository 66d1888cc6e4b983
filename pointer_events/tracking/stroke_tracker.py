"""Stroke history grouped by pointer id, with time-based eviction."""

from __future__ import annotations

import logging

from pointer_events.api.event_args import EventType, PointerEventArgs
from pointer_events.tracking.stroke import PointerStroke

logger = logging.getLogger(__name__)

DEFAULT_STROKE_TIMEOUT_MS = 5000


class StrokeTracker:
    """Collect events into strokes and drop strokes that went quiet.

    A new stroke starts for a pointer when it has none or its latest stroke is
    finished. ``pointerupdate`` events are routed to the stroke holding the
    matching sequence index, finished or not.
    """

    def __init__(self, *, timeout_millis: int = DEFAULT_STROKE_TIMEOUT_MS) -> None:
        self._timeout_micros = max(0, int(timeout_millis)) * 1000
        self._strokes: dict[int, list[PointerStroke]] = {}

    @property
    def timeout_millis(self) -> int:
        return self._timeout_micros // 1000

    def add(self, event: PointerEventArgs) -> bool:
        if event.event_type == EventType.POINTER_UPDATE:
            candidates = reversed(self._strokes.get(event.pointer_id, ()))
            return any(stroke.apply_update(event) for stroke in candidates)
        strokes = self._strokes.setdefault(event.pointer_id, [])
        if not strokes or strokes[-1].is_finished():
            strokes.append(PointerStroke())
        return strokes[-1].add(event)

    def update(self, now_micros: int) -> int:
        """Evict strokes whose newest event is older than the timeout.

        Returns the number of strokes removed.
        """
        cutoff = int(now_micros) - self._timeout_micros
        removed = 0
        for pointer_id in list(self._strokes):
            kept = [
                stroke
                for stroke in self._strokes[pointer_id]
                if (stroke.max_timestamp_micros or 0) >= cutoff
            ]
            removed += len(self._strokes[pointer_id]) - len(kept)
            if kept:
                self._strokes[pointer_id] = kept
            else:
                del self._strokes[pointer_id]
        if removed:
            logger.debug("pointer_strokes_evicted count=%d cutoff_micros=%d", removed, cutoff)
        return removed

    def strokes(self, pointer_id: int | None = None) -> list[PointerStroke]:
        if pointer_id is not None:
            return list(self._strokes.get(pointer_id, ()))
        return [stroke for strokes in self._strokes.values() for stroke in strokes]

    def pointer_ids(self) -> list[int]:
        return list(self._strokes)

    def clear(self) -> None:
        self._strokes.clear()
