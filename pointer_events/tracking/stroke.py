"""Per-pointer event sequences."""

from __future__ import annotations

import logging

from pointer_events.api.event_args import EventType, PointerEventArgs
from pointer_events.runtime.reconciler import reconcile

logger = logging.getLogger(__name__)

_TERMINAL_EVENT_TYPES = frozenset({EventType.POINTER_UP, EventType.POINTER_CANCEL})


class PointerStroke:
    """Ordered events sharing one pointer id, from first contact to release.

    The stroke adopts the pointer id of its first event. It is finished once a
    ``pointerup`` or ``pointercancel`` event is added; after that ``add()``
    rejects every event. Sequence and timestamp bounds are kept incrementally.
    """

    def __init__(self) -> None:
        self._pointer_id: int | None = None
        self._events: list[PointerEventArgs] = []
        self._min_sequence_index: int | None = None
        self._max_sequence_index: int | None = None
        self._min_timestamp_micros: int | None = None
        self._max_timestamp_micros: int | None = None
        self._expecting_updates = 0
        self._finished = False
        self._cancelled = False

    def add(self, event: PointerEventArgs) -> bool:
        """Append event; return False and leave the stroke unchanged if rejected.

        A ``pointerupdate`` event corrects the stored event with the same
        sequence index instead of being appended.
        """
        if self._finished:
            return False
        if self._pointer_id is not None and event.pointer_id != self._pointer_id:
            return False
        if event.event_type == EventType.POINTER_UPDATE:
            return self.apply_update(event)
        if self._pointer_id is None:
            self._pointer_id = event.pointer_id
        self._events.append(event)
        self._track_bounds(event)
        if event.is_expecting_updates:
            self._expecting_updates += 1
        if event.event_type in _TERMINAL_EVENT_TYPES:
            self._finished = True
            self._cancelled = event.event_type == EventType.POINTER_CANCEL
        return True

    def apply_update(self, update: PointerEventArgs) -> bool:
        """Reconcile the stored event matching update's sequence index.

        Allowed on finished strokes, since measured values may arrive after
        the pointer was lifted.
        """
        if update.pointer_id != self._pointer_id:
            return False
        for index in range(len(self._events) - 1, -1, -1):
            stored = self._events[index]
            if stored.sequence_index != update.sequence_index or not stored.is_expecting_updates:
                continue
            result = reconcile(stored, update)
            if not result.updated or result.event is None:
                continue
            corrected = result.event.with_event_type(stored.event_type)
            self._events[index] = corrected
            if not corrected.is_expecting_updates:
                self._expecting_updates -= 1
            return True
        logger.debug(
            "pointer_stroke_update_unmatched pointer_id=%s sequence_index=%d",
            self._pointer_id,
            update.sequence_index,
        )
        return False

    @property
    def pointer_id(self) -> int | None:
        return self._pointer_id

    @property
    def events(self) -> tuple[PointerEventArgs, ...]:
        return tuple(self._events)

    @property
    def min_sequence_index(self) -> int | None:
        return self._min_sequence_index

    @property
    def max_sequence_index(self) -> int | None:
        return self._max_sequence_index

    @property
    def min_timestamp_micros(self) -> int | None:
        return self._min_timestamp_micros

    @property
    def max_timestamp_micros(self) -> int | None:
        return self._max_timestamp_micros

    def is_finished(self) -> bool:
        return self._finished

    def is_cancelled(self) -> bool:
        return self._cancelled

    def is_expecting_updates(self) -> bool:
        return self._expecting_updates > 0

    def size(self) -> int:
        return len(self._events)

    def empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return len(self._events)

    def _track_bounds(self, event: PointerEventArgs) -> None:
        sequence_index = event.sequence_index
        timestamp = event.timestamp_micros
        if self._min_sequence_index is None or sequence_index < self._min_sequence_index:
            self._min_sequence_index = sequence_index
        if self._max_sequence_index is None or sequence_index > self._max_sequence_index:
            self._max_sequence_index = sequence_index
        if self._min_timestamp_micros is None or timestamp < self._min_timestamp_micros:
            self._min_timestamp_micros = timestamp
        if self._max_timestamp_micros is None or timestamp > self._max_timestamp_micros:
            self._max_timestamp_micros = timestamp
