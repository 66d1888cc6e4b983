"""Per-window pointer event source."""

from __future__ import annotations

import logging
from collections import OrderedDict

from pointer_events.api.dispatch import PointerDispatcher
from pointer_events.api.event_args import EventSourceHandle, PointerEventArgs
from pointer_events.api.raw_input import RawMouseEvent, RawPenEvent, RawTouchEvent
from pointer_events.runtime.dispatcher import RuntimePointerDispatcher
from pointer_events.runtime.normalizer import PointerNormalizer
from pointer_events.runtime.reconciler import reconcile

logger = logging.getLogger(__name__)

_PendingKey = tuple[int, int]


class PointerEventSource:
    """Normalize raw callbacks of one window and publish them as pointer events.

    Events that still expect estimated-property updates are remembered by
    ``(pointer_id, sequence_index)`` so a later measurement can be matched to
    them and republished as ``pointerupdate``.
    """

    def __init__(
        self,
        *,
        source: EventSourceHandle | None = None,
        normalizer: PointerNormalizer | None = None,
        dispatcher: PointerDispatcher | None = None,
        max_pending_estimates: int = 256,
    ) -> None:
        self._source = source or EventSourceHandle.create()
        self._normalizer = normalizer or PointerNormalizer(source=self._source)
        self._dispatcher = dispatcher or RuntimePointerDispatcher()
        self._max_pending_estimates = max(1, int(max_pending_estimates))
        self._pending: OrderedDict[_PendingKey, PointerEventArgs] = OrderedDict()

    @property
    def source(self) -> EventSourceHandle:
        return self._source

    @property
    def normalizer(self) -> PointerNormalizer:
        return self._normalizer

    @property
    def dispatcher(self) -> PointerDispatcher:
        return self._dispatcher

    def on_mouse_event(self, raw: RawMouseEvent) -> bool:
        """Normalize and dispatch one mouse callback. Return True if consumed."""
        return self.on_pointer_event(self._normalizer.normalize_mouse(raw))

    def on_touch_event(self, raw: RawTouchEvent) -> bool:
        event = self._normalizer.normalize_touch(raw)
        if event is None:
            return False
        return self.on_pointer_event(event)

    def on_pen_event(self, raw: RawPenEvent) -> bool:
        event = self._normalizer.normalize_pen(raw)
        if event is None:
            return False
        return self.on_pointer_event(event)

    def on_pointer_event(self, event: PointerEventArgs) -> bool:
        """Dispatch an already normalized event. Return True if consumed.

        An estimated event is kept for later correction only when no handler
        consumed it.
        """
        consumed = self._dispatcher.dispatch(event)
        if not consumed and event.is_expecting_updates:
            self._remember(event)
        return consumed

    def on_estimated_update(self, correction: PointerEventArgs) -> bool:
        """Correct a pending estimated event and republish it as pointerupdate.

        Returns False when no pending event matches or nothing was corrected.
        """
        key = (correction.pointer_id, correction.sequence_index)
        original = self._pending.get(key)
        if original is None:
            logger.debug(
                "pointer_update_without_pending pointer_id=%d sequence_index=%d",
                correction.pointer_id,
                correction.sequence_index,
            )
            return False
        result = reconcile(original, correction)
        if not result.updated or result.event is None:
            return False
        if result.event.is_expecting_updates:
            self._pending[key] = result.event
        else:
            del self._pending[key]
        self._dispatcher.dispatch(result.event)
        return True

    def pending_estimates(self) -> list[PointerEventArgs]:
        return list(self._pending.values())

    def reset(self) -> None:
        self._pending.clear()
        self._normalizer.reset()

    def _remember(self, event: PointerEventArgs) -> None:
        key = (event.pointer_id, event.sequence_index)
        self._pending[key] = event
        self._pending.move_to_end(key)
        while len(self._pending) > self._max_pending_estimates:
            evicted_key, _ = self._pending.popitem(last=False)
            logger.warning(
                "pointer_pending_estimate_evicted pointer_id=%d sequence_index=%d",
                evicted_key[0],
                evicted_key[1],
            )
