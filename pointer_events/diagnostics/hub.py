"""Pointer diagnostics hub."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pointer_events.api.event_args import PointerEventArgs
from pointer_events.diagnostics.event import DiagnosticEvent, utc_now_iso
from pointer_events.diagnostics.ring_buffer import RingBuffer

Subscriber = Callable[[DiagnosticEvent], None]


class DiagnosticHub:
    """Collects trace events from dispatch and reconciliation paths."""

    def __init__(
        self,
        *,
        capacity: int = 1_000,
        enabled: bool = True,
        category_allowlist: tuple[str, ...] = (),
    ) -> None:
        self._enabled = bool(enabled)
        self._buffer = RingBuffer[DiagnosticEvent](capacity=capacity)
        self._subscribers: dict[int, Subscriber] = {}
        self._next_subscriber_id = 1
        self._tick = 0
        self._category_allowlist = tuple(
            str(item).strip().lower() for item in category_allowlist if str(item).strip()
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def emit(self, event: DiagnosticEvent) -> None:
        if not self._enabled:
            return
        if self._category_allowlist and event.category not in self._category_allowlist:
            return
        self._buffer.append(event)
        for callback in tuple(self._subscribers.values()):
            callback(event)

    def emit_pointer(
        self,
        name: str,
        event: PointerEventArgs,
        *,
        category: str = "pointer",
        level: str = "info",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Record one trace entry describing a pointer event."""
        if not self._enabled:
            return
        self._tick += 1
        self.emit(
            DiagnosticEvent(
                ts_utc=utc_now_iso(),
                tick=self._tick,
                category=str(category).strip().lower(),
                name=name,
                level=level,
                pointer_id=event.pointer_id,
                event_type=event.event_type,
                metadata=dict(metadata or {}),
            )
        )

    def subscribe(self, callback: Subscriber) -> int:
        token = self._next_subscriber_id
        self._next_subscriber_id += 1
        self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        self._subscribers.pop(token, None)

    def clear(self) -> None:
        self._buffer.clear()

    def snapshot(
        self,
        *,
        limit: int | None = None,
        name: str | None = None,
        pointer_id: int | None = None,
    ) -> list[DiagnosticEvent]:
        events = self._buffer.snapshot(limit=limit)
        if name is not None:
            events = [event for event in events if event.name == name]
        if pointer_id is not None:
            events = [event for event in events if event.pointer_id == pointer_id]
        return events
