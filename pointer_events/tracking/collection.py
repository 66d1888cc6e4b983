"""Pointer events grouped by pointer id."""

from __future__ import annotations

from pointer_events.api.event_args import PointerEventArgs


class PointerEventCollection:
    """Insertion-ordered event lists keyed by pointer id."""

    def __init__(self) -> None:
        self._events: list[PointerEventArgs] = []
        self._by_pointer_id: dict[int, list[PointerEventArgs]] = {}

    def size(self) -> int:
        return len(self._events)

    def empty(self) -> bool:
        return not self._events

    def clear(self) -> None:
        self._events.clear()
        self._by_pointer_id.clear()

    def num_pointers(self) -> int:
        return len(self._by_pointer_id)

    def has_pointer_id(self, pointer_id: int) -> bool:
        return pointer_id in self._by_pointer_id

    def add(self, event: PointerEventArgs) -> None:
        self._events.append(event)
        self._by_pointer_id.setdefault(event.pointer_id, []).append(event)

    def remove_events_for_pointer_id(self, pointer_id: int) -> None:
        if self._by_pointer_id.pop(pointer_id, None) is None:
            return
        self._events = [event for event in self._events if event.pointer_id != pointer_id]

    def events(self) -> list[PointerEventArgs]:
        return list(self._events)

    def events_for_pointer_id(self, pointer_id: int) -> list[PointerEventArgs]:
        return list(self._by_pointer_id.get(pointer_id, ()))

    def first_event_for_pointer_id(self, pointer_id: int) -> PointerEventArgs | None:
        events = self._by_pointer_id.get(pointer_id)
        return events[0] if events else None

    def last_event_for_pointer_id(self, pointer_id: int) -> PointerEventArgs | None:
        events = self._by_pointer_id.get(pointer_id)
        return events[-1] if events else None

    def __len__(self) -> int:
        return len(self._events)
