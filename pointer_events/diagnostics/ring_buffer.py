"""Bounded trace buffer for recent pointer diagnostics."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Drop-oldest buffer with O(1) append."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._items: deque[T] = deque(maxlen=int(capacity))

    @property
    def capacity(self) -> int:
        return int(self._items.maxlen or 0)

    @property
    def size(self) -> int:
        return len(self._items)

    def append(self, value: T) -> None:
        self._items.append(value)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self, *, limit: int | None = None) -> list[T]:
        out = list(self._items)
        if limit is None or limit >= len(out):
            return out
        return out[-max(0, int(limit)) :] if limit > 0 else []
