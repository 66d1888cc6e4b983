"""Monotonic timestamp source for pointer events."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic_ns


class MicrosClock:
    """Monotonic microsecond clock that never runs backwards."""

    def __init__(self, *, time_source_ns: Callable[[], int] | None = None) -> None:
        self._time_source_ns = time_source_ns or monotonic_ns
        self._last_micros = 0

    def now_micros(self) -> int:
        """Return the current timestamp in microseconds."""
        micros = max(self._last_micros, int(self._time_source_ns()) // 1000)
        self._last_micros = micros
        return micros
