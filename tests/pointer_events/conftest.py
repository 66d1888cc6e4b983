from __future__ import annotations

from pointer_events.api.event_args import DeviceType, EventArgs, EventType, PointerEventArgs
from pointer_events.api.geometry import Point, Vec2


class FakeNanoClock:
    """Manually advanced nanosecond time source."""

    def __init__(self, start_ns: int = 0) -> None:
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance_micros(self, micros: int) -> None:
        self.now_ns += micros * 1000


class RecordingListener:
    def __init__(self, *, consume: bool = False) -> None:
        self.consume = consume
        self.calls: list[tuple[str, str, int]] = []

    def _record(self, callback: str, event: PointerEventArgs) -> bool:
        self.calls.append((callback, event.event_type, event.pointer_id))
        return self.consume

    def on_pointer_down(self, event: PointerEventArgs) -> bool:
        return self._record("down", event)

    def on_pointer_up(self, event: PointerEventArgs) -> bool:
        return self._record("up", event)

    def on_pointer_move(self, event: PointerEventArgs) -> bool:
        return self._record("move", event)

    def on_pointer_cancel(self, event: PointerEventArgs) -> bool:
        return self._record("cancel", event)

    def on_pointer_update(self, event: PointerEventArgs) -> bool:
        return self._record("update", event)


def make_event(
    event_type: str = EventType.POINTER_MOVE,
    *,
    pointer_id: int = 1,
    sequence_index: int = 0,
    timestamp_micros: int = 0,
    x: float = 0.0,
    y: float = 0.0,
    pressure: float = 0.0,
    tilt_x_deg: float = 0.0,
    device_type: str = DeviceType.PEN,
    estimated: frozenset[str] = frozenset(),
    expecting: frozenset[str] = frozenset(),
) -> PointerEventArgs:
    return PointerEventArgs(
        base=EventArgs(event_type=event_type, timestamp_micros=timestamp_micros),
        point=Point(position=Vec2(x, y), pressure=pressure, tilt_x_deg=tilt_x_deg),
        pointer_id=pointer_id,
        sequence_index=sequence_index,
        device_type=device_type,
        estimated_properties=estimated,
        estimated_properties_expecting_updates=expecting,
    )
