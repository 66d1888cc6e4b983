"""Pointer event records.

Modeled on W3C Pointer Events, see https://w3c.github.io/pointerevents/.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import Any

from pointer_events.api.geometry import Point, Vec2


class EventType:
    """Canonical pointer event type strings."""

    UNKNOWN = "unknown"
    POINTER_OVER = "pointerover"
    POINTER_ENTER = "pointerenter"
    POINTER_DOWN = "pointerdown"
    POINTER_MOVE = "pointermove"
    POINTER_UP = "pointerup"
    POINTER_CANCEL = "pointercancel"
    POINTER_UPDATE = "pointerupdate"
    POINTER_OUT = "pointerout"
    POINTER_LEAVE = "pointerleave"
    GOT_POINTER_CAPTURE = "gotpointercapture"
    LOST_POINTER_CAPTURE = "lostpointercapture"
    # Not part of W3C Pointer Events.
    POINTER_SCROLL = "pointerscroll"


class DeviceType:
    """Pointer device type strings."""

    MOUSE = "mouse"
    PEN = "pen"
    TOUCH = "touch"
    UNKNOWN = "unknown"


KNOWN_DEVICE_TYPES: frozenset[str] = frozenset(
    {DeviceType.MOUSE, DeviceType.PEN, DeviceType.TOUCH, DeviceType.UNKNOWN}
)


class PointerProperty:
    """Names of properties that may be published as estimates."""

    POSITION = "position"
    PRESSURE = "pressure"
    TILT_X = "tilt_x"
    TILT_Y = "tilt_y"


_SOURCE_IDS = itertools.count(1)


@dataclass(frozen=True, slots=True, order=True)
class EventSourceHandle:
    """Opaque identity of the window or device that produced an event."""

    id: int
    label: str = field(default="", compare=False)

    @classmethod
    def create(cls, label: str = "") -> EventSourceHandle:
        return cls(next(_SOURCE_IDS), label)


@dataclass(frozen=True, slots=True)
class EventArgs:
    """Generic timestamped event record, loosely based on DOM events."""

    event_source: EventSourceHandle | None = None
    event_type: str = EventType.UNKNOWN
    timestamp_micros: int = 0
    detail: Any = 0

    @property
    def timestamp_millis(self) -> int:
        return self.timestamp_micros // 1000


@dataclass(frozen=True, slots=True)
class PointerEventArgs:
    """All arguments of one pointer event.

    ``pointer_id`` is unique among pointers active at the same time and may be
    reused once a pointer is released. ``sequence_index`` increases
    monotonically for one physical contact, or is 0 when unsupported.
    ``coalesced_pointer_events`` holds the samples merged into this delivery,
    ending with a copy of this event. ``predicted_pointer_events`` holds
    samples expected before the next delivery.
    """

    base: EventArgs = field(default_factory=EventArgs)
    point: Point = field(default_factory=Point)
    pointer_id: int = 0
    device_id: int = 0
    pointer_index: int = 0
    sequence_index: int = 0
    device_type: str = DeviceType.UNKNOWN
    is_coalesced: bool = False
    is_predicted: bool = False
    is_primary: bool = False
    button: int = 0
    buttons: int = 0
    modifiers: int = 0
    coalesced_pointer_events: tuple[PointerEventArgs, ...] = ()
    predicted_pointer_events: tuple[PointerEventArgs, ...] = ()
    estimated_properties: frozenset[str] = frozenset()
    estimated_properties_expecting_updates: frozenset[str] = frozenset()

    @property
    def event_source(self) -> EventSourceHandle | None:
        return self.base.event_source

    @property
    def event_type(self) -> str:
        return self.base.event_type

    @property
    def timestamp_micros(self) -> int:
        return self.base.timestamp_micros

    @property
    def timestamp_millis(self) -> int:
        return self.base.timestamp_millis

    @property
    def detail(self) -> Any:
        return self.base.detail

    @property
    def position(self) -> Vec2:
        return self.point.position

    @property
    def is_estimated(self) -> bool:
        return bool(self.estimated_properties)

    @property
    def is_expecting_updates(self) -> bool:
        return bool(self.estimated_properties_expecting_updates)

    def with_event_type(self, event_type: str) -> PointerEventArgs:
        """Return a copy of this event with a new event type."""
        return replace(self, base=replace(self.base, event_type=event_type))

    def describe(self) -> str:
        """Return a multi-line debug dump."""
        return "\n".join(
            (
                "------------",
                f"     Source: {self.event_source}",
                f"      Event: {self.event_type}",
                f"  Timestamp: {self.timestamp_millis}",
                f" Pointer Id: {self.pointer_id}",
                f"  Device Id: {self.device_id}",
                f"Device Type: {self.device_type}",
                f"     Button: {self.button}",
                f"    Buttons: {self.buttons:b}",
                f"  Modifiers: {self.modifiers:b}",
                f"Touch Index: {self.pointer_index}",
                f"Sequence Id: {self.sequence_index}",
            )
        )


__all__ = [
    "DeviceType",
    "EventArgs",
    "EventSourceHandle",
    "EventType",
    "KNOWN_DEVICE_TYPES",
    "PointerEventArgs",
    "PointerProperty",
]
