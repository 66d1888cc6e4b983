"""Raw input shapes supplied by the host window/input system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pointer_events.api.geometry import Vec2


class MouseEventKind(StrEnum):
    PRESSED = "pressed"
    RELEASED = "released"
    MOVED = "moved"
    DRAGGED = "dragged"
    SCROLLED = "scrolled"
    ENTERED = "entered"
    EXITED = "exited"


class TouchEventKind(StrEnum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"
    DOUBLE_TAP = "double_tap"


@dataclass(frozen=True, slots=True)
class RawMouseEvent:
    """Mouse callback payload in window coordinates."""

    kind: MouseEventKind
    position: Vec2
    button: int = 0
    buttons: int = 0
    modifiers: int = 0
    scroll_x: float = 0.0
    scroll_y: float = 0.0


@dataclass(frozen=True, slots=True)
class RawTouchEvent:
    """Touch callback payload for one contact slot."""

    kind: TouchEventKind
    slot_id: int
    position: Vec2
    pressure: float | None = None
    device_id: int = 0
    major_axis: float | None = None
    minor_axis: float | None = None
    angle_deg: float = 0.0
    modifiers: int = 0


@dataclass(frozen=True, slots=True)
class RawPenEvent:
    """Stylus callback payload.

    ``sequence_index`` and the estimation sets are forwarded as-is so later
    corrections can be matched against this sample.
    """

    kind: TouchEventKind
    position: Vec2
    precise_position: Vec2 | None = None
    pressure: float | None = None
    tangential_pressure: float = 0.0
    twist_deg: float = 0.0
    tilt_x_deg: float = 0.0
    tilt_y_deg: float = 0.0
    device_id: int = 0
    button: int = 0
    buttons: int | None = None
    modifiers: int = 0
    sequence_index: int = 0
    estimated_properties: frozenset[str] = field(default_factory=frozenset)
    estimated_properties_expecting_updates: frozenset[str] = field(default_factory=frozenset)


__all__ = ["MouseEventKind", "RawMouseEvent", "RawPenEvent", "RawTouchEvent", "TouchEventKind"]
