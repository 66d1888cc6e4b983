"""Translation of raw mouse, touch and pen signals into pointer events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from pointer_events.api.event_args import (
    DeviceType,
    EventArgs,
    EventSourceHandle,
    EventType,
    PointerEventArgs,
)
from pointer_events.api.geometry import Point, PointShape, ShapeType
from pointer_events.api.raw_input import (
    MouseEventKind,
    RawMouseEvent,
    RawPenEvent,
    RawTouchEvent,
    TouchEventKind,
)
from pointer_events.runtime.time import MicrosClock

logger = logging.getLogger(__name__)

# Pointer id ranges never overlap: mouse < pen < touch.
MOUSE_POINTER_ID = 1
PEN_POINTER_ID_BASE = 1 << 16
TOUCH_POINTER_ID_BASE = 1 << 20
DEFAULT_MAX_TOUCH_SLOTS = 256

ACTIVE_DEFAULT_PRESSURE = 0.5

_MOUSE_EVENT_TYPES: dict[MouseEventKind, str] = {
    MouseEventKind.PRESSED: EventType.POINTER_DOWN,
    MouseEventKind.RELEASED: EventType.POINTER_UP,
    MouseEventKind.MOVED: EventType.POINTER_MOVE,
    MouseEventKind.DRAGGED: EventType.POINTER_MOVE,
    MouseEventKind.SCROLLED: EventType.POINTER_SCROLL,
    MouseEventKind.ENTERED: EventType.POINTER_OVER,
    MouseEventKind.EXITED: EventType.POINTER_OUT,
}

_CONTACT_EVENT_TYPES: dict[TouchEventKind, str] = {
    TouchEventKind.DOWN: EventType.POINTER_DOWN,
    TouchEventKind.MOVE: EventType.POINTER_MOVE,
    TouchEventKind.UP: EventType.POINTER_UP,
    TouchEventKind.CANCEL: EventType.POINTER_CANCEL,
}


def touch_pointer_id(
    device_id: int,
    slot: int,
    *,
    max_touch_slots: int = DEFAULT_MAX_TOUCH_SLOTS,
) -> int:
    """Stable pointer id for one touch slot on one device."""
    return TOUCH_POINTER_ID_BASE + device_id * max_touch_slots + slot


def pen_pointer_id(device_id: int) -> int:
    return PEN_POINTER_ID_BASE + device_id


class _ContactTracker:
    """Active contacts of one device type and the current primary among them.

    The first contact that starts while no other contact is active becomes
    primary and stays primary until it ends. No new primary is assigned until
    every contact has ended.
    """

    def __init__(self) -> None:
        self.active: set[int] = set()
        self.primary: int | None = None

    def begin(self, pointer_id: int) -> bool:
        if not self.active:
            self.primary = pointer_id
        self.active.add(pointer_id)
        return self.primary == pointer_id

    def sample(self, pointer_id: int) -> bool:
        if pointer_id in self.active:
            return self.primary == pointer_id
        return not self.active

    def end(self, pointer_id: int) -> bool:
        was_primary = self.sample(pointer_id)
        self.active.discard(pointer_id)
        if self.primary == pointer_id:
            self.primary = None
        return was_primary


class PointerNormalizer:
    """Convert raw input callbacks of one event source into PointerEventArgs.

    One instance serves one window. It owns the active-contact bookkeeping
    used to decide ``is_primary`` for touch and pen pointers. The mouse is
    always primary; multiple mice are not distinguished.
    """

    def __init__(
        self,
        *,
        source: EventSourceHandle | None = None,
        clock: MicrosClock | None = None,
        max_touch_slots: int = DEFAULT_MAX_TOUCH_SLOTS,
    ) -> None:
        self._source = source
        self._clock = clock or MicrosClock()
        self._max_touch_slots = max(1, int(max_touch_slots))
        self._contacts: dict[str, _ContactTracker] = {
            DeviceType.TOUCH: _ContactTracker(),
            DeviceType.PEN: _ContactTracker(),
        }

    @property
    def source(self) -> EventSourceHandle | None:
        return self._source

    def active_pointer_ids(self, device_type: str) -> frozenset[int]:
        tracker = self._contacts.get(device_type)
        return frozenset(tracker.active) if tracker is not None else frozenset()

    def primary_pointer_id(self, device_type: str) -> int | None:
        if device_type == DeviceType.MOUSE:
            return MOUSE_POINTER_ID
        tracker = self._contacts.get(device_type)
        return tracker.primary if tracker is not None else None

    def reset(self) -> None:
        """Forget all active contacts."""
        for tracker in self._contacts.values():
            tracker.active.clear()
            tracker.primary = None

    def normalize_mouse(
        self,
        raw: RawMouseEvent,
        *,
        coalesced: Sequence[RawMouseEvent] = (),
        predicted: Sequence[RawMouseEvent] = (),
    ) -> PointerEventArgs:
        event_type = _MOUSE_EVENT_TYPES.get(raw.kind)
        if event_type is None:
            logger.warning("pointer_normalize_unknown_mouse_kind kind=%r", raw.kind)
            event_type = EventType.UNKNOWN
        detail: Any = 0
        if raw.kind == MouseEventKind.SCROLLED:
            detail = {"scroll_x": float(raw.scroll_x), "scroll_y": float(raw.scroll_y)}

        def build(sample: RawMouseEvent, **flags: bool) -> PointerEventArgs:
            return self._build(
                event_type=event_type,
                point=self._mouse_point(sample),
                pointer_id=MOUSE_POINTER_ID,
                device_id=0,
                pointer_index=-1,
                sequence_index=0,
                device_type=DeviceType.MOUSE,
                is_primary=True,
                button=int(sample.button),
                buttons=int(sample.buttons),
                modifiers=int(sample.modifiers),
                detail=detail,
                **flags,
            )

        return self._with_sub_events(raw, coalesced, predicted, build)

    def normalize_touch(
        self,
        raw: RawTouchEvent,
        *,
        coalesced: Sequence[RawTouchEvent] = (),
        predicted: Sequence[RawTouchEvent] = (),
    ) -> PointerEventArgs | None:
        """Return the pointer event for a touch callback.

        Double taps are gestures and produce no pointer event.
        """
        event_type = _CONTACT_EVENT_TYPES.get(raw.kind)
        if event_type is None:
            logger.debug("pointer_normalize_touch_ignored kind=%s slot=%s", raw.kind, raw.slot_id)
            return None
        device_id = self._non_negative(raw.device_id, "device_id")
        slot = self._touch_slot(raw.slot_id)
        pointer_id = touch_pointer_id(device_id, slot, max_touch_slots=self._max_touch_slots)
        is_primary = self._track_contact(DeviceType.TOUCH, raw.kind, pointer_id)
        in_contact = raw.kind in {TouchEventKind.DOWN, TouchEventKind.MOVE}

        def build(sample: RawTouchEvent, **flags: bool) -> PointerEventArgs:
            return self._build(
                event_type=event_type,
                point=self._touch_point(sample, in_contact=in_contact),
                pointer_id=pointer_id,
                device_id=device_id,
                pointer_index=slot,
                sequence_index=0,
                device_type=DeviceType.TOUCH,
                is_primary=is_primary,
                button=-1 if raw.kind == TouchEventKind.MOVE else 0,
                buttons=1 if in_contact else 0,
                modifiers=int(sample.modifiers),
                **flags,
            )

        return self._with_sub_events(raw, coalesced, predicted, build)

    def normalize_pen(
        self,
        raw: RawPenEvent,
        *,
        coalesced: Sequence[RawPenEvent] = (),
        predicted: Sequence[RawPenEvent] = (),
    ) -> PointerEventArgs | None:
        event_type = _CONTACT_EVENT_TYPES.get(raw.kind)
        if event_type is None:
            logger.debug("pointer_normalize_pen_ignored kind=%s", raw.kind)
            return None
        device_id = self._non_negative(raw.device_id, "device_id")
        pointer_id = pen_pointer_id(device_id % (TOUCH_POINTER_ID_BASE - PEN_POINTER_ID_BASE))
        in_contact = raw.kind == TouchEventKind.DOWN or (
            raw.kind == TouchEventKind.MOVE
            and pointer_id in self._contacts[DeviceType.PEN].active
        )
        is_primary = self._track_contact(DeviceType.PEN, raw.kind, pointer_id)

        def build(sample: RawPenEvent, **flags: bool) -> PointerEventArgs:
            buttons = sample.buttons if sample.buttons is not None else (1 if in_contact else 0)
            return self._build(
                event_type=event_type,
                point=self._pen_point(sample, in_contact=in_contact),
                pointer_id=pointer_id,
                device_id=device_id,
                pointer_index=-1,
                sequence_index=max(0, int(sample.sequence_index)),
                device_type=DeviceType.PEN,
                is_primary=is_primary,
                button=-1 if raw.kind == TouchEventKind.MOVE else int(sample.button),
                buttons=int(buttons),
                modifiers=int(sample.modifiers),
                estimated_properties=frozenset(sample.estimated_properties),
                estimated_properties_expecting_updates=frozenset(
                    sample.estimated_properties_expecting_updates
                ),
                **flags,
            )

        return self._with_sub_events(raw, coalesced, predicted, build)

    def _build(
        self,
        *,
        event_type: str,
        point: Point,
        pointer_id: int,
        device_id: int,
        pointer_index: int,
        sequence_index: int,
        device_type: str,
        is_primary: bool,
        button: int,
        buttons: int,
        modifiers: int,
        detail: Any = 0,
        is_coalesced: bool = False,
        is_predicted: bool = False,
        estimated_properties: frozenset[str] = frozenset(),
        estimated_properties_expecting_updates: frozenset[str] = frozenset(),
    ) -> PointerEventArgs:
        return PointerEventArgs(
            base=EventArgs(
                event_source=self._source,
                event_type=event_type,
                timestamp_micros=self._clock.now_micros(),
                detail=detail,
            ),
            point=point,
            pointer_id=pointer_id,
            device_id=device_id,
            pointer_index=pointer_index,
            sequence_index=sequence_index,
            device_type=device_type,
            is_coalesced=is_coalesced,
            is_predicted=is_predicted,
            is_primary=is_primary,
            button=button,
            buttons=buttons,
            modifiers=modifiers,
            estimated_properties=estimated_properties,
            estimated_properties_expecting_updates=(
                estimated_properties_expecting_updates & estimated_properties
            ),
        )

    @staticmethod
    def _with_sub_events(
        raw: Any,
        coalesced: Sequence[Any],
        predicted: Sequence[Any],
        build: Callable[..., PointerEventArgs],
    ) -> PointerEventArgs:
        coalesced_events = tuple(build(sample, is_coalesced=True) for sample in coalesced)
        event = build(raw)
        predicted_events = tuple(build(sample, is_predicted=True) for sample in predicted)
        return replace(
            event,
            coalesced_pointer_events=(*coalesced_events, event),
            predicted_pointer_events=predicted_events,
        )

    def _track_contact(self, device_type: str, kind: TouchEventKind, pointer_id: int) -> bool:
        tracker = self._contacts[device_type]
        if kind == TouchEventKind.DOWN:
            return tracker.begin(pointer_id)
        if kind in {TouchEventKind.UP, TouchEventKind.CANCEL}:
            return tracker.end(pointer_id)
        return tracker.sample(pointer_id)

    def _touch_slot(self, slot_id: int) -> int:
        slot = self._non_negative(slot_id, "slot_id")
        if slot >= self._max_touch_slots:
            logger.warning(
                "pointer_normalize_touch_slot_wrapped slot=%d max_slots=%d",
                slot,
                self._max_touch_slots,
            )
            slot %= self._max_touch_slots
        return slot

    @staticmethod
    def _non_negative(value: int, name: str) -> int:
        number = int(value)
        if number < 0:
            logger.warning("pointer_normalize_negative_field field=%s value=%d", name, number)
            return 0
        return number

    @staticmethod
    def _mouse_point(raw: RawMouseEvent) -> Point:
        active = raw.buttons != 0 or raw.kind in {MouseEventKind.PRESSED, MouseEventKind.DRAGGED}
        return Point(
            position=raw.position,
            pressure=ACTIVE_DEFAULT_PRESSURE if active else 0.0,
        )

    @staticmethod
    def _touch_point(raw: RawTouchEvent, *, in_contact: bool) -> Point:
        major = raw.major_axis if raw.major_axis is not None else 1.0
        minor = raw.minor_axis if raw.minor_axis is not None else major
        return Point(
            position=raw.position,
            shape=PointShape(
                shape_type=ShapeType.ELLIPSE,
                width=major,
                height=minor,
                angle_deg=raw.angle_deg,
            ),
            pressure=_pressure(raw.pressure, in_contact=in_contact),
        )

    @staticmethod
    def _pen_point(raw: RawPenEvent, *, in_contact: bool) -> Point:
        return Point(
            position=raw.position,
            precise_position=raw.precise_position,
            pressure=_pressure(raw.pressure, in_contact=in_contact),
            tangential_pressure=_in_range(
                "tangential_pressure", raw.tangential_pressure, 0.0, 1.0
            ),
            twist_deg=raw.twist_deg,
            tilt_x_deg=_in_range("tilt_x_deg", raw.tilt_x_deg, -90.0, 90.0),
            tilt_y_deg=_in_range("tilt_y_deg", raw.tilt_y_deg, -90.0, 90.0),
        )


def _pressure(raw: float | None, *, in_contact: bool) -> float:
    if raw is None:
        return ACTIVE_DEFAULT_PRESSURE if in_contact else 0.0
    return _in_range("pressure", raw, 0.0, 1.0)


def _in_range(name: str, value: float, low: float, high: float) -> float:
    number = float(value)
    if not low <= number <= high:
        clamped = min(high, max(low, number))
        logger.warning(
            "pointer_normalize_value_clamped field=%s value=%r clamped=%r", name, number, clamped
        )
        return clamped
    return number


__all__ = [
    "DEFAULT_MAX_TOUCH_SLOTS",
    "MOUSE_POINTER_ID",
    "PEN_POINTER_ID_BASE",
    "PointerNormalizer",
    "TOUCH_POINTER_ID_BASE",
    "pen_pointer_id",
    "touch_pointer_id",
]
