"""Unified pointer events for mouse, pen and touch input."""

from pointer_events.api import (
    DeviceType,
    EventType,
    Point,
    PointerEventArgs,
    PointShape,
    create_pointer_dispatcher,
    create_pointer_events_registry,
)

__all__ = [
    "DeviceType",
    "EventType",
    "Point",
    "PointShape",
    "PointerEventArgs",
    "create_pointer_dispatcher",
    "create_pointer_events_registry",
]
