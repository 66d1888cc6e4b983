"""Public pointer event API contracts."""

from pointer_events.api.dispatch import (
    DEFAULT_PRIORITY,
    POINTER_EVENT_CHANNEL,
    SPECIFIC_CHANNELS,
    PointerDispatcher,
    PointerEventListener,
    PointerHandler,
    Subscription,
    create_pointer_dispatcher,
)
from pointer_events.api.event_args import (
    KNOWN_DEVICE_TYPES,
    DeviceType,
    EventArgs,
    EventSourceHandle,
    EventType,
    PointerEventArgs,
    PointerProperty,
)
from pointer_events.api.geometry import (
    Point,
    PointShape,
    ShapeType,
    Vec2,
    azimuth_altitude_from_tilt,
)
from pointer_events.api.logging import PointerLoggingConfig
from pointer_events.api.raw_input import (
    MouseEventKind,
    RawMouseEvent,
    RawPenEvent,
    RawTouchEvent,
    TouchEventKind,
)
from pointer_events.api.registry import create_pointer_events_registry

__all__ = [
    "DEFAULT_PRIORITY",
    "DeviceType",
    "EventArgs",
    "EventSourceHandle",
    "EventType",
    "KNOWN_DEVICE_TYPES",
    "MouseEventKind",
    "POINTER_EVENT_CHANNEL",
    "Point",
    "PointShape",
    "PointerDispatcher",
    "PointerEventArgs",
    "PointerEventListener",
    "PointerHandler",
    "PointerLoggingConfig",
    "PointerProperty",
    "RawMouseEvent",
    "RawPenEvent",
    "RawTouchEvent",
    "SPECIFIC_CHANNELS",
    "ShapeType",
    "Subscription",
    "TouchEventKind",
    "Vec2",
    "azimuth_altitude_from_tilt",
    "create_pointer_dispatcher",
    "create_pointer_events_registry",
]
