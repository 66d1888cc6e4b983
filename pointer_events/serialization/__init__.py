"""Pointer event serialization."""

from pointer_events.serialization.json_codec import dumps_bytes, dumps_text, loads
from pointer_events.serialization.pointer_json import (
    PointerCodecError,
    dumps_pointer_event,
    loads_pointer_event,
    pointer_event_from_dict,
    pointer_event_to_dict,
)

__all__ = [
    "PointerCodecError",
    "dumps_bytes",
    "dumps_pointer_event",
    "dumps_text",
    "loads",
    "loads_pointer_event",
    "pointer_event_from_dict",
    "pointer_event_to_dict",
]
