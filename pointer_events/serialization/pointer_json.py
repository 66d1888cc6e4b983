"""JSON form of pointer events.

Derived values (axis-aligned shape size, azimuth, altitude) are not written;
they are recomputed from the persisted fields on load. The event source is an
in-process identity and is not persisted either.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pointer_events.api.event_args import (
    KNOWN_DEVICE_TYPES,
    DeviceType,
    EventArgs,
    EventType,
    PointerEventArgs,
)
from pointer_events.api.geometry import Point, PointShape, ShapeType, Vec2
from pointer_events.serialization.json_codec import dumps_text, loads


logger = logging.getLogger(__name__)


class PointerCodecError(ValueError):
    """Raised when a payload is not a JSON object."""


def vec2_to_dict(value: Vec2) -> dict[str, float]:
    return {"x": value.x, "y": value.y}


def vec2_from_dict(payload: Any) -> Vec2:
    if not isinstance(payload, Mapping):
        return Vec2()
    return Vec2(_float(payload, "x", 0.0), _float(payload, "y", 0.0))


def shape_to_dict(shape: PointShape) -> dict[str, Any]:
    return {
        "shape_type": shape.shape_type.value,
        "width": shape.width,
        "height": shape.height,
        "width_tolerance": shape.width_tolerance,
        "height_tolerance": shape.height_tolerance,
        "angle_deg": shape.angle_deg,
    }


def shape_from_dict(payload: Any) -> PointShape:
    if not isinstance(payload, Mapping):
        return PointShape()
    return PointShape(
        shape_type=_shape_type(payload.get("shape_type", ShapeType.ELLIPSE.value)),
        width=_float(payload, "width", 1.0),
        height=_float(payload, "height", 1.0),
        width_tolerance=_float(payload, "width_tolerance", 0.0),
        height_tolerance=_float(payload, "height_tolerance", 0.0),
        angle_deg=_float(payload, "angle_deg", 0.0),
    )


def point_to_dict(point: Point) -> dict[str, Any]:
    return {
        "position": vec2_to_dict(point.position),
        "precise_position": vec2_to_dict(point.precise_position or point.position),
        "shape": shape_to_dict(point.shape),
        "pressure": point.pressure,
        "tangential_pressure": point.tangential_pressure,
        "twist_deg": point.twist_deg,
        "tilt_x_deg": point.tilt_x_deg,
        "tilt_y_deg": point.tilt_y_deg,
    }


def point_from_dict(payload: Any) -> Point:
    if not isinstance(payload, Mapping):
        return Point()
    raw_precise = payload.get("precise_position")
    return Point(
        position=vec2_from_dict(payload.get("position")),
        precise_position=vec2_from_dict(raw_precise) if raw_precise is not None else None,
        shape=shape_from_dict(payload.get("shape")),
        pressure=_float(payload, "pressure", 0.0),
        tangential_pressure=_float(payload, "tangential_pressure", 0.0),
        twist_deg=_float(payload, "twist_deg", 0.0),
        tilt_x_deg=_float(payload, "tilt_x_deg", 0.0),
        tilt_y_deg=_float(payload, "tilt_y_deg", 0.0),
    )


def pointer_event_to_dict(event: PointerEventArgs) -> dict[str, Any]:
    return {
        "event_type": event.event_type,
        "timestamp_micros": event.timestamp_micros,
        "detail": event.detail,
        "point": point_to_dict(event.point),
        "pointer_id": event.pointer_id,
        "device_id": event.device_id,
        "pointer_index": event.pointer_index,
        "sequence_index": event.sequence_index,
        "device_type": event.device_type,
        "is_coalesced": event.is_coalesced,
        "is_predicted": event.is_predicted,
        "is_primary": event.is_primary,
        "button": event.button,
        "buttons": event.buttons,
        "modifiers": event.modifiers,
        "coalesced_pointer_events": [
            pointer_event_to_dict(item) for item in event.coalesced_pointer_events
        ],
        "predicted_pointer_events": [
            pointer_event_to_dict(item) for item in event.predicted_pointer_events
        ],
        "estimated_properties": sorted(event.estimated_properties),
        "estimated_properties_expecting_updates": sorted(
            event.estimated_properties_expecting_updates
        ),
    }


def pointer_event_from_dict(payload: Any) -> PointerEventArgs:
    """Decode one event object.

    Only a payload that is not an object raises. Malformed field values decode
    to their defaults with a logged warning.
    """
    if not isinstance(payload, Mapping):
        raise PointerCodecError(
            f"pointer event payload must be an object, got {type(payload).__name__}"
        )
    return PointerEventArgs(
        base=EventArgs(
            event_source=None,
            event_type=_text(payload, "event_type", EventType.UNKNOWN),
            timestamp_micros=_int(payload, "timestamp_micros", 0),
            detail=payload.get("detail", 0),
        ),
        point=point_from_dict(payload.get("point")),
        pointer_id=_int(payload, "pointer_id", 0),
        device_id=_int(payload, "device_id", 0),
        pointer_index=_int(payload, "pointer_index", 0),
        sequence_index=_int(payload, "sequence_index", 0),
        device_type=_device_type(payload.get("device_type", DeviceType.UNKNOWN)),
        is_coalesced=_flag(payload, "is_coalesced", False),
        is_predicted=_flag(payload, "is_predicted", False),
        is_primary=_flag(payload, "is_primary", False),
        button=_int(payload, "button", 0),
        buttons=_int(payload, "buttons", 0),
        modifiers=_int(payload, "modifiers", 0),
        coalesced_pointer_events=_event_list(payload, "coalesced_pointer_events"),
        predicted_pointer_events=_event_list(payload, "predicted_pointer_events"),
        estimated_properties=_str_set(payload, "estimated_properties"),
        estimated_properties_expecting_updates=_str_set(
            payload, "estimated_properties_expecting_updates"
        ),
    )


def dumps_pointer_event(event: PointerEventArgs, *, pretty: bool = False) -> str:
    return dumps_text(pointer_event_to_dict(event), pretty=pretty)


def loads_pointer_event(raw: bytes | str) -> PointerEventArgs:
    return pointer_event_from_dict(loads(raw))


def _malformed(key: str, raw: Any, default: Any) -> None:
    logger.warning("pointer_json_malformed_field field=%s value=%r default=%r", key, raw, default)


def _int(payload: Mapping[str, Any], key: str, default: int) -> int:
    raw = payload.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        _malformed(key, raw, default)
        return default
    if isinstance(raw, float) and not math.isfinite(raw):
        _malformed(key, raw, default)
        return default
    return int(raw)


def _float(payload: Mapping[str, Any], key: str, default: float) -> float:
    raw = payload.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        _malformed(key, raw, default)
        return default
    value = float(raw)
    if not math.isfinite(value):
        _malformed(key, raw, default)
        return default
    return value


def _flag(payload: Mapping[str, Any], key: str, default: bool) -> bool:
    raw = payload.get(key, default)
    if not isinstance(raw, bool):
        _malformed(key, raw, default)
        return default
    return raw


def _text(payload: Mapping[str, Any], key: str, default: str) -> str:
    raw = payload.get(key, default)
    if not isinstance(raw, str):
        _malformed(key, raw, default)
        return default
    return raw


def _str_set(payload: Mapping[str, Any], key: str) -> frozenset[str]:
    raw = payload.get(key, ())
    if not isinstance(raw, (list, tuple)):
        _malformed(key, raw, [])
        return frozenset()
    if any(not isinstance(item, str) for item in raw):
        logger.warning("pointer_json_non_string_names_dropped field=%s value=%r", key, raw)
    return frozenset(item for item in raw if isinstance(item, str))


def _event_list(payload: Mapping[str, Any], key: str) -> tuple[PointerEventArgs, ...]:
    raw = payload.get(key, ())
    if not isinstance(raw, (list, tuple)):
        _malformed(key, raw, [])
        return ()
    events: list[PointerEventArgs] = []
    for item in raw:
        if not isinstance(item, Mapping):
            logger.warning("pointer_json_sub_event_dropped field=%s value=%r", key, item)
            continue
        events.append(pointer_event_from_dict(item))
    return tuple(events)


def _shape_type(raw: Any) -> ShapeType:
    value = str(raw).strip().upper() if isinstance(raw, str) else ""
    try:
        return ShapeType(value)
    except ValueError:
        logger.warning(
            "pointer_json_unknown_shape_type value=%r default=%s", raw, ShapeType.ELLIPSE
        )
        return ShapeType.ELLIPSE


def _device_type(raw: Any) -> str:
    value = str(raw).strip().lower() if isinstance(raw, str) else ""
    if value in KNOWN_DEVICE_TYPES:
        return value
    logger.warning("pointer_json_unknown_device_type value=%r default=%s", raw, DeviceType.UNKNOWN)
    return DeviceType.UNKNOWN


__all__ = [
    "PointerCodecError",
    "dumps_pointer_event",
    "loads_pointer_event",
    "point_from_dict",
    "point_to_dict",
    "pointer_event_from_dict",
    "pointer_event_to_dict",
    "shape_from_dict",
    "shape_to_dict",
]
