from __future__ import annotations

import logging

import pytest

from pointer_events.api.event_args import (
    DeviceType,
    EventArgs,
    EventType,
    PointerEventArgs,
    PointerProperty,
)
from pointer_events.api.geometry import Point, PointShape, ShapeType, Vec2
from pointer_events.serialization import (
    PointerCodecError,
    dumps_pointer_event,
    loads,
    loads_pointer_event,
    pointer_event_from_dict,
    pointer_event_to_dict,
)


def _sample_event() -> PointerEventArgs:
    coalesced = PointerEventArgs(
        base=EventArgs(event_type=EventType.POINTER_MOVE, timestamp_micros=990),
        point=Point(position=Vec2(9.0, 9.5)),
        pointer_id=65536,
        device_type=DeviceType.PEN,
        is_coalesced=True,
    )
    return PointerEventArgs(
        base=EventArgs(event_type=EventType.POINTER_MOVE, timestamp_micros=1_000),
        point=Point(
            position=Vec2(10.0, 11.0),
            precise_position=Vec2(10.25, 11.5),
            shape=PointShape(shape_type=ShapeType.RECTANGLE, width=3.0, height=2.0, angle_deg=30.0),
            pressure=0.4,
            twist_deg=15.0,
            tilt_x_deg=20.0,
            tilt_y_deg=-10.0,
        ),
        pointer_id=65536,
        device_id=0,
        pointer_index=-1,
        sequence_index=12,
        device_type=DeviceType.PEN,
        is_primary=True,
        button=-1,
        buttons=1,
        modifiers=2,
        coalesced_pointer_events=(coalesced,),
        estimated_properties=frozenset({PointerProperty.PRESSURE, PointerProperty.TILT_X}),
        estimated_properties_expecting_updates=frozenset({PointerProperty.PRESSURE}),
    )


def test_pointer_event_survives_json_round_trip() -> None:
    event = _sample_event()
    restored = loads_pointer_event(dumps_pointer_event(event))

    assert restored == event
    assert restored.point.azimuth_deg == pytest.approx(event.point.azimuth_deg)
    assert restored.point.shape.axis_aligned_width == pytest.approx(
        event.point.shape.axis_aligned_width
    )


def test_json_layout_uses_documented_keys() -> None:
    payload = loads(dumps_pointer_event(_sample_event()))
    assert payload["event_type"] == "pointermove"
    assert payload["device_type"] == "pen"
    assert payload["point"]["shape"]["shape_type"] == "RECTANGLE"
    assert payload["estimated_properties"] == ["pressure", "tilt_x"]
    assert payload["estimated_properties_expecting_updates"] == ["pressure"]
    assert "event_source" not in payload
    assert "azimuth_deg" not in payload["point"]


def test_unknown_shape_and_device_fall_back_with_warning(caplog) -> None:
    payload = pointer_event_to_dict(_sample_event())
    payload["device_type"] = "trackball"
    payload["point"]["shape"]["shape_type"] = "HEXAGON"

    with caplog.at_level(logging.WARNING):
        restored = pointer_event_from_dict(payload)

    assert restored.device_type == DeviceType.UNKNOWN
    assert restored.point.shape.shape_type is ShapeType.ELLIPSE
    assert "pointer_json_unknown_device_type" in caplog.text
    assert "pointer_json_unknown_shape_type" in caplog.text


def test_missing_fields_use_defaults() -> None:
    restored = pointer_event_from_dict({"event_type": "pointerdown", "pointer_id": 3})
    assert restored.event_type == EventType.POINTER_DOWN
    assert restored.pointer_id == 3
    assert restored.point.shape == PointShape()
    assert restored.point.precise_position == restored.point.position
    assert restored.coalesced_pointer_events == ()
    assert restored.estimated_properties == frozenset()


def test_non_object_payload_raises() -> None:
    with pytest.raises(PointerCodecError):
        loads_pointer_event("[1, 2, 3]")
    with pytest.raises(ValueError):
        pointer_event_from_dict("pointerdown")


def test_serialized_text_is_stable_across_round_trips() -> None:
    text = dumps_pointer_event(_sample_event())
    assert dumps_pointer_event(loads_pointer_event(text)) == text


def test_malformed_field_values_decode_to_defaults_with_warning(caplog) -> None:
    payload = pointer_event_to_dict(_sample_event())
    payload["pointer_id"] = "abc"
    payload["is_primary"] = "yes"
    payload["point"]["pressure"] = None
    payload["point"]["tilt_x_deg"] = "steep"
    payload["coalesced_pointer_events"] = None
    payload["predicted_pointer_events"] = [{"event_type": "pointermove"}, 7]

    with caplog.at_level(logging.WARNING):
        restored = pointer_event_from_dict(payload)

    assert restored.pointer_id == 0
    assert restored.is_primary is False
    assert restored.point.pressure == 0.0
    assert restored.point.tilt_x_deg == 0.0
    assert restored.coalesced_pointer_events == ()
    assert len(restored.predicted_pointer_events) == 1
    assert restored.sequence_index == 12
    assert "pointer_json_malformed_field field=pointer_id" in caplog.text
    assert "pointer_json_sub_event_dropped" in caplog.text


def test_property_name_string_is_not_split_into_characters(caplog) -> None:
    payload = pointer_event_to_dict(_sample_event())
    payload["estimated_properties"] = "pressure"
    payload["estimated_properties_expecting_updates"] = ["pressure", 3]

    with caplog.at_level(logging.WARNING):
        restored = pointer_event_from_dict(payload)

    assert restored.estimated_properties == frozenset()
    assert restored.estimated_properties_expecting_updates == frozenset({"pressure"})
    assert "pointer_json_malformed_field field=estimated_properties " in caplog.text
    assert "pointer_json_non_string_names_dropped" in caplog.text
