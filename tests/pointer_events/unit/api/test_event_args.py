from __future__ import annotations

from pointer_events.api.event_args import (
    EventArgs,
    EventSourceHandle,
    EventType,
    PointerEventArgs,
    PointerProperty,
)
from tests.pointer_events.conftest import make_event


def test_event_defaults_are_unknown_and_empty() -> None:
    event = PointerEventArgs()
    assert event.event_type == EventType.UNKNOWN
    assert event.event_source is None
    assert event.coalesced_pointer_events == ()
    assert event.predicted_pointer_events == ()
    assert event.is_estimated is False
    assert event.is_expecting_updates is False


def test_timestamp_millis_truncates_micros() -> None:
    event = PointerEventArgs(base=EventArgs(timestamp_micros=12_345_678))
    assert event.timestamp_millis == 12_345


def test_with_event_type_returns_copy() -> None:
    event = make_event(EventType.POINTER_DOWN, pointer_id=4, x=1.0, y=2.0)
    update = event.with_event_type(EventType.POINTER_UPDATE)
    assert update.event_type == EventType.POINTER_UPDATE
    assert event.event_type == EventType.POINTER_DOWN
    assert update.position == event.position
    assert update.pointer_id == 4


def test_estimation_flags_follow_sets() -> None:
    event = make_event(
        estimated=frozenset({PointerProperty.PRESSURE}),
        expecting=frozenset({PointerProperty.PRESSURE}),
    )
    assert event.is_estimated is True
    assert event.is_expecting_updates is True


def test_source_handles_are_unique_and_compare_by_id() -> None:
    first = EventSourceHandle.create("main")
    second = EventSourceHandle.create("main")
    assert first != second
    assert first == EventSourceHandle(first.id, "renamed")


def test_describe_contains_identity() -> None:
    text = make_event(EventType.POINTER_DOWN, pointer_id=9).describe()
    assert "Event: pointerdown" in text
    assert "Pointer Id: 9" in text
