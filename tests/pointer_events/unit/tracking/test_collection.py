from __future__ import annotations

from pointer_events.api.event_args import EventType
from pointer_events.tracking.collection import PointerEventCollection
from tests.pointer_events.conftest import make_event


def _filled() -> PointerEventCollection:
    collection = PointerEventCollection()
    for index in range(3):
        collection.add(make_event(pointer_id=1, sequence_index=index))
    for index in range(2):
        collection.add(make_event(pointer_id=2, sequence_index=index))
    return collection


def test_collection_groups_by_pointer_id() -> None:
    collection = _filled()
    assert collection.size() == 5
    assert collection.num_pointers() == 2
    assert collection.has_pointer_id(1) is True
    assert [event.sequence_index for event in collection.events_for_pointer_id(1)] == [0, 1, 2]
    assert collection.first_event_for_pointer_id(2).sequence_index == 0
    assert collection.last_event_for_pointer_id(2).sequence_index == 1


def test_remove_events_for_pointer_id() -> None:
    collection = _filled()
    collection.remove_events_for_pointer_id(1)
    assert collection.size() == 2
    assert collection.num_pointers() == 1
    assert collection.has_pointer_id(1) is False
    assert [(event.pointer_id, event.sequence_index) for event in collection.events()] == [
        (2, 0),
        (2, 1),
    ]

    collection.remove_events_for_pointer_id(99)
    assert collection.size() == 2


def test_missing_pointer_queries_are_empty() -> None:
    collection = PointerEventCollection()
    assert collection.empty() is True
    assert collection.events_for_pointer_id(5) == []
    assert collection.first_event_for_pointer_id(5) is None
    assert collection.last_event_for_pointer_id(5) is None


def test_returned_lists_are_copies() -> None:
    collection = _filled()
    events = collection.events_for_pointer_id(1)
    events.clear()
    assert len(collection.events_for_pointer_id(1)) == 3
    assert len(collection.events()) == 5

    collection.clear()
    assert collection.empty() is True
    assert collection.num_pointers() == 0
    assert collection.events() == []


def test_events_keep_insertion_order_across_pointers() -> None:
    collection = PointerEventCollection()
    collection.add(make_event(EventType.POINTER_DOWN, pointer_id=2))
    collection.add(make_event(EventType.POINTER_DOWN, pointer_id=1))
    collection.add(make_event(EventType.POINTER_MOVE, pointer_id=2))
    assert [event.pointer_id for event in collection.events()] == [2, 1, 2]
