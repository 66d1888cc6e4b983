from __future__ import annotations

from pointer_events.serialization.json_codec import dumps_bytes, dumps_text, loads


def test_dumps_and_loads_round_trip_dict() -> None:
    payload = {"b": 2, "a": {"x": 1.5}}
    raw = dumps_bytes(payload)
    assert isinstance(raw, bytes)
    assert loads(raw) == payload


def test_dumps_sort_keys_and_pretty() -> None:
    text = dumps_text({"b": 1, "a": 2}, sort_keys=True)
    assert text == '{"a":2,"b":1}'
    assert "\n" in dumps_text({"a": 1}, pretty=True)
