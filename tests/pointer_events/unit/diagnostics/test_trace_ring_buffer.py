from __future__ import annotations

import pytest

from pointer_events.diagnostics import RingBuffer


def test_ring_buffer_drops_oldest_on_overflow() -> None:
    buffer = RingBuffer[int](capacity=3)
    for value in (1, 2, 3, 4):
        buffer.append(value)

    assert buffer.snapshot() == [2, 3, 4]
    assert buffer.size == 3


def test_ring_buffer_snapshot_limit_returns_recent_tail() -> None:
    buffer = RingBuffer[int](capacity=5)
    for value in [10, 20, 30, 40]:
        buffer.append(value)

    assert buffer.snapshot(limit=2) == [30, 40]
    assert buffer.snapshot(limit=0) == []


def test_ring_buffer_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        RingBuffer[int](capacity=0)
