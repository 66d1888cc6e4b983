from __future__ import annotations

from pointer_events.runtime.time import MicrosClock
from tests.pointer_events.conftest import FakeNanoClock


def test_micros_clock_converts_nanoseconds() -> None:
    time_source = FakeNanoClock(start_ns=2_500_999)
    clock = MicrosClock(time_source_ns=time_source)
    assert clock.now_micros() == 2_500
    time_source.advance_micros(10)
    assert clock.now_micros() == 2_510


def test_micros_clock_never_runs_backwards() -> None:
    time_source = FakeNanoClock(start_ns=5_000_000)
    clock = MicrosClock(time_source_ns=time_source)
    assert clock.now_micros() == 5_000
    time_source.now_ns = 1_000_000
    assert clock.now_micros() == 5_000
