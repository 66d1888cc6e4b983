"""Structured pointer diagnostics record."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """One trace entry emitted while routing pointer events."""

    ts_utc: str
    tick: int
    category: str
    name: str
    level: str = "info"
    pointer_id: int | None = None
    event_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def utc_now_iso() -> str:
    """Return an RFC3339-like UTC timestamp with milliseconds."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds")
