"""Pointer diagnostics package."""

from pointer_events.diagnostics.event import DiagnosticEvent
from pointer_events.diagnostics.hub import DiagnosticHub
from pointer_events.diagnostics.ring_buffer import RingBuffer

__all__ = ["DiagnosticEvent", "DiagnosticHub", "RingBuffer"]
