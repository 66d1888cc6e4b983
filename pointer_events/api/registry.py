"""Public window registry factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pointer_events.runtime.config import PointerRuntimeConfig
    from pointer_events.runtime.registry import PointerEventsRegistry


def create_pointer_events_registry(
    *,
    config: PointerRuntimeConfig | None = None,
) -> PointerEventsRegistry:
    """Create the default window to pointer event source registry."""
    from pointer_events.runtime.registry import PointerEventsRegistry

    return PointerEventsRegistry(config=config)


__all__ = ["create_pointer_events_registry"]
