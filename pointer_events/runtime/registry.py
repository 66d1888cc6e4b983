"""Explicit window to pointer event source registry."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from pointer_events.api.dispatch import (
    POINTER_EVENT_CHANNEL,
    PointerEventListener,
    PointerHandler,
    Subscription,
)
from pointer_events.api.event_args import EventSourceHandle
from pointer_events.diagnostics.hub import DiagnosticHub
from pointer_events.runtime.config import PointerRuntimeConfig, get_runtime_config
from pointer_events.runtime.dispatcher import RuntimePointerDispatcher
from pointer_events.runtime.normalizer import PointerNormalizer
from pointer_events.runtime.source import PointerEventSource
from pointer_events.runtime.time import MicrosClock
from pointer_events.tracking.stroke_tracker import StrokeTracker

logger = logging.getLogger(__name__)


class PointerEventsRegistry:
    """Own one PointerEventSource per window key.

    Window keys are any hashable identity supplied by the host. Sources are
    created on first request and share one clock, so timestamps from all
    windows are comparable.
    """

    def __init__(
        self,
        *,
        config: PointerRuntimeConfig | None = None,
        clock: MicrosClock | None = None,
        hub: DiagnosticHub | None = None,
    ) -> None:
        self._config = config or get_runtime_config()
        self._clock = clock or MicrosClock()
        if hub is None and self._config.dispatch.trace_enabled:
            hub = DiagnosticHub(capacity=self._config.dispatch.trace_buffer_capacity)
        self._hub = hub
        self._sources: dict[Hashable, PointerEventSource] = {}

    @property
    def hub(self) -> DiagnosticHub | None:
        return self._hub

    def events_for_window(self, window: Hashable) -> PointerEventSource:
        """Return the source for window, creating it on first use."""
        source = self._sources.get(window)
        if source is not None:
            return source
        handle = EventSourceHandle.create(label=str(window))
        source = PointerEventSource(
            source=handle,
            normalizer=PointerNormalizer(
                source=handle,
                clock=self._clock,
                max_touch_slots=self._config.normalizer.max_touch_slots,
            ),
            dispatcher=RuntimePointerDispatcher(
                default_priority=self._config.dispatch.default_priority,
                hub=self._hub,
            ),
            max_pending_estimates=self._config.tracking.max_pending_estimates,
        )
        self._sources[window] = source
        logger.debug("pointer_source_created window=%r source_id=%d", window, handle.id)
        return source

    def has_window(self, window: Hashable) -> bool:
        return window in self._sources

    def windows(self) -> tuple[Hashable, ...]:
        return tuple(self._sources)

    def remove_window(self, window: Hashable) -> bool:
        return self._sources.pop(window, None) is not None

    def register_listener(
        self,
        window: Hashable,
        listener: PointerEventListener,
        *,
        priority: int | None = None,
    ) -> None:
        self.events_for_window(window).dispatcher.add_listener(listener, priority=priority)

    def unregister_listener(self, window: Hashable, listener: PointerEventListener) -> bool:
        source = self._sources.get(window)
        if source is None:
            logger.error("pointer_unregister_listener_unknown_window window=%r", window)
            return False
        return source.dispatcher.remove_listener(listener)

    def register_pointer_handler(
        self,
        window: Hashable,
        handler: PointerHandler,
        *,
        priority: int | None = None,
    ) -> Subscription:
        """Subscribe handler to every pointer event of window."""
        return self.events_for_window(window).dispatcher.subscribe(
            POINTER_EVENT_CHANNEL, handler, priority=priority
        )

    def unregister_pointer_handler(self, window: Hashable, subscription: Subscription) -> bool:
        source = self._sources.get(window)
        if source is None:
            logger.error("pointer_unregister_handler_unknown_window window=%r", window)
            return False
        source.dispatcher.unsubscribe(subscription)
        return True

    def create_stroke_tracker(self) -> StrokeTracker:
        """Create a stroke tracker using the configured stroke timeout."""
        return StrokeTracker(timeout_millis=self._config.tracking.stroke_timeout_ms)

    @property
    def config(self) -> PointerRuntimeConfig:
        return self._config
