"""Priority-ordered, consumable pointer event delivery."""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field

from pointer_events.api.dispatch import (
    DEFAULT_PRIORITY,
    POINTER_EVENT_CHANNEL,
    SPECIFIC_CHANNELS,
    PointerEventListener,
    PointerHandler,
    Subscription,
)
from pointer_events.api.event_args import EventType, PointerEventArgs
from pointer_events.diagnostics.hub import DiagnosticHub

logger = logging.getLogger(__name__)


@dataclass(order=True, slots=True)
class _Entry:
    priority: int
    order: int
    handler: PointerHandler = field(compare=False)


class RuntimePointerDispatcher:
    """Route pointer events through the generic channel, then one specific channel.

    Handlers run in ascending priority, ties in registration order. A handler
    consumes the event by returning True; delivery then stops and no further
    handler of any channel sees the event.
    """

    def __init__(
        self,
        *,
        default_priority: int = DEFAULT_PRIORITY,
        hub: DiagnosticHub | None = None,
    ) -> None:
        self._default_priority = int(default_priority)
        self._hub = hub
        self._next_id = 1
        self._channels: dict[str, list[_Entry]] = {
            POINTER_EVENT_CHANNEL: [],
            **{channel: [] for channel in SPECIFIC_CHANNELS},
        }
        self._entries_by_id: dict[int, tuple[str, _Entry]] = {}
        self._listener_subscriptions: dict[int, tuple[Subscription, ...]] = {}

    @property
    def default_priority(self) -> int:
        return self._default_priority

    def subscribe(
        self,
        channel: str,
        handler: PointerHandler,
        *,
        priority: int | None = None,
    ) -> Subscription:
        """Subscribe handler to the generic or one type-specific channel."""
        entries = self._channels.get(channel)
        if entries is None:
            raise ValueError(f"unknown pointer channel: {channel!r}")
        sub_id = self._next_id
        self._next_id += 1
        entry = _Entry(
            priority=self._default_priority if priority is None else int(priority),
            order=sub_id,
            handler=handler,
        )
        bisect.insort(entries, entry)
        self._entries_by_id[sub_id] = (channel, entry)
        return Subscription(id=sub_id, channel=channel)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        found = self._entries_by_id.pop(subscription.id, None)
        if found is None:
            return
        channel, entry = found
        self._channels[channel].remove(entry)

    def add_listener(self, listener: PointerEventListener, *, priority: int | None = None) -> None:
        """Subscribe the five type-specific callbacks of listener."""
        self.remove_listener(listener)
        self._listener_subscriptions[id(listener)] = (
            self.subscribe(EventType.POINTER_DOWN, listener.on_pointer_down, priority=priority),
            self.subscribe(EventType.POINTER_UP, listener.on_pointer_up, priority=priority),
            self.subscribe(EventType.POINTER_MOVE, listener.on_pointer_move, priority=priority),
            self.subscribe(EventType.POINTER_CANCEL, listener.on_pointer_cancel, priority=priority),
            self.subscribe(EventType.POINTER_UPDATE, listener.on_pointer_update, priority=priority),
        )

    def remove_listener(self, listener: PointerEventListener) -> bool:
        subscriptions = self._listener_subscriptions.pop(id(listener), None)
        if subscriptions is None:
            return False
        for subscription in subscriptions:
            self.unsubscribe(subscription)
        return True

    def handler_count(self, channel: str) -> int:
        return len(self._channels.get(channel, ()))

    def dispatch(self, event: PointerEventArgs) -> bool:
        """Deliver event and return whether a handler consumed it."""
        if self._hub is not None:
            self._hub.emit_pointer("pointer.dispatch", event)
        if self._deliver(POINTER_EVENT_CHANNEL, event):
            return True
        if event.event_type not in SPECIFIC_CHANNELS:
            return False
        return self._deliver(event.event_type, event)

    def _deliver(self, channel: str, event: PointerEventArgs) -> bool:
        for entry in tuple(self._channels[channel]):
            if entry.handler(event):
                logger.debug(
                    "pointer_event_consumed channel=%s type=%s pointer_id=%d priority=%d",
                    channel,
                    event.event_type,
                    event.pointer_id,
                    entry.priority,
                )
                if self._hub is not None:
                    self._hub.emit_pointer(
                        "pointer.consumed",
                        event,
                        metadata={"channel": channel, "priority": entry.priority},
                    )
                return True
        return False


PointerDispatcher = RuntimePointerDispatcher
