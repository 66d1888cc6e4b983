"""Public pointer dispatch API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pointer_events.api.event_args import EventType, PointerEventArgs

if TYPE_CHECKING:
    from pointer_events.diagnostics.hub import DiagnosticHub

# A handler consumes the event by returning True.
PointerHandler = Callable[[PointerEventArgs], bool | None]

POINTER_EVENT_CHANNEL = "pointerevent"
SPECIFIC_CHANNELS: tuple[str, ...] = (
    EventType.POINTER_DOWN,
    EventType.POINTER_UP,
    EventType.POINTER_MOVE,
    EventType.POINTER_CANCEL,
    EventType.POINTER_UPDATE,
)
DEFAULT_PRIORITY = 200


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int
    channel: str


class PointerEventListener(Protocol):
    """Subscriber receiving the type-specific pointer channels."""

    def on_pointer_down(self, event: PointerEventArgs) -> bool | None: ...

    def on_pointer_up(self, event: PointerEventArgs) -> bool | None: ...

    def on_pointer_move(self, event: PointerEventArgs) -> bool | None: ...

    def on_pointer_cancel(self, event: PointerEventArgs) -> bool | None: ...

    def on_pointer_update(self, event: PointerEventArgs) -> bool | None: ...


class PointerDispatcher(Protocol):
    """Priority-ordered, consumable pointer event delivery."""

    def subscribe(
        self,
        channel: str,
        handler: PointerHandler,
        *,
        priority: int | None = None,
    ) -> Subscription:
        """Subscribe handler to the generic or a type-specific channel."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""

    def add_listener(self, listener: PointerEventListener, *, priority: int | None = None) -> None:
        """Subscribe all listener callbacks at one priority."""

    def remove_listener(self, listener: PointerEventListener) -> bool:
        """Remove all subscriptions made for listener."""

    def dispatch(self, event: PointerEventArgs) -> bool:
        """Deliver event and return whether it was consumed."""


def create_pointer_dispatcher(
    *,
    default_priority: int = DEFAULT_PRIORITY,
    hub: DiagnosticHub | None = None,
) -> PointerDispatcher:
    """Create default dispatcher implementation."""
    from pointer_events.runtime.dispatcher import RuntimePointerDispatcher

    return RuntimePointerDispatcher(default_priority=default_priority, hub=hub)


__all__ = [
    "DEFAULT_PRIORITY",
    "POINTER_EVENT_CHANNEL",
    "PointerDispatcher",
    "PointerEventListener",
    "PointerHandler",
    "SPECIFIC_CHANNELS",
    "Subscription",
    "create_pointer_dispatcher",
]
