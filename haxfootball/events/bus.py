"""Event bus for room notifications."""

from collections import defaultdict
from typing import Callable, Optional, TypeVar

from haxfootball.events.types import RoomEvent

T = TypeVar("T", bound=RoomEvent)
EventHandler = Callable[[RoomEvent], None]


class EventBus:
    """
    Synchronous pub/sub bus owned by a room session.

    The rules engine emits events after state changes; the room log,
    the chat layer and tests subscribe to them. Handlers run in the
    caller's thread, in subscription order, before ``emit`` returns.

    Example:
        bus = EventBus()
        bus.subscribe(ScoreChangedEvent, lambda e: print(e.red_score))
        bus.emit(ScoreChangedEvent(team=TeamId.RED, points=7))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[RoomEvent], list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for one event type (exact type match)."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler that receives every event."""
        self._global_handlers.append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def emit(self, event: RoomEvent) -> None:
        """
        Deliver an event.

        Type-specific handlers are called first, then global handlers.
        """
        for handler in list(self._handlers[type(event)]):
            handler(event)
        for handler in list(self._global_handlers):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: Optional[type[RoomEvent]] = None) -> int:
        """Number of handlers for one type, or of all handlers when no type is given."""
        if event_type is None:
            return sum(len(h) for h in self._handlers.values()) + len(self._global_handlers)
        return len(self._handlers[event_type])
