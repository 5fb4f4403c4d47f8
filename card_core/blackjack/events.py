"""Table events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of table events."""

    TABLE_CREATED = auto()
    CARD_DEALT = auto()
    ROUND_DEALT = auto()
    SHOE_EMPTY = auto()


@dataclass(frozen=True)
class TableEvent:
    """
    Immutable table event.

    Events are how callers observe the table without polling it.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[TableEvent], None]


class EventEmitter:
    """
    Event emitter for one table.

    Keeps the table's event log for the round, so the dealing sequence can be
    replayed from ``dealt_cards`` after the fact.
    """

    def __init__(self) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[TableEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: TableEvent) -> None:
        """Record an event and pass it to its subscribers."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> TableEvent:
        """Create, emit and return a new event."""
        event = TableEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[TableEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def dealt_cards(self, target: str | None = None) -> list[str]:
        """
        Return the labels of dealt cards, oldest first.

        Args:
            target: "box" or "dealer" to keep only that side, None for both
        """
        return [
            event.data["card"]
            for event in self._event_history
            if event.event_type is EventType.CARD_DEALT
            and (target is None or event.data["target"] == target)
        ]
