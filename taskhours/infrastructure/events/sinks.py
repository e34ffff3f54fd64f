"""Event sink implementations.

Where the events a Project publishes end up. Every class here satisfies
the EventSink protocol, so any of them can be handed to Project(sink=...).
"""

import logging
from collections.abc import Callable, Iterator
from typing import TypeVar

from taskhours.domain.shared.events import DomainEvent, NullEventSink

EventT = TypeVar("EventT", bound=DomainEvent)


class InMemoryEventSink:
    """Keeps published events in a list, in publication order.

    Useful in tests and for printing what an aggregate published.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._events)

    def of_type(self, event_type: type[EventT]) -> list[EventT]:
        """Return the recorded events that are instances of event_type."""
        return [e for e in self._events if isinstance(e, event_type)]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[DomainEvent]:
        return iter(self.events)


class LoggingEventSink:
    """Writes one log record per published event."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def publish(self, event: DomainEvent) -> None:
        self._logger.log(self._level, f"{event.event_type} {event.event_id}: {event}")


class CallbackEventSink:
    """Adapts a plain function into an event sink."""

    def __init__(self, callback: Callable[[DomainEvent], None]) -> None:
        self._callback = callback

    def publish(self, event: DomainEvent) -> None:
        self._callback(event)


__all__ = [
    "CallbackEventSink",
    "InMemoryEventSink",
    "LoggingEventSink",
    "NullEventSink",
]
