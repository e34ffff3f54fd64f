"""Base domain event infrastructure.

Domain events are immutable records of something that happened inside the
aggregate. Some of them are only delivered to the aggregate root that
observes a task; others are published to an external sink.

Example usage:
    >>> from dataclasses import dataclass
    >>> from taskhours.domain.shared.events import DomainEvent
    >>>
    >>> @dataclass(frozen=True, kw_only=True)
    ... class ProjectRenamed(DomainEvent):
    ...     name: str
    ...
    >>> event = ProjectRenamed(name="Website relaunch")
    >>> print(f"Event {event.event_id} occurred at {event.occurred_at}")
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    Subclasses should be frozen, keyword-only dataclasses that add
    domain-specific fields.

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: UTC timestamp when the event occurred.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Name of the concrete event class."""
        return type(self).__name__


class EventSink(Protocol):
    """Destination for events leaving an aggregate.

    Delivery, ordering across aggregates and persistence are the sink's
    business. The aggregate only calls publish() synchronously and does
    not look at the outcome.
    """

    def publish(self, event: DomainEvent) -> None: ...


class NullEventSink:
    """Sink that discards every event. Default for aggregates built without one."""

    def publish(self, event: DomainEvent) -> None:
        pass
