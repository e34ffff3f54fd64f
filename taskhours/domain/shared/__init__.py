"""Shared domain building blocks.

- Result monad for explicit rejection handling
- Base domain event and the event sink protocol
- Entity base with identity-based equality
"""

from taskhours.domain.shared.entity import Entity
from taskhours.domain.shared.events import DomainEvent, EventSink, NullEventSink
from taskhours.domain.shared.result import Err, Ok, Result

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    # Domain events
    "DomainEvent",
    "EventSink",
    "NullEventSink",
    # Entities
    "Entity",
]
