"""Event sinks for events published by aggregates."""

from taskhours.infrastructure.events.sinks import (
    CallbackEventSink,
    InMemoryEventSink,
    LoggingEventSink,
    NullEventSink,
)

__all__ = [
    "InMemoryEventSink",
    "LoggingEventSink",
    "CallbackEventSink",
    "NullEventSink",
]
