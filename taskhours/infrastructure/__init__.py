"""Infrastructure layer for taskhours.

Adapters around the domain that deal with the outside world:

    Events:
        - InMemoryEventSink: Records published events
        - LoggingEventSink: Logs published events
        - CallbackEventSink: Forwards events to a function
        - NullEventSink: Discards events

    Storage:
        - JsonStorage: JSON file I/O for scenarios and settings
"""

from taskhours.infrastructure.events import (
    CallbackEventSink,
    InMemoryEventSink,
    LoggingEventSink,
    NullEventSink,
)
from taskhours.infrastructure.storage import JsonStorage

__all__ = [
    # Events
    "InMemoryEventSink",
    "LoggingEventSink",
    "CallbackEventSink",
    "NullEventSink",
    # Storage
    "JsonStorage",
]
