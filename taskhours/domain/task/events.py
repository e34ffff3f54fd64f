"""Task domain events.

Notifications a Task raises towards the aggregate root observing it. They
carry a reference to the task itself, so the observer reads the tentative
post-mutation state directly.

All events are pure data structures - no I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from taskhours.domain.shared.events import DomainEvent

if TYPE_CHECKING:
    from taskhours.domain.task.models import Task


@dataclass(frozen=True, kw_only=True)
class TaskCompleted(DomainEvent):
    """Event raised when a task becomes complete.

    Completion cannot be vetoed; observers only react to it.
    """

    task: Task


@dataclass(frozen=True, kw_only=True)
class TaskHoursUpdated(DomainEvent):
    """Event raised when a task's remaining hours are re-estimated.

    By the time observers see this event the new value is already applied
    to the task. An observer that rejects it makes the task restore
    previous_hours.
    """

    task: Task
    previous_hours: int
