"""Project domain events.

Events the project aggregate publishes to its external sink. They hold
snapshots rather than live entity references, because the entity they
describe has already left the aggregate.

All events are pure data structures - no I/O, no side effects.
"""

from dataclasses import dataclass
from uuid import UUID

from taskhours.domain.shared.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class TaskDeleted(DomainEvent):
    """Event raised when a task is removed from a project.

    Carries the task's final state as it was at the moment of removal.
    """

    project_id: UUID
    task_id: UUID
    name: str
    hours_remaining: int
    is_complete: bool
