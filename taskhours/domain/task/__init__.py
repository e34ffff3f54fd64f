"""Task domain - the leaf entity of the project aggregate.

Key Types:
    Task - Unit of work with remaining hours and completion state
    TaskObserver - Protocol for listeners wired to a task

Domain Events:
    TaskCompleted - Task became complete
    TaskHoursUpdated - Task hours re-estimated (reviewable)
"""

from .events import TaskCompleted, TaskHoursUpdated
from .models import NEGATIVE_HOURS_REJECTED, Task, TaskObserver

__all__ = [
    # Models
    "Task",
    "TaskObserver",
    "NEGATIVE_HOURS_REJECTED",
    # Events
    "TaskCompleted",
    "TaskHoursUpdated",
]
