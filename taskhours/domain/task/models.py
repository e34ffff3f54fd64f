"""Task domain model.

A Task is the leaf entity of the project aggregate. It owns its own
completion and hours state and tells the observers attached to it (in
practice, the Project that contains it) about every change. Hours updates
go through a synchronous review: the task applies the new value
tentatively, asks each observer to review it, and rolls itself back if one
of them refuses.
"""

import logging
from typing import Any, Protocol
from uuid import UUID

from pydantic import Field, PrivateAttr

from taskhours.domain.shared.entity import Entity
from taskhours.domain.shared.result import Err, Ok, Result
from taskhours.domain.task.events import TaskCompleted, TaskHoursUpdated

logger = logging.getLogger(__name__)

NEGATIVE_HOURS_REJECTED = "Hours remaining cannot be negative."


class TaskObserver(Protocol):
    """Listener wired to a task's notifications.

    review_hours_update() is the check-and-commit hook: it runs while the
    new hours value is tentatively applied and decides whether it stays.
    """

    def task_completed(self, event: TaskCompleted) -> None: ...

    def review_hours_update(self, event: TaskHoursUpdated) -> Result[None, str]: ...


class Task(Entity):
    """A unit of work with an estimate of the hours left on it.

    Tasks are created by Project.add_task() and are bound to that project
    for their whole lifetime through project_id.

    hours_remaining and is_complete are read-only; they change only through
    mark_complete() and update_hours_remaining(), so observers see every
    change.
    """

    project_id: UUID = Field(frozen=True)
    name: str = Field(min_length=1, frozen=True)

    _hours_remaining: int = PrivateAttr(default=0)
    _is_complete: bool = PrivateAttr(default=False)
    _observers: list[TaskObserver] = PrivateAttr(default_factory=list)

    def __init__(self, *, hours_remaining: int, is_complete: bool = False, **data: Any) -> None:
        super().__init__(**data)
        if hours_remaining < 0:
            raise ValueError(NEGATIVE_HOURS_REJECTED)
        if is_complete and hours_remaining > 0:
            raise ValueError("A complete task cannot have hours remaining.")
        self._hours_remaining = hours_remaining
        self._is_complete = hours_remaining == 0

    @property
    def hours_remaining(self) -> int:
        return self._hours_remaining

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    # =========================================================================
    # Subscription
    # =========================================================================

    def attach(self, observer: TaskObserver) -> None:
        """Start delivering this task's notifications to observer."""
        if not any(o is observer for o in self._observers):
            self._observers.append(observer)

    def detach(self, observer: TaskObserver) -> None:
        """Stop delivering notifications to observer. No-op if not attached."""
        self._observers = [o for o in self._observers if o is not observer]

    # =========================================================================
    # Mutations
    # =========================================================================

    def mark_complete(self) -> Result["Task", str]:
        """Mark the task complete and zero its remaining hours.

        Idempotent: completing a complete task changes nothing and notifies
        nobody. Completion cannot be vetoed.

        Returns:
            Ok(self) in every case.
        """
        if self.is_complete:
            return Ok(self)

        self._is_complete = True
        self._hours_remaining = 0
        logger.debug(f"Task '{self.name}' marked complete")

        event = TaskCompleted(task=self)
        for observer in list(self._observers):
            observer.task_completed(event)
        return Ok(self)

    def update_hours_remaining(self, hours: int) -> Result[int, str]:
        """Re-estimate the hours left on this task.

        Setting hours to 0 completes the task and cannot be refused. Any
        other value is applied tentatively and offered to each observer in
        attach order; the first rejection rolls the task back to its prior
        hours and completion state.

        Observers that accepted before a later one rejected are not told
        about the rollback, so with several observers only the first one's
        view is guaranteed to match the task. A task owned by a Project has
        that project as its only observer.

        Args:
            hours: New remaining-hours estimate.

        Returns:
            Ok(hours) if the new value stuck, or
            Err(str) with the reason it was refused.
        """
        if hours < 0:
            return Err(NEGATIVE_HOURS_REJECTED)

        previous_hours = self.hours_remaining

        self._hours_remaining = hours
        if hours == 0:
            self.mark_complete()
            return Ok(0)
        self._is_complete = False

        event = TaskHoursUpdated(task=self, previous_hours=previous_hours)
        for observer in list(self._observers):
            verdict = observer.review_hours_update(event)
            if isinstance(verdict, Err):
                self._hours_remaining = previous_hours
                self._is_complete = previous_hours == 0
                logger.info(
                    f"Task '{self.name}' hours update to {hours} rolled back: "
                    f"{verdict.error}"
                )
                return Err(verdict.error)

        logger.debug(f"Task '{self.name}' hours updated {previous_hours} -> {hours}")
        return Ok(hours)
