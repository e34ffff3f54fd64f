"""Project aggregate root.

A Project owns an ordered collection of Tasks and keeps three things
consistent with them:

- the hour budget: the remaining hours of all tasks never add up to more
  than hours_limit once a mutation has returned;
- the derived status (see status.derive_status);
- the activity log, a human-readable record of what happened.

Callers mutate the aggregate through add_task()/delete_task(), or by
getting a Task from it and calling the task's own methods. In the latter
case the Project hears about the change synchronously because it attached
itself to the task in add_task(), and it can refuse an hours update before
the task's method returns. It detaches in delete_task(), so a task that has
left the project can no longer touch its state.
"""

import logging
from typing import Any
from uuid import UUID

from pydantic import Field, PrivateAttr

from taskhours.domain.project.events import TaskDeleted
from taskhours.domain.project.status import ProjectStatus, derive_status
from taskhours.domain.shared.entity import Entity
from taskhours.domain.shared.events import EventSink, NullEventSink
from taskhours.domain.shared.result import Err, Ok, Result
from taskhours.domain.task.events import TaskCompleted, TaskHoursUpdated
from taskhours.domain.task.models import Task

logger = logging.getLogger(__name__)

DEFAULT_HOURS_LIMIT = 10

NEGATIVE_HOURS_MESSAGE = "Can't add a task with negative hours remaining."
MISSING_NAME_MESSAGE = "Can't add a task without a name."
ADD_EXCEEDS_LIMIT_MESSAGE = "Can't add a task that will exceed project hours limit."
UPDATE_EXCEEDS_LIMIT_MESSAGE = "Update would exceed project hour limit."

SEPARATOR = "-" * 14


class Project(Entity):
    """A project and the tasks it is made of.

    The event sink is injected at construction and receives the events
    that leave the aggregate (currently only TaskDeleted):

        >>> sink = InMemoryEventSink()
        >>> project = Project(name="Website", sink=sink)
    """

    name: str = ""
    hours_limit: int = Field(default=DEFAULT_HOURS_LIMIT, gt=0, frozen=True)

    _status: ProjectStatus = PrivateAttr(default=ProjectStatus.NEW)
    _tasks: list[Task] = PrivateAttr(default_factory=list)
    _activity_log: list[str] = PrivateAttr(default_factory=list)
    _sink: EventSink = PrivateAttr(default_factory=NullEventSink)

    def __init__(self, sink: EventSink | None = None, **data: Any) -> None:
        super().__init__(**data)
        if sink is not None:
            self._sink = sink

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def status(self) -> ProjectStatus:
        return self._status

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks, in insertion order."""
        return tuple(self._tasks)

    @property
    def activity_log(self) -> tuple[str, ...]:
        return tuple(self._activity_log)

    @property
    def total_hours_remaining(self) -> int:
        return sum(t.hours_remaining for t in self._tasks)

    def get_task(self, task_id: UUID) -> Task | None:
        """Find a task of this project by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # =========================================================================
    # Commands
    # =========================================================================

    def add_task(self, name: str, hours_remaining: int) -> Result[Task, str]:
        """Create a task in this project.

        Args:
            name: Task name, must not be blank.
            hours_remaining: Initial estimate, must be non-negative and fit
                in what is left of the hour budget.

        Returns:
            Ok(Task) with the new task, or
            Err(str) with the message that was written to the activity log.
        """
        if hours_remaining < 0:
            return self._reject(NEGATIVE_HOURS_MESSAGE)
        if not name or not name.strip():
            return self._reject(MISSING_NAME_MESSAGE)
        if not self.verify_hours_within_limit(hours_remaining):
            return self._reject(ADD_EXCEEDS_LIMIT_MESSAGE)

        task = Task(name=name, hours_remaining=hours_remaining, project_id=self.id)
        self._tasks.append(task)
        task.attach(self)
        self.update_status()
        self._log(f"{task.name} added.")
        logger.info(f"Project {self.id}: added task '{task.name}' ({hours_remaining}h)")
        return Ok(task)

    def delete_task(self, task_id: UUID) -> Result[TaskDeleted, str]:
        """Remove a task from this project and publish TaskDeleted.

        Removing a task can only lower the total hours, so the budget is not
        re-checked. The status is left as it was.

        Args:
            task_id: Id of the task to remove.

        Returns:
            Ok(TaskDeleted) with the published event, or
            Err(str) if the project has no such task (nothing is logged).
        """
        task = self.get_task(task_id)
        if task is None:
            return Err(f"Task {task_id} not found.")

        self._tasks.remove(task)
        task.detach(self)

        event = TaskDeleted(
            project_id=self.id,
            task_id=task.id,
            name=task.name,
            hours_remaining=task.hours_remaining,
            is_complete=task.is_complete,
        )
        self._sink.publish(event)
        self._log(f"{task.name} deleted.")
        logger.info(f"Project {self.id}: deleted task '{task.name}'")
        return Ok(event)

    # =========================================================================
    # Invariants and derived state
    # =========================================================================

    def verify_hours_within_limit(self, extra: int = 0) -> bool:
        """Check the hour budget, optionally with extra hours on top."""
        return self.total_hours_remaining + extra <= self.hours_limit

    def update_status(self) -> None:
        self._status = derive_status(self._tasks)

    # =========================================================================
    # Task observer
    # =========================================================================

    def task_completed(self, event: TaskCompleted) -> None:
        """React to one of this project's tasks being completed."""
        if event.task.project_id != self.id:
            return
        self.update_status()
        self._log(f"{event.task.name} completed.")

    def review_hours_update(self, event: TaskHoursUpdated) -> Result[None, str]:
        """Accept or refuse a task's new hours estimate.

        The task has already applied the new value when this runs, so the
        budget is checked with no extra hours.
        """
        if event.task.project_id != self.id:
            return Ok(None)
        if not self.verify_hours_within_limit():
            self._log(UPDATE_EXCEEDS_LIMIT_MESSAGE)
            logger.warning(
                f"Project {self.id}: refused '{event.task.name}' at "
                f"{event.task.hours_remaining}h, limit is {self.hours_limit}h"
            )
            return Err(UPDATE_EXCEEDS_LIMIT_MESSAGE)
        self.update_status()
        return Ok(None)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _log(self, message: str) -> None:
        self._activity_log.append(message)

    def _reject(self, message: str) -> Err[str]:
        self._log(message)
        logger.warning(f"Project {self.id}: {message}")
        return Err(message)

    def __str__(self) -> str:
        lines = [
            f"Project: {self.name} ({self.id})",
            f"Status: {self.status.value} {self.total_hours_remaining} hours",
            "Tasks:",
            SEPARATOR,
        ]
        for task in self._tasks:
            lines.append(
                f"Task: {task.name} {task.hours_remaining} hours; "
                f"Complete? {task.is_complete}"
            )
        lines.append("Activity Log:")
        lines.append(SEPARATOR)
        lines.extend(self._activity_log)
        return "\n".join(lines) + "\n"
