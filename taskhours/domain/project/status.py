"""Project status derivation.

Status is never set directly: it is recomputed from the tasks whenever the
aggregate changes.
"""

from collections.abc import Sequence
from enum import Enum

from taskhours.domain.task.models import Task


class ProjectStatus(str, Enum):
    """Derived status of a project, valued by its display label."""

    NEW = "New"
    NOT_STARTED = "Not Started"
    MAKING_PROGRESS = "Making Progress"
    DONE = "Done!"

    def __str__(self) -> str:
        return self.value


def derive_status(tasks: Sequence[Task]) -> ProjectStatus:
    """Compute a project's status from its tasks.

    Rules run top to bottom and each later match overwrites the earlier
    one, so a project whose only task is complete ends up DONE rather than
    MAKING_PROGRESS. An empty project returns NEW straight away; the other
    rules would hold vacuously on an empty sequence.

    Args:
        tasks: The project's tasks.

    Returns:
        The derived ProjectStatus.
    """
    if not tasks:
        return ProjectStatus.NEW

    status = ProjectStatus.NEW
    if any(t.is_complete for t in tasks):
        status = ProjectStatus.MAKING_PROGRESS
    if all(t.is_complete for t in tasks):
        status = ProjectStatus.DONE
    if all(not t.is_complete for t in tasks):
        status = ProjectStatus.NOT_STARTED
    return status
