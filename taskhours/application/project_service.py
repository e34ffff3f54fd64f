"""Project application service.

Creates projects and builds read models from them.
All functions are pure - no I/O.
"""

from uuid import UUID

from pydantic import BaseModel

from taskhours.domain.project import DEFAULT_HOURS_LIMIT, Project, ProjectStatus
from taskhours.domain.shared import Err, EventSink, Ok, Result


class ProjectSummary(BaseModel):
    """Summary of a project for display.

    A flat view of the aggregate's derived state, without task references.
    """

    id: UUID
    name: str
    status: ProjectStatus
    total_hours_remaining: int
    hours_limit: int
    total_tasks: int = 0
    completed_tasks: int = 0
    progress_percent: float = 0.0

    @property
    def hours_available(self) -> int:
        """Hours that can still be added without breaking the budget."""
        return self.hours_limit - self.total_hours_remaining


def create_project(
    name: str,
    hours_limit: int = DEFAULT_HOURS_LIMIT,
    sink: EventSink | None = None,
) -> Result[Project, str]:
    """Create a new, empty project.

    Args:
        name: Human-readable project name.
        hours_limit: Maximum total remaining hours across the project's tasks.
        sink: Where the project publishes its events (default: discard).

    Returns:
        Ok(Project) on success, or
        Err(str) with validation error message.
    """
    if not name or not name.strip():
        return Err("Project name cannot be empty")

    if hours_limit <= 0:
        return Err("Hours limit must be positive")

    return Ok(Project(name=name.strip(), hours_limit=hours_limit, sink=sink))


def get_project_summary(project: Project) -> ProjectSummary:
    """Create a summary of a project's current state.

    Args:
        project: The project to summarize.

    Returns:
        ProjectSummary with progress information.
    """
    tasks = project.tasks
    total = len(tasks)
    completed = sum(1 for t in tasks if t.is_complete)

    progress = 0.0
    if total > 0:
        progress = round(completed / total * 100, 1)

    return ProjectSummary(
        id=project.id,
        name=project.name,
        status=project.status,
        total_hours_remaining=project.total_hours_remaining,
        hours_limit=project.hours_limit,
        total_tasks=total,
        completed_tasks=completed,
        progress_percent=progress,
    )
