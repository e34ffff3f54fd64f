"""Project domain package.

This package contains the project aggregate root, its derived status and
the events it publishes.
"""

from taskhours.domain.project.events import TaskDeleted
from taskhours.domain.project.models import (
    ADD_EXCEEDS_LIMIT_MESSAGE,
    DEFAULT_HOURS_LIMIT,
    MISSING_NAME_MESSAGE,
    NEGATIVE_HOURS_MESSAGE,
    UPDATE_EXCEEDS_LIMIT_MESSAGE,
    Project,
)
from taskhours.domain.project.status import ProjectStatus, derive_status

__all__ = [
    "Project",
    "ProjectStatus",
    "TaskDeleted",
    "derive_status",
    "DEFAULT_HOURS_LIMIT",
    "NEGATIVE_HOURS_MESSAGE",
    "MISSING_NAME_MESSAGE",
    "ADD_EXCEEDS_LIMIT_MESSAGE",
    "UPDATE_EXCEEDS_LIMIT_MESSAGE",
]
