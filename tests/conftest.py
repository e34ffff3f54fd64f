"""Root conftest — shared fixtures."""

import pytest

from taskhours.domain.project import Project
from taskhours.domain.shared import Err, Ok
from taskhours.infrastructure.events import InMemoryEventSink


@pytest.fixture(autouse=True)
def taskhours_home(tmp_path, monkeypatch):
    """Keep settings out of the real home directory."""
    home = tmp_path / "taskhours-home"
    monkeypatch.setenv("TASKHOURS_HOME", str(home))
    return home


@pytest.fixture
def sink():
    return InMemoryEventSink()


@pytest.fixture
def project(sink):
    return Project(name="Test project", sink=sink)


class RecordingObserver:
    """Task observer that records notifications and answers reviews with a fixed verdict."""

    def __init__(self, reject_with: str | None = None):
        self.completed = []
        self.reviewed = []
        self.reject_with = reject_with

    def task_completed(self, event):
        self.completed.append(event)

    def review_hours_update(self, event):
        self.reviewed.append((event.task.hours_remaining, event.previous_hours))
        if self.reject_with:
            return Err(self.reject_with)
        return Ok(None)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def vetoing_observer():
    return RecordingObserver(reject_with="Not today.")
