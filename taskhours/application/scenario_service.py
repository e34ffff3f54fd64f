"""Scenario application service.

Replays a scripted sequence of operations against a single project. Steps
refer to tasks by name; the first task with that name (in insertion order)
is the one acted on.
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from taskhours.domain.project import Project
from taskhours.domain.shared import Err
from taskhours.domain.task import Task

logger = logging.getLogger(__name__)

Action = Literal["add", "complete", "update", "delete", "rename"]


class ScenarioStep(BaseModel):
    """One operation in a scenario.

    For "rename", task holds the new project name.
    """

    action: Action
    task: str
    hours: int | None = None

    @model_validator(mode="after")
    def hours_given(self) -> "ScenarioStep":
        if self.action in ("add", "update") and self.hours is None:
            raise ValueError(f"'{self.action}' needs hours")
        return self

    def describe(self) -> str:
        if self.hours is None:
            return f"{self.action} {self.task}"
        return f"{self.action} {self.task} {self.hours}h"


class Scenario(BaseModel):
    """A named list of steps, optionally with its own hour limit."""

    name: str = "Scenario"
    hours_limit: int | None = Field(default=None, gt=0)
    steps: list[ScenarioStep] = Field(default_factory=list)


class StepOutcome(BaseModel):
    """What happened when a step ran."""

    step: ScenarioStep
    ok: bool
    message: str


def _find_task(project: Project, name: str) -> Task | None:
    for task in project.tasks:
        if task.name == name:
            return task
    return None


def run_step(project: Project, step: ScenarioStep) -> StepOutcome:
    """Apply a single step to a project.

    Args:
        project: The project to mutate.
        step: The step to apply.

    Returns:
        StepOutcome saying whether the aggregate accepted it.
    """
    if step.action == "rename":
        project.name = step.task
        return StepOutcome(step=step, ok=True, message=f"Project renamed to {step.task}.")

    if step.action == "add":
        result = project.add_task(step.task, step.hours)
        if isinstance(result, Err):
            return StepOutcome(step=step, ok=False, message=result.error)
        return StepOutcome(step=step, ok=True, message=f"{step.task} added.")

    task = _find_task(project, step.task)
    if task is None:
        return StepOutcome(step=step, ok=False, message=f"No task named '{step.task}'.")

    if step.action == "complete":
        task.mark_complete()
        return StepOutcome(step=step, ok=True, message=f"{task.name} completed.")

    if step.action == "update":
        result = task.update_hours_remaining(step.hours)
        if isinstance(result, Err):
            return StepOutcome(step=step, ok=False, message=result.error)
        return StepOutcome(
            step=step, ok=True, message=f"{task.name} now has {result.value} hours remaining."
        )

    result = project.delete_task(task.id)
    if isinstance(result, Err):
        return StepOutcome(step=step, ok=False, message=result.error)
    return StepOutcome(step=step, ok=True, message=f"{task.name} deleted.")


def run_scenario(project: Project, steps: list[ScenarioStep]) -> list[StepOutcome]:
    """Apply steps to a project in order, collecting one outcome per step."""
    outcomes = []
    for step in steps:
        outcome = run_step(project, step)
        if not outcome.ok:
            logger.info(f"Step '{step.describe()}' rejected: {outcome.message}")
        outcomes.append(outcome)
    return outcomes


def demo_scenario() -> Scenario:
    """A walkthrough touching every path of the aggregate.

    With the default 10 hour limit it adds two tasks, has a third refused
    for the budget, completes one, refuses an over-budget re-estimate,
    accepts a smaller one and deletes a task.
    """
    return Scenario(
        name="Website relaunch",
        steps=[
            ScenarioStep(action="add", task="Design", hours=4),
            ScenarioStep(action="add", task="Build", hours=5),
            ScenarioStep(action="add", task="Test", hours=3),
            ScenarioStep(action="complete", task="Design"),
            ScenarioStep(action="add", task="Test", hours=3),
            ScenarioStep(action="update", task="Build", hours=8),
            ScenarioStep(action="update", task="Build", hours=7),
            ScenarioStep(action="update", task="Build", hours=-1),
            ScenarioStep(action="delete", task="Test"),
        ],
    )
