"""Scenario service tests — replaying steps against a project.

Tests cover:
    - Step validation (hours required for add/update)
    - Each action and its outcome
    - Unknown task names
    - The demo walkthrough end state
"""

import pytest
from pydantic import ValidationError

from taskhours.application import (
    Scenario,
    ScenarioStep,
    demo_scenario,
    run_scenario,
    run_step,
)
from taskhours.domain.project import (
    ADD_EXCEEDS_LIMIT_MESSAGE,
    UPDATE_EXCEEDS_LIMIT_MESSAGE,
    Project,
    ProjectStatus,
    TaskDeleted,
)
from taskhours.domain.task import NEGATIVE_HOURS_REJECTED


def test_add_step_requires_hours():
    with pytest.raises(ValidationError):
        ScenarioStep(action="add", task="A")


def test_unknown_action_rejected():
    with pytest.raises(ValidationError):
        ScenarioStep(action="archive", task="A")


def test_scenario_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Scenario(hours_limit=0)


def test_step_description():
    assert ScenarioStep(action="update", task="A", hours=3).describe() == "update A 3h"
    assert ScenarioStep(action="complete", task="A").describe() == "complete A"


def test_steps_act_on_named_task(project):
    outcomes = run_scenario(
        project,
        [
            ScenarioStep(action="add", task="A", hours=2),
            ScenarioStep(action="update", task="A", hours=4),
            ScenarioStep(action="complete", task="A"),
        ],
    )

    assert [o.ok for o in outcomes] == [True, True, True]
    assert project.tasks[0].is_complete
    assert project.activity_log == ("A added.", "A completed.")


def test_rejections_become_failed_outcomes(project):
    outcomes = run_scenario(
        project,
        [
            ScenarioStep(action="add", task="A", hours=8),
            ScenarioStep(action="add", task="B", hours=5),
            ScenarioStep(action="update", task="A", hours=11),
            ScenarioStep(action="update", task="A", hours=-1),
        ],
    )

    assert [o.ok for o in outcomes] == [True, False, False, False]
    assert outcomes[1].message == ADD_EXCEEDS_LIMIT_MESSAGE
    assert outcomes[2].message == UPDATE_EXCEEDS_LIMIT_MESSAGE
    assert outcomes[3].message == NEGATIVE_HOURS_REJECTED


def test_unknown_task_leaves_project_untouched(project):
    outcome = run_step(project, ScenarioStep(action="delete", task="Ghost"))

    assert not outcome.ok
    assert outcome.message == "No task named 'Ghost'."
    assert project.activity_log == ()


def test_rename_changes_project_name(project):
    outcome = run_step(project, ScenarioStep(action="rename", task="Relaunch"))
    assert outcome.ok
    assert project.name == "Relaunch"


def test_delete_step_publishes_event(project, sink):
    run_step(project, ScenarioStep(action="add", task="A", hours=1))

    outcome = run_step(project, ScenarioStep(action="delete", task="A"))

    assert outcome.ok
    assert [e.name for e in sink.of_type(TaskDeleted)] == ["A"]


def test_demo_walkthrough_end_state(sink):
    scenario = demo_scenario()
    project = Project(name=scenario.name, sink=sink)

    outcomes = run_scenario(project, scenario.steps)

    assert [o.ok for o in outcomes] == [True, True, False, True, True, False, True, False, True]
    assert [(t.name, t.hours_remaining, t.is_complete) for t in project.tasks] == [
        ("Design", 0, True),
        ("Build", 7, False),
    ]
    assert project.status == ProjectStatus.MAKING_PROGRESS
    assert project.activity_log == (
        "Design added.",
        "Build added.",
        ADD_EXCEEDS_LIMIT_MESSAGE,
        "Design completed.",
        "Test added.",
        UPDATE_EXCEEDS_LIMIT_MESSAGE,
        "Test deleted.",
    )
    assert len(sink) == 1
