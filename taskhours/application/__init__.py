"""Application service layer for taskhours.

Services orchestrate the domain for the interfaces layer:

    project_service - Project creation and summaries
    scenario_service - Replaying scripted operations against a project

Example usage:
    >>> from taskhours.application import create_project, get_project_summary
    >>> from taskhours.domain.shared import Ok
    >>>
    >>> result = create_project("Website", hours_limit=20)
    >>> if isinstance(result, Ok):
    ...     project = result.value
    ...     project.add_task("Design", 5)
    ...     print(get_project_summary(project).status)
    Not Started
"""

from taskhours.application.project_service import (
    ProjectSummary,
    create_project,
    get_project_summary,
)
from taskhours.application.scenario_service import (
    Scenario,
    ScenarioStep,
    StepOutcome,
    demo_scenario,
    run_scenario,
    run_step,
)

__all__ = [
    # Project service
    "create_project",
    "get_project_summary",
    "ProjectSummary",
    # Scenario service
    "Scenario",
    "ScenarioStep",
    "StepOutcome",
    "run_scenario",
    "run_step",
    "demo_scenario",
]
