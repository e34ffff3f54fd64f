"""Scenario CLI commands.

Commands that build a fresh project, replay steps against it and show the
result: the demo walkthrough or a scenario read from a JSON file.

A scenario file looks like:

    {
      "name": "Website",
      "hours_limit": 12,
      "steps": [
        {"action": "add", "task": "Design", "hours": 4},
        {"action": "complete", "task": "Design"},
        {"action": "update", "task": "Design", "hours": 2},
        {"action": "delete", "task": "Design"}
      ]
    }
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from taskhours.application import Scenario, create_project, demo_scenario, run_scenario
from taskhours.config import get_settings
from taskhours.domain.shared import Err
from taskhours.infrastructure.events import InMemoryEventSink
from taskhours.infrastructure.storage import JsonStorage
from taskhours.interfaces.cli.common import (
    describe_event,
    print_error,
    print_info,
    print_outcomes,
    print_project,
)

app = typer.Typer(help="Replay scenarios against a project")


def _play(scenario: Scenario, limit: int | None, plain: bool) -> None:
    """Run a scenario on a new project and print what happened."""
    hours_limit = limit or scenario.hours_limit or get_settings().hours_limit

    sink = InMemoryEventSink()
    result = create_project(scenario.name, hours_limit=hours_limit, sink=sink)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    project = result.value

    outcomes = run_scenario(project, scenario.steps)

    print_outcomes(outcomes)
    typer.echo()
    print_project(project, plain=plain)

    if len(sink):
        typer.echo()
        print_info("Published events:")
        for event in sink:
            typer.echo(f"  {describe_event(event)}")


@app.command("demo")
def demo(
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Project hours limit"
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain text rendering"),
) -> None:
    """Run the built-in walkthrough.

    Example:
        taskhours demo --plain
    """
    _play(demo_scenario(), limit, plain)


@app.command("run")
def run(
    file: Path = typer.Argument(..., help="Scenario JSON file"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Project hours limit (overrides the file)"
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain text rendering"),
) -> None:
    """Run a scenario file against a new project.

    Example:
        taskhours run scenario.json --limit 20
    """
    result = JsonStorage().load_json(file)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    try:
        scenario = Scenario(**result.value)
    except ValidationError as e:
        print_error(f"Invalid scenario in {file}:\n{e}")
        raise typer.Exit(1)

    _play(scenario, limit, plain)
