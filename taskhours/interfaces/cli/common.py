"""Shared utilities for taskhours CLI commands.

This module provides common utilities used across CLI commands:
- Logging setup
- Formatted output helpers (error, success, info, warning)
- Project, outcome and event rendering
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from taskhours.application import StepOutcome, get_project_summary
from taskhours.domain.project import Project, TaskDeleted
from taskhours.domain.shared import DomainEvent

console = Console()


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr through rich.

    Args:
        level: Root logger level name.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def print_error(msg: str) -> None:
    """Print a formatted error message."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_project(project: Project, plain: bool = False) -> None:
    """Print a project's state.

    Args:
        project: The project to show.
        plain: Print the project's own text rendering instead of tables.
    """
    if plain:
        typer.echo(str(project), nl=False)
        return

    summary = get_project_summary(project)
    name = escape(summary.name) or "(unnamed)"
    console.print(
        f"[bold]{name}[/bold] [dim]{summary.id}[/dim]\n"
        f"Status: {summary.status.value}  "
        f"Hours: {summary.total_hours_remaining}/{summary.hours_limit}  "
        f"Progress: {summary.progress_percent}%"
    )

    table = Table(title="Tasks")
    table.add_column("Name")
    table.add_column("Hours", justify="right")
    table.add_column("Complete")
    for task in project.tasks:
        table.add_row(
            escape(task.name),
            str(task.hours_remaining),
            "yes" if task.is_complete else "no",
        )
    console.print(table)

    console.print("[bold]Activity Log[/bold]")
    for entry in project.activity_log:
        console.print(f"  {entry}", markup=False, highlight=False)


def print_outcomes(outcomes: list[StepOutcome]) -> None:
    """Print one line per scenario step."""
    for i, outcome in enumerate(outcomes, start=1):
        line = f"{i:>2}. {outcome.step.describe()}: {outcome.message}"
        if outcome.ok:
            print_success(line)
        else:
            print_warning(line)


def describe_event(event: DomainEvent) -> str:
    """One-line description of a published event."""
    if isinstance(event, TaskDeleted):
        return (
            f"{event.event_type}: {event.name} "
            f"({event.hours_remaining} hours, complete={event.is_complete})"
        )
    return event.event_type


__all__ = [
    "configure_logging",
    "console",
    "describe_event",
    "print_error",
    "print_info",
    "print_outcomes",
    "print_project",
    "print_success",
    "print_warning",
]
