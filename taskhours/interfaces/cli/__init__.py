"""CLI interface for taskhours using Typer.

Usage:
    taskhours demo              # Run the built-in walkthrough
    taskhours run FILE          # Replay a scenario file
    taskhours config show       # Show settings

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (scenario, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from pathlib import Path
from typing import Optional

import typer

from taskhours import __version__
from taskhours.config import get_settings
from taskhours.interfaces.cli.commands import config, scenario
from taskhours.interfaces.cli.common import configure_logging

app = typer.Typer(
    name="taskhours",
    help="Projects, tasks and an hour budget that must hold",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskhours version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """taskhours - projects, tasks and an hour budget that must hold."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(scenario.app, name="scenario")
app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("demo")
def demo(
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Project hours limit"
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain text rendering"),
) -> None:
    """Run the walkthrough (shortcut for 'scenario demo')."""
    scenario.demo(limit=limit, plain=plain)


@app.command("run")
def run(
    file: Path = typer.Argument(..., help="Scenario JSON file"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Project hours limit (overrides the file)"
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain text rendering"),
) -> None:
    """Run a scenario file (shortcut for 'scenario run')."""
    scenario.run(file=file, limit=limit, plain=plain)


__all__ = ["app"]
