"""Settings CLI commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from taskhours.config import Settings, get_config_dir, get_settings, save_settings
from taskhours.domain.shared import Err
from taskhours.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Show and change taskhours settings")


@app.command("show")
def show() -> None:
    """Show the current settings."""
    settings = get_settings()
    typer.echo(f"Config dir: {get_config_dir()}")
    typer.echo(f"hours_limit: {settings.hours_limit}")
    typer.echo(f"log_level: {settings.log_level}")


@app.command("set")
def set_settings(
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Default hours limit"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Default log level"),
) -> None:
    """Change settings. Options left out keep their current value.

    Example:
        taskhours config set --limit 40 --log-level info
    """
    current = get_settings()
    updates = {}
    if limit is not None:
        updates["hours_limit"] = limit
    if log_level is not None:
        updates["log_level"] = log_level

    try:
        settings = Settings(**{**current.model_dump(), **updates})
    except ValidationError as e:
        print_error(f"Invalid settings:\n{e}")
        raise typer.Exit(1)

    result = save_settings(settings)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    print_success(f"Saved: hours_limit={settings.hours_limit} log_level={settings.log_level}")
