"""CLI command groups for taskhours.

Command groups:
- scenario: Replay scenarios against a project (demo, run)
- config: Settings (show, set)

Each command group is a Typer app registered with the main app using
app.add_typer().
"""

from taskhours.interfaces.cli.commands import config, scenario

__all__ = ["scenario", "config"]
