"""Interfaces layer for taskhours.

- CLI: Command-line interface using Typer, output through rich

The interfaces layer accepts user input, calls application services and
formats their results.
"""

from taskhours.interfaces.cli import app

__all__ = ["app"]
