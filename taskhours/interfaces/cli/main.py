"""Entry point for the taskhours CLI.

Usage:
    python -m taskhours.interfaces.cli.main

Or via installed entry point:
    taskhours <command>
"""

from taskhours.interfaces.cli import app


def main() -> None:
    """Run the taskhours CLI application."""
    app()


if __name__ == "__main__":
    main()
