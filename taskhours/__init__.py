"""taskhours - a project/task aggregate with an hour budget."""

__version__ = "0.1.0"
