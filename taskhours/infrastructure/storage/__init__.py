"""Storage infrastructure for taskhours."""

from taskhours.infrastructure.storage.json_storage import JsonStorage

__all__ = ["JsonStorage"]
