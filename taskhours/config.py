"""User settings for taskhours.

Stores defaults such as the project hour limit in ~/.taskhours/config.json.
Set TASKHOURS_HOME to use another directory.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from taskhours.domain.project.models import DEFAULT_HOURS_LIMIT
from taskhours.domain.shared.result import Err, Result
from taskhours.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


class Settings(BaseModel):
    """Defaults applied when the CLI builds a project."""

    hours_limit: int = Field(default=DEFAULT_HOURS_LIMIT, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level


def get_config_dir() -> Path:
    """Get the taskhours config directory, creating it if needed."""
    config_dir = Path(os.environ.get("TASKHOURS_HOME", Path.home() / ".taskhours"))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings() -> Settings:
    """Load settings, falling back to defaults if the file is missing or bad."""
    config_file = get_config_dir() / CONFIG_FILE_NAME
    if not config_file.exists():
        return Settings()

    result = JsonStorage().load_json(config_file)
    if isinstance(result, Err):
        logger.warning(f"Ignoring settings file: {result.error}")
        return Settings()
    try:
        return Settings(**result.value)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid settings in {config_file}: {e}")
        return Settings()


def save_settings(settings: Settings) -> Result[None, str]:
    """Write settings to the config file."""
    config_file = get_config_dir() / CONFIG_FILE_NAME
    return JsonStorage().save_json(config_file, settings.model_dump())
