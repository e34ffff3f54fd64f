"""Settings tests — defaults, persistence and bad files."""

import pytest
from pydantic import ValidationError

from taskhours.config import Settings, get_config_dir, get_settings, save_settings
from taskhours.domain.shared import Ok


def test_config_dir_follows_env(taskhours_home):
    assert get_config_dir() == taskhours_home
    assert taskhours_home.is_dir()


def test_defaults_without_file():
    settings = get_settings()
    assert settings.hours_limit == 10
    assert settings.log_level == "WARNING"


def test_saved_settings_are_loaded():
    assert save_settings(Settings(hours_limit=40, log_level="info")) == Ok(None)

    settings = get_settings()

    assert settings.hours_limit == 40
    assert settings.log_level == "INFO"


def test_bad_file_falls_back_to_defaults(taskhours_home):
    get_config_dir()
    (taskhours_home / "config.json").write_text('{"hours_limit": -5}', encoding="utf-8")

    assert get_settings() == Settings()


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_non_utf8_file_falls_back_to_defaults(taskhours_home):
    get_config_dir()
    (taskhours_home / "config.json").write_bytes(b'{"hours_limit": "\xff"}')

    assert get_settings() == Settings()
