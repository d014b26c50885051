"""Tests for settings loading in :mod:`makedir.config`."""

import json
from pathlib import Path

import pytest

from makedir.actions import Action
from makedir.config import load_settings
from makedir.exceptions import ConfigError


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding = "utf-8")
    return path


def test_missing_file_gives_defaults(isolated_settings: Path) -> None:
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.commands == {}


def test_file_from_environment(isolated_settings: Path) -> None:
    _write(isolated_settings, {"log_level": "debug", "commands": {"git": ["git", "init", "-b", "main"]}})
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.commands == {Action.GIT: ("git", "init", "-b", "main")}


def test_log_level_environment_override(isolated_settings: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(isolated_settings, {"log_level": "INFO"})
    monkeypatch.setenv("MAKEDIR_LOG_LEVEL", "DEBUG")
    assert load_settings().log_level == "DEBUG"


@pytest.mark.parametrize(
        "data", [{"log_level": "LOUD"}, {"commands": {"readme": ["cat"]}}, {"commands": {"svn": ["svn"]}},
                {"commands": {"npm": []}}, ["not", "an", "object"], ], )
def test_invalid_settings_raise(tmp_path: Path, data) -> None:
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path / "config.json", data))


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding = "utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)
