"""Optional user settings and logging setup.

Settings live in a small JSON file::

    {
      "log_level": "DEBUG",
      "commands": {"npm": ["npm", "init"], "git": ["git", "init", "-b", "main"]}
    }

The file is looked up at ``$MAKEDIR_CONFIG`` or, when unset, at
``~/.config/makedir/config.json``.  A missing file simply means defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator, ValidationError

from .actions import Action, is_command_action
from .exceptions import ConfigError

log = logging.getLogger(__name__)

CONFIG_ENV = "MAKEDIR_CONFIG"
LOG_LEVEL_ENV = "MAKEDIR_LOG_LEVEL"
DEFAULT_CONFIG_PATH = Path("~/.config/makedir/config.json")


class Settings(BaseModel):
    log_level: str = "WARNING"
    commands: dict[Action, tuple[str, ...]] = {}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("commands")
    @classmethod
    def _command_actions_only(cls, value: dict[Action, tuple[str, ...]]) -> dict[Action, tuple[str, ...]]:
        for action, argv in value.items():
            if not is_command_action(action):
                raise ValueError(f"{action.value!r} does not run an external command")
            if not argv:
                raise ValueError(f"command for {action.value!r} is empty")
        return value


def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from *path* (or :func:`config_path`), tolerant to a missing file.

    ``$MAKEDIR_LOG_LEVEL`` takes precedence over the file's ``log_level``.

    Raises
    ------
    ConfigError
        If the file exists but is not valid JSON or does not match
        :class:`Settings`.
    """
    cfg_file = Path(path).expanduser() if path is not None else config_path()
    data: dict = {}
    if cfg_file.is_file():
        try:
            with cfg_file.open("r", encoding = "utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read settings file {cfg_file}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {cfg_file} must contain a JSON object")

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        data = {**data, "log_level": env_level}

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {cfg_file}: {exc}") from exc


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger on stderr."""
    logging.basicConfig(
            level = level, format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )
    log.debug("Logging configured at %s", level)
