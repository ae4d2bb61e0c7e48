"""Persistent JSON config for the browser.

Stores the start directory, player command, data directory, and the
file-type filter list. Missing config is written with defaults on first run;
malformed config falls back to defaults without touching the user's file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .logging_config import LOG_FILENAME, get_logger

APP_NAME = "lazywatch"
CONFIG_FILENAME = "config.json"
CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))
CONFIG_PATH = CONFIG_DIR / CONFIG_FILENAME

DEFAULT_PLAYER_COMMAND = "mpv"
DEFAULT_FILE_TYPE_FILTERS: tuple[str, ...] = (
    ".mp4",
    ".mkv",
    ".avi",
    ".webm",
    ".mov",
    ".m4v",
    ".wmv",
    ".flv",
    ".mpg",
    ".mpeg",
)

logger = get_logger("config")


@dataclass(frozen=True)
class AppConfig:
    """Browser settings loaded once at startup."""

    default_directory: Path
    player_command: str
    data_directory: Path
    file_type_filters: tuple[str, ...]

    @property
    def history_path(self) -> Path:
        return self.data_directory / "history.json"

    @property
    def log_path(self) -> Path:
        return self.data_directory / LOG_FILENAME


def default_config() -> AppConfig:
    """Return first-run defaults for the current user and platform."""
    return AppConfig(
        default_directory=Path.home(),
        player_command=DEFAULT_PLAYER_COMMAND,
        data_directory=CONFIG_DIR / "data",
        file_type_filters=DEFAULT_FILE_TYPE_FILTERS,
    )


def config_to_dict(config: AppConfig) -> dict[str, object]:
    """Serialize ``config`` into the on-disk JSON shape."""
    return {
        "default_directory": str(config.default_directory),
        "player_command": config.player_command,
        "data_directory": str(config.data_directory),
        "file_type_filters": list(config.file_type_filters),
    }


def _coerce_path(value: object, fallback: Path, key: str) -> Path:
    """Accept non-empty strings as ``~``-expanded paths."""
    if isinstance(value, str) and value.strip():
        return Path(value.strip()).expanduser()
    if value is not None:
        logger.warning("Invalid config value for %s: %r", key, value)
    return fallback


def _coerce_command(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    if value is not None:
        logger.warning("Invalid config value for player_command: %r", value)
    return fallback


def _coerce_filters(value: object, fallback: tuple[str, ...]) -> tuple[str, ...]:
    """Accept a list of strings; empty strings are dropped."""
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(item for item in value if item)
    if value is not None:
        logger.warning("Invalid config value for file_type_filters: %r", value)
    return fallback


def config_from_dict(data: dict[str, object], defaults: AppConfig | None = None) -> AppConfig:
    """Build an ``AppConfig`` from decoded JSON, field by field.

    Missing keys take the default silently; present but invalid values take
    the default with a logged warning.
    """
    base = defaults if defaults is not None else default_config()
    return AppConfig(
        default_directory=_coerce_path(data.get("default_directory"), base.default_directory, "default_directory"),
        player_command=_coerce_command(data.get("player_command"), base.player_command),
        data_directory=_coerce_path(data.get("data_directory"), base.data_directory, "data_directory"),
        file_type_filters=_coerce_filters(data.get("file_type_filters"), base.file_type_filters),
    )


def save_config(config: AppConfig, path: Path | None = None) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` instead of raising when the file cannot be written.
    """
    target = path if path is not None else CONFIG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(config_to_dict(config), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write config %s: %s", target, exc)
        return False
    logger.info("Wrote config to %s", target)
    return True


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from ``path`` (default: platform config dir).

    A missing file is created with defaults as a first-run side effect.
    Unreadable files, malformed JSON, and non-object documents fall back to
    defaults and leave the file as it is.
    """
    target = path if path is not None else CONFIG_PATH
    defaults = default_config()
    if not target.exists():
        logger.info("Config file not found at %s, creating defaults", target)
        save_config(defaults, target)
        return defaults

    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to load config %s, using defaults: %s", target, exc)
        return defaults
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object, using defaults", target)
        return defaults

    config = config_from_dict(data, defaults)
    logger.info("Loaded configuration from %s", target)
    return config


__all__ = [
    "APP_NAME",
    "AppConfig",
    "CONFIG_PATH",
    "DEFAULT_FILE_TYPE_FILTERS",
    "DEFAULT_PLAYER_COMMAND",
    "config_from_dict",
    "config_to_dict",
    "default_config",
    "load_config",
    "save_config",
]
