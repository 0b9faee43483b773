"""Persistent JSON config helpers.

Stores the hidden-file preference, explorer visibility, theme, tree depth
limit, and log directory. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

APP_NAME = "ledit"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))


@dataclass(frozen=True)
class AppConfig:
    """Snapshot of the settings the application reads at startup."""

    show_hidden: bool = True
    explorer_visible: bool = True
    theme: str | None = None
    max_depth: int | None = None
    log_dir: Path = DEFAULT_LOG_DIR


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write errors are ignored so a read-only config directory never breaks
    the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_show_hidden() -> bool:
    return _load_bool("show_hidden", True)


def save_show_hidden(show_hidden: bool) -> None:
    _save_value("show_hidden", bool(show_hidden))


def load_explorer_visible() -> bool:
    return _load_bool("explorer_visible", True)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    _save_value("theme", stripped)


def load_max_depth() -> int | None:
    """Return the positive tree depth limit, or ``None`` for unlimited.

    Booleans, non-integers, and values below ``1`` are ignored.
    """
    value = load_config().get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


def load_log_dir() -> Path:
    value = load_config().get("log_dir")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_LOG_DIR
    try:
        return Path(value.strip()).expanduser()
    except RuntimeError:
        return DEFAULT_LOG_DIR


def load_app_config() -> AppConfig:
    return AppConfig(
        show_hidden=load_show_hidden(),
        explorer_visible=load_explorer_visible(),
        theme=load_theme_name(),
        max_depth=load_max_depth(),
        log_dir=load_log_dir(),
    )
