"""Theme persistence.

The selected theme is stored as a JSON object holding two ``#RRGGBB``
strings. Missing or broken files read back as the default theme, and write
failures are logged and otherwise ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..ui_theme import DEFAULT_THEME, Theme, is_hex_color

logger = logging.getLogger(__name__)

APP_NAME = "kittyfs"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / "config.json"
# Earlier releases kept the file in the working directory.
LEGACY_CONFIG_PATH = Path("config.json")
CONFIG_PATH = DEFAULT_CONFIG_PATH

BORDER_COLOR_KEY = "border_color"
HIGHLIGHT_COLOR_KEY = "highlight_color"


def set_config_path(path: Path) -> None:
    """Point load/save at ``path`` instead of the per-user location."""
    global CONFIG_PATH
    CONFIG_PATH = Path(path)


def _readable_config_path() -> Path:
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and not CONFIG_PATH.exists() and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Return the stored JSON object, or ``{}`` when nothing usable is stored."""
    source = _readable_config_path()
    try:
        raw = source.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.debug("cannot read config %s: %s", source, exc)
        return {}

    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.debug("ignoring malformed config %s: %s", source, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is %s", source, type(data).__name__)
        return {}
    return data


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` to ``CONFIG_PATH``, creating parent directories."""
    try:
        payload = json.dumps(data, indent=2) + "\n"
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _color_field(data: dict[str, object], key: str, fallback: str) -> str:
    value = data.get(key)
    if is_hex_color(value):
        return value
    if value is not None:
        logger.debug("config field %s=%r is not a #RRGGBB color", key, value)
    return fallback


def load_theme() -> Theme:
    """Return the persisted theme.

    Each color falls back to its default on its own. Valid colors outside
    the theme registry are kept as-is.
    """
    data = load_config()
    return Theme(
        border_color=_color_field(data, BORDER_COLOR_KEY, DEFAULT_THEME.border_color),
        highlight_color=_color_field(data, HIGHLIGHT_COLOR_KEY, DEFAULT_THEME.highlight_color),
    )


def save_theme(theme: Theme) -> None:
    save_config({BORDER_COLOR_KEY: theme.border_color, HIGHLIGHT_COLOR_KEY: theme.highlight_color})


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "LEGACY_CONFIG_PATH",
    "set_config_path",
    "load_config",
    "save_config",
    "load_theme",
    "save_theme",
]
