"""Configuration loading for Fleeting.

Settings live in ``~/.config/fleeting/config.toml``::

    [storage]
    db_path = "~/.config/fleeting/fleeting.db"

    [display]
    dark_mode = false
    font = "Lato-Regular"
    font_size = 18

    [logging]
    level = "WARNING"
"""

import logging
from pathlib import Path
from typing import Optional

import toml

from fleeting.themes import DEFAULT_FONT, DEFAULT_FONT_SIZE, FONT_OPTIONS, FONT_SIZES

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "fleeting"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "fleeting.db"
DEFAULT_LOG_LEVEL = "WARNING"


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load the TOML configuration.

    Args:
        config_path: File to read. Defaults to ``CONFIG_PATH``.

    Returns:
        Parsed config dict. Empty if the file is missing or unreadable.
    """
    path = Path(config_path) if config_path else CONFIG_PATH

    if not path.exists():
        return {}

    try:
        return toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}


def _section(config: dict, name: str) -> dict:
    """A config table, or an empty one if the key is missing or not a table."""
    section = config.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s] in config: expected a table", name)
        return {}
    return section


def get_db_path(config: dict) -> Path:
    """Database path from config, with ``~`` expanded."""
    value = _section(config, "storage").get("db_path")
    if not value or not isinstance(value, str):
        return DEFAULT_DB_PATH
    return Path(value).expanduser()


def get_log_level(config: dict) -> int:
    """Logging level from config, falling back to WARNING."""
    name = str(_section(config, "logging").get("level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using %s", name, DEFAULT_LOG_LEVEL)
        return logging.WARNING
    return level


def get_display_settings(config: dict) -> dict:
    """Display preferences with invalid values replaced by defaults."""
    display = _section(config, "display")

    dark_mode = display.get("dark_mode", False)
    if not isinstance(dark_mode, bool):
        dark_mode = False

    font = display.get("font", DEFAULT_FONT)
    if font not in FONT_OPTIONS:
        font = DEFAULT_FONT

    font_size = display.get("font_size", DEFAULT_FONT_SIZE)
    if isinstance(font_size, bool) or font_size not in FONT_SIZES:
        font_size = DEFAULT_FONT_SIZE

    return {
        "dark_mode": dark_mode,
        "font": font,
        "font_size": font_size,
    }


def save_display_setting(key: str, value, config_path: Optional[Path] = None) -> Path:
    """Write one ``[display]`` setting back to the config file.

    Other settings in the file are preserved.

    Returns:
        Path of the written config file.
    """
    path = Path(config_path) if config_path else CONFIG_PATH
    config = load_config(path)

    display = dict(_section(config, "display"))
    display[key] = value
    config["display"] = display

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        toml.dump(config, f)

    return path
