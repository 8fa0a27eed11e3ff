"""User configuration for the winargs command-line tool."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml
from platformdirs import user_config_dir

from .dialects import Dialect, UnknownDialect

CONFIG_FILENAME = "winargs.toml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""

    pass


@dataclass
class Settings:
    """Defaults applied when a flag is not given on the command line."""

    dialect: Dialect = Dialect.VC2008
    json_output: bool = False


def get_config_dir() -> Path:
    """Get the configuration directory for winargs."""
    return Path(user_config_dir("winargs", "winargs"))


def default_config_path() -> Path:
    """Get the default configuration file path."""
    return get_config_dir() / CONFIG_FILENAME


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from a TOML file.

    Recognised keys are `dialect` (a dialect name) and `json` (bool). Other
    keys are ignored. A missing file gives the built-in defaults.

    Args:
        path: Configuration file to read (default: the user config directory)

    Returns:
        The loaded Settings

    Raises:
        ConfigError: If the file is unreadable or holds invalid values
    """
    config_path = Path(path) if path else default_config_path()
    settings = Settings()

    if not config_path.exists():
        return settings

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Cannot read config '{config_path}': {e}") from e

    if "dialect" in data:
        try:
            settings.dialect = Dialect.from_name(str(data["dialect"]))
        except UnknownDialect as e:
            raise ConfigError(f"{config_path}: {e}") from None

    if "json" in data:
        if not isinstance(data["json"], bool):
            raise ConfigError(f"{config_path}: 'json' must be true or false")
        settings.json_output = data["json"]

    return settings
