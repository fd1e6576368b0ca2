"""
settings.py

This module provides application configuration management for pctl.

Features:
- Centralized application configuration using Pydantic settings
- Optional JSON configuration file in the user config directory
- Constants and console instances for application-wide use

Precedence (highest first):
1. Explicit keyword arguments
2. Environment variables with the PCTL_ prefix
3. The JSON config file

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final, Optional
from appdirs import user_config_dir
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from rich.console import Console

# Console instances for rich output; player output goes to stdout,
# diagnostics to stderr.
console: Final[Console] = Console()
console_err: Final[Console] = Console(stderr=True)

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("pctl", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with PCTL_ prefix
    or through a JSON object in CONFIG_FILE.

    Attributes:
        beQuiet: Suppress debug logging on stderr
        player: Default comma separated list of players to control
        ignore_player: Default comma separated list of players to ignore
    """

    beQuiet: bool = True
    player: Optional[str] = None
    ignore_player: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="PCTL_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        json_file=CONFIG_FILE,
        json_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init kwargs, then the environment, then the JSON file."""
        return (init_settings, env_settings, JsonConfigSettingsSource(settings_cls))


# Create the application settings instance
appsettings: Final[App] = App()
