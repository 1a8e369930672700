"""Config – 12-factor settings and loaders."""

from flag_console.config.errors import ConfigError, InvalidSettingValueError
from flag_console.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from flag_console.config.settings import FlagConsoleSettings, Settings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagConsoleSettings",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
