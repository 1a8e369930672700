"""Config – Settings base class and FlagConsoleSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from flag_console.config.errors import InvalidSettingValueError

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FlagConsoleSettings(Settings):
    """Runtime options for a flag console session.

    Read from ``FLAG_CONSOLE_*`` environment variables by
    :class:`~flag_console.config.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "FLAG_CONSOLE"

    log_level: str = "INFO"
    json_logs: bool = True
    allow_unreleased_overrides: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVEL_NAMES)}"
            )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["FlagConsoleSettings", "Settings"]
