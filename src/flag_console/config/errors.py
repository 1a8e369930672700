"""Config errors raised while loading console settings."""
from __future__ import annotations

from flag_console.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``FLAG_CONSOLE_*`` value is present but unusable."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value


__all__ = ["ConfigError", "InvalidSettingValueError"]
