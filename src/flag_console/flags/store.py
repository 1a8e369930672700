"""Flags – FlagStore port."""
from __future__ import annotations

import abc

from flag_console.flags.flag import Flag


class FlagStore(abc.ABC):
    """Port: holds the live value of every flag and performs overrides.

    Implementations own the override policy (for example refusing writes to
    unreleased flags) and any persistence.
    """

    @abc.abstractmethod
    def is_enabled(self, flag: Flag) -> bool: ...

    @abc.abstractmethod
    def get_string(self, flag: Flag) -> str: ...

    @abc.abstractmethod
    def get_int(self, flag: Flag) -> int: ...

    @abc.abstractmethod
    def set_boolean(self, flag: Flag, value: bool) -> None: ...

    @abc.abstractmethod
    def set_string(self, flag: Flag, value: str) -> None: ...

    @abc.abstractmethod
    def set_int(self, flag: Flag, value: int) -> None: ...

    @abc.abstractmethod
    def erase(self, flag: Flag) -> None:
        """Drop any override so the flag reverts to its default."""


__all__ = ["FlagStore"]
