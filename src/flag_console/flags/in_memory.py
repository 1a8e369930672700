"""Flags – InMemoryFlagStore."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from flag_console.flags.flag import Flag, FlagValue
from flag_console.flags.store import FlagStore
from flag_console.observability.logging import get_logger

if TYPE_CHECKING:
    from flag_console.config import FlagConsoleSettings

logger = get_logger(__name__)


class InMemoryFlagStore(FlagStore):
    """Store backed by a ``{flag_id: value}`` override dict.

    Reads fall back to the flag's default when no override exists. With
    ``allow_unreleased_overrides=False`` writes to unreleased boolean flags
    are refused and the current value is kept, as on a release build.
    """

    def __init__(
        self,
        overrides: dict[int, FlagValue] | None = None,
        *,
        allow_unreleased_overrides: bool = True,
    ) -> None:
        self._overrides: dict[int, FlagValue] = dict(overrides or {})
        self._allow_unreleased = allow_unreleased_overrides
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: FlagConsoleSettings) -> InMemoryFlagStore:
        return cls(allow_unreleased_overrides=settings.allow_unreleased_overrides)

    def overrides(self) -> dict[int, FlagValue]:
        """Return a snapshot of the current overrides."""
        with self._lock:
            return dict(self._overrides)

    # ------------------------------------------------------------------
    # FlagStore protocol
    # ------------------------------------------------------------------

    def is_enabled(self, flag: Flag) -> bool:
        return bool(self._read(flag))

    def get_string(self, flag: Flag) -> str:
        return str(self._read(flag))

    def get_int(self, flag: Flag) -> int:
        return int(self._read(flag))

    def set_boolean(self, flag: Flag, value: bool) -> None:
        self._write(flag, value)

    def set_string(self, flag: Flag, value: str) -> None:
        self._write(flag, value)

    def set_int(self, flag: Flag, value: int) -> None:
        self._write(flag, value)

    def erase(self, flag: Flag) -> None:
        with self._lock:
            removed = self._overrides.pop(flag.id, None)
        if removed is not None:
            logger.info("flag_store.override_erased", flag_id=flag.id, flag=flag.name)

    # ------------------------------------------------------------------

    def _read(self, flag: Flag) -> FlagValue:
        with self._lock:
            return self._overrides.get(flag.id, flag.default)

    def _write(self, flag: Flag, value: FlagValue) -> None:
        if not flag.override_permitted(self._allow_unreleased):
            logger.warning("flag_store.override_refused", flag_id=flag.id, flag=flag.name)
            return
        with self._lock:
            if flag.id in self._overrides and self._overrides[flag.id] == value:
                unchanged = True
            else:
                self._overrides[flag.id] = value
                unchanged = False
        if unchanged:
            logger.debug("flag_store.override_unchanged", flag_id=flag.id, flag=flag.name)
        else:
            logger.info("flag_store.override_set", flag_id=flag.id, flag=flag.name, value=value)


__all__ = ["InMemoryFlagStore"]
