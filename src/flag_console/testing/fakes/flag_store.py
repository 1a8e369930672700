"""Testing fakes – RecordingFlagStore."""
from __future__ import annotations

from typing import Any

from flag_console.flags.flag import Flag, FlagValue
from flag_console.flags.in_memory import InMemoryFlagStore


class RecordingFlagStore(InMemoryFlagStore):
    """:class:`InMemoryFlagStore` that records every call made to it.

    Each call is appended to :attr:`calls` as ``(method, flag_id, *args)`` so
    tests can assert the exact sequence of store interactions.

    Usage::

        store = RecordingFlagStore({501: True})
        FlagCommand(store, registry).execute(out, ["501", "toggle"])
        assert store.writes() == [("set_boolean", 501, False)]
    """

    _WRITES = frozenset({"set_boolean", "set_string", "set_int", "erase"})

    def __init__(
        self,
        overrides: dict[int, FlagValue] | None = None,
        *,
        allow_unreleased_overrides: bool = True,
    ) -> None:
        super().__init__(overrides, allow_unreleased_overrides=allow_unreleased_overrides)
        self.calls: list[tuple[Any, ...]] = []

    def is_enabled(self, flag: Flag) -> bool:
        self.calls.append(("is_enabled", flag.id))
        return super().is_enabled(flag)

    def get_string(self, flag: Flag) -> str:
        self.calls.append(("get_string", flag.id))
        return super().get_string(flag)

    def get_int(self, flag: Flag) -> int:
        self.calls.append(("get_int", flag.id))
        return super().get_int(flag)

    def set_boolean(self, flag: Flag, value: bool) -> None:
        self.calls.append(("set_boolean", flag.id, value))
        super().set_boolean(flag, value)

    def set_string(self, flag: Flag, value: str) -> None:
        self.calls.append(("set_string", flag.id, value))
        super().set_string(flag, value)

    def set_int(self, flag: Flag, value: int) -> None:
        self.calls.append(("set_int", flag.id, value))
        super().set_int(flag, value)

    def erase(self, flag: Flag) -> None:
        self.calls.append(("erase", flag.id))
        super().erase(flag)

    # ------------------------------------------------------------------
    # Assertion helpers
    # ------------------------------------------------------------------

    def writes(self) -> list[tuple[Any, ...]]:
        """Return only the mutating calls."""
        return [c for c in self.calls if c[0] in self._WRITES]

    def reads(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] not in self._WRITES]

    def reset_calls(self) -> None:
        self.calls.clear()


__all__ = ["RecordingFlagStore"]
