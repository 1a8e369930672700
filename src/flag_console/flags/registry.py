"""Flags – FlagRegistry, the read-only id → Flag mapping."""
from __future__ import annotations

import types
from typing import Iterator, Mapping

from flag_console.errors import DuplicateFlagError, InvalidFlagError
from flag_console.flags.flag import Flag


class FlagRegistry(Mapping[int, Flag]):
    """Immutable mapping of flag id to descriptor.

    Every key must equal the ``id`` of the flag stored under it. Build from
    loose descriptors with :meth:`of`, which rejects repeated ids.
    """

    def __init__(self, flags: Mapping[int, Flag] | None = None) -> None:
        flags = dict(flags or {})
        for key, flag in flags.items():
            if key != flag.id:
                raise InvalidFlagError(f"Registry key {key} does not match flag id {flag.id}")
        self._flags: Mapping[int, Flag] = types.MappingProxyType(flags)

    @classmethod
    def of(cls, *flags: Flag) -> FlagRegistry:
        by_id: dict[int, Flag] = {}
        for flag in flags:
            if flag.id in by_id:
                raise DuplicateFlagError(flag.id)
            by_id[flag.id] = flag
        return cls(by_id)

    def __getitem__(self, flag_id: int) -> Flag:
        return self._flags[flag_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"FlagRegistry(ids={sorted(self._flags)!r})"

    def sorted_flags(self) -> list[Flag]:
        """Return all descriptors ordered by id."""
        return [self._flags[k] for k in sorted(self._flags)]


__all__ = ["FlagRegistry"]
