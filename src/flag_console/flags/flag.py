"""Flags – Flag descriptor and FlagKind tag."""
from __future__ import annotations

import dataclasses
import enum
from typing import Union

from flag_console.errors import InvalidFlagError

FlagValue = Union[bool, str, int]


class FlagKind(str, enum.Enum):
    """Value kind of a flag; selects the read and write branch."""

    BOOLEAN = "boolean"
    STRING = "string"
    INT = "int"


_VALUE_TYPES: dict[FlagKind, type] = {
    FlagKind.BOOLEAN: bool,
    FlagKind.STRING: str,
    FlagKind.INT: int,
}


@dataclasses.dataclass(frozen=True)
class Flag:
    """Immutable descriptor of a runtime feature flag.

    ``released`` only applies to boolean flags. An unreleased boolean flag
    may be overridden only where the store allows it; released, string and
    int flags may always be overridden.

    Prefer the variant constructors::

        Flag.unreleased(500, "new_shade", "systemui")
        Flag.releasable(501, "quick_settings_v2", "systemui")
        Flag.string(502, "greeting", "systemui", default="hello")
        Flag.integer(503, "max_tiles", "systemui", default=12)
    """

    id: int
    name: str
    namespace: str
    default: FlagValue
    kind: FlagKind
    released: bool = False

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.kind]
        # bool is a subclass of int; keep the two kinds apart.
        if isinstance(self.default, bool) and expected is not bool:
            raise InvalidFlagError(
                f"Flag {self.id} is {self.kind.value} but its default is a boolean"
            )
        if not isinstance(self.default, expected):
            raise InvalidFlagError(
                f"Flag {self.id} is {self.kind.value} but its default is "
                f"{type(self.default).__name__}"
            )
        if self.released and self.kind is not FlagKind.BOOLEAN:
            raise InvalidFlagError(f"Flag {self.id}: only boolean flags carry a release state")

    @classmethod
    def unreleased(cls, id: int, name: str, namespace: str, default: bool = False) -> Flag:
        return cls(id, name, namespace, default, FlagKind.BOOLEAN, released=False)

    @classmethod
    def releasable(cls, id: int, name: str, namespace: str, default: bool = True) -> Flag:
        return cls(id, name, namespace, default, FlagKind.BOOLEAN, released=True)

    @classmethod
    def string(cls, id: int, name: str, namespace: str, default: str = "") -> Flag:
        return cls(id, name, namespace, default, FlagKind.STRING)

    @classmethod
    def integer(cls, id: int, name: str, namespace: str, default: int = 0) -> Flag:
        return cls(id, name, namespace, default, FlagKind.INT)

    @property
    def is_boolean(self) -> bool:
        return self.kind is FlagKind.BOOLEAN

    def override_permitted(self, allow_unreleased: bool) -> bool:
        """Return whether a runtime override may replace the default."""
        if self.is_boolean and not self.released:
            return allow_unreleased
        return True


__all__ = ["Flag", "FlagKind", "FlagValue"]
