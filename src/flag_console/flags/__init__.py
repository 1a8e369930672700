"""Flags – descriptors, registry, and the store port."""
from flag_console.flags.flag import Flag, FlagKind, FlagValue
from flag_console.flags.registry import FlagRegistry
from flag_console.flags.store import FlagStore
from flag_console.flags.in_memory import InMemoryFlagStore

__all__ = ["Flag", "FlagKind", "FlagRegistry", "FlagStore", "FlagValue", "InMemoryFlagStore"]
