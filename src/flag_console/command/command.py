"""Command – FlagCommand, the ``flag`` shell command.

Grammar (the command name itself is stripped by the caller)::

    <id>                  read the flag
    <id> on|off           set a boolean flag
    <id> toggle           invert a boolean flag
    <id> erase            drop the override, back to the default
    <id> set <value>      set a string flag to the literal <value>
    <id> put <int>        set an int flag
    list                  show every registered flag
    help                  show usage
"""
from __future__ import annotations

import re
from typing import Callable, Mapping, Sequence

from flag_console.command.output import OutputSink, println
from flag_console.errors import (
    ArgumentError,
    BaseError,
    NotFoundError,
    UnsupportedOperationError,
)
from flag_console.flags import Flag, FlagKind, FlagStore
from flag_console.observability.logging import get_logger

logger = get_logger(__name__)

ON_COMMANDS = frozenset({"on", "true", "1", "enabled"})
OFF_COMMANDS = frozenset({"off", "false", "0", "disabled"})
TOGGLE_COMMANDS = frozenset({"toggle", "switch", "invert"})
ERASE_COMMANDS = frozenset({"erase", "reset"})
HELP_COMMANDS = frozenset({"help", "-h", "--help"})

# ASCII digits only: no underscores, padding or other scripts.
_INTEGER = re.compile(r"[+-]?[0-9]+")

USAGE = """\
Usage: flag <id> [options]

Reads or overrides a runtime feature flag.

Boolean flags:
  <id>                  print the current value
  <id> on|off           enable or disable
  <id> toggle           invert the current value
  <id> erase            remove the override

String flags:
  <id> set <value>      override with <value>
  <id> erase            remove the override

Int flags:
  <id> put <int>        override with <int>
  <id> erase            remove the override

  list                  print every known flag
  help                  print this message"""


def _parse_int(token: str, problem: str) -> int:
    if _INTEGER.fullmatch(token) is None:
        raise ArgumentError(f"{problem}: {token!r}", token=token)
    return int(token)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FlagCommand:
    """Inspect and override flags from a textual shell.

    The handler keeps no flag state of its own: every value is read from, and
    every override written to, *store* at call time. Errors in the command
    text (see :mod:`flag_console.errors`) are reported as a single
    ``Error: ...`` line and never raised to the caller.

    Two cases differ from that rule. An empty argument list writes its error
    line followed by the usage text. An exception from the store that is not
    a :class:`~flag_console.errors.BaseError` is logged and re-raised, since
    it signals a defect in the store rather than in the command text.
    """

    def __init__(self, store: FlagStore, registry: Mapping[int, Flag]) -> None:
        self._store = store
        self._registry = registry

    def execute(self, output: OutputSink, args: Sequence[str]) -> None:
        if not args:
            println(output, "Error: no flag id supplied")
            println(output, USAGE)
            return

        keyword = args[0].lower()
        if keyword in HELP_COMMANDS:
            println(output, USAGE)
            return
        if keyword == "list":
            self._print_known_flags(output)
            return

        try:
            flag = self._resolve(args[0])
            if len(args) == 1:
                self._print_value(output, flag)
                logger.debug("flag_command.read", flag_id=flag.id)
                return
            self._write(flag, args[1].lower(), args[2:])
        except BaseError as exc:
            logger.warning(
                "flag_command.rejected", args=list(args), code=exc.code, **exc.detail
            )
            println(output, f"Error: {exc.message}")
            return
        except Exception:
            logger.exception("flag_command.failed", args=list(args))
            raise

        logger.info("flag_command.write", flag_id=flag.id, operation=args[1].lower())
        self._print_value(output, flag)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _resolve(self, token: str) -> Flag:
        flag_id = _parse_int(token, "invalid id supplied")
        flag = self._registry.get(flag_id)
        if flag is None:
            raise NotFoundError("Flag", flag_id)
        return flag

    def _write(self, flag: Flag, operation: str, rest: Sequence[str]) -> None:
        """Validate *operation* fully, then make the single mutating store call."""
        if operation in ERASE_COMMANDS:
            self._store.erase(flag)
            return
        mutation = self._mutation_for(flag, operation, rest)
        mutation()

    def _mutation_for(self, flag: Flag, operation: str, rest: Sequence[str]) -> Callable[[], None]:
        if flag.kind is FlagKind.BOOLEAN:
            if operation in ON_COMMANDS:
                return lambda: self._store.set_boolean(flag, True)
            if operation in OFF_COMMANDS:
                return lambda: self._store.set_boolean(flag, False)
            if operation in TOGGLE_COMMANDS:
                # Read and write are separate store calls; not atomic.
                return lambda: self._store.set_boolean(flag, not self._store.is_enabled(flag))
        elif flag.kind is FlagKind.STRING:
            if operation == "set":
                value = self._required(rest, "set")
                return lambda: self._store.set_string(flag, value)
        elif flag.kind is FlagKind.INT:
            if operation == "put":
                raw = self._required(rest, "put")
                number = _parse_int(raw, "invalid integer value")
                return lambda: self._store.set_int(flag, number)
        raise UnsupportedOperationError(flag.kind.value, operation)

    @staticmethod
    def _required(rest: Sequence[str], operation: str) -> str:
        if not rest:
            raise ArgumentError(f"missing value for {operation!r}")
        return rest[0]

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _read(self, flag: Flag) -> object:
        if flag.kind is FlagKind.BOOLEAN:
            return self._store.is_enabled(flag)
        if flag.kind is FlagKind.STRING:
            return self._store.get_string(flag)
        return self._store.get_int(flag)

    def _print_value(self, output: OutputSink, flag: Flag) -> None:
        println(output, f"{flag.name}: {_format_value(self._read(flag))}")

    def _print_known_flags(self, output: OutputSink) -> None:
        flags = sorted(self._registry.values(), key=lambda f: f.id)
        if not flags:
            println(output, "No flags registered")
            return
        rows = [(str(f.id), f.name, f.kind.value, _format_value(self._read(f))) for f in flags]
        header = ("FlagId", "Name", "Kind", "Value")
        widths = [max(len(r[i]) for r in [header, *rows]) for i in range(len(header))]
        for row in [header, *rows]:
            println(output, "  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())


__all__ = ["FlagCommand", "USAGE"]
