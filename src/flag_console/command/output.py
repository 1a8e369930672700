"""Command – OutputSink protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Anything text can be written to: ``sys.stdout``, ``io.StringIO``, a socket file."""

    def write(self, text: str) -> int | None: ...


def println(output: OutputSink, line: str = "") -> None:
    output.write(f"{line}\n")


__all__ = ["OutputSink", "println"]
