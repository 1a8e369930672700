"""Command – the ``flag`` debug-shell command."""
from flag_console.command.command import USAGE, FlagCommand
from flag_console.command.output import OutputSink, println

__all__ = ["FlagCommand", "OutputSink", "USAGE", "println"]
