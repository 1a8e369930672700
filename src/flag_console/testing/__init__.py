"""Testing helpers for code that drives the flag console."""
from flag_console.testing.fakes import RecordingFlagStore

__all__ = ["RecordingFlagStore"]
