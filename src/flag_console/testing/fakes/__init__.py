"""Testing fakes – in-memory doubles for the store port."""
from flag_console.testing.fakes.flag_store import RecordingFlagStore

__all__ = ["RecordingFlagStore"]
