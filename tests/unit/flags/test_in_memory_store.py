"""Unit tests for InMemoryFlagStore."""

from __future__ import annotations

from structlog.testing import capture_logs

from flag_console.config import FlagConsoleSettings
from flag_console.flags import Flag, InMemoryFlagStore

UNRELEASED = Flag.unreleased(1, "unreleased", "ui")
RELEASED = Flag.releasable(2, "released", "ui")
TEXT = Flag.string(3, "text", "ui", "default")
NUMBER = Flag.integer(4, "number", "ui", 12)


class TestReads:
    def test_defaults_without_overrides(self) -> None:
        store = InMemoryFlagStore()
        assert store.is_enabled(UNRELEASED) is False
        assert store.is_enabled(RELEASED) is True
        assert store.get_string(TEXT) == "default"
        assert store.get_int(NUMBER) == 12

    def test_initial_overrides(self) -> None:
        store = InMemoryFlagStore({1: True, 3: "seeded"})
        assert store.is_enabled(UNRELEASED) is True
        assert store.get_string(TEXT) == "seeded"


class TestWrites:
    def test_set_each_kind(self) -> None:
        store = InMemoryFlagStore()
        store.set_boolean(RELEASED, False)
        store.set_string(TEXT, "new")
        store.set_int(NUMBER, 99)
        assert store.is_enabled(RELEASED) is False
        assert store.get_string(TEXT) == "new"
        assert store.get_int(NUMBER) == 99
        assert store.overrides() == {2: False, 3: "new", 4: 99}

    def test_erase_reverts_to_default(self) -> None:
        store = InMemoryFlagStore()
        store.set_int(NUMBER, 99)
        store.erase(NUMBER)
        assert store.get_int(NUMBER) == 12
        assert store.overrides() == {}

    def test_erase_without_override_is_noop(self) -> None:
        store = InMemoryFlagStore()
        with capture_logs() as logs:
            store.erase(TEXT)
        assert logs == []

    def test_overrides_is_a_snapshot(self) -> None:
        store = InMemoryFlagStore()
        snapshot = store.overrides()
        store.set_int(NUMBER, 1)
        assert snapshot == {}

    def test_unchanged_write_logged_at_debug(self) -> None:
        store = InMemoryFlagStore()
        store.set_int(NUMBER, 5)
        with capture_logs() as logs:
            store.set_int(NUMBER, 5)
        assert [(e["event"], e["log_level"]) for e in logs] == [
            ("flag_store.override_unchanged", "debug")
        ]


class TestOverridePolicy:
    def test_unreleased_allowed_by_default(self) -> None:
        store = InMemoryFlagStore()
        store.set_boolean(UNRELEASED, True)
        assert store.is_enabled(UNRELEASED) is True

    def test_unreleased_refused(self) -> None:
        store = InMemoryFlagStore(allow_unreleased_overrides=False)
        with capture_logs() as logs:
            store.set_boolean(UNRELEASED, True)
        assert store.is_enabled(UNRELEASED) is False
        assert logs[0]["event"] == "flag_store.override_refused"
        assert logs[0]["log_level"] == "warning"

    def test_released_still_writable(self) -> None:
        store = InMemoryFlagStore(allow_unreleased_overrides=False)
        store.set_boolean(RELEASED, False)
        assert store.is_enabled(RELEASED) is False

    def test_from_settings(self) -> None:
        store = InMemoryFlagStore.from_settings(
            FlagConsoleSettings(allow_unreleased_overrides=False)
        )
        store.set_boolean(UNRELEASED, True)
        assert store.is_enabled(UNRELEASED) is False
