"""Tests for cadence.core.lifecycle: entry states and commit guard."""

from __future__ import annotations

from datetime import datetime

import pytest

from cadence.core.attributes import AttributeStore
from cadence.core.lifecycle import (
    Entry,
    EntryLifecycle,
    LifecycleState,
    can_commit,
    current_line,
)
from cadence.core.modes import PresentationMode

WALL = datetime(2026, 1, 5, 14, 3, 9)


def _entry() -> Entry:
    return Entry(id=0, mode=PresentationMode.WIDTH)


class TestCommitGuard:
    @pytest.mark.parametrize(
        ("text", "caret", "expected"),
        [
            ("hello", None, True),
            ("", None, False),
            ("   ", None, False),
            ("hello\n", None, False),
            ("hello\n   ", None, False),
            ("hello\nworld", None, True),
            ("hello\n\n", 5, True),
            ("  \nworld", 2, False),
            ("abc", 0, False),
            ("abc", 99, True),
        ],
    )
    def test_can_commit(self, text: str, caret: int | None, expected: bool) -> None:
        assert can_commit(text, caret) is expected

    def test_current_line(self) -> None:
        assert current_line("one\ntwo\nthree", 6) == "tw"
        assert current_line("one\ntwo", None) == "two"


class TestEntry:
    def test_new_entry_is_composing(self) -> None:
        entry = _entry()
        assert entry.state is LifecycleState.COMPOSING
        assert entry.is_active
        assert entry.is_empty
        assert not entry.committed
        assert entry.started_at is None
        assert entry.frozen_at is None
        assert entry.pause_ms is None
        assert len(entry.attributes) == 0

    def test_attribute_stores_not_shared(self) -> None:
        assert _entry().attributes is not _entry().attributes


class TestTransitions:
    def test_first_entry_has_no_pause(self) -> None:
        lifecycle = EntryLifecycle()
        entry = _entry()
        lifecycle.begin_typing(entry, 10.0, WALL)
        assert entry.state is LifecycleState.FROZEN
        assert entry.started_at == 10.0
        assert entry.frozen_at == WALL
        assert entry.pause_ms is None
        assert entry.spacing == 0.0

    def test_pause_captured_after_commit(self) -> None:
        lifecycle = EntryLifecycle(per_second=4.0)
        first = _entry()
        lifecycle.begin_typing(first, 10.0, WALL)
        lifecycle.commit(first, 11.0)
        second = Entry(id=1, mode=PresentationMode.WIDTH)
        lifecycle.begin_typing(second, 13.5, WALL)
        assert second.pause_ms == pytest.approx(2500.0)
        assert second.spacing == pytest.approx(10.0)

    def test_begin_typing_only_once(self) -> None:
        lifecycle = EntryLifecycle()
        lifecycle.commit(_entry(), 0.0)
        entry = _entry()
        lifecycle.begin_typing(entry, 1.0, WALL)
        lifecycle.begin_typing(entry, 9.0, WALL)
        assert entry.started_at == 1.0
        assert entry.pause_ms == pytest.approx(1000.0)

    def test_reset_to_empty_discards_timing(self) -> None:
        lifecycle = EntryLifecycle()
        lifecycle.commit(_entry(), 0.0)
        entry = _entry()
        entry.text = "x"
        entry.attributes = AttributeStore.filled(1, 25.0)
        lifecycle.begin_typing(entry, 1.0, WALL)
        lifecycle.reset_to_empty(entry)
        assert entry.state is LifecycleState.COMPOSING
        assert entry.text == ""
        assert entry.started_at is None
        assert entry.frozen_at is None
        assert entry.pause_ms is None
        assert len(entry.attributes) == 0

    def test_track_idle_only_while_empty(self) -> None:
        lifecycle = EntryLifecycle(per_second=4.0)
        entry = _entry()
        assert lifecycle.track_idle(entry, 5.0) == 0.0
        lifecycle.commit(_entry(), 5.0)
        assert lifecycle.track_idle(entry, 6.0) == pytest.approx(4.0)
        lifecycle.begin_typing(entry, 7.0, WALL)
        assert lifecycle.track_idle(entry, 60.0) == pytest.approx(8.0)

    def test_commit_is_terminal(self) -> None:
        lifecycle = EntryLifecycle()
        entry = _entry()
        entry.text = "done"
        lifecycle.begin_typing(entry, 1.0, WALL)
        lifecycle.commit(entry, 2.0)
        assert entry.committed
        assert not entry.is_active
        assert entry.pause_ms == 0.0
        assert entry.attributes.frozen
        assert lifecycle.previous_commit_at == 2.0
        lifecycle.reset_to_empty(entry)
        lifecycle.begin_typing(entry, 3.0, WALL)
        assert entry.state is LifecycleState.COMMITTED
        assert entry.text == "done"
