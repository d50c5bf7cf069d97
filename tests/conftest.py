"""Shared test fixtures: deterministic clocks, no terminal needed."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from cadence.core.journal import Journal
from cadence.core.modes import PresentationMode


class FakeClock:
    """Monotonic clock in seconds, advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWallClock:
    """Wall clock that follows a FakeClock from a fixed origin."""

    def __init__(self, clock: FakeClock, origin: datetime | None = None) -> None:
        self._clock = clock
        self._start = clock.now
        self._origin = origin or datetime(2026, 3, 14, 9, 26, 53)

    def __call__(self) -> datetime:
        return self._origin + timedelta(seconds=self._clock.now - self._start)


class Typist:
    """Drives a journal like a keyboard: append at the end with pauses."""

    def __init__(self, journal: Journal, clock: FakeClock) -> None:
        self.journal = journal
        self.clock = clock

    def type(self, chars: str, gap: float = 0.0) -> None:
        for char in chars:
            self.clock.advance(gap)
            entry = self.journal.active
            text = entry.text + char
            self.journal.edit(entry.id, text, len(text))

    def backspace(self, times: int = 1) -> None:
        for _ in range(times):
            entry = self.journal.active
            text = entry.text[:-1]
            self.journal.edit(entry.id, text, len(text))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def wall_clock(clock: FakeClock) -> FakeWallClock:
    return FakeWallClock(clock)


@pytest.fixture
def journal(clock: FakeClock, wall_clock: FakeWallClock) -> Journal:
    return Journal(
        mode=PresentationMode.WIDTH,
        clock=clock,
        wall_clock=wall_clock,
    )


@pytest.fixture
def typist(journal: Journal, clock: FakeClock) -> Typist:
    return Typist(journal, clock)
