"""Presentation modes and their visual parameter mappings.

All four modes share one shape: normalize the keystroke interval inside the
cadence window, then interpolate between a "fast" and a "slow" endpoint.
Letter-spacing is the one mode with an open upper end, so it grows linearly
with the excess over the window minimum instead.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from cadence.core.constants import (
    AMPLITUDE_RANGE,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_MIN_INTERVAL_MS,
    LETTER_SPACING_PER_MS,
    OPACITY_RANGE,
    WIDTH_RANGE,
)
from cadence.core.protocols import IntervalWindowLike, VisualMapping


@dataclass(frozen=True, slots=True)
class IntervalWindow:
    """Clamp range for keystroke intervals, in milliseconds."""

    min_ms: float = DEFAULT_MIN_INTERVAL_MS
    max_ms: float = DEFAULT_MAX_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.min_ms < 0:
            raise ValueError("min_ms must be non-negative")
        if self.min_ms >= self.max_ms:
            raise ValueError("min_ms must be smaller than max_ms")

    def clamp(self, interval_ms: float) -> float:
        return min(max(interval_ms, self.min_ms), self.max_ms)

    def normalize(self, interval_ms: float) -> float:
        """Clamp *interval_ms* and scale it to ``[0, 1]``."""
        clamped = self.clamp(interval_ms)
        return (clamped - self.min_ms) / (self.max_ms - self.min_ms)


@dataclass(frozen=True, slots=True)
class LinearMapping:
    """Interpolate from *fast* (t=0) to *slow* (t=1)."""

    fast: float
    slow: float

    @property
    def default(self) -> float:
        return self.fast

    def value_for(self, interval_ms: float, window: IntervalWindowLike) -> float:
        t = window.normalize(interval_ms)
        return self.fast + (self.slow - self.fast) * t


@dataclass(frozen=True, slots=True)
class ExcessMapping:
    """Zero up to the window minimum, then *per_ms* per millisecond beyond it."""

    per_ms: float

    @property
    def default(self) -> float:
        return 0.0

    def value_for(self, interval_ms: float, window: IntervalWindowLike) -> float:
        return max(0.0, interval_ms - window.min_ms) * self.per_ms


class PresentationMode(StrEnum):
    """Which visual parameter the cadence drives."""

    WIDTH = "width"
    OPACITY = "opacity"
    AMPLITUDE = "amplitude"
    LETTER_SPACING = "letter-spacing"

    @classmethod
    def parse(cls, tag: str) -> Self:
        """Parse a mode tag, accepting ``_`` for ``-`` and any case."""
        normalized = tag.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown mode {tag!r} (expected one of: {valid})") from None

    @property
    def mapping(self) -> VisualMapping:
        return _MAPPINGS[self]

    @property
    def default(self) -> float:
        return self.mapping.default

    def next(self) -> "PresentationMode":
        members = list(PresentationMode)
        return members[(members.index(self) + 1) % len(members)]


_MAPPINGS: dict[PresentationMode, VisualMapping] = {
    PresentationMode.WIDTH: LinearMapping(*WIDTH_RANGE),
    PresentationMode.OPACITY: LinearMapping(*OPACITY_RANGE),
    PresentationMode.AMPLITUDE: LinearMapping(*AMPLITUDE_RANGE),
    PresentationMode.LETTER_SPACING: ExcessMapping(LETTER_SPACING_PER_MS),
}
