"""Structural type protocols for visual parameter mappings."""

from typing import Protocol


class IntervalWindowLike(Protocol):
    """Clamp window for keystroke intervals, in milliseconds."""

    @property
    def min_ms(self) -> float: ...

    @property
    def max_ms(self) -> float: ...

    def normalize(self, interval_ms: float) -> float: ...


class VisualMapping(Protocol):
    """Maps a keystroke interval to one visual parameter."""

    @property
    def default(self) -> float: ...

    def value_for(self, interval_ms: float, window: IntervalWindowLike) -> float: ...
