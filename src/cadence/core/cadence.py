"""Keystroke cadence sampling.

Turns the interval between two keystrokes of the same entry into the visual
parameter for the character(s) just typed. The only state is the instant of
the previous keystroke.
"""

from cadence.core.modes import IntervalWindow, PresentationMode


class CadenceSampler:
    """Per-entry keystroke timer feeding a presentation mode's mapping."""

    __slots__ = ("_mode", "_window", "_previous_ms")

    def __init__(
        self,
        mode: PresentationMode,
        window: IntervalWindow | None = None,
    ) -> None:
        self._mode = mode
        self._window = window or IntervalWindow()
        self._previous_ms: float | None = None

    @property
    def mode(self) -> PresentationMode:
        return self._mode

    @property
    def window(self) -> IntervalWindow:
        return self._window

    @property
    def previous_ms(self) -> float | None:
        """Instant of the previous keystroke, or None before the first."""
        return self._previous_ms

    @property
    def default(self) -> float:
        return self._mode.default

    def sample(self, now_ms: float) -> float:
        """Return the parameter for a keystroke at *now_ms* and remember it.

        The first keystroke after creation or ``reset()`` has no interval and
        gets the mode's default parameter.
        """
        previous = self._previous_ms
        self._previous_ms = now_ms
        if previous is None:
            return self._mode.default
        return self._mode.mapping.value_for(now_ms - previous, self._window)

    def reset(self) -> None:
        """Forget the previous keystroke (after deletions, clears, commits)."""
        self._previous_ms = None

    def switch_mode(self, mode: PresentationMode) -> None:
        self._mode = mode
        self._previous_ms = None
