"""Entry model and lifecycle transitions.

An entry moves through three states:

    composing (empty) -> frozen (typing, fixed display timestamp) -> committed

Clearing a frozen entry returns it to composing. ``committed`` is terminal:
the text and attribute store never change again.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from cadence.core.attributes import AttributeStore
from cadence.core.constants import DEFAULT_SPACING_PER_SECOND
from cadence.core.env import LOGGER
from cadence.core.modes import PresentationMode
from cadence.core.spacing import pause_to_offset


class LifecycleState(StrEnum):
    COMPOSING = "composing"
    FROZEN = "frozen"
    COMMITTED = "committed"


@dataclass(slots=True)
class Entry:
    """One unit of journaled text."""

    id: int
    mode: PresentationMode
    text: str = ""
    state: LifecycleState = LifecycleState.COMPOSING
    started_at: float | None = None
    frozen_at: datetime | None = None
    pause_ms: float | None = None
    spacing: float = 0.0
    attributes: AttributeStore = field(default_factory=AttributeStore)

    @property
    def is_active(self) -> bool:
        """Whether the entry still accepts input."""
        return self.state is not LifecycleState.COMMITTED

    @property
    def is_empty(self) -> bool:
        """Composing with nothing typed yet."""
        return self.state is LifecycleState.COMPOSING

    @property
    def committed(self) -> bool:
        return self.state is LifecycleState.COMMITTED


def current_line(text: str, caret: int | None = None) -> str:
    """Return the part of the caret's line that lies before the caret."""
    if caret is None or caret > len(text):
        caret = len(text)
    return text[: max(caret, 0)].rsplit("\n", 1)[-1]


def can_commit(text: str, caret: int | None = None) -> bool:
    """A commit needs non-blank text on the caret's line, before the caret."""
    return bool(current_line(text, caret).strip())


class EntryLifecycle:
    """Applies state transitions and tracks the previous commit instant."""

    __slots__ = ("_previous_commit_at", "_per_second")

    def __init__(self, per_second: float = DEFAULT_SPACING_PER_SECOND) -> None:
        self._previous_commit_at: float | None = None
        self._per_second = per_second

    @property
    def previous_commit_at(self) -> float | None:
        return self._previous_commit_at

    def idle_ms(self, now: float) -> float | None:
        """Milliseconds since the previous commit, or None before any commit."""
        if self._previous_commit_at is None:
            return None
        return (now - self._previous_commit_at) * 1000.0

    def begin_typing(self, entry: Entry, now: float, wall: datetime) -> None:
        """composing -> frozen on the first non-empty text."""
        if entry.state is not LifecycleState.COMPOSING:
            return
        entry.state = LifecycleState.FROZEN
        entry.started_at = now
        entry.frozen_at = wall
        idle = self.idle_ms(now)
        if idle is not None:
            entry.pause_ms = idle
            entry.spacing = pause_to_offset(idle, self._per_second)
        LOGGER.debug("Entry %d frozen (pause=%s ms)", entry.id, entry.pause_ms)

    def reset_to_empty(self, entry: Entry) -> None:
        """frozen -> composing when the text is cleared before commit."""
        if entry.state is LifecycleState.COMMITTED:
            return
        entry.state = LifecycleState.COMPOSING
        entry.text = ""
        entry.started_at = None
        entry.frozen_at = None
        entry.pause_ms = None
        entry.attributes.clear()
        LOGGER.debug("Entry %d cleared back to composing", entry.id)

    def track_idle(self, entry: Entry, now: float) -> float:
        """Recompute the live spacing of a composing-empty entry."""
        if entry.state is LifecycleState.COMPOSING:
            idle = self.idle_ms(now)
            if idle is not None:
                entry.spacing = pause_to_offset(idle, self._per_second)
        return entry.spacing

    def commit(self, entry: Entry, now: float) -> None:
        """frozen -> committed; records *now* as the previous commit."""
        if entry.pause_ms is None:
            entry.pause_ms = 0.0
        entry.attributes.freeze()
        entry.state = LifecycleState.COMMITTED
        self._previous_commit_at = now
        LOGGER.debug(
            "Entry %d committed (%d chars, pause=%.0f ms)",
            entry.id,
            len(entry.text),
            entry.pause_ms,
        )
