"""Entry collection controller.

Owns the ordered list of entries and is the only place that creates or
transitions them. Exactly one entry is active (composing or frozen) at any
time; a commit marks it committed and appends the next composing entry in a
single replacement of the entry list.
"""

from dataclasses import dataclass

from cadence.core.cadence import CadenceSampler
from cadence.core.constants import DEFAULT_SPACING_PER_SECOND
from cadence.core.env import LOGGER, Clock, WallClock, monotonic, wall_now
from cadence.core.lifecycle import Entry, EntryLifecycle, can_commit
from cadence.core.modes import IntervalWindow, PresentationMode
from cadence.core.types import EditEvent, EditKind


@dataclass(frozen=True, slots=True)
class EditResult:
    """What an edit did to the active entry."""

    entry: Entry
    kind: EditKind
    value: float | None = None
    ignored: bool = False


class Journal:
    """Routes edit, commit and tick events to the active entry."""

    def __init__(
        self,
        mode: PresentationMode = PresentationMode.WIDTH,
        window: IntervalWindow | None = None,
        spacing_per_second: float = DEFAULT_SPACING_PER_SECOND,
        clock: Clock = monotonic,
        wall_clock: WallClock = wall_now,
    ) -> None:
        self._mode = mode
        self._window = window or IntervalWindow()
        self._clock = clock
        self._wall_clock = wall_clock
        self._lifecycle = EntryLifecycle(spacing_per_second)
        self._sampler = CadenceSampler(mode, self._window)
        self._next_id = 0
        self._entries: list[Entry] = [self._new_entry()]

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def active(self) -> Entry:
        return self._entries[-1]

    @property
    def mode(self) -> PresentationMode:
        return self._mode

    @property
    def window(self) -> IntervalWindow:
        return self._window

    @property
    def previous_commit_at(self) -> float | None:
        return self._lifecycle.previous_commit_at

    @property
    def committed(self) -> tuple[Entry, ...]:
        return tuple(e for e in self._entries if e.committed)

    def _new_entry(self) -> Entry:
        entry = Entry(id=self._next_id, mode=self._mode)
        self._next_id += 1
        return entry

    # ── Events ───────────────────────────────────────────────────────

    def edit(self, entry_id: int, new_text: str, cursor: int) -> EditResult:
        """Apply new text for *entry_id* with the caret at *cursor*.

        Edits addressed to anything but the active entry are ignored.
        """
        entry = self.active
        if entry_id != entry.id:
            LOGGER.debug("Ignoring edit for inactive entry %d", entry_id)
            return EditResult(entry=entry, kind=EditKind.NONE, ignored=True)

        event = EditEvent(entry.text, new_text, cursor)
        kind = event.kind
        if kind is EditKind.NONE:
            return EditResult(entry=entry, kind=kind)

        now = self._clock()
        if kind is EditKind.CLEAR:
            self._lifecycle.reset_to_empty(entry)
            self._sampler.reset()
            return EditResult(entry=entry, kind=kind)

        if entry.is_empty:
            self._lifecycle.begin_typing(entry, now, self._wall_clock())

        value: float | None = None
        if kind is EditKind.INSERT:
            value = self._sampler.sample(now * 1000.0)
        elif kind is EditKind.DELETE:
            self._sampler.reset()

        default = self._mode.default
        entry.attributes.apply(event, default if value is None else value, default)
        entry.text = new_text
        return EditResult(entry=entry, kind=kind, value=value)

    def commit(self, entry_id: int, caret: int | None = None) -> Entry | None:
        """Commit the active entry and open the next one.

        Returns the new active entry, or None when the signal is ignored
        (stale id, or blank text on the caret's line).
        """
        entry = self.active
        if entry_id != entry.id:
            LOGGER.debug("Ignoring commit for inactive entry %d", entry_id)
            return None
        if not can_commit(entry.text, caret):
            LOGGER.debug("Ignoring commit on blank line (entry %d)", entry.id)
            return None

        self._lifecycle.commit(entry, self._clock())
        self._sampler.reset()
        self._entries = [*self._entries, self._new_entry()]
        return self.active

    def tick(self) -> float:
        """Recompute the active entry's idle spacing; returns the offset."""
        return self._lifecycle.track_idle(self.active, self._clock())

    def set_mode(self, mode: PresentationMode) -> None:
        """Switch presentation mode, restarting the active entry's attributes."""
        if mode is self._mode:
            return
        self._mode = mode
        self._sampler.switch_mode(mode)
        entry = self.active
        entry.mode = mode
        entry.attributes.fill(len(entry.text), mode.default)
        LOGGER.debug("Presentation mode switched to %s", mode)
