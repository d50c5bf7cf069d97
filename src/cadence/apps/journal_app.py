"""Textual TUI for the cadence journal.

Entries are stacked top to bottom. Only the last one is active: it owns a
StyledSurface, takes keystrokes, and is re-rendered from the journal model
after every edit. Enter commits the entry (ignored on a blank line);
Shift+Enter or Ctrl+J inserts a line break. Committed entries render
read-only from their frozen attributes.

Each keystroke runs its whole cycle inside one key handler: native surface
edit, journal edit, surface rebuild. No second keystroke can land between
the model update and the rebuild.
"""

from collections.abc import Callable
from datetime import datetime

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Header, Static

from cadence.apps.config import JournalConfig
from cadence.apps.formats import FormatCycler, date_cycler, should_show_date, time_cycler
from cadence.apps.prefs import PreferenceStore
from cadence.core.env import LOGGER
from cadence.core.journal import Journal
from cadence.core.lifecycle import Entry
from cadence.core.schedule import TimerKind, desired_timers
from cadence.core.surface import StyledSurface
from cadence.ui import (
    EntrySnapshot,
    render_entry,
    render_status,
    snapshot_entry,
    snapshot_runs,
)

_NEWLINE_KEYS = frozenset({"shift+enter", "ctrl+j", "alt+enter"})


class EntryWidget(Static):
    """One journal entry; editable while it is the active entry."""

    can_focus = True

    class Edited(Message):
        """The active entry's text changed."""

        def __init__(self, entry: Entry) -> None:
            super().__init__()
            self.entry = entry

    class Committed(Message):
        """The entry was committed and *next_entry* opened."""

        def __init__(self, entry: Entry, next_entry: Entry) -> None:
            super().__init__()
            self.entry = entry
            self.next_entry = next_entry

    def __init__(
        self,
        journal: Journal,
        entry: Entry,
        dates: FormatCycler,
        times: FormatCycler,
        previous_date: datetime | None,
        clock: Callable[[], datetime],
    ) -> None:
        super().__init__("", classes="entry")
        self._journal = journal
        self._entry = entry
        self._dates = dates
        self._times = times
        self._previous_date = previous_date
        self._wall_clock = clock
        self._surface = StyledSurface()
        self._surface.rebuild(entry.text, entry.attributes.values)

    @property
    def entry(self) -> Entry:
        return self._entry

    @property
    def surface(self) -> StyledSurface:
        return self._surface

    def on_mount(self) -> None:
        self.redraw()

    def on_focus(self) -> None:
        self.redraw()

    def on_blur(self) -> None:
        self.redraw()

    # ── Rendering ────────────────────────────────────────────────────

    def _snapshot(self) -> EntrySnapshot:
        entry = self._entry
        moment = entry.frozen_at or self._wall_clock()
        date_label = (
            self._dates.format(moment)
            if should_show_date(moment, self._previous_date)
            else ""
        )
        if entry.committed:
            chars = snapshot_entry(entry)
            caret = None
        else:
            chars = snapshot_runs(self._surface.runs)
            caret = self._surface.resolved_caret() if self.has_focus else None
        return EntrySnapshot(
            mode=entry.mode,
            chars=chars,
            time_label=self._times.format(moment),
            date_label=date_label,
            spacing=entry.spacing,
            caret=caret,
            committed=entry.committed,
        )

    def redraw(self) -> None:
        self.update(render_entry(self._snapshot()))

    def reload(self) -> None:
        """Rebuild the surface from the model (after a mode switch)."""
        self._surface.rebuild(self._entry.text, self._entry.attributes.values)
        self.redraw()

    # ── Input ────────────────────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        if self._entry.committed:
            return
        key = event.key
        surface = self._surface
        if key == "enter":
            self._commit()
        elif key in _NEWLINE_KEYS:
            self._type("\n")
        elif key == "backspace":
            if surface.delete_backward():
                self._sync()
        elif key == "delete":
            if surface.delete_forward():
                self._sync()
        elif key == "left":
            surface.move_caret(-1)
            self.redraw()
        elif key == "right":
            surface.move_caret(1)
            self.redraw()
        elif key == "home":
            surface.move_to_line_start()
            self.redraw()
        elif key == "end":
            surface.move_to_line_end()
            self.redraw()
        elif event.is_printable and event.character:
            self._type(event.character)
        else:
            return
        event.stop()
        event.prevent_default()

    def _type(self, chars: str) -> None:
        self._surface.insert_text(chars)
        self._sync()

    def _sync(self) -> None:
        """Push the surface's text and caret into the model, then rebuild."""
        entry = self._entry
        self._journal.edit(entry.id, self._surface.text, self._surface.resolved_caret())
        self._surface.rebuild(entry.text, entry.attributes.values)
        self.redraw()
        self.post_message(self.Edited(entry))

    def _commit(self) -> None:
        entry = self._entry
        next_entry = self._journal.commit(entry.id, self._surface.resolved_caret())
        if next_entry is None:
            return
        self._surface.blur()
        self.can_focus = False
        self.redraw()
        self.post_message(self.Committed(entry, next_entry))


class CadenceJournalApp(App):
    """Append-only journal whose letters follow the typing cadence."""

    TITLE = "Cadence Journal"

    CSS = """
    #entries {
        height: 1fr;
        padding: 0 2;
    }
    .entry {
        height: auto;
        margin: 1 0 0 0;
    }
    .entry:focus {
        background: $boost;
    }
    #status-bar {
        height: 1;
        dock: bottom;
        background: $surface;
        color: $text-muted;
        padding: 0 2;
    }
    """

    BINDINGS = [
        Binding("f2", "cycle_mode", "Mode", priority=True),
        Binding("f3", "cycle_date_format", "Date format", priority=True),
        Binding("f4", "cycle_time_format", "Time format", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        config: JournalConfig,
        journal: Journal | None = None,
        prefs: PreferenceStore | None = None,
    ) -> None:
        super().__init__()
        self._journal_config = config
        self._journal = journal or Journal(
            mode=config.cadence.mode,
            window=config.cadence.window,
            spacing_per_second=config.spacing.per_second,
        )
        self._prefs = prefs or PreferenceStore(config.prefs_path)
        self._dates = date_cycler(self._prefs)
        self._times = time_cycler(self._prefs)
        self._entry_widgets: dict[int, EntryWidget] = {}
        self._recurring: dict[TimerKind, Timer] = {}

    @property
    def journal(self) -> Journal:
        return self._journal

    @property
    def running_timers(self) -> frozenset[TimerKind]:
        return frozenset(self._recurring)

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="entries")
        yield Static("", id="status-bar")

    async def on_mount(self) -> None:
        for entry in self._journal.entries:
            await self._mount_entry(entry)
        self._reconcile_timers()
        self._update_status_bar()

    # ── Entries ──────────────────────────────────────────────────────

    def _active_widget(self) -> EntryWidget | None:
        return self._entry_widgets.get(self._journal.active.id)

    async def _mount_entry(self, entry: Entry) -> None:
        entries = self._journal.entries
        index = entries.index(entry)
        previous_date = entries[index - 1].frozen_at if index > 0 else None
        widget = EntryWidget(
            self._journal,
            entry,
            self._dates,
            self._times,
            previous_date,
            clock=datetime.now,
        )
        if entry.committed:
            widget.can_focus = False
        self._entry_widgets[entry.id] = widget
        await self.query_one("#entries", VerticalScroll).mount(widget)
        if entry.is_active:
            widget.focus()
            widget.scroll_visible(animate=False)

    def on_entry_widget_edited(self, message: EntryWidget.Edited) -> None:
        self._reconcile_timers()
        self._update_status_bar()

    async def on_entry_widget_committed(self, message: EntryWidget.Committed) -> None:
        LOGGER.info("Committed entry %d", message.entry.id)
        await self._mount_entry(message.next_entry)
        self._reconcile_timers()
        self._update_status_bar()

    # ── Timers ───────────────────────────────────────────────────────

    def _reconcile_timers(self) -> None:
        """Stop timers whose condition lapsed, start the missing ones."""
        desired = desired_timers(
            self._journal.active,
            self._journal.previous_commit_at is not None,
        )
        for kind in list(self._recurring):
            if kind not in desired:
                self._recurring.pop(kind).stop()
        timers = self._journal_config.timers
        periods = {
            TimerKind.CLOCK: (timers.clock_s, self._tick_clock),
            TimerKind.SPACING: (timers.spacing_s, self._tick_spacing),
            TimerKind.FOCUS: (timers.focus_s, self._retain_focus),
        }
        for kind in desired:
            if kind not in self._recurring:
                period, callback = periods[kind]
                self._recurring[kind] = self.set_interval(period, callback)

    def _tick_clock(self) -> None:
        widget = self._active_widget()
        if widget is not None:
            widget.redraw()

    def _tick_spacing(self) -> None:
        self._journal.tick()
        widget = self._active_widget()
        if widget is not None:
            widget.redraw()

    def _retain_focus(self) -> None:
        widget = self._active_widget()
        if widget is not None and self.focused is not widget:
            widget.focus()

    # ── Display ──────────────────────────────────────────────────────

    def _update_status_bar(self) -> None:
        bar = self.query_one("#status-bar", Static)
        bar.update(
            render_status(
                self._journal.mode,
                len(self._journal.committed),
                "⏎ Commit  ⇧⏎ Newline  F2 Mode  F3/F4 Formats  ^Q Quit",
            )
        )

    def _redraw_all(self) -> None:
        for widget in self._entry_widgets.values():
            widget.redraw()

    # ── Actions ──────────────────────────────────────────────────────

    def action_cycle_mode(self) -> None:
        mode = self._journal.mode.next()
        self._journal.set_mode(mode)
        widget = self._active_widget()
        if widget is not None:
            widget.reload()
        self._reconcile_timers()
        self._update_status_bar()
        self.notify(f"Mode: {mode}", timeout=1)

    def action_cycle_date_format(self) -> None:
        self._dates.cycle()
        self._redraw_all()

    def action_cycle_time_format(self) -> None:
        self._times.cycle()
        self._redraw_all()
