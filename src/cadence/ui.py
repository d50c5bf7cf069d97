"""Terminal rendering for cadence.

All render functions are pure: they take an EntrySnapshot (or plain
values) and return Rich renderables. No side effects, no mutation.

Each presentation mode's scalar becomes terminal styling:

- width: weight, from dim (narrow) through plain to bold (wide)
- opacity: foreground blended toward the background
- amplitude: foreground blended toward an accent, italic when strong
- letter-spacing: blank padding cells after the glyph
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Final

from rich.color import Color, ColorTriplet, blend_rgb
from rich.console import Group
from rich.style import Style
from rich.text import Text

from cadence.core.constants import AMPLITUDE_RANGE, WIDTH_RANGE
from cadence.core.lifecycle import Entry
from cadence.core.modes import PresentationMode
from cadence.core.surface import RunNode

BACKGROUND: Final = ColorTriplet(30, 30, 30)
FOREGROUND: Final = ColorTriplet(224, 224, 224)
ACCENT: Final = ColorTriplet(255, 166, 87)

# Layout units: one terminal cell is taken as 8 px, one row as 16 px.
CELL_UNITS: Final = 8.0
ROW_UNITS: Final = 16.0
MAX_PADDING_CELLS: Final = 6
MAX_SPACING_ROWS: Final = 8

CARET_STYLE: Final = Style(reverse=True)


@dataclass(slots=True)
class EntrySnapshot:
    """Everything needed to draw one entry."""

    mode: PresentationMode
    chars: list[tuple[str, float | None]] = field(default_factory=list)
    time_label: str = ""
    date_label: str = ""
    spacing: float = 0.0
    caret: int | None = None
    committed: bool = False


def snapshot_runs(runs: Iterable[RunNode]) -> list[tuple[str, float | None]]:
    """Flatten surface runs into (char, value) pairs."""
    return [(char, run.value) for run in runs for char in run.text]


def snapshot_entry(entry: Entry) -> list[tuple[str, float | None]]:
    """Pair a committed entry's characters with their stored values."""
    values: Sequence[float] = entry.attributes.tolist()
    return [
        (char, values[i] if i < len(values) else None)
        for i, char in enumerate(entry.text)
    ]


def _fraction(value: float, bounds: tuple[float, float]) -> float:
    low, high = min(bounds), max(bounds)
    if high == low:
        return 0.0
    return min(max((value - low) / (high - low), 0.0), 1.0)


def style_for(mode: PresentationMode, value: float | None) -> tuple[Style, int]:
    """Return (style, padding cells) for one character's scalar."""
    if value is None:
        return Style.null(), 0
    match mode:
        case PresentationMode.WIDTH:
            t = _fraction(value, WIDTH_RANGE)
            return Style(dim=t < 1 / 3, bold=t > 2 / 3), 0
        case PresentationMode.OPACITY:
            t = min(max(value, 0.0), 1.0)
            color = Color.from_triplet(blend_rgb(BACKGROUND, FOREGROUND, t))
            return Style(color=color), 0
        case PresentationMode.AMPLITUDE:
            t = _fraction(value, AMPLITUDE_RANGE)
            color = Color.from_triplet(blend_rgb(FOREGROUND, ACCENT, t))
            return Style(color=color, italic=t >= 0.5), 0
        case PresentationMode.LETTER_SPACING:
            cells = min(int(max(value, 0.0) // CELL_UNITS), MAX_PADDING_CELLS)
            return Style.null(), cells
    return Style.null(), 0


def spacing_rows(offset: float) -> int:
    """Blank rows drawn above an entry for its pause offset."""
    return min(int(max(offset, 0.0) // ROW_UNITS), MAX_SPACING_ROWS)


def render_chars(
    chars: Sequence[tuple[str, float | None]],
    mode: PresentationMode,
    caret: int | None = None,
) -> Text:
    """Render styled characters, drawing the caret as a reversed cell."""
    body = Text()
    for index, (char, value) in enumerate(chars):
        style, padding = style_for(mode, value)
        at_caret = caret == index
        if char == "\n":
            if at_caret:
                body.append(" ", CARET_STYLE)
            body.append("\n")
            continue
        body.append(char, style + CARET_STYLE if at_caret else style)
        if padding:
            body.append(" " * padding)
    if caret is not None and caret >= len(chars):
        body.append(" ", CARET_STYLE)
    return body


def render_stamp(snapshot: EntrySnapshot) -> Text:
    """Date (when shown) and time header of an entry."""
    stamp = Text()
    if snapshot.date_label:
        stamp.append(snapshot.date_label, style="bold")
        stamp.append("  ")
    stamp.append(snapshot.time_label, style="cyan" if snapshot.committed else "green")
    return stamp


def render_entry(snapshot: EntrySnapshot) -> Group:
    """Spacing rows, timestamp line and styled body of one entry."""
    parts: list[Text] = [Text("") for _ in range(spacing_rows(snapshot.spacing))]
    parts.append(render_stamp(snapshot))
    parts.append(render_chars(snapshot.chars, snapshot.mode, snapshot.caret))
    return Group(*parts)


def render_status(mode: PresentationMode, committed: int, hint: str = "") -> Text:
    """Bottom status bar."""
    status = Text()
    status.append("Mode: ", style="bold")
    status.append(str(mode), style="green")
    status.append(" | ")
    status.append(f"Entries: {committed}")
    if hint:
        status.append(" | ")
        status.append(hint, style="dim")
    return status
