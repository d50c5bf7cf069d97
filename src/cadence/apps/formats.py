"""Date and time display formats with a user-cycled, persisted choice."""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Final

from cadence.apps.prefs import PreferenceStore

Formatter = Callable[[datetime], str]

_MONTHS: Final = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _month_day_year(dt: datetime) -> str:
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def _numeric_date(dt: datetime) -> str:
    return f"{dt.month:02d}/{dt.day:02d}/{dt.year}"


def _clock_24h(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def _clock_12h(dt: datetime) -> str:
    suffix = "PM" if dt.hour >= 12 else "AM"
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


DATE_FORMATS: Final[tuple[Formatter, ...]] = (_month_day_year, _numeric_date)
TIME_FORMATS: Final[tuple[Formatter, ...]] = (_clock_24h, _clock_12h)


class FormatCycler:
    """A fixed rotation of formatters whose position survives restarts."""

    __slots__ = ("_prefs", "_key", "_formats", "_index")

    def __init__(
        self,
        prefs: PreferenceStore,
        key: str,
        formats: Sequence[Formatter],
    ) -> None:
        self._prefs = prefs
        self._key = key
        self._formats = tuple(formats)
        saved = prefs.get(key, 0)
        index = saved if isinstance(saved, int) else 0
        self._index = index if 0 <= index < len(self._formats) else 0

    @property
    def index(self) -> int:
        return self._index

    def format(self, dt: datetime) -> str:
        return self._formats[self._index](dt)

    def cycle(self) -> int:
        """Advance to the next format and persist the choice."""
        self._index = (self._index + 1) % len(self._formats)
        self._prefs.set(self._key, self._index)
        return self._index


def date_cycler(prefs: PreferenceStore) -> FormatCycler:
    return FormatCycler(prefs, "dateFormat", DATE_FORMATS)


def time_cycler(prefs: PreferenceStore) -> FormatCycler:
    return FormatCycler(prefs, "timeFormat", TIME_FORMATS)


def should_show_date(entry_date: datetime, previous_date: datetime | None) -> bool:
    """Show the date line only when the day changes between entries."""
    if previous_date is None:
        return True
    return entry_date.date() != previous_date.date()
