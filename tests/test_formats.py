"""Tests for cadence.apps.formats: date/time labels and cycling."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from cadence.apps.formats import date_cycler, should_show_date, time_cycler
from cadence.apps.prefs import PreferenceStore

MORNING = datetime(2026, 1, 5, 9, 4, 7)
EVENING = datetime(2026, 1, 5, 21, 30, 0)
MIDNIGHT = datetime(2026, 1, 6, 0, 15, 2)


class TestFormats:
    def test_date_formats(self) -> None:
        dates = date_cycler(PreferenceStore(None))
        assert dates.format(MORNING) == "Jan 5, 2026"
        dates.cycle()
        assert dates.format(MORNING) == "01/05/2026"

    @pytest.mark.parametrize(
        ("moment", "clock24", "clock12"),
        [
            (MORNING, "09:04:07", "9:04:07 AM"),
            (EVENING, "21:30:00", "9:30:00 PM"),
            (MIDNIGHT, "00:15:02", "12:15:02 AM"),
        ],
    )
    def test_time_formats(self, moment: datetime, clock24: str, clock12: str) -> None:
        times = time_cycler(PreferenceStore(None))
        assert times.format(moment) == clock24
        times.cycle()
        assert times.format(moment) == clock12

    def test_cycle_wraps(self) -> None:
        times = time_cycler(PreferenceStore(None))
        assert times.cycle() == 1
        assert times.cycle() == 0


class TestPersistence:
    def test_choice_survives_restart(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        date_cycler(PreferenceStore(path)).cycle()
        assert date_cycler(PreferenceStore(path)).index == 1
        assert time_cycler(PreferenceStore(path)).index == 0

    @pytest.mark.parametrize("saved", [7, -1, "1", None])
    def test_invalid_saved_index(self, saved: object) -> None:
        prefs = PreferenceStore(None)
        prefs.set("dateFormat", saved)
        assert date_cycler(prefs).index == 0


class TestShowDate:
    def test_first_entry_shows_date(self) -> None:
        assert should_show_date(MORNING, None)

    def test_same_day_hides_date(self) -> None:
        assert not should_show_date(EVENING, MORNING)

    def test_new_day_shows_date(self) -> None:
        assert should_show_date(MIDNIGHT, EVENING)
