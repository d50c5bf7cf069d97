"""Tests for cadence.apps.cli argument handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cadence.apps.cli import _apply_overrides, build_arg_parser, list_modes
from cadence.apps.config import JournalConfig
from cadence.core.modes import PresentationMode


@pytest.fixture
def config(tmp_path: Path) -> JournalConfig:
    return JournalConfig(prefs_path=tmp_path / "prefs.json")


class TestArgParser:
    def test_defaults_defer_to_config(self) -> None:
        args = build_arg_parser().parse_args([])
        assert args.mode is None
        assert args.min_interval_ms is None
        assert args.max_interval_ms is None
        assert not args.list_modes

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["--mode", "rainbow"])


class TestOverrides:
    def test_no_flags_keeps_config(self, config: JournalConfig) -> None:
        args = build_arg_parser().parse_args([])
        assert _apply_overrides(config, args) is config

    def test_flags_override(self, config: JournalConfig) -> None:
        args = build_arg_parser().parse_args(
            ["--mode", "letter-spacing", "--min-interval-ms", "250", "--max-interval-ms", "400"]
        )
        result = _apply_overrides(config, args)
        assert result.cadence.mode is PresentationMode.LETTER_SPACING
        assert result.cadence.min_interval_ms == 250.0
        assert result.cadence.max_interval_ms == 400.0
        assert result.prefs_path == config.prefs_path

    def test_invalid_window(self, config: JournalConfig) -> None:
        args = build_arg_parser().parse_args(["--min-interval-ms", "500"])
        with pytest.raises(ValueError):
            _apply_overrides(config, args)


def test_list_modes(capsys: pytest.CaptureFixture[str]) -> None:
    list_modes()
    out = capsys.readouterr().out
    for mode in PresentationMode:
        assert mode.value in out
