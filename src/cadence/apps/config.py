"""Application-level configuration.

Reads ``~/.config/cadence/config.json`` into frozen dataclasses. Every
section is optional; anything missing falls back to the defaults in
``cadence.core.constants``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cadence.core.constants import (
    DEFAULT_CLOCK_INTERVAL,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    DEFAULT_FOCUS_INTERVAL,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_MIN_INTERVAL_MS,
    DEFAULT_MODE,
    DEFAULT_PREFS_FILE,
    DEFAULT_SPACING_INTERVAL,
    DEFAULT_SPACING_PER_SECOND,
)
from cadence.core.modes import IntervalWindow, PresentationMode

_log = logging.getLogger("cadence")


# ---------------------------------------------------------------------------
# Nested config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CadenceConfig:
    """Presentation mode and the keystroke interval window."""

    mode: PresentationMode = PresentationMode(DEFAULT_MODE)
    min_interval_ms: float = DEFAULT_MIN_INTERVAL_MS
    max_interval_ms: float = DEFAULT_MAX_INTERVAL_MS

    def __post_init__(self) -> None:
        IntervalWindow(self.min_interval_ms, self.max_interval_ms)

    @property
    def window(self) -> IntervalWindow:
        return IntervalWindow(self.min_interval_ms, self.max_interval_ms)


@dataclass(frozen=True, slots=True)
class SpacingConfig:
    """Idle pause to vertical offset conversion."""

    per_second: float = DEFAULT_SPACING_PER_SECOND


@dataclass(frozen=True, slots=True)
class TimerConfig:
    """Periods of the recurring timers, in seconds."""

    clock_s: float = DEFAULT_CLOCK_INTERVAL
    spacing_s: float = DEFAULT_SPACING_INTERVAL
    focus_s: float = DEFAULT_FOCUS_INTERVAL

    def __post_init__(self) -> None:
        for name in ("clock_s", "spacing_s", "focus_s"):
            if getattr(self, name) <= 0:
                raise ValueError(f"timers.{name} must be positive")


@dataclass(frozen=True, slots=True)
class JournalConfig:
    """Top-level configuration loaded from ~/.config/cadence/config.json."""

    cadence: CadenceConfig = field(default_factory=CadenceConfig)
    spacing: SpacingConfig = field(default_factory=SpacingConfig)
    timers: TimerConfig = field(default_factory=TimerConfig)
    prefs_path: Path = field(
        default_factory=lambda: config_dir() / DEFAULT_PREFS_FILE,
    )


# ---------------------------------------------------------------------------
# Config loading helpers
# ---------------------------------------------------------------------------


def config_dir() -> Path:
    """Config directory, honouring ``CADENCE_CONFIG_DIR``."""
    return Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        _log.warning("Config section %r is not an object; using defaults", name)
        return {}
    return raw


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> JournalConfig:
    """Load cadence configuration from a JSON file.

    Reads ``~/.config/cadence/config.json`` (or *path*). Supports the
    ``CADENCE_CONFIG_DIR`` environment variable to override the config
    directory, which also holds ``prefs.json``.

    Returns a default config if the file does not exist or does not hold
    a JSON object. Invalid values (unknown mode, empty interval window)
    raise ``ValueError``.
    """
    directory = config_dir()
    config_path = Path(path).expanduser() if path else directory / DEFAULT_CONFIG_FILE
    prefs_path = directory / DEFAULT_PREFS_FILE

    if not config_path.exists():
        return JournalConfig(prefs_path=prefs_path)

    with open(config_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        _log.warning("Ignoring %s: top level is not an object", config_path)
        return JournalConfig(prefs_path=prefs_path)

    # -- cadence -----------------------------------------------------------
    cadence_raw = _section(data, "cadence")
    cadence = CadenceConfig(
        mode=PresentationMode.parse(str(cadence_raw.get("mode", DEFAULT_MODE))),
        min_interval_ms=float(
            cadence_raw.get("min_interval_ms", DEFAULT_MIN_INTERVAL_MS)
        ),
        max_interval_ms=float(
            cadence_raw.get("max_interval_ms", DEFAULT_MAX_INTERVAL_MS)
        ),
    )

    # -- spacing -----------------------------------------------------------
    spacing_raw = _section(data, "spacing")
    spacing = SpacingConfig(
        per_second=float(spacing_raw.get("per_second", DEFAULT_SPACING_PER_SECOND)),
    )

    # -- timers ------------------------------------------------------------
    timers_raw = _section(data, "timers")
    timers = TimerConfig(
        clock_s=float(timers_raw.get("clock_s", DEFAULT_CLOCK_INTERVAL)),
        spacing_s=float(timers_raw.get("spacing_s", DEFAULT_SPACING_INTERVAL)),
        focus_s=float(timers_raw.get("focus_s", DEFAULT_FOCUS_INTERVAL)),
    )

    return JournalConfig(
        cadence=cadence,
        spacing=spacing,
        timers=timers,
        prefs_path=prefs_path,
    )
