"""Default configuration values for cadence."""

from typing import Final

# Keystroke cadence window (human inter-key timing)
DEFAULT_MIN_INTERVAL_MS: Final = 75.0
DEFAULT_MAX_INTERVAL_MS: Final = 200.0

# Visual parameter ranges, written as (fast, slow)
WIDTH_RANGE: Final = (25.0, 150.0)
OPACITY_RANGE: Final = (1.0, 0.25)
AMPLITUDE_RANGE: Final = (8.0, 0.0)
LETTER_SPACING_PER_MS: Final = 0.03

# Idle pause before typing -> vertical offset
DEFAULT_SPACING_PER_SECOND: Final = 4.0

# Recurring timers (seconds)
DEFAULT_CLOCK_INTERVAL: Final = 0.25
DEFAULT_SPACING_INTERVAL: Final = 0.05
DEFAULT_FOCUS_INTERVAL: Final = 0.1

DEFAULT_MODE: Final = "width"

# Config / preferences
DEFAULT_CONFIG_DIR: Final = "~/.config/cadence"
DEFAULT_CONFIG_DIR_ENV: Final = "CADENCE_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
DEFAULT_PREFS_FILE: Final = "prefs.json"
