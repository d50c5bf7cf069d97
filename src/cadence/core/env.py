"""Logger and time sources shared by the core model.

The core never reads the clock directly: the journal receives a monotonic
clock (seconds) for cadence and pause arithmetic and a wall clock for display
timestamps, so both can be replaced in tests.
"""

import logging
import time
from collections.abc import Callable
from datetime import datetime

LOGGER = logging.getLogger("cadence")

Clock = Callable[[], float]
WallClock = Callable[[], datetime]


def monotonic() -> float:
    """Default monotonic clock in seconds."""
    return time.monotonic()


def wall_now() -> datetime:
    """Default wall clock (local time)."""
    return datetime.now()
