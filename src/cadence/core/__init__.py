"""Core journaling model: no UI dependencies.

Re-exports key symbols for convenience.
"""

from cadence.core.attributes import AttributeStore, CommittedEntryError
from cadence.core.cadence import CadenceSampler
from cadence.core.journal import EditResult, Journal
from cadence.core.lifecycle import Entry, EntryLifecycle, LifecycleState, can_commit
from cadence.core.modes import IntervalWindow, PresentationMode
from cadence.core.schedule import TimerKind, desired_timers
from cadence.core.spacing import pause_to_offset
from cadence.core.surface import StyledSurface
from cadence.core.types import EditEvent, EditKind

__all__ = [
    "AttributeStore",
    "CadenceSampler",
    "CommittedEntryError",
    "EditEvent",
    "EditKind",
    "EditResult",
    "Entry",
    "EntryLifecycle",
    "IntervalWindow",
    "Journal",
    "LifecycleState",
    "PresentationMode",
    "StyledSurface",
    "TimerKind",
    "can_commit",
    "desired_timers",
    "pause_to_offset",
]
