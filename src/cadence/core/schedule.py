"""Which recurring timers the active entry needs.

The app treats this as the desired state of a level-triggered loop: after
every event it stops timers that are no longer wanted and starts the ones
that are missing, so none outlives the condition that justified it.
"""

from enum import StrEnum

from cadence.core.lifecycle import Entry


class TimerKind(StrEnum):
    CLOCK = "clock"
    SPACING = "spacing"
    FOCUS = "focus"


def desired_timers(entry: Entry | None, has_previous_commit: bool) -> frozenset[TimerKind]:
    """Timers that should run for *entry* (the active entry, if any).

    - clock: live timestamp while the entry is composing-empty
    - spacing: idle offset while composing-empty after a previous commit
    - focus: caret retention while the entry accepts input
    """
    if entry is None or not entry.is_active:
        return frozenset()
    wanted = {TimerKind.FOCUS}
    if entry.is_empty:
        wanted.add(TimerKind.CLOCK)
        if has_previous_commit:
            wanted.add(TimerKind.SPACING)
    return frozenset(wanted)
