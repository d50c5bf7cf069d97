"""Idle pause before typing, mapped to a vertical layout offset."""

from cadence.core.constants import DEFAULT_SPACING_PER_SECOND


def pause_to_offset(
    elapsed_ms: float,
    per_second: float = DEFAULT_SPACING_PER_SECOND,
) -> float:
    """Linear offset for *elapsed_ms* of idle time (negative clamps to 0)."""
    return max(elapsed_ms, 0.0) / 1000.0 * per_second
