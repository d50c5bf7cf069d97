__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from cadence.core for convenience."""
    _core_names = {
        "Journal",
        "Entry",
        "LifecycleState",
        "PresentationMode",
        "IntervalWindow",
        "StyledSurface",
        "pause_to_offset",
    }
    if name in _core_names:
        from cadence import core

        return getattr(core, name)
    raise AttributeError(f"module 'cadence' has no attribute {name!r}")
