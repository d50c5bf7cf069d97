"""Per-character visual attributes kept in lock-step with an entry's text.

Values live in a float64 numpy array, one slot per character. Every edit
rewrites the array in the same call that the text changes, and the length
invariant ``len(store) == len(text)`` is re-established after each edit
even when the edit could not be located exactly.
"""

from typing import Self

import numpy as np

from cadence.core.types import EditEvent, EditKind


class CommittedEntryError(RuntimeError):
    """Raised when a frozen attribute store is asked to change."""


class AttributeStore:
    """Ordered per-character scalars with position-aware edit patching."""

    __slots__ = ("_values", "_frozen")

    def __init__(self, values: np.ndarray | None = None) -> None:
        if values is None:
            self._values = np.zeros(0, dtype=np.float64)
        else:
            self._values = np.asarray(values, dtype=np.float64).copy()
        self._frozen = False

    @classmethod
    def filled(cls, length: int, value: float) -> Self:
        """Create a store of *length* copies of *value*."""
        return cls(np.full(length, value, dtype=np.float64))

    def __len__(self) -> int:
        return int(self._values.size)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the backing array."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def frozen(self) -> bool:
        return self._frozen

    def tolist(self) -> list[float]:
        return self._values.tolist()

    # ── Edits ───────────────────────────────────────────────────────

    def apply(self, event: EditEvent, value: float, default: float) -> EditKind:
        """Patch the array for *event* and return the edit kind handled.

        *value* fills inserted slots; *default* pads after replacements or
        whenever the length still disagrees with the new text.
        """
        kind = event.kind
        if kind is EditKind.CLEAR:
            self.clear()
            return kind
        if kind is EditKind.INSERT:
            count = event.delta
            self.insert(event.cursor - count, count, value)
        elif kind is EditKind.DELETE:
            self.delete(event.cursor, -event.delta)
        self.resync(len(event.new_text), default)
        return kind

    def insert(self, position: int, count: int, value: float) -> None:
        """Insert *count* copies of *value* before *position* (clamped)."""
        self._check_mutable()
        if count <= 0:
            return
        position = min(max(position, 0), len(self))
        self._values = np.insert(
            self._values, position, np.full(count, value, dtype=np.float64)
        )

    def delete(self, position: int, count: int) -> None:
        """Remove *count* slots starting at *position* (clamped)."""
        self._check_mutable()
        if count <= 0:
            return
        position = min(max(position, 0), len(self))
        self._values = np.delete(self._values, np.s_[position : position + count])

    def resync(self, length: int, default: float) -> None:
        """Truncate or pad with *default* until the store has *length* slots."""
        self._check_mutable()
        current = len(self)
        if current > length:
            self._values = self._values[:length].copy()
        elif current < length:
            self._values = np.concatenate(
                [self._values, np.full(length - current, default, dtype=np.float64)]
            )

    def fill(self, length: int, value: float) -> None:
        """Replace every slot with *value*, resized to *length*."""
        self._check_mutable()
        self._values = np.full(length, value, dtype=np.float64)

    def clear(self) -> None:
        self._check_mutable()
        self._values = np.zeros(0, dtype=np.float64)

    def freeze(self) -> None:
        """Make the store permanently read-only."""
        self._values.flags.writeable = False
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise CommittedEntryError("attributes of a committed entry cannot change")
