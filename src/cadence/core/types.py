"""Core data types shared across cadence modules."""

from dataclasses import dataclass
from enum import StrEnum


class EditKind(StrEnum):
    NONE = "none"
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"
    CLEAR = "clear"


@dataclass(frozen=True, slots=True)
class EditEvent:
    """One edit of an entry's text.

    *cursor* is the caret's character offset after the edit. Insertions end
    at the cursor; deletions start at it.
    """

    old_text: str
    new_text: str
    cursor: int

    @property
    def delta(self) -> int:
        return len(self.new_text) - len(self.old_text)

    @property
    def kind(self) -> EditKind:
        if self.new_text == self.old_text:
            return EditKind.NONE
        if not self.new_text:
            return EditKind.CLEAR
        if self.delta > 0:
            return EditKind.INSERT
        if self.delta < 0:
            return EditKind.DELETE
        return EditKind.REPLACE
