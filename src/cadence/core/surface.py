"""Editable styled surface with caret preservation across rebuilds.

The surface is a flat tree of run nodes, each owning one text node. Native
edits (typing, deleting) mutate the text nodes in place, exactly like an
editable view does before the model has seen the change. ``rebuild()`` then
throws every run away and recreates one run per character from the
authoritative ``(text, values)`` pair.

The caret is never carried across a rebuild as a node reference: it is
converted to a logical character offset by walking the text nodes in
document order, and converted back by walking the rebuilt nodes the same way.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class TextNode:
    """Text-bearing leaf. Identity matters, not content."""

    text: str = ""


@dataclass(eq=False, slots=True)
class RunNode:
    """Styled span wrapping one text node."""

    child: TextNode
    value: float | None = None

    @property
    def text(self) -> str:
        return self.child.text


@dataclass(slots=True)
class Selection:
    """Caret position as (text node, offset inside that node)."""

    node: TextNode
    offset: int


class StyledSurface:
    """Rendering target rebuilt from the entry model on every edit."""

    __slots__ = ("_runs", "_selection")

    def __init__(self) -> None:
        self._runs: list[RunNode] = []
        self._selection: Selection | None = None

    @property
    def runs(self) -> tuple[RunNode, ...]:
        return tuple(self._runs)

    @property
    def selection(self) -> Selection | None:
        return self._selection

    @property
    def text(self) -> str:
        return "".join(node.text for node in self.text_nodes())

    @property
    def is_empty(self) -> bool:
        return not self._runs

    def text_nodes(self) -> Iterator[TextNode]:
        """Text-bearing nodes in document order."""
        for run in self._runs:
            yield run.child

    # ── Caret ↔ logical offset ───────────────────────────────────────

    def caret_offset(self) -> int | None:
        """Logical offset of the caret, or None if it cannot be resolved."""
        selection = self._selection
        if selection is None:
            return None
        total = 0
        for node in self.text_nodes():
            if node is selection.node:
                if 0 <= selection.offset <= len(node.text):
                    return total + selection.offset
                return None
            total += len(node.text)
        return None

    def resolved_caret(self) -> int:
        """Caret offset, clamped to the end of text when unresolved."""
        offset = self.caret_offset()
        length = len(self.text)
        if offset is None or offset > length:
            return length
        return offset

    def _locate(self, offset: int) -> Selection | None:
        total = 0
        last: TextNode | None = None
        for node in self.text_nodes():
            length = len(node.text)
            if total + length >= offset:
                return Selection(node, offset - total)
            total += length
            last = node
        if last is None:
            return None
        return Selection(last, len(last.text))

    def place_caret(self, offset: int) -> int:
        """Put the caret at logical *offset* (clamped). Returns the offset used."""
        offset = min(max(offset, 0), len(self.text))
        self._selection = self._locate(offset)
        return offset

    def blur(self) -> None:
        """Drop the selection, as when focus leaves the surface."""
        self._selection = None

    # ── Rebuild ──────────────────────────────────────────────────────

    def rebuild(self, text: str, values: Sequence[float]) -> int:
        """Recreate one run per character and restore the caret.

        Missing values (length mismatch) render unstyled. Returns the caret
        offset after the rebuild.
        """
        caret = self.caret_offset()
        if not text:
            self._runs = []
            self._selection = None
            return 0

        count = len(values)
        self._runs = [
            RunNode(TextNode(char), float(values[i]) if i < count else None)
            for i, char in enumerate(text)
        ]
        target = len(text) if caret is None else min(caret, len(text))
        return self.place_caret(target)

    # ── Native editing ───────────────────────────────────────────────

    def insert_text(self, chars: str) -> int:
        """Insert *chars* at the caret inside the caret's text node."""
        if not chars:
            return self.resolved_caret()
        if not self._runs:
            node = TextNode()
            self._runs.append(RunNode(node))
            self._selection = Selection(node, 0)
        elif self.caret_offset() is None:
            self.place_caret(len(self.text))
        assert self._selection is not None
        node, offset = self._selection.node, self._selection.offset
        node.text = node.text[:offset] + chars + node.text[offset:]
        self._selection = Selection(node, offset + len(chars))
        return self.resolved_caret()

    def delete_backward(self) -> bool:
        """Remove the character before the caret. False at start of text."""
        caret = self.resolved_caret()
        if caret == 0:
            return False
        return self._delete_at(caret - 1)

    def delete_forward(self) -> bool:
        """Remove the character after the caret. False at end of text."""
        caret = self.resolved_caret()
        if caret >= len(self.text):
            return False
        return self._delete_at(caret)

    def _delete_at(self, index: int) -> bool:
        total = 0
        for node in self.text_nodes():
            length = len(node.text)
            if total <= index < total + length:
                local = index - total
                node.text = node.text[:local] + node.text[local + 1 :]
                self._selection = Selection(node, local)
                return True
            total += length
        return False

    def move_caret(self, delta: int) -> int:
        return self.place_caret(self.resolved_caret() + delta)

    def move_to_line_start(self) -> int:
        text = self.text
        caret = self.resolved_caret()
        return self.place_caret(text.rfind("\n", 0, caret) + 1)

    def move_to_line_end(self) -> int:
        text = self.text
        end = text.find("\n", self.resolved_caret())
        return self.place_caret(len(text) if end == -1 else end)
