"""Cursor, selection, and clipboard state for an editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .document import TextDocument
from .registers import ClipboardHistory


@dataclass(frozen=True, slots=True)
class NoSelection:
    """Marker for the "nothing selected" side of the selection variant."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Selection:
    """Inclusive ``start..end`` range with the text captured when selected."""

    start: int
    end: int
    text: str

    def __bool__(self) -> bool:
        return True


NO_SELECTION = NoSelection()
SelectionState = Union[NoSelection, Selection]


@dataclass(slots=True)
class EditorState:
    """Mutable editor state; only ``EditorBuffer`` should write to it."""

    document: TextDocument = field(default_factory=TextDocument)
    cursor: int = 0
    selection: SelectionState = NO_SELECTION
    clipboard: ClipboardHistory = field(default_factory=ClipboardHistory)

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def has_selection(self) -> bool:
        return isinstance(self.selection, Selection)

    def set_cursor(self, position: int) -> None:
        self.cursor = position

    def clear_selection(self) -> None:
        self.selection = NO_SELECTION

    def set_selection(self, start: int, end: int) -> None:
        self.selection = Selection(start, end, self.document.slice(start, end + 1))
