"""High-level buffer façade combining document, selection, and clipboard."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from clip_editor.runtime import telemetry

from .document import TextDocument
from .state import EditorState, SelectionState
from .validation import ensure_selection


@dataclass(frozen=True, slots=True)
class EditorView:
    version: int
    text: str
    cursor: int
    selection: SelectionState
    clipboard_size: int


class EditorBuffer:
    """Owns one ``EditorState`` and applies the editing verbs to it."""

    def __init__(
        self,
        *,
        name: str = "default",
        state: Optional[EditorState] = None,
    ) -> None:
        self.name = name
        self.state = state or EditorState()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "EditorBuffer":
        return cls(name=name, state=EditorState(document=TextDocument(text)))

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def selection(self) -> SelectionState:
        return self.state.selection

    @property
    def clipboard(self) -> tuple[str, ...]:
        return self.state.clipboard.serialize()

    def snapshot(self) -> EditorView:
        return EditorView(
            version=self.state.document.version,
            text=self.state.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            clipboard_size=len(self.state.clipboard),
        )

    def insert(self, text: str) -> None:
        """Type ``text`` at the cursor, replacing the selection if there is one."""

        with Transaction(self, "insert"):
            state = self.state
            selection = state.selection
            if state.has_selection:
                state.document.splice(selection.start, selection.end + 1, "")
                state.set_cursor(selection.start)
            state.document.splice(state.cursor, state.cursor, text)
            state.set_cursor(state.cursor + len(text))
            state.clear_selection()

    def select(self, start: int, end: int) -> str:
        """Select ``text[start..end]`` inclusive and park the cursor after it."""

        ensure_selection(self.state.document, start, end)
        with Transaction(self, "select"):
            self.state.set_selection(start, end)
            self.state.set_cursor(end + 1)
        return self.state.selection.text

    def move_cursor(self, offset: int) -> None:
        with Transaction(self, "move_cursor"):
            target = self.state.cursor + offset
            self.state.set_cursor(max(0, min(target, len(self.state.document))))
            self.state.clear_selection()

    def copy(self) -> Optional[str]:
        selection = self.state.selection
        if not selection:
            return None
        with Transaction(self, "copy"):
            self.state.clipboard.push(selection.text)
        return selection.text

    def paste(self, steps_back: int = 1) -> Optional[str]:
        entry = self.state.clipboard.recall(steps_back)
        if entry is None:
            telemetry.record_event(
                "buffer.paste_miss",
                level="debug",
                data={"steps_back": steps_back, "size": len(self.state.clipboard)},
            )
            return None
        self.insert(entry)
        return entry


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer verb in a span that records the resulting state."""

    def __init__(self, buffer: EditorBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self.span: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            component="buffer",
            metadata={
                "buffer": self.buffer.name,
                "cursor_before": self.buffer.state.cursor,
            },
        )
        self.span = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self.span is not None:
            state = self.buffer.state
            self.span.record(
                version=state.document.version,
                cursor=state.cursor,
                selected=state.has_selection,
                clipboard=len(state.clipboard),
            )
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditorBuffer", "EditorView", "Transaction"]
