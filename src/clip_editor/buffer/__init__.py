"""Buffer state, clipboard history, and the editing verbs that mutate them."""

from .buffer import EditorBuffer, EditorView, Transaction
from .document import TextDocument
from .errors import EditorError, NumericArgumentError, SelectionRangeError
from .registers import ClipboardHistory
from .state import NO_SELECTION, EditorState, NoSelection, Selection
from .validation import ensure_selection, parse_int, parse_int_pair

__all__ = [
    "ClipboardHistory",
    "EditorBuffer",
    "EditorError",
    "EditorState",
    "EditorView",
    "NO_SELECTION",
    "NoSelection",
    "NumericArgumentError",
    "Selection",
    "SelectionRangeError",
    "TextDocument",
    "Transaction",
    "ensure_selection",
    "parse_int",
    "parse_int_pair",
]
