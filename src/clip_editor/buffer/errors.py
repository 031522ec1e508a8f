"""Errors raised by buffer operations and command arguments."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for recoverable, reported editor failures.

    Raising one guarantees the buffer was left untouched.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class SelectionRangeError(EditorError):
    """Raised when a selection falls outside the text or is inverted."""

    def __init__(self, start: int, end: int, length: int) -> None:
        if start > end:
            reason = f"Selection start {start} is after end {end}"
        else:
            reason = f"Selection {start}..{end} is out of range for length {length}"
        super().__init__(reason)
        self.start = start
        self.end = end
        self.length = length


class NumericArgumentError(EditorError):
    """Raised when an integer argument cannot be parsed."""

    def __init__(self, value: str, *, expected: str = "an integer") -> None:
        super().__init__(f"Expected {expected}, got {value!r}")
        self.value = value


__all__ = ["EditorError", "SelectionRangeError", "NumericArgumentError"]
