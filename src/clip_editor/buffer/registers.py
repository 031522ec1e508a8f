"""Clipboard history storage."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


class ClipboardHistory:
    """Append-only history of copied snapshots, most recent last.

    Entries are addressed by recency: ``recall(1)`` is the latest copy.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def push(self, text: str) -> None:
        self._entries.append(text)

    def recall(self, steps_back: int = 1) -> Optional[str]:
        """Return the ``steps_back``-th most recent entry, or ``None``."""

        if steps_back < 1 or steps_back > len(self._entries):
            return None
        return self._entries[len(self._entries) - steps_back]

    def serialize(self) -> Tuple[str, ...]:
        return tuple(self._entries)
