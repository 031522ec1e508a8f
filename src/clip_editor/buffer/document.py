"""Flat text storage for editor buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TextDocument:
    """A single flat string plus a version that moves on every edit.

    Plain ``str`` slicing is all the splicing this buffer needs; a rope or gap
    buffer could replace it behind the same three methods.
    """

    text: str = ""
    version: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]

    def splice(self, start: int, end: int, replacement: str) -> None:
        """Replace ``text[start:end]`` with ``replacement``."""

        self.text = self.text[:start] + replacement + self.text[end:]
        self.version += 1
