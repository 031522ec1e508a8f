"""Shared result, context, and event bus types for command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from clip_editor.buffer import EditorBuffer


@dataclass(slots=True)
class CommandResult:
    """Outcome of one dispatched command."""

    ok: bool = True
    status: str = "ok"
    message: Optional[str] = None
    terminate: bool = False


class EditorBus:
    """Minimal event bus letting hosts observe dispatched commands."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Services every command handler can access."""

    buffer: EditorBuffer = field(default_factory=EditorBuffer)
    bus: EditorBus = field(default_factory=EditorBus)


__all__ = ["CommandResult", "EditorBus", "EditorContext"]
