"""Command parsing and dispatch on top of the editor buffer."""

from .command import (
    Command,
    LineOutcome,
    execute,
    execute_line,
    split_commands,
)
from .core import CommandResult, EditorBus, EditorContext

__all__ = [
    "Command",
    "CommandResult",
    "EditorBus",
    "EditorContext",
    "LineOutcome",
    "execute",
    "execute_line",
    "split_commands",
]
