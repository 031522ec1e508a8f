"""Parsing and dispatch of quoted editor commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from clip_editor.buffer import EditorError, parse_int, parse_int_pair
from clip_editor.runtime import telemetry

from .core import CommandResult, EditorContext

CommandHandler = Callable[[EditorContext, Optional[str]], CommandResult]

QUOTE = '"'


@dataclass(frozen=True, slots=True)
class Command:
    """One ``OPERATION [ARGUMENT]`` command string."""

    operation: str
    argument: Optional[str] = None
    raw: str = ""

    @classmethod
    def parse(cls, raw: str) -> "Command":
        operation, sep, argument = raw.partition(" ")
        return cls(operation=operation, argument=argument if sep else None, raw=raw)


@dataclass(slots=True)
class LineOutcome:
    results: List[CommandResult] = field(default_factory=list)
    terminate: bool = False

    @property
    def errors(self) -> List[CommandResult]:
        return [result for result in self.results if not result.ok]


def split_commands(line: str) -> List[str]:
    """Return the quoted segments of ``line`` in order."""

    line = line.rstrip("\r\n")
    return line.split(QUOTE)[1::2]


def execute(context: EditorContext, raw: str) -> CommandResult:
    command = Command.parse(raw)
    context.bus.emit("command.submit", raw)
    handler = _COMMAND_HANDLERS.get(command.operation)
    if handler is None:
        return _unknown_command(context, command)

    with telemetry.span(
        f"command::{command.operation.lower()}",
        component="commands",
        metadata={"command": raw},
    ):
        try:
            result = handler(context, command.argument)
        except EditorError as exc:
            telemetry.record_event(
                "command.error",
                level="warning",
                data={"command": raw, "reason": exc.reason},
            )
            context.bus.emit("command.error", {"command": raw, "reason": exc.reason})
            return CommandResult(ok=False, status="error", message=exc.reason)
    context.bus.emit(f"command.{result.status}", raw)
    return result


def execute_line(context: EditorContext, line: str) -> LineOutcome:
    """Run every quoted command in ``line``; stop at the first ``EXIT``."""

    outcome = LineOutcome()
    for raw in split_commands(line):
        result = execute(context, raw)
        outcome.results.append(result)
        if result.terminate:
            outcome.terminate = True
            break
    return outcome


def _unknown_command(context: EditorContext, command: Command) -> CommandResult:
    telemetry.record_event(
        "command.ignored", level="debug", data={"operation": command.operation}
    )
    context.bus.emit("command.ignored", command.raw)
    return CommandResult(status="ignored", message=command.operation)


def _handle_type(context: EditorContext, argument: Optional[str]) -> CommandResult:
    context.buffer.insert(argument or "")
    return CommandResult(status="type")


def _handle_select(context: EditorContext, argument: Optional[str]) -> CommandResult:
    start, end = parse_int_pair(argument or "")
    selected = context.buffer.select(start, end)
    return CommandResult(status="select", message=selected)


def _handle_move_cursor(
    context: EditorContext, argument: Optional[str]
) -> CommandResult:
    context.buffer.move_cursor(parse_int(argument or ""))
    return CommandResult(status="move_cursor")


def _handle_copy(context: EditorContext, argument: Optional[str]) -> CommandResult:
    del argument
    copied = context.buffer.copy()
    return CommandResult(status="copy" if copied is not None else "noop", message=copied)


def _handle_paste(context: EditorContext, argument: Optional[str]) -> CommandResult:
    steps_back = 1 if argument is None else parse_int(argument)
    pasted = context.buffer.paste(steps_back)
    return CommandResult(status="paste" if pasted is not None else "noop", message=pasted)


def _handle_exit(context: EditorContext, argument: Optional[str]) -> CommandResult:
    del context, argument
    return CommandResult(status="exit", terminate=True)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "TYPE": _handle_type,
    "SELECT": _handle_select,
    "MOVE_CURSOR": _handle_move_cursor,
    "COPY": _handle_copy,
    "PASTE": _handle_paste,
    "EXIT": _handle_exit,
}


__all__ = [
    "Command",
    "LineOutcome",
    "execute",
    "execute_line",
    "split_commands",
]
