"""Line-oriented command loop driving an ``EditorBuffer`` from stdin."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from clip_editor.actions import EditorContext, execute_line
from clip_editor.runtime import telemetry
from clip_editor.runtime.settings import EditorSettings


def run(
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    *,
    settings: Optional[EditorSettings] = None,
    context: Optional[EditorContext] = None,
) -> int:
    """Process input lines until ``EXIT`` or end of input.

    Returns the process exit code: ``1`` when ``settings.strict`` stopped the
    session on a failed command, ``0`` otherwise.
    """

    settings = settings or EditorSettings()
    context = context or EditorContext()
    log = telemetry.get_logger("clip_editor.repl")
    exit_code = 0
    lines = 0

    while True:
        stdout.write(settings.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            log.debug("end of input")
            break
        lines += 1

        outcome = execute_line(context, line)
        for failure in outcome.errors:
            stderr.write(f"Error: {failure.message}\n")
        if outcome.errors and settings.strict:
            exit_code = 1
            break
        if outcome.terminate:
            break
        stdout.write(f"{settings.output_prefix}{context.buffer.text}\n")

    telemetry.record_event(
        "repl.exit", data={"lines": lines, "exit_code": exit_code}
    )
    stdout.write(f"{settings.farewell}\n")
    stdout.flush()
    return exit_code


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Edit a text buffer with quoted commands read from stdin."
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt printed before each input line (default: 'Input: ')",
    )
    parser.add_argument(
        "--output-prefix",
        default=None,
        help="Prefix for the buffer echoed after each line (default: 'Output: ')",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Stop with exit code 1 on the first failed command",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset to activate",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = EditorSettings.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    settings = settings.with_overrides(
        prompt=args.prompt,
        output_prefix=args.output_prefix,
        strict=args.strict,
        log_preset=args.log_preset,
    )
    if settings.log_preset:
        telemetry.configure(preset=settings.log_preset)
    return run(sys.stdin, sys.stdout, sys.stderr, settings=settings)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
