from __future__ import annotations

import io

import pytest

from clip_editor import repl
from clip_editor.actions import EditorContext
from clip_editor.runtime.settings import EditorSettings


def run_session(
    text: str, *, settings: EditorSettings | None = None
) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = repl.run(io.StringIO(text), stdout, stderr, settings=settings)
    return code, stdout.getvalue(), stderr.getvalue()


def test_session_prints_buffer_after_each_line() -> None:
    code, out, err = run_session(
        '"TYPE Hello"\n'
        '"SELECT 0 4" "COPY" "MOVE_CURSOR 0" "TYPE  World"\n'
        '"EXIT"\n'
    )

    assert code == 0
    assert err == ""
    assert out == (
        "Input: Output: Hello\n"
        "Input: Output: Hello World\n"
        "Input: Leaving program...\n"
    )


def test_session_replaces_selection_and_ignores_missing_paste() -> None:
    _, out, _ = run_session(
        '"TYPE Hello World"\n'
        '"SELECT 6 10" "COPY" "SELECT 0 4" "TYPE Hi"\n'
        '"PASTE 2"\n'
        '"EXIT"\n'
    )

    lines = out.splitlines()
    assert lines[1] == "Input: Output: Hi World"
    assert lines[2] == "Input: Output: Hi World"


def test_exit_mid_line_skips_output_and_later_commands() -> None:
    _, out, _ = run_session('"TYPE a" "EXIT" "TYPE b"\n"TYPE c"\n')

    assert out == "Input: Leaving program...\n"


def test_end_of_input_terminates_session() -> None:
    code, out, _ = run_session('"TYPE a"\n')

    assert code == 0
    assert out == "Input: Output: a\nInput: \nLeaving program...\n"


def test_errors_are_reported_and_session_continues() -> None:
    code, out, err = run_session('"SELECT 0 9" "TYPE ok"\n"EXIT"\n')

    assert code == 0
    assert err == "Error: Selection 0..9 is out of range for length 0\n"
    assert out == "Input: Output: ok\nInput: Leaving program...\n"


def test_strict_mode_stops_on_first_failed_line() -> None:
    code, out, err = run_session(
        '"MOVE_CURSOR left"\n"TYPE never"\n',
        settings=EditorSettings(strict=True),
    )

    assert code == 1
    assert err == "Error: Expected an integer, got 'left'\n"
    assert out == "Input: Leaving program...\n"


def test_custom_prompt_and_prefix() -> None:
    settings = EditorSettings(prompt="> ", output_prefix="= ", farewell="bye")

    _, out, _ = run_session('"TYPE x"\n"EXIT"\n', settings=settings)

    assert out == "> = x\n> bye\n"


def test_run_reuses_supplied_context() -> None:
    context = EditorContext()
    stdout = io.StringIO()

    repl.run(io.StringIO('"TYPE kept"\n'), stdout, io.StringIO(), context=context)

    assert context.buffer.text == "kept"


def test_settings_from_env() -> None:
    settings = EditorSettings.from_env(
        {
            "CLIP_EDITOR_PROMPT": "$ ",
            "CLIP_EDITOR_STRICT": "yes",
            "CLIP_EDITOR_LOG_PRESET": "production",
        }
    )

    assert settings.prompt == "$ "
    assert settings.output_prefix == "Output: "
    assert settings.strict is True
    assert settings.log_preset == "production"


def test_settings_reject_unknown_preset() -> None:
    with pytest.raises(ValueError):
        EditorSettings(log_preset="verbose")


def test_settings_overrides_skip_none() -> None:
    settings = EditorSettings(prompt="a").with_overrides(prompt=None, strict=True)

    assert settings.prompt == "a"
    assert settings.strict is True


def test_main_reads_stdin_and_applies_flags(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for name in ("PROMPT", "OUTPUT_PREFIX", "FAREWELL", "STRICT", "LOG_PRESET"):
        monkeypatch.delenv(f"CLIP_EDITOR_{name}", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO('"TYPE hi"\n"EXIT"\n'))

    code = repl.main(["--prompt", "? ", "--output-prefix", ""])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "? hi\n? Leaving program...\n"


def test_main_reports_bad_env_preset_as_usage_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CLIP_EDITOR_LOG_PRESET", "verbose")
    monkeypatch.setattr("sys.stdin", io.StringIO('"EXIT"\n'))

    with pytest.raises(SystemExit) as info:
        repl.main([])

    captured = capsys.readouterr()
    assert info.value.code == 2
    assert "Unknown log preset 'verbose'" in captured.err
    assert captured.out == ""
