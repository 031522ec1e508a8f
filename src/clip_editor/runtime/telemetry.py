"""Logging, structured events, and profiled spans on top of telelog.

Standard output carries the editor transcript, so console logging stays off
unless ``CLIP_EDITOR_LOG_CONSOLE`` is set or the ``development`` preset is used.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CLIP_EDITOR_"
DEFAULT_LOGGER_NAME = "clip_editor"
PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def parse_flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    config.with_profiling(True)
    log_file = _env("LOG_FILE")
    key = (preset or "").lower()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(log_file or "clip_editor.log")
        config.with_buffering(True)
    elif key == "performance":
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_file_output(log_file or "clip_editor-performance.log")
        config.with_buffering(True)
    elif preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        console = parse_flag(_env("LOG_CONSOLE"), False)
        config.with_console_output(console)
        if console:
            config.with_colored_output(not parse_flag(_env("NO_COLOR"), False))
        if parse_flag(_env("LOG_JSON"), False):
            config.with_json_format(True)
        if log_file:
            config.with_file_output(log_file)
        if parse_flag(_env("LOG_BUFFERED"), False):
            config.with_buffering(True)
            config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Switch to a named preset, or back to the environment-driven default."""

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_config(None)
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _log_pairs(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    with_data = getattr(logger, f"{level}_with", None)
    if with_data is not None:
        with_data(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    method = getattr(logger, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _log_pairs(get_logger(logger_name), level.lower(), f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Fields collected while a span is open, logged when it closes."""

    logger: Any
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def record(self, **fields: Any) -> None:
        self.fields.update({key: _stringify(value) for key, value in fields.items()})

    def _emit(self, level: str, message: str) -> None:
        _log_pairs(self.logger, level, message, {"span": self.name, **self.fields})


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked under ``component``.

    ``metadata`` and anything added through ``SpanHandle.record`` are logged
    as ``span::done`` on success or ``span::fail`` with the error reason.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name)
    handle.record(**(metadata or {}))

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.record(reason=str(exc))
            handle._emit("error", "span::fail")
            raise
    handle._emit("debug", "span::done")


__all__ = [
    "ENV_PREFIX",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "parse_flag",
    "record_event",
    "span",
]
