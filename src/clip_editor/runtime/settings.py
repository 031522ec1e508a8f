"""Environment-driven settings for the command loop."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX, PRESETS, parse_flag


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Presentation and failure policy for a REPL session."""

    prompt: str = "Input: "
    output_prefix: str = "Output: "
    farewell: str = "Leaving program..."
    strict: bool = False
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if self.log_preset is not None and self.log_preset.lower() not in PRESETS:
            raise ValueError(f"Unknown log preset '{self.log_preset}'.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, fallback: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", fallback)

        return cls(
            prompt=get("PROMPT", defaults.prompt),
            output_prefix=get("OUTPUT_PREFIX", defaults.output_prefix),
            farewell=get("FAREWELL", defaults.farewell),
            strict=parse_flag(env.get(f"{ENV_PREFIX}STRICT"), defaults.strict),
            log_preset=env.get(f"{ENV_PREFIX}LOG_PRESET") or None,
        )

    def with_overrides(self, **changes: object) -> "EditorSettings":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


__all__ = ["EditorSettings"]
