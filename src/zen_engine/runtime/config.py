"""Editor configuration defaults and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Optional

ENV_PREFIX = "ZEN_ENGINE_"

QUIT_TIMES = 3
TAB_STOP = 4
STATUS_TIMEOUT_S = 5.0
HELP_MESSAGE = "HELP: Ctrl-F = find | Ctrl-S = save | Ctrl-Q = quit"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the editor loop, renderer and dispatcher."""

    quit_times: int = QUIT_TIMES
    tab_stop: int = TAB_STOP
    status_timeout_s: float = STATUS_TIMEOUT_S
    help_message: str = HELP_MESSAGE
    initial_mode: str = "insert"

    def __post_init__(self) -> None:
        if self.quit_times < 1:
            raise ValueError("quit_times must be at least 1")
        if self.tab_stop < 1:
            raise ValueError("tab_stop must be at least 1")
        if self.status_timeout_s <= 0:
            raise ValueError("status_timeout_s must be positive")
        if self.initial_mode not in {"normal", "insert"}:
            raise ValueError(f"Unsupported initial mode '{self.initial_mode}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from ``ZEN_ENGINE_*`` variables.

        Malformed values fall back to the defaults instead of aborting startup.
        """

        env = os.environ if environ is None else environ
        defaults = cls()
        overrides: dict[str, Any] = {}
        for name, key, parse in _ENV_FIELDS:
            raw = env.get(f"{ENV_PREFIX}{key}")
            if raw is None:
                continue
            try:
                value = parse(raw)
                replace(defaults, **{name: value})
            except ValueError:
                continue
            overrides[name] = value
        return replace(defaults, **overrides)

    def with_overrides(self, **changes: Any) -> "EditorConfig":
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise KeyError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


_ENV_FIELDS: tuple[tuple[str, str, Callable[[str], Any]], ...] = (
    ("quit_times", "QUIT_TIMES", int),
    ("tab_stop", "TAB_STOP", int),
    ("status_timeout_s", "STATUS_TIMEOUT", float),
    ("initial_mode", "INITIAL_MODE", lambda raw: raw.strip().lower()),
)


__all__ = ["EditorConfig", "QUIT_TIMES", "TAB_STOP", "STATUS_TIMEOUT_S", "HELP_MESSAGE"]
