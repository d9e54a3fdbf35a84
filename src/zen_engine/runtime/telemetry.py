"""Editor telemetry on top of telelog.

The rest of the package only touches four names:

``configure(...)`` -- pick env-derived settings, a named preset or a raw config
``get_logger(name)`` -- cached telelog logger bound to the active config
``record_event(name, ...)`` -- one structured ``event::<name>`` line
``span(name, ...)`` -- profile a block, track it as a component, log its outcome

The editor draws on the terminal it runs in, so nothing goes to the console
unless ``ZEN_ENGINE_CONSOLE=1``. Set ``ZEN_ENGINE_LOG_FILE`` to keep a trace of
a session on disk.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "ZEN_ENGINE_"
DEFAULT_LOGGER_NAME = "zen_engine"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class TelemetrySettings:
    """What the telelog config should look like, independent of telelog itself."""

    level: str = "INFO"
    log_file: str = ""
    json: bool = False
    console: bool = False
    colour: bool = True
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def flag(name: str) -> bool:
            return env.get(f"{ENV_PREFIX}{name}", "").lower() in _TRUTHY

        buffer_size = None
        if flag("LOG_BUFFERED"):
            raw = env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE", "")
            buffer_size = int(raw) if raw.isdigit() else 2048
        return cls(
            level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE", ""),
            json=flag("LOG_JSON"),
            console=flag("CONSOLE"),
            colour=not flag("NO_COLOR"),
            buffer_size=buffer_size,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colour)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


def _development(base: TelemetrySettings) -> TelemetrySettings:
    return replace(base, level="DEBUG", json=False, log_file=base.log_file or "zen.log")


def _production(base: TelemetrySettings) -> TelemetrySettings:
    return replace(
        base,
        level="INFO",
        log_file=base.log_file or "zen_engine.log",
        buffer_size=base.buffer_size or 2048,
    )


def _performance(base: TelemetrySettings) -> TelemetrySettings:
    return replace(
        base,
        level="DEBUG",
        json=True,
        log_file=base.log_file or "zen_engine-performance.log",
        buffer_size=base.buffer_size or 2048,
    )


PRESETS: Dict[str, Callable[[TelemetrySettings], TelemetrySettings]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


def configure(
    *,
    settings: Optional[TelemetrySettings] = None,
    preset: Optional[str] = None,
    config: Optional[Any] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``preset`` layers one of :data:`PRESETS` over ``settings`` (or over the
    environment); an explicit telelog ``config`` is adopted as is.
    """

    global _active_config
    if config is not None and (settings is not None or preset):
        raise ValueError("Pass either a telelog config or settings/preset, not both.")
    if config is None:
        base = settings or TelemetrySettings.from_env()
        if preset:
            try:
                base = PRESETS[preset.lower()](base)
            except KeyError:
                raise ValueError(f"Unknown preset '{preset}'.") from None
        config = base.to_config()
    _active_config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _active_config
    if _active_config is None:
        _active_config = TelemetrySettings.from_env().to_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = _loggers[logger_name] = tl.Logger.with_config(logger_name, _active_config)
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(logger: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    """Log ``message`` with ``payload`` as key/value pairs at ``level``.

    telelog exposes ``<level>_with(message, pairs)`` for structured data; a
    logger without it gets the payload folded into the message.
    """

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    pairs: List[Tuple[str, str]] = [(str(k), _text(v)) for k, v in payload.items()]
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a :func:`span` attach results to the closing log line."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def _payload(self, **extra: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload.update(extra)
        return payload

    def done(self) -> None:
        _emit(self.logger, "debug", "span::done", self._payload())

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload(reason=reason))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``; ``metadata`` is logger context meanwhile.

    An exception escaping the block is logged through :meth:`SpanHandle.fail`
    and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name, component=component)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)

    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        handle.done()


__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
