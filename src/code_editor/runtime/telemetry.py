"""Telemetry for the editor core, built on telelog.

Modules only use ``get_logger``, ``record_event`` and ``span``. Hosts may
call ``configure`` once at startup with ``TelemetrySettings``; otherwise the
settings are read from ``CODE_EDITOR_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CODE_EDITOR_"
DEFAULT_LOGGER_NAME = "code_editor"
LEVELS = ("debug", "info", "warning", "error")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env_flag(name: str) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}", "")
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """What the editor logs and where it goes."""

    level: str = "info"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        level = self.level.lower()
        if level not in LEVELS:
            raise ValueError(f"Unsupported log level '{self.level}'.")
        object.__setattr__(self, "level", level)

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or "info",
            console=not _env_flag("DISABLE_CONSOLE"),
            color=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE") or None,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        config.with_profiling(True)
        return config


def configure(settings: Optional[TelemetrySettings] = None) -> TelemetrySettings:
    """Adopt ``settings`` (or the environment) and drop cached loggers."""

    global _ACTIVE_CONFIG
    settings = settings or TelemetrySettings.from_env()
    _ACTIVE_CONFIG = settings.to_config()
    _LOGGER_CACHE.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    if _ACTIVE_CONFIG is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    # Prefer the structured ``<level>_with`` variant when telelog offers it.
    pairs = [(str(key), _stringify(value)) for key, value in payload.items()]
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
    else:
        getattr(log, level)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    if level not in LEVELS:
        raise ValueError(f"Unsupported log level '{level}'.")
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results after the fact."""

    logger: Any
    span_name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, tracking it under ``component`` when given.

    ``metadata`` is attached as logger context while the block runs. An
    exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        span_name=name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )

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
            _emit(
                log,
                "error",
                "span::fail",
                {"span": name, **handle.metadata, "reason": str(exc)},
            )
            raise


__all__ = [
    "LEVELS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
