"""telelog-backed logging for the converter.

``configure`` picks the output, ``get_logger`` hands out cached loggers,
``record_event`` writes one structured line, and ``span`` profiles a block
with transient logger context.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "JSON_UNESCAPER_"
PRESETS = ("env", "quiet")

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return value if isinstance(value, str) else str(value)


def _build_config(preset: str, log_file: Optional[str]) -> Any:
    if preset not in PRESETS:
        raise ValueError(
            f"Unknown preset '{preset}'. Expected one of {', '.join(PRESETS)}."
        )
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    # "quiet" is for full-screen hosts: the terminal belongs to the UI.
    console = preset == "env" and not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = log_file or _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(preset: str = "env", *, log_file: Optional[str] = None) -> None:
    """Rebuild the telelog config and drop cached loggers.

    ``env`` follows the ``JSON_UNESCAPER_*`` variables; ``quiet`` never
    writes to the console. ``log_file`` overrides ``JSON_UNESCAPER_LOG_FILE``.
    """

    global _CONFIG
    _CONFIG = _build_config(preset, log_file)
    _LOGGERS.clear()


def get_logger(name: str = "json_unescaper") -> Any:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _build_config("env", None)
    if name not in _LOGGERS:
        _LOGGERS[name] = tl.Logger.with_config(name, _CONFIG)
    return _LOGGERS[name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(key, _stringify(val)) for key, val in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    log = get_logger(logger_name) if logger_name else get_logger()
    _emit(log, level.lower(), f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``, optionally tracked under ``component``.

    ``metadata`` is pushed as logger context only while the block runs. An
    exception is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name) if logger_name else get_logger()
    handle = SpanHandle(
        logger=log,
        name=name,
        metadata={key: _stringify(val) for key, val in (metadata or {}).items()},
    )
    pushed = list(handle.metadata.items())
    for key, value in pushed:
        log.add_context(key, value)

    with ExitStack() as stack:
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
        finally:
            for key, _ in pushed:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
