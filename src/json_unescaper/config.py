"""Session configuration: demo values and behaviour switches."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .codec import encode
from .direction import Direction

ENV_PREFIX = "JSON_UNESCAPER_"

DEMO_RAW_TEXT = (
    "## Welcome!\n\n"
    "This is a demo of a JSON-escaped string with Markdown.\n\n"
    "- Type here to see the conversion.\n"
    "- Newlines are escaped as `\\n`.\n"
    '- Quotes are escaped as `\\"`.'
)
DEMO_ESCAPED_TEXT = encode(DEMO_RAW_TEXT)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DIRECTION_ALIASES = {
    "ltr": Direction.LEFT_TO_RIGHT,
    "left_to_right": Direction.LEFT_TO_RIGHT,
    "left-to-right": Direction.LEFT_TO_RIGHT,
    "rtl": Direction.RIGHT_TO_LEFT,
    "right_to_left": Direction.RIGHT_TO_LEFT,
    "right-to-left": Direction.RIGHT_TO_LEFT,
}


class ConfigError(ValueError):
    """Raised for configuration values that cannot be interpreted."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


@dataclass(frozen=True, slots=True)
class SessionConfig:
    initial_escaped: str = DEMO_ESCAPED_TEXT
    initial_raw: str = ""
    initial_direction: Direction = Direction.LEFT_TO_RIGHT
    # Re-derive the dependent buffer as soon as focus flips direction.
    resync_on_focus: bool = False
    # Let hosts derive the raw buffer once before the first edit.
    derive_on_start: bool = True

    def with_overrides(self, **changes: object) -> "SessionConfig":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def parse_direction(value: str) -> Direction:
    key = value.strip().lower()
    if key in _DIRECTION_ALIASES:
        return _DIRECTION_ALIASES[key]
    raise ConfigError(
        f"Unknown direction '{value}'. Use 'ltr' or 'rtl'.", key="DIRECTION"
    )


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean, got '{raw}'", key=name)


def load_config(environ: Optional[Mapping[str, str]] = None) -> SessionConfig:
    """Build a ``SessionConfig`` from ``JSON_UNESCAPER_*`` variables."""

    env = os.environ if environ is None else environ
    config = SessionConfig(
        resync_on_focus=_flag(env, "RESYNC_ON_FOCUS", False),
        derive_on_start=_flag(env, "DERIVE_ON_START", True),
    )
    direction = env.get(f"{ENV_PREFIX}DIRECTION")
    if direction:
        config = replace(config, initial_direction=parse_direction(direction))
    return config


__all__ = [
    "DEMO_ESCAPED_TEXT",
    "DEMO_RAW_TEXT",
    "ConfigError",
    "SessionConfig",
    "load_config",
    "parse_direction",
]
