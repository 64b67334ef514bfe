"""Controller state, the snapshot handed to hosts, and handler results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from json_unescaper.codec import DecodeErrorKind
from json_unescaper.direction import Direction


@dataclass(slots=True)
class SyncState:
    """Mutable state owned by ``SyncController``."""

    direction: Direction
    escaped: str
    raw: str
    error: Optional[str] = None
    error_kind: Optional[DecodeErrorKind] = None

    def clear_error(self) -> None:
        self.error = None
        self.error_kind = None


@dataclass(frozen=True, slots=True)
class SyncSnapshot:
    """Read-only view of the controller for rendering."""

    escaped_text: str
    raw_text: str
    direction: Direction
    error_message: Optional[str]
    error_kind: Optional[DecodeErrorKind] = None


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Outcome of one controller event.

    ``status`` is one of ``derived``, ``cleared``, ``error``, ``inert`` or
    ``focus``; ``propagated`` is true when the dependent buffer was rewritten.
    """

    propagated: bool
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["SyncResult", "SyncSnapshot", "SyncState"]
