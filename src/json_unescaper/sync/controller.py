"""Direction state machine keeping the escaped and raw buffers in sync."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from json_unescaper.codec import DecodeError, DecodeErrorKind, decode, encode, is_blank
from json_unescaper.config import SessionConfig
from json_unescaper.direction import Direction, Side
from json_unescaper.runtime import telemetry

from .bus import SyncBus
from .state import SyncResult, SyncSnapshot, SyncState

LOGGER_NAME = "json_unescaper.sync"


class SyncController:
    """Owns both buffers, the active direction, and the error slot.

    Only the handler for the authoritative side propagates; an edit on the
    other side is stored and otherwise ignored until focus flips direction.
    Focusing a side does not re-derive anything unless the session was
    configured with ``resync_on_focus``.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        escaped: Optional[str] = None,
        raw: Optional[str] = None,
        direction: Optional[Direction] = None,
        bus: Optional[SyncBus] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.bus = bus or SyncBus()
        self.logger = telemetry.get_logger(LOGGER_NAME)
        self._state = SyncState(
            direction=Direction(direction or self.config.initial_direction),
            escaped=self.config.initial_escaped if escaped is None else escaped,
            raw=self.config.initial_raw if raw is None else raw,
        )
        self._live: Dict[Direction, Callable[[], SyncResult]] = {
            Direction.LEFT_TO_RIGHT: self._derive_raw,
            Direction.RIGHT_TO_LEFT: self._derive_escaped,
        }

    @property
    def direction(self) -> Direction:
        return self._state.direction

    def get_state(self) -> SyncSnapshot:
        state = self._state
        return SyncSnapshot(
            escaped_text=state.escaped,
            raw_text=state.raw,
            direction=state.direction,
            error_message=state.error,
            error_kind=state.error_kind,
        )

    def on_escaped_changed(self, text: str) -> SyncResult:
        return self._on_text_changed(Side.ESCAPED, text)

    def on_raw_changed(self, text: str) -> SyncResult:
        return self._on_text_changed(Side.RAW, text)

    def on_focus(self, side: Side) -> SyncResult:
        direction = Direction.for_side(side)
        with telemetry.span(
            "sync::focus",
            logger_name=LOGGER_NAME,
            component="sync",
            metadata={"side": side, "direction": direction},
        ):
            previous = self._state.direction
            if direction is previous:
                return SyncResult(propagated=False, status="focus")

            self._state.direction = direction
            telemetry.record_event(
                "sync.direction",
                level="debug",
                data={"from": previous, "to": direction},
                logger_name=LOGGER_NAME,
            )
            self.bus.emit("sync.direction", direction)

            if not self.config.resync_on_focus:
                return SyncResult(propagated=False, status="focus")
            outcome = self._live[direction]()
            return SyncResult(
                propagated=outcome.propagated, status="focus", message=outcome.message
            )

    def resync(self) -> SyncResult:
        """Re-derive the dependent buffer from the authoritative one."""

        with telemetry.span(
            "sync::resync",
            logger_name=LOGGER_NAME,
            component="sync",
            metadata={"direction": self._state.direction},
        ):
            return self._live[self._state.direction]()

    def _on_text_changed(self, side: Side, text: str) -> SyncResult:
        with telemetry.span(
            f"sync::{side.value}_changed",
            logger_name=LOGGER_NAME,
            component="sync",
            metadata={"direction": self._state.direction, "length": len(text)},
        ) as handle:
            if side is Side.ESCAPED:
                self._state.escaped = text
            else:
                self._state.raw = text

            if self._state.direction.source is not side:
                handle.add_metadata("status", "inert")
                return SyncResult(propagated=False, status="inert")

            result = self._live[self._state.direction]()
            handle.add_metadata("status", result.status)
            return result

    def _derive_raw(self) -> SyncResult:
        escaped = self._state.escaped
        if is_blank(escaped):
            self._write(Side.RAW, "")
            self._set_error(None)
            return SyncResult(propagated=True, status="cleared")

        try:
            raw = decode(escaped)
        except DecodeError as exc:
            # Raw keeps its last good value so the user does not lose context.
            telemetry.record_event(
                "sync.decode_failed",
                level="warning",
                data={"kind": exc.kind.value, "detail": str(exc)},
                logger_name=LOGGER_NAME,
            )
            self._set_error(exc.user_message, exc.kind)
            return SyncResult(propagated=False, status="error", message=exc.user_message)

        self._write(Side.RAW, raw)
        self._set_error(None)
        return SyncResult(propagated=True, status="derived")

    def _derive_escaped(self) -> SyncResult:
        self._write(Side.ESCAPED, encode(self._state.raw))
        self._set_error(None)
        return SyncResult(propagated=True, status="derived")

    def _write(self, side: Side, text: str) -> None:
        if side is Side.ESCAPED:
            self._state.escaped = text
        else:
            self._state.raw = text
        self.bus.emit("sync.derived", side)

    def _set_error(
        self, message: Optional[str], kind: Optional[DecodeErrorKind] = None
    ) -> None:
        changed = message != self._state.error
        if message is None:
            self._state.clear_error()
        else:
            self._state.error = message
            self._state.error_kind = kind
        if changed:
            self.bus.emit("sync.error", message)


__all__ = ["SyncController"]
