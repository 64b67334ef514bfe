"""Adapter that relays SyncController state into host UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from json_unescaper.direction import Direction, Side
from json_unescaper.sync import EVENTS, SyncController, SyncResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update the two panes and the status area."""

    update_escaped: Callable[[str], None]
    update_raw: Callable[[str], None]
    update_direction: Callable[[Direction], None] = _noop
    show_error: Callable[[Optional[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSyncAdapter:
    """Turns pane edits and focus changes into controller calls."""

    def __init__(
        self,
        controller: SyncController,
        hooks: TextualUIHooks,
        *,
        prime: bool = False,
    ) -> None:
        self.controller = controller
        self.hooks = hooks
        self._subscribe_events()
        if prime:
            self._log_state("prime ->")
            self.controller.resync()
        self.refresh()

    def handle_text_changed(self, side: Side, text: str) -> SyncResult:
        side = Side(side)
        self._log_state("edit ->", side=side.value, length=len(text))
        if side is Side.ESCAPED:
            result = self.controller.on_escaped_changed(text)
        else:
            result = self.controller.on_raw_changed(text)
        self._after_result(result)
        return result

    def handle_focus(self, side: Side) -> SyncResult:
        side = Side(side)
        self._log_state("focus ->", side=side.value)
        result = self.controller.on_focus(side)
        self._after_result(result)
        return result

    def refresh(self) -> None:
        state = self.controller.get_state()
        self.hooks.update_escaped(state.escaped_text)
        self.hooks.update_raw(state.raw_text)
        self.hooks.update_direction(state.direction)
        self.hooks.show_error(state.error_message)

    def _after_result(self, result: SyncResult) -> None:
        self.refresh()
        self._log_state(
            "result <-",
            propagated=result.propagated,
            status=result.status,
            message=result.message,
        )

    def _subscribe_events(self) -> None:
        bus = self.controller.bus
        for event in EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.controller.get_state()
        return {
            "direction": state.direction.value,
            "escaped_len": len(state.escaped_text),
            "raw_len": len(state.raw_text),
            "error": state.error_kind.value if state.error_kind else None,
        }


__all__ = ["TextualSyncAdapter", "TextualUIHooks"]
