"""Executable Textual app: escaped string on the left, raw text on the right."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

try:  # pragma: no cover - imported only when the app is used
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.message import Message
    from textual.widgets import Footer, Header, Label, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use json_unescaper.adapters.textual.app"
    ) from exc

from json_unescaper.config import SessionConfig, load_config, parse_direction
from json_unescaper.direction import Direction, Side
from json_unescaper.runtime import telemetry
from json_unescaper.sync import SyncController

from .controller import TextualSyncAdapter, TextualUIHooks

PANE_IDS: Dict[Side, str] = {Side.ESCAPED: "json-input", Side.RAW: "markdown-output"}


class SurfaceArea(TextArea):
    """TextArea that reports which side of the converter gained focus."""

    class Focused(Message):
        def __init__(self, area: "SurfaceArea", side: Side) -> None:
            super().__init__()
            self.area = area
            self.side = side

        @property
        def control(self) -> "SurfaceArea":
            return self.area

    def __init__(self, text: str, *, side: Side, **kwargs) -> None:
        super().__init__(text, id=PANE_IDS[side], **kwargs)
        self.side = side

    def on_focus(self, event: events.Focus) -> None:
        del event
        self.post_message(self.Focused(self, self.side))


@dataclass
class UIState:
    escaped_text: str = ""
    raw_text: str = ""
    direction: Direction = Direction.LEFT_TO_RIGHT
    error_text: Optional[str] = None


class UnescaperApp(App[None]):
    """Two panes kept in sync by a ``SyncController``."""

    TITLE = "JSON Markdown Unescaper"
    FOOTER_TEXT = TITLE

    AUTO_FOCUS = None

    CSS = """
	Screen {
		layout: vertical;
	}

	#panes {
		height: 1fr;
	}

	.pane {
		width: 1fr;
		padding: 0 1;
	}

	.pane-label {
		color: $text-muted;
		padding: 0 1;
	}

	.pane TextArea {
		height: 1fr;
		border: round $panel;
	}

	.pane TextArea:focus {
		border: round $accent;
	}

	#middle {
		width: 24;
		align: center middle;
	}

	#direction {
		width: 100%;
		content-align: center middle;
		text-style: bold;
		color: $accent;
	}

	#error {
		width: 100%;
		margin-top: 1;
		color: $error;
	}

	#footer-text {
		width: 100%;
		content-align: center middle;
		color: $text-muted;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        super().__init__()
        self.config = config or load_config()
        self._state = UIState()
        self.controller: SyncController | None = None
        self.adapter: TextualSyncAdapter | None = None
        self.logger = telemetry.get_logger("json_unescaper.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panes"):
            with Vertical(classes="pane"):
                yield Label("JSON-Escaped String", classes="pane-label")
                yield SurfaceArea(self.config.initial_escaped, side=Side.ESCAPED)
            with Vertical(id="middle"):
                yield Static("", id="direction", markup=False)
                yield Static("", id="error", markup=False)
            with Vertical(classes="pane"):
                yield Label("Raw Text / Markdown Preview", classes="pane-label")
                yield SurfaceArea(self.config.initial_raw, side=Side.RAW)
        yield Label(self.FOOTER_TEXT, id="footer-text")
        yield Footer()

    def on_mount(self) -> None:
        self.controller = SyncController(self.config)
        hooks = TextualUIHooks(
            update_escaped=lambda text: self._update_pane(Side.ESCAPED, text),
            update_raw=lambda text: self._update_pane(Side.RAW, text),
            update_direction=self._update_direction,
            show_error=self._show_error,
            log=self._log_line,
        )
        self.adapter = TextualSyncAdapter(
            self.controller, hooks, prime=self.config.derive_on_start
        )
        self.pane(self.controller.direction.source).focus()

    def pane(self, side: Side) -> SurfaceArea:
        return self.query_one(f"#{PANE_IDS[side]}", SurfaceArea)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        area = event.text_area
        if self.adapter is None or not isinstance(area, SurfaceArea):
            return
        self.adapter.handle_text_changed(area.side, area.text)

    def on_surface_area_focused(self, event: SurfaceArea.Focused) -> None:
        if self.adapter is None:
            return
        self.adapter.handle_focus(event.side)

    def _update_pane(self, side: Side, text: str) -> None:
        if side is Side.ESCAPED:
            self._state.escaped_text = text
        else:
            self._state.raw_text = text
        area = self.pane(side)
        if area.text == text:
            return
        # Writing our own output must not come back as a user edit.
        with area.prevent(TextArea.Changed):
            area.load_text(text)

    def _update_direction(self, direction: Direction) -> None:
        self._state.direction = direction
        self.query_one("#direction", Static).update(direction.arrow)

    def _show_error(self, message: Optional[str]) -> None:
        self._state.error_text = message
        self.query_one("#error", Static).update(message or "")

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert between JSON-escaped strings and raw text."
    )
    parser.add_argument(
        "--direction",
        choices=("ltr", "rtl"),
        default=None,
        help="Initially authoritative side (default: ltr, or JSON_UNESCAPER_DIRECTION)",
    )
    parser.add_argument(
        "--resync-on-focus",
        action="store_true",
        default=None,
        help="Re-derive the other pane as soon as a pane gains focus",
    )
    parser.add_argument(
        "--no-derive-on-start",
        action="store_true",
        help="Leave the raw pane empty until the first edit",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file; the console stays reserved for the UI",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SessionConfig:
    config = load_config()
    return config.with_overrides(
        initial_direction=parse_direction(args.direction) if args.direction else None,
        resync_on_focus=args.resync_on_focus,
        derive_on_start=False if args.no_derive_on_start else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure("quiet", log_file=args.log_file)
    app = UnescaperApp(build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual launch
    main()
