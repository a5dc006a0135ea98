"""Executable Textual demo hosting a ``ViTextArea``."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from vi_input.buffer.handle import CursorShape
from vi_input.modes.state import Mode
from vi_input.runtime import telemetry
from vi_input.runtime.config import ViConfig

from .text_area import ViTextArea


class ViInputApp(App[None]):
    """Single text area with a status line showing the mode indicator."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor {
        height: 1fr;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", config: Optional[ViConfig] = None) -> None:
        super().__init__()
        self._text = text
        self._config = config or ViConfig.from_env()

    def compose(self) -> ComposeResult:
        yield Header()
        yield ViTextArea(self._text, config=self._config, id="editor")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one(ViTextArea)
        editor.focus()
        self._update_status(editor.dispatcher.indicator())

    def on_vi_text_area_mode_changed(self, message: ViTextArea.ModeChanged) -> None:
        self._update_status(message.indicator)

    def _update_status(self, indicator: str) -> None:
        label = f"-- {indicator} --" if indicator else ""
        self.query_one("#status-line", Static).update(label)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the modal text input demo.")
    parser.add_argument("path", nargs="?", help="Optional file to load")
    parser.add_argument(
        "--vi",
        dest="enabled",
        action="store_true",
        default=None,
        help="Enable modal editing (default: VI_INPUT_ENABLED)",
    )
    parser.add_argument(
        "--no-vi",
        dest="enabled",
        action="store_false",
        help="Start with modal editing disabled",
    )
    parser.add_argument(
        "--start-mode",
        choices=[mode.value for mode in Mode],
        help="Mode entered when modal editing is enabled",
    )
    parser.add_argument(
        "--cursor-shape",
        choices=[shape.value for shape in CursorShape],
        help="Insert-mode cursor shape",
    )
    parser.add_argument(
        "--log-preset",
        choices=["development", "production"],
        help="Telemetry preset (default: environment-driven)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, base: Optional[ViConfig] = None) -> ViConfig:
    config = base or ViConfig.from_env()
    if args.enabled is not None:
        config = replace(config, enabled=args.enabled)
    if args.start_mode:
        config = replace(config, start_mode=Mode(args.start_mode))
    if args.cursor_shape:
        config = replace(config, cursor_shape=CursorShape(args.cursor_shape))
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    app = ViInputApp(text=text, config=build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
