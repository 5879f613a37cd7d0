"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import ScrollableContainer
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use code_editor.adapters.textual.app"
    ) from exc

from code_editor.buffer import EditorState, initial_state
from code_editor.dispatch import EditorSession
from code_editor.highlight import TokenKind
from code_editor.runtime.config import CellGeometry
from code_editor.runtime.telemetry import LEVELS, TelemetrySettings, configure
from code_editor.view import LineView, demo_state

from .controller import TextualEditorAdapter, TextualUIHooks

KIND_STYLES = {
    TokenKind.NORMAL: "",
    TokenKind.KEYWORD: "green",
    TokenKind.IDENTIFIER: "blue",
    TokenKind.NUMBER: "dark_orange",
    TokenKind.STRING: "red",
}
ERROR_STYLE = "underline red"
CURSOR_STYLE = "reverse"


def gutter_width(line_count: int) -> int:
    """Columns taken by the right-aligned line number plus one space."""

    return len(str(max(line_count, 1))) + 1


def render_line(view: LineView, gutter: int) -> Text:
    text = Text(no_wrap=True, overflow="ignore")
    text.append(f"{view.line_number:>{gutter - 1}} ", style="dim")
    for token in view.tokens:
        text.append(token.text, style=KIND_STYLES[token.kind] or None)
    text.append(" ")  # one-past-end slot for the cursor and trailing errors

    column = gutter
    for segment in view.error_segments:
        if segment.is_error:
            text.stylize(ERROR_STYLE, column, column + segment.length)
        column += segment.length

    if view.cursor_column is not None:
        start = gutter + view.cursor_column
        text.stylize(CURSOR_STYLE, start, start + 1)
    return text


def render_lines(views: Sequence[LineView], line_count: int) -> Text:
    gutter = gutter_width(line_count)
    return Text("\n").join(render_line(view, gutter) for view in views)


class EditorView(Static):
    """Static body that reports clicks back to the app."""

    DEFAULT_CSS = """
    EditorView {
        width: auto;
        height: auto;
    }
    """

    def on_click(self, event: events.Click) -> None:
        app = self.app
        if isinstance(app, EditorApp):
            app.click_at(event.x, event.y)
            event.stop()


class EditorApp(App[None]):
    """Minimal Textual UI embedding the editor core."""

    CSS = """
    #editor-scroll {
        height: 1fr;
        border: round $accent;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, state: Optional[EditorState] = None) -> None:
        super().__init__()
        self._initial_state = state or initial_state()
        self.session: EditorSession | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._editor_widget: EditorView | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with ScrollableContainer(id="editor-scroll"):
            self._editor_widget = EditorView("", id="editor-view")
            yield self._editor_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.session = EditorSession(
            self._initial_state, geometry=self._geometry(self._initial_state)
        )
        hooks = TextualUIHooks(
            update_lines=self._update_lines,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def click_at(self, x: int, y: int) -> None:
        # Widget-relative coordinates already include the scroll position.
        if self.adapter and self.session:
            self.session.geometry = self._geometry(self.session.state)
            self.adapter.handle_click(float(x), float(y))

    @staticmethod
    def _geometry(state: EditorState) -> CellGeometry:
        gutter = gutter_width(state.line_count)
        return CellGeometry(
            char_width=1.0,
            line_height=1.0,
            left_margin=float(gutter),
            left_gutter=1.0,
        )

    def _update_lines(self, views: Sequence[LineView]) -> None:
        if self._editor_widget and self.session:
            self._editor_widget.update(
                render_lines(views, self.session.state.line_count)
            )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the code editor Textual demo.")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Start with the highlighting sample instead of an empty buffer",
    )
    parser.add_argument(
        "--demo-lines",
        type=int,
        default=_env_int("CODE_EDITOR_DEMO_LINES", 200),
        help="Number of lines in the sample document (default: 200)",
    )
    parser.add_argument(
        "--log-level",
        choices=LEVELS,
        default=os.environ.get("CODE_EDITOR_LOG_LEVEL", "info").lower(),
        help="Minimum telemetry level (default: info)",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("CODE_EDITOR_LOG_FILE", "code_editor.log"),
        help="Telemetry log file (default: code_editor.log)",
    )
    return parser.parse_args(argv)


def telemetry_settings(args: argparse.Namespace) -> TelemetrySettings:
    # Console output would draw over the Textual screen.
    return TelemetrySettings(level=args.log_level, console=False, log_file=args.log_file)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    configure(telemetry_settings(args))
    state = demo_state(args.demo_lines) if args.demo else initial_state()
    EditorApp(state).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
