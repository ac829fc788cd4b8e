"""Textual app that replays a command string against a buffer step by step."""

from __future__ import annotations

from dataclasses import dataclass

try:  # pragma: no cover - imported only when the viewer is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vim_replay.adapters.textual.app"
    ) from exc

from vim_replay.buffer import BufferMirror

from .controller import TextualReplayAdapter, TextualUIHooks, render_buffer


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""


class ReplayApp(App[None]):
    """Minimal Textual UI stepping through a parsed command string."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("n", "step", "Step"),
        ("g", "run_all", "Run to end"),
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, text: str, commands: str) -> None:
        super().__init__()
        self._state = UIState()
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        # parses eagerly so a bad command string fails before the UI starts
        self.adapter = TextualReplayAdapter(text, commands, hooks)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static(
                self._state.buffer_text, id="buffer-view", markup=False
            )
            yield self._buffer_widget
        self._status_widget = Static(
            self._state.status_text, id="status-line", markup=False
        )
        yield self._status_widget
        yield Footer()

    def action_step(self) -> None:
        self.adapter.step()

    def action_run_all(self) -> None:
        self.adapter.run_to_end()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = render_buffer(mirror)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self.log(line)


def run_app(text: str, commands: str) -> None:
    ReplayApp(text, commands).run()


__all__ = ["ReplayApp", "render_buffer", "run_app"]
