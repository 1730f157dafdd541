"""Read-only viewers for benchmark reports and key help."""

from __future__ import annotations

from collections.abc import Iterable

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import RichLog, Static

_VIEWER_CSS = """
{name} {{
    align: center middle;
}}
{name} .viewer-container {{
    width: 90%;
    height: 80%;
    padding: 0 1;
    border: round $primary;
    background: $surface;
}}
{name} .viewer-title {{
    text-style: bold;
    width: 1fr;
    content-align: center middle;
}}
{name} RichLog {{
    height: 1fr;
}}
"""


class ReportViewerDialog(ModalScreen[None]):
    """Shows the text of one saved benchmark report."""

    DEFAULT_CSS = _VIEWER_CSS.format(name="ReportViewerDialog")
    BINDINGS = [("escape", "close", "Close"), ("q", "close", "Close")]

    def __init__(self, title: str, text: str) -> None:
        super().__init__(classes="widget-custom-dialog")
        self._title = title
        self._text = text

    def compose(self) -> ComposeResult:
        with Vertical(classes="viewer-container"):
            yield Static(self._title, classes="viewer-title", markup=False)
            yield RichLog(id="report-log", highlight=False, markup=False, wrap=False)

    def on_mount(self) -> None:
        log = self.query_one("#report-log", RichLog)
        for line in self._text.splitlines():
            log.write(line)

    def action_close(self) -> None:
        self.dismiss(None)


class HelpDialog(ReportViewerDialog):
    """Key bindings of the screen that opened it."""

    DEFAULT_CSS = _VIEWER_CSS.format(name="HelpDialog")

    def __init__(self, bindings: Iterable[tuple[str, str]]) -> None:
        rows = [f"{key:<12} {description}" for key, description in bindings]
        super().__init__("<Help>", "\n".join(rows))


__all__ = ["HelpDialog", "ReportViewerDialog"]
