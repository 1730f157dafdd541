"""Custom dialog widgets for the TUI application.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-custom-dialog
"""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from kubedeck.controllers.cluster.parsers import strip_port

_DIALOG_CSS = """
{name} {{
    align: center middle;
}}
{name} .dialog-container {{
    width: 60;
    height: auto;
    padding: 1 2;
    border: round $primary;
    background: $surface;
}}
{name} .dialog-title {{
    text-style: bold;
    width: 1fr;
    content-align: center middle;
    margin-bottom: 1;
}}
{name} .dialog-buttons {{
    height: auto;
    align: center middle;
    margin-top: 1;
}}
{name} .dialog-btn {{
    margin: 0 1;
}}
"""


class CustomConfirmDialog(ModalScreen[bool]):
    """Confirmation dialog with OK/Cancel buttons."""

    DEFAULT_CSS = _DIALOG_CSS.format(name="CustomConfirmDialog")
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self,
        message: str,
        title: str = "Confirm",
        on_confirm: Callable[[], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the custom confirmation dialog.

        Args:
            message: Message to display.
            title: Dialog title.
            on_confirm: Callback when confirmed.
            on_cancel: Callback when cancelled.
        """
        super().__init__(classes="widget-custom-dialog")
        self._message = message
        self._title = title
        self._on_confirm = on_confirm
        self._on_cancel = on_cancel

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            if self._title:
                yield Static(self._title, classes="dialog-title")
            yield Static(self._message, classes="dialog-message")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="confirm-btn", variant="primary", classes="dialog-btn confirm")
                yield Button("Cancel", id="cancel-btn", classes="dialog-btn cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "confirm-btn":
            self.dismiss(True)
            if self._on_confirm:
                self._on_confirm()
        else:
            self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(False)
        if self._on_cancel:
            self._on_cancel()


class PortForwardDialog(ModalScreen[tuple[str, str] | None]):
    """Asks for the pod and local ports of a new tunnel.

    Dismisses with ``(local_port, pod_port)`` stripped to bare port numbers,
    or None when cancelled.
    """

    DEFAULT_CSS = _DIALOG_CSS.format(name="PortForwardDialog")
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, port: str, title: str = "<PortForward>") -> None:
        super().__init__(classes="widget-custom-dialog")
        self._port = port
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static(self._title, classes="dialog-title")
            yield Label("Pod Port:")
            yield Input(value=self._port, id="pod-port")
            yield Label("Local Port:")
            yield Input(value=self._port, id="local-port")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="confirm-btn", variant="primary", classes="dialog-btn confirm")
                yield Button("Cancel", id="cancel-btn", classes="dialog-btn cancel")

    def ports(self) -> tuple[str, str]:
        """Current (local, pod) values with names and protocols stripped."""
        pod_port = self.query_one("#pod-port", Input).value
        local_port = self.query_one("#local-port", Input).value
        return strip_port(local_port), strip_port(pod_port)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm-btn":
            self.dismiss(self.ports())
        else:
            self.action_cancel()

    def on_input_submitted(self, _: Input.Submitted) -> None:
        self.dismiss(self.ports())

    def action_cancel(self) -> None:
        self.dismiss(None)


class CommandPromptDialog(ModalScreen[str | None]):
    """``:`` prompt for jumping to a resource by alias (po, svc, pf, be)."""

    DEFAULT_CSS = _DIALOG_CSS.format(name="CommandPromptDialog")
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, placeholder: str = "pods") -> None:
        super().__init__(classes="widget-custom-dialog")
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Input(placeholder=self._placeholder, id="command-input")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value.strip() or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


__all__ = ["CommandPromptDialog", "CustomConfirmDialog", "PortForwardDialog"]
