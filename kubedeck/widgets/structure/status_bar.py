"""Status line showing the latest flash message."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static

from kubedeck.constants.enums import FlashLevel
from kubedeck.utils.flash import FlashMessage

_LEVEL_CLASSES: dict[FlashLevel, str] = {
    FlashLevel.INFO: "flash-info",
    FlashLevel.WARN: "flash-warn",
    FlashLevel.ERROR: "flash-error",
}


class StatusBar(Static):
    """One-line operator status."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        padding: 0 1;
    }
    StatusBar.flash-info { color: $text; }
    StatusBar.flash-warn { color: $warning; }
    StatusBar.flash-error { color: $error; text-style: bold; }
    """

    def show_message(self, message: FlashMessage) -> None:
        for css_class in _LEVEL_CLASSES.values():
            self.remove_class(css_class)
        self.add_class(_LEVEL_CLASSES[message.level])
        self.update(escape(message.text))

    def clear_message(self) -> None:
        for css_class in _LEVEL_CLASSES.values():
            self.remove_class(css_class)
        self.update("")


__all__ = ["StatusBar"]
