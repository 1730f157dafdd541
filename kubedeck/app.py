"""Main application class for KubeDeck TUI."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from contextlib import suppress
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import Footer, Header

from kubedeck.constants import APP_TITLE
from kubedeck.controllers.kinds import lookup_kind
from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.models.state.app_state import AppState
from kubedeck.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)
from kubedeck.screens import BenchmarkScreen, ForwardScreen, PodScreen, ResourceScreen, ServiceScreen
from kubedeck.utils.dispatcher import TextualDispatcher
from kubedeck.utils.flash import FlashMessage
from kubedeck.widgets import CommandPromptDialog, HelpDialog, StatusBar

logger = logging.getLogger(__name__)

ScreenFactory = Callable[[AppState], ResourceScreen]

# Kinds reachable from the command prompt. Containers need a selected pod.
SCREEN_FACTORIES: dict[str, ScreenFactory] = {
    "pods": PodScreen,
    "services": ServiceScreen,
    "portforwards": ForwardScreen,
    "benchmarks": BenchmarkScreen,
}


def _binding_rows(bindings: Iterable[Any]) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = []
    for binding in bindings:
        if isinstance(binding, Binding):
            key, description = binding.key, binding.description
        else:
            key, description = binding[0], binding[2] if len(binding) > 2 else ""
        if description:
            rows.append((key, description))
    return rows


class KubeDeckApp(App[None]):
    """Main TUI application for KubeDeck."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings
    state: AppState

    def __init__(
        self,
        settings: AppSettings | None = None,
        command: str = "pods",
        state: AppState | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.command = command
        self.settings = settings or self._load_settings()
        self.dispatcher = TextualDispatcher(self)
        self.state = state or AppState(self.settings, self.dispatcher)

    @staticmethod
    def _load_settings() -> AppSettings:
        """Load application settings from persistent storage."""
        try:
            return ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Using default settings: %s", exc)
            return AppSettings()

    def compose(self) -> ComposeResult:
        yield Header()
        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.dispatcher.bind_loop()
        self.state.flash.add_listener(self._show_flash)
        self.state.load_bench_config()
        self.navigate(self.command)
        self.run_worker(self._check_cluster(), name="cluster-check", group="cluster")

    async def _check_cluster(self) -> None:
        """Flash once when the cluster API does not answer."""
        if not await self.state.cluster.check_connection():
            self.state.flash.errf("Cluster %s is unreachable", self.state.cluster.context or "(default)")

    def _show_flash(self, message: FlashMessage) -> None:
        """Paint a status line on the active screen's status bar."""
        with suppress(NoMatches):
            self.screen.query_one("#status-bar", StatusBar).show_message(message)

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, alias: str) -> bool:
        """Replace the root resource screen with the one named by ``alias``.

        Returns:
            False when the alias is unknown or needs a parent selection.
        """
        kind = lookup_kind(alias)
        if kind is None:
            self.state.flash.errf("Unknown command %r", alias)
            return False
        factory = SCREEN_FACTORIES.get(kind.name)
        if factory is None:
            self.state.flash.err(f"{kind.title} must be opened from a selected pod")
            return False

        screen = factory(self.state)
        while len(self.screen_stack) > 2:
            self.pop_screen()
        if len(self.screen_stack) == 2:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)
        logger.debug("Navigated to %s", kind.name)
        return True

    def action_command_prompt(self) -> None:
        """Open the ``:`` prompt."""
        self.push_screen(CommandPromptDialog(self.command), callback=self._on_command)

    def _on_command(self, command: str | None) -> None:
        if command:
            self.navigate(command)

    def action_show_help(self) -> None:
        """Show key bindings of the active screen."""
        bindings: list[Any] = []
        for cls in reversed(type(self.screen).__mro__):
            bindings.extend(cls.__dict__.get("BINDINGS", ()))
        bindings.extend(self.BINDINGS)
        self.push_screen(HelpDialog(_binding_rows(bindings)))

    async def action_quit(self) -> None:
        """Stop tunnels and benchmarks, then quit."""
        await self.state.shutdown()
        self.exit()

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        try:
            ConfigManager.save(self.settings)
        except ConfigSaveError as exc:
            logger.warning("Failed to save settings: %s", exc)


__all__ = [
    "SCREEN_FACTORIES",
    "KubeDeckApp",
]
