"""Port-forwards screen: tunnel list plus benchmark controls."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from textual.css.query import NoMatches
from textual.timer import Timer

from kubedeck.constants.values import ALL_NAMESPACES
from kubedeck.controllers.benchmark.config_watcher import ConfigWatcher
from kubedeck.controllers.kinds.forward import ForwardKind
from kubedeck.errors import BenchmarkAlreadyRunningError, WatchSetupError
from kubedeck.keyboard import FORWARD_SCREEN_BINDINGS
from kubedeck.models.benchmark.bench_session import BenchmarkSession
from kubedeck.models.state.app_state import AppState
from kubedeck.screens.resource import ResourceScreen
from kubedeck.utils.cancellation import CancelScope
from kubedeck.widgets import CustomConfirmDialog, StatusBar

logger = logging.getLogger(__name__)


class ForwardScreen(ResourceScreen):
    """Active tunnels; ctrl+b benchmarks the selected one."""

    BINDINGS = FORWARD_SCREEN_BINDINGS

    def __init__(self, state: AppState, namespace: str | None = None) -> None:
        super().__init__(ForwardKind(state.registry, state.orchestrator), state, namespace)
        self.config_watcher = ConfigWatcher(
            state.home_dir(),
            state.current_cluster,
            self.on_bench_config_changed,
            state.dispatcher,
        )
        self._hold_timer: Timer | None = None
        self._watch_scope: CancelScope | None = None

    @property
    def screen_title(self) -> str:
        if self.state.orchestrator.is_running():
            return f"{self.kind.title}[benchmarking]"
        return self.kind.title

    def on_mount(self) -> None:
        super().on_mount()
        self.state.registry.add_listener(self.on_registry_changed)
        self.state.orchestrator.add_listener(self.on_bench_done)
        self._watch_scope = self.state.scope.child("bench-config")
        try:
            self.config_watcher.start(self._watch_scope)
        except WatchSetupError as exc:
            logger.warning("Benchmark config hot reload disabled: %s", exc)
            self.flash.warn(str(exc))

    def on_unmount(self) -> None:
        super().on_unmount()
        self.state.registry.remove_listener(self.on_registry_changed)
        self.state.orchestrator.remove_listener(self.on_bench_done)
        if self._watch_scope is not None:
            self._watch_scope.cancel()
        if self._hold_timer is not None:
            self._hold_timer.stop()

    # =========================================================================
    # Listeners
    # =========================================================================

    def on_registry_changed(self) -> None:
        self.action_refresh()

    def on_bench_config_changed(self, path: Path) -> None:
        if not self.is_mounted or self._watch_scope is None or self._watch_scope.cancelled:
            logger.debug("Dropping benchmark config change for unmounted screen: %s", path)
            return
        if self.state.orchestrator.reload(path):
            self.flash.infof("Benchmark config reloaded from %s", path.name)
            self.action_refresh()

    def on_bench_done(self, session: BenchmarkSession) -> None:
        """Keep the outcome on screen for a moment, then clear it."""
        logger.debug("Benchmark %s ended as %s", session.target_name, session.state.value)
        self.update_title()
        if self.state.orchestrator.session is not None:
            return
        if self._hold_timer is not None:
            self._hold_timer.stop()
        self._hold_timer = self.set_timer(
            self.state.settings.bench_status_hold_seconds,
            self._clear_status,
        )

    def _clear_status(self) -> None:
        self._hold_timer = None
        try:
            self.query_one("#status-bar", StatusBar).clear_message()
        except NoMatches:
            return
        self.update_title()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_bench_run(self) -> None:
        fqn = self.selected_fqn()
        if fqn is None:
            return
        session = self.state.registry.get(fqn)
        if session is None or not session.active:
            self.flash.warn("Benchmarks can only run on an active PortForward")
            return
        config = self.state.orchestrator.resolve_config(session.path, session.container)
        try:
            self.state.orchestrator.run(fqn, f"http://localhost:{session.local_port}", config)
        except BenchmarkAlreadyRunningError as exc:
            self.flash.err(exc)
            return
        self.flash.infof("Benchmark starting on %s...", config.url_for(session.local_port))
        self.update_title()

    def action_bench_stop(self) -> None:
        if not self.state.orchestrator.cancel():
            self.flash.warn("No benchmark is running")

    def action_delete_forward(self) -> None:
        fqn = self.selected_fqn()
        if fqn is None:
            return
        self.app.push_screen(
            CustomConfirmDialog(f"Delete PortForward {fqn}?", title="<Delete>"),
            callback=partial(self._on_delete_confirmed, fqn),
        )

    def _on_delete_confirmed(self, fqn: str, confirmed: bool | None) -> None:
        if not confirmed:
            return
        if self.state.forwarder.stop(fqn):
            self.flash.infof("PortForward %s deleted!", fqn)

    def action_show_benchmarks(self) -> None:
        from kubedeck.screens.benchmarks import BenchmarkScreen

        fqn = self.selected_fqn()
        namespace = fqn.split("/", 1)[0] if fqn else ALL_NAMESPACES
        self.app.push_screen(BenchmarkScreen(self.state, namespace))

    def select_row(self, fqn: str) -> None:
        self.action_show_benchmarks()
