"""Pods screen."""

from __future__ import annotations

from kubedeck.controllers.kinds.pod import PodKind
from kubedeck.keyboard import POD_SCREEN_BINDINGS
from kubedeck.models.state.app_state import AppState
from kubedeck.screens.resource import ResourceScreen


class PodScreen(ResourceScreen):
    """Pods of the current namespace; enter drills into containers."""

    BINDINGS = POD_SCREEN_BINDINGS

    def __init__(self, state: AppState, namespace: str | None = None) -> None:
        super().__init__(PodKind(state.cluster), state, namespace)

    def select_row(self, fqn: str) -> None:
        event = self.watcher.peek().get(fqn)
        if event is None or event.is_deleted():
            return
        from kubedeck.screens.containers import ContainerScreen

        self.app.push_screen(ContainerScreen(self.state, fqn))

    def action_show_containers(self) -> None:
        fqn = self.selected_fqn()
        if fqn is not None:
            self.select_row(fqn)
