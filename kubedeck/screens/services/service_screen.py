"""Services screen."""

from __future__ import annotations

from kubedeck.controllers.kinds.service import ServiceKind
from kubedeck.models.state.app_state import AppState
from kubedeck.screens.resource import ResourceScreen


class ServiceScreen(ResourceScreen):
    def __init__(self, state: AppState, namespace: str | None = None) -> None:
        super().__init__(ServiceKind(state.cluster), state, namespace)
