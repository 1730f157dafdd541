"""Containers of one pod, with the port-forward dialog."""

from __future__ import annotations

import logging
from functools import partial

from kubedeck.constants.values import ALL_NAMESPACES, PORT_PLACEHOLDER
from kubedeck.controllers.cluster.parsers import is_tcp_port
from kubedeck.controllers.kinds.container import ContainerKind
from kubedeck.errors import InvalidStateError, KubeDeckError
from kubedeck.keyboard import CONTAINER_SCREEN_BINDINGS
from kubedeck.models.forward.port_forward import forward_fqn
from kubedeck.models.state.app_state import AppState
from kubedeck.screens.resource import ResourceScreen
from kubedeck.widgets import PortForwardDialog

logger = logging.getLogger(__name__)


def first_tcp_port(ports_cell: str) -> str | None:
    """First TCP entry of a ``name:port/PROTO,...`` cell."""
    for port in ports_cell.split(","):
        if port.strip() and is_tcp_port(port):
            return port.strip()
    return None


class ContainerScreen(ResourceScreen):
    """Containers of ``pod_path``; shift+f opens a tunnel to one of them."""

    BINDINGS = CONTAINER_SCREEN_BINDINGS

    def __init__(self, state: AppState, pod_path: str) -> None:
        super().__init__(ContainerKind(state.cluster, pod_path), state, ALL_NAMESPACES)
        self.pod_path = pod_path

    @property
    def screen_title(self) -> str:
        return f"Containers[{self.pod_path}]"

    def action_port_forward(self) -> None:
        container = self.selected_cell(0)
        if not container:
            return
        if forward_fqn(self.pod_path, container) in self.state.registry:
            self.flash.errf("A PortForward already exist on container %s", self.pod_path)
            return

        container_state = self.selected_cell(ContainerKind.STATE_COLUMN) or ""
        try:
            self.state.registry.check_runnable(container_state, container)
        except InvalidStateError as exc:
            self.flash.err(exc)
            return

        port = first_tcp_port(self.selected_cell(ContainerKind.PORTS_COLUMN) or "")
        if port is None:
            self.flash.warn("No valid TCP port found on this container. User will specify...")
            port = PORT_PLACEHOLDER
        self.app.push_screen(
            PortForwardDialog(port),
            callback=partial(self._on_forward_dialog, container, container_state),
        )

    def _on_forward_dialog(self, container: str, container_state: str, result: tuple[str, str] | None) -> None:
        if result is None:
            self.flash.info("Canceled!!")
            return
        local_port, pod_port = result
        if not (local_port.isdigit() and pod_port.isdigit()):
            self.flash.errf("Invalid port mapping %s:%s", local_port, pod_port)
            return
        try:
            self.state.forwarder.start(
                self.pod_path,
                container,
                local_port,
                pod_port,
                container_state=container_state,
            )
        except KubeDeckError as exc:
            self.flash.err(exc)
            return
        logger.debug("Starting port forward %s %s:%s", self.pod_path, local_port, pod_port)
