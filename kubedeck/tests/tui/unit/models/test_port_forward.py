"""Tests for the port-forward session model."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kubedeck.constants.enums import ForwardState
from kubedeck.models.forward.port_forward import PortForwardSession, forward_fqn, split_path


class TestForwardHelpers:
    """Tests for FQN helpers."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_forward_fqn(self) -> None:
        """Tunnels are keyed by pod path and container."""
        assert forward_fqn("ns/pod", "app") == "ns/pod|app"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_split_path(self) -> None:
        """Paths split into namespace and name; bare names have no namespace."""
        assert split_path("ns/pod") == ("ns", "pod")
        assert split_path("pod") == ("", "pod")


class TestPortForwardSession:
    """Tests for PortForwardSession."""

    @pytest.fixture
    def session(self) -> PortForwardSession:
        return PortForwardSession(
            fqn="ns/pod|app", path="ns/pod", container="app", local_port="8080", pod_port="80"
        )

    @pytest.mark.unit
    @pytest.mark.fast
    def test_ports_and_address(self, session: PortForwardSession) -> None:
        """Port specs are local:pod."""
        assert session.ports() == ["8080:80"]
        assert session.address() == "localhost:8080"
        assert session.namespace == "ns"
        assert session.name == "pod"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_lifecycle_transitions(self, session: PortForwardSession) -> None:
        """Created -> Activating -> Active -> Stopped, nothing after Stopped."""
        assert session.state is ForwardState.CREATED
        assert session.transition(ForwardState.ACTIVATING)
        assert session.transition(ForwardState.ACTIVE)
        assert session.active is True
        assert session.transition(ForwardState.STOPPED)
        assert session.active is False
        assert not session.transition(ForwardState.ACTIVE)
        assert session.state is ForwardState.STOPPED

    @pytest.mark.unit
    @pytest.mark.fast
    def test_cannot_skip_to_active(self, session: PortForwardSession) -> None:
        """Created cannot jump straight to Active."""
        assert not session.transition(ForwardState.ACTIVE)
        assert session.state is ForwardState.CREATED

    @pytest.mark.unit
    @pytest.mark.fast
    def test_age(self, session: PortForwardSession) -> None:
        """Age is measured from started_at."""
        now = session.started_at + timedelta(seconds=42)
        assert session.age(now) == pytest.approx(42.0)
        assert session.age(datetime(2000, 1, 1, tzinfo=timezone.utc)) == 0.0
