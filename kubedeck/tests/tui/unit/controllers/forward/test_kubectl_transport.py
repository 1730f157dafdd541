"""Tests for the kubectl port-forward transport."""

from __future__ import annotations

import asyncio
import os
import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from kubedeck.controllers.forward.transport import KubectlPortForwardTransport
from kubedeck.errors import TransportFailureError
from kubedeck.utils.cancellation import CancelScope


class TestKubectlPortForwardTransport:
    """Tests for KubectlPortForwardTransport."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_command(self) -> None:
        """The command targets the pod in its namespace."""
        transport = KubectlPortForwardTransport(context="dev")
        assert transport.command("ns/pod", ["8080:80"]) == [
            "kubectl", "--context", "dev", "port-forward", "pod/pod", "8080:80", "--namespace", "ns",
        ]

    @pytest.mark.unit
    @pytest.mark.fast
    def test_command_without_context(self) -> None:
        transport = KubectlPortForwardTransport()
        assert transport.command("pod", ["1:2"]) == ["kubectl", "port-forward", "pod/pod", "1:2"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_missing_kubectl_is_transport_failure(self) -> None:
        """A kubectl binary that cannot start raises TransportFailureError."""
        transport = KubectlPortForwardTransport()
        with patch(
            "kubedeck.controllers.forward.transport.asyncio.create_subprocess_exec",
            side_effect=FileNotFoundError("kubectl"),
        ):
            with pytest.raises(TransportFailureError, match="Unable to start"):
                await asyncio.wait_for(
                    transport.forward("ns/pod", "app", ["8080:80"], lambda: None, CancelScope()),
                    timeout=1.0,
                )


# =============================================================================
# Real process lifecycle against a scripted kubectl
# =============================================================================

REFUSED_LINE = (
    "E1018 12:00:00.000000 1 portforward.go:413] an error occurred forwarding 8080 -> 80: "
    "error forwarding port 80 to pod web, uid : exit status 1: connection refused"
)

NOISY_KUBECTL = f"""#!/bin/sh
i=0
while [ $i -lt 2000 ]; do
  echo "{REFUSED_LINE}" >&2
  i=$((i + 1))
done
echo "Forwarding from 127.0.0.1:8080 -> 80"
exec sleep 30
"""

FAILING_KUBECTL = """#!/bin/sh
echo "error: unable to forward port because pod is not running. Current status=Pending" >&2
exit 1
"""


def _install_kubectl(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, script: str) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    kubectl = bin_dir / "kubectl"
    kubectl.write_text(script, encoding="utf-8")
    kubectl.chmod(kubectl.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")


@pytest.mark.skipif(sys.platform == "win32", reason="shell script stands in for kubectl")
class TestKubectlProcessLifecycle:
    """Tests driving KubectlPortForwardTransport against a real child process."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_stderr_flood_does_not_block_ready_or_stop(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Hundreds of KB on stderr still let the tunnel activate and stop."""
        _install_kubectl(tmp_path, monkeypatch, NOISY_KUBECTL)
        transport = KubectlPortForwardTransport(stop_timeout=2.0)
        scope = CancelScope("tunnel")
        ready = asyncio.Event()

        task = asyncio.create_task(transport.forward("ns/web", "app", ["8080:80"], ready.set, scope))
        await asyncio.wait_for(ready.wait(), timeout=10.0)
        assert not task.done()

        scope.cancel()
        assert await asyncio.wait_for(task, timeout=10.0) is None

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_exit_reports_last_stderr_line(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """kubectl exiting on its own raises with its error message."""
        _install_kubectl(tmp_path, monkeypatch, FAILING_KUBECTL)
        transport = KubectlPortForwardTransport(stop_timeout=2.0)
        ready = asyncio.Event()

        with pytest.raises(TransportFailureError, match="pod is not running"):
            await asyncio.wait_for(
                transport.forward("ns/web", "app", ["8080:80"], ready.set, CancelScope()),
                timeout=10.0,
            )
        assert not ready.is_set()
