"""Pod parser for cluster controller - turns pod JSON into display values."""

from __future__ import annotations

from typing import Any

from kubedeck.constants.values import STATE_COMPLETED, STATE_RUNNING, STATE_TERMINATING


class PodParser:
    """Parses pod objects returned by ``kubectl get pods -o json``."""

    @staticmethod
    def path(pod: dict[str, Any]) -> str:
        """Return ``namespace/name`` for a pod."""
        metadata = pod.get("metadata", {}) or {}
        return f"{metadata.get('namespace', '')}/{metadata.get('name', '')}"

    @staticmethod
    def container_statuses(pod: dict[str, Any], include_init: bool = False) -> list[dict[str, Any]]:
        status = pod.get("status", {}) or {}
        statuses = list(status.get("containerStatuses") or [])
        if include_init:
            statuses = list(status.get("initContainerStatuses") or []) + statuses
        return [item for item in statuses if isinstance(item, dict)]

    @classmethod
    def ready(cls, pod: dict[str, Any]) -> str:
        """Ready containers over total containers, e.g. ``1/2``."""
        spec_containers = (pod.get("spec", {}) or {}).get("containers") or []
        statuses = cls.container_statuses(pod)
        ready = sum(1 for item in statuses if item.get("ready"))
        return f"{ready}/{len(spec_containers) or len(statuses)}"

    @classmethod
    def restarts(cls, pod: dict[str, Any]) -> int:
        return sum(int(item.get("restartCount", 0) or 0) for item in cls.container_statuses(pod))

    @classmethod
    def status(cls, pod: dict[str, Any]) -> str:
        """Summarize a pod the way ``kubectl get pods`` does.

        Init container failures and container waiting/terminated reasons
        override the phase; a deletion timestamp reports Terminating.
        """
        metadata = pod.get("metadata", {}) or {}
        status = pod.get("status", {}) or {}
        phase = status.get("reason") or status.get("phase") or "Unknown"

        init_statuses = [item for item in status.get("initContainerStatuses") or [] if isinstance(item, dict)]
        for index, item in enumerate(init_statuses):
            state = item.get("state", {}) or {}
            terminated = state.get("terminated")
            waiting = state.get("waiting")
            if terminated and terminated.get("exitCode", 0) == 0:
                continue
            if terminated:
                reason = terminated.get("reason") or f"ExitCode:{terminated.get('exitCode')}"
                return f"Init:{reason}"
            if waiting and waiting.get("reason") and waiting.get("reason") != "PodInitializing":
                return f"Init:{waiting['reason']}"
            return f"Init:{index}/{len(init_statuses)}"

        has_running = False
        for item in reversed(cls.container_statuses(pod)):
            state = item.get("state", {}) or {}
            waiting = state.get("waiting")
            terminated = state.get("terminated")
            if waiting and waiting.get("reason"):
                phase = waiting["reason"]
            elif terminated:
                phase = terminated.get("reason") or (
                    f"Signal:{terminated['signal']}"
                    if terminated.get("signal")
                    else f"ExitCode:{terminated.get('exitCode')}"
                )
            elif state.get("running") and item.get("ready"):
                has_running = True

        if phase == STATE_COMPLETED and has_running:
            phase = STATE_RUNNING
        if metadata.get("deletionTimestamp"):
            return STATE_TERMINATING
        return phase

    @staticmethod
    def pod_ip(pod: dict[str, Any]) -> str:
        return str((pod.get("status", {}) or {}).get("podIP") or "")

    @staticmethod
    def node_name(pod: dict[str, Any]) -> str:
        return str((pod.get("spec", {}) or {}).get("nodeName") or "")
