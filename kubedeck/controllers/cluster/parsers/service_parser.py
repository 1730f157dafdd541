"""Service parser - display values for services."""

from __future__ import annotations

from typing import Any


class ServiceParser:
    """Parses service objects returned by ``kubectl get services -o json``."""

    @staticmethod
    def service_type(service: dict[str, Any]) -> str:
        return str((service.get("spec", {}) or {}).get("type") or "ClusterIP")

    @staticmethod
    def cluster_ip(service: dict[str, Any]) -> str:
        return str((service.get("spec", {}) or {}).get("clusterIP") or "")

    @staticmethod
    def external_ip(service: dict[str, Any]) -> str:
        spec = service.get("spec", {}) or {}
        ingress = ((service.get("status", {}) or {}).get("loadBalancer", {}) or {}).get("ingress") or []
        addresses = [item.get("ip") or item.get("hostname") for item in ingress if isinstance(item, dict)]
        addresses.extend(spec.get("externalIPs") or [])
        if spec.get("type") == "ExternalName" and spec.get("externalName"):
            addresses.append(spec["externalName"])
        addresses = [str(item) for item in addresses if item]
        if addresses:
            return ",".join(addresses)
        return "<pending>" if spec.get("type") == "LoadBalancer" else ""

    @staticmethod
    def ports(service: dict[str, Any]) -> str:
        rendered: list[str] = []
        for port in (service.get("spec", {}) or {}).get("ports") or []:
            if not isinstance(port, dict):
                continue
            text = str(port.get("port", ""))
            if port.get("nodePort"):
                text += f":{port['nodePort']}"
            rendered.append(f"{text}/{port.get('protocol') or 'TCP'}")
        return ",".join(rendered)
