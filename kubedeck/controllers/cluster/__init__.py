"""Cluster controller package."""

from kubedeck.controllers.cluster.controller import ClusterController, PodMetrics

__all__ = ["ClusterController", "PodMetrics"]
