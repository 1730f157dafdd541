"""Widgets for KubeDeck."""

from kubedeck.widgets.data import CustomDataTable
from kubedeck.widgets.feedback import (
    CommandPromptDialog,
    CustomConfirmDialog,
    HelpDialog,
    PortForwardDialog,
    ReportViewerDialog,
)
from kubedeck.widgets.structure import StatusBar

__all__ = [
    "CommandPromptDialog",
    "CustomConfirmDialog",
    "CustomDataTable",
    "HelpDialog",
    "PortForwardDialog",
    "ReportViewerDialog",
    "StatusBar",
]
