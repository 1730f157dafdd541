"""Feedback widgets (dialogs)."""

from kubedeck.widgets.feedback.custom_dialog import (
    CommandPromptDialog,
    CustomConfirmDialog,
    PortForwardDialog,
)
from kubedeck.widgets.feedback.report_viewer import HelpDialog, ReportViewerDialog

__all__ = [
    "CommandPromptDialog",
    "CustomConfirmDialog",
    "HelpDialog",
    "PortForwardDialog",
    "ReportViewerDialog",
]
