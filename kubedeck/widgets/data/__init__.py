"""Data display widgets."""

from kubedeck.widgets.data.tables import CustomDataTable

__all__ = ["CustomDataTable"]
