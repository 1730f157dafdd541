"""Table widgets."""

from kubedeck.widgets.data.tables.custom_data_table import CustomDataTable, render_cells

__all__ = ["CustomDataTable", "render_cells"]
