"""Table refresh controllers."""

from kubedeck.controllers.table.watcher import ErrorListener, TableListener, TableWatcher

__all__ = ["ErrorListener", "TableListener", "TableWatcher"]
