"""Resource kind capability interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from kubedeck.constants.values import ALL_NAMESPACES
from kubedeck.models.table.row_event import Row

FetchedRows = list[tuple[str, Row]]


class ResourceKind(ABC):
    """One kind of resource shown in a table.

    Subclasses declare their columns and how to list, identify and render
    items; ``fetch`` combines those into (fqn, fields) pairs.
    """

    name: ClassVar[str] = ""
    title: ClassVar[str] = ""
    aliases: ClassVar[tuple[str, ...]] = ()
    header: ClassVar[tuple[str, ...]] = ()
    numeric_columns: ClassVar[frozenset[str]] = frozenset()
    namespaced: ClassVar[bool] = True
    # Kinds listed under a parent resource (containers of a pod) are not
    # reachable from the command prompt.
    requires_parent: ClassVar[bool] = False

    @property
    def name_index(self) -> int:
        """Index of the NAME column that sort offsets are relative to."""
        return self.header.index("NAME") if "NAME" in self.header else 0

    @abstractmethod
    async def list_items(self, namespace: str) -> list[Any]:
        """Return raw items for ``namespace`` (``"*"`` for all)."""
        ...

    @abstractmethod
    def fqn(self, item: Any) -> str:
        """Return the unique row identity of an item."""
        ...

    @abstractmethod
    def render(self, item: Any) -> Row:
        """Return the display fields of an item, one per header column."""
        ...

    async def fetch(self, namespace: str = ALL_NAMESPACES) -> FetchedRows:
        items = await self.list_items(namespace)
        return [(self.fqn(item), tuple(self.render(item))) for item in items]


__all__ = ["FetchedRows", "ResourceKind"]
