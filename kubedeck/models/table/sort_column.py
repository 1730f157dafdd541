"""Sort column descriptor."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SortColumn:
    """A sortable column.

    Attributes:
        index: Absolute column index in the table header.
        column_count: Number of columns in the table.
        ascending: Comparison direction.
    """

    index: int = 0
    column_count: int = 0
    ascending: bool = True

    @classmethod
    def relative(
        cls,
        name_index: int,
        offset: int,
        column_count: int,
        ascending: bool = True,
    ) -> SortColumn:
        """Build a sort column expressed relative to the name column.

        Namespace/name columns precede the resource specific ones, so sort
        commands are written as ``name_index + offset``.
        """
        return cls(name_index + offset, column_count, ascending)

    def toggled(self) -> SortColumn:
        return replace(self, ascending=not self.ascending)

    def is_valid(self) -> bool:
        return 0 <= self.index < self.column_count


__all__ = ["SortColumn"]
