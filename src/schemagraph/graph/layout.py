"""Node placement.

Layouts only assign coordinates; they never reorder nodes. The grid layout
is the default and depends on nothing but each table's input position.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from schemagraph.core.settings import DiagramSettings
from schemagraph.core.types import LayoutAlgorithm, Position, RelationshipCandidate, Table


def grid_position(
    index: int, *, columns: int = 3, column_spacing: int = 300, row_spacing: int = 400
) -> Position:
    """Return the grid cell for the node at ``index`` (zero-based).

    With the defaults: 0 -> (0, 0), 1 -> (300, 0), 2 -> (600, 0), 3 -> (0, 400).
    """
    row, col = divmod(index, columns)
    return Position(x=col * column_spacing, y=row * row_spacing)


class Layout(ABC):
    """Interface for layout algorithms."""

    def __init__(self, columns: int = 3, column_spacing: int = 300, row_spacing: int = 400) -> None:
        if columns < 1:
            raise ValueError(f"columns must be >= 1, got {columns}")
        self.columns = columns
        self.column_spacing = column_spacing
        self.row_spacing = row_spacing

    @abstractmethod
    def positions(
        self, tables: Sequence[Table], relationships: Sequence[RelationshipCandidate]
    ) -> list[Position]:
        """Return one position per table, in table order.

        Args:
            tables: Tables in input order.
            relationships: Inferred relationships between those tables.

        Returns:
            Positions aligned with ``tables``.
        """
        ...


class GridLayout(Layout):
    """Fixed grid filled row by row, ignoring relationships and table size."""

    def positions(
        self, tables: Sequence[Table], relationships: Sequence[RelationshipCandidate]
    ) -> list[Position]:
        return [
            grid_position(
                i,
                columns=self.columns,
                column_spacing=self.column_spacing,
                row_spacing=self.row_spacing,
            )
            for i in range(len(tables))
        ]


def relationship_levels(
    tables: Sequence[Table], relationships: Sequence[RelationshipCandidate]
) -> dict[str, int]:
    """Return the depth of each table in the referencing hierarchy.

    Tables that reference nothing sit at level 0; a referencing table sits
    one level past its deepest referenced table. Self-references are
    ignored and tables caught in a reference cycle fall back to level 0.
    """
    names = [t.name for t in tables]
    parents_by_child: dict[str, set[str]] = {name: set() for name in names}
    for rel in relationships:
        if rel.is_self_reference or rel.source_table not in parents_by_child:
            continue
        parents_by_child[rel.source_table].add(rel.target_table)

    levels = {name: 0 for name in names if not parents_by_child[name]}

    progress = True
    while progress:
        progress = False
        for name in names:
            if name in levels:
                continue
            parents = parents_by_child[name]
            if all(parent in levels for parent in parents):
                levels[name] = max(levels[parent] for parent in parents) + 1
                progress = True

    for name in names:
        levels.setdefault(name, 0)
    return levels


class LayeredLayout(Layout):
    """Referenced tables on the left, referencing tables to their right.

    Each level is a column; within a level tables keep their input order,
    stacked ``row_spacing`` apart.
    """

    def positions(
        self, tables: Sequence[Table], relationships: Sequence[RelationshipCandidate]
    ) -> list[Position]:
        levels = relationship_levels(tables, relationships)
        filled: dict[int, int] = {}
        out: list[Position] = []
        for table in tables:
            level = levels[table.name]
            slot = filled.get(level, 0)
            filled[level] = slot + 1
            out.append(Position(x=level * self.column_spacing, y=slot * self.row_spacing))
        return out


_LAYOUTS: dict[LayoutAlgorithm, type[Layout]] = {
    LayoutAlgorithm.GRID: GridLayout,
    LayoutAlgorithm.LAYERED: LayeredLayout,
}


def get_layout(settings: DiagramSettings) -> Layout:
    """Create the layout selected by ``settings``."""
    layout_cls = _LAYOUTS[LayoutAlgorithm(settings.layout)]
    return layout_cls(
        columns=settings.grid_columns,
        column_spacing=settings.column_spacing,
        row_spacing=settings.row_spacing,
    )
