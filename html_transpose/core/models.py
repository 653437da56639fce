"""
Grid data model shared by the builder, transposer and renderer.

A grid slot is ``None`` when nothing was written there, ``""`` when it is
covered by another cell's span, or the cell's trimmed text at its anchor.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

Position = Tuple[int, int]
Grid = List[List[Optional[str]]]


@dataclass
class SpanningCell:
    """A cell with rowspan > 1 or colspan > 1, keyed by its anchor."""

    rowspan: int
    colspan: int
    content: str
    # Everything except rowspan/colspan, in source order
    attributes: Dict[str, str] = field(default_factory=dict)

    def transposed(self) -> "SpanningCell":
        """Return a copy with height and width exchanged."""
        return SpanningCell(
            rowspan=self.colspan,
            colspan=self.rowspan,
            content=self.content,
            attributes=dict(self.attributes),
        )


@dataclass
class TableGrid:
    """Dense grid of a table plus its span and attribute side tables.

    Attributes:
        grid: Row-major cell slots.
        spanning_cells: Spanning-cell records keyed by anchor position.
        cell_attributes: Non-span attributes keyed by cell position. Only
            cells with at least one such attribute appear.
        occupied: Footprint positions other than the anchor.
        table_attributes: Attributes of the <table> element itself.
    """

    grid: Grid = field(default_factory=list)
    spanning_cells: Dict[Position, SpanningCell] = field(default_factory=dict)
    cell_attributes: Dict[Position, Dict[str, str]] = field(default_factory=dict)
    occupied: Set[Position] = field(default_factory=set)
    table_attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return len(self.grid)

    @property
    def column_count(self) -> int:
        # Row 0 is widened with every growth, so it is never shorter than another row
        return len(self.grid[0]) if self.grid else 0

    def cell_at(self, row: int, col: int) -> Optional[str]:
        """Return the slot at (row, col), treating reads past a row end as no cell."""
        if row >= len(self.grid):
            return None
        cells = self.grid[row]
        if col >= len(cells):
            return None
        return cells[col]

    def is_ragged(self) -> bool:
        width = self.column_count
        return any(len(cells) != width for cells in self.grid)


def ensure_grid_size(grid: Grid, rows: int, cols: int) -> None:
    """Grow ``grid`` so rows ``0..rows-1`` exist, each at least ``cols`` wide.

    New rows and columns are padded with ``None``. Rows at index ``rows`` and
    beyond are left untouched.
    """
    while len(grid) < rows:
        grid.append([])
    for r in range(rows):
        missing = cols - len(grid[r])
        if missing > 0:
            grid[r].extend([None] * missing)
