"""
Grid transposition.

Swaps rows and columns of a TableGrid and re-keys its side tables, exchanging
rowspan and colspan on every spanning cell. The input is never mutated.
"""

import logging

from .models import TableGrid

logger = logging.getLogger(__name__)


def transpose_grid(table: TableGrid) -> TableGrid:
    """Return a new TableGrid with rows and columns swapped.

    Args:
        table: Grid produced by the grid builder.

    Returns:
        TableGrid of dimensions C x R where output (c, r) is input (r, c).
    """
    max_row = table.row_count
    max_col = table.column_count

    transposed = TableGrid(table_attributes=dict(table.table_attributes))
    transposed.grid = [
        [table.cell_at(r, c) for r in range(max_row)] for c in range(max_col)
    ]

    transposed.occupied = {(col, row) for row, col in table.occupied}

    for (row, col), attributes in table.cell_attributes.items():
        # Spanning cells carry their attributes on the spanning record
        if (row, col) in table.spanning_cells:
            continue
        transposed.cell_attributes[(col, row)] = dict(attributes)

    for (row, col), cell in table.spanning_cells.items():
        transposed.spanning_cells[(col, row)] = cell.transposed()

    logger.debug("Transposed %dx%d grid to %dx%d", max_row, max_col, max_col, max_row)
    return transposed
