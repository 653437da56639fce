"""
HTML table to grid conversion.

Parses the first <table> of a document into a dense grid, recording
spanning cells, per-cell attributes and span-covered positions on the side
so the table can be reassembled after transposition.
"""

import logging
import re
from typing import Dict

import soupsieve
from bs4 import BeautifulSoup, FeatureNotFound, Tag

from ..core.models import SpanningCell, TableGrid, ensure_grid_size
from ..exceptions import ConfigurationError, SelectorError, TableNotFoundError

logger = logging.getLogger(__name__)

SPAN_ATTRIBUTES = ("rowspan", "colspan")
SPAN_PATTERN = re.compile(r"\+?[0-9]+")


def compile_selector(pattern: str) -> soupsieve.SoupSieve:
    """Compile a CSS selector, raising SelectorError on failure."""
    try:
        return soupsieve.compile(pattern)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorError(pattern, str(e)) from e


TABLE_SELECTOR = compile_selector("table")
ROW_SELECTOR = compile_selector("tr")
CELL_SELECTOR = compile_selector("td, th")


def build_grid(html: str, parser: str = "html5lib") -> TableGrid:
    """Parse ``html`` and build the grid of its first table.

    Args:
        html: Document or fragment containing a table.
        parser: BeautifulSoup tree builder name.

    Returns:
        TableGrid describing the table.

    Raises:
        TableNotFoundError: No <table> element exists in the document.
        ConfigurationError: The requested tree builder is not installed.
    """
    try:
        # class="a b" stays a single string
        soup = BeautifulSoup(html or "", parser, multi_valued_attributes=None)
    except FeatureNotFound as e:
        raise ConfigurationError(
            f"parser {parser!r} is not installed", key_name="parser"
        ) from e

    table = TABLE_SELECTOR.select_one(soup)
    if table is None:
        raise TableNotFoundError()
    return build_grid_from_table(table)


def build_grid_from_table(table: Tag) -> TableGrid:
    """Expand a parsed <table> element into a TableGrid."""
    result = TableGrid(table_attributes=_string_attributes(table))
    grid = result.grid

    for r_index, row in enumerate(ROW_SELECTOR.select(table)):
        if r_index >= len(grid):
            grid.append([])

        col_index = _next_free_column(grid[r_index], 0)

        for cell in CELL_SELECTOR.select(row):
            col_index = _next_free_column(grid[r_index], col_index)

            rowspan = _parse_span(cell.get("rowspan"))
            colspan = _parse_span(cell.get("colspan"))
            content = cell.get_text().strip()
            attributes = {
                name: value
                for name, value in _string_attributes(cell).items()
                if name not in SPAN_ATTRIBUTES
            }

            ensure_grid_size(grid, r_index + rowspan, col_index + colspan)
            grid[r_index][col_index] = content

            anchor = (r_index, col_index)
            if attributes:
                result.cell_attributes[anchor] = attributes
            if rowspan > 1 or colspan > 1:
                result.spanning_cells[anchor] = SpanningCell(
                    rowspan=rowspan,
                    colspan=colspan,
                    content=content,
                    attributes=dict(attributes),
                )

            for r_offset in range(rowspan):
                for c_offset in range(colspan):
                    if r_offset == 0 and c_offset == 0:
                        continue
                    position = (r_index + r_offset, col_index + c_offset)
                    grid[position[0]][position[1]] = ""
                    result.occupied.add(position)

            col_index += colspan

    if result.is_ragged():
        logger.debug(
            "Ragged grid after span expansion; reading %d columns from the first row",
            result.column_count,
        )
    logger.debug(
        "Built %dx%d grid with %d spanning cells",
        result.row_count,
        result.column_count,
        len(result.spanning_cells),
    )
    return result


def _next_free_column(row, col_index: int) -> int:
    while col_index < len(row) and row[col_index] is not None:
        col_index += 1
    return col_index


def _parse_span(value, default: int = 1) -> int:
    if value is None:
        return default
    if not SPAN_PATTERN.fullmatch(value):
        logger.debug("Ignoring unparsable span value %r", value)
        return default
    span = int(value)
    if span < 1:
        logger.debug("Ignoring non-positive span value %r", value)
        return default
    return span


def _string_attributes(tag: Tag) -> Dict[str, str]:
    attributes = {}
    for name, value in tag.attrs.items():
        # Soups built with default settings split class/rel into lists
        if isinstance(value, list):
            value = " ".join(value)
        attributes[name] = str(value)
    return attributes
