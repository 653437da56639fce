"""
Transpose pipeline.

Runs the grid builder, transposer and renderer in sequence.
"""

import logging
from typing import Optional

from .config import get_config
from .core.transposer import transpose_grid
from .parsing.grid_builder import build_grid
from .rendering.table_renderer import render_table

logger = logging.getLogger(__name__)


def transpose(html: str, parser: Optional[str] = None) -> str:
    """Transpose the first table in ``html``.

    Args:
        html: HTML document or fragment.
        parser: BeautifulSoup tree builder. Defaults to the configured one.

    Returns:
        Markup of a single <table> whose rows are the input's columns.

    Raises:
        TableNotFoundError: The input has no <table> element.
        SelectorError: A structural selector could not be compiled.

    Example:
        >>> transpose("<table><tr><td>A</td><td>B</td></tr></table>")
        '<table><tr><td>A</td></tr><tr><td>B</td></tr></table>'
    """
    if parser is None:
        parser = get_config().parser

    table = build_grid(html, parser=parser)
    transposed = transpose_grid(table)
    output = render_table(transposed)
    logger.debug("Rendered %d characters", len(output))
    return output
