"""
html-transpose: swap the rows and columns of an HTML table.

Row- and column-spanning cells are expanded into a dense grid, transposed
with their spans exchanged and rendered back as minimal span markup.
"""

from .exceptions import (
    ConfigurationError,
    HtmlTransposeError,
    ParsingError,
    SelectorError,
    TableNotFoundError,
)
from .pipeline import transpose

__version__ = "0.1.0"

__all__ = [
    "transpose",
    "HtmlTransposeError",
    "ParsingError",
    "TableNotFoundError",
    "SelectorError",
    "ConfigurationError",
]
