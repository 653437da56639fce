"""
Core grid model and transposition.
"""

from .models import SpanningCell, TableGrid, ensure_grid_size
from .transposer import transpose_grid

__all__ = [
    "SpanningCell",
    "TableGrid",
    "ensure_grid_size",
    "transpose_grid",
]
