"""
Parsing package for HTML table input.

This package contains modules for:
- grid_builder: expands a <table> with rowspan/colspan into a dense grid
"""

from .grid_builder import build_grid, build_grid_from_table, compile_selector

__all__ = [
    "build_grid",
    "build_grid_from_table",
    "compile_selector",
]
