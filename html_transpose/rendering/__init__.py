from .table_renderer import escape_attr_value, escape_html, render_table

__all__ = ["render_table", "escape_html", "escape_attr_value"]
