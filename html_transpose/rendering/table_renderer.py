"""
Table rendering.

Serializes a TableGrid as HTML table markup, collapsing each spanning region
back into a single anchor cell.
"""

from typing import Dict, List

from ..core.models import TableGrid


def render_table(table: TableGrid) -> str:
    """Render ``table`` as a <table> string.

    Covered positions emit nothing; positions with no cell at all (ragged
    or unfilled grids) emit an empty <td></td>.
    """
    parts: List[str] = ["<table", _format_attributes(table.table_attributes), ">"]

    for r in range(table.row_count):
        parts.append("<tr>")

        c = 0
        while c < table.column_count:
            merged = table.spanning_cells.get((r, c))
            if merged is not None:
                attrs = []
                if merged.rowspan > 1:
                    attrs.append(f' rowspan="{merged.rowspan}"')
                if merged.colspan > 1:
                    attrs.append(f' colspan="{merged.colspan}"')
                attrs.append(_format_attributes(merged.attributes))
                parts.append(_make_td("".join(attrs), merged.content))
                c += merged.colspan
                continue

            content = table.cell_at(r, c)
            if content is None:
                parts.append("<td></td>")
            elif (r, c) not in table.occupied:
                attributes = table.cell_attributes.get((r, c), {})
                parts.append(_make_td(_format_attributes(attributes), content))
            c += 1

        parts.append("</tr>")

    parts.append("</table>")
    return "".join(parts)


def escape_html(text: str) -> str:
    """Escape HTML special characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def escape_attr_value(text: str) -> str:
    """Escape a double-quoted attribute value."""
    return text.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;")


def _format_attributes(attributes: Dict[str, str]) -> str:
    return "".join(
        f' {name}="{escape_attr_value(value)}"' for name, value in attributes.items()
    )


def _make_td(attr_str: str, content: str) -> str:
    return f"<td{attr_str}>{escape_html(content)}</td>"
