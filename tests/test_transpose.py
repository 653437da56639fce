"""
End-to-end tests for html_transpose.transpose.
"""

from collections import Counter

import pytest

from html_transpose import SelectorError, TableNotFoundError, transpose
from html_transpose.parsing.grid_builder import build_grid

COMPLEX_TABLES = [
    """
    <table>
      <tr><td>1</td><td>2</td></tr>
      <tr><td>3</td><td>4</td></tr>
      <tr><td>5</td><td>6</td></tr>
    </table>
    """,
    """
    <table>
      <tr><td rowspan="2">A</td><td colspan="2">BC</td></tr>
      <tr><td>D</td><td>E</td></tr>
      <tr><td>F</td><td rowspan="2" colspan="2">GH</td></tr>
      <tr><td>I</td></tr>
    </table>
    """,
    """
    <table>
      <tr><td rowspan="3" colspan="2">Big</td><td>C</td><td>D</td></tr>
      <tr><td>E</td><td>F</td></tr>
      <tr><td>G</td><td>H</td></tr>
      <tr><td>I</td><td rowspan="2">J</td><td>K</td><td>L</td></tr>
      <tr><td>M</td><td>N</td><td>O</td></tr>
    </table>
    """,
    """
    <table border="1" class="scores">
      <tr><th class="header" colspan="3">구분</th></tr>
      <tr><td rowspan="2" data-id="7">논문</td><td>국제전문학술지</td><td>250</td></tr>
      <tr><td>SCOPUS학술지</td><td style="color: red;">150</td></tr>
    </table>
    """,
]


def _contents(html: str) -> Counter:
    table = build_grid(html)
    return Counter(cell for row in table.grid for cell in row if cell)


class TestScenarios:
    def test_plain_two_by_two(self):
        html = """<table>
            <tr><td>A</td><td>B</td></tr>
            <tr><td>C</td><td>D</td></tr>
        </table>"""
        assert transpose(html) == (
            "<table><tr><td>A</td><td>C</td></tr>"
            "<tr><td>B</td><td>D</td></tr></table>"
        )

    def test_colspan_header_becomes_rowspan(self):
        html = (
            '<table><tr><td colspan="2">Header</td></tr>'
            "<tr><td>A</td><td>B</td></tr></table>"
        )
        assert transpose(html) == (
            '<table><tr><td rowspan="2">Header</td><td>A</td></tr>'
            "<tr><td>B</td></tr></table>"
        )

    def test_rowspan_becomes_colspan(self):
        html = (
            '<table><tr><td rowspan="2">A</td><td>B</td></tr>'
            "<tr><td>C</td></tr></table>"
        )
        assert transpose(html) == (
            '<table><tr><td colspan="2">A</td></tr>'
            "<tr><td>B</td><td>C</td></tr></table>"
        )

    def test_no_table(self):
        with pytest.raises(TableNotFoundError) as exc_info:
            transpose("<div>Hello</div>")
        assert "No <table> element found" in str(exc_info.value)

    def test_empty_table(self):
        assert transpose("<table></table>") == "<table></table>"

    def test_attributes_and_korean_text(self):
        html = """<table>
            <tr><td class="header" style="color:red">이름</td><td class="data">홍길동</td></tr>
            <tr><td class="header" style="color:blue">나이</td><td class="data">30</td></tr>
        </table>"""
        assert transpose(html) == (
            '<table><tr><td class="header" style="color:red">이름</td>'
            '<td class="header" style="color:blue">나이</td></tr>'
            '<tr><td class="data">홍길동</td><td class="data">30</td></tr></table>'
        )


class TestTranspose:
    def test_merged_cell_attributes_travel_with_span(self):
        html = """<table>
            <tr><td rowspan="2" class="merged" style="background: yellow;" data-id="1">A</td><td class="normal">B</td></tr>
            <tr><td class="normal">C</td></tr>
        </table>"""
        assert transpose(html) == (
            '<table><tr><td colspan="2" class="merged" style="background: yellow;" '
            'data-id="1">A</td></tr>'
            '<tr><td class="normal">B</td><td class="normal">C</td></tr></table>'
        )

    def test_rowspan_and_colspan_block(self):
        html = """<table>
            <tr><td rowspan="2" colspan="2">Merged</td><td>C</td></tr>
            <tr><td>F</td></tr>
            <tr><td>G</td><td>H</td><td>I</td></tr>
        </table>"""
        assert transpose(html) == (
            '<table><tr><td rowspan="2" colspan="2">Merged</td><td>G</td></tr>'
            "<tr><td>H</td></tr>"
            "<tr><td>C</td><td>F</td><td>I</td></tr></table>"
        )

    def test_table_attributes_pass_through(self):
        html = '<table id="t1" class="wide" data-note="a &amp; b"><tr><td>x</td></tr></table>'
        assert transpose(html) == (
            '<table id="t1" class="wide" data-note="a &amp; b"><tr><td>x</td></tr></table>'
        )

    def test_text_is_escaped(self):
        html = "<table><tr><td>a &amp; b &lt;c&gt;</td><td>it's</td></tr></table>"
        assert transpose(html) == (
            "<table><tr><td>a &amp; b &lt;c&gt;</td></tr>"
            "<tr><td>it&apos;s</td></tr></table>"
        )

    def test_header_cells_render_as_td(self):
        assert transpose("<table><tr><th>H</th></tr></table>") == (
            "<table><tr><td>H</td></tr></table>"
        )

    def test_empty_row_renders_missing_cell(self):
        html = "<table><tr></tr><tr><td>A</td></tr></table>"
        assert transpose(html) == "<table><tr><td></td><td>A</td></tr></table>"

    def test_table_inside_document(self):
        html = "<html><body><h1>Title</h1><table><tr><td>1</td><td>2</td></tr></table></body></html>"
        assert transpose(html) == "<table><tr><td>1</td></tr><tr><td>2</td></tr></table>"

    def test_optional_end_tags_are_closed(self):
        html = "<table><tr><td>A<td>B<tr><td>C<td>D</table>"
        assert transpose(html) == (
            "<table><tr><td>A</td><td>C</td></tr>"
            "<tr><td>B</td><td>D</td></tr></table>"
        )
        assert _contents(html) == Counter(["A", "B", "C", "D"])

    def test_configured_parser_is_used(self, monkeypatch):
        monkeypatch.setenv("HTML_TRANSPOSE_PARSER", "lxml")
        pytest.importorskip("lxml")
        assert transpose("<table><tr><td>A</td><td>B</td></tr></table>") == (
            "<table><tr><td>A</td></tr><tr><td>B</td></tr></table>"
        )

    def test_error_types_are_exported(self):
        assert issubclass(SelectorError, Exception)


class TestProperties:
    @pytest.mark.parametrize("html", COMPLEX_TABLES)
    def test_dimensions_are_swapped(self, html):
        before = build_grid(html)
        after = build_grid(transpose(html))
        assert after.row_count == before.column_count
        assert after.column_count == before.row_count

    @pytest.mark.parametrize("html", COMPLEX_TABLES)
    def test_spans_are_exchanged(self, html):
        before = build_grid(html)
        after = build_grid(transpose(html))
        assert {
            (col, row): (cell.colspan, cell.rowspan, cell.content, cell.attributes)
            for (row, col), cell in before.spanning_cells.items()
        } == {
            position: (cell.rowspan, cell.colspan, cell.content, cell.attributes)
            for position, cell in after.spanning_cells.items()
        }

    @pytest.mark.parametrize("html", COMPLEX_TABLES)
    def test_content_is_preserved(self, html):
        assert _contents(transpose(html)) == _contents(html)

    @pytest.mark.parametrize("html", COMPLEX_TABLES)
    def test_attributes_follow_their_cells(self, html):
        before = build_grid(html)
        after = build_grid(transpose(html))
        assert after.cell_attributes == {
            (col, row): attrs for (row, col), attrs in before.cell_attributes.items()
        }
        assert after.table_attributes == before.table_attributes

    @pytest.mark.parametrize("html", COMPLEX_TABLES)
    def test_round_trip(self, html):
        before = build_grid(html)
        twice = build_grid(transpose(transpose(html)))
        assert twice.grid == before.grid
        assert twice.spanning_cells == before.spanning_cells
        assert twice.cell_attributes == before.cell_attributes
        assert twice.occupied == before.occupied
