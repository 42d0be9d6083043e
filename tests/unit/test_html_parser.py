"""Unit tests for the HTML input converter."""

import io

import pytest

from docxdiff.ast import Heading, ListItem, Paragraph, Table
from docxdiff.exceptions import DependencyError, DocumentNotFoundError, ValidationError
from docxdiff.options import HtmlOptions
from docxdiff.parsers.html import HtmlParser, parse_html, parse_span
from docxdiff.utils import encoding


@pytest.mark.unit
class TestParseSpan:
    """Tests for parse_span function."""

    @pytest.mark.parametrize("value,expected", [("2", 2), (" 3 ", 3), ("0", 1), ("-1", 1), ("abc", 1), (None, 1)])
    def test_values(self, value, expected):
        """Test valid and invalid span values."""
        assert parse_span(value) == expected


@pytest.mark.unit
class TestBlocks:
    """Tests for paragraph, heading and list conversion."""

    def test_paragraph_keeps_inline_markup(self):
        """Test that inline formatting is kept as markup."""
        doc = parse_html("<p>The rent is <strong>100</strong></p>")
        assert doc.children == [Paragraph(content="The rent is <strong>100</strong>")]

    def test_headings(self):
        """Test heading levels."""
        doc = parse_html("<h1>Lease</h1><h3>Terms</h3>")
        assert [(block.level, block.content) for block in doc.children] == [(1, "Lease"), (3, "Terms")]
        assert all(isinstance(block, Heading) for block in doc.children)

    def test_whitespace_collapsed(self):
        """Test that whitespace runs collapse and blank paragraphs vanish."""
        doc = parse_html("<p>  a \n   b </p><p> </p><p>c</p>")
        assert [block.content for block in doc.children] == ["a b", "c"]

    def test_whitespace_kept_when_disabled(self):
        """Test the collapse option."""
        doc = parse_html("<p>a  b</p>", HtmlOptions(collapse_whitespace=False))
        assert doc.children[0].content == "a  b"

    def test_nested_lists_flattened(self):
        """Test list flattening with depth metadata."""
        doc = parse_html("<ul><li>One</li><li>Two<ol><li>Sub</li></ol></li></ul>")
        items = doc.children
        assert all(isinstance(item, ListItem) for item in items)
        assert [(item.content, item.ordered, item.metadata["depth"]) for item in items] == [
            ("One", False, 0),
            ("Two", False, 0),
            ("Sub", True, 1),
        ]

    def test_stray_inline_content_wrapped(self):
        """Test that loose text becomes a paragraph."""
        doc = parse_html("Hello <b>world</b><p>x</p>")
        assert [block.content for block in doc.children] == ["Hello <b>world</b>", "x"]

    def test_containers_descended(self):
        """Test that block containers are flattened into their blocks."""
        doc = parse_html("<div><p>a</p><section><p>b</p></section></div>")
        assert [block.content for block in doc.children] == ["a", "b"]

    def test_leaf_div_and_blockquote(self):
        """Test leaf containers keep their kind."""
        doc = parse_html("<div>text</div><blockquote>quoted</blockquote>")
        assert [(block.kind, block.content) for block in doc.children] == [("div", "text"), ("blockquote", "quoted")]

    def test_skipped_content(self):
        """Test scripts, styles and comments are ignored."""
        doc = parse_html("<style>p{}</style><script>var x;</script><!-- note --><p>a</p>")
        assert [block.content for block in doc.children] == ["a"]

    def test_attributes_kept(self):
        """Test structural attributes are recorded."""
        doc = parse_html('<p class="note wide" style="color:red">x</p>')
        assert doc.children[0].attributes == {"class": "note wide", "style": "color:red"}

    def test_full_page_uses_body(self):
        """Test that only the body is converted."""
        doc = parse_html("<html><head><title>T</title></head><body><p>x</p></body></html>")
        assert [block.content for block in doc.children] == ["x"]


@pytest.mark.unit
class TestTables:
    """Tests for table conversion."""

    def test_table_structure(self):
        """Test header detection, spans and cell attributes."""
        doc = parse_html(
            "<table class='grid'><thead><tr><th>Item</th><th>Amount</th></tr></thead>"
            "<tbody><tr><td rowspan='2'>Rent</td><td class='num'>100</td></tr>"
            "<tr><td colspan='x'>50</td></tr></tbody></table>"
        )
        table = doc.children[0]
        assert isinstance(table, Table)
        assert table.attributes == {"class": "grid"}
        assert [row.is_header for row in table.rows] == [True, False, False]
        assert [cell.tag for cell in table.rows[0].cells] == ["th", "th"]
        rent, amount = table.rows[1].cells
        assert rent.rowspan == 2
        assert rent.attributes == {}
        assert amount.attributes == {"class": "num"}
        assert table.rows[2].cells[0].colspan == 1

    def test_th_row_is_header(self):
        """Test that an all-th row outside thead is a header row."""
        doc = parse_html("<table><tr><th>A</th></tr><tr><td>b</td></tr></table>")
        assert [row.is_header for row in doc.children[0].rows] == [True, False]

    def test_cell_markup_kept(self):
        """Test cell content keeps paragraphs and line breaks."""
        doc = parse_html("<table><tr><td><p>line one<br/>line two</p></td></tr></table>")
        assert doc.children[0].rows[0].cells[0].content == "<p>line one<br/>line two</p>"

    def test_nested_table_stays_in_cell(self):
        """Test that rows of a nested table are not lifted into the outer table."""
        doc = parse_html("<table><tr><td><table><tr><td>inner</td></tr></table></td></tr></table>")
        outer = doc.children[0]
        assert len(outer.rows) == 1
        assert "inner" in outer.rows[0].cells[0].content

    def test_row_without_cells_kept(self):
        """Test that empty rows are kept for the engine to report."""
        doc = parse_html("<table><tr></tr><tr><td>a</td></tr></table>")
        rows = doc.children[0].rows
        assert len(rows) == 2
        assert rows[0].cells == []
        assert not rows[0].is_header


@pytest.mark.unit
class TestInputs:
    """Tests for the accepted input kinds."""

    def test_path_input(self, write_html):
        """Test reading from str and Path inputs."""
        path = write_html("a.html", "<p>from file</p>")
        assert parse_html(path).children[0].content == "from file"
        assert parse_html(str(path)).children[0].content == "from file"

    def test_bytes_and_stream_input(self):
        """Test reading from bytes and binary streams."""
        assert parse_html("<p>café</p>".encode("utf-8")).children[0].content == "café"
        assert parse_html(io.BytesIO(b"<p>x</p>")).children[0].content == "x"

    def test_cp1252_bytes(self, monkeypatch):
        """Test that non-UTF-8 bytes are decoded with the fallbacks."""
        monkeypatch.setattr(encoding.chardet, "detect", lambda data: {"encoding": None, "confidence": 0.0})
        assert parse_html(b"<p>caf\xe9</p>").children[0].content == "café"

    def test_missing_path(self, tmp_path):
        """Test that a missing Path raises DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError):
            parse_html(tmp_path / "missing.html")

    def test_unsupported_input(self):
        """Test that other input types are rejected."""
        with pytest.raises(ValidationError):
            parse_html(42)

    def test_unknown_tree_builder(self):
        """Test that a missing BeautifulSoup builder raises DependencyError."""
        parser = HtmlParser(HtmlOptions(html_parser="no-such-builder"))
        with pytest.raises(DependencyError, match="no-such-builder"):
            parser.parse("<p>x</p>")
