"""Unit tests for the HTML and JSON diff renderers."""

import json

import pytest
from utils import make_table

from docxdiff.ast import DiffState, Document, ListItem, Paragraph, TableCell
from docxdiff.diff.document import diff_document
from docxdiff.exceptions import RenderingError
from docxdiff.renderers import HtmlDiffRenderer, JsonDiffRenderer
from docxdiff.renderers.html import render_attributes
from docxdiff.renderers.html import render_to_file as render_html_file
from docxdiff.renderers.json import render_to_file as render_json_file


@pytest.fixture
def lease_diff(lease_documents) -> Document:
    """Provide the diff result of the lease fixture."""
    return diff_document(*lease_documents)


@pytest.mark.unit
class TestRenderAttributes:
    """Tests for render_attributes function."""

    def test_plain(self):
        """Test attributes are quoted and escaped."""
        assert render_attributes({"title": 'a "b"'}) == ' title="a &quot;b&quot;"'

    def test_state_class_added(self):
        """Test one-sided states add their class."""
        assert render_attributes({}, DiffState.ADDED) == ' class="added"'
        assert render_attributes({"class": "note"}, DiffState.REMOVED) == ' class="note removed"'
        assert render_attributes({"class": "note"}, DiffState.MODIFIED) == ' class="note"'


@pytest.mark.unit
class TestHtmlDiffRenderer:
    """Tests for HtmlDiffRenderer class."""

    def test_standalone_page(self, lease_diff):
        """Test the full page with styles and summary."""
        html = HtmlDiffRenderer().render(lease_diff)
        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert "<dt>Modified</dt><dd>2</dd>" in html
        assert 'The rent is <span class="removed">100</span><span class="added">150</span>' in html
        assert html.rstrip().endswith("</html>")

    def test_without_styles(self, lease_diff):
        """Test that styles can be omitted."""
        html = HtmlDiffRenderer(inline_styles=False).render(lease_diff)
        assert "<style>" not in html

    def test_fragment(self, lease_diff):
        """Test fragment output without page wrapper."""
        html = HtmlDiffRenderer(standalone=False).render(lease_diff)
        assert html.startswith("<p>This lease starts on <strong>1 May</strong>.</p>")
        assert "<html" not in html
        assert "diff-summary" not in html

    def test_one_sided_blocks(self):
        """Test added and removed paragraphs carry their class."""
        doc = diff_document(
            Document(children=[Paragraph(content="a"), Paragraph(content="gone")]),
            Document(children=[Paragraph(content="a"), Paragraph(content="fresh start")]),
        )
        html = HtmlDiffRenderer(standalone=False).render(doc)
        assert '<p class="added">fresh start</p>' in html
        assert '<p class="removed">gone</p>' in html

    def test_lists_grouped(self):
        """Test consecutive list items share one list element."""
        doc = Document(
            children=[ListItem(content="a"), ListItem(content="b"), ListItem(content="c", ordered=True)]
        )
        html = HtmlDiffRenderer(standalone=False).render(doc)
        assert html == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n<ol>\n<li>c</li>\n</ol>\n"

    def test_table_structure(self):
        """Test header rows, spans and attributes are re-emitted."""
        table = make_table(["Item", "Amount"], [TableCell(content="Rent", rowspan=2, attributes={"class": "k"}), "100"])
        table.rows[0].is_header = True
        html = HtmlDiffRenderer(standalone=False).render(Document(children=[table]))
        assert "<thead>\n<tr><td>Item</td><td>Amount</td></tr>\n</thead>" in html
        assert '<td rowspan="2" class="k">Rent</td>' in html

    def test_removed_table_wrapped(self):
        """Test source-only tables are wrapped in a removed-table container."""
        doc = diff_document(Document(children=[make_table(["x"])]), Document())
        html = HtmlDiffRenderer(standalone=False).render(doc)
        assert html.startswith('<div class="removed-table">\n<table>')
        assert '<tr class="removed">' in html

    def test_diagnostics_listed(self):
        """Test diagnostics are shown in the summary."""
        doc = Document(metadata={"diagnostics": ["source table 1: table has no rows"]})
        html = HtmlDiffRenderer().render(doc)
        assert "<li>source table 1: table has no rows</li>" in html

    def test_unknown_node(self):
        """Test that foreign nodes raise RenderingError."""
        with pytest.raises(RenderingError):
            HtmlDiffRenderer().render(Document(children=[object()]))

    def test_render_to_file(self, lease_diff, tmp_path):
        """Test writing HTML to a file."""
        path = tmp_path / "diff.html"
        render_html_file(lease_diff, path, inline_styles=False)
        assert '<span class="added">150</span>' in path.read_text(encoding="utf-8")


@pytest.mark.unit
class TestJsonDiffRenderer:
    """Tests for JsonDiffRenderer class."""

    def test_structure(self, lease_diff):
        """Test the top-level payload."""
        data = json.loads(JsonDiffRenderer().render(lease_diff))
        assert data["type"] == "document_diff"
        assert data["statistics"]["modified"] == 2
        assert data["statistics"]["total_changes"] == 2
        assert data["diagnostics"] == []
        assert [block["type"] for block in data["blocks"]] == ["paragraph", "paragraph", "table"]

    def test_spans_and_states(self, lease_diff):
        """Test leaves carry their state and spans."""
        data = json.loads(JsonDiffRenderer().render(lease_diff))
        paragraph = data["blocks"][1]
        assert paragraph["state"] == "modified"
        assert paragraph["spans"] == [
            {"text": "The rent is ", "state": "unchanged"},
            {"text": "100", "state": "removed"},
            {"text": "150", "state": "added"},
        ]

    def test_table_match(self, lease_diff):
        """Test tables carry their row matching record."""
        table = json.loads(JsonDiffRenderer().render(lease_diff))["blocks"][2]
        assert table["match"] == {"strategy": "positional", "pairs": [[0, 0], [1, 1]], "added": [], "removed": []}
        assert table["rows"][1]["cells"][1]["state"] == "modified"

    def test_compact_output(self, lease_diff):
        """Test output without indentation."""
        output = JsonDiffRenderer(pretty_print=False).render(lease_diff)
        assert "\n" not in output

    def test_unknown_node(self):
        """Test that foreign nodes raise RenderingError."""
        with pytest.raises(RenderingError):
            JsonDiffRenderer().render(Document(children=[object()]))

    def test_render_to_file(self, lease_diff, tmp_path):
        """Test writing JSON to a file."""
        path = tmp_path / "diff.json"
        render_json_file(lease_diff, path)
        assert json.loads(path.read_text(encoding="utf-8"))["type"] == "document_diff"
