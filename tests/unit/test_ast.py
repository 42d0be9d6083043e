"""Unit tests for tree nodes, markup helpers and visitors."""

import pytest
from utils import make_row, make_table

from docxdiff.ast import (
    DiffSpan,
    DiffState,
    Document,
    Heading,
    MatchResult,
    Paragraph,
    StructureValidator,
    Table,
    TableCell,
    TableRow,
    TreeWalker,
    block_text,
    markup_to_text,
    normalize_whitespace,
)


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and helpers."""

    def test_span_rejects_modified(self):
        """Test that spans cannot carry the block-level state."""
        with pytest.raises(ValueError):
            DiffSpan("x", DiffState.MODIFIED)

    def test_heading_level_validated(self):
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_header_row_predicate(self):
        """Test the first row and flagged rows are header rows."""
        assert make_row("a").is_header_row(0)
        assert not make_row("a").is_header_row(1)
        assert TableRow(cells=[], is_header=True).is_header_row(3)

    def test_table_helpers(self):
        """Test cell iteration and counting."""
        table = make_table(["a", "b"], ["c"])
        assert [cell.content for cell in table.iter_cells()] == ["a", "b", "c"]
        assert table.cell_count == 3
        assert TableCell(rowspan=2).is_merged
        assert not TableCell().is_merged

    def test_document_helpers(self):
        """Test table iteration and diagnostics access."""
        table = make_table(["a"])
        doc = Document(children=[Paragraph(content="x"), table], metadata={"diagnostics": ["m"]})
        assert list(doc.iter_tables()) == [table]
        assert doc.diagnostics == ["m"]
        assert Document().diagnostics == []

    def test_match_result_sets(self):
        """Test matched index sets."""
        match = MatchResult(strategy="numeric", pairs=[(0, 1), (2, 0)])
        assert match.matched_source == {0, 2}
        assert match.matched_dest == {0, 1}


@pytest.mark.unit
class TestMarkupHelpers:
    """Tests for markup_to_text, block_text and normalize_whitespace."""

    def test_markup_to_text(self):
        """Test tags are stripped and entities decoded."""
        assert markup_to_text("<strong>Total</strong> &amp; (USD)") == "Total & (USD)"
        assert markup_to_text("") == ""

    def test_block_text(self):
        """Test trimmed text of a leaf and of a missing cell."""
        assert block_text(TableCell(content="  <em>12</em> ")) == "12"
        assert block_text(None) == ""

    def test_normalize_whitespace(self):
        """Test whitespace runs collapse."""
        assert normalize_whitespace("  a \n\t b  ") == "a b"


@pytest.mark.unit
class TestVisitors:
    """Tests for TreeWalker and StructureValidator."""

    def test_walker_reaches_every_cell(self):
        """Test the default traversal visits cells."""

        class CellCounter(TreeWalker):
            def __init__(self):
                self.count = 0

            def visit_table_cell(self, node):
                self.count += 1

        counter = CellCounter()
        Document(children=[make_table(["a", "b"], ["c"])]).accept(counter)
        assert counter.count == 3

    def test_valid_tree(self):
        """Test a well-formed tree has no diagnostics."""
        doc = Document(children=[Paragraph(content="x"), make_table(["a"])])
        assert StructureValidator().visit_document(doc) == []

    def test_problems_reported(self):
        """Test empty tables, empty rows and bad spans are reported."""
        doc = Document(
            children=[
                Table(),
                Table(rows=[make_row("a"), TableRow(cells=[]), make_row(TableCell(content="b", colspan=0))]),
            ]
        )
        errors = StructureValidator("source").visit_document(doc)
        assert [str(error) for error in errors] == [
            "source table 1: table has no rows",
            "source table 2, row 2: row has no cells",
            "source table 2, row 3: cell declares invalid span rowspan=1 colspan=0",
        ]

    def test_validator_reusable(self):
        """Test that a second run starts from scratch."""
        validator = StructureValidator()
        doc = Document(children=[Table()])
        validator.visit_document(doc)
        assert len(validator.visit_document(doc)) == 1
