"""Test utilities for the docxdiff test suite.

This module provides builders for document trees and ``.docx`` fixtures,
and helpers for reading diff results.
"""

from pathlib import Path
from typing import Iterable, Union

from docxdiff.ast import DiffState, Document, Table, TableCell, TableRow

CellSpec = Union[str, TableCell]


def make_row(*cells: CellSpec, is_header: bool = False) -> TableRow:
    """Build a row from strings or ready-made cells."""
    built = [cell if isinstance(cell, TableCell) else TableCell(content=cell) for cell in cells]
    return TableRow(cells=built, is_header=is_header)


def make_table(*rows: Iterable[CellSpec], **attributes: str) -> Table:
    """Build a table, one argument per row."""
    return Table(rows=[make_row(*row) for row in rows], attributes=dict(attributes))


def row_states(table: Table) -> list[DiffState]:
    """Return the state of every row of a result table."""
    return [row.state for row in table.rows]


def block_states(document: Document) -> list[DiffState]:
    """Return the state of every top-level block of a result document."""
    return [block.state for block in document.children]


class DocxTestGenerator:
    """Generator for ``.docx`` test documents built with python-docx."""

    @staticmethod
    def create_lease_document(path: Path, rent: str, rows: Iterable[Iterable[str]] = ()) -> Path:
        """Create a lease with a heading, a rent paragraph and an optional table."""
        import docx

        doc = docx.Document()
        doc.add_heading("Lease Agreement", level=1)
        doc.add_paragraph(f"The rent is {rent}")

        rows = [list(row) for row in rows]
        if rows:
            table = doc.add_table(rows=len(rows), cols=len(rows[0]))
            for row_index, values in enumerate(rows):
                for col_index, value in enumerate(values):
                    table.rows[row_index].cells[col_index].text = value

        doc.save(str(path))
        return path

    @staticmethod
    def create_formatted_document(path: Path, words: Iterable[tuple[str, bool]]) -> Path:
        """Create a one-paragraph document from ``(text, bold)`` runs."""
        import docx

        doc = docx.Document()
        paragraph = doc.add_paragraph()
        for text, bold in words:
            run = paragraph.add_run(text)
            run.bold = bold
        doc.save(str(path))
        return path
