#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/classifier.py
"""Table structure classification driving strategy selection."""

from __future__ import annotations

from dataclasses import dataclass

from docxdiff.ast.nodes import Table
from docxdiff.ast.sections import is_section_label
from docxdiff.ast.utils import block_text


@dataclass(frozen=True)
class TableStructure:
    """Structural verdict for one table.

    Parameters
    ----------
    has_merged_cells : bool
        Any cell spans more than one row or column
    has_section_headers : bool
        Any row's first cell carries a section label such as ``"A."``

    """

    has_merged_cells: bool = False
    has_section_headers: bool = False


def has_merged_cells(table: Table) -> bool:
    """Return True when any cell declares a span greater than 1."""
    return any(cell.is_merged for cell in table.iter_cells())


def has_section_headers(table: Table) -> bool:
    """Return True when any row's first cell text is a section label."""
    for row in table.rows:
        first_cell = row.first_cell
        if first_cell is not None and is_section_label(block_text(first_cell)):
            return True
    return False


def classify(table: Table) -> TableStructure:
    """Inspect a table for merged cells and section header rows.

    Parameters
    ----------
    table : Table
        Table to inspect

    Returns
    -------
    TableStructure
        Verdict consumed by the table diff orchestrator

    """
    return TableStructure(
        has_merged_cells=has_merged_cells(table),
        has_section_headers=has_section_headers(table),
    )


def content_overlap_ratio(source: Table, dest: Table) -> float:
    """Fraction of positionally aligned cells whose trimmed text is identical.

    Cells are aligned by their row-major position, capped at the smaller
    cell count. Two tables without cells score 0.0.
    """
    source_cells = list(source.iter_cells())
    dest_cells = list(dest.iter_cells())
    total = min(len(source_cells), len(dest_cells))
    if total == 0:
        return 0.0
    matches = sum(1 for a, b in zip(source_cells, dest_cells) if block_text(a) == block_text(b))
    return matches / total
