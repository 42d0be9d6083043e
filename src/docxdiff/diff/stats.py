#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/stats.py
"""Summary statistics over a diff result tree."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Union

from docxdiff.ast.nodes import DiffState, Document, Heading, ListItem, Paragraph, Table, TableCell
from docxdiff.ast.visitors import TreeWalker


@dataclass
class DiffStats:
    """Leaf counts of a diff result by state.

    Leaves are paragraphs, headings, list items and table cells.
    """

    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0
    tables: int = 0

    @property
    def total_changes(self) -> int:
        """Number of leaves that are not unchanged."""
        return self.added + self.removed + self.modified

    @property
    def has_changes(self) -> bool:
        """Whether any leaf changed."""
        return self.total_changes > 0

    def to_dict(self) -> dict[str, Any]:
        """Return the counts as a plain dict, including ``total_changes``."""
        data = asdict(self)
        data["total_changes"] = self.total_changes
        return data


class StatsCollector(TreeWalker):
    """Visitor counting result leaves by :class:`DiffState`."""

    def __init__(self) -> None:
        """Initialize the collector."""
        self.stats = DiffStats()

    def visit_document(self, node: Document) -> DiffStats:
        """Walk the tree and return the collected statistics."""
        self.stats = DiffStats()
        super().visit_document(node)
        return self.stats

    def visit_paragraph(self, node: Paragraph) -> None:
        """Count a paragraph."""
        self._count(node)

    def visit_heading(self, node: Heading) -> None:
        """Count a heading."""
        self._count(node)

    def visit_list_item(self, node: ListItem) -> None:
        """Count a list item."""
        self._count(node)

    def visit_table(self, node: Table) -> None:
        """Count the table and descend into its cells."""
        self.stats.tables += 1
        super().visit_table(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Count a cell."""
        self._count(node)

    def _count(self, node: Union[Paragraph, Heading, ListItem, TableCell]) -> None:
        if node.state is DiffState.ADDED:
            self.stats.added += 1
        elif node.state is DiffState.REMOVED:
            self.stats.removed += 1
        elif node.state is DiffState.MODIFIED:
            self.stats.modified += 1
        else:
            self.stats.unchanged += 1


def compute_stats(document: Document) -> DiffStats:
    """Count the leaves of a diff result by state."""
    return StatsCollector().visit_document(document)
