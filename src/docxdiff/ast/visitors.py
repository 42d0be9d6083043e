#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

Visitors keep algorithms (rendering, validation, statistics) separate from
the node classes. :class:`NodeVisitor` declares one ``visit_*`` method per
node type; :class:`TreeWalker` provides a default depth-first traversal so
subclasses only override the node types they care about.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from docxdiff.ast.nodes import (
    Document,
    Heading,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
)
from docxdiff.exceptions import MalformedInputError


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Examples
    --------
    Count the tables of a document:

        >>> class TableCounter(TreeWalker):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_table(self, node):
        ...         self.count += 1
        ...         super().visit_table(node)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass


class TreeWalker(NodeVisitor):
    """Depth-first visitor that does nothing but descend."""

    def visit_document(self, node: Document) -> Any:
        """Visit every block of the document."""
        for child in node.children:
            child.accept(self)

    def visit_paragraph(self, node: Paragraph) -> Any:
        """Leaf; nothing to descend into."""
        pass

    def visit_heading(self, node: Heading) -> Any:
        """Leaf; nothing to descend into."""
        pass

    def visit_list_item(self, node: ListItem) -> Any:
        """Leaf; nothing to descend into."""
        pass

    def visit_table(self, node: Table) -> Any:
        """Visit every row of the table."""
        for row in node.rows:
            row.accept(self)

    def visit_table_row(self, node: TableRow) -> Any:
        """Visit every cell of the row."""
        for cell in node.cells:
            cell.accept(self)

    def visit_table_cell(self, node: TableCell) -> Any:
        """Leaf; nothing to descend into."""
        pass


class StructureValidator(TreeWalker):
    """Collect diagnostics for nodes missing required structure.

    The diff engine skips the offending rows and cells instead of aborting,
    so this visitor never raises; it records one
    :class:`~docxdiff.exceptions.MalformedInputError` per problem.

    Parameters
    ----------
    label : str, default = "document"
        Prefix naming the tree in diagnostic locations

    """

    def __init__(self, label: str = "document"):
        """Initialize the validator."""
        self.label = label
        self.errors: list[MalformedInputError] = []
        self._table_index = -1
        self._row_index = -1

    def visit_document(self, node: Document) -> Any:
        """Reset counters and walk the tree."""
        self.errors.clear()
        self._table_index = -1
        super().visit_document(node)
        return self.errors

    def visit_table(self, node: Table) -> Any:
        """Flag tables without rows."""
        self._table_index += 1
        if not node.rows:
            self._add_error("table has no rows", f"{self.label} table {self._table_index + 1}")
        for index, row in enumerate(node.rows):
            self._row_index = index
            row.accept(self)

    def visit_table_row(self, node: TableRow) -> Any:
        """Flag rows without cells."""
        if not node.cells:
            self._add_error("row has no cells", self._row_location())
        super().visit_table_row(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        """Flag non-positive span counts."""
        if node.rowspan < 1 or node.colspan < 1:
            self._add_error(
                f"cell declares invalid span rowspan={node.rowspan} colspan={node.colspan}",
                self._row_location(),
            )

    def _row_location(self) -> str:
        return f"{self.label} table {self._table_index + 1}, row {self._row_index + 1}"

    def _add_error(self, message: str, location: str) -> None:
        self.errors.append(MalformedInputError(message, location=location))
