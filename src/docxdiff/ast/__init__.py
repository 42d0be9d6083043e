#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/ast/__init__.py
"""Tree representation of converted word-processor documents.

The module consists of several components:

- nodes: block, table and diff-record classes
- visitors: visitor pattern implementation for traversal and validation
- sections: derived sections of tables grouped under labeled header rows
- utils: plain-text helpers for inline markup

Examples
--------
    >>> from docxdiff.ast import Document, Paragraph, Table, TableRow, TableCell
    >>> doc = Document(children=[
    ...     Paragraph(content="The rent is <strong>100</strong>"),
    ...     Table(rows=[TableRow(cells=[TableCell(content="1"), TableCell(content="Desk")])]),
    ... ])

"""

from __future__ import annotations

from docxdiff.ast.nodes import (
    Block,
    DiffSpan,
    DiffState,
    Document,
    Heading,
    ListItem,
    MatchResult,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TextBlock,
)
from docxdiff.ast.sections import Section, is_section_label, split_into_sections
from docxdiff.ast.utils import block_text, markup_to_text, normalize_whitespace
from docxdiff.ast.visitors import NodeVisitor, StructureValidator, TreeWalker

__all__ = [
    "Block",
    "DiffSpan",
    "DiffState",
    "Document",
    "Heading",
    "ListItem",
    "MatchResult",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Section",
    "StructureValidator",
    "Table",
    "TableCell",
    "TableRow",
    "TextBlock",
    "TreeWalker",
    "block_text",
    "is_section_label",
    "markup_to_text",
    "normalize_whitespace",
    "split_into_sections",
]
