#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/renderers/json.py
"""JSON renderer for diff result trees.

Produces machine-readable output for programmatic processing: every block,
row and cell with its state, the change spans of modified leaves, the row
matching record of each table, summary statistics and diagnostics.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from docxdiff.ast.nodes import (
    DiffSpan,
    Document,
    Heading,
    ListItem,
    MatchResult,
    Paragraph,
    Table,
    TableCell,
    TableRow,
)
from docxdiff.ast.visitors import NodeVisitor
from docxdiff.diff.stats import compute_stats
from docxdiff.exceptions import RenderingError


def _spans(spans: list[DiffSpan]) -> list[Dict[str, str]]:
    return [{"text": span.text, "state": span.state.value} for span in spans]


def _match(match: Any) -> Dict[str, Any] | None:
    if not isinstance(match, MatchResult):
        return None
    return {
        "strategy": match.strategy,
        "pairs": [list(pair) for pair in match.pairs],
        "added": list(match.added),
        "removed": list(match.removed),
    }


class JsonDiffRenderer(NodeVisitor):
    """Render a diff result tree as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
        >>> from docxdiff import diff_documents
        >>> result = diff_documents("lease_v1.docx", "lease_v2.docx")
        >>> payload = JsonDiffRenderer(pretty_print=False).render(result)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, document: Document) -> str:
        """Render a diff result to a JSON string."""
        try:
            data = document.accept(self)
        except AttributeError as e:
            raise RenderingError(f"Cannot serialize node: {e}", rendering_stage="json", original_error=e) from e
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def visit_document(self, node: Document) -> Dict[str, Any]:
        """Serialize the document with statistics and diagnostics."""
        return {
            "type": "document_diff",
            "statistics": compute_stats(node).to_dict(),
            "diagnostics": node.diagnostics,
            "blocks": [child.accept(self) for child in node.children],
        }

    def visit_paragraph(self, node: Paragraph) -> Dict[str, Any]:
        """Serialize a Paragraph node."""
        return {
            "type": "paragraph",
            "kind": node.kind,
            "state": node.state.value,
            "content": node.content,
            "spans": _spans(node.spans),
        }

    def visit_heading(self, node: Heading) -> Dict[str, Any]:
        """Serialize a Heading node."""
        return {
            "type": "heading",
            "level": node.level,
            "state": node.state.value,
            "content": node.content,
            "spans": _spans(node.spans),
        }

    def visit_list_item(self, node: ListItem) -> Dict[str, Any]:
        """Serialize a ListItem node."""
        return {
            "type": "list_item",
            "ordered": node.ordered,
            "state": node.state.value,
            "content": node.content,
            "spans": _spans(node.spans),
        }

    def visit_table(self, node: Table) -> Dict[str, Any]:
        """Serialize a Table node and its row matching record."""
        return {
            "type": "table",
            "state": node.state.value,
            "attributes": dict(node.attributes),
            "match": _match(node.metadata.get("match")),
            "rows": [row.accept(self) for row in node.rows],
        }

    def visit_table_row(self, node: TableRow) -> Dict[str, Any]:
        """Serialize a TableRow node."""
        return {
            "state": node.state.value,
            "is_header": node.is_header,
            "cells": [cell.accept(self) for cell in node.cells],
        }

    def visit_table_cell(self, node: TableCell) -> Dict[str, Any]:
        """Serialize a TableCell node."""
        return {
            "state": node.state.value,
            "tag": node.tag,
            "rowspan": node.rowspan,
            "colspan": node.colspan,
            "content": node.content,
            "spans": _spans(node.spans),
        }


def render_to_file(document: Document, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render a diff result to a JSON file.

    Parameters
    ----------
    document : Document
        Diff result to serialise
    output_path : str or Path
        Destination path for the generated JSON file
    **kwargs
        Additional keyword arguments forwarded to :class:`JsonDiffRenderer`

    """
    json_output = JsonDiffRenderer(**kwargs).render(document)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_output)
