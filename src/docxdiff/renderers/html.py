#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/renderers/html.py
"""HTML renderer for diff result trees.

Leaves of a diff result already carry their highlight spans as markup;
the renderer writes the block structure around them, adds the
``added``/``removed`` classes to blocks and rows present on one side only,
and wraps source-only tables in a ``removed-table`` container. Table shape
(row order, ``rowspan``/``colspan``, attributes) is re-emitted as found in
the result tree.
"""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Any, Optional, Union

from docxdiff.ast.nodes import (
    DiffState,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
)
from docxdiff.ast.visitors import NodeVisitor
from docxdiff.constants import ADDED_CLASS, ADDED_TABLE_CLASS, REMOVED_CLASS, REMOVED_TABLE_CLASS
from docxdiff.diff.stats import DiffStats, compute_stats
from docxdiff.exceptions import RenderingError

_STATE_CLASSES = {DiffState.ADDED: ADDED_CLASS, DiffState.REMOVED: REMOVED_CLASS}
_TABLE_WRAPPERS = {DiffState.ADDED: ADDED_TABLE_CLASS, DiffState.REMOVED: REMOVED_TABLE_CLASS}


def render_attributes(attributes: dict[str, str], state: DiffState = DiffState.UNCHANGED) -> str:
    """Format an attribute dict, adding the highlight class for one-sided states."""
    attrs = dict(attributes)
    state_class = _STATE_CLASSES.get(state)
    if state_class:
        classes = attrs.get("class", "").split()
        if state_class not in classes:
            classes.append(state_class)
        attrs["class"] = " ".join(classes)
    return "".join(f' {key}="{escape(str(value), quote=True)}"' for key, value in attrs.items())


class HtmlDiffRenderer(NodeVisitor):
    """Render a diff result tree as HTML.

    Parameters
    ----------
    inline_styles : bool, default = True
        If True, include CSS styles for the highlight classes in the output
    standalone : bool, default = True
        If True, emit a complete HTML page with a summary; otherwise only the
        body fragment

    Examples
    --------
        >>> from docxdiff import diff_documents
        >>> result = diff_documents("lease_v1.docx", "lease_v2.docx")
        >>> html = HtmlDiffRenderer().render(result)

    """

    def __init__(self, inline_styles: bool = True, standalone: bool = True):
        """Initialize the HTML diff renderer."""
        self.inline_styles = inline_styles
        self.standalone = standalone
        self._output: list[str] = []
        self._open_list: Optional[str] = None

    def render(self, document: Document) -> str:
        """Render a diff result to an HTML string.

        Parameters
        ----------
        document : Document
            Result of :func:`docxdiff.diff.api.diff_documents`

        Returns
        -------
        str
            HTML page or fragment

        Raises
        ------
        RenderingError
            If the tree holds a node the renderer does not know

        """
        self._output = []
        self._open_list = None

        try:
            if self.standalone:
                self._write_html_prefix()
                self._render_summary(compute_stats(document), document.diagnostics)
            document.accept(self)
        except AttributeError as e:
            raise RenderingError(f"Cannot render node: {e}", rendering_stage="html", original_error=e) from e

        if self.standalone:
            self._write_html_suffix()
        return "".join(self._output)

    def _write_html_prefix(self) -> None:
        self._output.append("<!DOCTYPE html>\n")
        self._output.append("<html lang='en'>\n")
        self._output.append("<head>\n")
        self._output.append("  <meta charset='UTF-8'>\n")
        self._output.append("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        self._output.append("  <title>Document Diff</title>\n")
        if self.inline_styles:
            self._output.append("  <style>\n")
            self._output.append(self._get_css())
            self._output.append("  </style>\n")
        self._output.append("</head>\n")
        self._output.append("<body>\n")
        self._output.append("<div class='container'>\n")
        self._output.append("<h1>Document Diff</h1>\n")

    def _write_html_suffix(self) -> None:
        self._output.append("</div>\n")
        self._output.append("</body>\n")
        self._output.append("</html>\n")

    def _get_css(self) -> str:
        """Get CSS styles for the highlight classes."""
        return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background-color: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .diff-summary {
            background-color: #f0f4ff;
            border: 1px solid #cbd7f7;
            border-radius: 6px;
            padding: 12px 16px;
            margin-bottom: 20px;
        }
        .diff-summary dl {
            display: grid;
            grid-template-columns: max-content 1fr;
            gap: 4px 16px;
            margin: 0;
        }
        .diff-summary dt {
            font-weight: 600;
            color: #51658a;
        }
        table {
            border-collapse: collapse;
            margin: 16px 0;
            width: 100%;
        }
        td, th {
            border: 1px solid #d0d7de;
            padding: 4px 8px;
            vertical-align: top;
        }
        .added {
            background-color: #e6ffed;
            color: #116329;
        }
        .removed {
            background-color: #ffeef0;
            color: #82071e;
            text-decoration: line-through;
        }
        .diff-line {
            display: block;
        }
        .removed-table {
            border-left: 4px solid #dc3545;
            padding-left: 8px;
        }
        .added-table {
            border-left: 4px solid #28a745;
            padding-left: 8px;
        }
        """

    def _render_summary(self, stats: DiffStats, diagnostics: list[str]) -> None:
        self._output.append("<div class='diff-summary'>\n")
        self._output.append("<dl>\n")
        self._output.append(f"<dt>Added</dt><dd>{stats.added}</dd>\n")
        self._output.append(f"<dt>Removed</dt><dd>{stats.removed}</dd>\n")
        self._output.append(f"<dt>Modified</dt><dd>{stats.modified}</dd>\n")
        self._output.append(f"<dt>Unchanged</dt><dd>{stats.unchanged}</dd>\n")
        self._output.append(f"<dt>Tables</dt><dd>{stats.tables}</dd>\n")
        self._output.append("</dl>\n")
        if diagnostics:
            self._output.append("<ul class='diff-diagnostics'>\n")
            for message in diagnostics:
                self._output.append(f"<li>{escape(message)}</li>\n")
            self._output.append("</ul>\n")
        self._output.append("</div>\n")

    def _close_list(self) -> None:
        if self._open_list:
            self._output.append(f"</{self._open_list}>\n")
            self._open_list = None

    # ------------------------------------------------------------------
    # Visitor methods
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render every block, grouping consecutive list items into lists."""
        for child in node.children:
            if not isinstance(child, ListItem):
                self._close_list()
            child.accept(self)
        self._close_list()

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        tag = node.kind or "p"
        self._output.append(f"<{tag}{render_attributes(node.attributes, node.state)}>{node.content}</{tag}>\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        level = node.level
        self._output.append(f"<h{level}{render_attributes(node.attributes, node.state)}>{node.content}</h{level}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node, opening its list when needed."""
        list_tag = "ol" if node.ordered else "ul"
        if self._open_list != list_tag:
            self._close_list()
            self._output.append(f"<{list_tag}>\n")
            self._open_list = list_tag
        self._output.append(f"<li{render_attributes(node.attributes, node.state)}>{node.content}</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node; one-sided tables get a wrapper container."""
        wrapper = _TABLE_WRAPPERS.get(node.state)
        if wrapper:
            self._output.append(f'<div class="{wrapper}">\n')

        self._output.append(f"<table{render_attributes(node.attributes)}>\n")
        header_count = 0
        for index, row in enumerate(node.rows):
            if not row.is_header or index != header_count:
                break
            header_count += 1

        if header_count:
            self._output.append("<thead>\n")
            for row in node.rows[:header_count]:
                row.accept(self)
            self._output.append("</thead>\n")
        if len(node.rows) > header_count:
            self._output.append("<tbody>\n")
            for row in node.rows[header_count:]:
                row.accept(self)
            self._output.append("</tbody>\n")
        self._output.append("</table>\n")

        if wrapper:
            self._output.append("</div>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        self._output.append(f"<tr{render_attributes(node.attributes, node.state)}>")
        for cell in node.cells:
            cell.accept(self)
        self._output.append("</tr>\n")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node with its span counts."""
        span_attrs = ""
        if node.rowspan > 1:
            span_attrs += f' rowspan="{node.rowspan}"'
        if node.colspan > 1:
            span_attrs += f' colspan="{node.colspan}"'
        self._output.append(f"<{node.tag}{span_attrs}{render_attributes(node.attributes)}>{node.content}</{node.tag}>")


def render_to_file(document: Document, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render a diff result to an HTML file.

    Parameters
    ----------
    document : Document
        Diff result to render
    output_path : str or Path
        Destination path for the generated HTML file
    **kwargs
        Additional keyword arguments forwarded to :class:`HtmlDiffRenderer`

    """
    html = HtmlDiffRenderer(**kwargs).render(document)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
