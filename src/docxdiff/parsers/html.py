#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/parsers/html.py
"""HTML to document tree converter.

Reads the HTML emitted by a document converter (mammoth, a browser export,
a hand-written fixture) into the block tree the diff engine compares.
Leaf blocks keep their inner HTML as inline markup so bold, italic,
underline and line breaks survive the diff untouched.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from docxdiff.ast.nodes import Block, Document, Heading, ListItem, Paragraph, Table, TableCell, TableRow
from docxdiff.constants import DEPS_HTML, WHITESPACE_RUN_PATTERN
from docxdiff.exceptions import DependencyError
from docxdiff.options import HtmlOptions
from docxdiff.parsers.base import BaseParser, InputData
from docxdiff.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from bs4.element import Tag

logger = logging.getLogger(__name__)

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LIST_TAGS = frozenset({"ul", "ol"})
SKIPPED_TAGS = frozenset({"script", "style", "head", "title", "meta", "link", "noscript", "template", "hr"})
BLOCK_ELEMENTS = frozenset(
    {
        "p",
        "table",
        "li",
        "div",
        "section",
        "article",
        "main",
        "header",
        "footer",
        "nav",
        "aside",
        "blockquote",
        "figure",
        "pre",
        "address",
        "center",
        "form",
        "dl",
        "dt",
        "dd",
        "body",
    }
    | HEADING_TAGS
    | LIST_TAGS
    | SKIPPED_TAGS
)
SPAN_ATTRIBUTES = ("rowspan", "colspan")


def parse_span(value: Any) -> int:
    """Parse a ``rowspan``/``colspan`` value; anything invalid counts as 1."""
    try:
        span = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return span if span >= 1 else 1


class HtmlParser(BaseParser):
    """Convert converter HTML into a :class:`~docxdiff.ast.nodes.Document`.

    Parameters
    ----------
    options : HtmlOptions, optional
        Parser configuration

    Examples
    --------
        >>> doc = HtmlParser().parse("<p>The rent is <strong>100</strong></p>")
        >>> doc.children[0].content
        'The rent is <strong>100</strong>'

    """

    _ELEMENT_HANDLERS = {
        "p": "_process_paragraph",
        "table": "_process_table",
        "ul": "_process_list",
        "ol": "_process_list",
        "li": "_process_list_item",
        **{name: "_process_heading" for name in HEADING_TAGS},
    }

    def __init__(self, options: HtmlOptions | None = None):
        """Initialize the HTML parser with options."""
        options = options or HtmlOptions()
        super().__init__(options)
        self.options: HtmlOptions = options

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: InputData) -> Document:
        """Parse an HTML document into a tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            HTML markup, or a path/stream/bytes holding it

        Returns
        -------
        Document
            Block tree of the document body

        Raises
        ------
        DependencyError
            If beautifulsoup4 (or the configured tree builder) is missing
        DocumentNotFoundError
            If a path is given that does not exist

        """
        return self.convert_to_ast(self._load_text_content(input_data))

    def convert_to_ast(self, html_content: str) -> Document:
        """Convert an HTML string to a document tree."""
        from bs4 import BeautifulSoup, FeatureNotFound

        try:
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"BeautifulSoup tree builder {self.options.html_parser!r} is not installed: {e}",
            ) from e

        root = soup.body or soup
        children = self._process_container(root)
        logger.debug("Parsed HTML into %d blocks", len(children))
        return Document(children=children)

    # ------------------------------------------------------------------
    # Block processing
    # ------------------------------------------------------------------

    def _is_block_element(self, node: Any) -> bool:
        name = getattr(node, "name", None)
        return isinstance(name, str) and name in BLOCK_ELEMENTS

    def _has_block_children(self, node: Tag) -> bool:
        return any(self._is_block_element(child) for child in node.children)

    def _process_container(self, node: Tag) -> list[Block]:
        """Collect the blocks of a container, wrapping stray inline content in paragraphs."""
        from bs4.element import NavigableString, PreformattedString

        blocks: list[Block] = []
        inline_buffer: list[str] = []

        def flush() -> None:
            markup = self._clean("".join(inline_buffer))
            inline_buffer.clear()
            if markup:
                blocks.append(Paragraph(content=markup))

        for child in list(node.children):
            if isinstance(child, PreformattedString):
                continue
            if isinstance(child, NavigableString):
                inline_buffer.append(child.output_ready(formatter="minimal"))
                continue
            if not self._is_block_element(child):
                inline_buffer.append(child.decode())
                continue

            flush()
            if child.name in SKIPPED_TAGS:
                continue
            blocks.extend(self._process_block(child))

        flush()
        return blocks

    def _process_block(self, node: Tag) -> list[Block]:
        handler_name = self._ELEMENT_HANDLERS.get(node.name)
        if handler_name:
            result = getattr(self, handler_name)(node)
            if result is None:
                return []
            return result if isinstance(result, list) else [result]

        if self._has_block_children(node):
            return self._process_container(node)

        markup = self._inner_markup(node)
        if not markup:
            return []
        kind = node.name if node.name in ("div", "blockquote") else "div"
        return [Paragraph(content=markup, kind=kind, attributes=self._attributes(node))]

    def _process_paragraph(self, node: Tag) -> Optional[Paragraph]:
        markup = self._inner_markup(node)
        if not markup:
            return None
        return Paragraph(content=markup, kind="p", attributes=self._attributes(node))

    def _process_heading(self, node: Tag) -> Heading:
        return Heading(
            level=int(node.name[1]),
            content=self._inner_markup(node),
            attributes=self._attributes(node),
        )

    def _process_list(self, node: Tag, depth: int = 0) -> list[ListItem]:
        """Flatten a list into items; nested lists follow their parent item."""
        from bs4.element import Tag

        ordered = node.name == "ol"
        items: list[ListItem] = []
        for li in node.find_all("li", recursive=False):
            nested = [child.extract() for child in list(li.children) if isinstance(child, Tag) and child.name in LIST_TAGS]
            items.append(
                ListItem(
                    content=self._inner_markup(li),
                    ordered=ordered,
                    attributes=self._attributes(li),
                    metadata={"depth": depth},
                )
            )
            for sublist in nested:
                items.extend(self._process_list(sublist, depth + 1))
        return items

    def _process_list_item(self, node: Tag) -> ListItem:
        parent = node.parent
        ordered = parent is not None and parent.name == "ol"
        return ListItem(content=self._inner_markup(node), ordered=ordered, attributes=self._attributes(node))

    def _process_table(self, node: Tag) -> Table:
        """Build a table from its own rows; rows of nested tables stay inside their cells."""
        rows: list[TableRow] = []
        for tr in node.find_all("tr"):
            if tr.find_parent("table") is not node:
                continue
            cells = [self._process_cell(cell) for cell in tr.find_all(["td", "th"], recursive=False)]
            in_head = tr.parent is not None and tr.parent.name == "thead"
            is_header = in_head or (bool(cells) and all(cell.tag == "th" for cell in cells))
            rows.append(TableRow(cells=cells, is_header=is_header, attributes=self._attributes(tr)))
        return Table(rows=rows, attributes=self._attributes(node))

    def _process_cell(self, node: Tag) -> TableCell:
        attributes = {key: value for key, value in self._attributes(node).items() if key not in SPAN_ATTRIBUTES}
        return TableCell(
            content=self._inner_markup(node),
            rowspan=parse_span(node.get("rowspan", 1)),
            colspan=parse_span(node.get("colspan", 1)),
            tag="th" if node.name == "th" else "td",
            attributes=attributes,
        )

    # ------------------------------------------------------------------
    # Markup helpers
    # ------------------------------------------------------------------

    def _clean(self, markup: str) -> str:
        if self.options.collapse_whitespace:
            markup = WHITESPACE_RUN_PATTERN.sub(" ", markup)
        return markup.strip()

    def _inner_markup(self, node: Tag) -> str:
        return self._clean(node.decode_contents())

    @staticmethod
    def _attributes(node: Tag) -> dict[str, str]:
        return {key: " ".join(value) if isinstance(value, list) else str(value) for key, value in node.attrs.items()}


def parse_html(input_data: InputData, options: HtmlOptions | None = None) -> Document:
    """Parse HTML markup (or a file holding it) into a document tree.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], or bytes
        HTML markup, a path to an HTML file, raw bytes or a binary stream
    options : HtmlOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Block tree ready to be diffed

    """
    return HtmlParser(options).parse(input_data)
