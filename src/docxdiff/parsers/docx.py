#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/parsers/docx.py
"""DOCX to document tree converter.

Word documents are converted to HTML with mammoth using an explicit style
map, then read by :class:`~docxdiff.parsers.html.HtmlParser`. The style map
decides which Word paragraph styles become headings and list items, so it
is exposed through :class:`~docxdiff.options.DocxOptions`.

"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from docxdiff.ast.nodes import Document
from docxdiff.constants import DEPS_DOCX
from docxdiff.exceptions import ParsingError
from docxdiff.options import DocxOptions
from docxdiff.parsers.base import BaseParser, InputData
from docxdiff.parsers.html import HtmlParser
from docxdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class DocxParser(BaseParser):
    """Convert a Word document into a :class:`~docxdiff.ast.nodes.Document`.

    Parameters
    ----------
    options : DocxOptions, optional
        Style map and HTML reading options

    """

    def __init__(self, options: DocxOptions | None = None):
        """Initialize the DOCX parser with options."""
        options = options or DocxOptions()
        super().__init__(options)
        self.options: DocxOptions = options

    @requires_dependencies("docx", DEPS_DOCX)
    def parse(self, input_data: InputData) -> Document:
        """Parse a DOCX document into a tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            DOCX file to parse

        Returns
        -------
        Document
            Block tree of the document body

        Raises
        ------
        DependencyError
            If mammoth is not installed
        DocumentNotFoundError
            If a path is given that does not exist
        ParsingError
            If mammoth cannot convert the document

        """
        html_content = self.convert_to_html(input_data)
        document = HtmlParser(self.options).convert_to_ast(html_content)
        if isinstance(input_data, (str, Path)):
            document.metadata["source"] = str(input_data)
        return document

    def convert_to_html(self, input_data: InputData) -> str:
        """Run mammoth over the document and return the generated HTML."""
        import mammoth

        data = self._load_bytes_content(input_data)
        try:
            result = mammoth.convert_to_html(
                io.BytesIO(data),
                style_map="\n".join(self.options.style_map),
                include_default_style_map=self.options.include_default_style_map,
            )
        except Exception as e:
            raise ParsingError(
                f"Failed to convert DOCX document: {e}",
                parsing_stage="docx_to_html",
                original_error=e,
            ) from e

        for message in result.messages:
            logger.warning(f"mammoth {message.type}: {message.message}")

        return result.value


def parse_docx(input_data: InputData, options: DocxOptions | None = None) -> Document:
    """Parse a Word document into a document tree.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], or bytes
        Path to a ``.docx`` file, its bytes or a binary stream
    options : DocxOptions, optional
        Style map and HTML reading options

    Returns
    -------
    Document
        Block tree ready to be diffed

    Examples
    --------
        >>> original = parse_docx("lease_v1.docx")
        >>> modified = parse_docx("lease_v2.docx")

    """
    return DocxParser(options).parse(input_data)
