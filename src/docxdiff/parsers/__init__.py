#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/parsers/__init__.py
"""Input converters producing the document trees compared by the diff engine."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from docxdiff.ast.nodes import Document
from docxdiff.constants import DOCX_EXTENSIONS, HTML_EXTENSIONS
from docxdiff.exceptions import DocumentNotFoundError, ValidationError
from docxdiff.options import DocxOptions
from docxdiff.parsers.base import BaseParser
from docxdiff.parsers.docx import DocxParser, parse_docx
from docxdiff.parsers.html import HtmlParser, parse_html


def load_document(path: Union[str, Path], options: DocxOptions | None = None) -> Document:
    """Load a ``.docx`` or ``.html`` file by its extension.

    Parameters
    ----------
    path : str or Path
        File to load
    options : DocxOptions, optional
        Converter options; HTML files use their HTML reading fields

    Raises
    ------
    DocumentNotFoundError
        If the file does not exist
    ValidationError
        If the extension is not supported

    """
    path = Path(path)
    if not path.exists():
        raise DocumentNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix in DOCX_EXTENSIONS:
        return parse_docx(path, options)
    if suffix in HTML_EXTENSIONS:
        return parse_html(path, options)
    raise ValidationError(
        f"Unsupported input format {suffix or '(none)'!r}; expected one of "
        f"{', '.join(DOCX_EXTENSIONS + HTML_EXTENSIONS)}",
        parameter_name="path",
        parameter_value=str(path),
    )


__all__ = [
    "BaseParser",
    "DocxParser",
    "HtmlParser",
    "load_document",
    "parse_docx",
    "parse_html",
]
