"""docxdiff - structural diffing of word-processor documents.

docxdiff compares two documents (Word files converted with mammoth, or
HTML exported by any converter) and produces a third document that shows,
inline, which text was added, removed or kept. Unlike a plain text diff it
keeps the document structure intact: table shape, merged cells and row
layout survive, and tables with different row counts, merged cells or
re-ordered rows are still reconciled into one renderable result.

Key Features
------------
- Word-level highlighting inside single-line cells and paragraphs
- Line-level highlighting inside cells holding line breaks
- Positional, numeric-index, similarity and sectioned row matching
- Header cells that only gained a unit annotation such as "(USD)" get
  just that annotation highlighted
- HTML and JSON output, plus a command line tool

Requirements
------------
- Python 3.10+
- beautifulsoup4, rapidfuzz and mammoth

Examples
--------
Compare two Word documents and write an HTML report:

    >>> from docxdiff import diff_documents, render_diff
    >>> result = diff_documents("lease_v1.docx", "lease_v2.docx")
    >>> html = render_diff(result, format="html")

Compare trees built in code:

    >>> from docxdiff.ast import Document, Paragraph
    >>> result = diff_documents(
    ...     Document([Paragraph("The rent is 100")]),
    ...     Document([Paragraph("The rent is 150")]),
    ... )

See Also
--------
docxdiff.ast : Tree node definitions and visitors
docxdiff.diff : The diff engine

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "docxdiff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from docxdiff.ast import Document
from docxdiff.diff.api import diff_documents, render_diff
from docxdiff.diff.document import diff_document
from docxdiff.diff.stats import DiffStats, compute_stats
from docxdiff.exceptions import (
    DependencyError,
    DocumentNotFoundError,
    DocxDiffError,
    FileError,
    MalformedInputError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docxdiff.options import DiffOptions, DocxOptions, HtmlOptions
from docxdiff.parsers import load_document, parse_docx, parse_html

__all__ = [
    "__version__",
    "DependencyError",
    "DiffOptions",
    "DiffStats",
    "Document",
    "DocumentNotFoundError",
    "DocxDiffError",
    "DocxOptions",
    "FileError",
    "HtmlOptions",
    "MalformedInputError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "compute_stats",
    "diff_document",
    "diff_documents",
    "load_document",
    "parse_docx",
    "parse_html",
    "render_diff",
]
