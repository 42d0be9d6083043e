#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/renderers/__init__.py
"""Renderers for diff result trees.

Available Renderers
-------------------
- HtmlDiffRenderer: HTML page or fragment with inline added/removed highlights
- JsonDiffRenderer: Structured JSON output for programmatic access

Examples
--------
Render a diff as HTML:
    >>> from docxdiff import diff_documents
    >>> from docxdiff.renderers import HtmlDiffRenderer
    >>> result = diff_documents("old.docx", "new.docx")
    >>> html = HtmlDiffRenderer().render(result)

"""

from docxdiff.renderers.html import HtmlDiffRenderer
from docxdiff.renderers.json import JsonDiffRenderer

__all__ = [
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
]
