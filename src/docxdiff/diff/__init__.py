#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/__init__.py
"""Structural diff engine.

The engine compares two document trees and builds a third, rooted at the
destination, whose leaves say which text was added, removed or kept.
Tables are matched row by row with a strategy picked from their
structure, so tables with different row counts, merged cells or
re-ordered rows still produce a single coherent result.

Key Components
--------------
- text_diff: word and line diffs over inline markup (difflib)
- similarity: edit-distance scoring for fuzzy matching (rapidfuzz)
- content: comparison of one cell or paragraph
- classifier / matching / tables: table strategy selection and row matching
- document: whole-document orchestration
- stats: summary counts of a result

Examples
--------
    >>> from docxdiff.ast import Document, Paragraph
    >>> from docxdiff.diff import diff_document
    >>> result = diff_document(
    ...     Document([Paragraph("The rent is 100")]),
    ...     Document([Paragraph("The rent is 150")]),
    ... )
    >>> [span.text for span in result.children[0].spans]
    ['The rent is ', '100', '150']

"""

from docxdiff.diff.classifier import TableStructure, classify, content_overlap_ratio
from docxdiff.diff.content import ContentDiff, compare_content
from docxdiff.diff.document import Segment, diff_blocks, diff_document, segment
from docxdiff.diff.matching import match_numeric, match_positional, match_sectioned, match_similarity
from docxdiff.diff.similarity import best_match, levenshtein, similarity
from docxdiff.diff.stats import DiffStats, compute_stats
from docxdiff.diff.tables import diff_table, select_strategy
from docxdiff.diff.text_diff import DiffOp, compute_diff, diff_lines, diff_words

__all__ = [
    "ContentDiff",
    "DiffOp",
    "DiffStats",
    "Segment",
    "TableStructure",
    "best_match",
    "classify",
    "compare_content",
    "compute_diff",
    "compute_stats",
    "content_overlap_ratio",
    "diff_blocks",
    "diff_document",
    "diff_lines",
    "diff_table",
    "diff_words",
    "levenshtein",
    "match_numeric",
    "match_positional",
    "match_sectioned",
    "match_similarity",
    "segment",
    "select_strategy",
    "similarity",
]
