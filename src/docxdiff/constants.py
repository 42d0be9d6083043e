#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the docxdiff library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Matching Thresholds - Heuristic acceptance levels
3. Markup Patterns - Regular expressions over inline markup and cell text
4. Highlight Classes - Class names used when materializing spans
5. Converter Defaults - Style map and dependencies of the input converters
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TableMode = Literal["auto", "simple", "complex"]
TableStrategy = Literal["positional", "numeric", "sectioned"]
SegmentKind = Literal["table", "text"]
ParagraphKind = Literal["p", "div", "blockquote"]

# =============================================================================
# Matching Thresholds
# =============================================================================

DEFAULT_TABLE_MODE: TableMode = "auto"

# Row/paragraph similarity must be strictly above this value to match
DEFAULT_SIMILARITY_THRESHOLD = 0.5

# Share of a paragraph's words that must appear in a candidate (strictly above)
DEFAULT_WORD_OVERLAP_THRESHOLD = 0.5

# Positional cell agreement at or above this ratio selects the simple strategy
DEFAULT_CONTENT_OVERLAP_THRESHOLD = 0.5

# Tables with more rows than this skip the similarity pass
DEFAULT_MAX_SIMILARITY_ROWS = 500

# =============================================================================
# Markup Patterns
# =============================================================================

# A <br> that is not inside an open tag-like construct
LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>(?![^<]*>)", re.IGNORECASE)

# Whole tags are single tokens; text splits into whitespace and word runs
WORD_TOKEN_PATTERN = re.compile(r"<[^>]*>|\s+|[^\s<]+|<")

MARKUP_TAG_PATTERN = re.compile(r"<[^>]*>")

# "A.", "B." at the start or after whitespace; roman numerals after whitespace.
# Loose on purpose: an initial as in "Paid to J. Smith" also counts as a label.
SECTION_HEADER_PATTERN = re.compile(r"^[A-Z]\.|\s[A-Z]\.|(?:^|\s)[IVX]+\.")

# "12", "12." or "12)"
NUMERIC_INDEX_PATTERN = re.compile(r"^(\d+)[.)]?$")

PARENTHETICAL_PATTERN = re.compile(r"\([^)]+\)")

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")

# =============================================================================
# Highlight Classes
# =============================================================================

ADDED_CLASS = "added"
REMOVED_CLASS = "removed"
LINE_HIGHLIGHT_CLASS = "diff-line"
ADDED_TABLE_CLASS = "added-table"
REMOVED_TABLE_CLASS = "removed-table"

# =============================================================================
# Converter Defaults
# =============================================================================

DEFAULT_STYLE_MAP: tuple[str, ...] = (
    "p[style-name='Normal'] => p",
    "p[style-name='Heading 1'] => h1",
    "p[style-name='Heading 2'] => h2",
    "p[style-name='Title'] => h2:fresh",
    "p[style-name='Subtitle'] => h3:fresh",
    "p[style-name='List Number'] => ol > li:fresh",
    "p[style-name='List Number 2'] => ol > li:fresh",
    "p[style-name='List Number 3'] => ol > li:fresh",
    "p[style-name='List Paragraph'] => ol > li:fresh",
    "b => strong",
    "i => em",
    "u => u",
)

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_DOCX = [("mammoth", "mammoth", ">=1.6.0")]

DEFAULT_HTML_PARSER = "html.parser"

DOCX_EXTENSIONS = (".docx",)
HTML_EXTENSIONS = (".html", ".htm", ".xhtml")
