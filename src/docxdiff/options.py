#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/options.py
"""Options controlling the structural diff engine and its input converters.

The options object is a frozen dataclass so a single instance can be shared
between invocations; use :meth:`CloneFrozenMixin.create_updated` to derive a
modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docxdiff.constants import (
    DEFAULT_CONTENT_OVERLAP_THRESHOLD,
    DEFAULT_HTML_PARSER,
    DEFAULT_MAX_SIMILARITY_ROWS,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_STYLE_MAP,
    DEFAULT_TABLE_MODE,
    DEFAULT_WORD_OVERLAP_THRESHOLD,
    TableMode,
)
from docxdiff.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration for :func:`docxdiff.diff.api.diff_documents`.

    Parameters
    ----------
    mode : {"auto", "simple", "complex"}, default "auto"
        Table strategy selection. ``"auto"`` lets the structure classifier
        decide; ``"simple"`` forces positional row matching and
        ``"complex"`` forces numeric-index matching with a similarity
        fallback. Forcing a mode also bypasses sectioned handling.
    similarity_threshold : float, default 0.5
        Rows are paired by content similarity only when the score is
        strictly above this value.
    word_overlap_threshold : float, default 0.5
        A paragraph matches a candidate when strictly more than this share
        of its words appear in the candidate.
    content_overlap_threshold : float, default 0.5
        In auto mode, plain tables whose positional cell agreement reaches
        this ratio use the simple strategy.
    max_similarity_rows : int, default 500
        Upper bound on rows considered by the similarity pass of one table.

    """

    mode: TableMode = field(
        default=DEFAULT_TABLE_MODE,
        metadata={"help": "Table strategy: auto, simple or complex", "importance": "core"},
    )
    similarity_threshold: float = field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        metadata={"help": "Minimum (exclusive) row similarity for fuzzy matching", "importance": "advanced"},
    )
    word_overlap_threshold: float = field(
        default=DEFAULT_WORD_OVERLAP_THRESHOLD,
        metadata={"help": "Minimum (exclusive) shared-word ratio for paragraph matching", "importance": "advanced"},
    )
    content_overlap_threshold: float = field(
        default=DEFAULT_CONTENT_OVERLAP_THRESHOLD,
        metadata={"help": "Cell agreement ratio selecting the simple table strategy", "importance": "advanced"},
    )
    max_similarity_rows: int = field(
        default=DEFAULT_MAX_SIMILARITY_ROWS,
        metadata={"help": "Rows per table considered by similarity matching", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        if self.mode not in get_args(TableMode):
            raise ValidationError(
                f"mode must be one of {', '.join(get_args(TableMode))}, got {self.mode!r}",
                parameter_name="mode",
                parameter_value=self.mode,
            )

        for name in ("similarity_threshold", "word_overlap_threshold", "content_overlap_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValidationError(
                    f"{name} must be between 0.0 and 1.0, got {value}",
                    parameter_name=name,
                    parameter_value=value,
                )

        if self.max_similarity_rows < 0:
            raise ValidationError(
                f"max_similarity_rows must be non-negative, got {self.max_similarity_rows}",
                parameter_name="max_similarity_rows",
                parameter_value=self.max_similarity_rows,
            )


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration for reading converter HTML into a document tree.

    Parameters
    ----------
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder. ``"lxml"`` and ``"html5lib"`` need their
        packages installed.
    collapse_whitespace : bool, default True
        Collapse whitespace runs inside block markup into single spaces.

    """

    html_parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser: html.parser, lxml or html5lib", "importance": "advanced"},
    )
    collapse_whitespace: bool = field(
        default=True,
        metadata={"help": "Collapse whitespace runs in block markup", "importance": "advanced"},
    )


@dataclass(frozen=True)
class DocxOptions(HtmlOptions):
    """Configuration for converting Word documents with mammoth.

    Parameters
    ----------
    style_map : tuple of str, default DEFAULT_STYLE_MAP
        Mammoth style mappings, one rule per entry
    include_default_style_map : bool, default True
        Keep mammoth's built-in mappings underneath ``style_map``

    """

    style_map: tuple[str, ...] = field(
        default=DEFAULT_STYLE_MAP,
        metadata={"help": "Mammoth style map rules", "importance": "advanced"},
    )
    include_default_style_map: bool = field(
        default=True,
        metadata={"help": "Keep mammoth's default style map", "importance": "advanced"},
    )
