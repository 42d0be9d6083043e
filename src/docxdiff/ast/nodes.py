#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/ast/nodes.py
"""Node classes for the document trees compared by the diff engine.

A document tree is an ordered sequence of blocks produced by an external
converter. Leaf blocks (paragraphs, headings, list items and table cells)
carry *inline markup*: an HTML fragment that keeps bold/italic/underline and
line-break structure intact. The diff engine never edits these nodes; it
builds new nodes whose leaves carry a :class:`DiffState` and the
:class:`DiffSpan` sequence that explains the change.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    - Document
    - Paragraph, Heading, ListItem (leaf blocks)
    - Table, TableRow, TableCell

Diff records:

    - DiffState, DiffSpan
    - MatchResult

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Literal, Optional, Union


class DiffState(str, Enum):
    """Classification of a block, row, cell or span in a diff result."""

    UNCHANGED = "unchanged"
    MODIFIED = "modified"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class DiffSpan:
    """A contiguous run of markup tagged with a diff state.

    Parameters
    ----------
    text : str
        Markup fragment covered by this span
    state : DiffState
        One of ``ADDED``, ``REMOVED`` or ``UNCHANGED``

    """

    text: str
    state: DiffState

    def __post_init__(self) -> None:
        """Reject the block-level ``MODIFIED`` state on spans."""
        if self.state is DiffState.MODIFIED:
            raise ValueError("DiffSpan state must be ADDED, REMOVED or UNCHANGED")


class Node(ABC):
    """Base class for all tree nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node holding the ordered block sequence.

    Parameters
    ----------
    children : list of Block, default = empty list
        Blocks in document order
    metadata : dict, default = empty dict
        Document-level metadata. Diff results store ``diagnostics`` here.

    """

    children: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    @property
    def diagnostics(self) -> list[str]:
        """Messages describing input nodes skipped while diffing."""
        return list(self.metadata.get("diagnostics", []))

    def iter_tables(self) -> Iterator[Table]:
        """Yield tables in document order."""
        for child in self.children:
            if isinstance(child, Table):
                yield child


@dataclass
class Paragraph(Node):
    """Paragraph-like text block.

    Parameters
    ----------
    content : str, default = ""
        Inline markup of the paragraph
    kind : str, default = "p"
        Style hint from the converter, carried through unchanged
    attributes : dict, default = empty dict
        Raw structural attributes (``class``, ``style``...)
    state : DiffState, default = UNCHANGED
        Diff classification on result trees
    spans : list of DiffSpan, default = empty list
        Change spans on modified result blocks

    """

    content: str = ""
    kind: str = "p"
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    spans: list[DiffSpan] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading block with a level from 1 to 6.

    Parameters
    ----------
    level : int
        Heading level, carried through unchanged
    content : str, default = ""
        Inline markup of the heading

    """

    level: int
    content: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    spans: list[DiffSpan] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class ListItem(Node):
    """One list entry; consecutive items are grouped when rendered.

    Parameters
    ----------
    content : str, default = ""
        Inline markup of the item
    ordered : bool, default = False
        Whether the item belongs to an ordered list

    """

    content: str = ""
    ordered: bool = False
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    spans: list[DiffSpan] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class TableCell(Node):
    """Table cell holding inline markup and span counts.

    Parameters
    ----------
    content : str, default = ""
        Inline markup of the cell
    rowspan : int, default = 1
        Number of rows this cell spans
    colspan : int, default = 1
        Number of columns this cell spans
    tag : {"td", "th"}, default = "td"
        Cell element name from the converter
    attributes : dict, default = empty dict
        Raw structural attributes other than the span counts

    """

    content: str = ""
    rowspan: int = 1
    colspan: int = 1
    tag: Literal["td", "th"] = "td"
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    spans: list[DiffSpan] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)

    @property
    def is_merged(self) -> bool:
        """Whether the cell spans more than one row or column."""
        return self.rowspan > 1 or self.colspan > 1


@dataclass
class TableRow(Node):
    """Table row containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    is_header : bool, default = False
        Explicit header marker (``thead`` rows, all-``th`` rows)
    attributes : dict, default = empty dict
        Raw structural attributes

    """

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)

    def is_header_row(self, index: int) -> bool:
        """Return True for the first row of a table or an explicit header row.

        Parameters
        ----------
        index : int
            Position of this row inside its table

        """
        return self.is_header or index == 0

    @property
    def first_cell(self) -> Optional[TableCell]:
        """The leading cell, or None for an empty row."""
        return self.cells[0] if self.cells else None


@dataclass
class Table(Node):
    """Table block.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Rows in document order, header rows included
    attributes : dict, default = empty dict
        Wrapper attributes preserved verbatim in output
    state : DiffState, default = UNCHANGED
        ``ADDED``/``REMOVED`` for tables present in one tree only
    metadata : dict, default = empty dict
        Diff results store the :class:`MatchResult` under ``"match"``

    """

    rows: list[TableRow] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    state: DiffState = DiffState.UNCHANGED
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)

    def iter_cells(self) -> Iterator[TableCell]:
        """Yield every cell in row-major order."""
        for row in self.rows:
            yield from row.cells

    @property
    def cell_count(self) -> int:
        """Total number of cells across all rows."""
        return sum(len(row.cells) for row in self.rows)


TextBlock = Union[Paragraph, Heading, ListItem]
Block = Union[Paragraph, Heading, ListItem, Table]


# ============================================================================
# Match bookkeeping
# ============================================================================


@dataclass
class MatchResult:
    """Row matching outcome for one table comparison.

    Parameters
    ----------
    strategy : str
        Strategy that produced the match (``positional``, ``numeric`` or
        ``sectioned``)
    pairs : list of tuple[int, int]
        Matched ``(source_row, dest_row)`` indexes
    added : list of int
        Destination rows with no counterpart
    removed : list of int
        Source rows with no counterpart. Positional matches render them as
        trailing removed rows; the other strategies leave them out because
        the output is rooted at the destination.

    """

    strategy: str
    pairs: list[tuple[int, int]] = field(default_factory=list)
    added: list[int] = field(default_factory=list)
    removed: list[int] = field(default_factory=list)

    @property
    def matched_dest(self) -> set[int]:
        """Destination rows consumed by a match."""
        return {dest for _, dest in self.pairs}

    @property
    def matched_source(self) -> set[int]:
        """Source rows consumed by a match."""
        return {src for src, _ in self.pairs}
