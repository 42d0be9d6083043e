#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/ast/sections.py
"""Section utilities for tables grouped under labeled header rows.

A sectioned table groups its rows under header rows labeled like ``"A."``,
``"B."`` or ``"II."``. Sections are derived on demand and never stored on
the tree.

Functions
---------
Section : Dataclass representing a run of rows under one header
is_section_label : Test a first-cell text against the section-label pattern
split_into_sections : Partition a table's rows into sections

Examples
--------
    >>> sections = split_into_sections(table)
    >>> [section.header for section in sections]
    ['', 'B. Liabilities']

"""

from __future__ import annotations

from dataclasses import dataclass, field

from docxdiff.ast.nodes import Table, TableRow
from docxdiff.ast.utils import block_text
from docxdiff.constants import SECTION_HEADER_PATTERN


@dataclass
class Section:
    """A contiguous run of rows under one header row.

    Parameters
    ----------
    header : str
        Trimmed first-cell text of the header row that opened the section;
        empty for the leading section
    rows : list of TableRow
        Rows of the section, header row included
    indexes : list of int
        Position of each row in the owning table

    """

    header: str = ""
    rows: list[TableRow] = field(default_factory=list)
    indexes: list[int] = field(default_factory=list)

    @property
    def start_index(self) -> int:
        """Table position of the first row, or -1 for an empty section."""
        return self.indexes[0] if self.indexes else -1

    def __len__(self) -> int:
        """Return the number of rows in the section."""
        return len(self.rows)


def is_section_label(text: str) -> bool:
    """Return True when ``text`` looks like a section label such as ``"B. Liabilities"``.

    Parameters
    ----------
    text : str
        Trimmed first-cell text of a row

    """
    return bool(SECTION_HEADER_PATTERN.search(text))


def split_into_sections(table: Table) -> list[Section]:
    """Partition the rows of a table into sections.

    Rows are scanned in order; every row whose first-cell text is a section
    label closes the running section and opens a new one headed by that
    label. Rows before the first label form a leading section without a
    header. Rows without cells belong to no section.

    Parameters
    ----------
    table : Table
        Table to partition

    Returns
    -------
    list of Section
        Sections in table order; empty when the table has no usable rows

    """
    sections: list[Section] = []
    current = Section()

    for index, row in enumerate(table.rows):
        first_cell = row.first_cell
        if first_cell is None:
            continue

        text = block_text(first_cell)
        if is_section_label(text):
            if current.rows:
                sections.append(current)
            current = Section(header=text)

        current.rows.append(row)
        current.indexes.append(index)

    if current.rows:
        sections.append(current)

    return sections
