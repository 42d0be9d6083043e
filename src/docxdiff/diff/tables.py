#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/tables.py
"""Table diff orchestration.

:func:`diff_table` classifies a table pair, picks a row matching strategy,
compares matched rows cell by cell and assembles a result table rooted at
the destination. Every destination row appears in the result exactly once.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from docxdiff.ast.nodes import DiffState, MatchResult, Table, TableCell, TableRow
from docxdiff.constants import TableStrategy
from docxdiff.diff.classifier import classify, content_overlap_ratio
from docxdiff.diff.content import ContentDiff, compare_content, mark_added, mark_removed
from docxdiff.diff.matching import match_numeric, match_positional, match_sectioned, pair_header_rows
from docxdiff.options import DiffOptions

logger = logging.getLogger(__name__)


def merge_attributes(source: dict[str, str], dest: dict[str, str]) -> dict[str, str]:
    """Carry the source's structural attributes onto a destination element.

    ``class`` is taken from the source. The source ``style`` is appended to
    the destination's unless the destination already contains it. Other
    attributes of either side are kept, the source winning on conflicts.
    """
    merged = {**dest, **source}
    source_style = source.get("style", "").strip()
    dest_style = dest.get("style", "").strip()
    if source_style and dest_style and source_style not in dest_style:
        merged["style"] = f"{dest_style.rstrip(';')}; {source_style}"
    elif dest_style:
        merged["style"] = dest_style
    return merged


def _apply(cell: TableCell, result: ContentDiff, **changes: Any) -> TableCell:
    metadata = dict(cell.metadata)
    if result.granularity:
        metadata["granularity"] = result.granularity
    changes.setdefault("attributes", dict(cell.attributes))
    return replace(
        cell,
        content=result.markup,
        state=result.state,
        spans=list(result.spans),
        metadata=metadata,
        **changes,
    )


def compare_cells(source: TableCell, dest: TableCell, *, header: bool = False, copy_structure: bool = True) -> TableCell:
    """Compare two matched cells.

    Parameters
    ----------
    source : TableCell
        Cell from the source table
    dest : TableCell
        Cell from the destination table
    header : bool, default False
        Whether the cell sits in a header row
    copy_structure : bool, default True
        Copy the source's span counts and attributes onto the result. Callers
        pass False when the two rows disagree on their cell count.

    Returns
    -------
    TableCell
        New destination cell with annotated content

    """
    result = compare_content(source.content, dest.content, header=header)
    if not copy_structure:
        return _apply(dest, result)
    return _apply(
        dest,
        result,
        rowspan=source.rowspan,
        colspan=source.colspan,
        attributes=merge_attributes(source.attributes, dest.attributes),
    )


def mark_row_added(row: TableRow) -> TableRow:
    """Return a copy of a destination-only row with every cell marked added."""
    return replace(
        row,
        cells=[_apply(cell, mark_added(cell.content)) for cell in row.cells],
        attributes=dict(row.attributes),
        state=DiffState.ADDED,
        metadata=dict(row.metadata),
    )


def mark_row_removed(row: TableRow) -> TableRow:
    """Return a copy of a source-only row with every cell marked removed."""
    return replace(
        row,
        cells=[_apply(cell, mark_removed(cell.content)) for cell in row.cells],
        attributes=dict(row.attributes),
        state=DiffState.REMOVED,
        metadata=dict(row.metadata),
    )


def compare_rows(source: TableRow, dest: TableRow, *, header: bool = False) -> TableRow:
    """Compare two matched rows cell by cell.

    Cells are paired by position up to the shorter row. Extra destination
    cells are added; extra source cells have no destination counterpart
    and are dropped.
    """
    structurally_equal = len(source.cells) == len(dest.cells)
    count = min(len(source.cells), len(dest.cells))

    cells = [
        compare_cells(source.cells[index], dest.cells[index], header=header, copy_structure=structurally_equal)
        for index in range(count)
    ]
    cells.extend(_apply(cell, mark_added(cell.content)) for cell in dest.cells[count:])

    changed = any(cell.state is not DiffState.UNCHANGED for cell in cells)
    attributes = merge_attributes(source.attributes, dest.attributes) if structurally_equal else dict(dest.attributes)
    return replace(
        dest,
        cells=cells,
        attributes=attributes,
        state=DiffState.MODIFIED if changed else DiffState.UNCHANGED,
        metadata=dict(dest.metadata),
    )


def select_strategy(source: Table, dest: Table, options: DiffOptions) -> TableStrategy:
    """Choose the row matching strategy for a table pair.

    A forced ``simple`` or ``complex`` mode bypasses classification.
    Otherwise section headers select sectioned matching, merged cells select
    numeric-index matching, and the remaining tables are positional when
    enough aligned cells agree.
    """
    if options.mode == "simple":
        return "positional"
    if options.mode == "complex":
        return "numeric"

    source_structure = classify(source)
    dest_structure = classify(dest)
    if source_structure.has_section_headers or dest_structure.has_section_headers:
        return "sectioned"
    if source_structure.has_merged_cells or dest_structure.has_merged_cells:
        return "numeric"

    ratio = content_overlap_ratio(source, dest)
    logger.debug("Content overlap ratio %.2f", ratio)
    return "positional" if ratio >= options.content_overlap_threshold else "numeric"


def match_rows(source: Table, dest: Table, strategy: TableStrategy, options: DiffOptions) -> MatchResult:
    """Run one row matching strategy.

    The numeric and sectioned strategies are followed by a positional pass
    over header rows they left unmatched.
    """
    if strategy == "positional":
        return match_positional(source, dest)
    if strategy == "sectioned":
        match = match_sectioned(source, dest)
    else:
        match = match_numeric(
            source,
            dest,
            threshold=options.similarity_threshold,
            max_rows=options.max_similarity_rows,
        )
    return pair_header_rows(source, dest, match)


def diff_table(source: Table, dest: Table, options: Optional[DiffOptions] = None) -> Table:
    """Compare two tables and build an annotated destination table.

    Parameters
    ----------
    source : Table
        Table from the original document
    dest : Table
        Table at the same position in the modified document
    options : DiffOptions, optional
        Matching options; defaults apply when omitted

    Returns
    -------
    Table
        New table rooted at ``dest``. Its ``metadata["match"]`` holds the
        :class:`MatchResult` that produced it.

    """
    options = options or DiffOptions()
    strategy = select_strategy(source, dest, options)
    logger.debug(
        "Diffing table (%d source rows, %d dest rows) with %s strategy",
        len(source.rows),
        len(dest.rows),
        strategy,
    )
    match = match_rows(source, dest, strategy, options)

    rows: list[Optional[TableRow]] = [None] * len(dest.rows)
    for source_index, dest_index in match.pairs:
        source_row = source.rows[source_index]
        dest_row = dest.rows[dest_index]
        header = source_row.is_header_row(source_index) or dest_row.is_header_row(dest_index)
        rows[dest_index] = compare_rows(source_row, dest_row, header=header)

    # Any destination row no strategy consumed is added
    for dest_index, row in enumerate(rows):
        if row is None:
            rows[dest_index] = mark_row_added(dest.rows[dest_index])
            if dest_index not in match.added:
                match.added.append(dest_index)
    match.added.sort()

    result_rows = [row for row in rows if row is not None]
    if strategy == "positional":
        result_rows.extend(mark_row_removed(source.rows[index]) for index in match.removed)

    changed = any(row.state is not DiffState.UNCHANGED for row in result_rows)
    return replace(
        dest,
        rows=result_rows,
        attributes=merge_attributes(source.attributes, dest.attributes),
        state=DiffState.MODIFIED if changed else DiffState.UNCHANGED,
        metadata={**dest.metadata, "match": match},
    )


def mark_table_added(table: Table) -> Table:
    """Return a copy of a destination-only table with every cell marked added."""
    return replace(
        table,
        rows=[mark_row_added(row) for row in table.rows],
        attributes=dict(table.attributes),
        state=DiffState.ADDED,
        metadata=dict(table.metadata),
    )


def mark_table_removed(table: Table) -> Table:
    """Return a copy of a source-only table with every cell marked removed."""
    return replace(
        table,
        rows=[mark_row_removed(row) for row in table.rows],
        attributes=dict(table.attributes),
        state=DiffState.REMOVED,
        metadata=dict(table.metadata),
    )
