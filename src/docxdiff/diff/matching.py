#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/matching.py
"""Row and section matching strategies for table diffs.

Every strategy returns a :class:`~docxdiff.ast.nodes.MatchResult` of row
indexes; it never touches cell content. Matches are one-to-one: a row is
consumed by at most one pair.

Strategies
----------
match_positional : row *i* pairs with row *i*
match_numeric : rows keyed by a numeric first cell, similarity fallback
match_similarity : greedy first-cell similarity over candidate rows
match_sectioned : sections paired by position, rows positional inside
pair_header_rows : leftover header rows paired by position
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from docxdiff.ast.nodes import MatchResult, Table, TableRow
from docxdiff.ast.sections import split_into_sections
from docxdiff.ast.utils import block_text
from docxdiff.constants import DEFAULT_MAX_SIMILARITY_ROWS, DEFAULT_SIMILARITY_THRESHOLD, NUMERIC_INDEX_PATTERN
from docxdiff.diff.similarity import best_match

logger = logging.getLogger(__name__)


def numeric_key(row: TableRow) -> Optional[int]:
    """Return the numeric index in the row's first cell, if any.

    ``"3"``, ``"3."`` and ``"3)"`` all yield ``3``; anything else yields
    None.
    """
    match = NUMERIC_INDEX_PATTERN.match(block_text(row.first_cell))
    if match is None:
        return None
    return int(match.group(1))


def _finalize(strategy: str, pairs: list[tuple[int, int]], source: Table, dest: Table) -> MatchResult:
    matched_source = {src for src, _ in pairs}
    matched_dest = {dst for _, dst in pairs}
    return MatchResult(
        strategy=strategy,
        pairs=sorted(pairs, key=lambda pair: pair[1]),
        added=[index for index in range(len(dest.rows)) if index not in matched_dest],
        removed=[index for index in range(len(source.rows)) if index not in matched_source],
    )


def match_positional(source: Table, dest: Table) -> MatchResult:
    """Pair row *i* of the source with row *i* of the destination.

    Destination rows past the shorter table are added; source rows past it
    are reported as removed.
    """
    count = min(len(source.rows), len(dest.rows))
    return MatchResult(
        strategy="positional",
        pairs=[(index, index) for index in range(count)],
        added=list(range(count, len(dest.rows))),
        removed=list(range(count, len(source.rows))),
    )


def match_similarity(
    source: Table,
    dest: Table,
    source_indexes: Sequence[int],
    dest_indexes: Sequence[int],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    max_rows: int = DEFAULT_MAX_SIMILARITY_ROWS,
) -> list[tuple[int, int]]:
    """Greedily pair rows by the similarity of their first-cell text.

    Each source row, in order, takes the most similar destination row not
    yet taken, provided the score is strictly above ``threshold``. Ties go
    to the earliest destination row. Source rows without a candidate are
    dropped from further processing.

    Parameters
    ----------
    source, dest : Table
        Tables owning the rows
    source_indexes, dest_indexes : sequence of int
        Candidate row indexes in each table, in document order
    threshold : float, default 0.5
        Exclusive acceptance threshold
    max_rows : int, default 500
        Only the first ``max_rows`` candidates of each side are compared

    Returns
    -------
    list of tuple[int, int]
        Matched ``(source_index, dest_index)`` pairs

    """
    if len(source_indexes) > max_rows or len(dest_indexes) > max_rows:
        logger.debug(
            "Capping similarity search at %d rows (source=%d, dest=%d)",
            max_rows,
            len(source_indexes),
            len(dest_indexes),
        )
        source_indexes = source_indexes[:max_rows]
        dest_indexes = dest_indexes[:max_rows]

    candidates = [block_text(dest.rows[index].first_cell) for index in dest_indexes]
    taken: set[int] = set()
    pairs: list[tuple[int, int]] = []

    for source_index in source_indexes:
        text = block_text(source.rows[source_index].first_cell)
        found = best_match(text, candidates, taken, threshold)
        if found is None:
            continue
        taken.add(found)
        pairs.append((source_index, dest_indexes[found]))

    return pairs


def _index_rows(table: Table) -> tuple[dict[int, int], list[int]]:
    keyed: dict[int, int] = {}
    rest: list[int] = []
    for index, row in enumerate(table.rows):
        if not row.cells:
            continue
        key = numeric_key(row)
        if key is None or key in keyed:
            rest.append(index)
        else:
            keyed[key] = index
    return keyed, rest


def match_numeric(
    source: Table,
    dest: Table,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    max_rows: int = DEFAULT_MAX_SIMILARITY_ROWS,
) -> MatchResult:
    """Pair rows by the numeric index in their first cell.

    Rows with equal keys are paired regardless of position. Rows without a
    numeric first cell, duplicate keys and keyed rows whose key is missing
    on the other side fall back to :func:`match_similarity`. Rows without
    cells take part in neither pass.
    """
    source_keyed, source_rest = _index_rows(source)
    dest_keyed, dest_rest = _index_rows(dest)

    pairs: list[tuple[int, int]] = []
    for key, source_index in source_keyed.items():
        dest_index = dest_keyed.pop(key, None)
        if dest_index is None:
            source_rest.append(source_index)
        else:
            pairs.append((source_index, dest_index))
    dest_rest.extend(dest_keyed.values())

    fallback = match_similarity(
        source,
        dest,
        sorted(source_rest),
        sorted(dest_rest),
        threshold=threshold,
        max_rows=max_rows,
    )
    if fallback:
        logger.debug("Similarity fallback matched %d of %d unkeyed rows", len(fallback), len(source_rest))

    return _finalize("numeric", pairs + fallback, source, dest)


def pair_header_rows(source: Table, dest: Table, match: MatchResult) -> MatchResult:
    """Pair header rows left unmatched by position.

    Header rows rarely carry a numeric index and a header that gained a
    unit such as ``"(USD)"`` can fall below the similarity threshold. Row
    *i* of both tables is paired when both are header rows with cells and
    neither was consumed by the strategy.
    """
    matched_source = match.matched_source
    matched_dest = match.matched_dest
    extra: list[tuple[int, int]] = []
    for index in range(min(len(source.rows), len(dest.rows))):
        source_row = source.rows[index]
        dest_row = dest.rows[index]
        if index in matched_source or index in matched_dest:
            continue
        if not (source_row.cells and dest_row.cells):
            continue
        if source_row.is_header_row(index) and dest_row.is_header_row(index):
            extra.append((index, index))

    if not extra:
        return match
    logger.debug("Paired %d header row(s) by position", len(extra))
    return _finalize(match.strategy, match.pairs + extra, source, dest)


def match_sectioned(source: Table, dest: Table) -> MatchResult:
    """Pair sections by position and their rows positionally.

    Rows of destination sections past the source's section count are
    added; rows of source sections without a counterpart are removed.
    """
    source_sections = split_into_sections(source)
    dest_sections = split_into_sections(dest)

    pairs: list[tuple[int, int]] = []
    for source_section, dest_section in zip(source_sections, dest_sections):
        count = min(len(source_section), len(dest_section))
        pairs.extend(zip(source_section.indexes[:count], dest_section.indexes[:count]))

    logger.debug("Sectioned match: %d source sections, %d dest sections", len(source_sections), len(dest_sections))
    return _finalize("sectioned", pairs, source, dest)
