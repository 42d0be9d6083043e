#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/document.py
"""Whole-document diff orchestration.

Both trees are segmented into alternating runs of tables and text blocks.
Tables are aligned by their index in the document; the text runs between
them (the *gaps*) are aligned the same way and diffed as sequences of
paragraphs. The result is rooted at the destination document: source-only
material appears as removed blocks next to the place it disappeared from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from docxdiff.ast.nodes import Block, DiffSpan, DiffState, Document, Table, TextBlock
from docxdiff.ast.utils import markup_to_text
from docxdiff.ast.visitors import StructureValidator
from docxdiff.constants import SegmentKind
from docxdiff.diff.content import compare_content
from docxdiff.diff.similarity import first_overlapping
from docxdiff.diff.tables import diff_table, mark_table_added, mark_table_removed
from docxdiff.diff.text_diff import iter_operations
from docxdiff.options import DiffOptions

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    """A maximal run of blocks of one kind.

    Parameters
    ----------
    kind : {"table", "text"}
        Whether the run holds tables or text blocks
    blocks : list of Block
        Blocks of the run in document order

    """

    kind: SegmentKind
    blocks: list[Block] = field(default_factory=list)


def segment(document: Document) -> list[Segment]:
    """Split a document into alternating table and text runs."""
    segments: list[Segment] = []
    for block in document.children:
        kind: SegmentKind = "table" if isinstance(block, Table) else "text"
        if segments and segments[-1].kind == kind:
            segments[-1].blocks.append(block)
        else:
            segments.append(Segment(kind, [block]))
    return segments


def _gaps_and_tables(segments: Sequence[Segment]) -> tuple[list[list[TextBlock]], list[Table]]:
    """Return the text gaps around each table, and the tables.

    There is always one more gap than tables: gap *k* holds the text blocks
    between table *k - 1* and table *k*, possibly none.
    """
    gaps: list[list[TextBlock]] = [[]]
    tables: list[Table] = []
    for run in segments:
        if run.kind == "text":
            gaps[-1].extend(run.blocks)  # type: ignore[arg-type]
            continue
        for table in run.blocks:
            tables.append(table)  # type: ignore[arg-type]
            gaps.append([])
    return gaps, tables


def _mark_block(block: TextBlock, state: DiffState) -> TextBlock:
    return replace(
        block,
        state=state,
        spans=[DiffSpan(block.content, state)] if block.content else [],
        attributes=dict(block.attributes),
        metadata=dict(block.metadata),
    )


def _unchanged_block(block: TextBlock) -> TextBlock:
    return replace(
        block,
        state=DiffState.UNCHANGED,
        spans=[],
        attributes=dict(block.attributes),
        metadata=dict(block.metadata),
    )


def _compare_blocks(source: TextBlock, dest: TextBlock) -> TextBlock:
    result = compare_content(source.content, dest.content, granularity="word")
    return replace(
        dest,
        content=result.markup,
        state=result.state,
        spans=list(result.spans),
        attributes=dict(dest.attributes),
        metadata=dict(dest.metadata),
    )


def _resolve_replacement(
    source_blocks: Sequence[TextBlock],
    dest_blocks: Sequence[TextBlock],
    threshold: float,
) -> list[TextBlock]:
    """Pair the blocks of one replaced region and emit them in destination order.

    Each source block, in order, takes the first untaken destination block
    sharing more than ``threshold`` of its words. Source blocks without a
    partner are emitted as removed just before the next destination block
    that follows them.
    """
    candidates = [markup_to_text(block.content) for block in dest_blocks]
    taken: set[int] = set()
    partner_of: dict[int, int] = {}
    for source_index, block in enumerate(source_blocks):
        found = first_overlapping(markup_to_text(block.content), candidates, taken, threshold)
        if found is not None:
            taken.add(found)
            partner_of[found] = source_index

    output: list[TextBlock] = []
    emitted: set[int] = set()

    def flush_removed(limit: int) -> None:
        for source_index in range(limit):
            if source_index in emitted or source_index in partner_of.values():
                continue
            emitted.add(source_index)
            output.append(_mark_block(source_blocks[source_index], DiffState.REMOVED))

    for dest_index, block in enumerate(dest_blocks):
        source_index = partner_of.get(dest_index)
        if source_index is None:
            output.append(_mark_block(block, DiffState.ADDED))
            continue
        flush_removed(source_index)
        output.append(_compare_blocks(source_blocks[source_index], block))

    flush_removed(len(source_blocks))
    return output


def diff_blocks(
    source: Sequence[TextBlock],
    dest: Sequence[TextBlock],
    options: Optional[DiffOptions] = None,
) -> list[TextBlock]:
    """Diff two sequences of text blocks.

    Blocks are compared as atomic units first. Identical blocks pass
    through; blocks only in the destination are added and blocks only in
    the source are removed. Replaced regions are resolved block by block
    with a word-overlap first-match rule, and matched pairs are diffed at
    word granularity.

    Parameters
    ----------
    source : sequence of TextBlock
        Paragraph-like blocks of the source gap
    dest : sequence of TextBlock
        Paragraph-like blocks of the destination gap
    options : DiffOptions, optional
        Supplies the word-overlap threshold

    Returns
    -------
    list of TextBlock
        Result blocks in destination order, removed blocks interleaved

    """
    options = options or DiffOptions()
    output: list[TextBlock] = []
    source_keys = [block.content for block in source]
    dest_keys = [block.content for block in dest]

    for op in iter_operations(source_keys, dest_keys):
        old_start, old_end = op.old_range
        new_start, new_end = op.new_range
        if op.tag == "equal":
            output.extend(_unchanged_block(block) for block in dest[new_start:new_end])
        elif op.tag == "delete":
            output.extend(_mark_block(block, DiffState.REMOVED) for block in source[old_start:old_end])
        elif op.tag == "insert":
            output.extend(_mark_block(block, DiffState.ADDED) for block in dest[new_start:new_end])
        else:
            output.extend(
                _resolve_replacement(
                    source[old_start:old_end],
                    dest[new_start:new_end],
                    options.word_overlap_threshold,
                )
            )

    return output


def collect_diagnostics(source: Document, dest: Document) -> list[str]:
    """Validate both trees and return one message per malformed node."""
    messages: list[str] = []
    for label, document in (("source", source), ("destination", dest)):
        for error in StructureValidator(label).visit_document(document):
            logger.warning("Skipping malformed input: %s", error)
            messages.append(str(error))
    return messages


def diff_document(source: Document, dest: Document, options: Optional[DiffOptions] = None) -> Document:
    """Compare two document trees and build an annotated destination tree.

    Parameters
    ----------
    source : Document
        The original document
    dest : Document
        The modified document
    options : DiffOptions, optional
        Engine options; defaults apply when omitted

    Returns
    -------
    Document
        New tree rooted at ``dest``. Every leaf carries a
        :class:`~docxdiff.ast.nodes.DiffState`; changed leaves carry the
        spans explaining the change. ``metadata["diagnostics"]`` lists the
        malformed input nodes that were skipped.

    Notes
    -----
    The diff never fails on mismatched structure. Tables past the shorter
    document's table count are rendered as wholly added or removed, and an
    empty input yields the other document marked entirely added or removed.

    """
    options = options or DiffOptions()
    diagnostics = collect_diagnostics(source, dest)

    source_gaps, source_tables = _gaps_and_tables(segment(source))
    dest_gaps, dest_tables = _gaps_and_tables(segment(dest))
    logger.debug(
        "Diffing documents: %d/%d blocks, %d/%d tables",
        len(source.children),
        len(dest.children),
        len(source_tables),
        len(dest_tables),
    )

    children: list[Block] = []
    for index in range(max(len(source_gaps), len(dest_gaps))):
        source_gap = source_gaps[index] if index < len(source_gaps) else []
        dest_gap = dest_gaps[index] if index < len(dest_gaps) else []
        children.extend(diff_blocks(source_gap, dest_gap, options))

        has_source = index < len(source_tables)
        has_dest = index < len(dest_tables)
        if has_source and has_dest:
            children.append(diff_table(source_tables[index], dest_tables[index], options))
        elif has_dest:
            logger.debug("Table %d only in destination", index + 1)
            children.append(mark_table_added(dest_tables[index]))
        elif has_source:
            logger.debug("Table %d only in source", index + 1)
            children.append(mark_table_removed(source_tables[index]))

    metadata = dict(dest.metadata)
    metadata["diagnostics"] = diagnostics
    return Document(children=children, metadata=metadata)
