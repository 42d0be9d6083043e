#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/content.py
"""Content comparison for one leaf block (table cell or paragraph).

The comparator diffs the inline markup of a source and destination leaf and
returns a :class:`ContentDiff`: the change spans plus the destination markup
re-rendered with highlight spans. Single-line content is diffed word by
word; content holding line breaks is diffed line by line and every changed
line becomes a full-width highlight. The source markup is never altered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from docxdiff.ast.nodes import DiffSpan, DiffState
from docxdiff.ast.utils import markup_to_text, normalize_whitespace
from docxdiff.constants import (
    ADDED_CLASS,
    LINE_BREAK_PATTERN,
    LINE_HIGHLIGHT_CLASS,
    MARKUP_TAG_PATTERN,
    PARENTHETICAL_PATTERN,
    REMOVED_CLASS,
)
from docxdiff.diff.text_diff import Granularity, diff_lines, diff_words, has_line_breaks, split_lines, tokenize_words

logger = logging.getLogger(__name__)

_DEFAULT_BREAK = "<br>"


@dataclass
class ContentDiff:
    """Outcome of comparing the content of two leaf blocks.

    Parameters
    ----------
    state : DiffState
        ``UNCHANGED`` when the markup is identical, ``ADDED``/``REMOVED`` for
        one-sided content, ``MODIFIED`` otherwise
    markup : str
        Destination markup with highlight spans materialized
    spans : list of DiffSpan
        Change spans in output order; empty for unchanged content
    granularity : {"word", "line", "parenthetical"} or None
        How the spans were computed

    """

    state: DiffState
    markup: str
    spans: list[DiffSpan] = field(default_factory=list)
    granularity: Optional[str] = None


def highlight(markup: str, state: DiffState, block: bool = False) -> str:
    """Wrap markup in an added/removed highlight span.

    Parameters
    ----------
    markup : str
        Fragment to wrap
    state : DiffState
        ``ADDED`` or ``REMOVED``; ``UNCHANGED`` returns the markup as is
    block : bool, default False
        Mark the highlight as a full-width line

    """
    if state is DiffState.UNCHANGED or not markup:
        return markup
    css_class = ADDED_CLASS if state is DiffState.ADDED else REMOVED_CLASS
    if block:
        css_class = f"{css_class} {LINE_HIGHLIGHT_CLASS}"
    return f'<span class="{css_class}">{markup}</span>'


def mark_added(markup: str) -> ContentDiff:
    """Classify destination-only content: the whole content becomes one full-width added span."""
    return ContentDiff(
        state=DiffState.ADDED,
        markup=highlight(markup, DiffState.ADDED, block=True),
        spans=[DiffSpan(markup, DiffState.ADDED)] if markup else [],
        granularity="line",
    )


def mark_removed(markup: str) -> ContentDiff:
    """Classify source-only content: the whole content becomes one full-width removed span."""
    return ContentDiff(
        state=DiffState.REMOVED,
        markup=highlight(markup, DiffState.REMOVED, block=True),
        spans=[DiffSpan(markup, DiffState.REMOVED)] if markup else [],
        granularity="line",
    )


def _render_word_span(span: DiffSpan) -> str:
    if span.state is DiffState.UNCHANGED:
        return span.text

    tokens = tokenize_words(span.text)
    if span.state is DiffState.REMOVED:
        # Source-side tags would unbalance the destination markup
        text = "".join(token for token in tokens if not MARKUP_TAG_PATTERN.fullmatch(token))
        return highlight(text, DiffState.REMOVED) if text.strip() else ""

    parts: list[str] = []
    run: list[str] = []
    for token in tokens:
        if MARKUP_TAG_PATTERN.fullmatch(token):
            parts.append(highlight("".join(run), DiffState.ADDED))
            run = []
            parts.append(token)
        else:
            run.append(token)
    parts.append(highlight("".join(run), DiffState.ADDED))
    return "".join(parts)


def render_word_spans(spans: list[DiffSpan]) -> str:
    """Materialize word-level spans into destination markup with inline highlights."""
    return "".join(_render_word_span(span) for span in spans)


def _compare_words(old: str, new: str) -> ContentDiff:
    spans = diff_words(old, new)
    return ContentDiff(
        state=DiffState.MODIFIED,
        markup=render_word_spans(spans),
        spans=spans,
        granularity="word",
    )


def _compare_lines(old: str, new: str) -> ContentDiff:
    new_separators = LINE_BREAK_PATTERN.findall(new)
    line_spans = diff_lines(split_lines(old), split_lines(new))

    spans: list[DiffSpan] = []
    pieces: list[str] = []
    new_index = 0
    for line in line_spans:
        if line.state is DiffState.REMOVED:
            separator = _DEFAULT_BREAK
        else:
            separator = new_separators[new_index] if new_index < len(new_separators) else _DEFAULT_BREAK
            new_index += 1

        pieces.append(highlight(line.text, line.state, block=True))
        pieces.append(separator)
        spans.append(line)
        spans.append(DiffSpan(separator, DiffState.UNCHANGED))

    # No separator after the final line
    if pieces:
        pieces.pop()
        spans.pop()

    return ContentDiff(
        state=DiffState.MODIFIED,
        markup="".join(pieces),
        spans=spans,
        granularity="line",
    )


def new_parentheticals(old: str, new: str) -> list[str]:
    """Return the parenthetical spans of ``new`` whose exact text is absent from ``old``.

    Both arguments are inline markup; the search runs over their text
    content.
    """
    old_text = markup_to_text(old)
    found: list[str] = []
    for match in PARENTHETICAL_PATTERN.finditer(markup_to_text(new)):
        fragment = match.group(0)
        if fragment not in old_text and fragment not in found:
            found.append(fragment)
    return found


def _compare_parenthetical(old: str, new: str) -> Optional[ContentDiff]:
    """Highlight only newly introduced ``( ... )`` spans of a header cell.

    Applies when the destination text, once the new parentheticals are
    removed, equals the source text. Returns None otherwise.
    """
    fragments = new_parentheticals(old, new)
    if not fragments:
        return None

    remainder = markup_to_text(new)
    for fragment in fragments:
        remainder = remainder.replace(fragment, " ")
    if normalize_whitespace(remainder) != normalize_whitespace(markup_to_text(old)):
        return None

    spans: list[DiffSpan] = []
    position = 0
    for match in PARENTHETICAL_PATTERN.finditer(new):
        if markup_to_text(match.group(0)) not in fragments:
            continue
        if match.start() > position:
            spans.append(DiffSpan(new[position : match.start()], DiffState.UNCHANGED))
        spans.append(DiffSpan(match.group(0), DiffState.ADDED))
        position = match.end()

    if not any(span.state is DiffState.ADDED for span in spans):
        return None
    if position < len(new):
        spans.append(DiffSpan(new[position:], DiffState.UNCHANGED))

    markup = "".join(highlight(span.text, span.state) for span in spans)
    return ContentDiff(state=DiffState.MODIFIED, markup=markup, spans=spans, granularity="parenthetical")


def compare_content(
    old: str,
    new: str,
    *,
    header: bool = False,
    granularity: Optional[Granularity] = None,
) -> ContentDiff:
    """Compare the inline markup of a source and destination leaf block.

    Parameters
    ----------
    old : str
        Source markup
    new : str
        Destination markup
    header : bool, default False
        Whether the leaf sits in a header row. Header cells that only gained
        a parenthetical annotation such as ``"(USD)"`` get just that
        annotation highlighted.
    granularity : {"word", "line"} or None, default None
        Force a granularity. By default content without line breaks is
        diffed word by word and anything else line by line.

    Returns
    -------
    ContentDiff
        Annotated replacement for the destination leaf

    """
    if old == new:
        return ContentDiff(state=DiffState.UNCHANGED, markup=new)

    if header:
        parenthetical = _compare_parenthetical(old, new)
        if parenthetical is not None:
            logger.debug("Highlighting new parenthetical annotation in header cell")
            return parenthetical

    if granularity is None:
        granularity = "line" if has_line_breaks(old) or has_line_breaks(new) else "word"

    if granularity == "word":
        return _compare_words(old, new)
    return _compare_lines(old, new)
