#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/text_diff.py
"""Word- and line-level diff primitives over inline markup.

Both granularities tokenize the input and run
:class:`difflib.SequenceMatcher` over the token sequences. Word tokens are
whitespace runs, text runs and whole markup tags, so a highlight never
splits a tag. Line units are the fragments between ``<br>`` markers that
sit outside any open tag.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, Sequence

from docxdiff.ast.nodes import DiffSpan, DiffState
from docxdiff.constants import LINE_BREAK_PATTERN, WORD_TOKEN_PATTERN

Granularity = Literal["line", "word"]


@dataclass(slots=True)
class DiffOp:
    """Structured diff operation between two token sequences."""

    tag: Literal["replace", "delete", "insert", "equal"]
    old_slice: Sequence[str]
    new_slice: Sequence[str]
    old_range: tuple[int, int]
    new_range: tuple[int, int]


def iter_operations(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> Iterator[DiffOp]:
    """Yield SequenceMatcher operations between two token sequences.

    Parameters
    ----------
    old_tokens : sequence of str
        Tokens of the source text
    new_tokens : sequence of str
        Tokens of the destination text

    Yields
    ------
    DiffOp
        Operations in order, covering both sequences completely

    """
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        yield DiffOp(
            tag,
            old_tokens[i1:i2],
            new_tokens[j1:j2],
            (i1, i2),
            (j1, j2),
        )


def tokenize_words(markup: str) -> list[str]:
    """Split markup into whitespace, text and tag tokens.

    Joining the tokens reproduces the input exactly.
    """
    if not markup:
        return []
    return WORD_TOKEN_PATTERN.findall(markup)


def split_lines(markup: str) -> list[str]:
    """Split markup at line breaks that are not inside an open tag.

    Parameters
    ----------
    markup : str
        Inline markup, possibly containing ``<br>`` variants

    Returns
    -------
    list of str
        Line units; an empty input yields an empty list

    """
    if not markup:
        return []
    return LINE_BREAK_PATTERN.split(markup)


def has_line_breaks(markup: str) -> bool:
    """Return True when the markup holds at least one line-break marker."""
    return bool(LINE_BREAK_PATTERN.search(markup))


def _spans_from_operations(operations: Iterable[DiffOp], *, merge: bool) -> list[DiffSpan]:
    spans: list[DiffSpan] = []

    def emit(tokens: Sequence[str], state: DiffState) -> None:
        if not tokens:
            return
        if merge:
            text = "".join(tokens)
            if spans and spans[-1].state is state:
                spans[-1] = DiffSpan(spans[-1].text + text, state)
            else:
                spans.append(DiffSpan(text, state))
        else:
            spans.extend(DiffSpan(token, state) for token in tokens)

    for op in operations:
        if op.tag == "equal":
            emit(op.new_slice, DiffState.UNCHANGED)
        else:
            # Removed material always precedes its replacement
            emit(op.old_slice, DiffState.REMOVED)
            emit(op.new_slice, DiffState.ADDED)

    return spans


def diff_words(old: str, new: str) -> list[DiffSpan]:
    """Diff two markup strings at word granularity.

    Adjacent chunks with the same state are merged. Concatenating the
    unchanged and removed spans yields ``old``; the unchanged and added
    spans yield ``new``.

    Parameters
    ----------
    old : str
        Source markup
    new : str
        Destination markup

    Returns
    -------
    list of DiffSpan
        Ordered chunks covering both inputs

    Examples
    --------
        >>> diff_words("The rent is 100", "The rent is 150")
        [DiffSpan(text='The rent is ', state=<DiffState.UNCHANGED: 'unchanged'>),
         DiffSpan(text='100', state=<DiffState.REMOVED: 'removed'>),
         DiffSpan(text='150', state=<DiffState.ADDED: 'added'>)]

    """
    return _spans_from_operations(iter_operations(tokenize_words(old), tokenize_words(new)), merge=True)


def diff_lines(old: str | Sequence[str], new: str | Sequence[str]) -> list[DiffSpan]:
    """Diff two markup strings line by line.

    Unlike :func:`diff_words` every span holds exactly one line unit (without
    its separator) so callers can re-render line breaks the way they need.

    Parameters
    ----------
    old : str or sequence of str
        Source markup, or its pre-split line units
    new : str or sequence of str
        Destination markup, or its pre-split line units

    Returns
    -------
    list of DiffSpan
        One span per line unit, in edit-script order

    """
    old_lines = split_lines(old) if isinstance(old, str) else list(old)
    new_lines = split_lines(new) if isinstance(new, str) else list(new)
    return _spans_from_operations(iter_operations(old_lines, new_lines), merge=False)


def compute_diff(old: str, new: str, granularity: Granularity = "word") -> list[DiffSpan]:
    """Diff two strings at the requested granularity."""
    if granularity == "word":
        return diff_words(old, new)
    if granularity == "line":
        return diff_lines(old, new)
    raise ValueError(f"Unsupported granularity: {granularity}")


def reconstruct(spans: Iterable[DiffSpan], side: Literal["old", "new"], separator: str = "") -> str:
    """Rebuild one side of a diff from its spans.

    Parameters
    ----------
    spans : iterable of DiffSpan
        Output of :func:`diff_words` or :func:`diff_lines`
    side : {"old", "new"}
        ``"old"`` keeps removed and unchanged spans, ``"new"`` keeps added
        and unchanged spans
    separator : str, default ""
        Joiner between spans; use ``"<br>"`` for line diffs

    """
    skip = DiffState.ADDED if side == "old" else DiffState.REMOVED
    return separator.join(span.text for span in spans if span.state is not skip)


def has_changes(spans: Iterable[DiffSpan]) -> bool:
    """Return True when any span is added or removed."""
    return any(span.state is not DiffState.UNCHANGED for span in spans)
