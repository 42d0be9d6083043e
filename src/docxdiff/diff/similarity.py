#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/similarity.py
"""Edit-distance similarity used for fuzzy row and paragraph matching.

Scores are heuristic signals, not correctness oracles: callers apply an
explicit acceptance threshold and pick the best untaken candidate greedily.
"""

from __future__ import annotations

from typing import Container, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from docxdiff.constants import DEFAULT_SIMILARITY_THRESHOLD, DEFAULT_WORD_OVERLAP_THRESHOLD


def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between two strings."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Score two strings between 0.0 (disjoint) and 1.0 (identical).

    Defined as ``1 - levenshtein(a, b) / max(len(a), len(b))``. Two empty
    strings score 1.0; an empty string against a non-empty one scores 0.0.

    Parameters
    ----------
    a : str
        First string
    b : str
        Second string

    Returns
    -------
    float
        Similarity in ``[0, 1]``

    """
    if a == b:
        return 1.0
    longest = max(len(a), len(b))
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein(a, b) / longest


def best_match(
    text: str,
    candidates: Sequence[str],
    taken: Container[int] = (),
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> Optional[int]:
    """Find the most similar untaken candidate.

    Parameters
    ----------
    text : str
        Text to match
    candidates : sequence of str
        Candidate texts in document order
    taken : container of int, default ()
        Candidate indexes already consumed by an earlier match
    threshold : float, default 0.5
        The winning score must be strictly above this value

    Returns
    -------
    int or None
        Index of the winning candidate. Ties go to the earliest candidate.

    """
    best_index: Optional[int] = None
    best_score = threshold
    for index, candidate in enumerate(candidates):
        if index in taken:
            continue
        score = similarity(text, candidate)
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def word_overlap(text: str, candidate: str) -> float:
    """Share of the words of ``text`` that also occur in ``candidate``.

    Words are whitespace-separated tokens; repeated words in ``text`` count
    each time they occur.
    """
    words = text.split()
    if not words:
        return 0.0
    target = set(candidate.split())
    shared = sum(1 for word in words if word in target)
    return shared / len(words)


def first_overlapping(
    text: str,
    candidates: Sequence[str],
    taken: Container[int] = (),
    threshold: float = DEFAULT_WORD_OVERLAP_THRESHOLD,
) -> Optional[int]:
    """Return the first untaken candidate sharing more than ``threshold`` of the words of ``text``.

    This is a first-match policy: the earliest qualifying candidate wins
    even when a later one would overlap more.
    """
    for index, candidate in enumerate(candidates):
        if index in taken:
            continue
        if word_overlap(text, candidate) > threshold:
            return index
    return None
