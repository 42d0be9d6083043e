#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/ast/utils.py
"""Utility functions for inline markup.

Functions
---------
markup_to_text : Plain text of an inline-markup fragment
block_text : Trimmed plain text of a leaf block or cell
normalize_whitespace : Collapse whitespace runs into single spaces

Examples
--------
    >>> markup_to_text("<strong>Total</strong> (USD)")
    'Total (USD)'

"""

from __future__ import annotations

from functools import lru_cache
from typing import Union

from bs4 import BeautifulSoup

from docxdiff.ast.nodes import Heading, ListItem, Paragraph, TableCell
from docxdiff.constants import WHITESPACE_RUN_PATTERN


@lru_cache(maxsize=4096)
def markup_to_text(markup: str) -> str:
    """Extract the text content of an inline-markup fragment.

    Parameters
    ----------
    markup : str
        HTML fragment

    Returns
    -------
    str
        Concatenated text with entities decoded

    """
    if not markup:
        return ""
    if "<" not in markup and "&" not in markup:
        return markup
    return BeautifulSoup(markup, "html.parser").get_text()


def block_text(node: Union[Paragraph, Heading, ListItem, TableCell, None]) -> str:
    """Return the trimmed text content of a leaf node, or ``""`` for None."""
    if node is None:
        return ""
    return markup_to_text(node.content).strip()


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace in text.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Text with whitespace runs collapsed and ends stripped

    """
    return WHITESPACE_RUN_PATTERN.sub(" ", text).strip()
