#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/diff/api.py
"""Python API for structural document comparison.

This module provides the high-level functions for comparing two documents
and rendering the result.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Literal, Optional, Union

from docxdiff.ast.nodes import Document
from docxdiff.diff.document import diff_document
from docxdiff.exceptions import ValidationError
from docxdiff.options import DiffOptions, DocxOptions
from docxdiff.parsers import load_document
from docxdiff.renderers import HtmlDiffRenderer, JsonDiffRenderer
from docxdiff.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

DocumentSource = Union[str, Path, Document]
OutputFormat = Literal["html", "json"]


def _resolve_options(options: Optional[DiffOptions], overrides: dict[str, Any]) -> DiffOptions:
    if options is not None and not isinstance(options, DiffOptions):
        raise ValidationError(
            f"options must be a DiffOptions instance, got {type(options).__name__}",
            parameter_name="options",
            parameter_value=type(options).__name__,
        )

    known = {f.name for f in fields(DiffOptions)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValidationError(
            f"Unknown option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=overrides[unknown[0]],
        )

    if options is None:
        return DiffOptions(**overrides)
    return options.create_updated(**overrides) if overrides else options


def _load(source: DocumentSource, name: str, parser_options: Optional[DocxOptions]) -> Document:
    if isinstance(source, Document):
        return source
    if isinstance(source, (str, Path)):
        with debug_timer(logger, f"Loading {source}"):
            return load_document(source, parser_options)
    raise ValidationError(
        f"{name} must be str, Path, or Document, got {type(source).__name__}",
        parameter_name=name,
        parameter_value=type(source).__name__,
    )


def diff_documents(
    source: DocumentSource,
    dest: DocumentSource,
    options: Optional[DiffOptions] = None,
    parser_options: Optional[DocxOptions] = None,
    **kwargs: Any,
) -> Document:
    """Compare two documents and return the annotated destination tree.

    Parameters
    ----------
    source : str, Path, or Document
        The original document: a ``.docx``/``.html`` path or a parsed tree
    dest : str, Path, or Document
        The modified document
    options : DiffOptions, optional
        Engine options; defaults apply when omitted
    parser_options : DocxOptions, optional
        Converter options used when loading paths
    **kwargs : Any
        Individual :class:`DiffOptions` fields overriding ``options``

    Returns
    -------
    Document
        Diff result rooted at ``dest``

    Raises
    ------
    ValidationError
        If an argument has an unsupported type or an option is invalid
    DocumentNotFoundError
        If a source path does not exist

    Examples
    --------
    Compare two Word documents:
        >>> result = diff_documents("lease_v1.docx", "lease_v2.docx")
        >>> result.diagnostics
        []

    Force simple table matching:
        >>> result = diff_documents("a.docx", "b.docx", mode="simple")

    """
    resolved = _resolve_options(options, kwargs)
    source_doc = _load(source, "source", parser_options)
    dest_doc = _load(dest, "dest", parser_options)

    with debug_timer(logger, "Diffing documents"):
        return diff_document(source_doc, dest_doc, resolved)


def render_diff(result: Document, format: OutputFormat = "html", **kwargs: Any) -> str:
    """Render a diff result in the requested format.

    Parameters
    ----------
    result : Document
        Output of :func:`diff_documents`
    format : {"html", "json"}, default "html"
        Output format
    **kwargs : Any
        Keyword arguments forwarded to the renderer

    Returns
    -------
    str
        Rendered output

    Raises
    ------
    ValidationError
        If the format is not supported

    """
    if format == "html":
        return HtmlDiffRenderer(**kwargs).render(result)
    if format == "json":
        return JsonDiffRenderer(**kwargs).render(result)
    raise ValidationError(
        f"Invalid format: {format}. Must be one of: html, json",
        parameter_name="format",
        parameter_value=format,
    )
