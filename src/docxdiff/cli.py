#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docxdiff/cli.py
"""Command-line interface for docxdiff.

Compares two ``.docx`` or HTML documents and writes an HTML or JSON diff
to a file or stdout. A summary of the changes is printed to stderr.

Examples
--------
    $ docxdiff lease_v1.docx lease_v2.docx -o changes.html
    $ docxdiff old.html new.html --format json --mode complex

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import get_args

from docxdiff.constants import TableMode
from docxdiff.diff.stats import DiffStats
from docxdiff.exceptions import (
    DependencyError,
    DocxDiffError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _get_version() -> str:
    try:
        from importlib.metadata import version

        return version("docxdiff")
    except Exception:
        from docxdiff import __version__

        return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create argparse parser for the diff command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="docxdiff",
        description="Compare two Word (.docx) or HTML documents and highlight what changed, "
        "keeping table structure intact",
    )

    parser.add_argument("original", help="Original document (.docx, .html or .htm)")
    parser.add_argument("modified", help="Modified document (.docx, .html or .htm)")

    parser.add_argument(
        "--format",
        "-f",
        choices=["html", "json"],
        default="html",
        help="Output format: html (default, visual) or json (structured)",
    )
    parser.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    parser.add_argument(
        "--mode",
        "-m",
        choices=list(get_args(TableMode)),
        default="auto",
        help="Table matching: auto (default, picked per table), simple (by position) "
        "or complex (by row number, then similarity)",
    )
    parser.add_argument(
        "--no-styles",
        dest="inline_styles",
        action="store_false",
        default=True,
        help="Omit the embedded CSS from HTML output",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Do not print the change summary to stderr",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode: DEBUG logging with timestamps and logger names",
    )
    parser.add_argument("--version", "-V", action="version", version=f"docxdiff {_get_version()}")

    return parser


def print_summary(stats: DiffStats, diagnostics: list[str], original: str, modified: str) -> None:
    """Print a table of change counts to stderr."""
    from rich.console import Console
    from rich.table import Table

    console = Console(stderr=True)
    if not stats.has_changes:
        console.print("No differences found.")
    else:
        table = Table(title=f"{original} -> {modified}")
        table.add_column("Change", style="cyan")
        table.add_column("Count", justify="right")
        table.add_row("[green]Added[/green]", str(stats.added))
        table.add_row("[red]Removed[/red]", str(stats.removed))
        table.add_row("[yellow]Modified[/yellow]", str(stats.modified))
        table.add_row("Unchanged", str(stats.unchanged))
        table.add_row("Tables", str(stats.tables))
        console.print(table)

    for message in diagnostics:
        console.print(f"[yellow]Skipped:[/yellow] {message}", markup=True, highlight=False)


def main(args: list[str] | None = None) -> int:
    """Run the command line tool.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    from docxdiff.logging_utils import configure_logging

    log_level = "DEBUG" if parsed.trace else parsed.log_level
    configure_logging(log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    for name in (parsed.original, parsed.modified):
        if not Path(name).exists():
            print(f"Error: Source file not found: {name}", file=sys.stderr)
            return EXIT_FILE_ERROR

    try:
        from docxdiff.diff.api import diff_documents, render_diff
        from docxdiff.diff.stats import compute_stats

        result = diff_documents(parsed.original, parsed.modified, mode=parsed.mode)

        if parsed.format == "html":
            output = render_diff(result, "html", inline_styles=parsed.inline_styles)
        else:
            output = render_diff(result, "json")

        if parsed.output:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Diff written to: {output_path}", file=sys.stderr)
        else:
            print(output)

        if not parsed.quiet:
            print_summary(compute_stats(result), result.diagnostics, parsed.original, parsed.modified)

        return EXIT_SUCCESS

    except DocxDiffError as e:
        logger.debug("Diff failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error comparing documents: {e}", file=sys.stderr)
        return EXIT_ERROR
