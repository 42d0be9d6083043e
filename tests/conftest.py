"""Pytest configuration and shared fixtures for the docxdiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest
from utils import make_table

from docxdiff.ast import Document, Paragraph, Table

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=30)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def rent_table_pair() -> tuple[Table, Table]:
    """Provide a two-row table whose rent amount changes from 100 to 150.

    Returns
    -------
    tuple[Table, Table]
        Source and destination tables.

    """
    source = make_table(["Item", "Amount"], ["Rent", "100"])
    dest = make_table(["Item", "Amount"], ["Rent", "150"])
    return source, dest


@pytest.fixture
def lease_documents(rent_table_pair) -> tuple[Document, Document]:
    """Provide a small lease in two versions: one paragraph and one table changed."""
    source_table, dest_table = rent_table_pair
    source = Document(
        children=[
            Paragraph(content="This lease starts on <strong>1 May</strong>."),
            Paragraph(content="The rent is 100"),
            source_table,
        ]
    )
    dest = Document(
        children=[
            Paragraph(content="This lease starts on <strong>1 May</strong>."),
            Paragraph(content="The rent is 150"),
            dest_table,
        ]
    )
    return source, dest


@pytest.fixture
def write_html(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing an HTML body to a file under ``tmp_path``."""

    def _write(name: str, body: str) -> Path:
        path = tmp_path / name
        path.write_text(f"<html><body>{body}</body></html>", encoding="utf-8")
        return path

    return _write
