"""Unit tests for diff statistics."""

import pytest

from docxdiff.ast import DiffState, Document, Paragraph
from docxdiff.diff.document import diff_document
from docxdiff.diff.stats import DiffStats, compute_stats


@pytest.mark.unit
class TestDiffStats:
    """Tests for DiffStats and compute_stats."""

    def test_lease_counts(self, lease_documents):
        """Test leaf counts of the lease diff."""
        stats = compute_stats(diff_document(*lease_documents))
        assert stats == DiffStats(added=0, removed=0, modified=2, unchanged=4, tables=1)
        assert stats.total_changes == 2
        assert stats.has_changes

    def test_to_dict(self):
        """Test the dict form includes the total."""
        data = DiffStats(added=1, removed=2, modified=3, unchanged=4, tables=5).to_dict()
        assert data == {"added": 1, "removed": 2, "modified": 3, "unchanged": 4, "tables": 5, "total_changes": 6}

    def test_states_counted(self):
        """Test each state lands in its own counter."""
        doc = Document(
            children=[
                Paragraph(content="a", state=DiffState.ADDED),
                Paragraph(content="b", state=DiffState.REMOVED),
                Paragraph(content="c"),
            ]
        )
        stats = compute_stats(doc)
        assert (stats.added, stats.removed, stats.unchanged) == (1, 1, 1)

    def test_empty_document(self):
        """Test that an empty document has no changes."""
        assert not compute_stats(Document()).has_changes
