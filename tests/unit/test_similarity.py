"""Unit and property-based tests for the similarity scorer."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from docxdiff.diff.similarity import best_match, first_overlapping, levenshtein, similarity, word_overlap


@pytest.mark.unit
class TestSimilarity:
    """Tests for levenshtein and similarity."""

    def test_levenshtein(self):
        """Test the classic kitten/sitting distance."""
        assert levenshtein("kitten", "sitting") == 3

    def test_similarity_value(self):
        """Test similarity is one minus the normalized distance."""
        assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_empty_strings(self):
        """Test the empty-string edge cases."""
        assert similarity("", "") == 1.0
        assert similarity("abc", "") == 0.0
        assert similarity("", "abc") == 0.0

    @given(st.text(max_size=40), st.text(max_size=40))
    def test_bounded_and_symmetric(self, a, b):
        """Property: scores stay in [0, 1] and ignore argument order."""
        score = similarity(a, b)
        assert 0.0 <= score <= 1.0
        assert score == pytest.approx(similarity(b, a))

    @given(st.text(max_size=40))
    def test_identity(self, a):
        """Property: a string is fully similar to itself."""
        assert similarity(a, a) == 1.0


@pytest.mark.unit
class TestBestMatch:
    """Tests for best_match function."""

    def test_picks_highest_score(self):
        """Test that the most similar candidate wins."""
        assert best_match("Total", ["Subtotal", "Total"]) == 1

    def test_skips_taken_candidates(self):
        """Test that consumed candidates are ignored."""
        assert best_match("Total", ["Subtotal", "Total"], taken={1}) == 0

    def test_threshold_is_exclusive(self):
        """Test that a score equal to the threshold is rejected."""
        assert similarity("ab", "ac") == 0.5
        assert best_match("ab", ["ac"], threshold=0.5) is None

    def test_ties_go_to_earliest(self):
        """Test tie breaking by document order."""
        assert best_match("abc", ["abd", "abe"]) == 0

    def test_no_candidates(self):
        """Test an empty candidate list."""
        assert best_match("anything", []) is None


@pytest.mark.unit
class TestWordOverlap:
    """Tests for word_overlap and first_overlapping."""

    def test_overlap_ratio(self):
        """Test the share of shared words."""
        assert word_overlap("the rent is due", "rent is late") == 0.5
        assert word_overlap("a b", "a b c") == 1.0
        assert word_overlap("", "a") == 0.0

    def test_first_match_policy(self):
        """Test that the first qualifying candidate wins over a better later one."""
        candidates = ["rent due", "rent due monthly"]
        assert first_overlapping("rent due monthly", candidates) == 0

    def test_over_half_required(self):
        """Test that exactly half the words is not enough."""
        assert first_overlapping("the rent is due", ["rent is late"]) is None

    def test_taken_candidates_skipped(self):
        """Test that consumed candidates are ignored."""
        assert first_overlapping("a b", ["a b", "a b"], taken={0}) == 1
