"""Unit tests for the word- and line-level diff primitives."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from docxdiff.ast import DiffSpan, DiffState
from docxdiff.diff.text_diff import (
    compute_diff,
    diff_lines,
    diff_words,
    has_changes,
    has_line_breaks,
    iter_operations,
    reconstruct,
    split_lines,
    tokenize_words,
)

MARKUP_TEXT = st.text(alphabet="ab <>/\n", max_size=30)


@pytest.mark.unit
class TestTokenizeWords:
    """Tests for tokenize_words function."""

    def test_text_and_whitespace(self):
        """Test splitting plain text into word and whitespace runs."""
        assert tokenize_words("The rent  is") == ["The", " ", "rent", "  ", "is"]

    def test_tags_are_single_tokens(self):
        """Test that whole tags stay atomic."""
        assert tokenize_words('<span class="x">a</span>') == ['<span class="x">', "a", "</span>"]

    def test_empty_input(self):
        """Test that empty markup yields no tokens."""
        assert tokenize_words("") == []

    @given(MARKUP_TEXT)
    def test_tokens_rebuild_input(self, markup):
        """Property: joining the tokens reproduces the input."""
        assert "".join(tokenize_words(markup)) == markup


@pytest.mark.unit
class TestSplitLines:
    """Tests for split_lines and has_line_breaks."""

    def test_all_break_variants(self):
        """Test splitting on <br>, <br/> and <br /> case-insensitively."""
        assert split_lines("a<br>b<BR/>c<br />d") == ["a", "b", "c", "d"]

    def test_no_breaks(self):
        """Test a single line unit."""
        assert split_lines("one line") == ["one line"]

    def test_empty(self):
        """Test that empty markup has no line units."""
        assert split_lines("") == []

    def test_has_line_breaks(self):
        """Test line-break detection."""
        assert has_line_breaks("x<br/>y")
        assert not has_line_breaks("<strong>x</strong>")

    def test_break_inside_tag_is_not_a_boundary(self):
        """Test that a <br> inside an attribute value does not split the tag."""
        markup = '<span title="a<br>b">x</span><br>y'
        assert split_lines(markup) == ['<span title="a<br>b">x</span>', "y"]
        assert not has_line_breaks('<img alt="one<br>two">')


@pytest.mark.unit
class TestDiffWords:
    """Tests for diff_words function."""

    def test_changed_number(self):
        """Test the canonical rent change."""
        spans = diff_words("The rent is 100", "The rent is 150")
        assert spans == [
            DiffSpan("The rent is ", DiffState.UNCHANGED),
            DiffSpan("100", DiffState.REMOVED),
            DiffSpan("150", DiffState.ADDED),
        ]

    def test_identical_input(self):
        """Test that identical input yields one unchanged span."""
        assert diff_words("same text", "same text") == [DiffSpan("same text", DiffState.UNCHANGED)]

    def test_insertion(self):
        """Test a pure insertion."""
        spans = diff_words("Total", "Total due")
        assert spans == [DiffSpan("Total", DiffState.UNCHANGED), DiffSpan(" due", DiffState.ADDED)]

    def test_empty_sides(self):
        """Test diffs against empty input."""
        assert diff_words("", "new") == [DiffSpan("new", DiffState.ADDED)]
        assert diff_words("old", "") == [DiffSpan("old", DiffState.REMOVED)]
        assert diff_words("", "") == []

    def test_markup_inside_change(self):
        """Test that tags around a change stay unchanged."""
        spans = diff_words("<strong>100</strong>", "<strong>150</strong>")
        assert spans[0] == DiffSpan("<strong>", DiffState.UNCHANGED)
        assert spans[-1] == DiffSpan("</strong>", DiffState.UNCHANGED)

    @given(MARKUP_TEXT, MARKUP_TEXT)
    def test_reconstructs_both_sides(self, old, new):
        """Property: the spans rebuild the source and the destination."""
        spans = diff_words(old, new)
        assert reconstruct(spans, "old") == old
        assert reconstruct(spans, "new") == new

    @given(MARKUP_TEXT, MARKUP_TEXT)
    def test_adjacent_spans_differ(self, old, new):
        """Property: merged chunks never repeat a state back to back."""
        spans = diff_words(old, new)
        assert all(a.state is not b.state for a, b in zip(spans, spans[1:]))


@pytest.mark.unit
class TestDiffLines:
    """Tests for diff_lines function."""

    def test_one_line_changed(self):
        """Test that each line unit gets its own span."""
        spans = diff_lines("a<br>b", "a<br>c")
        assert spans == [
            DiffSpan("a", DiffState.UNCHANGED),
            DiffSpan("b", DiffState.REMOVED),
            DiffSpan("c", DiffState.ADDED),
        ]

    def test_presplit_input(self):
        """Test that pre-split line lists are accepted."""
        spans = diff_lines(["x", "y"], ["x", "y", "z"])
        assert [span.state for span in spans] == [DiffState.UNCHANGED, DiffState.UNCHANGED, DiffState.ADDED]

    def test_reconstruct_with_separator(self):
        """Test rebuilding both sides with a <br> separator."""
        spans = diff_lines("one<br>two<br>three", "one<br>2<br>three")
        assert reconstruct(spans, "old", "<br>") == "one<br>two<br>three"
        assert reconstruct(spans, "new", "<br>") == "one<br>2<br>three"


@pytest.mark.unit
class TestHelpers:
    """Tests for compute_diff, iter_operations and has_changes."""

    def test_compute_diff_dispatch(self):
        """Test granularity dispatch."""
        assert compute_diff("a b", "a c", "word") == diff_words("a b", "a c")
        assert compute_diff("a<br>b", "a<br>c", "line") == diff_lines("a<br>b", "a<br>c")

    def test_compute_diff_rejects_unknown_granularity(self):
        """Test that an unknown granularity raises ValueError."""
        with pytest.raises(ValueError, match="granularity"):
            compute_diff("a", "b", "sentence")

    def test_iter_operations_covers_sequences(self):
        """Test that operations cover both token sequences completely."""
        ops = list(iter_operations(["a", "b", "c"], ["a", "x", "c"]))
        assert [op.tag for op in ops] == ["equal", "replace", "equal"]
        assert ops[1].old_range == (1, 2)
        assert ops[1].new_slice == ["x"]

    def test_has_changes(self):
        """Test change detection over spans."""
        assert not has_changes([DiffSpan("a", DiffState.UNCHANGED)])
        assert has_changes(diff_words("a", "b"))
