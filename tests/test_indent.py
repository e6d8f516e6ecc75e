"""Tests for the indentation module."""

import pytest

# Path is setup in conftest.py

from indent.estimator import (
    Continuation,
    PrecedingLines,
    apply_indent,
    continuation_indent,
    estimate_indent,
    indentation_width,
    previous_non_blank,
    split_line,
)


class RecordingLines:
    """LineSource that records which indices are read."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.accessed = []

    def __len__(self):
        return len(self._lines)

    def __getitem__(self, index):
        self.accessed.append(index)
        return self._lines[index]


class TestIndentationWidth:
    """Tests for leading whitespace measurement."""

    def test_spaces(self):
        """Test counting leading spaces."""
        assert indentation_width("    body", 4) == 4

    def test_tabs_expand_to_tab_stops(self):
        """Test that tabs advance to the next tab stop."""
        assert indentation_width("\tx", 4) == 4
        assert indentation_width(" \tx", 4) == 4
        assert indentation_width("\t x", 4) == 5

    def test_blank_line(self):
        """Test that a blank line counts its whitespace."""
        assert indentation_width("", 4) == 0
        assert indentation_width("   ", 4) == 3


class TestEstimateIndent:
    """Tests for the one-step indentation nudge."""

    def test_nudge_one_step(self):
        """Test that a new line after an unindented line moves one step."""
        assert estimate_indent(["if (x) {"], "", tab_width=2) == 2

    def test_reset_when_past_one_step(self):
        """Test that over-indentation is fully retracted."""
        assert estimate_indent(["    if (x) {", "        body"], "", tab_width=4) == 0

    def test_skips_blank_lines(self):
        """Test that blank and whitespace-only lines are ignored."""
        assert estimate_indent(["a := 1", "", "   "], "", tab_width=2) == 2

    def test_skips_blank_lines_for_reference(self):
        """Test that the reference line also skips blank lines."""
        lines = ["    if (x) {", "", "        body", "  "]
        assert estimate_indent(lines, "", tab_width=4) == 0

    def test_non_blank_current_line_within_one_step(self):
        """Test nudging an existing line that stays within one step."""
        assert estimate_indent(["  foo"], "  bar", tab_width=2) == 4

    def test_non_blank_current_line_reset(self):
        """Test nudging an existing line past one step resets it."""
        assert estimate_indent(["foo"], "  bar", tab_width=2) == 0

    def test_threshold_is_exclusive(self):
        """Test that exactly one step past the reference is kept."""
        assert estimate_indent(["foo"], "bar", tab_width=3) == 3

    def test_first_line(self):
        """Test a line with no history."""
        assert estimate_indent([], "", tab_width=4) == 4
        assert estimate_indent([], "foo", tab_width=4) == 4

    def test_default_tab_width(self):
        """Test the default tab width of 8."""
        assert estimate_indent(["foo"], "") == 8

    def test_only_reads_preceding_lines(self):
        """Test that the estimator never looks past the current line."""
        lines = RecordingLines(["a", "  b", "", "    c"])
        estimate_indent(lines, "", tab_width=2)
        assert lines.accessed
        assert all(0 <= index < len(lines) for index in lines.accessed)

    @pytest.mark.parametrize("tab_width", [0, -2, True, 2.5, "4"])
    def test_invalid_tab_width(self, tab_width):
        """Test that a non-positive or non-integer tab width is rejected."""
        with pytest.raises(ValueError):
            estimate_indent(["foo"], "", tab_width=tab_width)

    def test_whitespace_only_line_keeps_its_columns(self):
        """Test that a whitespace-only line is nudged from its own indentation."""
        assert estimate_indent(["foo"], "      ", tab_width=2) == 0
        assert estimate_indent(["  foo"], "  ", tab_width=2) == 4

    def test_preceding_lines_view(self):
        """Test the bounded view over a buffer prefix."""
        view = PrecedingLines(["a", "  b", "c"], 2)
        assert len(view) == 2
        assert view[1] == "  b"
        with pytest.raises(IndexError):
            view[2]
        assert estimate_indent(view, "", tab_width=2) == 0

    def test_previous_non_blank(self):
        """Test the backward search for a non-blank line."""
        assert previous_non_blank(["a", "", " "], 3) == 0
        assert previous_non_blank(["", ""], 2) is None
        assert previous_non_blank(["a", "b"], 1) == 0


class TestApplyIndent:
    """Tests for in-place re-indentation."""

    def test_apply_indent_rewrites_line(self):
        """Test that the estimated indentation is applied in place."""
        lines = ["foo", "bar", "baz"]
        assert apply_indent(lines, 1, tab_width=2) == 2
        assert lines == ["foo", "  bar", "baz"]

    def test_apply_indent_twice_resets(self):
        """Test that nudging again past one step resets to column 0."""
        lines = ["foo", "bar"]
        apply_indent(lines, 1, tab_width=2)
        assert apply_indent(lines, 1, tab_width=2) == 0
        assert lines[1] == "bar"

    def test_apply_indent_blank_line_resets(self):
        """Test that nudging a blank line twice resets it like a code line."""
        lines = ["foo", ""]
        first = apply_indent(lines, 1, tab_width=2)
        second = apply_indent(lines, 1, tab_width=2)
        assert (first, second) == (2, 0)
        assert lines[1] == ""

    def test_apply_indent_replaces_tabs(self):
        """Test that existing tab indentation is replaced with spaces."""
        lines = ["\tfoo", "\tbar"]
        assert apply_indent(lines, 1, tab_width=4) == 8
        assert lines[1] == "        bar"


class TestContinuation:
    """Tests for newline continuation."""

    def test_comment_line_propagates_marker(self):
        """Test that a comment line continues as a comment."""
        assert continuation_indent(2, "  # some comment", tab_width=2) == Continuation(2, "# ")

    def test_code_line_has_no_prefix(self):
        """Test that a code line gives an empty prefix."""
        result = continuation_indent(4, "    foo bar", tab_width=4)
        assert result.indent == 4
        assert result.prefix_text == ""

    def test_indent_rounded_to_whole_steps(self):
        """Test that the indentation is kept in whole tab-width steps."""
        assert continuation_indent(5, "     x", tab_width=2).indent == 4
        assert continuation_indent(1, " x", tab_width=4).indent == 0

    def test_slash_comment_marker(self):
        """Test continuation of a // comment."""
        assert continuation_indent(0, "// note", tab_width=4).prefix_text == "// "

    def test_trailing_comment_is_not_comment_line(self):
        """Test that a code line with a trailing comment gets no prefix."""
        assert continuation_indent(0, "a := 1 # note", tab_width=4).prefix_text == ""

    def test_split_comment_line(self):
        """Test splitting a comment line in the middle."""
        lines = ["  # hello world"]
        result = split_line(lines, 0, 9, tab_width=2)
        assert result == Continuation(2, "# ")
        assert lines == ["  # hello", "  # world"]

    def test_split_code_line(self):
        """Test splitting a code line after an opening bracket."""
        lines = ["foo := method(a, b)", "bar"]
        split_line(lines, 0, len("foo := method("), tab_width=2)
        assert lines == ["foo := method(", "a, b)", "bar"]

    def test_split_at_end_of_indented_line(self):
        """Test opening a new line at the end of an indented line."""
        lines = ["    body"]
        split_line(lines, 0, len(lines[0]), tab_width=4)
        assert lines == ["    body", "    "]
