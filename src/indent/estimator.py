"""Indentation estimation for Io source code.

The estimator is a one-step nudge, not a bracket-depth calculator. It
pushes the current line one tab-width step deeper, and resets it to
column 0 when that would put it more than one step past the previous
non-blank line. Only lines before the current one are consulted.

Newline continuation gives a freshly split line the indentation of the
line it came from and, for comment lines, the same comment markers.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

from preprocessor.comments import comment_prefix

DEFAULT_TAB_WIDTH = 8


class LineSource(Protocol):
    """Random access to the lines that precede the line under edit."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> str:
        ...


@dataclass(frozen=True)
class Continuation:
    """Initial state of a line opened by a newline.

    Attributes:
        indent: Columns of indentation for the new line
        prefix_text: Comment markers to pre-populate ("" for code lines)
    """

    indent: int
    prefix_text: str = ""


def check_tab_width(tab_width: int) -> int:
    """Validate a tab width.

    Raises:
        ValueError: If tab_width is not a positive integer
    """
    if isinstance(tab_width, bool) or not isinstance(tab_width, int) or tab_width <= 0:
        raise ValueError(f"Tab width must be a positive integer, got {tab_width!r}")
    return tab_width


def is_blank(line: str) -> bool:
    """Check if a line contains only whitespace."""
    return not line or line.isspace()


def indentation_width(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Count the columns of leading whitespace in a line.

    Tabs advance to the next multiple of tab_width.

    Args:
        line: Source line
        tab_width: Columns per tab stop

    Returns:
        Indentation in columns
    """
    column = 0
    for char in line:
        if char == " ":
            column += 1
        elif char == "\t":
            column += tab_width - (column % tab_width)
        else:
            break
    return column


class PrecedingLines:
    """Read-only view of the first `stop` lines of a buffer, without copying."""

    def __init__(self, lines: LineSource, stop: int):
        self._lines = lines
        self._stop = max(0, min(stop, len(lines)))

    def __len__(self) -> int:
        return self._stop

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < self._stop:
            raise IndexError(f"line index {index} out of range")
        return self._lines[index]


def previous_non_blank(lines: LineSource, before: int) -> Optional[int]:
    """Find the nearest non-blank line with an index lower than `before`.

    Args:
        lines: Lines to search backwards through
        before: Index to start searching below

    Returns:
        Index of the line, or None if every earlier line is blank
    """
    for index in range(min(before, len(lines)) - 1, -1, -1):
        if not is_blank(lines[index]):
            return index
    return None


def estimate_indent(
    preceding_lines: LineSource,
    current_line: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> int:
    """Estimate the indentation of the line under edit.

    An empty current line (no leading columns) is treated as freshly
    opened: it carries the indentation of the nearest non-blank line
    above, and that line's own predecessor becomes the reference for the
    reset check. A whitespace-only line keeps its own leading columns.

    Args:
        preceding_lines: Lines before the current one, oldest first
        current_line: Text of the line under edit
        tab_width: Columns per indentation step

    Returns:
        Target indentation in columns (never negative)

    Raises:
        ValueError: If tab_width is not a positive integer
    """
    check_tab_width(tab_width)

    if is_blank(current_line) and indentation_width(current_line, tab_width) == 0:
        anchor = previous_non_blank(preceding_lines, len(preceding_lines))
        if anchor is None:
            current = 0
            reference = None
        else:
            current = indentation_width(preceding_lines[anchor], tab_width)
            reference = previous_non_blank(preceding_lines, anchor)
    else:
        current = indentation_width(current_line, tab_width)
        reference = previous_non_blank(preceding_lines, len(preceding_lines))

    previous = 0
    if reference is not None:
        previous = indentation_width(preceding_lines[reference], tab_width)

    nudged = current + tab_width
    if nudged - previous > tab_width:
        return 0
    return nudged


def apply_indent(lines: List[str], index: int, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Re-indent lines[index] in place with the estimated indentation.

    Args:
        lines: Buffer lines (modified in place)
        index: Index of the line to indent
        tab_width: Columns per indentation step

    Returns:
        The indentation applied, in columns
    """
    width = estimate_indent(PrecedingLines(lines, index), lines[index], tab_width)
    lines[index] = " " * width + lines[index].lstrip(" \t")
    return width


def continuation_indent(
    current_indent: int,
    current_line: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> Continuation:
    """Compute the initial state of the line opened after current_line.

    Args:
        current_indent: Indentation of the line being split, in columns
        current_line: Text of the line being split
        tab_width: Columns per indentation step

    Returns:
        Continuation with the indentation rounded down to whole steps and,
        for a comment line, its comment markers as prefix_text
    """
    check_tab_width(tab_width)
    steps = max(current_indent, 0) // tab_width
    return Continuation(
        indent=steps * tab_width,
        prefix_text=comment_prefix(current_line) or "",
    )


def split_line(
    lines: List[str],
    index: int,
    column: int,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> Continuation:
    """Break lines[index] at column and insert the continuation line.

    The text after the split point moves to the new line, behind the
    continuation indentation and comment prefix.

    Args:
        lines: Buffer lines (modified in place)
        index: Index of the line to split
        column: Character offset of the split point
        tab_width: Columns per indentation step

    Returns:
        The Continuation used for the new line
    """
    line = lines[index]
    head, tail = line[:column], line[column:]
    continuation = continuation_indent(indentation_width(line, tab_width), head, tab_width)

    lines[index] = head.rstrip(" \t")
    new_line = " " * continuation.indent + continuation.prefix_text + tail.lstrip(" \t")
    lines.insert(index + 1, new_line)
    return continuation
