"""Source normalizer for Io programs.

This module turns a multi-line Io fragment into a single logical line
that a line-oriented interpreter front end can accept:
- Removing comments (before any whitespace handling)
- Collapsing runs of spaces and tabs
- Joining lines broken after ``(`` or ``,`` or before ``)``
- Turning the remaining line breaks into ``"; "`` separators

String literals are not tracked. A newline inside a multi-line string is
collapsed like any other line break, so the literal's contents change.
"""

import re
from typing import List

from .comments import strip_comments

STATEMENT_SEPARATOR = "; "

HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")

# Whitespace right after "(" or ",", or right before ")"
BRACKET_ADJACENT_WHITESPACE = re.compile(r"(?<=[(,])\s+|\s+(?=\))")

# A line break run together with the whitespace touching it
LINE_BREAK_RUN = re.compile(r"\s*[\r\n]\s*")


def normalize(text: str) -> str:
    """Normalize an Io fragment into one logical line.

    Args:
        text: Raw Io source fragment (any number of lines)

    Returns:
        The fragment without comments or line terminators. Statements that
        were on separate lines are joined with ``"; "``. Empty and
        comment-only fragments give an empty string.
    """
    content = strip_comments(text)
    content = collapse_whitespace(content).strip()
    content = join_bracket_lines(content)
    return LINE_BREAK_RUN.sub(STATEMENT_SEPARATOR, content)


def collapse_whitespace(text: str) -> str:
    """Replace every run of spaces and tabs with a single space.

    Line terminators are left untouched.
    """
    return HORIZONTAL_WHITESPACE.sub(" ", text)


def join_bracket_lines(text: str) -> str:
    """Remove whitespace runs that follow ``(`` or ``,`` or precede ``)``.

    This lets argument lists and call chains that span several lines
    collapse without a statement separator. Brackets are not balanced or
    validated.
    """
    return BRACKET_ADJACENT_WHITESPACE.sub("", text)


def split_statements(normalized: str) -> List[str]:
    """Split a normalized fragment into its logical lines.

    Args:
        normalized: Output of normalize()

    Returns:
        Statements in source order (empty list for an empty fragment)
    """
    if not normalized:
        return []
    return normalized.split(STATEMENT_SEPARATOR)
