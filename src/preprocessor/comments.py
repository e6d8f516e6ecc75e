"""Comment handling for Io source code.

Io accepts three comment forms:
- Line comments starting with ``#`` (shell style)
- Line comments starting with ``//`` (C++ style)
- Block comments delimited by ``/*`` and ``*/``

This module finds and removes them, and recognizes comment lines for
newline continuation.
"""

import re
from typing import Optional

# Line comment to end of line, or block comment to the nearest "*/".
# An unterminated block comment runs to the end of the text.
COMMENT_PATTERN = re.compile(
    r"(?:#|//)[^\r\n]*"
    r"|/\*.*?(?:\*/|\Z)",
    re.DOTALL,
)

# One or more comment markers after leading whitespace, plus one space
COMMENT_LINE_PATTERN = re.compile(r"^[ \t]*((?:#|//)+ ?)")


def strip_comments(text: str) -> str:
    """Remove every comment span from text.

    Newlines that end line comments are kept. Markers that appear inside
    an earlier comment belong to that comment.

    Args:
        text: Io source fragment

    Returns:
        Text with all comment spans deleted
    """
    return COMMENT_PATTERN.sub("", text)


def is_comment_line(line: str) -> bool:
    """Check if a line is a comment line.

    Args:
        line: The source line to check

    Returns:
        True if the line starts with ``#`` or ``//`` after leading whitespace
    """
    return COMMENT_LINE_PATTERN.match(line) is not None


def comment_prefix(line: str) -> Optional[str]:
    """Get the comment marker run of a comment line.

    Args:
        line: The source line

    Returns:
        The markers plus one following space (e.g. ``"# "`` or ``"//"``),
        or None if the line is not a comment line
    """
    match = COMMENT_LINE_PATTERN.match(line)
    if not match:
        return None
    return match.group(1)
