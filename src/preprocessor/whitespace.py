"""Trailing whitespace cleanup for Io source files."""

import re

TRAILING_WHITESPACE = re.compile(r"[ \t]+(?=\r?$)", re.MULTILINE)


def strip_trailing_whitespace(text: str) -> str:
    """Remove trailing whitespace from every line and blank lines at the end.

    Args:
        text: Source file content

    Returns:
        Cleaned content, ending with a single newline if the input ended
        with one
    """
    cleaned = TRAILING_WHITESPACE.sub("", text).rstrip("\r\n")
    if cleaned and text.endswith(("\n", "\r")):
        newline = "\r\n" if text.endswith("\r\n") else "\n"
        cleaned += newline
    return cleaned
