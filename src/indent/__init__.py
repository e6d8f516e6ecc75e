"""Indentation module for Io source code."""

from .estimator import (
    DEFAULT_TAB_WIDTH,
    Continuation,
    LineSource,
    PrecedingLines,
    apply_indent,
    continuation_indent,
    estimate_indent,
    indentation_width,
    split_line,
)

__all__ = [
    "DEFAULT_TAB_WIDTH",
    "Continuation",
    "LineSource",
    "PrecedingLines",
    "apply_indent",
    "continuation_indent",
    "estimate_indent",
    "indentation_width",
    "split_line",
]
