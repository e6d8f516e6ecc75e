"""Preprocessor module for Io source code normalization."""

from .comments import comment_prefix, is_comment_line, strip_comments
from .normalizer import normalize, split_statements
from .whitespace import strip_trailing_whitespace

__all__ = [
    "comment_prefix",
    "is_comment_line",
    "normalize",
    "split_statements",
    "strip_comments",
    "strip_trailing_whitespace",
]
