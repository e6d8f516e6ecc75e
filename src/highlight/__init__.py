"""Highlighting tables and span classification for Io source code."""

from .classifier import Span, classify_word, highlight
from .tables import CATEGORY_WORDS, HighlightCategory

__all__ = ["CATEGORY_WORDS", "HighlightCategory", "Span", "classify_word", "highlight"]
