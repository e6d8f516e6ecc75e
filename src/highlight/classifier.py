"""Span classifier for Io source highlighting.

Every category pattern is run over the text in precedence order. Text
already claimed by a higher-priority category is never reassigned, so a
lower-priority match only keeps the characters that are still free.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Pattern

from preprocessor.comments import COMMENT_PATTERN
from .tables import CATEGORY_WORDS, HighlightCategory


@dataclass
class Span:
    """A classified region of source text."""

    start: int
    end: int
    text: str
    category: HighlightCategory

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "category": self.category.value,
        }


def _longest_first(literals: Iterable[str]) -> List[str]:
    return sorted(set(literals), key=lambda literal: (-len(literal), literal))


def _word_pattern(words: Iterable[str]) -> Pattern[str]:
    alternation = "|".join(re.escape(word) for word in _longest_first(words))
    return re.compile(rf"(?<![A-Za-z0-9_])(?:{alternation})(?![A-Za-z0-9_])")


def _operator_pattern(operators: Iterable[str]) -> Pattern[str]:
    return re.compile("|".join(re.escape(op) for op in _longest_first(operators)))


def _build_patterns() -> Dict[HighlightCategory, Pattern[str]]:
    patterns = {}
    for category, literals in CATEGORY_WORDS.items():
        if category is HighlightCategory.COMMENT:
            patterns[category] = COMMENT_PATTERN
        elif category is HighlightCategory.OPERATOR:
            patterns[category] = _operator_pattern(literals)
        else:
            patterns[category] = _word_pattern(literals)
    return patterns


CATEGORY_PATTERNS = _build_patterns()


def classify_word(word: str) -> Optional[HighlightCategory]:
    """Get the highest-priority category that covers a literal string.

    Args:
        word: Identifier, operator or comment text

    Returns:
        The matching category, or None if no table covers it
    """
    for category, pattern in CATEGORY_PATTERNS.items():
        if category is HighlightCategory.COMMENT:
            if word and pattern.fullmatch(word):
                return category
        elif word in CATEGORY_WORDS[category]:
            return category
    return None


def highlight(text: str) -> List[Span]:
    """Classify the highlighted regions of a source text.

    Args:
        text: Io source text

    Returns:
        Non-overlapping spans sorted by start offset
    """
    claimed = bytearray(len(text))
    spans: List[Span] = []

    for category, pattern in CATEGORY_PATTERNS.items():
        for match in pattern.finditer(text):
            start, end = match.span()
            run_start = None
            for position in range(start, end + 1):
                free = position < end and not claimed[position]
                if free and run_start is None:
                    run_start = position
                elif not free and run_start is not None:
                    spans.append(Span(run_start, position, text[run_start:position], category))
                    run_start = None
            claimed[start:end] = b"\x01" * (end - start)

    spans.sort(key=lambda span: span.start)
    return spans
