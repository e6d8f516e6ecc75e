"""Public API for Io source tools.

This module provides the programmatic interface for normalizing,
indenting and highlighting Io source files. Use these functions instead
of calling CLI internals directly.

Example:
    from api import normalize_file, estimate_file_indentation, ProcessingOptions

    result = normalize_file(Path("program.io"))
    print(result.normalized)      # Single-line payload for the interpreter

    report = estimate_file_indentation(
        Path("program.io"),
        options=ProcessingOptions(tab_width=2),
    )
    for line in report.lines:
        print(line.line_number, line.current, line.estimated)
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Dict, Any

from preprocessor import normalize, split_statements, strip_trailing_whitespace
from indent import DEFAULT_TAB_WIDTH, PrecedingLines, estimate_indent, indentation_width
from indent.estimator import check_tab_width
from highlight import Span, highlight

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Raised when processing an Io source file fails."""
    pass


@dataclass
class ProcessingOptions:
    """Options for Io source processing.

    Attributes:
        tab_width: Columns per indentation step (default: 8)
        strip_whitespace: Strip trailing whitespace before processing (default: False)
    """
    tab_width: int = DEFAULT_TAB_WIDTH
    strip_whitespace: bool = False


@dataclass
class NormalizationResult:
    """Result of normalizing an Io fragment.

    Attributes:
        normalized: Single-line payload for a line-oriented interpreter
        statements: Logical lines joined in the payload
        execution_time_seconds: Time taken for normalization
        source_path: File the fragment was read from (None for in-memory text)
    """
    normalized: str
    statements: List[str]
    execution_time_seconds: float
    source_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_path": str(self.source_path) if self.source_path else None,
            "normalized": self.normalized,
            "statements": self.statements,
            "statement_count": len(self.statements),
            "execution_time_seconds": self.execution_time_seconds,
        }


@dataclass
class LineIndent:
    """Current and estimated indentation of one source line."""
    line_number: int
    current: int
    estimated: int
    text: str

    @property
    def changed(self) -> bool:
        """Check if the estimate differs from the current indentation."""
        return self.current != self.estimated

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "line_number": self.line_number,
            "current": self.current,
            "estimated": self.estimated,
            "text": self.text,
        }


@dataclass
class IndentReport:
    """Indentation estimates for every line of a source file.

    Attributes:
        source_path: File that was analyzed
        tab_width: Tab width used for the estimates
        lines: One LineIndent per source line (1-based line numbers)
    """
    source_path: Path
    tab_width: int
    lines: List[LineIndent] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_path": str(self.source_path),
            "tab_width": self.tab_width,
            "lines": [line.to_dict() for line in self.lines],
            "summary": {
                "total_lines": len(self.lines),
                "lines_changed": sum(1 for line in self.lines if line.changed),
            },
        }


@dataclass
class HighlightResult:
    """Highlighted spans of a source file."""
    source_path: Path
    spans: List[Span] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        counts: Dict[str, int] = {}
        for span in self.spans:
            counts[span.category.value] = counts.get(span.category.value, 0) + 1
        return {
            "source_path": str(self.source_path),
            "spans": [span.to_dict() for span in self.spans],
            "category_counts": counts,
        }


def _read_source(source_path: Path, options: ProcessingOptions) -> str:
    """Read an Io source file, validating the path first."""
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {source_path}")

    if not source_path.is_file():
        raise FileNotFoundError(f"Source path is not a file: {source_path}")

    logger.debug(f"Reading source file: {source_path}")
    source = source_path.read_text(encoding="utf-8", errors="replace")
    if options.strip_whitespace:
        source = strip_trailing_whitespace(source)
    return source


def normalize_text(text: str, source_path: Optional[Path] = None) -> NormalizationResult:
    """Normalize an in-memory Io fragment.

    Args:
        text: Io source fragment
        source_path: Optional origin of the text, recorded in the result

    Returns:
        NormalizationResult with the payload and its statements
    """
    start_time = time.perf_counter()
    normalized = normalize(text)
    end_time = time.perf_counter()

    return NormalizationResult(
        normalized=normalized,
        statements=split_statements(normalized),
        execution_time_seconds=round(end_time - start_time, 4),
        source_path=source_path,
    )


def normalize_file(
    source_path: Path,
    options: Optional[ProcessingOptions] = None,
) -> NormalizationResult:
    """Normalize an Io source file into a single interpreter payload.

    Args:
        source_path: Path to the Io source file
        options: Processing options (uses defaults if not provided)

    Returns:
        NormalizationResult with the payload and its statements

    Raises:
        FileNotFoundError: If source file doesn't exist
        ProcessingError: If reading or normalization fails
    """
    if options is None:
        options = ProcessingOptions()

    try:
        source = _read_source(source_path, options)
        return normalize_text(source, source_path)
    except FileNotFoundError:
        raise  # Re-raise FileNotFoundError as-is
    except Exception as e:
        raise ProcessingError(f"Normalization failed: {e}") from e


def estimate_file_indentation(
    source_path: Path,
    options: Optional[ProcessingOptions] = None,
) -> IndentReport:
    """Estimate the indentation of every line in an Io source file.

    Each line is estimated from the lines above it only, the same way an
    editor indents a line as it is typed.

    Args:
        source_path: Path to the Io source file
        options: Processing options (uses defaults if not provided)

    Returns:
        IndentReport with one entry per source line

    Raises:
        FileNotFoundError: If source file doesn't exist
        ValueError: If the tab width is not a positive integer
        ProcessingError: If reading or estimation fails
    """
    if options is None:
        options = ProcessingOptions()

    tab_width = check_tab_width(options.tab_width)

    try:
        lines = _read_source(source_path, options).splitlines()
        report = IndentReport(source_path=source_path, tab_width=tab_width)
        for index, line in enumerate(lines):
            report.lines.append(
                LineIndent(
                    line_number=index + 1,
                    current=indentation_width(line, tab_width),
                    estimated=estimate_indent(PrecedingLines(lines, index), line, tab_width),
                    text=line,
                )
            )
        return report
    except FileNotFoundError:
        raise  # Re-raise FileNotFoundError as-is
    except Exception as e:
        raise ProcessingError(f"Indentation estimate failed: {e}") from e


def highlight_file(
    source_path: Path,
    options: Optional[ProcessingOptions] = None,
) -> HighlightResult:
    """Classify the highlighted spans of an Io source file.

    Args:
        source_path: Path to the Io source file
        options: Processing options (uses defaults if not provided)

    Returns:
        HighlightResult with spans sorted by offset

    Raises:
        FileNotFoundError: If source file doesn't exist
        ProcessingError: If reading or classification fails
    """
    if options is None:
        options = ProcessingOptions()

    try:
        source = _read_source(source_path, options)
        return HighlightResult(source_path=source_path, spans=highlight(source))
    except FileNotFoundError:
        raise  # Re-raise FileNotFoundError as-is
    except Exception as e:
        raise ProcessingError(f"Highlighting failed: {e}") from e
