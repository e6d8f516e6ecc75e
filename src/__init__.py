"""Io Source Tools - Normalization, indentation and highlighting for Io code.

Public API (see api.py):
    normalize_file: Normalize an Io source file into one interpreter line
    normalize_text: Normalize an in-memory Io fragment
    estimate_file_indentation: Estimate the indentation of every line
    highlight_file: Classify the highlighted spans of a source file
    ProcessingOptions: Configuration options for processing
    ProcessingError: Exception raised when processing fails

Core components:
    preprocessor.normalize: Fragment to single logical line
    indent.estimate_indent: One-step indentation nudge
    indent.continuation_indent: Indentation and comment prefix for a new line
    highlight.highlight: Precedence-ordered span classification
    repl.ReplBridge: Sends normalized code through an injected sender

Example:
    >>> from preprocessor import normalize
    >>> normalize("foo(\\n  1,\\n  2\\n)")
    'foo(1,2)'
"""

__version__ = "0.1.0"
