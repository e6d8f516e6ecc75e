"""Output module for writing tool results."""

from .json_writer import JSONWriter

__all__ = ["JSONWriter"]
