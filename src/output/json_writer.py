"""JSON output writer for Io tool results.

This module provides functionality to write normalization, indentation
and highlighting results to JSON format.
"""

import dataclasses
import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class JSONWriter:
    """Writes tool results to JSON format.

    Supports:
    - Pretty printing with configurable indentation
    - Output to file, string or stream
    - Result objects exposing to_dict(), dataclasses, enums and paths
    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
        sort_keys: bool = True,
    ):
        """Initialize the JSON writer.

        Args:
            pretty_print: Whether to format JSON with indentation
            indent: Number of spaces for indentation
            sort_keys: Whether to sort dictionary keys
        """
        self.pretty_print = pretty_print
        self.indent = indent if pretty_print else None
        self.sort_keys = sort_keys

    def write(self, data: Any, output_path: Optional[Path] = None) -> str:
        """Write results to JSON.

        Args:
            data: Result dictionary or result object
            output_path: Optional path to write file (if None, returns string)

        Returns:
            JSON string
        """
        json_str = json.dumps(
            self._to_data(data),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False,
            default=self._json_serializer,
        )

        if output_path:
            output_path.write_text(json_str, encoding="utf-8")

        return json_str

    def write_to_stream(self, data: Any, stream: TextIO) -> None:
        """Write results to a stream.

        Args:
            data: Result dictionary or result object
            stream: Output stream (file object)
        """
        json.dump(
            self._to_data(data),
            stream,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False,
            default=self._json_serializer,
        )

    def format_compact(self, data: Any) -> str:
        """Format data in compact single-line JSON."""
        return json.dumps(
            self._to_data(data),
            separators=(",", ":"),
            sort_keys=self.sort_keys,
            ensure_ascii=False,
            default=self._json_serializer,
        )

    def _to_data(self, data: Any) -> Any:
        if hasattr(data, "to_dict"):
            return data.to_dict()
        return data

    def _json_serializer(self, obj: Any) -> Any:
        """Custom JSON serializer for special types.

        Args:
            obj: Object to serialize

        Returns:
            JSON-serializable representation
        """
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, set):
            return sorted(list(obj))
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)

        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
