"""Tests for the JSON output writer."""

import io
import json
from pathlib import Path

from output import JSONWriter
from api import normalize_text
from highlight import HighlightCategory, Span


class TestJSONWriter:
    """Tests for JSONWriter."""

    def test_write_result_object(self):
        """Test that result objects are serialized through to_dict()."""
        data = json.loads(JSONWriter().write(normalize_text("a\nb")))
        assert data["normalized"] == "a; b"

    def test_write_to_file(self, tmp_path):
        """Test writing JSON to a file."""
        output_path = tmp_path / "result.json"
        json_str = JSONWriter().write({"b": 1, "a": 2}, output_path)
        assert output_path.read_text(encoding="utf-8") == json_str
        assert json_str.index('"a"') < json_str.index('"b"')

    def test_special_types(self):
        """Test serialization of enums, paths, sets and nested spans."""
        data = {
            "category": HighlightCategory.COMMENT,
            "path": Path("a/b.io"),
            "words": {"b", "a"},
            "span": Span(0, 1, "#", HighlightCategory.COMMENT),
        }
        parsed = json.loads(JSONWriter().write(data))
        assert parsed["category"] == "comment"
        assert parsed["path"] == str(Path("a/b.io"))
        assert parsed["words"] == ["a", "b"]
        assert parsed["span"]["category"] == "comment"

    def test_write_to_stream(self):
        """Test writing JSON to a stream."""
        stream = io.StringIO()
        JSONWriter(pretty_print=False).write_to_stream({"x": [1, 2]}, stream)
        assert stream.getvalue() == '{"x": [1, 2]}'

    def test_format_compact(self):
        """Test compact single-line output."""
        assert JSONWriter().format_compact({"x": [1, 2], "y": "ü"}) == '{"x":[1,2],"y":"ü"}'
