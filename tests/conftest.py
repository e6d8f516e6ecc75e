"""Pytest configuration: make the src/ packages importable."""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).parent.parent / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))
