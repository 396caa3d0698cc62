"""Line-level parsing."""

from __future__ import annotations

from tasktime.parsing.line_parser import ParsedLine, parse_line

__all__ = ["ParsedLine", "parse_line"]
