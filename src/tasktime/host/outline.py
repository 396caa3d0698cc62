"""Minimal bullet-line scanner for plain-text outlines.

This is a stand-in for an editor host, not a Markdown parser: it recognizes lines
starting with `-`, `*`, `+`, `1.` or `1)` after optional indentation and derives
the depth from that indentation. Every other line is ignored and does not affect
nesting.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from tasktime.models.task import LineDescriptor

_LINE_RE = re.compile(r"[^\n]*\n?")
_BULLET_RE = re.compile(r"^(?P<indent>[ \t]*)(?:[-*+]|\d+[.)])(?:[ \t]|$)")

VisibleRange = tuple[int, int]


def _indent_depth(indent: str, indent_width: int) -> int:
    tabs = indent.count("\t")
    spaces = len(indent) - tabs
    return tabs + spaces // indent_width


def iter_list_lines(text: str, indent_width: int = 4) -> Iterator[LineDescriptor]:
    """Yield a descriptor for every bullet line of `text`, in document order.

    Only a line feed, optionally preceded by a carriage return, ends a line; other
    Unicode separators stay part of the line text.
    """

    for raw in _LINE_RE.finditer(text):
        if not raw.group():
            continue
        line = raw.group().rstrip("\n").removesuffix("\r")
        m = _BULLET_RE.match(line)
        if m:
            yield LineDescriptor(
                level=_indent_depth(m.group("indent"), indent_width) + 1,
                text=line,
                line_start=raw.start(),
                line_end=raw.start() + len(line),
            )


def scan_outline(
    text: str,
    visible_ranges: Sequence[VisibleRange] | None = None,
    indent_width: int = 4,
) -> list[list[LineDescriptor]]:
    """Split an outline into descriptor groups, one per visible range.

    Args:
        text: Whole document text.
        visible_ranges: `(start, end)` offsets; a line belongs to every range it
            overlaps. `None` means the whole document is visible.
        indent_width: Spaces per nesting level; a tab always counts as one level.

    Returns:
        Descriptor lists in the order the ranges were given.
    """

    lines = list(iter_list_lines(text, indent_width=indent_width))
    if visible_ranges is None:
        return [lines]
    return [
        [line for line in lines if line.line_start < end and line.line_end >= start]
        for start, end in visible_ranges
    ]
