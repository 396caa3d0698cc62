"""Rebuild the outline tree from a flat, depth-tagged line stream.

A cursor tracks the most recent node. For each new line the cursor walks up the
parent chain until it reaches a node with a strictly lower level; the new node is
attached there and becomes the cursor. The root has level 0, so the walk always
stops and every node gets a parent, whatever the depth jumps.
"""

from __future__ import annotations

from collections.abc import Iterable

from tasktime.logging import get_logger
from tasktime.models.task import ROOT_INDEX, LineDescriptor, TaskForest, TaskNode
from tasktime.parsing.line_parser import parse_line

logger = get_logger(__name__)


class TreeBuilder:
    """Incremental forest builder shared across the visible ranges of one rebuild."""

    def __init__(self) -> None:
        self._forest = TaskForest()
        self._cursor = ROOT_INDEX

    def add(self, line: LineDescriptor) -> int:
        """Attach one line and return the index of the new node."""

        parsed = parse_line(line.text).shifted(line.line_start)

        nodes = self._forest.nodes
        cursor = nodes[self._cursor]
        while not cursor.is_root and cursor.level >= line.level:
            self._cursor = cursor.parent if cursor.parent is not None else ROOT_INDEX
            cursor = nodes[self._cursor]

        node = TaskNode(
            level=line.level,
            position=line.line_end,
            mark_range=parsed.mark_range,
            duration=parsed.duration,
        )
        self._cursor = self._forest.add(node, parent=self._cursor)
        return self._cursor

    def add_range(self, lines: Iterable[LineDescriptor]) -> None:
        for line in lines:
            self.add(line)

    def finish(self) -> TaskForest:
        logger.debug("Built forest with %d tasks", len(self._forest))
        return self._forest


def build_forest(ranges: Iterable[Iterable[LineDescriptor]]) -> TaskForest:
    """Build one forest from the descriptors of every visible range, in order."""

    builder = TreeBuilder()
    for lines in ranges:
        builder.add_range(lines)
    return builder.finish()
