"""Mapping from editor syntax-tree nodes to line descriptors.

Editors that expose a Markdown syntax tree tag list-item lines with names such as
`list-1`, `list-2`. Anything else is not part of the outline stream.
"""

from __future__ import annotations

import re

from tasktime.logging import get_logger
from tasktime.models.task import LineDescriptor

logger = get_logger(__name__)

_LIST_NODE_RE = re.compile(r"^list-(?P<depth>\d+)")


def parse_list_depth(node_name: str) -> int | None:
    """Return the list depth encoded in a node name, or `None` for non-list nodes."""

    m = _LIST_NODE_RE.match(node_name)
    if not m:
        return None
    return int(m.group("depth"))


def descriptor_from_node(node_name: str, text: str, start: int, end: int) -> LineDescriptor | None:
    """Build a descriptor for a list-item node, skipping anything unusable.

    Args:
        node_name: Syntax node name reported by the host.
        text: Document slice `[start, end)` covered by the node.
        start: Node start offset.
        end: Node end offset, where the duration label is anchored.

    Returns:
        LineDescriptor, or `None` when the node is not a list item or its depth is
        unusable.
    """

    depth = parse_list_depth(node_name)
    if depth is None:
        return None
    if depth < 1 or start > end:
        logger.debug("Skipping list node %r with depth=%d span=[%d, %d)", node_name, depth, start, end)
        return None
    return LineDescriptor(level=depth, text=text, line_start=start, line_end=end)
