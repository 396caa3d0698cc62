"""Outline input and task tree models.

Line descriptors arrive from the host; task nodes are built from them. The tree is
stored as an arena: nodes sit in one list and refer to each other by index, so a
node never holds a live reference to its parent.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, model_validator

from tasktime.models.duration import MarkRange, TimeDuration

ROOT_INDEX = 0


class LineDescriptor(BaseModel):
    """One list-item line as reported by the host."""

    level: int = Field(ge=1)
    text: str
    line_start: int = Field(ge=0)
    line_end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "LineDescriptor":
        if self.line_start > self.line_end:
            raise ValueError(f"line_start {self.line_start} is after line_end {self.line_end}")
        return self


@dataclass
class TaskNode:
    """A single outline item.

    `duration` is set by parsing when the line carries a time range, otherwise by
    aggregation.
    """

    level: int
    position: int
    mark_range: MarkRange | None = None
    duration: TimeDuration | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.level == 0


@dataclass
class TaskForest:
    """Arena holding the synthetic root (index 0) and every task node."""

    nodes: list[TaskNode] = field(default_factory=lambda: [TaskNode(level=0, position=0)])

    @property
    def root(self) -> TaskNode:
        return self.nodes[ROOT_INDEX]

    def node(self, index: int) -> TaskNode:
        return self.nodes[index]

    def add(self, node: TaskNode, parent: int) -> int:
        """Append `node` as the last child of `parent` and return its index."""

        node.parent = parent
        self.nodes.append(node)
        index = len(self.nodes) - 1
        self.nodes[parent].children.append(index)
        return index

    def top_level(self) -> list[int]:
        return list(self.root.children)

    def walk(self, indices: list[int] | None = None) -> Iterator[int]:
        """Yield node indices depth-first, pre-order, skipping the root."""

        stack = list(reversed(self.root.children if indices is None else indices))
        while stack:
            index = stack.pop()
            yield index
            stack.extend(reversed(self.nodes[index].children))

    def __len__(self) -> int:
        return len(self.nodes) - 1
