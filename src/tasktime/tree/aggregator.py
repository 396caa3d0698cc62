"""Bottom-up duration roll-up."""

from __future__ import annotations

from tasktime.models.duration import ZERO_DURATION, TimeDuration
from tasktime.models.task import ROOT_INDEX, TaskForest
from tasktime.utils.durations import sum_durations


def _sum_children(forest: TaskForest, indices: list[int]) -> TimeDuration:
    total = ZERO_DURATION
    for index in indices:
        duration = forest.node(index).duration
        if duration is not None:
            total = sum_durations(total, duration)
    return total


def aggregate_durations(forest: TaskForest) -> TimeDuration:
    """Fill every missing node duration from its children, post-order.

    Nodes without a time range of their own get the sum of their children; a
    childless node without one gets zero. A parsed range is kept as is, but its
    subtree is still filled. Mutates the forest in place.

    Children are always appended after their parent, so walking the arena from the
    highest index down settles every child before its parent without recursion.

    Returns:
        The summed duration of the top-level tasks.
    """

    for index in range(len(forest.nodes) - 1, ROOT_INDEX, -1):
        node = forest.node(index)
        if node.duration is None:
            node.duration = _sum_children(forest, node.children)

    return _sum_children(forest, forest.top_level())
