"""Tests for bottom-up duration roll-up."""

from __future__ import annotations

from tasktime.models.duration import TimeDuration
from tasktime.models.task import LineDescriptor
from tasktime.tree.aggregator import aggregate_durations
from tasktime.tree.builder import build_forest


def _forest(rows: list[tuple[int, str]]):
    lines = []
    offset = 0
    for level, text in rows:
        lines.append(LineDescriptor(level=level, text=text, line_start=offset, line_end=offset + len(text)))
        offset += len(text) + 1
    return build_forest([lines])


def test_parent_without_range_sums_children() -> None:
    forest = _forest([(1, "Morning"), (2, "09:00-09:30 mail"), (2, "10:00-10:50 review")])

    total = aggregate_durations(forest)

    assert forest.node(1).duration == TimeDuration(hours=1, minutes=20)
    assert total == TimeDuration(hours=1, minutes=20)


def test_parsed_range_wins_over_children() -> None:
    """It should keep a parent's own range even when its children add up differently."""

    forest = _forest([(1, "09:00-10:00 A"), (2, "09:00-09:30 B"), (2, "child no time")])

    aggregate_durations(forest)

    assert forest.node(1).duration == TimeDuration(hours=1, minutes=0)
    assert forest.node(2).duration == TimeDuration(hours=0, minutes=30)
    assert forest.node(3).duration == TimeDuration(hours=0, minutes=0)


def test_recursive_roll_up_through_untimed_levels() -> None:
    forest = _forest(
        [
            (1, "Day"),
            (2, "Project"),
            (3, "08:15-09:00 design"),
            (3, "Meetings"),
            (4, "11:00-11:45 sync"),
            (1, "13:00-13:20 lunch walk"),
        ]
    )

    total = aggregate_durations(forest)

    assert forest.node(4).duration == TimeDuration(hours=0, minutes=45)
    assert forest.node(2).duration == TimeDuration(hours=1, minutes=30)
    assert forest.node(1).duration == TimeDuration(hours=1, minutes=30)
    assert total == TimeDuration(hours=1, minutes=50)


def test_every_node_has_duration_after_aggregation() -> None:
    forest = _forest([(1, "a"), (2, "b"), (3, "c"), (1, "d")])

    aggregate_durations(forest)

    assert all(forest.node(i).duration is not None for i in forest.walk())


def test_empty_forest_totals_zero() -> None:
    assert aggregate_durations(build_forest([])).is_zero


def test_untimed_node_under_timed_parent_is_rolled_up() -> None:
    """It should fill subtrees below a parsed range, not just the top of the tree."""

    forest = _forest([(1, "09:00-12:00 A"), (2, "Project C"), (3, "10:00-10:10 D")])

    total = aggregate_durations(forest)

    assert forest.node(1).duration == TimeDuration(hours=3, minutes=0)
    assert forest.node(2).duration == TimeDuration(hours=0, minutes=10)
    assert total == TimeDuration(hours=3, minutes=0)


def test_deeply_nested_outline_does_not_overflow() -> None:
    depth = 1500
    rows = [(level, f"step {level}") for level in range(1, depth + 1)]
    rows.append((depth + 1, "07:00-07:05 leaf"))
    forest = _forest(rows)

    total = aggregate_durations(forest)

    assert total == TimeDuration(hours=0, minutes=5)
    assert forest.node(1).duration == TimeDuration(hours=0, minutes=5)
