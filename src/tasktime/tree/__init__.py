"""Task tree reconstruction and duration roll-up."""

from __future__ import annotations

from tasktime.tree.aggregator import aggregate_durations
from tasktime.tree.builder import TreeBuilder, build_forest

__all__ = ["TreeBuilder", "aggregate_durations", "build_forest"]
