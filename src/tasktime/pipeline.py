"""Full rebuild: descriptors to forest to aggregated durations to annotations.

Every call starts from scratch. Nothing is cached between calls, so the same input
always yields the same annotation set.
"""

from __future__ import annotations

from collections.abc import Iterable

from tasktime.config import Settings
from tasktime.logging import get_logger
from tasktime.models.annotation import AnnotationSet
from tasktime.models.task import LineDescriptor
from tasktime.render.emitter import emit_annotations
from tasktime.tree.aggregator import aggregate_durations
from tasktime.tree.builder import build_forest

logger = get_logger(__name__)


def build_annotations(
    ranges: Iterable[Iterable[LineDescriptor]],
    settings: Settings | None = None,
) -> AnnotationSet:
    """Run the whole pipeline over the visible ranges of one document.

    Args:
        ranges: Descriptor sequences, one per visible range, in document order.
        settings: Optional settings supplying annotation style payloads.

    Returns:
        AnnotationSet with the instructions, the top-level total and the task count.
    """

    forest = build_forest(ranges)
    total = aggregate_durations(forest)

    if settings is None:
        annotations = emit_annotations(forest)
    else:
        annotations = emit_annotations(
            forest,
            highlight_style=settings.highlight_style,
            label_style=settings.label_style,
            label_prefix=settings.label_prefix,
        )

    logger.debug("Rebuilt %d tasks into %d annotations", len(forest), len(annotations))
    return AnnotationSet(annotations=annotations, total=total, task_count=len(forest))
