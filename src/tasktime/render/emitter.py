"""Turn an aggregated forest into position-ordered annotation instructions."""

from __future__ import annotations

from tasktime.config import DEFAULT_HIGHLIGHT_STYLE, DEFAULT_LABEL_PREFIX, DEFAULT_LABEL_STYLE
from tasktime.logging import get_logger
from tasktime.models.annotation import Annotation, Highlight, Label
from tasktime.models.task import TaskForest
from tasktime.utils.durations import format_duration

logger = get_logger(__name__)


def _is_ordered(annotations: list[Annotation]) -> bool:
    return all(a.anchor <= b.anchor for a, b in zip(annotations, annotations[1:]))


def emit_annotations(
    forest: TaskForest,
    *,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
    label_style: str = DEFAULT_LABEL_STYLE,
    label_prefix: str = DEFAULT_LABEL_PREFIX,
) -> list[Annotation]:
    """Emit highlights and duration labels in document order.

    Each task contributes its highlight (if its line had a time range) followed by
    its label (if its duration is non-zero), then its children's annotations.
    Renderers require non-decreasing anchors; document order gives that for free,
    but ranges fed out of order are repaired with a stable sort.

    Args:
        forest: Forest whose durations have already been aggregated.
        highlight_style: Style payload for highlight instructions.
        label_style: Style payload for label instructions.
        label_prefix: Text placed before the formatted duration.

    Returns:
        Annotation list, non-decreasing by anchor offset.
    """

    annotations: list[Annotation] = []
    for index in forest.walk():
        node = forest.node(index)

        if node.mark_range is not None:
            annotations.append(
                Highlight(start=node.mark_range.start, end=node.mark_range.end, style=highlight_style)
            )

        duration = node.duration
        if duration is not None and not duration.is_zero:
            annotations.append(
                Label(
                    position=node.position,
                    text=label_prefix + format_duration(duration),
                    style=label_style,
                )
            )

    if not _is_ordered(annotations):
        logger.warning("Annotations out of document order; sorting %d instructions", len(annotations))
        annotations.sort(key=lambda a: a.anchor)
    return annotations
