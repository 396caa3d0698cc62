"""Rebuild-on-trigger view over a document.

The view mirrors how an editor extension keeps its decorations: it builds once on
attach and rebuilds from scratch whenever the document or the viewport changes.
Each rebuild replaces the previous annotation set wholesale; there is no
incremental patching.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tasktime.config import Settings
from tasktime.host.outline import VisibleRange, scan_outline
from tasktime.logging import build_context, get_logger
from tasktime.models.annotation import AnnotationSet
from tasktime.pipeline import build_annotations

logger = get_logger(__name__)


@dataclass(frozen=True)
class ViewUpdate:
    """A host event carrying the current document state."""

    text: str
    visible_ranges: Sequence[VisibleRange] | None = None
    doc_changed: bool = False
    viewport_changed: bool = False


class AnnotatedView:
    """Holds the annotation set for the latest document state."""

    def __init__(
        self,
        text: str,
        visible_ranges: Sequence[VisibleRange] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self.rebuilds = 0
        self.annotations = self._build(text, visible_ranges, trigger="attach")

    def update(self, update: ViewUpdate) -> bool:
        """Rebuild if the event changed the document or viewport.

        Returns:
            True when a rebuild happened.
        """

        if not (update.doc_changed or update.viewport_changed):
            return False
        trigger = "doc" if update.doc_changed else "viewport"
        self.annotations = self._build(update.text, update.visible_ranges, trigger=trigger)
        return True

    def _build(
        self,
        text: str,
        visible_ranges: Sequence[VisibleRange] | None,
        *,
        trigger: str,
    ) -> AnnotationSet:
        ranges = None if visible_ranges is None else len(visible_ranges)
        with build_context(trigger=trigger, ranges=ranges):
            descriptors = scan_outline(text, visible_ranges, indent_width=self._settings.indent_width)
            result = build_annotations(descriptors, settings=self._settings)
            self.rebuilds += 1
            logger.debug("View rebuild #%d produced %d annotations", self.rebuilds, len(result.annotations))
        return result
