"""FastAPI app exposing the annotation pipeline.

Every request is a full rebuild; the service keeps no per-document state.
"""

from __future__ import annotations

from fastapi import FastAPI
from pydantic import BaseModel, Field

from tasktime.config import Settings, load_settings
from tasktime.host.outline import scan_outline
from tasktime.logging import build_context, configure_logging, get_logger
from tasktime.models.annotation import AnnotationSet
from tasktime.models.task import LineDescriptor
from tasktime.pipeline import build_annotations


class DescriptorRequest(BaseModel):
    """Pre-extracted list lines, grouped by visible range."""

    ranges: list[list[LineDescriptor]] = Field(default_factory=list)


class OutlineRequest(BaseModel):
    """Raw outline text with optional visible ranges."""

    text: str
    visible_ranges: list[tuple[int, int]] | None = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    app = FastAPI(title="tasktime", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/settings")
    def host_settings() -> dict[str, str]:
        return {"user_setting": settings.user_setting}

    @app.post("/annotations")
    def annotations(req: DescriptorRequest) -> AnnotationSet:
        with build_context(trigger="api", ranges=len(req.ranges)):
            logger.info("Annotation rebuild requested")
            return build_annotations(req.ranges, settings=settings)

    @app.post("/annotations/outline")
    def annotations_outline(req: OutlineRequest) -> AnnotationSet:
        visible = req.visible_ranges
        with build_context(trigger="api", ranges=None if visible is None else len(visible)):
            logger.info("Outline rebuild requested", extra={"text_len": len(req.text)})
            descriptors = scan_outline(req.text, visible, indent_width=settings.indent_width)
            return build_annotations(descriptors, settings=settings)

    return app
