"""Annotation emission and text rendering."""

from __future__ import annotations

from tasktime.render.emitter import emit_annotations

__all__ = ["emit_annotations"]
