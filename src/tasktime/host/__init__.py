"""Adapters between host documents and the annotation pipeline."""

from __future__ import annotations

from tasktime.host.nodes import descriptor_from_node, parse_list_depth
from tasktime.host.outline import scan_outline
from tasktime.host.view import AnnotatedView, ViewUpdate

__all__ = [
    "AnnotatedView",
    "ViewUpdate",
    "descriptor_from_node",
    "parse_list_depth",
    "scan_outline",
]
