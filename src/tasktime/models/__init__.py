"""Pydantic models used across the project."""

from __future__ import annotations

from tasktime.models.annotation import Annotation, AnnotationSet, Highlight, Label
from tasktime.models.duration import ZERO_DURATION, MarkRange, TimeDuration
from tasktime.models.task import LineDescriptor, TaskForest, TaskNode

__all__ = [
    "Annotation",
    "AnnotationSet",
    "Highlight",
    "Label",
    "LineDescriptor",
    "MarkRange",
    "TaskForest",
    "TaskNode",
    "TimeDuration",
    "ZERO_DURATION",
]
