"""Annotation instructions handed to a rendering layer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from tasktime.models.duration import TimeDuration


class Highlight(BaseModel):
    """Styled range over existing text."""

    kind: Literal["highlight"] = "highlight"
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    style: str

    @property
    def anchor(self) -> int:
        return self.start


class Label(BaseModel):
    """Zero-width text insertion anchored at `position`.

    `side=1` places the label to the right of the character before `position`.
    """

    kind: Literal["label"] = "label"
    position: int = Field(ge=0)
    text: str
    style: str = ""
    side: int = 1

    @property
    def anchor(self) -> int:
        return self.position


Annotation = Annotated[Union[Highlight, Label], Field(discriminator="kind")]


class AnnotationSet(BaseModel):
    """Result of one full rebuild."""

    annotations: list[Annotation] = Field(default_factory=list)
    total: TimeDuration = Field(default_factory=TimeDuration)
    task_count: int = Field(default=0, ge=0)
