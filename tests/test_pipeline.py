"""End-to-end tests for the rebuild pipeline."""

from __future__ import annotations

from tasktime.config import Settings
from tasktime.models.annotation import Highlight, Label
from tasktime.models.duration import TimeDuration
from tasktime.models.task import LineDescriptor
from tasktime.pipeline import build_annotations


def _descriptors() -> list[LineDescriptor]:
    rows = [(1, "09:00-10:00 A"), (2, "09:00-09:30 B"), (2, "child no time")]
    out = []
    offset = 0
    for level, text in rows:
        out.append(LineDescriptor(level=level, text=text, line_start=offset, line_end=offset + len(text)))
        offset += len(text) + 1
    return out


def test_end_to_end_scenario() -> None:
    """Parent range is kept, child ranges are labelled, the untimed child stays silent."""

    result = build_annotations([_descriptors()])

    highlights = [a for a in result.annotations if isinstance(a, Highlight)]
    labels = [a for a in result.annotations if isinstance(a, Label)]

    assert [(h.start, h.end) for h in highlights] == [(0, 11), (14, 25)]
    assert [(l.position, l.text) for l in labels] == [
        (13, " — ⏱️ 1 h 0 mins"),
        (27, " — ⏱️ 30 mins"),
    ]
    assert result.task_count == 3
    assert result.total == TimeDuration(hours=1, minutes=0)


def test_pipeline_is_idempotent() -> None:
    first = build_annotations([_descriptors()])
    second = build_annotations([_descriptors()])

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_settings_drive_payloads() -> None:
    settings = Settings(highlight_style="color:red;", label_prefix=" ~ ", label_style="")

    result = build_annotations([_descriptors()], settings=settings)

    assert result.annotations[0] == Highlight(start=0, end=11, style="color:red;")
    assert result.annotations[1] == Label(position=13, text=" ~ 1 h 0 mins", style="")


def test_empty_input() -> None:
    result = build_annotations([])

    assert result.annotations == []
    assert result.total.is_zero
    assert result.task_count == 0


def test_untimed_child_of_timed_parent_gets_label() -> None:
    rows = [(1, "09:00-12:00 A"), (2, "Project C"), (3, "10:00-10:10 D")]
    lines = []
    offset = 0
    for level, text in rows:
        lines.append(LineDescriptor(level=level, text=text, line_start=offset, line_end=offset + len(text)))
        offset += len(text) + 1

    result = build_annotations([lines])

    labels = [(a.position, a.text) for a in result.annotations if isinstance(a, Label)]
    assert labels == [
        (13, " — ⏱️ 3 h 0 mins"),
        (23, " — ⏱️ 10 mins"),
        (37, " — ⏱️ 10 mins"),
    ]
