"""Tests for logging setup and rebuild context."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from tasktime.logging import RebuildContext, build_context, configure_logging, current_rebuild


@pytest.fixture()
def clean_root() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    for h in saved_handlers:
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging_is_idempotent(clean_root: logging.Logger) -> None:
    """Repeated calls keep one rich handler with one filter and refresh the level."""

    configure_logging("INFO")
    configure_logging("INFO")
    configure_logging("DEBUG")

    rich_handlers = [h for h in clean_root.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert len(rich_handlers[0].filters) == 1
    assert clean_root.level == logging.DEBUG


def test_build_context_binds_and_resets() -> None:
    assert current_rebuild() == RebuildContext()

    with build_context(trigger="doc", ranges=2) as ctx:
        assert current_rebuild() is ctx
        assert ctx.trigger == "doc"
        assert ctx.ranges == 2
        assert len(ctx.build_id) == 8

    assert current_rebuild() == RebuildContext()


def test_build_context_keeps_explicit_id() -> None:
    with build_context(trigger="cli", build_id="day.md") as ctx:
        assert ctx.build_id == "day.md"
        assert ctx.ranges is None


def test_records_carry_rebuild_fields(clean_root: logging.Logger) -> None:
    configure_logging("DEBUG")
    [handler] = [h for h in clean_root.handlers if isinstance(h, RichHandler)]
    record = logging.LogRecord("tasktime.test", logging.INFO, __file__, 1, "hello", None, None)

    with build_context(trigger="viewport", build_id="abc12345", ranges=3):
        handler.filter(record)

    assert record.build_id == "abc12345"  # type: ignore[attr-defined]
    assert record.trigger == "viewport"  # type: ignore[attr-defined]
    assert record.ranges == 3  # type: ignore[attr-defined]
