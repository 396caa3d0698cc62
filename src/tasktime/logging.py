"""Logging utilities.

Every log record carries the context of the rebuild it belongs to: a short build
id, the host event that triggered it and, when known, how many visible ranges it
covers. Outside a rebuild those fields read `-`.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
import uuid
from collections.abc import Iterator
from dataclasses import dataclass

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s build=%(build_id)s trigger=%(trigger)s ranges=%(ranges)s %(name)s: %(message)s"


@dataclass(frozen=True)
class RebuildContext:
    """Identity of one annotation rebuild."""

    build_id: str = "-"
    trigger: str = "-"
    ranges: int | None = None


_rebuild_var: contextvars.ContextVar[RebuildContext] = contextvars.ContextVar(
    "tasktime_rebuild", default=RebuildContext()
)


class _RebuildFilter(logging.Filter):
    """Copy the current rebuild context onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        ctx = _rebuild_var.get()
        record.build_id = ctx.build_id  # type: ignore[attr-defined]
        record.trigger = ctx.trigger  # type: ignore[attr-defined]
        record.ranges = "-" if ctx.ranges is None else ctx.ranges  # type: ignore[attr-defined]
        return True


_REBUILD_FILTER = _RebuildFilter()


def new_build_id() -> str:
    return uuid.uuid4().hex[:8]


def current_rebuild() -> RebuildContext:
    return _rebuild_var.get()


@contextlib.contextmanager
def build_context(
    *,
    trigger: str,
    build_id: str | None = None,
    ranges: int | None = None,
) -> Iterator[RebuildContext]:
    """Bind rebuild context for the duration of one rebuild.

    Args:
        trigger: Host event that caused the rebuild (`attach`, `doc`, `cli`, ...).
        build_id: Identifier to log; a fresh short id is generated when omitted.
        ranges: Number of visible ranges fed to the rebuild, if known.
    """

    ctx = RebuildContext(build_id=build_id or new_build_id(), trigger=trigger, ranges=ranges)
    token = _rebuild_var.set(ctx)
    try:
        yield ctx
    finally:
        _rebuild_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Safe to call repeatedly: the root logger keeps a single rich handler carrying a
    single rebuild filter, and only the level and format are refreshed.

    Args:
        level: Logging level name.
    """

    root = logging.getLogger()
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
        root.addHandler(handler)

    if _REBUILD_FILTER not in handler.filters:
        handler.addFilter(_REBUILD_FILTER)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
