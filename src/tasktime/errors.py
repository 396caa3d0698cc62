"""Error types.

Parsing misses are not errors; they surface as `None`. These exceptions cover the
outer surfaces only.
"""

from __future__ import annotations

from pathlib import Path


class TaskTimeError(Exception):
    """Base class for tasktime errors."""


class OutlineReadError(TaskTimeError):
    """An outline file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read outline {str(path)!r}: {reason}")


class ConfigError(TaskTimeError):
    """A configured settings file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Settings file {str(path)!r} does not exist")
