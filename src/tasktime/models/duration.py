"""Duration and highlight-range value models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TimeDuration(BaseModel):
    """An elapsed time in normalized form (minutes never reach 60)."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)

    @property
    def is_zero(self) -> bool:
        return self.hours == 0 and self.minutes == 0


ZERO_DURATION = TimeDuration(hours=0, minutes=0)


class MarkRange(BaseModel):
    """Half-open `[start, end)` character range to highlight."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "MarkRange":
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is after end {self.end}")
        return self

    def shifted(self, offset: int) -> "MarkRange":
        """Return the same range moved by `offset` characters."""

        return MarkRange(start=self.start + offset, end=self.end + offset)
