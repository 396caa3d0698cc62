"""Clock-time and duration arithmetic."""

from __future__ import annotations

from tasktime.models.duration import TimeDuration


def to_minutes(clock_time: str) -> int:
    """Convert an `HH:MM` clock time to minutes since midnight.

    No range checks are made; `"25:99"` yields `1599`.
    """

    hours, minutes = (int(part) for part in clock_time.split(":"))
    return hours * 60 + minutes


def from_minutes(total: int) -> TimeDuration:
    """Normalize a non-negative minute count to hours and minutes."""

    hours, minutes = divmod(total, 60)
    return TimeDuration(hours=hours, minutes=minutes)


def sum_durations(a: TimeDuration, b: TimeDuration) -> TimeDuration:
    return from_minutes((a.hours + b.hours) * 60 + a.minutes + b.minutes)


def diff_times(start: str, end: str) -> TimeDuration:
    """Elapsed time between two `HH:MM` clock times.

    The result is the absolute difference. Ranges that cross midnight are not
    wrapped: `23:30-00:30` gives 23 h 0 mins, not 1 h.
    """

    return from_minutes(abs(to_minutes(end) - to_minutes(start)))


def format_duration(duration: TimeDuration) -> str:
    """Render a duration as `"5 mins"` or `"2 h 0 mins"`."""

    minutes = f"{duration.minutes} mins"
    if duration.hours > 0:
        return f"{duration.hours} h {minutes}"
    return minutes
