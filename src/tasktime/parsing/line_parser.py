"""Time-range extraction from a single outline line.

Two independent patterns run over the line:

* the duration pattern takes the first two `HH:MM` tokens anywhere in the text;
* the highlight pattern anchors on the first `HH:MM` token and only yields a span
  when that token is directly followed by a dash and a second token.

So `"from 09:00 to 10:00"` gets a duration but no highlight.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tasktime.logging import get_logger
from tasktime.models.duration import MarkRange, TimeDuration
from tasktime.utils.durations import diff_times

logger = get_logger(__name__)

_DURATION_RE = re.compile(r"^.*?(?P<start>\d\d:\d\d).*?(?P<end>\d\d:\d\d)")
# Hyphen, en dash, em dash
_HIGHLIGHT_RE = re.compile(r"(?P<start>\d\d:\d\d)(?P<tail>\s*[-–—]\s*\d\d:\d\d)?")


@dataclass(frozen=True)
class ParsedLine:
    """What a line contributes on its own, in line-relative offsets."""

    duration: TimeDuration | None = None
    mark_range: MarkRange | None = None

    def shifted(self, offset: int) -> "ParsedLine":
        """Translate the highlight span into document offsets."""

        if self.mark_range is None:
            return self
        return ParsedLine(duration=self.duration, mark_range=self.mark_range.shifted(offset))


def line_duration(text: str) -> TimeDuration | None:
    m = _DURATION_RE.match(text)
    if not m:
        return None
    return diff_times(m.group("start"), m.group("end"))


def line_mark_range(text: str) -> MarkRange | None:
    m = _HIGHLIGHT_RE.search(text)
    if not m or m.group("tail") is None:
        return None
    start = m.start()
    return MarkRange(start=start, end=start + len(m.group("start")) + len(m.group("tail")))


def parse_line(text: str) -> ParsedLine:
    """Extract the duration and highlight span of one line.

    Args:
        text: Raw line text, bullet marker included.

    Returns:
        ParsedLine with either field set to `None` when nothing matched.
    """

    parsed = ParsedLine(duration=line_duration(text), mark_range=line_mark_range(text))
    if parsed.duration is not None and parsed.mark_range is None:
        logger.debug("parse_line: duration without highlight span in %r", text)
    return parsed
