"""Derive "open now" from free-text business hours and an IANA timezone.

The hours text is a comma-separated list of segments, each one of:

``<Day>[-<Day>] closed``
    e.g. ``Sun closed`` or ``Sat–Sun closed``.

``<Day>[-<Day>] <H>[:MM]-<H>[:MM]``
    e.g. ``Mon-Fri 9-6`` or ``Sat 10:30–14``.  An end time at or before the
    start time runs past midnight (``Fri 22-2``).

Day names are three-letter English abbreviations, case-insensitive; ranges
use a hyphen or an en dash and wrap around the week (``Fri-Mon``).

:func:`get_open_now_status` returns ``None`` when it cannot tell (missing
input, unknown timezone, or no segment parses) so callers can distinguish
"unknown" from "closed".
"""

import logging
import re
from datetime import datetime, timezone as dt_timezone
from typing import List, NamedTuple, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from localed.models.parsed_view import OpenStatus

logger = logging.getLogger(__name__)

DAY_ORDER = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_MINUTES_PER_DAY = 24 * 60

_DAY = r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
_DASH = r"\s*[–-]\s*"

_CLOSED_RE = re.compile(rf"^{_DAY}(?:{_DASH}{_DAY})?\s+closed$", re.IGNORECASE)
_RANGE_RE = re.compile(
    rf"^{_DAY}(?:{_DASH}{_DAY})?\s+(\d{{1,2}})(?::(\d{{2}}))?{_DASH}(\d{{1,2}})(?::(\d{{2}}))?$",
    re.IGNORECASE,
)


class Segment(NamedTuple):
    days: Tuple[int, ...]
    closed: bool
    start_min: int = 0
    end_min: int = 0


def _day_to_num(day: str) -> int:
    return DAY_ORDER.index(day[:1].upper() + day[1:].lower())


def _expand_days(first: str, last: Optional[str]) -> Tuple[int, ...]:
    """Expand a day range circularly: ``Fri-Mon`` -> Fri, Sat, Sun, Mon."""
    start = _day_to_num(first)
    end = _day_to_num(last) if last else start
    days = [start]
    current = start
    while current != end:
        current = (current + 1) % 7
        days.append(current)
    return tuple(days)


def _to_minutes(hour: str, minute: Optional[str]) -> Optional[int]:
    h = int(hour)
    m = int(minute) if minute else 0
    if h > 23 or m > 59:
        return None
    return h * 60 + m


def parse_segment(segment: str) -> Optional[Segment]:
    """Parse one comma-separated segment, or return ``None`` if it does not match."""
    trimmed = segment.strip()
    if not trimmed:
        return None

    closed = _CLOSED_RE.match(trimmed)
    if closed:
        return Segment(days=_expand_days(closed.group(1), closed.group(2)), closed=True)

    match = _RANGE_RE.match(trimmed)
    if not match:
        return None

    start_min = _to_minutes(match.group(3), match.group(4))
    end_min = _to_minutes(match.group(5), match.group(6))
    if start_min is None or end_min is None:
        return None
    if end_min <= start_min:
        end_min += _MINUTES_PER_DAY

    return Segment(
        days=_expand_days(match.group(1), match.group(2)),
        closed=False,
        start_min=start_min,
        end_min=end_min,
    )


def parse_business_hours(hours_text: str) -> List[Segment]:
    """Return every parseable segment of *hours_text*, in order."""
    segments = (parse_segment(part) for part in hours_text.split(","))
    return [seg for seg in segments if seg is not None]


def _local_parts(tz_name: str, now: datetime) -> Optional[Tuple[int, int]]:
    """Return ``(weekday, minute_of_day)`` for *now* in *tz_name*; weekday 0 = Sunday."""
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("Unknown timezone %r – open status unavailable", tz_name)
        return None
    if now.tzinfo is None:
        now = now.replace(tzinfo=dt_timezone.utc)
    local = now.astimezone(tz)
    return (local.weekday() + 1) % 7, local.hour * 60 + local.minute


def get_open_now_status(
    tz_name: str,
    hours_text: str,
    now: Optional[datetime] = None,
) -> Optional[OpenStatus]:
    """Return whether the business is open at *now* (default: current time).

    Only segments naming today count.  A ``closed`` segment for today wins
    over any range for the same day, and days no segment mentions count as
    closed.  An overnight range is open from its start until midnight.
    """
    tz_name = (tz_name or "").strip()
    hours_text = (hours_text or "").strip()
    if not tz_name or not hours_text:
        return None

    segments = parse_business_hours(hours_text)
    if not segments:
        return None

    parts = _local_parts(tz_name, now or datetime.now(dt_timezone.utc))
    if parts is None:
        return None
    weekday, current_min = parts

    today = [seg for seg in segments if weekday in seg.days]
    if any(seg.closed for seg in today):
        return OpenStatus(open=False)
    if any(seg.start_min <= current_min < seg.end_min for seg in today):
        return OpenStatus(open=True)

    return OpenStatus(open=False)
