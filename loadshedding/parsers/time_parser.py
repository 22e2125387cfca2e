from __future__ import annotations

import re
from datetime import datetime, time, timedelta, timezone

from loadshedding.core.constants import REFERENCE_DATE, SAST, TIME_OF_DAY_FORMAT
from loadshedding.parsers.errors import MalformedTimeOfDay, MalformedTimestamp

# RFC 3339 date-time without the offset part, which is always supplied by us.
# Seconds are optional because the feeds mostly publish "2024-06-01T18:00".
_LOCAL_DATETIME_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?",
    re.ASCII,
)
_TIME_OF_DAY_RE = re.compile(r"(?P<hour>[01]\d|2[0-3]):(?P<minute>[0-5]\d)", re.ASCII)


def parse_timestamp(raw: str, *, offset: timezone = SAST, field: str = "timestamp") -> datetime:
    """Parse a local date-time string and pin it to ``offset``.

    Raises :class:`MalformedTimestamp` when ``raw`` plus the offset is not a
    valid RFC 3339 date-time. A value that already carries an offset is
    rejected rather than converted.
    """
    match = _LOCAL_DATETIME_RE.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedTimestamp(
            f"{field} {raw!r} is not a local date-time (expected YYYY-MM-DDTHH:MM[:SS])",
            field=field,
            value=raw,
        )

    # Digits past microseconds are truncated, not rounded.
    fraction = match.group("fraction") or ""
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            int(fraction[:6].ljust(6, "0")) if fraction else 0,
            tzinfo=offset,
        )
    except ValueError as exc:
        raise MalformedTimestamp(
            f"{field} {raw!r} is out of range: {exc}",
            field=field,
            value=raw,
        ) from exc


def parse_time_of_day(raw: str, *, field: str = "time") -> time:
    match = _TIME_OF_DAY_RE.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedTimeOfDay(
            f"{field} {raw!r} is not a 24-hour HH:MM time",
            field=field,
            value=raw,
        )
    return time(int(match.group("hour")), int(match.group("minute")))


def anchor_time_of_day(value: time, *, next_day: bool = False, offset: timezone = SAST) -> datetime:
    day = REFERENCE_DATE + timedelta(days=1) if next_day else REFERENCE_DATE
    return datetime.combine(day, value, tzinfo=offset)


def format_time_of_day(value: time | datetime) -> str:
    return value.strftime(TIME_OF_DAY_FORMAT)
