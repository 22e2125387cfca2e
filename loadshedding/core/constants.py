from __future__ import annotations

from datetime import date, timedelta, timezone
from typing import Final

# South African Standard Time; the feeds publish wall-clock times in SAST only.
SAST: Final[timezone] = timezone(timedelta(hours=2), "SAST")

# Placeholder calendar day for monthly events. Only the time-of-day and the
# day offset from this date carry meaning.
REFERENCE_DATE: Final[date] = date(1970, 1, 1)

TIME_OF_DAY_FORMAT: Final[str] = "%H:%M"

MAX_DAY_OF_MONTH: Final[int] = 31
