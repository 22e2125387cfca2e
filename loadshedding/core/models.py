from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class RawShedding:
    """One-off shedding window as published upstream, times without an offset."""

    start: str
    finish: str
    stage: int
    source: str


@dataclass(frozen=True)
class Shedding:
    start: datetime
    finish: datetime
    stage: int
    source: str


@dataclass(frozen=True)
class RawMonthlyShedding:
    """Shedding that repeats on the same day every month, times as ``HH:MM``."""

    start_time: str
    finish_time: str
    stage: int
    day_of_month: int


@dataclass(frozen=True)
class MonthlyShedding:
    """Monthly shedding with clock times anchored to a placeholder date.

    ``start_time`` always falls on the reference day. ``finish_time`` falls on
    the following day when the window runs past midnight (22:00 to 00:30), so
    subtracting the two always gives the real length of the window. The dates
    themselves are not calendar dates and must not be shown to users.
    """

    start_time: datetime
    finish_time: datetime
    stage: int
    day_of_month: int
    crosses_midnight: bool

    @property
    def duration(self) -> timedelta:
        return self.finish_time - self.start_time


@dataclass(frozen=True)
class RawManualSchedule:
    changes: tuple[RawShedding, ...]
    historical_changes: tuple[RawShedding, ...] = ()


@dataclass(frozen=True)
class ManualSchedule:
    # usually in the future, but not always
    changes: tuple[Shedding, ...]
    # always in the past
    historical_changes: tuple[Shedding, ...]
