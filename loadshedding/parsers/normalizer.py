from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import timezone
from typing import Any, Generic, TypeVar

from loadshedding.core.constants import SAST
from loadshedding.core.models import (
    ManualSchedule,
    MonthlyShedding,
    RawManualSchedule,
    RawMonthlyShedding,
    RawShedding,
    Shedding,
)
from loadshedding.parsers.errors import ParseError
from loadshedding.parsers.time_parser import anchor_time_of_day, parse_time_of_day, parse_timestamp

_logger = logging.getLogger("loadshedding.normalize")

T = TypeVar("T")


@dataclass(frozen=True)
class Conversion(Generic[T]):
    """Outcome of a conversion: exactly one of ``value`` and ``error`` is set."""

    value: T | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _attempt(convert: Callable[[Any], T], raw: Any) -> Conversion[T]:
    try:
        return Conversion(value=convert(raw))
    except ParseError as exc:
        return Conversion(error=exc)


class ScheduleNormalizer:
    def __init__(self, offset: timezone = SAST) -> None:
        self.offset = offset

    def shedding(self, raw: RawShedding) -> Shedding:
        # finish <= start is passed through untouched; some feeds publish it.
        return Shedding(
            start=parse_timestamp(raw.start, offset=self.offset, field="start"),
            finish=parse_timestamp(raw.finish, offset=self.offset, field="finish"),
            stage=raw.stage,
            source=raw.source,
        )

    def monthly(self, raw: RawMonthlyShedding) -> MonthlyShedding:
        start = parse_time_of_day(raw.start_time, field="start_time")
        finish = parse_time_of_day(raw.finish_time, field="finish_time")
        crosses_midnight = finish < start

        return MonthlyShedding(
            start_time=anchor_time_of_day(start, offset=self.offset),
            finish_time=anchor_time_of_day(finish, next_day=crosses_midnight, offset=self.offset),
            stage=raw.stage,
            day_of_month=raw.day_of_month,
            crosses_midnight=crosses_midnight,
        )

    def schedule(self, raw: RawManualSchedule) -> ManualSchedule:
        changes = tuple(self.shedding(item) for item in raw.changes)
        historical_changes = tuple(self.shedding(item) for item in raw.historical_changes)
        _logger.debug(
            "Normalized %d changes and %d historical changes",
            len(changes),
            len(historical_changes),
        )
        return ManualSchedule(changes=changes, historical_changes=historical_changes)

    def monthly_many(self, raws: Iterable[RawMonthlyShedding]) -> tuple[MonthlyShedding, ...]:
        events = tuple(self.monthly(item) for item in raws)
        _logger.debug("Normalized %d monthly events", len(events))
        return events

    def try_schedule(self, raw: RawManualSchedule) -> Conversion[ManualSchedule]:
        return _attempt(self.schedule, raw)

    def try_monthly_many(
        self, raws: Iterable[RawMonthlyShedding]
    ) -> Conversion[tuple[MonthlyShedding, ...]]:
        return _attempt(self.monthly_many, raws)


_default = ScheduleNormalizer()


def normalize_shedding(raw: RawShedding) -> Shedding:
    return _default.shedding(raw)


def normalize_monthly_shedding(raw: RawMonthlyShedding) -> MonthlyShedding:
    return _default.monthly(raw)


def normalize_schedule(raw: RawManualSchedule) -> ManualSchedule:
    return _default.schedule(raw)


def try_normalize_schedule(raw: RawManualSchedule) -> Conversion[ManualSchedule]:
    return _default.try_schedule(raw)
